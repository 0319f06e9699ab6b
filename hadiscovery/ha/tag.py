"""
MQTT tag scanner: each message on the topic is a scanned tag (RFID, NFC).
The value template must return the tag ID.
"""
from typing import ClassVar, Optional

from pydantic import Field

from hadiscovery.ha.common import ComponentKind, EntityConfig


class Tag(EntityConfig):
    component: ClassVar[ComponentKind] = ComponentKind.TAG

    topic: str = Field(default="", serialization_alias="t")
    value_template: Optional[str] = Field(default=None, serialization_alias="val_tpl")

    def with_topic(self, topic: str) -> "Tag":
        return self._refine(topic=topic)

    def with_value_template(self, value_template: str) -> "Tag":
        return self._refine(value_template=value_template)
