"""
MQTT camera: displays images received on a topic.
"""
from typing import ClassVar, Optional

from pydantic import Field

from hadiscovery.ha.common import ComponentKind, EntityConfig


class Camera(EntityConfig):
    component: ClassVar[ComponentKind] = ComponentKind.CAMERA

    topic: str = Field(default="", serialization_alias="t")
    # An explicit empty string disables payload decoding and is rendered as ""
    encoding: Optional[str] = Field(default=None, serialization_alias="e")
    entity_picture: Optional[str] = Field(default=None, serialization_alias="ent_pic")
    # "b64" enables base64 decoding; otherwise the payload must be raw image data
    image_encoding: Optional[str] = Field(default=None, serialization_alias="img_e")

    def with_topic(self, topic: str) -> "Camera":
        return self._refine(topic=topic)

    def with_encoding(self, encoding: str) -> "Camera":
        return self._refine(encoding=encoding)

    def with_entity_picture(self, entity_picture: str) -> "Camera":
        return self._refine(entity_picture=entity_picture)

    def with_image_encoding(self, image_encoding: str) -> "Camera":
        return self._refine(image_encoding=image_encoding)
