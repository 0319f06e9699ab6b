"""
MQTT device trigger, published under the 'device_automation' component.

A trigger fires when a message (optionally matching `payload`) arrives on
`topic`. Type and subtype are shown in the automation editor, e.g. type
'button_short_press' with subtype 'button_1'; unsupported values render as
'<subtype> <type>'.
"""
from typing import ClassVar, Optional

from pydantic import Field

from hadiscovery.ha.common import ComponentKind, EntityConfig, Qos

AUTOMATION_TYPE_TRIGGER = "trigger"


class DeviceTrigger(EntityConfig):
    component: ClassVar[ComponentKind] = ComponentKind.DEVICE_AUTOMATION

    # Home Assistant only accepts 'trigger'
    automation_type: str = Field(default=AUTOMATION_TYPE_TRIGGER, serialization_alias="atype")
    topic: str = Field(default="", serialization_alias="t")
    type: str = ""
    subtype: str = Field(default="", serialization_alias="stype")
    payload: Optional[str] = Field(default=None, serialization_alias="pl")
    qos: Optional[Qos] = None
    value_template: Optional[str] = Field(default=None, serialization_alias="val_tpl")

    def with_topic(self, topic: str) -> "DeviceTrigger":
        return self._refine(topic=topic)

    def with_type(self, trigger_type: str) -> "DeviceTrigger":
        return self._refine(type=trigger_type)

    def with_subtype(self, subtype: str) -> "DeviceTrigger":
        return self._refine(subtype=subtype)

    def with_payload(self, payload: str) -> "DeviceTrigger":
        return self._refine(payload=payload)

    def with_qos(self, qos: Qos) -> "DeviceTrigger":
        return self._refine(qos=qos)

    def with_value_template(self, value_template: str) -> "DeviceTrigger":
        return self._refine(value_template=value_template)
