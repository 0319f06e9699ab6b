"""
MQTT switch: an on/off control driven through a command topic, optionally
reporting its real state on a state topic.
"""
from typing import ClassVar, Optional

from pydantic import Field

from hadiscovery.device_classes import SwitchDeviceClass
from hadiscovery.ha.common import ComponentKind, EntityConfig, Qos


class Switch(EntityConfig):
    component: ClassVar[ComponentKind] = ComponentKind.SWITCH

    command_topic: str = Field(default="", serialization_alias="cmd_t")
    command_template: Optional[str] = Field(default=None, serialization_alias="cmd_tpl")
    device_class: Optional[SwitchDeviceClass] = Field(default=None, serialization_alias="dev_cla")
    encoding: Optional[str] = Field(default=None, serialization_alias="e")
    entity_picture: Optional[str] = Field(default=None, serialization_alias="ent_pic")
    # Without a state topic the switch is optimistic by default
    optimistic: Optional[bool] = Field(default=None, serialization_alias="opt")
    payload_off: Optional[str] = Field(default=None, serialization_alias="pl_off")
    payload_on: Optional[str] = Field(default=None, serialization_alias="pl_on")
    qos: Optional[Qos] = None
    retain: Optional[bool] = Field(default=None, serialization_alias="ret")
    state_off: Optional[str] = Field(default=None, serialization_alias="stat_off")
    state_on: Optional[str] = Field(default=None, serialization_alias="stat_on")
    state_topic: Optional[str] = Field(default=None, serialization_alias="stat_t")
    value_template: Optional[str] = Field(default=None, serialization_alias="val_tpl")

    def with_command_topic(self, command_topic: str) -> "Switch":
        return self._refine(command_topic=command_topic)

    def with_command_template(self, command_template: str) -> "Switch":
        return self._refine(command_template=command_template)

    def with_device_class(self, device_class: SwitchDeviceClass) -> "Switch":
        return self._refine(device_class=device_class)

    def with_encoding(self, encoding: str) -> "Switch":
        return self._refine(encoding=encoding)

    def with_entity_picture(self, entity_picture: str) -> "Switch":
        return self._refine(entity_picture=entity_picture)

    def with_optimistic(self, optimistic: bool) -> "Switch":
        return self._refine(optimistic=optimistic)

    def with_payload_off(self, payload_off: str) -> "Switch":
        return self._refine(payload_off=payload_off)

    def with_payload_on(self, payload_on: str) -> "Switch":
        return self._refine(payload_on=payload_on)

    def with_qos(self, qos: Qos) -> "Switch":
        return self._refine(qos=qos)

    def with_retain(self, retain: bool) -> "Switch":
        return self._refine(retain=retain)

    def with_state_off(self, state_off: str) -> "Switch":
        return self._refine(state_off=state_off)

    def with_state_on(self, state_on: str) -> "Switch":
        return self._refine(state_on=state_on)

    def with_state_topic(self, state_topic: str) -> "Switch":
        return self._refine(state_topic=state_topic)

    def with_value_template(self, value_template: str) -> "Switch":
        return self._refine(value_template=value_template)
