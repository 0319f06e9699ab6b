"""
MQTT binary sensor: a sensor that only reports one of two states
(open/closed, on/off, detected/clear).
"""
from typing import ClassVar, Optional

from pydantic import Field

from hadiscovery.device_classes import BinarySensorDeviceClass
from hadiscovery.ha.common import ComponentKind, EntityConfig


class BinarySensor(EntityConfig):
    component: ClassVar[ComponentKind] = ComponentKind.BINARY_SENSOR

    state_topic: str = Field(default="", serialization_alias="stat_t")
    value_template: Optional[str] = Field(default=None, serialization_alias="val_tpl")
    device_class: Optional[BinarySensorDeviceClass] = Field(default=None, serialization_alias="dev_cla")
    force_update: Optional[bool] = Field(default=None, serialization_alias="frc_upd")
    # Seconds after an 'on' update before the state falls back to 'off' (PIR style sensors)
    off_delay: Optional[int] = Field(default=None, serialization_alias="off_dly")
    # Home Assistant defaults: "OFF" / "ON"
    payload_off: Optional[str] = Field(default=None, serialization_alias="pl_off")
    payload_on: Optional[str] = Field(default=None, serialization_alias="pl_on")

    def with_state_topic(self, state_topic: str) -> "BinarySensor":
        return self._refine(state_topic=state_topic)

    def with_value_template(self, value_template: str) -> "BinarySensor":
        return self._refine(value_template=value_template)

    def with_device_class(self, device_class: BinarySensorDeviceClass) -> "BinarySensor":
        return self._refine(device_class=device_class)

    def with_force_update(self, force_update: bool) -> "BinarySensor":
        return self._refine(force_update=force_update)

    def with_off_delay(self, off_delay: int) -> "BinarySensor":
        return self._refine(off_delay=off_delay)

    def with_payload_off(self, payload_off: str) -> "BinarySensor":
        return self._refine(payload_off=payload_off)

    def with_payload_on(self, payload_on: str) -> "BinarySensor":
        return self._refine(payload_on=payload_on)
