"""
MQTT number: a numeric value Home Assistant can set through a command topic.
"""
from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field, field_serializer

from hadiscovery.device_classes import NumberDeviceClass
from hadiscovery.ha.common import ComponentKind, EntityConfig, Qos
from hadiscovery.units import Unit, render_unit


class DisplayMode(str, Enum):
    AUTO = "auto"
    BOX = "box"
    SLIDER = "slider"


class Number(EntityConfig):
    component: ClassVar[ComponentKind] = ComponentKind.NUMBER

    command_topic: str = Field(default="", serialization_alias="cmd_t")
    command_template: Optional[str] = Field(default=None, serialization_alias="cmd_tpl")
    state_topic: Optional[str] = Field(default=None, serialization_alias="stat_t")
    value_template: Optional[str] = Field(default=None, serialization_alias="val_tpl")
    optimistic: Optional[bool] = Field(default=None, serialization_alias="opt")
    retain: Optional[bool] = Field(default=None, serialization_alias="ret")
    qos: Optional[Qos] = None
    device_class: Optional[NumberDeviceClass] = Field(default=None, serialization_alias="dev_cla")
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    mode: Optional[DisplayMode] = None
    # Payload received on the state topic that resets the value to unknown
    payload_reset: Optional[str] = Field(default=None, serialization_alias="pl_rst")
    unit_of_measurement: Optional[Unit] = Field(default=None, serialization_alias="unit_of_meas")

    @field_serializer("unit_of_measurement")
    def _unit_token(self, unit: Optional[Unit]) -> Optional[str]:
        return render_unit(unit) if unit is not None else None

    def with_command_topic(self, command_topic: str) -> "Number":
        return self._refine(command_topic=command_topic)

    def with_command_template(self, command_template: str) -> "Number":
        return self._refine(command_template=command_template)

    def with_state_topic(self, state_topic: str) -> "Number":
        return self._refine(state_topic=state_topic)

    def with_value_template(self, value_template: str) -> "Number":
        return self._refine(value_template=value_template)

    def with_optimistic(self, optimistic: bool) -> "Number":
        return self._refine(optimistic=optimistic)

    def with_retain(self, retain: bool) -> "Number":
        return self._refine(retain=retain)

    def with_qos(self, qos: Qos) -> "Number":
        return self._refine(qos=qos)

    def with_device_class(self, device_class: NumberDeviceClass) -> "Number":
        return self._refine(device_class=device_class)

    def with_min(self, minimum: float) -> "Number":
        return self._refine(min=minimum)

    def with_max(self, maximum: float) -> "Number":
        return self._refine(max=maximum)

    def with_step(self, step: float) -> "Number":
        return self._refine(step=step)

    def with_mode(self, mode: DisplayMode) -> "Number":
        return self._refine(mode=mode)

    def with_payload_reset(self, payload_reset: str) -> "Number":
        return self._refine(payload_reset=payload_reset)

    def with_unit_of_measurement(self, unit_of_measurement: Unit) -> "Number":
        return self._refine(unit_of_measurement=unit_of_measurement)
