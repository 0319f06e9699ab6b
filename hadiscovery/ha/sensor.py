"""
MQTT sensor: a numeric or textual reading published on a state topic.
"""
from typing import ClassVar, Optional

from pydantic import Field, field_serializer

from hadiscovery.device_classes import SensorDeviceClass
from hadiscovery.ha.common import ComponentKind, EntityConfig, SensorStateClass
from hadiscovery.units import Unit, render_unit


class Sensor(EntityConfig):
    """
    If device_class, state_class, unit_of_measurement or
    suggested_display_precision is set and a numeric value is expected, an
    empty state payload is ignored and 'null' sets the sensor to unknown.
    """

    component: ClassVar[ComponentKind] = ComponentKind.SENSOR

    state_topic: str = Field(default="", serialization_alias="stat_t")
    value_template: Optional[str] = Field(default=None, serialization_alias="val_tpl")
    device_class: Optional[SensorDeviceClass] = Field(default=None, serialization_alias="dev_cla")
    # Send update events even if the value has not changed
    force_update: Optional[bool] = Field(default=None, serialization_alias="frc_upd")
    last_reset_value_template: Optional[str] = Field(default=None, serialization_alias="lrst_val_tpl")
    suggested_display_precision: Optional[int] = Field(default=None, serialization_alias="sug_dsp_prc")
    state_class: Optional[SensorStateClass] = Field(default=None, serialization_alias="stat_cla")
    unit_of_measurement: Optional[Unit] = Field(default=None, serialization_alias="unit_of_meas")

    @field_serializer("unit_of_measurement")
    def _unit_token(self, unit: Optional[Unit]) -> Optional[str]:
        return render_unit(unit) if unit is not None else None

    def with_state_topic(self, state_topic: str) -> "Sensor":
        return self._refine(state_topic=state_topic)

    def with_value_template(self, value_template: str) -> "Sensor":
        """Template extracting the value; on template errors the current state is kept."""
        return self._refine(value_template=value_template)

    def with_device_class(self, device_class: SensorDeviceClass) -> "Sensor":
        return self._refine(device_class=device_class)

    def with_force_update(self, force_update: bool) -> "Sensor":
        return self._refine(force_update=force_update)

    def with_last_reset_value_template(self, last_reset_value_template: str) -> "Sensor":
        return self._refine(last_reset_value_template=last_reset_value_template)

    def with_suggested_display_precision(self, suggested_display_precision: int) -> "Sensor":
        return self._refine(suggested_display_precision=suggested_display_precision)

    def with_state_class(self, state_class: SensorStateClass) -> "Sensor":
        return self._refine(state_class=state_class)

    def with_unit_of_measurement(self, unit_of_measurement: Unit) -> "Sensor":
        return self._refine(unit_of_measurement=unit_of_measurement)
