"""
The Entity sum type: exactly one entity configuration of any supported kind.
"""
from typing import Dict, Optional, Type, Union

from pydantic import BaseModel, ConfigDict

from hadiscovery.ha.binary_sensor import BinarySensor
from hadiscovery.ha.camera import Camera
from hadiscovery.ha.common import ComponentKind, EntityConfig
from hadiscovery.ha.device_trigger import DeviceTrigger
from hadiscovery.ha.number import Number
from hadiscovery.ha.sensor import Sensor
from hadiscovery.ha.switch import Switch
from hadiscovery.ha.tag import Tag

EntityVariant = Union[Sensor, BinarySensor, Number, Switch, Camera, Tag, DeviceTrigger]

# Configuration model for each component token
COMPONENT_MODELS: Dict[ComponentKind, Type[EntityConfig]] = {
    model.component: model
    for model in (Sensor, BinarySensor, Number, Switch, Camera, Tag, DeviceTrigger)
}


class Entity(BaseModel):
    """
    Wraps one entity configuration so heterogeneous kinds can be handled
    uniformly, e.g. kept in a single list of things to publish.
    """

    model_config = ConfigDict(frozen=True)

    config: EntityVariant

    @property
    def component(self) -> ComponentKind:
        return self.config.component

    @property
    def unique_id(self) -> Optional[str]:
        return self.config.unique_id
