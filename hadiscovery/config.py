from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from hadiscovery.ha.common import ComponentKind, Device, Origin
from hadiscovery.ha.discovery import DISCOVERY_PREFIX
from hadiscovery.ha.entity import COMPONENT_MODELS, Entity

class MqttConfig(BaseModel):
    host: str
    port: int = 1883
    username: Optional[str] = None
    password: Optional[str] = None
    client_id: str = "ha-discovery"
    keepalive: int = Field(default=30, ge=5)

class DiscoveryConfig(BaseModel):
    prefix: str = DISCOVERY_PREFIX  # trailing "/" allowed

class LoggingConfig(BaseModel):
    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ha_debug: bool = False  # Enable debug logging for discovery publishing


class EntitySpec(BaseModel):
    """
    One entity declared in config.yaml.

    `config` uses the readable field names of the matching configuration
    model (state_topic, unique_id, device_class, ...), not the abbreviated
    wire keys.
    """
    component: ComponentKind
    config: Dict[str, Any] = Field(default_factory=dict)

    def to_entity(self, origin: Optional[Origin] = None, device: Optional[Device] = None) -> Entity:
        """Validate into the configuration model for `component`; origin/device fill in when not declared."""
        data = dict(self.config)
        if origin is not None and "origin" not in data:
            data["origin"] = origin
        if device is not None and "device" not in data:
            data["device"] = device
        model = COMPONENT_MODELS[self.component]
        return model.model_validate(data).into_entity()


class HubConfig(BaseModel):
    mqtt: MqttConfig
    discovery: DiscoveryConfig = DiscoveryConfig()
    logging: LoggingConfig = LoggingConfig()
    # Defaults applied to every declared entity
    origin: Origin = Origin(name="hadiscovery")
    device: Optional[Device] = None
    entities: List[EntitySpec] = Field(default_factory=list)

    def build_entities(self) -> List[Entity]:
        return [spec.to_entity(self.origin, self.device) for spec in self.entities]
