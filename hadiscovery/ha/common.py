"""
Value types shared by every Home Assistant discovery document.

All models are frozen pydantic models. Python field names are the readable
names used when building configurations (and in YAML); the abbreviated
Home Assistant keys are declared as serialization aliases and only appear
in the rendered document. Absent optional fields are never rendered.
"""
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator


_M = TypeVar("_M", bound="DiscoveryModel")


class ComponentKind(str, Enum):
    """MQTT integration tokens used as the <component> level of discovery topics."""

    SENSOR = "sensor"
    BINARY_SENSOR = "binary_sensor"
    NUMBER = "number"
    SWITCH = "switch"
    CAMERA = "camera"
    TAG = "tag"
    DEVICE_AUTOMATION = "device_automation"


class EntityCategory(str, Enum):
    """Classification of a non-primary entity."""

    # The entity changes the configuration of a device (e.g. a backlight switch).
    CONFIG = "config"
    # The entity exposes a diagnostic value but cannot change it (e.g. RSSI).
    DIAGNOSTIC = "diagnostic"


class Qos(str, Enum):
    """Maximum QoS Home Assistant uses for the entity's topics."""

    AT_MOST_ONCE = "0"
    AT_LEAST_ONCE = "1"
    EXACTLY_ONCE = "2"


class SensorStateClass(str, Enum):
    MEASUREMENT = "measurement"
    TOTAL = "total"
    TOTAL_INCREASING = "total_increasing"


class AvailabilityMode(str, Enum):
    """How the payloads of several availability topics are combined."""

    # Available only when every topic reported payload_available.
    ALL = "all"
    # Available when at least one topic reported payload_available.
    ANY = "any"
    # The last message received on any topic decides.
    LATEST = "latest"


class DiscoveryModel(BaseModel):
    """Base for discovery value types: immutable, refined by copying."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def _refine(self: _M, **changes: Any) -> _M:
        return self.model_copy(update=changes)

    def as_config(self) -> Dict[str, Any]:
        """Render to the abbreviated JSON-compatible form, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Origin(DiscoveryModel):
    """
    Information about the application publishing the discovery document.
    Home Assistant logs it when an entity is discovered or updated.
    """

    name: str = ""
    software_version: Optional[str] = Field(default=None, serialization_alias="sw")
    support_url: Optional[str] = None

    def with_name(self, name: str) -> "Origin":
        return self._refine(name=name)

    def with_software_version(self, software_version: str) -> "Origin":
        return self._refine(software_version=software_version)

    def with_support_url(self, support_url: str) -> "Origin":
        return self._refine(support_url=support_url)


class DeviceConnection(DiscoveryModel):
    """
    A `[connection_type, identifier]` pair, for example the MAC address of a
    network interface: `["mac", "02:5b:26:a8:dc:12"]`.
    """

    connection_type: str
    identifier: str

    @classmethod
    def mac(cls, mac_address: str) -> "DeviceConnection":
        return cls(connection_type="mac", identifier=mac_address)

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        # YAML and JSON carry connections as two-element lists
        if isinstance(data, (list, tuple)) and len(data) == 2:
            return {"connection_type": data[0], "identifier": data[1]}
        return data

    @model_serializer
    def _as_pair(self) -> List[str]:
        return [self.connection_type, self.identifier]


class Device(DiscoveryModel):
    """
    The physical device an entity belongs to, used to group entities in the
    Home Assistant device registry.

    Only meaningful together with an entity unique_id. At least one of
    identifiers or connections must be given so the device is addressable;
    this is the caller's responsibility and is not checked here.
    """

    name: Optional[str] = None
    identifiers: Tuple[str, ...] = Field(default=(), serialization_alias="ids")
    connections: Tuple[DeviceConnection, ...] = Field(default=(), serialization_alias="cns")
    configuration_url: Optional[str] = Field(default=None, serialization_alias="cu")
    manufacturer: Optional[str] = Field(default=None, serialization_alias="mf")
    model: Optional[str] = Field(default=None, serialization_alias="mdl")
    suggested_area: Optional[str] = Field(default=None, serialization_alias="sa")
    software_version: Optional[str] = Field(default=None, serialization_alias="sw")
    hardware_version: Optional[str] = Field(default=None, serialization_alias="hw")
    serial_number: Optional[str] = Field(default=None, serialization_alias="sn")
    # Identifier of the hub or parent device routing this device's messages
    via_device: Optional[str] = None

    @model_serializer(mode="wrap")
    def _omit_empty_lists(self, handler) -> Dict[str, Any]:
        data = handler(self)
        for key in ("ids", "cns", "identifiers", "connections"):
            if key in data and not data[key]:
                del data[key]
        return data

    def with_name(self, name: str) -> "Device":
        return self._refine(name=name)

    def add_identifier(self, identifier: str) -> "Device":
        """Append an ID that uniquely identifies the device, e.g. a serial number."""
        return self._refine(identifiers=self.identifiers + (identifier,))

    def add_connection(self, connection: DeviceConnection) -> "Device":
        return self._refine(connections=self.connections + (connection,))

    def with_configuration_url(self, configuration_url: str) -> "Device":
        """Link to the device's management page (http://, https:// or homeassistant://)."""
        return self._refine(configuration_url=configuration_url)

    def with_manufacturer(self, manufacturer: str) -> "Device":
        return self._refine(manufacturer=manufacturer)

    def with_model(self, model: str) -> "Device":
        return self._refine(model=model)

    def with_suggested_area(self, suggested_area: str) -> "Device":
        return self._refine(suggested_area=suggested_area)

    def with_software_version(self, software_version: str) -> "Device":
        return self._refine(software_version=software_version)

    def with_hardware_version(self, hardware_version: str) -> "Device":
        return self._refine(hardware_version=hardware_version)

    def with_serial_number(self, serial_number: str) -> "Device":
        return self._refine(serial_number=serial_number)

    def with_via_device(self, via_device: str) -> "Device":
        return self._refine(via_device=via_device)


class AvailabilityCheck(DiscoveryModel):
    """One availability topic and how to read it."""

    topic: str = Field(default="", serialization_alias="t")
    # Home Assistant defaults: "online" / "offline"
    payload_available: Optional[str] = Field(default=None, serialization_alias="pl_avail")
    payload_not_available: Optional[str] = Field(default=None, serialization_alias="pl_not_avail")
    value_template: Optional[str] = Field(default=None, serialization_alias="val_tpl")

    def with_payload_available(self, payload_available: str) -> "AvailabilityCheck":
        return self._refine(payload_available=payload_available)

    def with_payload_not_available(self, payload_not_available: str) -> "AvailabilityCheck":
        return self._refine(payload_not_available=payload_not_available)

    def with_value_template(self, value_template: str) -> "AvailabilityCheck":
        """Template extracting the availability value compared against the payloads."""
        return self._refine(value_template=value_template)


class Availability(DiscoveryModel):
    """
    Defines how Home Assistant decides whether an entity is available.

    Rendered flattened into the entity document as 'avty_mode', 'avty' and
    'exp_aft'. An entity without an Availability is always available.
    """

    mode: AvailabilityMode = Field(default=AvailabilityMode.ALL, serialization_alias="avty_mode")
    checks: Tuple[AvailabilityCheck, ...] = Field(default=(), serialization_alias="avty")
    # Seconds after which the state becomes unavailable if not refreshed
    expire_after: Optional[int] = Field(default=None, serialization_alias="exp_aft")

    @classmethod
    def single_topic(cls, topic: str) -> "Availability":
        """A single topic using the default 'online' / 'offline' payloads."""
        return cls.single(AvailabilityCheck(topic=topic))

    @classmethod
    def single(cls, check: AvailabilityCheck) -> "Availability":
        return cls(mode=AvailabilityMode.ALL, checks=(check,))

    @classmethod
    def all_of(cls, checks: List[AvailabilityCheck]) -> "Availability":
        return cls(mode=AvailabilityMode.ALL, checks=tuple(checks))

    @classmethod
    def any_of(cls, checks: List[AvailabilityCheck]) -> "Availability":
        return cls(mode=AvailabilityMode.ANY, checks=tuple(checks))

    @classmethod
    def latest_of(cls, checks: List[AvailabilityCheck]) -> "Availability":
        return cls(mode=AvailabilityMode.LATEST, checks=tuple(checks))

    def with_expire_after(self, expire_after: int) -> "Availability":
        return self._refine(expire_after=expire_after)


_E = TypeVar("_E", bound="EntityConfig")


class EntityConfig(DiscoveryModel):
    """
    Fields shared by every entity kind.

    Subclasses set `component` and add their own fields. A configuration can
    be built in an incomplete state (e.g. without unique_id); the publisher
    rejects it when it cannot derive a discovery topic.
    """

    component: ClassVar[ComponentKind]

    # Replaces '~' in any topic attribute; expansion is done by Home Assistant
    topic_prefix: Optional[str] = Field(default=None, serialization_alias="~")
    origin: Origin = Field(default_factory=Origin, serialization_alias="o")
    device: Device = Field(default_factory=Device, serialization_alias="dev")
    availability: Optional[Availability] = None
    entity_category: Optional[EntityCategory] = Field(default=None, serialization_alias="ent_cat")
    enabled_by_default: Optional[bool] = Field(default=None, serialization_alias="en")
    icon: Optional[str] = Field(default=None, serialization_alias="ic")
    json_attributes_topic: Optional[str] = Field(default=None, serialization_alias="json_attr_t")
    json_attributes_template: Optional[str] = Field(default=None, serialization_alias="json_attr_tpl")
    name: Optional[str] = None
    object_id: Optional[str] = Field(default=None, serialization_alias="obj_id")
    unique_id: Optional[str] = Field(default=None, serialization_alias="uniq_id")

    def as_config(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"availability"})
        if self.availability is not None:
            data.update(self.availability.as_config())
        return data

    def into_entity(self):
        """Wrap this configuration in the Entity sum type."""
        from hadiscovery.ha.entity import Entity
        return Entity(config=self)

    def with_topic_prefix(self: _E, topic_prefix: str) -> _E:
        return self._refine(topic_prefix=topic_prefix)

    def with_origin(self: _E, origin: Origin) -> _E:
        return self._refine(origin=origin)

    def with_device(self: _E, device: Device) -> _E:
        return self._refine(device=device)

    def with_availability(self: _E, availability: Availability) -> _E:
        return self._refine(availability=availability)

    def with_entity_category(self: _E, entity_category: EntityCategory) -> _E:
        return self._refine(entity_category=entity_category)

    def with_enabled_by_default(self: _E, enabled_by_default: bool) -> _E:
        """Whether the entity is enabled when first added."""
        return self._refine(enabled_by_default=enabled_by_default)

    def with_icon(self: _E, icon: str) -> _E:
        """Material Design icon, prefixed with 'mdi:' (e.g. 'mdi:home')."""
        return self._refine(icon=icon)

    def with_json_attributes_topic(self: _E, json_attributes_topic: str) -> _E:
        return self._refine(json_attributes_topic=json_attributes_topic)

    def with_json_attributes_template(self: _E, json_attributes_template: str) -> _E:
        return self._refine(json_attributes_template=json_attributes_template)

    def with_name(self: _E, name: str) -> _E:
        return self._refine(name=name)

    def with_object_id(self: _E, object_id: str) -> _E:
        """Used instead of name to generate the entity_id."""
        return self._refine(object_id=object_id)

    def with_unique_id(self: _E, unique_id: str) -> _E:
        """Unique ID of the entity; also the <object_id> of its discovery topic."""
        return self._refine(unique_id=unique_id)
