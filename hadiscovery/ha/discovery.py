# discovery.py
import json
import logging
from typing import Any, Optional, Union

from pydantic import BaseModel

from hadiscovery.errors import SchemaError, SerializationError, TransportError
from hadiscovery.ha.common import ComponentKind, DiscoveryModel, EntityConfig, Qos
from hadiscovery.ha.entity import Entity
from hadiscovery.mqtt import PublishProperties

log = logging.getLogger("hadiscovery.ha.discovery")

DISCOVERY_PREFIX = "homeassistant"
CONTENT_TYPE_JSON = "application/json"
ONE_WEEK_SECONDS = 60 * 60 * 24 * 7

# Characters that would add a topic level or a wildcard to the discovery topic
_TOPIC_UNSAFE = ("/", "+", "#")


def _to_json(payload: Any) -> str:
    try:
        if isinstance(payload, DiscoveryModel):
            payload = payload.as_config()
        elif isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Payload is not JSON serializable: {e}") from e


def _check_object_id(object_id: str) -> str:
    if not object_id:
        raise SchemaError("'uniq_id' attribute should not be empty")
    if any(ch in object_id for ch in _TOPIC_UNSAFE):
        raise SchemaError(f"'uniq_id' {object_id!r} cannot be used as a topic level")
    return object_id


def _component_token(component: Union[ComponentKind, str]) -> str:
    return component.value if isinstance(component, ComponentKind) else str(component)


class HADiscoveryPublisher:
    """
    Publishes Home Assistant MQTT discovery documents.

    Topics follow `<discovery_prefix>/<component>/<object_id>/config` with the
    entity unique_id as object_id (no node_id level). Documents are sent
    retained with QoS 1, so Home Assistant receives the last configuration
    even when it subscribes after publication, and expire after one week.

    The publisher keeps no state besides the MQTT client and the prefix and
    can be shared between threads.
    """

    def __init__(self, mqtt_client, discovery_prefix: str = DISCOVERY_PREFIX) -> None:
        self.mqtt = mqtt_client
        # A single trailing separator is tolerated: "homeassistant/" == "homeassistant"
        if discovery_prefix.endswith("/"):
            discovery_prefix = discovery_prefix[:-1]
        self.discovery_prefix = discovery_prefix

    def _disc_topic(self, component: Union[ComponentKind, str], object_id: str) -> str:
        return f"{self.discovery_prefix}/{_component_token(component)}/{object_id}/config"

    def _serialize_config(self, entity_config: EntityConfig) -> str:
        try:
            document = entity_config.as_config()
        except Exception as e:
            raise SerializationError(
                f"Cannot render {type(entity_config).__name__} configuration: {e}"
            ) from e
        return _to_json(document)

    @staticmethod
    def _extract_object_id(payload: str) -> str:
        """
        Read 'uniq_id' back from the serialized document, so the topic always
        matches what Home Assistant will see in the payload.
        """
        document = json.loads(payload)
        if not isinstance(document, dict):
            raise SchemaError("entity configuration should be an object")
        if "uniq_id" not in document:
            raise SchemaError("entity configuration should have an attribute 'uniq_id'")
        object_id = document["uniq_id"]
        if not isinstance(object_id, str):
            raise SchemaError("'uniq_id' attribute should be a string")
        return _check_object_id(object_id)

    def _send(self, topic: str, payload: bytes, properties: Optional[PublishProperties]) -> None:
        try:
            self.mqtt.publish_with_properties(topic, Qos.AT_LEAST_ONCE, True, payload, properties)
        except TransportError:
            log.error(f"Failed to publish to {topic}", exc_info=True)
            raise
        except Exception as e:
            log.error(f"Failed to publish to {topic}: {e}", exc_info=True)
            raise TransportError(f"Failed to publish to {topic}: {e}") from e

    def publish(self, component: Union[ComponentKind, str], entity_config: EntityConfig) -> None:
        """
        Publish the discovery document of one entity.

        Raises:
            SerializationError: the configuration cannot be rendered to JSON
            SchemaError: the rendered document has no non-empty string 'uniq_id',
                or it contains "/", "+" or "#" and cannot be a topic level
            TransportError: the MQTT client failed to publish
        """
        payload = self._serialize_config(entity_config)
        object_id = self._extract_object_id(payload)
        topic = self._disc_topic(component, object_id)
        props = PublishProperties(
            message_expiry_interval=ONE_WEEK_SECONDS,
            content_type=CONTENT_TYPE_JSON,
        )
        self._send(topic, payload.encode("utf-8"), props)
        log.debug(f"Published discovery config: {topic}")

    def publish_entity(self, entity: Entity) -> None:
        self.publish(entity.component, entity.config)

    def publish_data(self, topic: str, payload: Any, message_expiry_interval: Optional[int] = None) -> None:
        """
        Publish any JSON-serializable payload (state, attributes, availability)
        or pydantic model, the latter rendered like a discovery document,
        retained to an explicit topic. No expiry is attached when
        message_expiry_interval is None.
        """
        body = _to_json(payload)
        props = PublishProperties(
            message_expiry_interval=message_expiry_interval,
            content_type=CONTENT_TYPE_JSON,
        )
        self._send(topic, body.encode("utf-8"), props)
        log.debug(f"Published data to {topic}")

    def clear_entity(self, component: Union[ComponentKind, str], unique_id: str) -> None:
        """Remove an entity from Home Assistant by publishing an empty retained config."""
        topic = self._disc_topic(component, _check_object_id(unique_id))
        self._send(topic, b"", None)
        log.debug(f"Cleared discovery entity: {topic}")
