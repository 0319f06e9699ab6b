"""
Unit tests for DiscoveryApp
Tests that entity failures are isolated and that shutdown flushes the client
"""

from unittest.mock import Mock

import pytest

from hadiscovery.app import DiscoveryApp
from hadiscovery.config import EntitySpec, HubConfig, MqttConfig
from hadiscovery.errors import SchemaError, TransportError
from hadiscovery.ha.binary_sensor import BinarySensor
from hadiscovery.ha.common import ComponentKind
from hadiscovery.ha.sensor import Sensor
from hadiscovery.ha.tag import Tag


@pytest.fixture
def mqtt_client():
    return Mock()


@pytest.fixture
def app(mqtt_client):
    cfg = HubConfig(
        mqtt=MqttConfig(host="localhost"),
        entities=[
            EntitySpec(component="sensor", config={"unique_id": "s1", "state_topic": "s/1"}),
            EntitySpec(component="tag", config={"unique_id": "t1", "topic": "t/1"}),
        ],
    )
    return DiscoveryApp(cfg, mqtt_client=mqtt_client)


def topics(mqtt_client):
    return [c.args[0] for c in mqtt_client.publish_with_properties.call_args_list]


class TestPublishEntities:
    """Test publishing several entities"""

    def test_publish_configured(self, app, mqtt_client):
        """Test every configured entity is published"""
        failures = app.publish_configured()

        assert failures == []
        assert topics(mqtt_client) == [
            "homeassistant/sensor/s1/config",
            "homeassistant/tag/t1/config",
        ]

    def test_failure_does_not_stop_others(self, app, mqtt_client):
        """Test an entity without unique_id is reported and the rest still go out"""
        entities = [
            Sensor(unique_id="s1").into_entity(),
            Sensor(state_topic="no/id").into_entity(),
            BinarySensor(unique_id="b1").into_entity(),
        ]

        failures = app.publish_entities(entities)

        assert len(failures) == 1
        assert failures[0][0] is entities[1]
        assert isinstance(failures[0][1], SchemaError)
        assert topics(mqtt_client) == [
            "homeassistant/sensor/s1/config",
            "homeassistant/binary_sensor/b1/config",
        ]

    def test_transport_failure_is_collected(self, app, mqtt_client):
        """Test transport errors are returned per entity"""
        mqtt_client.publish_with_properties.side_effect = [OSError("down"), None]
        entities = [Tag(unique_id="t1").into_entity(), Tag(unique_id="t2").into_entity()]

        failures = app.publish_entities(entities)

        assert [f[0].unique_id for f in failures] == ["t1"]
        assert isinstance(failures[0][1], TransportError)
        assert mqtt_client.publish_with_properties.call_count == 2


class TestRemoveEntities:
    """Test removing entities"""

    def test_remove(self, app, mqtt_client):
        """Test removal clears each entity and skips those without unique_id"""
        entities = [
            Sensor(unique_id="s1").into_entity(),
            Sensor().into_entity(),
            Tag(unique_id="t1").into_entity(),
        ]

        failures = app.remove_entities(entities)

        assert failures == []
        assert topics(mqtt_client) == [
            "homeassistant/sensor/s1/config",
            "homeassistant/tag/t1/config",
        ]
        for call in mqtt_client.publish_with_properties.call_args_list:
            assert call.args[3] == b""

    def test_remove_failure(self, app, mqtt_client):
        """Test removal failures are returned"""
        mqtt_client.publish_with_properties.side_effect = TransportError("down")

        failures = app.remove_entities([Sensor(unique_id="s1").into_entity()])

        assert len(failures) == 1
        assert failures[0][0].component is ComponentKind.SENSOR


class TestClose:
    """Test shutdown"""

    def test_close_flushes_then_disconnects(self, app, mqtt_client):
        """Test pending messages are flushed before the client is closed"""
        app.close(timeout=1.0)

        assert [c[0] for c in mqtt_client.method_calls] == ["flush", "close"]
        mqtt_client.flush.assert_called_once_with(1.0)

    def test_close_after_flush_failure(self, app, mqtt_client):
        """Test the client is closed even when flushing fails"""
        mqtt_client.flush.side_effect = RuntimeError("message not queued")

        app.close()

        mqtt_client.close.assert_called_once()
