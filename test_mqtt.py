"""
Unit tests for the paho-mqtt client wrapper
The paho client is replaced by a mock, no broker is needed
"""

from unittest.mock import Mock, patch

import pytest
from paho.mqtt import client as paho

from hadiscovery.config import MqttConfig
from hadiscovery.errors import TransportError
from hadiscovery.ha.common import Qos
from hadiscovery.mqtt import Mqtt, PublishProperties


@pytest.fixture
def paho_client():
    with patch.object(paho, "Client") as client_cls:
        client = client_cls.return_value
        client.publish.return_value = Mock(rc=paho.MQTT_ERR_SUCCESS)
        yield client_cls


def make_mqtt(**overrides) -> Mqtt:
    cfg = MqttConfig(host="broker.local", **overrides)
    return Mqtt(cfg)


class TestConnection:
    """Test client setup and connection tracking"""

    def test_client_created_for_mqtt5(self, paho_client):
        """Test the client is created with MQTT v5 and connects in the background"""
        make_mqtt(port=1884, client_id="test-client", keepalive=15)

        args, kwargs = paho_client.call_args
        assert args[0] == paho.CallbackAPIVersion.VERSION2
        assert kwargs["client_id"] == "test-client"
        assert kwargs["protocol"] == paho.MQTTv5
        client = paho_client.return_value
        client.connect_async.assert_called_once_with("broker.local", 1884, keepalive=15)
        client.loop_start.assert_called_once()

    def test_credentials(self, paho_client):
        """Test credentials are set only when a username is configured"""
        make_mqtt(username="user", password="secret")
        paho_client.return_value.username_pw_set.assert_called_once_with("user", "secret")

    def test_no_credentials(self, paho_client):
        """Test anonymous connection"""
        make_mqtt()
        paho_client.return_value.username_pw_set.assert_not_called()

    def test_wait_connected(self, paho_client):
        """Test wait_connected follows connect and disconnect callbacks"""
        client = make_mqtt()
        assert client.wait_connected(0) is False

        client._on_connect(None, None, None, Mock(is_failure=False), None)
        assert client.wait_connected(0) is True

        client._on_disconnect(None, None, None, Mock(), None)
        assert client.wait_connected(0) is False

    def test_refused_connection(self, paho_client):
        """Test a refused connection is not reported as connected"""
        client = make_mqtt()

        client._on_connect(None, None, None, Mock(is_failure=True), None)

        assert client.wait_connected(0) is False


class TestPublishWithProperties:
    """Test publishing through paho"""

    def test_properties_are_converted(self, paho_client):
        """Test expiry and content type become MQTT v5 PUBLISH properties"""
        client = make_mqtt()

        client.publish_with_properties(
            "homeassistant/sensor/s1/config",
            Qos.AT_LEAST_ONCE,
            True,
            b"{}",
            PublishProperties(message_expiry_interval=604800, content_type="application/json"),
        )

        args, kwargs = paho_client.return_value.publish.call_args
        assert args == ("homeassistant/sensor/s1/config", b"{}")
        assert kwargs["qos"] == 1
        assert kwargs["retain"] is True
        props = kwargs["properties"]
        assert props.MessageExpiryInterval == 604800
        assert props.ContentType == "application/json"

    def test_unset_expiry_is_not_sent(self, paho_client):
        """Test no expiry property is attached when none is given"""
        client = make_mqtt()

        client.publish_with_properties("t", Qos.AT_MOST_ONCE, False, b"1", PublishProperties(content_type="text/plain"))

        props = paho_client.return_value.publish.call_args.kwargs["properties"]
        assert not hasattr(props, "MessageExpiryInterval")
        assert props.ContentType == "text/plain"

    def test_no_properties(self, paho_client):
        """Test messages without properties"""
        client = make_mqtt()

        client.publish_with_properties("t", Qos.EXACTLY_ONCE, True, b"")

        kwargs = paho_client.return_value.publish.call_args.kwargs
        assert kwargs["properties"] is None
        assert kwargs["qos"] == 2

    def test_integer_qos(self, paho_client):
        """Test plain integer QoS levels are accepted"""
        client = make_mqtt()

        client.publish_with_properties("t", 1, False, b"")

        assert paho_client.return_value.publish.call_args.kwargs["qos"] == 1

    def test_failed_publish_raises(self, paho_client):
        """Test a publish paho did not queue raises TransportError"""
        paho_client.return_value.publish.return_value = Mock(rc=paho.MQTT_ERR_QUEUE_SIZE)
        client = make_mqtt()

        with pytest.raises(TransportError, match="t/1"):
            client.publish_with_properties("t/1", Qos.AT_LEAST_ONCE, True, b"")

    def test_disconnected_qos0_raises(self, paho_client):
        """Test a QoS 0 message is lost while disconnected and reported as such"""
        paho_client.return_value.publish.return_value = Mock(rc=paho.MQTT_ERR_NO_CONN)
        client = make_mqtt()

        with pytest.raises(TransportError, match="t/1"):
            client.publish_with_properties("t/1", Qos.AT_MOST_ONCE, True, b"")

    @pytest.mark.parametrize("qos", [Qos.AT_LEAST_ONCE, Qos.EXACTLY_ONCE])
    def test_disconnected_qos1_is_queued(self, paho_client, qos):
        """Test QoS 1/2 messages queued by paho while disconnected are accepted"""
        info = Mock(rc=paho.MQTT_ERR_NO_CONN)
        paho_client.return_value.publish.return_value = info
        client = make_mqtt()

        client.publish_with_properties("t/1", qos, True, b"x")

        paho_client.return_value.publish.assert_called_once()
        # flush must not wait on an info paho reports as failed
        client.flush(1.0)
        info.wait_for_publish.assert_not_called()


class TestShutdown:
    """Test flush and close"""

    def test_flush_waits_for_pending(self, paho_client):
        """Test flush waits on every message handed to paho"""
        first = Mock(rc=paho.MQTT_ERR_SUCCESS)
        first.is_published.return_value = False
        second = Mock(rc=paho.MQTT_ERR_SUCCESS)
        second.is_published.return_value = False
        paho_client.return_value.publish.side_effect = [first, second]
        client = make_mqtt()
        client.publish_with_properties("a", Qos.AT_LEAST_ONCE, True, b"")
        client.publish_with_properties("b", Qos.AT_LEAST_ONCE, True, b"")

        client.flush(2.0)

        first.wait_for_publish.assert_called_once_with(2.0)
        second.wait_for_publish.assert_called_once_with(2.0)

        client.flush(2.0)
        assert first.wait_for_publish.call_count == 1

    def test_published_messages_are_forgotten(self, paho_client):
        """Test repeated publishing without flush does not accumulate sent messages"""
        sent = Mock(rc=paho.MQTT_ERR_SUCCESS)
        sent.is_published.return_value = True
        in_flight = Mock(rc=paho.MQTT_ERR_SUCCESS)
        in_flight.is_published.return_value = False
        paho_client.return_value.publish.side_effect = [sent] * 1000 + [in_flight, sent]
        client = make_mqtt()

        for i in range(1002):
            client.publish_with_properties(f"state/{i}", Qos.AT_LEAST_ONCE, True, b"{}")

        assert len(client._pending) == 2
        assert client._pending[0] is in_flight

    def test_close(self, paho_client):
        """Test close disconnects and stops the network loop"""
        client = make_mqtt()

        client.close()

        paho_client.return_value.disconnect.assert_called_once()
        paho_client.return_value.loop_stop.assert_called_once()
