import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Union

from paho.mqtt import client as mqtt
from paho.mqtt.packettypes import PacketTypes
from paho.mqtt.properties import Properties

from hadiscovery.errors import TransportError
from hadiscovery.ha.common import Qos

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublishProperties:
    """MQTT v5 PUBLISH properties attached to outgoing messages."""
    message_expiry_interval: Optional[int] = None  # seconds, None = never expires
    content_type: Optional[str] = None


class Mqtt:
    """
    Publish-only MQTT v5 client on top of paho-mqtt.

    The network loop runs in paho's background thread; publish calls hand
    the message to paho and return without waiting for the broker ack.
    """

    def __init__(self, cfg):
        self.cfg = cfg
        self._connected = threading.Event()
        self._pending: List[mqtt.MQTTMessageInfo] = []
        self._pending_lock = threading.Lock()
        self.cli = mqtt.Client(
            mqtt.CallbackAPIVersion.VERSION2,
            client_id=cfg.client_id,
            protocol=mqtt.MQTTv5,
        )
        if cfg.username:
            self.cli.username_pw_set(cfg.username, cfg.password or "")
        self.cli.on_connect = self._on_connect
        self.cli.on_disconnect = self._on_disconnect
        self.cli.connect_async(cfg.host, cfg.port, keepalive=cfg.keepalive)
        self.cli.loop_start()

    def _on_connect(self, _cli, _ud, _flags, reason_code, _props):
        if reason_code.is_failure:
            log.error(f"MQTT connection to {self.cfg.host}:{self.cfg.port} refused: {reason_code}")
            return
        log.info(f"Connected to MQTT broker {self.cfg.host}:{self.cfg.port}")
        self._connected.set()

    def _on_disconnect(self, _cli, _ud, _flags, reason_code, _props):
        self._connected.clear()
        log.warning(f"Disconnected from MQTT broker: {reason_code}")

    def wait_connected(self, timeout: Optional[float] = None) -> bool:
        return self._connected.wait(timeout)

    def publish_with_properties(
        self,
        topic: str,
        qos: Union[Qos, int],
        retain: bool,
        payload: bytes,
        properties: Optional[PublishProperties] = None,
    ) -> None:
        props = None
        if properties is not None:
            props = Properties(PacketTypes.PUBLISH)
            if properties.message_expiry_interval is not None:
                props.MessageExpiryInterval = properties.message_expiry_interval
            if properties.content_type is not None:
                props.ContentType = properties.content_type

        qos_level = int(qos.value) if isinstance(qos, Qos) else int(qos)
        log.debug("MQTT PUB %s qos=%s retain=%s %s", topic, qos_level, retain, payload)
        info = self.cli.publish(topic, payload, qos=qos_level, retain=retain, properties=props)
        if info.rc == mqtt.MQTT_ERR_NO_CONN and qos_level > 0:
            # paho keeps QoS 1/2 messages in its session and resends them on reconnect
            log.warning(f"MQTT not connected, {topic} queued until the broker is back")
            return
        if info.rc != mqtt.MQTT_ERR_SUCCESS:
            raise TransportError(f"Failed to publish MQTT message to {topic}: {mqtt.error_string(info.rc)}")
        with self._pending_lock:
            self._pending = [p for p in self._pending if not p.is_published()]
            self._pending.append(info)

    def flush(self, timeout: Optional[float] = None) -> None:
        """
        Block until every message handed to paho while connected has been sent.
        Messages queued during a disconnect are not waited for: paho only
        reports their delivery through the session, not their MQTTMessageInfo.
        """
        with self._pending_lock:
            pending, self._pending = self._pending, []
        for info in pending:
            info.wait_for_publish(timeout)

    def close(self) -> None:
        self.cli.disconnect()
        self.cli.loop_stop()
