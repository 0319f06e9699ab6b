import logging
import sys
from typing import Iterable, List, Optional, Tuple

from hadiscovery.config import HubConfig
from hadiscovery.errors import DiscoveryError
from hadiscovery.ha.discovery import HADiscoveryPublisher
from hadiscovery.ha.entity import Entity
from hadiscovery.mqtt import Mqtt

log = logging.getLogger(__name__)


class DiscoveryApp:
    """
    Wires configuration, logging, the MQTT client and the discovery publisher.

    A failure to publish one entity never stops the others: every entity is
    attempted and the failures are returned to the caller.
    """

    def __init__(self, cfg: HubConfig, mqtt_client=None):
        self.cfg = cfg
        self._configure_logging()
        self.mqtt = mqtt_client if mqtt_client is not None else Mqtt(cfg.mqtt)
        self.ha = HADiscoveryPublisher(self.mqtt, cfg.discovery.prefix)

    def _configure_logging(self):
        """Configure logging based on config settings."""
        log_config = self.cfg.logging

        root_logger = logging.getLogger()
        log_level = getattr(logging, log_config.level.upper(), logging.INFO)
        root_logger.setLevel(log_level)

        # Configure console handler if not already configured
        if not root_logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(log_level)
            console_handler.setFormatter(logging.Formatter(log_config.format))
            root_logger.addHandler(console_handler)

        logging.getLogger("hadiscovery").setLevel(log_level)

        # paho logs every reconnect attempt at WARNING
        logging.getLogger("paho").setLevel(logging.ERROR)

        if log_config.ha_debug:
            logging.getLogger("hadiscovery.ha").setLevel(logging.DEBUG)
            logging.getLogger("hadiscovery.ha.discovery").setLevel(logging.DEBUG)

        log.info(f"Logging configured - Level: {log_config.level}, HA Debug: {log_config.ha_debug}")

    def publish_entities(self, entities: Iterable[Entity]) -> List[Tuple[Entity, DiscoveryError]]:
        """Publish each entity independently; return (entity, error) for the ones that failed."""
        failures: List[Tuple[Entity, DiscoveryError]] = []
        published = 0
        for entity in entities:
            try:
                self.ha.publish_entity(entity)
                published += 1
            except DiscoveryError as e:
                log.error(f"Failed to publish {entity.component.value} '{entity.unique_id}': {e}")
                failures.append((entity, e))
        log.info(f"Published {published} discovery configs, {len(failures)} failed")
        return failures

    def publish_configured(self) -> List[Tuple[Entity, DiscoveryError]]:
        return self.publish_entities(self.cfg.build_entities())

    def remove_entities(self, entities: Iterable[Entity]) -> List[Tuple[Entity, DiscoveryError]]:
        """Clear the retained discovery config of each entity so Home Assistant deletes it."""
        failures: List[Tuple[Entity, DiscoveryError]] = []
        for entity in entities:
            if not entity.unique_id:
                log.warning(f"Skipping {entity.component.value} without unique_id: nothing to clear")
                continue
            try:
                self.ha.clear_entity(entity.component, entity.unique_id)
            except DiscoveryError as e:
                log.warning(f"Failed to clear discovery entity '{entity.unique_id}': {e}")
                failures.append((entity, e))
        return failures

    def close(self, timeout: Optional[float] = 5.0) -> None:
        """Wait for queued messages to go out, then disconnect."""
        try:
            self.mqtt.flush(timeout)
        except (RuntimeError, ValueError) as e:
            log.warning(f"Some MQTT messages were not delivered before shutdown: {e}")
        self.mqtt.close()
