import os
import argparse
import logging
import sys
from pathlib import Path
import yaml

from hadiscovery.app import DiscoveryApp
from hadiscovery.config import HubConfig

log = logging.getLogger(__name__)


CONFIG_ENV = "HADISCOVERY_CONFIG"
# config.yaml next to the hadiscovery package
DEFAULT_CONFIG = Path(__file__).resolve().parents[1] / "config.yaml"


def _resolve_config_path(cli_path: str | None) -> Path:
    """--config wins over $HADISCOVERY_CONFIG, which wins over DEFAULT_CONFIG."""
    chosen = cli_path or os.getenv(CONFIG_ENV)
    if not chosen:
        return DEFAULT_CONFIG
    return Path(chosen).expanduser().resolve()


def load_config(path: str | Path) -> HubConfig:
    """Load and validate config.yaml."""
    path = Path(path).expanduser().resolve()
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return HubConfig.model_validate(raw)


def main() -> None:
    parser = argparse.ArgumentParser(description="Publish Home Assistant MQTT discovery configs")
    parser.add_argument(
        "--config",
        help=f"Path to config.yaml (overrides {CONFIG_ENV} and {DEFAULT_CONFIG}).",
        required=False,
    )
    parser.add_argument(
        "--remove",
        action="store_true",
        help="Clear the configured entities from Home Assistant instead of publishing them.",
    )
    parser.add_argument(
        "--connect-timeout",
        type=float,
        default=10.0,
        help="Seconds to wait for the MQTT broker connection.",
    )
    args = parser.parse_args()

    cfg = load_config(_resolve_config_path(args.config))
    app = DiscoveryApp(cfg)
    try:
        if not app.mqtt.wait_connected(args.connect_timeout):
            log.error(f"Could not connect to MQTT broker {cfg.mqtt.host}:{cfg.mqtt.port}")
            sys.exit(1)
        entities = cfg.build_entities()
        if args.remove:
            failures = app.remove_entities(entities)
        else:
            failures = app.publish_entities(entities)
    finally:
        app.close()

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
