"""
Unit tests for the shared discovery value types
Tests Origin, Device and Availability rendering
"""

import pytest
from pydantic import ValidationError

from hadiscovery.ha.common import (
    Availability, AvailabilityCheck, AvailabilityMode, Device, DeviceConnection,
    EntityCategory, Origin, Qos
)


class TestOrigin:
    """Test origin rendering"""

    def test_full_origin(self):
        """Test all origin fields with their wire keys"""
        origin = Origin(
            name="application name",
            software_version="software version",
            support_url="https://github.com",
        )

        assert origin.as_config() == {
            "name": "application name",
            "sw": "software version",
            "support_url": "https://github.com",
        }

    def test_optional_fields_omitted(self):
        """Test only the name is rendered when nothing else is set"""
        assert Origin(name="app").as_config() == {"name": "app"}

    def test_refinement_returns_new_value(self):
        """Test with_* methods leave the original untouched"""
        base = Origin(name="app")
        refined = base.with_software_version("1.0").with_support_url("https://example.org")

        assert base.software_version is None
        assert refined.software_version == "1.0"
        assert refined.support_url == "https://example.org"

    def test_origin_is_immutable(self):
        """Test origin cannot be mutated after construction"""
        origin = Origin(name="app")
        with pytest.raises(ValidationError):
            origin.name = "other"


class TestDevice:
    """Test device rendering"""

    def test_full_device(self):
        """Test every device field with its abbreviation"""
        device = Device(
            name="device name",
            identifiers=["device id"],
            connections=[DeviceConnection.mac("connection id")],
            configuration_url="http://config.url",
            manufacturer="device manufacturer",
            model="device model",
            suggested_area="area",
            software_version="sw_v",
            hardware_version="hw_v",
            serial_number="SN-1",
            via_device="via",
        )

        assert device.as_config() == {
            "name": "device name",
            "ids": ["device id"],
            "cns": [["mac", "connection id"]],
            "cu": "http://config.url",
            "mf": "device manufacturer",
            "mdl": "device model",
            "sa": "area",
            "sw": "sw_v",
            "hw": "hw_v",
            "sn": "SN-1",
            "via_device": "via",
        }

    def test_empty_device(self):
        """Test a default device renders no keys at all"""
        assert Device().as_config() == {}

    def test_empty_lists_are_omitted(self):
        """Test identifiers and connections are dropped when empty"""
        config = Device(name="only a name").as_config()

        assert "ids" not in config
        assert "cns" not in config

    def test_incremental_identifiers_keep_order(self):
        """Test add_identifier and add_connection append in call order"""
        device = (
            Device()
            .add_identifier("first")
            .add_identifier("second")
            .add_connection(DeviceConnection.mac("aa:bb"))
            .add_connection(DeviceConnection(connection_type="zigbee", identifier="0x01"))
        )

        config = device.as_config()
        assert config["ids"] == ["first", "second"]
        assert config["cns"] == [["mac", "aa:bb"], ["zigbee", "0x01"]]

    def test_connection_from_pair(self):
        """Test connections can be given as two-element lists (YAML form)"""
        device = Device.model_validate({"connections": [["mac", "02:5b:26:a8:dc:12"]]})

        assert device.connections[0].connection_type == "mac"
        assert device.connections[0].identifier == "02:5b:26:a8:dc:12"

    def test_unknown_field_rejected(self):
        """Test typos in device fields are reported"""
        with pytest.raises(ValidationError):
            Device.model_validate({"manufacterer": "oops"})


class TestAvailability:
    """Test availability rendering"""

    def test_single_topic_without_expiry(self):
        """Test single topic renders one check, mode all and no expiry"""
        config = Availability.single_topic("~/availability").as_config()

        assert config == {
            "avty_mode": "all",
            "avty": [{"t": "~/availability"}],
        }
        assert "exp_aft" not in config

    def test_single_topic_with_expiry(self):
        """Test expire_after is rendered when set"""
        config = Availability.single_topic("~/availability").with_expire_after(120).as_config()

        assert config["exp_aft"] == 120

    def test_custom_payloads(self):
        """Test optional check fields are rendered when set"""
        check = (
            AvailabilityCheck(topic="bridge/state")
            .with_payload_available("up")
            .with_payload_not_available("down")
            .with_value_template("{{ value_json.state }}")
        )

        assert Availability.single(check).as_config()["avty"] == [
            {
                "t": "bridge/state",
                "pl_avail": "up",
                "pl_not_avail": "down",
                "val_tpl": "{{ value_json.state }}",
            }
        ]

    @pytest.mark.parametrize("factory,token", [
        (Availability.all_of, "all"),
        (Availability.any_of, "any"),
        (Availability.latest_of, "latest"),
    ])
    def test_multi_topic_modes(self, factory, token):
        """Test the mode token and entry order for multi-topic availability"""
        checks = [
            AvailabilityCheck(topic="a/availability"),
            AvailabilityCheck(topic="b/availability"),
            AvailabilityCheck(topic="c/availability"),
        ]

        config = factory(checks).as_config()

        assert config["avty_mode"] == token
        assert [c["t"] for c in config["avty"]] == ["a/availability", "b/availability", "c/availability"]

    def test_default_mode_is_all(self):
        """Test the default availability mode"""
        assert Availability().mode is AvailabilityMode.ALL


class TestEnumerations:
    """Test enumeration tokens"""

    def test_entity_category_tokens(self):
        """Test entity category wire tokens"""
        assert EntityCategory.CONFIG.value == "config"
        assert EntityCategory.DIAGNOSTIC.value == "diagnostic"

    def test_qos_tokens(self):
        """Test QoS levels are rendered as their numeric tokens"""
        assert [q.value for q in Qos] == ["0", "1", "2"]
