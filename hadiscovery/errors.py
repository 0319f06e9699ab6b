"""
Errors raised while publishing Home Assistant discovery documents.
"""


class DiscoveryError(Exception):
    """Base class for all discovery publishing failures."""


class SerializationError(DiscoveryError):
    """The entity configuration could not be rendered to JSON."""


class SchemaError(DiscoveryError):
    """The serialized document has no usable 'uniq_id' field."""


class TransportError(DiscoveryError):
    """The MQTT client refused or failed to publish the message."""
