"""imdsbox: typed access to the cloud instance metadata service."""

from .metadata import (
    AvailabilityZoneInfo,
    InstanceInfo,
    MetadataClient,
    MetadataConfig,
    MetadataError,
    NetworkInterfaceClient,
)

__version__ = "0.1.0"

__all__ = [
    "AvailabilityZoneInfo",
    "InstanceInfo",
    "MetadataClient",
    "MetadataConfig",
    "MetadataError",
    "NetworkInterfaceClient",
]
