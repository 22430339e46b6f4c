"""Instance metadata service clients."""

from .client import MetadataClient
from .errors import (
    ImdsboxError,
    InvalidBaseURLError,
    MetadataConnectionError,
    MetadataError,
    MetadataHTTPError,
    MetadataTimeoutError,
)
from .network_interface import NetworkInterfaceClient
from .transport import MetadataConfig, MetadataTransport
from .types import (
    AvailabilityZoneInfo,
    InstanceInfo,
    NetworkInterfaceInfo,
    SecurityGroupInfo,
    SubnetInfo,
    VpcInfo,
)

__all__ = [
    "AvailabilityZoneInfo",
    "ImdsboxError",
    "InstanceInfo",
    "InvalidBaseURLError",
    "MetadataClient",
    "MetadataConfig",
    "MetadataConnectionError",
    "MetadataError",
    "MetadataHTTPError",
    "MetadataTimeoutError",
    "MetadataTransport",
    "NetworkInterfaceClient",
    "NetworkInterfaceInfo",
    "SecurityGroupInfo",
    "SubnetInfo",
    "VpcInfo",
]
