from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class AvailabilityZoneInfo:
    """
    Placement of the instance.

    Built from two separate requests, so both values are not guaranteed to
    describe the same moment.
    """
    zone_name: str
    zone_id: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class InstanceInfo:
    """
    Instance-level metadata snapshot.

    Every string is the metadata body verbatim; sequence fields hold one
    entry per line of the body and are stored as tuples, so the record
    cannot be changed after construction.
    """
    ami_id: str
    instance_id: str
    instance_type: str
    hostname: str
    local_hostname: str
    local_ipv4: str
    public_hostname: str
    public_ipv4: str
    mac_addresses: Tuple[str, ...]
    region: str
    availability_zone: AvailabilityZoneInfo
    ramdisk_id: str
    tags: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "mac_addresses", tuple(self.mac_addresses))
        object.__setattr__(self, "tags", tuple(self.tags))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SecurityGroupInfo:
    """Security group ids and names of one network interface."""
    id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SubnetInfo:
    """Subnet of one network interface."""
    id: str
    ipv4_cidr_block: str
    ipv6_cidr_block: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class VpcInfo:
    """VPC of one network interface."""
    id: str
    ipv4_cidr_block: str
    ipv4_cidr_blocks: str
    ipv6_cidr_blocks: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class NetworkInterfaceInfo:
    """
    All metadata of one network interface.

    ``local_ipv4s`` and ``public_ipv4s`` stay raw, newline-separated strings.
    """
    mac_address: str
    device_number: str
    interface_id: str
    local_hostname: str
    local_ipv4s: str
    mac: str
    network_card_index: str
    owner_id: str
    public_hostname: str
    public_ipv4s: str
    security_group: SecurityGroupInfo
    subnet: SubnetInfo
    vpc: VpcInfo

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
