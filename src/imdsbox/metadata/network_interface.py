"""Per network interface metadata, keyed by MAC address."""

from __future__ import annotations

from imdsbox.metadata import paths
from imdsbox.metadata.transport import MetadataTransport
from imdsbox.metadata.types import SecurityGroupInfo, SubnetInfo, VpcInfo


class NetworkInterfaceClient:
    """Accessors for ``network/interfaces/macs/{mac}/...``.

    The transport is borrowed from the owning ``MetadataClient``. The MAC
    address is used as a path segment only and is not validated.
    """

    def __init__(self, transport: MetadataTransport, mac_address: str) -> None:
        """Bind a transport and a MAC address.

        Args:
            transport: Shared metadata transport.
            mac_address: MAC address of the interface.
        """
        self.transport = transport
        self.mac_address = mac_address

    def __repr__(self) -> str:
        return f"NetworkInterfaceClient(mac_address={self.mac_address!r})"

    def _get(self, field: str) -> str:
        return self.transport.get_text(paths.interface_path(self.mac_address, field))

    def get_device_number(self) -> str:
        return self._get(paths.NIC_DEVICE_NUMBER)

    def get_interface_id(self) -> str:
        return self._get(paths.NIC_INTERFACE_ID)

    def get_local_hostname(self) -> str:
        return self._get(paths.NIC_LOCAL_HOSTNAME)

    def get_local_ipv4s(self) -> str:
        """Get private IPv4 addresses as the raw newline-separated body."""
        return self._get(paths.NIC_LOCAL_IPV4S)

    def get_mac(self) -> str:
        return self._get(paths.NIC_MAC)

    def get_network_card_index(self) -> str:
        return self._get(paths.NIC_NETWORK_CARD_INDEX)

    def get_owner_id(self) -> str:
        return self._get(paths.NIC_OWNER_ID)

    def get_public_hostname(self) -> str:
        return self._get(paths.NIC_PUBLIC_HOSTNAME)

    def get_public_ipv4s(self) -> str:
        """Get public IPv4 addresses as the raw newline-separated body."""
        return self._get(paths.NIC_PUBLIC_IPV4S)

    def get_security_group_info(self) -> SecurityGroupInfo:
        """Get security group ids and names.

        Issues two requests in sequence. Values can be inconsistent when the
        security groups change between them.

        Returns:
            SecurityGroupInfo: Ids and names.

        Raises:
            MetadataError: Either request failed.
        """
        group_id = self._get(paths.NIC_SECURITY_GROUP_IDS)
        name = self._get(paths.NIC_SECURITY_GROUP)
        return SecurityGroupInfo(id=group_id, name=name)

    def get_subnet_info(self) -> SubnetInfo:
        """Get subnet id and CIDR blocks.

        Issues three requests in sequence, without atomicity.

        Returns:
            SubnetInfo: Subnet id and CIDR blocks.

        Raises:
            MetadataError: Any request failed.
        """
        subnet_id = self._get(paths.NIC_SUBNET_ID)
        ipv4_cidr_block = self._get(paths.NIC_SUBNET_IPV4_CIDR_BLOCK)
        ipv6_cidr_block = self._get(paths.NIC_SUBNET_IPV6_CIDR_BLOCKS)
        return SubnetInfo(
            id=subnet_id,
            ipv4_cidr_block=ipv4_cidr_block,
            ipv6_cidr_block=ipv6_cidr_block,
        )

    def get_vpc_info(self) -> VpcInfo:
        """Get VPC id and CIDR blocks.

        Issues four requests in sequence, without atomicity.

        Returns:
            VpcInfo: VPC id and CIDR blocks.

        Raises:
            MetadataError: Any request failed.
        """
        vpc_id = self._get(paths.NIC_VPC_ID)
        ipv4_cidr_block = self._get(paths.NIC_VPC_IPV4_CIDR_BLOCK)
        ipv4_cidr_blocks = self._get(paths.NIC_VPC_IPV4_CIDR_BLOCKS)
        ipv6_cidr_blocks = self._get(paths.NIC_VPC_IPV6_CIDR_BLOCKS)
        return VpcInfo(
            id=vpc_id,
            ipv4_cidr_block=ipv4_cidr_block,
            ipv4_cidr_blocks=ipv4_cidr_blocks,
            ipv6_cidr_blocks=ipv6_cidr_blocks,
        )
