#!/usr/bin/env python3

"""Instance metadata service client.

Every accessor issues plain HTTP GET requests against the metadata root and
returns the body verbatim or split into lines. Failures propagate as
``MetadataError``; nothing is retried, cached or substituted.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from imdsbox.metadata import paths
from imdsbox.metadata.network_interface import NetworkInterfaceClient
from imdsbox.metadata.transport import DEFAULT_TIMEOUT_S, MetadataConfig, MetadataTransport
from imdsbox.metadata.types import AvailabilityZoneInfo, InstanceInfo


def _split_lines(body: str) -> List[str]:
    """Split a multi-value body into one entry per line.

    Only LF separates entries and one trailing CR is dropped from each, so
    other Unicode line breaks stay inside the value.

    Args:
        body: Response body.

    Returns:
        list[str]: Lines in order. Empty body gives an empty list.
    """
    if not body:
        return []
    lines = body.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class MetadataClient:
    """Client for instance-level metadata.

    Built either from ``base_url``/``timeout_s`` or from a prebuilt
    ``MetadataConfig``, never both.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        config: Optional[MetadataConfig] = None,
    ) -> None:
        """Initialize client. No request is sent here.

        Args:
            base_url: Metadata root override. Defaults to the link-local
                address with a fixed API version segment.
            timeout_s: Timeout in seconds for each request, default 5.
            config: Prebuilt config. Exclusive with ``base_url`` and
                ``timeout_s``.

        Raises:
            InvalidBaseURLError: ``base_url`` is malformed.
            ValueError: ``config`` given together with ``base_url`` or ``timeout_s``.
        """
        if config is not None:
            if base_url is not None or timeout_s is not None:
                raise ValueError("pass either config or base_url/timeout_s, not both")
        else:
            config = MetadataConfig(
                base_url=paths.DEFAULT_BASE_URL if base_url is None else base_url,
                timeout_s=DEFAULT_TIMEOUT_S if timeout_s is None else timeout_s,
            )
        self.config = config
        self.transport = MetadataTransport(config)
        self.logger = logging.getLogger(__name__)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def get(self, path: str) -> str:
        """GET any relative metadata path and return the body.

        Args:
            path: Relative path, e.g. ``meta-data/instance-id``.

        Returns:
            str: Response body.

        Raises:
            MetadataError: Request failed, timed out or got a non-success status.
        """
        return self.transport.get_text(path)

    def check_connectivity(self) -> bool:
        """Probe the metadata root.

        Returns:
            bool: True when the service answered with any response, False on
            any transport error or timeout. Never raises.
        """
        return self.transport.probe(paths.ROOT)

    def get_instance_id(self) -> str:
        return self.get(paths.INSTANCE_ID)

    def get_instance_type(self) -> str:
        return self.get(paths.INSTANCE_TYPE)

    def get_machine_image_id(self) -> str:
        return self.get(paths.AMI_ID)

    def get_local_hostname(self) -> str:
        return self.get(paths.LOCAL_HOSTNAME)

    def get_local_ipv4(self) -> str:
        return self.get(paths.LOCAL_IPV4)

    def get_public_hostname(self) -> str:
        return self.get(paths.PUBLIC_HOSTNAME)

    def get_public_ipv4(self) -> str:
        return self.get(paths.PUBLIC_IPV4)

    def get_mac_addresses(self) -> List[str]:
        """Get MAC addresses, one per line of the body, in order."""
        return _split_lines(self.get(paths.MAC))

    def get_hostname(self) -> str:
        return self.get(paths.HOSTNAME)

    def get_kernel_id(self) -> str:
        return self.get(paths.KERNEL_ID)

    def get_security_groups(self) -> List[str]:
        """Get security group names, one per line of the body."""
        return _split_lines(self.get(paths.SECURITY_GROUPS))

    def get_ramdisk_id(self) -> str:
        return self.get(paths.RAMDISK_ID)

    def get_region(self) -> str:
        return self.get(paths.REGION)

    def get_availability_zone(self) -> AvailabilityZoneInfo:
        """Get zone name and zone id.

        Two requests in sequence: name first, then id. The pair is not read
        atomically and may be inconsistent if placement changes in between.

        Returns:
            AvailabilityZoneInfo: Zone name and id.

        Raises:
            MetadataError: Either request failed.
        """
        zone_name = self.get(paths.AVAILABILITY_ZONE)
        zone_id = self.get(paths.AVAILABILITY_ZONE_ID)
        return AvailabilityZoneInfo(zone_name=zone_name, zone_id=zone_id)

    def get_instance_tags(self) -> List[str]:
        """Get instance tag names, one per line of the body."""
        return _split_lines(self.get(paths.INSTANCE_TAGS))

    def get_network_interfaces(self) -> List[NetworkInterfaceClient]:
        """Get one interface client per MAC address.

        Returns:
            list[NetworkInterfaceClient]: Clients in MAC list order, all
            sharing this client's transport.

        Raises:
            MetadataError: MAC list request failed.
        """
        return [
            NetworkInterfaceClient(self.transport, mac_address)
            for mac_address in self.get_mac_addresses()
        ]

    def get_instance_info(self) -> InstanceInfo:
        """Fetch all instance-level fields into one record.

        Requests run one at a time in a fixed order. The first failure is
        re-raised and no partial record is returned.

        Returns:
            InstanceInfo: Composite record.

        Raises:
            MetadataError: Any underlying request failed.
        """
        instance_id = self.get_instance_id()
        instance_type = self.get_instance_type()
        ami_id = self.get_machine_image_id()
        local_hostname = self.get_local_hostname()
        local_ipv4 = self.get_local_ipv4()
        public_hostname = self.get_public_hostname()
        public_ipv4 = self.get_public_ipv4()
        mac_addresses = self.get_mac_addresses()
        hostname = self.get_hostname()
        region = self.get_region()
        availability_zone = self.get_availability_zone()
        ramdisk_id = self.get_ramdisk_id()
        tags = self.get_instance_tags()

        self.logger.debug("instance info collected instance_id=%s", instance_id)
        return InstanceInfo(
            ami_id=ami_id,
            instance_id=instance_id,
            instance_type=instance_type,
            hostname=hostname,
            local_hostname=local_hostname,
            local_ipv4=local_ipv4,
            public_hostname=public_hostname,
            public_ipv4=public_ipv4,
            mac_addresses=mac_addresses,
            region=region,
            availability_zone=availability_zone,
            ramdisk_id=ramdisk_id,
            tags=tags,
        )
