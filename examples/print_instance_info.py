#!/usr/bin/env python3
"""
Print instance and interface metadata from inside a cloud instance.

Usage:
    python examples/print_instance_info.py [base_url]
"""

import sys

from imdsbox import MetadataClient, MetadataError


def main() -> int:
    base_url = sys.argv[1] if len(sys.argv) > 1 else None
    client = MetadataClient(base_url=base_url)

    if not client.check_connectivity():
        print(f"metadata service unreachable: {client.base_url}")
        return 1

    try:
        info = client.get_instance_info()
        print(f"{info.instance_id} ({info.instance_type}) in {info.availability_zone.zone_name}")
        for nic in client.get_network_interfaces():
            subnet = nic.get_subnet_info()
            print(f"  {nic.mac_address} {nic.get_interface_id()} subnet={subnet.id} {subnet.ipv4_cidr_block}")
    except MetadataError as exc:
        print(f"metadata request failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
