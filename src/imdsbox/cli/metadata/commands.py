"""Metadata CLI commands."""

from __future__ import annotations

import json
from typing import Any, List, Tuple

import click

from imdsbox.metadata.client import MetadataClient
from imdsbox.metadata.errors import MetadataError
from imdsbox.metadata.network_interface import NetworkInterfaceClient
from imdsbox.metadata.types import InstanceInfo, NetworkInterfaceInfo
from imdsbox.utils.richutils import RichUtils


def _describe_interface(nic: NetworkInterfaceClient) -> NetworkInterfaceInfo:
    """Collect every field of one interface, one request at a time.

    Args:
        nic: Interface client.

    Returns:
        NetworkInterfaceInfo: Interface record.
    """
    return NetworkInterfaceInfo(
        mac_address=nic.mac_address,
        device_number=nic.get_device_number(),
        interface_id=nic.get_interface_id(),
        local_hostname=nic.get_local_hostname(),
        local_ipv4s=nic.get_local_ipv4s(),
        mac=nic.get_mac(),
        network_card_index=nic.get_network_card_index(),
        owner_id=nic.get_owner_id(),
        public_hostname=nic.get_public_hostname(),
        public_ipv4s=nic.get_public_ipv4s(),
        security_group=nic.get_security_group_info(),
        subnet=nic.get_subnet_info(),
        vpc=nic.get_vpc_info(),
    )


def _instance_rows(info: InstanceInfo) -> List[Tuple[str, Any]]:
    return [
        ("instance_id", info.instance_id),
        ("instance_type", info.instance_type),
        ("ami_id", info.ami_id),
        ("hostname", info.hostname),
        ("local_hostname", info.local_hostname),
        ("local_ipv4", info.local_ipv4),
        ("public_hostname", info.public_hostname),
        ("public_ipv4", info.public_ipv4),
        ("mac_addresses", info.mac_addresses),
        ("region", info.region),
        ("availability_zone", info.availability_zone.zone_name),
        ("availability_zone_id", info.availability_zone.zone_id),
        ("ramdisk_id", info.ramdisk_id),
        ("tags", info.tags),
    ]


def _interface_rows(info: NetworkInterfaceInfo) -> List[Tuple[str, Any]]:
    return [
        ("device_number", info.device_number),
        ("interface_id", info.interface_id),
        ("mac", info.mac),
        ("network_card_index", info.network_card_index),
        ("owner_id", info.owner_id),
        ("local_hostname", info.local_hostname),
        ("local_ipv4s", info.local_ipv4s),
        ("public_hostname", info.public_hostname),
        ("public_ipv4s", info.public_ipv4s),
        ("security_group_ids", info.security_group.id),
        ("security_groups", info.security_group.name),
        ("subnet_id", info.subnet.id),
        ("subnet_ipv4_cidr_block", info.subnet.ipv4_cidr_block),
        ("subnet_ipv6_cidr_block", info.subnet.ipv6_cidr_block),
        ("vpc_id", info.vpc.id),
        ("vpc_ipv4_cidr_block", info.vpc.ipv4_cidr_block),
        ("vpc_ipv4_cidr_blocks", info.vpc.ipv4_cidr_blocks),
        ("vpc_ipv6_cidr_blocks", info.vpc.ipv6_cidr_blocks),
    ]


@click.command("check")
@click.pass_obj
def check_command(client: MetadataClient) -> None:
    """Check whether the metadata service is reachable.

    Args:
        client: Metadata client from the group context.
    """
    if client.check_connectivity():
        click.echo(f"reachable: {client.base_url}")
        return
    click.echo(f"unreachable: {client.base_url}", err=True)
    raise SystemExit(1)


@click.command("instance")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON instead of a table.")
@click.pass_obj
def instance_command(client: MetadataClient, as_json: bool) -> None:
    """Show instance-level metadata.

    Args:
        client: Metadata client from the group context.
        as_json: Whether to print JSON.
    """
    try:
        info = client.get_instance_info()
    except MetadataError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(info.to_dict(), indent=2))
        return
    RichUtils().print_fields(title=f"instance {info.instance_id}", rows=_instance_rows(info))


@click.command("interfaces")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON instead of tables.")
@click.pass_obj
def interfaces_command(client: MetadataClient, as_json: bool) -> None:
    """Show metadata of every network interface.

    Args:
        client: Metadata client from the group context.
        as_json: Whether to print JSON.
    """
    try:
        interfaces = [_describe_interface(nic) for nic in client.get_network_interfaces()]
    except MetadataError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps([info.to_dict() for info in interfaces], indent=2))
        return
    rich_utils = RichUtils()
    for info in interfaces:
        rich_utils.print_fields(title=f"interface {info.mac_address}", rows=_interface_rows(info))


@click.command("get")
@click.argument("path")
@click.pass_obj
def get_command(client: MetadataClient, path: str) -> None:
    """Print the raw body of one metadata PATH, e.g. meta-data/instance-id.

    Args:
        client: Metadata client from the group context.
        path: Relative metadata path.
    """
    try:
        body = client.get(path)
    except MetadataError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(body)
