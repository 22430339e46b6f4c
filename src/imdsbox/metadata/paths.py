#!/usr/bin/env python3

"""Relative paths served by the instance metadata service."""

DEFAULT_BASE_URL = "http://169.254.169.254/2022-09-24/"

# Base path itself, used for the reachability probe.
ROOT = ""

INSTANCE_ID = "meta-data/instance-id"
INSTANCE_TYPE = "meta-data/instance-type"
AMI_ID = "meta-data/ami-id"
LOCAL_HOSTNAME = "meta-data/local-hostname"
LOCAL_IPV4 = "meta-data/local-ipv4"
PUBLIC_HOSTNAME = "meta-data/public-hostname"
PUBLIC_IPV4 = "meta-data/public-ipv4"
MAC = "meta-data/mac"
HOSTNAME = "meta-data/hostname"
KERNEL_ID = "meta-data/kernel-id"
SECURITY_GROUPS = "meta-data/security-groups"
RAMDISK_ID = "meta-data/ramdisk-id"
REGION = "meta-data/placement/region"
AVAILABILITY_ZONE = "meta-data/placement/availability-zone"
AVAILABILITY_ZONE_ID = "meta-data/placement/availability-zone-id"
INSTANCE_TAGS = "meta-data/tags/instance"

# Per-interface fields, appended to ``network/interfaces/macs/{mac}/``.
INTERFACE_ROOT = "network/interfaces/macs/{mac}/"

NIC_DEVICE_NUMBER = "device-number"
NIC_INTERFACE_ID = "interface-id"
NIC_LOCAL_HOSTNAME = "local-hostname"
NIC_LOCAL_IPV4S = "local-ipv4s"
NIC_MAC = "mac"
NIC_NETWORK_CARD_INDEX = "network-card-index"
NIC_OWNER_ID = "owner-id"
NIC_PUBLIC_HOSTNAME = "public-hostname"
NIC_PUBLIC_IPV4S = "public-ipv4s"
NIC_SECURITY_GROUP_IDS = "security-group-ids"
NIC_SECURITY_GROUP = "security-group"
NIC_SUBNET_ID = "subnet-id"
NIC_SUBNET_IPV4_CIDR_BLOCK = "subnet-ipv4-cidr-block"
NIC_SUBNET_IPV6_CIDR_BLOCKS = "subnet-ipv6-cidr-blocks"
NIC_VPC_ID = "vpc-id"
NIC_VPC_IPV4_CIDR_BLOCK = "vpc-ipv4-cidr-block"
NIC_VPC_IPV4_CIDR_BLOCKS = "vpc-ipv4-cidr-blocks"
NIC_VPC_IPV6_CIDR_BLOCKS = "vpc-ipv6-cidr-blocks"


def interface_path(mac_address: str, field: str) -> str:
    """Build the relative path of one network interface field.

    Args:
        mac_address: MAC address used as the path key.
        field: Field name under the interface, e.g. ``device-number``.

    Returns:
        str: Relative path such as ``network/interfaces/macs/<mac>/device-number``.
    """
    return INTERFACE_ROOT.format(mac=mac_address) + field
