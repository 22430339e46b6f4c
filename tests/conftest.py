#!/usr/bin/env python3
"""
pytest 配置文件，定义测试用的 fixtures
"""

from __future__ import annotations

import logging
import socket
import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Dict, Iterator, List

import pytest
from loguru import logger


PRIMARY_MAC = "0e:49:61:0f:c3:11"
NIC_ROOT = f"network/interfaces/macs/{PRIMARY_MAC}/"

INSTANCE_RESPONSES: Dict[str, str] = {
    "": "meta-data/\nnetwork/",
    "meta-data/instance-id": "i-1234567890abcdef0",
    "meta-data/instance-type": "m4.xlarge",
    "meta-data/ami-id": "ami-0a887e401f7654935",
    "meta-data/local-hostname": "ip-172-16-34-43.ec2.internal",
    "meta-data/local-ipv4": "172.16.34.43",
    "meta-data/public-hostname": "ec2-192-0-2-54.compute-1.amazonaws.com",
    "meta-data/public-ipv4": "192.0.2.54",
    "meta-data/mac": PRIMARY_MAC,
    "meta-data/hostname": "ip-172-16-34-43.ec2.internal",
    "meta-data/kernel-id": "aki-5c21674b",
    "meta-data/security-groups": "web\ndefault",
    "meta-data/ramdisk-id": "ari-01bb5768",
    "meta-data/placement/region": "us-east-1",
    "meta-data/placement/availability-zone": "us-east-1a",
    "meta-data/placement/availability-zone-id": "use1-az4",
    "meta-data/tags/instance": "Name\nTest",
}

INTERFACE_RESPONSES: Dict[str, str] = {
    NIC_ROOT + "device-number": "0",
    NIC_ROOT + "interface-id": "eni-0f95d3625f5c521cc",
    NIC_ROOT + "local-hostname": "ip-172-16-34-43.ec2.internal",
    NIC_ROOT + "local-ipv4s": "172.16.34.43\n172.16.34.44",
    NIC_ROOT + "mac": PRIMARY_MAC,
    NIC_ROOT + "network-card-index": "0",
    NIC_ROOT + "owner-id": "111122223333",
    NIC_ROOT + "public-hostname": "ec2-192-0-2-54.compute-1.amazonaws.com",
    NIC_ROOT + "public-ipv4s": "192.0.2.54",
    NIC_ROOT + "security-group-ids": "sg-0b07ca5d4ff6a8a0c",
    NIC_ROOT + "security-group": "web",
    NIC_ROOT + "subnet-id": "subnet-0ac62554",
    NIC_ROOT + "subnet-ipv4-cidr-block": "172.16.34.0/24",
    NIC_ROOT + "subnet-ipv6-cidr-blocks": "2001:db8:1234:1a00::/64",
    NIC_ROOT + "vpc-id": "vpc-d295a6a7",
    NIC_ROOT + "vpc-ipv4-cidr-block": "172.16.0.0/16",
    NIC_ROOT + "vpc-ipv4-cidr-blocks": "172.16.0.0/16\n10.0.0.0/16",
    NIC_ROOT + "vpc-ipv6-cidr-blocks": "2001:db8:1234:1a00::/56",
}


@dataclass
class MockImds:
    """Running mock metadata service.

    Attributes:
        base_url: Metadata root served by the mock.
        responses: Relative path to body; edit freely inside a test.
        requests: Relative paths requested so far, in order.
    """

    base_url: str
    responses: Dict[str, str] = field(default_factory=dict)
    requests: List[str] = field(default_factory=list)


def _build_handler(state: MockImds, prefix: str) -> type:
    class _Handler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            relative = self.path[len(prefix):] if self.path.startswith(prefix) else self.path
            state.requests.append(relative)
            body = state.responses.get(relative)
            if body is None:
                self.send_error(404, "Not Found")
                return

            payload = body.encode("utf-8")
            self.send_response(200)
            # Real IMDS replies carry no charset.
            self.send_header("Content-Type", "text/plain")
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)

        def log_message(self, format: str, *args) -> None:  # noqa: A002
            return

    return _Handler


@pytest.fixture
def imds() -> Iterator[MockImds]:
    """Serve fixed metadata bodies on an ephemeral local port."""
    prefix = "/latest/"
    state = MockImds(base_url="")
    state.responses.update(INSTANCE_RESPONSES)
    state.responses.update(INTERFACE_RESPONSES)

    server = ThreadingHTTPServer(("127.0.0.1", 0), _build_handler(state, prefix))
    state.base_url = f"http://127.0.0.1:{server.server_address[1]}{prefix}"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield state
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture
def closed_base_url() -> str:
    """Base URL pointing at a local port nobody listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/latest/"


@pytest.fixture(autouse=True)
def reset_imdsbox_logging() -> Iterator[None]:
    """Undo logger changes made by the command line between tests."""
    yield
    std_logger = logging.getLogger("imdsbox")
    std_logger.handlers = []
    std_logger.setLevel(logging.NOTSET)
    logger.remove()
