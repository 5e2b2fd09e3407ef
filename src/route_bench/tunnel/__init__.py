"""Tunnel lifecycle and endpoint inspection."""

from .controller import TunnelController
from .endpoint import EndpointInspector, parse_endpoint, read_endpoint

__all__ = [
    "TunnelController",
    "EndpointInspector",
    "parse_endpoint",
    "read_endpoint",
]
