"""Tests for route and result models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from route_bench.models import (
    ProbeResult,
    RouteDefinition,
    TraceResult,
    TunnelEndpoint,
    TunnelSession,
)


class TestRouteDefinition:
    def test_direct_route(self):
        route = RouteDefinition(name="NON-VPN")
        assert route.config_path is None
        assert not route.uses_tunnel

    def test_tunnel_route(self):
        route = RouteDefinition(name="wg-fra", config_path=Path("configs/wg-fra.conf"))
        assert route.uses_tunnel

    def test_is_immutable(self):
        route = RouteDefinition(name="NON-VPN")
        with pytest.raises(ValidationError):
            route.name = "other"

    def test_name_required(self):
        with pytest.raises(ValidationError):
            RouteDefinition(name="  ")


class TestProbeResult:
    def test_unreachable_has_no_metrics(self):
        result = ProbeResult.unreachable("wg-fra")
        assert result.avg_latency is None
        assert result.hop_count is None
        assert result.last_hop_rtt is None
        assert not result.reachable

    def test_from_probes(self):
        result = ProbeResult.from_probes("wg-fra", 29.0, TraceResult(hop_count=9, last_hop_rtt=28.5))
        assert result == ProbeResult(route="wg-fra", avg_latency=29.0, hop_count=9, last_hop_rtt=28.5)
        assert result.reachable

    def test_incomplete_trace_reports_zero_hops(self):
        result = ProbeResult.from_probes("NON-VPN", None, TraceResult())
        assert result.hop_count == 0
        assert result.last_hop_rtt is None

    def test_negative_latency_rejected(self):
        with pytest.raises(ValidationError):
            ProbeResult(route="A", avg_latency=-1.0)


class TestTunnelEndpoint:
    def test_str(self):
        assert str(TunnelEndpoint(host="203.0.113.7", port=51820)) == "203.0.113.7:51820"

    def test_port_range(self):
        with pytest.raises(ValidationError):
            TunnelEndpoint(host="203.0.113.7", port=0)


class TestTunnelSession:
    def test_config_path_is_absolute(self):
        session = TunnelSession(name="wg-fra", config_path=Path("configs/wg-fra.conf"))
        assert session.config_path.is_absolute()
        assert session.config_path.name == "wg-fra.conf"
