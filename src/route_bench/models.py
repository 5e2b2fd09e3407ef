"""Route, tunnel and probe result models using Pydantic for validation."""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RouteDefinition(BaseModel):
    """A candidate path to the target: direct, or through one tunnel."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, description="Unique route name")
    config_path: Path | None = Field(
        default=None, description="Tunnel configuration; None for the direct route"
    )

    @property
    def uses_tunnel(self) -> bool:
        """True if evaluating this route requires an active tunnel."""
        return self.config_path is not None


class TraceResult(BaseModel):
    """Hop summary parsed from path-trace output."""

    model_config = ConfigDict(frozen=True)

    hop_count: int = Field(default=0, ge=0, description="Number of hop lines")
    last_hop_rtt: float | None = Field(
        default=None, ge=0, description="Last RTT on the final hop line, in ms"
    )

    @property
    def complete(self) -> bool:
        """True if at least one hop was reported."""
        return self.hop_count > 0


class ProbeResult(BaseModel):
    """Outcome of testing one route. None means unreachable or unparseable."""

    model_config = ConfigDict(frozen=True)

    route: str = Field(min_length=1, description="Route name")
    avg_latency: float | None = Field(default=None, ge=0, description="Average RTT in ms")
    hop_count: int | None = Field(default=None, ge=0, description="Hops from path trace")
    last_hop_rtt: float | None = Field(default=None, ge=0, description="Final hop RTT in ms")

    @classmethod
    def unreachable(cls, route: str) -> "ProbeResult":
        """Result for a route that could not be probed at all."""
        return cls(route=route)

    @classmethod
    def from_probes(
        cls, route: str, avg_latency: float | None, trace: TraceResult
    ) -> "ProbeResult":
        """Combine a latency measurement and a path trace."""
        return cls(
            route=route,
            avg_latency=avg_latency,
            hop_count=trace.hop_count,
            last_hop_rtt=trace.last_hop_rtt,
        )

    @property
    def reachable(self) -> bool:
        """True if a latency value was obtained."""
        return self.avg_latency is not None


class TunnelEndpoint(BaseModel):
    """Remote address a tunnel connects to."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    host: str = Field(min_length=1, description="Endpoint host or IP")
    port: int = Field(ge=1, le=65535, description="Endpoint UDP port")

    def __str__(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


class TunnelSession(BaseModel):
    """Handle for the tunnel that is currently active."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Tunnel name")
    config_path: Path = Field(description="Configuration the tunnel was started from")
    started_at: datetime = Field(
        default_factory=datetime.now, description="Activation timestamp"
    )

    @field_validator("config_path")
    @classmethod
    def validate_config_path(cls, v: Path) -> Path:
        """Store the absolute path so teardown does not depend on the cwd."""
        return v.absolute()
