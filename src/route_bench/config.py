"""Benchmark run configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BenchConfig(BaseModel):
    """Pydantic configuration for probe timing, retries and tunnel handling.

    All durations are in seconds.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )

    ping_count: int = Field(default=4, ge=1, le=100, description="Echo requests per latency probe")
    ping_retries: int = Field(default=2, ge=1, le=10, description="Latency probe attempts")
    ping_retry_delay: float = Field(default=1.0, ge=0.0, le=60.0, description="Pause between latency attempts")
    ping_timeout: float = Field(default=30.0, gt=0.0, le=300.0, description="Latency probe timeout")
    endpoint_ping_timeout: float = Field(default=10.0, gt=0.0, le=300.0, description="Tunnel endpoint probe timeout")

    trace_timeout: float = Field(default=90.0, gt=0.0, le=600.0, description="Path trace timeout")
    trace_wait: float = Field(default=1.0, gt=0.0, le=30.0, description="Per-hop reply wait")

    resolve_timeout: float = Field(default=5.0, gt=0.0, le=60.0, description="Reverse lookup timeout")

    tunnel_timeout: float = Field(default=60.0, gt=0.0, le=600.0, description="Tunnel up/down timeout")
    stabilization_delay: float = Field(default=5.0, ge=0.0, le=120.0, description="Wait after tunnel start")

    configs_dir: Path = Field(default=Path("configs"), description="Directory with *.conf tunnel definitions")
    direct_route_name: str = Field(default="NON-VPN", min_length=1, max_length=64, description="Name of the direct route")

    @field_validator("direct_route_name")
    @classmethod
    def validate_route_name(cls, v: str) -> str:
        """Reject names that would break log and table output."""
        if any(ch.isspace() for ch in v):
            raise ValueError("Route name must not contain whitespace")
        return v
