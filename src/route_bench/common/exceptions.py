"""Custom exceptions for route benchmarking."""


class RouteBenchError(Exception):
    """Base exception for all route benchmark errors."""
    pass


class ConfigurationError(RouteBenchError):
    """Raised when the run configuration or route list is invalid."""
    pass


class ConfigParseError(RouteBenchError):
    """Raised when a tunnel configuration has no usable endpoint."""
    pass


class CommandError(RouteBenchError):
    """Raised when an external command cannot be executed."""
    pass


class BinaryNotFoundError(CommandError):
    """Raised when the command's executable is not found."""
    pass


class CommandTimeoutError(CommandError):
    """Raised when an external command exceeds its timeout.

    ``stdout`` and ``stderr`` hold whatever the command printed before it
    was killed.
    """

    def __init__(self, argv: list[str], timeout: float, stdout: str = "", stderr: str = ""):
        self.argv = argv
        self.timeout = timeout
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"Command timed out after {timeout:.1f}s: {' '.join(argv)}")


class TunnelError(RouteBenchError):
    """Base exception for tunnel lifecycle errors."""
    pass


class TunnelStartError(TunnelError):
    """Raised when tunnel activation fails."""
    pass


class TunnelStopError(TunnelError):
    """Raised when tunnel deactivation fails."""
    pass


class TunnelBusyError(TunnelError):
    """Raised when a tunnel is started while another one is still active."""
    pass
