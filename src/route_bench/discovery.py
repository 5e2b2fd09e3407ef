"""Discovery of candidate routes from a directory of tunnel configs."""

from pathlib import Path

from .common.logging import get_logger
from .models import RouteDefinition

logger = get_logger(__name__)

CONFIG_SUFFIX = ".conf"


def discover_routes(configs_dir: Path, direct_route_name: str = "NON-VPN") -> list[RouteDefinition]:
    """Build the route list: the direct route, then one route per config file.

    Config files are ordered by file name and named after their stem.
    A missing or unreadable directory yields only the direct route.

    Args:
        configs_dir: Directory containing ``*.conf`` tunnel definitions
        direct_route_name: Name for the non-tunneled route

    Returns:
        Ordered route definitions, direct route first
    """
    routes = [RouteDefinition(name=direct_route_name)]

    try:
        config_files = sorted(
            path
            for path in Path(configs_dir).iterdir()
            if path.is_file() and path.suffix == CONFIG_SUFFIX
        )
    except OSError as e:
        logger.warning("Config directory not found or not readable", path=str(configs_dir), error=str(e))
        return routes

    for path in config_files:
        if path.stem == direct_route_name:
            logger.warning("Skipping config that shadows the direct route", path=str(path))
            continue
        routes.append(RouteDefinition(name=path.stem, config_path=path))

    logger.info("Discovered tunnel configs", path=str(configs_dir), count=len(routes) - 1)
    return routes
