"""Command-line entry point."""

import argparse
import asyncio
import sys
from pathlib import Path

from rich.console import Console

from .common.exceptions import RouteBenchError
from .common.logging import get_logger, setup_logging
from .common.process import CommandRunner
from .config import BenchConfig
from .discovery import discover_routes
from .display import render_results
from .models import ProbeResult
from .orchestrator import RouteOrchestrator
from .platform import PlatformAdapter, detect_platform
from .selector import select_best_route

logger = get_logger(__name__)

PRIVILEGE_CHECK_TIMEOUT = 5.0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="route-bench",
        description="Compare latency to a target over the direct route and each WireGuard tunnel.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        help="Target IP or hostname (prompted for when omitted)",
    )
    parser.add_argument(
        "--configs-dir",
        type=Path,
        default=Path("configs"),
        help="Directory containing *.conf tunnel definitions (default: ./configs)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit log events as JSON",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also append a DEBUG log, including every command run, to this file",
    )
    return parser


def prompt_target(console: Console) -> str:
    """Ask for a target interactively; EOF counts as an empty answer."""
    try:
        return console.input("Enter target IP or hostname: ").strip()
    except EOFError:
        return ""


async def run_benchmark(
    target: str,
    config: BenchConfig,
    adapter: PlatformAdapter,
    runner: CommandRunner | None = None,
) -> tuple[list[ProbeResult], ProbeResult | None]:
    """Evaluate all discovered routes and pick the best one."""
    runner = runner or CommandRunner()

    if await adapter.is_privileged(runner, PRIVILEGE_CHECK_TIMEOUT):
        logger.info("Running with administrator privileges")
    else:
        logger.warning("Not running as administrator; tunnel starts will likely fail")

    routes = discover_routes(config.configs_dir, config.direct_route_name)
    orchestrator = RouteOrchestrator(adapter=adapter, config=config, runner=runner)
    results = await orchestrator.evaluate(target, routes)
    return results, select_best_route(results)


def main(argv: list[str] | None = None) -> int:
    """Run the benchmark and print the results table."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, json_format=args.json_logs, log_file=args.log_file)
    console = Console()

    config = BenchConfig(configs_dir=args.configs_dir)
    adapter = detect_platform()
    logger.info("Route benchmark starting", platform=adapter.name)

    target = (args.target or "").strip() or prompt_target(console)
    if not target:
        console.print("Error: Target cannot be empty.", style="red")
        return 1

    logger.info("Target selected", target=target)
    try:
        results, best = asyncio.run(run_benchmark(target, config, adapter))
    except KeyboardInterrupt:
        logger.warning("Interrupted; a tunnel may still be active")
        return 130
    except RouteBenchError as e:
        logger.error("Benchmark failed", error=str(e))
        return 1

    render_results(results, best, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
