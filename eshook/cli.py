"""
eshook - ship log messages to a search backend from the command line.

Builds the hook from environment / .env configuration, attaches it to the
root logger and logs a test message. Useful for checking that a cluster is
reachable and that the destination index gets provisioned.

Usage:
    eshook [OPTIONS]

Options:
    --config PATH       Path to .env config file
    --log-level LEVEL   Console logging level (default: INFO)
    --message TEXT      Message to ship (default: "eshook test message")
    --count N           Number of messages to ship (default: 1)
    --check             Only provision the index, ship nothing
"""
import sys
import argparse
from typing import List, Optional

from prometheus_client import CollectorRegistry

from .__version__ import VERSION, SERVICE_NAME
from .config import build_hook, load_config
from .logging import configure_logging, get_logger, install_hook
from .metrics import HookMetrics
from .utils.errors import ConfigError


# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="eshook",
        description=f"{SERVICE_NAME} v{VERSION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  eshook --check
  eshook --config /path/to/.env --message "deploy finished" --count 3
        """
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to .env configuration file (default: environment only)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Console logging level (default: INFO)"
    )

    parser.add_argument(
        "--message",
        type=str,
        default="eshook test message",
        help="Message to ship"
    )

    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of messages to ship (default: 1)"
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Only provision the destination index"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"{SERVICE_NAME} v{VERSION}"
    )

    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count must be at least 1")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0=success, 1=backend error, 2=config error)
    """
    args = parse_args(argv)

    configure_logging(level=args.log_level, json_format=False)
    logger = get_logger("eshook.cli")

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"\n[ERROR] Configuration error: {e}\n", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    registry = CollectorRegistry()
    metrics = HookMetrics(registry=registry)

    try:
        hook = build_hook(config, metrics=metrics)
    except Exception as e:
        print(f"\n[ERROR] Backend error: {e}\n", file=sys.stderr)
        return EXIT_ERROR

    index = hook.get_or_create_index()
    print(f"Index ready: {index} ({', '.join(config.backend.urls)})")
    if args.check:
        return EXIT_SUCCESS

    root = install_hook(hook)
    try:
        for sequence in range(args.count):
            logger.info(args.message, extra={"sequence": sequence, "source": "eshook-cli"})
    finally:
        root.removeHandler(hook)
        hook.cancel()

    failed = registry.get_sample_value("eshook_documents_total", {"status": "error"}) or 0
    if failed:
        print(f"\n[ERROR] {int(failed)} of {args.count} messages were not indexed\n", file=sys.stderr)
        return EXIT_ERROR

    print(f"Shipped {args.count} message(s) to {index}")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
