"""CLI entry point for Trafficbar."""

from __future__ import annotations

import argparse
import logging

from textual.logging import TextualHandler

from trafficbar import __version__
from trafficbar.config import AppConfig
from trafficbar.preferences import parse_hide_list


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trafficbar",
        description="Terminal network throughput indicator",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"trafficbar {__version__}",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to TOML config file",
    )
    parser.add_argument(
        "--interval",
        type=float,
        metavar="SECS",
        help="Sampling interval in seconds (default: 1.5)",
    )
    parser.add_argument(
        "--interface",
        metavar="IFACE",
        help="Only count this interface (default: all except loopback)",
    )
    parser.add_argument(
        "--hide",
        metavar="NAMES",
        help="Comma-separated hide-list, e.g. network_traffic",
    )
    parser.add_argument(
        "--color",
        metavar="COLOR",
        help="Indicator text color",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to this file instead of the Textual console",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)


def configure_logging(config: AppConfig) -> None:
    """Route logging away from the terminal the TUI draws on."""
    if config.log_file:
        handler: logging.Handler = logging.FileHandler(config.log_file)
    else:
        handler = TextualHandler()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        handlers=[handler],
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides: dict = {}
    if args.interval is not None:
        overrides["interval"] = args.interval
    if args.interface:
        overrides["interface"] = args.interface
    if args.hide is not None:
        overrides["hide"] = sorted(parse_hide_list(args.hide))
    if args.color:
        overrides["text_color"] = args.color
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        config = AppConfig.load(config_path=args.config, cli_overrides=overrides)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(config)

    from trafficbar.app import TrafficBarApp

    app = TrafficBarApp(config)
    app.run()


if __name__ == "__main__":
    main()
