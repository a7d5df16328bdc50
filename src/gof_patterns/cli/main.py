"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the pattern demo service
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from gof_patterns import __version__
from gof_patterns.application.services import PATTERN_NAMES, PatternDemoService
from gof_patterns.cli.formatters import format_output
from gof_patterns.config import ConfigurationManager
from gof_patterns.domain.core.exceptions import PatternError
from gof_patterns.domain.shape import ShapeType
from gof_patterns.infrastructure.logging.logger import get_logger, setup_logging
from gof_patterns.infrastructure.registry import (
    get_behaviour_registry,
    get_builder_registry,
    get_garnish_registry,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="gof-patterns",
        description="Classic object-oriented design patterns, demonstrated",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s run                               # Run every pattern
  %(prog)s run decorator builder             # Run two patterns
  %(prog)s run builder --builder spicy       # Use the spicy pizza builder
  %(prog)s run decorator --garnish ice       # Garnish the drink with ice
  %(prog)s --format json run factory         # Structured output
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )
    parser.add_argument(
        "--format", choices=["text", "json", "yaml"], default="text", help="Output format"
    )
    parser.add_argument(
        "--pause", action="store_true", default=None, help="Wait for Enter before exiting"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Run pattern demos")
    run_parser.add_argument(
        "patterns",
        nargs="*",
        metavar="PATTERN",
        help=f"Patterns to run (default: all). Choices: {', '.join(PATTERN_NAMES)}",
    )
    run_parser.add_argument(
        "--quack", choices=get_behaviour_registry().list_names(), help="Quack behaviour"
    )
    run_parser.add_argument(
        "--builder", choices=get_builder_registry().list_names(), help="Pizza builder"
    )
    run_parser.add_argument(
        "--garnish",
        action="append",
        choices=get_garnish_registry().list_names(),
        help="Garnish for the drink, innermost first (repeatable)",
    )
    run_parser.add_argument(
        "--shape",
        action="append",
        choices=[member.name.lower() for member in ShapeType],
        help="Shape for the factory to draw (repeatable)",
    )

    subparsers.add_parser("list", help="List available patterns")

    return parser.parse_args(argv)


def build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Turn command line options into configuration overrides."""
    return {
        "logging": {"level": args.log_level},
        "demo": {
            "quack_behaviour": getattr(args, "quack", None),
            "pizza_builder": getattr(args, "builder", None),
            "garnishes": getattr(args, "garnish", None),
            "shapes": getattr(args, "shape", None),
            "pause_on_exit": args.pause,
        },
    }


def execute_command(args: argparse.Namespace, config_manager: ConfigurationManager) -> Dict[str, Any]:
    """Execute the parsed command and return data for formatting."""
    if args.command == "list":
        return {"patterns": list(PATTERN_NAMES)}

    service = PatternDemoService(config_manager.get_demo_config())
    results = service.run(args.patterns)
    return {"results": [result.to_dict() for result in results]}


def pause() -> None:
    """Wait for a single line of input, like the classic console demo."""
    try:
        input("Press Enter to exit...")
    except EOFError:
        pass


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        if not args.command:
            print("Error: No command specified. Use --help for usage information.")
            sys.exit(1)

        try:
            config_manager = ConfigurationManager(args.config, build_overrides(args))
            setup_logging(config_manager.get_logging_config())
        except PatternError as e:
            print(f"Error: {e}")
            sys.exit(1)

        logger = get_logger(__name__)

        try:
            result = execute_command(args, config_manager)
            print(format_output(result, args.format))
        except PatternError as e:
            logger.error(f"Pattern error: {e}")
            print(f"Error: {e}")
            sys.exit(1)

        if config_manager.get_demo_config().pause_on_exit:
            pause()

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
