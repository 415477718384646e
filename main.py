"""
heatpath - Entry Point

Reads a heat-loss grid and prints the cheapest path cost from the
top-left to the bottom-right cell under one or all movement policies.

Example:
    python main.py input.txt
    python main.py input.txt --policy minimum_run --show-path
    cat input.txt | python main.py --debug
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from heatpath.search import (
    ALL_POLICIES,
    FormatError,
    SearchContext,
    find_cheapest_path,
    get_policy_info,
    get_policy_names,
    select_policies,
)
from heatpath.settings import load_settings, save_settings

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure root logging for console output."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


class Application:
    """
    CLI application controller.

    Merges saved settings with command line flags, reads the grid and
    runs the selected policies.
    """

    def __init__(self, args: argparse.Namespace):
        """
        Initialize the application.

        Args:
            args: Parsed command line arguments (override saved settings)
        """
        self.args = args
        self.settings = load_settings()

        self.debug_mode = args.debug or self.settings.get("debug_enabled", False)
        self.policy_name = args.policy or self.settings.get("policy_name") or ALL_POLICIES
        self.input_path = args.input or self.settings.get("input_path")

    def _read_input(self) -> str:
        if self.input_path in (None, "-"):
            logger.debug("Reading grid from stdin")
            return sys.stdin.read()
        logger.debug(f"Reading grid from {self.input_path}")
        return Path(self.input_path).read_text(encoding="utf-8")

    def _save_settings(self) -> None:
        self.settings["policy_name"] = self.policy_name
        self.settings["debug_enabled"] = self.debug_mode
        save_settings(self.settings)
        logger.info(f"Settings saved (policy={self.policy_name}, debug={self.debug_mode})")

    def run(self) -> int:
        """
        Run the application.

        Returns:
            Exit code
        """
        if self.args.list_policies:
            for info in get_policy_info():
                print(f"{info['name']}: {info['description']}")
            return 0

        try:
            policies = select_policies(self.policy_name)
        except ValueError as e:
            logger.error(str(e))
            return 1

        if self.args.save_settings:
            self._save_settings()

        try:
            context = SearchContext.from_text(self._read_input())
        except FormatError as e:
            logger.error(f"Invalid grid: {e}")
            return 1
        except OSError as e:
            logger.error(f"Failed to read input: {e}")
            return 1

        logger.info(f"Loaded {context.grid.height}x{context.grid.width} grid")

        for policy in policies:
            name = policy.name
            result = find_cheapest_path(context, policy)
            answer = result.cost if result.is_reachable else "unreachable"
            print(f"{name}: {answer}")
            logger.debug(
                f"{name}: {result.metrics.nodes_expanded} expanded, "
                f"{result.metrics.nodes_pushed} pushed, "
                f"{result.metrics.computation_time_ms:.1f}ms"
            )
            if self.args.show_path and result.is_reachable:
                print(result.render(context.grid))

        return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="heatpath - Cheapest path through a heat-loss grid"
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Grid file ('-' for stdin; default: saved input_path or stdin)"
    )
    parser.add_argument(
        "--policy", "-p",
        choices=get_policy_names() + [ALL_POLICIES],
        help="Movement policy to run (default: saved setting or all)"
    )
    parser.add_argument(
        "--show-path",
        action="store_true",
        help="Print the grid with the cheapest path drawn in"
    )
    parser.add_argument(
        "--list-policies",
        action="store_true",
        help="List available policies and exit"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Remember the selected policy and debug flag in config.json"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the solver."""
    args = parse_args(argv)

    application = Application(args)
    configure_logging(application.debug_mode)
    return application.run()


if __name__ == "__main__":
    sys.exit(main())
