#!/usr/bin/env python3
"""
Dynamic Parameters - Terminal entry point

Edits a small set of bounded integer parameters in the terminal,
re-prompting until every value is valid, then saves them to the
JSON preferences file.

Usage:
    python src/main.py                      # use config/config.yaml
    python src/main.py --prefs my.json      # override preferences file
    python src/main.py --reset              # ignore saved values
"""

import argparse
import sys
from typing import List, Optional

from components.forms import TerminalForm
from managers.config_manager import ConfigManager
from models.enums import LogCategory
from models.parameters import BoundedIntegerParameter, INT_MAX, INT_MIN
from services.dialog_session import DialogSession
from services.parameter_registry import create_parameter
from services.preferences_store import JsonPreferencesStore
from utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)

DEMO_NAMESPACE = "demo.Deconvolve"


def build_parameters(store: JsonPreferencesStore) -> List[BoundedIntegerParameter]:
    """Demo parameters covering each kind of bound"""
    iterations = create_parameter("int", 10, "Iterations", prefs=store)
    iterations.set_bounds(1, INT_MAX)

    radius = create_parameter("int", 3, "Radius", "px", prefs=store)
    radius.set_bounds(0, 50)

    offset = create_parameter("int", 0, "Offset", "px", prefs=store)
    offset.set_bounds(INT_MIN, 255)

    return [iterations, radius, offset]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit bounded integer parameters in the terminal")
    parser.add_argument("--config", default="config/config.yaml",
                        help="config file (relative to src/ unless absolute)")
    parser.add_argument("--prefs", default=None, help="preferences JSON file (overrides config)")
    parser.add_argument("--reset", action="store_true", help="start from defaults, ignoring saved values")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    config = ConfigManager(config_path=args.config)
    config.load()
    configure_logger(config.log_level, config.use_colors)

    store = JsonPreferencesStore(args.prefs or config.preferences_path)
    session = DialogSession(build_parameters(store), DEMO_NAMESPACE)
    if not args.reset:
        session.load()

    def next_form() -> TerminalForm:
        for error in session.errors():
            print(f"  ! {error}")
        return TerminalForm()

    if not session.run(next_form, max_attempts=config.max_attempts):
        for error in session.errors():
            print(f"  ! {error}")
        log.error("Parameters not saved", errors=len(session.errors()))
        return 1

    session.save()
    for param in session.parameters:
        units = f" {param.units}" if param.units else ""
        print(f"{param.label} = {param.get_value()}{units}")
    log.info("Parameters saved", path=str(store.path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
