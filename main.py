#!/usr/bin/env python3
"""
Customer Table - Command Line Entry Point

Usage:
    python main.py list                                  # Print the customer table
    python main.py add --nombre Ana --apellidos Rojas --ci 1234567
    python main.py -v list                               # Verbose logging

The interactive page is started with: streamlit run dashboard.py
"""

import argparse
import logging
import sys
from typing import Optional

from config import Settings
from core.api_client import CustomerApiClient
from core.controller import CustomerTableController
from core.errors import ValidationError
from core.models import CustomerDraft, UIStatus
from core.state import ui_status
from core.table import to_dataframe

EMPTY_MESSAGE = "No customer records found."

FORM_FIELDS = CustomerDraft.field_names()


def setup_logging(verbose: bool = False, log_file: Optional[str] = "customer_table.log"):
    """Configure logging. Safe to call on every Streamlit rerun."""
    if logging.getLogger().handlers:
        return
    level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Customer Table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py list
  python main.py add --nombre Ana --apellidos Rojas --ci 1234567 --email ana@example.com
        """
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="Print every customer as a table")

    add = commands.add_parser("add", help="Add a new customer, then print the refreshed table")
    for name in FORM_FIELDS:
        add.add_argument("--" + name.replace("_", "-"), dest=name, default=None)

    return parser.parse_args(argv)


def print_table(controller: CustomerTableController) -> int:
    state = controller.state
    status = ui_status(state)
    if status is UIStatus.ERROR:
        print(f"Error: {state.error}", file=sys.stderr)
        return 1
    if status is UIStatus.EMPTY:
        print(EMPTY_MESSAGE)
        return 0
    print(to_dataframe(state.records).to_string())
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    settings = Settings.from_env()
    setup_logging(args.verbose or settings.log_level == "DEBUG", settings.log_file)

    logger = logging.getLogger(__name__)
    logger.info(f"Starting Customer Table ({args.command})")

    controller = CustomerTableController(CustomerApiClient.from_settings(settings))

    if args.command == "list":
        controller.load()
        return print_table(controller)

    controller.open_form()
    for name in FORM_FIELDS:
        value = getattr(args, name)
        if value is not None:
            controller.update_field(name, value)

    try:
        state = controller.submit()
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if state.modal_open:
        print(f"Error: {state.error}", file=sys.stderr)
        return 1

    print(state.notice)
    controller.dismiss_notice()
    return print_table(controller)


if __name__ == "__main__":
    sys.exit(main())
