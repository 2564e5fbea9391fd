##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Top-level argument parser for the `buildfleet` command.

`build_main_parser` creates the parser with the global `--version` and
`--level` options and attaches one subcommand per entry in `ALL_COMMANDS`.
"""

import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from typing import Iterable

from buildfleet import VERSION
from buildfleet.cli.commands import ALL_COMMANDS
from buildfleet.cli.commands.command_entry_point import CommandEntryPoint


DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DESCRIPTION = """Buildfleet reports on the workers of a build cluster.

The worker set is read from a YAML or JSON document and rendered as a
table, a detailed listing, or through a Jinja2 template."""
EPILOG = "Run 'buildfleet <command> --help' for the options of a command."


class HelpParser(ArgumentParser):
    """
    Argument parser that prints its full help text after a usage error.

    Methods:
        error: Report `message` on stderr, print help and exit with status 2.
    """

    def error(self, message: str):
        """
        Report a usage error.

        Args:
            message: The error message from argparse.
        """
        sys.stderr.write(f"error: {message}\n")
        self.print_help()
        sys.exit(2)


def add_commands(parser: ArgumentParser, commands: Iterable[CommandEntryPoint]):
    """
    Attach a required subcommand to `parser` for each command in `commands`.

    Args:
        parser: The top-level parser.
        commands: Command entry points whose `add_parser` registers a subparser.
    """
    subparsers = parser.add_subparsers(dest="subparsers", metavar="<command>", required=True)
    for command in commands:
        command.add_parser(subparsers)


def build_main_parser() -> ArgumentParser:
    """
    Create the `buildfleet` parser.

    Returns:
        A `HelpParser` with the global options and every command in `ALL_COMMANDS`.
    """
    parser = HelpParser(
        prog="buildfleet",
        description=DESCRIPTION,
        formatter_class=RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "-lvl",
        "--level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help="Log level, case-insensitive. Default: %(default)s",
    )
    add_commands(parser, ALL_COMMANDS)
    return parser
