##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
CLI module for displaying configuration information.

This module defines the `InfoCommand` class, which handles the `info` subcommand.
The command shows the version, where the app config was read from, and the
effective report defaults. Useful for debugging a setup.
"""

import logging
from argparse import ArgumentParser, Namespace

from buildfleet import display
from buildfleet.cli.commands.command_entry_point import CommandEntryPoint


LOG = logging.getLogger("buildfleet")


class InfoCommand(CommandEntryPoint):
    """
    Handles `info` CLI command for viewing configuration information.

    Methods:
        add_parser: Adds the `info` command to the CLI parser.
        process_command: Processes the CLI input and dispatches the appropriate action.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `info` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `info` command parser will be added.
        """
        info: ArgumentParser = subparsers.add_parser(
            "info",
            help="display info about the buildfleet configuration. Useful for debugging.",
        )
        info.set_defaults(func=self.process_command)

    def process_command(self, args: Namespace):
        """
        CLI command to print configuration info.

        Args:
            args: Parsed CLI arguments.
        """
        display.print_info(args.config)
