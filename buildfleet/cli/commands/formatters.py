##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
CLI module for listing the available worker report formatters.
"""

from argparse import ArgumentParser, Namespace

from buildfleet import display
from buildfleet.cli.commands.command_entry_point import CommandEntryPoint


class FormattersCommand(CommandEntryPoint):
    """
    Handles `formatters` CLI command.

    Methods:
        add_parser: Adds the `formatters` command to the CLI parser.
        process_command: Prints the registered formatters.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `formatters` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `formatters` command parser will be added.
        """
        formatters: ArgumentParser = subparsers.add_parser("formatters", help="List the available report formatters.")
        formatters.set_defaults(func=self.process_command)

    def process_command(self, args: Namespace):
        """
        CLI command to list worker formatters.

        Args:
            args: Parsed CLI arguments.
        """
        display.print_formatters()
