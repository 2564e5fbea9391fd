##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
CLI module for listing the workers of a build cluster.

This module defines the `WorkersCommand` class, which implements the
`workers` subcommand. The command reads a worker set that was fetched from
the cluster controller and prints it as a table, a verbose dump, or through
a user-supplied template.
"""

import logging
import sys
from argparse import ArgumentParser, Namespace

from buildfleet.cli.commands.command_entry_point import CommandEntryPoint
from buildfleet.workers.loader import STDIN_PATH, load_workers
from buildfleet.workers.reporter import ReportConfig, report_workers


LOG = logging.getLogger("buildfleet")


class WorkersCommand(CommandEntryPoint):
    """
    Handles `workers` CLI command for listing cluster workers.

    Methods:
        add_parser: Adds the `workers` command to the CLI parser.
        process_command: Processes the CLI input and renders the report.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `workers` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `workers` command parser will be added.
        """
        workers: ArgumentParser = subparsers.add_parser("workers", help="List workers.")
        workers.set_defaults(func=self.process_command)
        workers.add_argument(
            "-i",
            "--input",
            type=str,
            default=STDIN_PATH,
            help="YAML or JSON document with the worker set to report on, '-' for stdin. Default: %(default)s",
        )
        workers.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            default=None,
            help="Verbose output.",
        )
        workers.add_argument(
            "--format",
            type=str,
            default=None,
            help="Format the output using the given Jinja2 template, e.g. '{{ workers | json }}'.",
        )

    def process_command(self, args: Namespace):
        """
        CLI command for listing workers.

        Flags given on the command line take precedence over the `workers`
        section of the app config.

        Args:
            args: Parsed command-line arguments, which may include:\n
                - `input`: Path to the worker document, or `-` for stdin.
                - `verbose`: Show the detailed view.
                - `format`: Template to render instead of the table/verbose views.
                - `config`: The loaded app `Config`.
        """
        defaults = args.config.workers
        verbose = defaults.verbose if args.verbose is None else args.verbose
        template = args.format if args.format is not None else defaults.format

        workers = load_workers(args.input)
        report_workers(workers, ReportConfig(template=template, verbose=bool(verbose)), sys.stdout)
