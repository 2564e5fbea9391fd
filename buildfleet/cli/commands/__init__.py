##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Buildfleet CLI Commands Package.

Each module encapsulates the argument parsing and logic of one command,
built around the `CommandEntryPoint` interface.

Modules:
    command_entry_point: Defines the abstract base class `CommandEntryPoint` for all CLI commands.
    formatters: Implements the `formatters` command listing the report formatters.
    info: Implements the `info` command for displaying configuration diagnostics.
    workers: Implements the `workers` command that reports on cluster workers.
"""

from buildfleet.cli.commands.formatters import FormattersCommand
from buildfleet.cli.commands.info import InfoCommand
from buildfleet.cli.commands.workers import WorkersCommand


# Keep these in alphabetical order
ALL_COMMANDS = [
    FormattersCommand(),
    InfoCommand(),
    WorkersCommand(),
]
