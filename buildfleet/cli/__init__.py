##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Buildfleet CLI Package.

Subpackages:
    commands: Contains all command implementations for the Buildfleet CLI.

Modules:
    argparse_main: Sets up the top-level argument parser and integrates all
        registered CLI subcommands into the `buildfleet` CLI interface.
"""
