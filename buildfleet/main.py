##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Main entry point into Buildfleet's codebase.
"""

import logging
import sys
import traceback

from buildfleet.cli.argparse_main import build_main_parser
from buildfleet.config.configfile import get_config
from buildfleet.log_formatter import setup_logging


LOG = logging.getLogger("buildfleet")


def main():
    """
    Entry point for the Buildfleet command-line interface (CLI) operations.

    This function sets up the argument parser, loads the app configuration,
    initializes logging, and executes the selected command. Any error raised
    by the command is logged and turned into a non-zero exit status.
    """
    parser = build_main_parser()
    if len(sys.argv) == 1:
        parser.print_help(sys.stdout)
        return 1
    args = parser.parse_args()

    try:
        args.config = get_config()
        setup_logging(logger=LOG, log_level=args.level.upper(), colors=bool(args.config.logging.colors))
        args.func(args)
        # pylint complains that this exception is too broad - being at the literal top of the program stack, it's ok.
    except Exception as excpt:  # pylint: disable=broad-except
        LOG.debug(traceback.format_exc())
        LOG.error(str(excpt))
        sys.exit(1)

    sys.exit()


if __name__ == "__main__":
    main()
