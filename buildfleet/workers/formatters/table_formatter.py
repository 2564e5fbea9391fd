##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Compact table view of a worker set: one row per worker with its ID and the
platforms it can build for.
"""

import logging
from typing import List, TextIO

from buildfleet.tabwriter import TabWriter
from buildfleet.workers.formatters.worker_formatter import WorkerFormatter
from buildfleet.workers.models import WorkerRecord
from buildfleet.workers.platforms import join_platforms


LOG = logging.getLogger("buildfleet")


class TableWorkerFormatter(WorkerFormatter):
    """
    Tab-aligned `ID`/`PLATFORMS` table. IDs are never truncated.
    """

    def format_and_display(self, workers: List[WorkerRecord], sink: TextIO):
        """
        Write the header row and one row per worker, then align and flush.

        Args:
            workers: The workers to render, in input order.
            sink: Text stream receiving the table.
        """
        LOG.debug(f"Rendering {len(workers)} worker(s) as a table.")
        tw = TabWriter(sink)
        try:
            tw.write("ID\tPLATFORMS\n")
            for worker in workers:
                tw.write(f"{worker.id}\t{join_platforms(worker.platforms)}\n")
        finally:
            tw.flush()
