##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Load a worker set that was fetched from the cluster controller.

The document may be YAML or JSON and either be a list of workers or a
mapping with a `workers` list, e.g.:

    workers:
      - id: w1
        platforms: [linux/amd64, {os: linux, architecture: arm, variant: v7}]
        labels: {org.mobyproject.buildkit.worker.executor: oci}
        gc_policy:
          - all: true
            keep_duration: 48h
            max_used_space: 10000000000
"""

import logging
import sys
from typing import Any, List

import yaml

from buildfleet.exceptions import WorkerDataError
from buildfleet.workers.models import WorkerRecord


LOG = logging.getLogger("buildfleet")

STDIN_PATH = "-"


def parse_workers(data: Any) -> List[WorkerRecord]:
    """
    Turn a decoded document into a worker set, keeping the document's order.

    Args:
        data: The decoded YAML/JSON content.

    Returns:
        The list of workers.

    Raises:
        WorkerDataError: If the document does not describe a worker set.
    """
    if data is None:
        return []
    if isinstance(data, dict):
        if "workers" not in data:
            raise WorkerDataError("Worker document is a mapping without a 'workers' key.")
        data = data["workers"] or []
    if not isinstance(data, list):
        raise WorkerDataError(f"Expected a list of workers, got {type(data).__name__}.")
    return [WorkerRecord.from_dict(entry) for entry in data]


def load_workers(path: str = STDIN_PATH) -> List[WorkerRecord]:
    """
    Read and parse a worker document from a file or standard input.

    Args:
        path: Path to the document, or `-` for standard input.

    Returns:
        The list of workers.

    Raises:
        WorkerDataError: If the document is not valid YAML/JSON or not a worker set.
    """
    try:
        if path == STDIN_PATH:
            LOG.debug("Reading worker set from standard input.")
            data = yaml.safe_load(sys.stdin)
        else:
            LOG.debug(f"Reading worker set from {path}.")
            with open(path, "r") as _file:
                data = yaml.safe_load(_file)
    except yaml.YAMLError as exc:
        raise WorkerDataError(f"Could not parse worker document {path}: {exc}") from exc

    workers = parse_workers(data)
    LOG.debug(f"Loaded {len(workers)} worker(s).")
    return workers
