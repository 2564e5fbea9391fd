##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Worker formatter base module for rendering worker inventories.

This module defines the abstract base class `WorkerFormatter`, which provides a
standard interface for rendering a worker set to a text sink. Formatters are
pure functions of the worker set they receive: they keep no state between
calls and never reorder the workers themselves.

Intended Usage:\n
    Subclasses of `WorkerFormatter` (e.g. the table or verbose views)
    implement `format_and_display` and use `write` for any direct output
    so that sink failures surface as `SinkWriteError`.
"""

from abc import ABC, abstractmethod
from typing import List, TextIO

from buildfleet.exceptions import SinkWriteError
from buildfleet.workers.models import WorkerRecord


class WorkerFormatter(ABC):
    """
    Abstract base class for rendering a worker set.

    Methods:
        format_and_display: Abstract method that renders the worker set to a
            sink. Must be implemented by subclasses.
        write: Write text to a sink, translating I/O failures.
    """

    @abstractmethod
    def format_and_display(self, workers: List[WorkerRecord], sink: TextIO):
        """
        Render the worker set to `sink`.

        Args:
            workers: The workers to render, in the order they should appear.
            sink: Text stream receiving the output.
        """
        raise NotImplementedError("Subclasses of `WorkerFormatter` must implement a `format_and_display` method.")

    @staticmethod
    def write(sink: TextIO, text: str):
        """
        Write `text` to `sink`.

        Args:
            sink: Text stream receiving the output.
            text: The text to write.

        Raises:
            SinkWriteError: If the sink rejects the write or is already closed.
        """
        try:
            sink.write(text)
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"Failed to write report output: {exc}") from exc
