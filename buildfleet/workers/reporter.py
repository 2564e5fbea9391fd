##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Entry point for rendering a worker inventory.

`report_workers` picks exactly one formatter for a worker set:\n
    - a template, when one is given (any verbose request is ignored)
    - the verbose view, when requested
    - the compact table otherwise

Errors raised by the chosen formatter propagate unchanged to the caller.
"""

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from buildfleet.workers.formatters.formatter_factory import worker_formatter_factory
from buildfleet.workers.formatters.worker_formatter import WorkerFormatter
from buildfleet.workers.models import WorkerRecord


LOG = logging.getLogger("buildfleet")


@dataclass(frozen=True)
class ReportConfig:
    """
    Presentation options for a worker report.

    Attributes:
        template: Optional user template; takes precedence over everything else.
        verbose: Whether to show the detailed view when no template is given.
    """

    template: Optional[str] = None
    verbose: bool = False


def select_formatter(config: ReportConfig) -> WorkerFormatter:
    """
    Create the formatter matching `config`.

    Args:
        config: The presentation options.

    Returns:
        The template, verbose or table formatter.
    """
    if config.template:
        if config.verbose:
            LOG.debug("Ignoring --verbose")
        return worker_formatter_factory.create("template", {"template": config.template})
    if config.verbose:
        return worker_formatter_factory.create("verbose")
    return worker_formatter_factory.create("table")


def report_workers(workers: List[WorkerRecord], config: ReportConfig, sink: Optional[TextIO] = None):
    """
    Render `workers` to `sink` using the formatter `config` selects.

    Args:
        workers: The worker set, already filtered and ordered by the controller.
        config: The presentation options.
        sink: Text stream receiving the report. Defaults to stdout.

    Raises:
        TemplateSyntaxError: If the template cannot be parsed.
        TemplateExecutionError: If the template fails during expansion.
        SinkWriteError: If the sink rejects the output.
    """
    if sink is None:
        sink = sys.stdout
    formatter = select_formatter(config)
    formatter.format_and_display(workers, sink)


class InventoryReporter:
    """
    Render worker sets with fixed presentation options to a fixed sink.

    Attributes:
        config: The presentation options used for every report.
        sink: Text stream receiving every report.

    Methods:
        report: Render one worker set.
    """

    def __init__(self, config: Optional[ReportConfig] = None, sink: Optional[TextIO] = None):
        self.config = config or ReportConfig()
        self.sink = sink

    def report(self, workers: List[WorkerRecord]):
        """
        Render one worker set.

        Args:
            workers: The worker set to render.
        """
        report_workers(workers, self.config, self.sink)
