##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Tests for the `buildfleet/workers/reporter.py` module.
"""

import io
import logging
from typing import List
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from buildfleet.exceptions import SinkWriteError, TemplateExecutionError, TemplateSyntaxError
from buildfleet.workers.formatters.table_formatter import TableWorkerFormatter
from buildfleet.workers.formatters.template_formatter import TemplateWorkerFormatter
from buildfleet.workers.formatters.verbose_formatter import VerboseWorkerFormatter
from buildfleet.workers.models import WorkerRecord
from buildfleet.workers.reporter import InventoryReporter, ReportConfig, report_workers, select_formatter


class TestSelectFormatter:
    """Tests for the `select_formatter` function."""

    @pytest.mark.parametrize(
        "config, expected_class",
        [
            (ReportConfig(), TableWorkerFormatter),
            (ReportConfig(verbose=True), VerboseWorkerFormatter),
            (ReportConfig(template="{{ workers }}"), TemplateWorkerFormatter),
            (ReportConfig(template="{{ workers }}", verbose=True), TemplateWorkerFormatter),
            (ReportConfig(template=""), TableWorkerFormatter),
            (ReportConfig(template="", verbose=True), VerboseWorkerFormatter),
        ],
    )
    def test_selection(self, config: ReportConfig, expected_class: type):
        """
        Test that a template wins, then verbose, then the table.

        Args:
            config: The presentation options.
            expected_class: The formatter class that should be chosen.
        """
        assert type(select_formatter(config)) is expected_class

    def test_verbose_ignored_with_template_is_logged(self, caplog: pytest.LogCaptureFixture):
        """
        Test that combining a template with verbose logs that verbose is ignored.

        Args:
            caplog: PyTest fixture capturing log records.
        """
        caplog.set_level(logging.DEBUG, logger="buildfleet")
        select_formatter(ReportConfig(template="x", verbose=True))
        assert "Ignoring --verbose" in caplog.text

    def test_no_log_without_conflict(self, caplog: pytest.LogCaptureFixture):
        """
        Test that nothing about verbose is logged when only a template is given.

        Args:
            caplog: PyTest fixture capturing log records.
        """
        caplog.set_level(logging.DEBUG, logger="buildfleet")
        select_formatter(ReportConfig(template="x"))
        assert "Ignoring --verbose" not in caplog.text


class TestReportWorkers:
    """Tests for the `report_workers` function."""

    def test_table_report(self, minimal_worker: WorkerRecord):
        """
        Test that the default options render the table.

        Args:
            minimal_worker: A worker `w1` on linux/amd64.
        """
        sink = io.StringIO()
        report_workers([minimal_worker], ReportConfig(), sink)
        assert sink.getvalue() == "ID\tPLATFORMS\nw1\tlinux/amd64\n"

    def test_verbose_report(self, minimal_worker: WorkerRecord):
        """
        Test that `verbose` renders the detailed view.

        Args:
            minimal_worker: A worker `w1` on linux/amd64.
        """
        sink = io.StringIO()
        report_workers([minimal_worker], ReportConfig(verbose=True), sink)
        assert sink.getvalue().startswith("ID:\t\tw1\n")

    def test_template_wins_over_verbose(self, worker_set: List[WorkerRecord]):
        """
        Test that a template is used even when verbose is requested.

        Args:
            worker_set: Three workers in unsorted order.
        """
        sink = io.StringIO()
        report_workers(worker_set, ReportConfig(template="{{ workers | length }}", verbose=True), sink)
        assert sink.getvalue() == "3\n"

    def test_defaults_to_stdout(self, minimal_worker: WorkerRecord, capsys: pytest.CaptureFixture):
        """
        Test that the report goes to stdout when no sink is given.

        Args:
            minimal_worker: A worker `w1` on linux/amd64.
            capsys: PyTest fixture capturing stdout and stderr.
        """
        report_workers([minimal_worker], ReportConfig())
        assert capsys.readouterr().out == "ID\tPLATFORMS\nw1\tlinux/amd64\n"

    @pytest.mark.parametrize(
        "template, error",
        [
            ("{% if %}", TemplateSyntaxError),
            ("{{ workers[0].missing }}", TemplateExecutionError),
            ("{{ 1 // 0 }}", TemplateExecutionError),
        ],
    )
    def test_template_errors_propagate(self, template: str, error: type, minimal_worker: WorkerRecord):
        """
        Test that template failures reach the caller unchanged.

        Args:
            template: A failing template.
            error: The expected error type.
            minimal_worker: A worker `w1` on linux/amd64.
        """
        with pytest.raises(error):
            report_workers([minimal_worker], ReportConfig(template=template), io.StringIO())

    def test_sink_errors_propagate(self, minimal_worker: WorkerRecord):
        """
        Test that a failing sink surfaces as `SinkWriteError`.

        Args:
            minimal_worker: A worker `w1` on linux/amd64.
        """
        sink = MagicMock()
        sink.write.side_effect = OSError("broken pipe")
        with pytest.raises(SinkWriteError):
            report_workers([minimal_worker], ReportConfig(), sink)

    @pytest.mark.parametrize(
        "config",
        [ReportConfig(), ReportConfig(verbose=True), ReportConfig(template="{{ workers | length }}")],
    )
    def test_closed_sink(self, config: ReportConfig, minimal_worker: WorkerRecord):
        """
        Test that writing to an already closed sink surfaces as `SinkWriteError` in every mode.

        Args:
            config: The presentation options.
            minimal_worker: A worker `w1` on linux/amd64.
        """
        sink = io.StringIO()
        sink.close()
        with pytest.raises(SinkWriteError) as excinfo:
            report_workers([minimal_worker], config, sink)
        assert isinstance(excinfo.value.__cause__, ValueError)


class TestInventoryReporter:
    """Tests for the `InventoryReporter` class."""

    def test_defaults(self):
        """Test that a reporter without options uses the table and stdout."""
        reporter = InventoryReporter()
        assert reporter.config == ReportConfig()
        assert reporter.sink is None

    def test_report_delegates(self, mocker: MockerFixture, worker_set: List[WorkerRecord]):
        """
        Test that `report` forwards its stored options to `report_workers`.

        Args:
            mocker: PyTest mocker fixture.
            worker_set: Three workers in unsorted order.
        """
        mock_report = mocker.patch("buildfleet.workers.reporter.report_workers")
        sink = io.StringIO()
        config = ReportConfig(verbose=True)

        InventoryReporter(config, sink).report(worker_set)

        mock_report.assert_called_once_with(worker_set, config, sink)

    def test_reports_repeatedly(self, worker_set: List[WorkerRecord]):
        """
        Test that the same reporter renders several worker sets to one sink.

        Args:
            worker_set: Three workers in unsorted order.
        """
        sink = io.StringIO()
        reporter = InventoryReporter(ReportConfig(template="{{ workers | length }}"), sink)
        reporter.report(worker_set)
        reporter.report(worker_set[:1])
        assert sink.getvalue() == "3\n1\n"
