##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Verbose worker formatter for Buildfleet.

This module provides the detailed, multi-section view of a worker set. Each
worker is written as one block, separated from the next by a blank line:

    ID:             <id>
    Platforms:      <os/arch[/variant],...>
    BuildKit:       <package> <version> <revision>
    Labels:
            <key>:  <value>
    Devices:
            Name:   <device>
            OnDemand|AutoAllow: <bool>
            Annotations:    <key>:  <value>
    GC Policy rule#<n>:
            All:    <bool>
            ...

Labels and annotations are printed in sorted key order. The `Devices`
section only appears when the worker has devices, and the optional GC rule
lines only appear for non-empty filters and non-zero limits.
"""

import logging
from typing import List, TextIO

from buildfleet.tabwriter import TabWriter
from buildfleet.utils import format_bytes, format_duration, sorted_keys
from buildfleet.workers.formatters.worker_formatter import WorkerFormatter
from buildfleet.workers.models import DeviceRecord, GCRule, WorkerRecord
from buildfleet.workers.platforms import join_platforms


LOG = logging.getLogger("buildfleet")


def _bool(value: bool) -> str:
    return "true" if value else "false"


class VerboseWorkerFormatter(WorkerFormatter):
    """
    Multi-field dump of every worker, including devices and GC policy.

    Methods:
        format_and_display: Render every worker block and flush once.
        render_worker: Queue the block of a single worker.
        render_devices: Queue the `Devices` section of a worker.
        render_gc_rule: Queue one GC policy rule.
    """

    def format_and_display(self, workers: List[WorkerRecord], sink: TextIO):
        """
        Render each worker in input order and flush the aligned output once.

        Args:
            workers: The workers to render.
            sink: Text stream receiving the output.
        """
        LOG.debug(f"Rendering {len(workers)} worker(s) in verbose mode.")
        tw = TabWriter(sink)
        try:
            for worker in workers:
                self.render_worker(tw, worker)
        finally:
            tw.flush()

    def render_worker(self, tw: TabWriter, worker: WorkerRecord):
        """
        Queue the full block for one worker, trailing blank line included.

        Args:
            tw: The tab writer collecting the report.
            worker: The worker to render.
        """
        version = worker.buildkit_version
        tw.write(f"ID:\t{worker.id}\n")
        tw.write(f"Platforms:\t{join_platforms(worker.platforms)}\n")
        tw.write(f"BuildKit:\t{version.package} {version.version} {version.revision}\n")
        tw.write("Labels:\n")
        for key in sorted_keys(worker.labels):
            tw.write(f"\t{key}:\t{worker.labels[key]}\n")

        if worker.cdi_devices:
            self.render_devices(tw, worker.cdi_devices)

        for index, rule in enumerate(worker.gc_policy):
            self.render_gc_rule(tw, index, rule)
        tw.write("\n")

    def render_devices(self, tw: TabWriter, devices: List[DeviceRecord]):
        """
        Queue the `Devices` section followed by a blank line.

        Args:
            tw: The tab writer collecting the report.
            devices: The worker's devices, in the order reported.
        """
        tw.write("Devices:\n")
        for device in devices:
            tw.write(f"\tName:\t{device.name}\n")
            if device.on_demand:
                tw.write(f"\tOnDemand:\t{_bool(device.on_demand)}\n")
            else:
                tw.write(f"\tAutoAllow:\t{_bool(device.auto_allow)}\n")
            for key in sorted_keys(device.annotations):
                tw.write(f"\tAnnotations:\t{key}:\t{device.annotations[key]}\n")
        tw.write("\n")

    def render_gc_rule(self, tw: TabWriter, index: int, rule: GCRule):
        """
        Queue one GC policy rule. Zero limits and empty filters are unset and skipped.

        Args:
            tw: The tab writer collecting the report.
            index: Position of the rule in the worker's policy, from 0.
            rule: The rule to render.
        """
        tw.write(f"GC Policy rule#{index}:\n")
        tw.write(f"\tAll:\t{_bool(rule.all)}\n")
        if rule.filter:
            tw.write(f"\tFilters:\t{' '.join(rule.filter)}\n")
        if rule.keep_duration:
            tw.write(f"\tKeep duration:\t{format_duration(rule.keep_duration)}\n")
        if rule.reserved_space:
            tw.write(f"\tReserved space:\t{format_bytes(rule.reserved_space)}\n")
        if rule.min_free_space:
            tw.write(f"\tMinimum free space:\t{format_bytes(rule.min_free_space)}\n")
        if rule.max_used_space:
            tw.write(f"\tMaximum used space:\t{format_bytes(rule.max_used_space)}\n")
