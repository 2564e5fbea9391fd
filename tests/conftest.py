##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
This module contains pytest fixtures to be used throughout the entire test suite.
"""
from datetime import timedelta
from typing import Dict, List

import pytest

from buildfleet.workers.models import BuildkitVersion, DeviceRecord, GCRule, Platform, WorkerRecord
from tests.fixture_types import FixtureDict, FixtureList


# pylint: disable=redefined-outer-name


@pytest.fixture
def minimal_worker() -> WorkerRecord:
    """
    A worker with one platform and nothing else set.

    Returns:
        A `WorkerRecord` with id `w1` running on linux/amd64.
    """
    return WorkerRecord(id="w1", platforms=[Platform(os="linux", architecture="amd64")])


@pytest.fixture
def detailed_worker() -> WorkerRecord:
    """
    A worker with every section populated: labels inserted out of order,
    two devices with different policies and two GC rules.

    Returns:
        A fully populated `WorkerRecord`.
    """
    return WorkerRecord(
        id="kz3v1dxf6sfj5dsnq8c1q4j5n",
        platforms=[
            Platform(os="linux", architecture="x86_64"),
            Platform(os="linux", architecture="arm64", variant="v8"),
            Platform(os="Linux", architecture="armhf"),
        ],
        buildkit_version=BuildkitVersion(package="github.com/moby/buildkit", version="v0.20.0", revision="3f5d8a2"),
        labels={
            "org.mobyproject.buildkit.worker.snapshotter": "overlayfs",
            "org.mobyproject.buildkit.worker.executor": "oci",
            "org.mobyproject.buildkit.worker.hostname": "builder-0",
        },
        cdi_devices=[
            DeviceRecord(
                name="vendor.com/gpu=all",
                on_demand=True,
                auto_allow=True,
                annotations={"org.mobyproject.buildkit.device.class": "gpu", "bus": "pci"},
            ),
            DeviceRecord(name="vendor.com/fpga=0", on_demand=False, auto_allow=False),
        ],
        gc_policy=[
            GCRule(
                all=False,
                filter=["type==source.local", "type==exec.cachemount"],
                keep_duration=timedelta(hours=48),
                max_used_space=512_000_000,
            ),
            GCRule(all=True, reserved_space=10_000_000_000, min_free_space=1_500_000),
        ],
    )


@pytest.fixture
def worker_set(minimal_worker: WorkerRecord, detailed_worker: WorkerRecord) -> FixtureList[WorkerRecord]:
    """
    Three workers in a deliberately unsorted order.

    Returns:
        A list of `WorkerRecord` objects.
    """
    return [
        WorkerRecord(id="zeta", platforms=[Platform(os="windows", architecture="amd64")]),
        minimal_worker,
        detailed_worker,
    ]


@pytest.fixture
def worker_document() -> FixtureDict[str, List[Dict]]:
    """
    A decoded worker document as the loader would read it from disk.

    Returns:
        A dictionary with a `workers` list.
    """
    return {
        "workers": [
            {
                "id": "w1",
                "platforms": ["linux/amd64", {"os": "linux", "architecture": "arm", "variant": "v7"}],
                "buildkit_version": {"package": "github.com/moby/buildkit", "version": "v0.20.0", "revision": "abc"},
                "labels": {"b": "2", "a": "1"},
                "cdi_devices": [{"name": "vendor.com/gpu=all", "on_demand": True, "annotations": {"k": "v"}}],
                "gc_policy": [
                    {"all": True, "keep_duration": "48h", "max_used_space": 1000},
                    {"filter": "type==source.local", "keep_duration": 90},
                ],
            },
            {"id": "w2"},
        ]
    }
