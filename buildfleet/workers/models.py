##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
This module houses dataclasses that define the worker records reported by
Buildfleet.

A worker set is a plain list of `WorkerRecord` objects in the order the
cluster controller returned them. Renderers only read these records; the
`from_dict` constructors are used by the input loader and `to_dict` by the
template `json` filter.
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import timedelta
from typing import Any, Dict, List, Type, TypeVar, Union

from buildfleet.exceptions import WorkerDataError
from buildfleet.utils import parse_duration


LOG = logging.getLogger("buildfleet")
T = TypeVar("T")


def _require_mapping(data: Any, what: str) -> Dict:
    if not isinstance(data, dict):
        raise WorkerDataError(f"Expected a mapping for {what}, got {type(data).__name__}: {data!r}")
    return data


def _string_map(data: Any, what: str) -> Dict[str, str]:
    if data is None:
        return {}
    return {str(key): "" if value is None else str(value) for key, value in _require_mapping(data, what).items()}


def _size(data: Dict, key: str, what: str) -> int:
    value = data.get(key) or 0
    try:
        size = int(value)
    except (TypeError, ValueError) as exc:
        raise WorkerDataError(f"{what}.{key} must be an integer number of bytes, got {value!r}") from exc
    if size < 0:
        raise WorkerDataError(f"{what}.{key} must not be negative, got {size}")
    return size


@dataclass(frozen=True)
class Platform:
    """
    An operating system, architecture and optional variant a worker can run.

    Attributes:
        os: Operating system, e.g. `linux`.
        architecture: CPU architecture, e.g. `amd64`.
        variant: Architecture variant, e.g. `v7`, or an empty string.
    """

    os: str = ""
    architecture: str = ""
    variant: str = ""

    @classmethod
    def from_dict(cls, data: Union[Dict, str]) -> "Platform":
        """
        Create a platform from a mapping or from an `os/arch[/variant]` string.

        Args:
            data: The platform description.

        Returns:
            A `Platform` instance.
        """
        if isinstance(data, str):
            parts = data.split("/")
            if len(parts) > 3:
                raise WorkerDataError(f"Invalid platform string {data!r}. Expected os/arch[/variant].")
            return cls(*parts)
        data = _require_mapping(data, "platform")
        return cls(
            os=str(data.get("os") or ""),
            architecture=str(data.get("architecture") or ""),
            variant=str(data.get("variant") or ""),
        )


@dataclass(frozen=True)
class BuildkitVersion:
    """Provenance of the build daemon a worker runs."""

    package: str = ""
    version: str = ""
    revision: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> "BuildkitVersion":
        """
        Create a version record, treating missing fields as empty strings.

        Args:
            data: Mapping with optional `package`, `version` and `revision` keys.

        Returns:
            A `BuildkitVersion` instance.
        """
        if data is None:
            return cls()
        data = _require_mapping(data, "buildkit_version")
        return cls(**{key: str(data.get(key) or "") for key in ("package", "version", "revision")})


@dataclass
class DeviceRecord:
    """
    A CDI device exposed by a worker.

    `on_demand` and `auto_allow` are alternative admission policies; when
    `on_demand` is set it is the one displayed.
    """

    name: str
    on_demand: bool = False
    auto_allow: bool = False
    annotations: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict) -> "DeviceRecord":
        """
        Create a device record from a mapping.

        Args:
            data: Mapping with a `name` and optional policy flags and annotations.

        Returns:
            A `DeviceRecord` instance.

        Raises:
            WorkerDataError: If the device has no name.
        """
        data = _require_mapping(data, "cdi device")
        if not data.get("name"):
            raise WorkerDataError(f"CDI device is missing a name: {data!r}")
        return cls(
            name=str(data["name"]),
            on_demand=bool(data.get("on_demand", False)),
            auto_allow=bool(data.get("auto_allow", False)),
            annotations=_string_map(data.get("annotations"), "cdi device annotations"),
        )


@dataclass
class GCRule:
    """
    A garbage collection rule for a worker's build cache.

    A zero `keep_duration` or a zero size means the rule sets no such limit.

    Attributes:
        all: Whether the rule applies to every cache record.
        filter: Filter expressions selecting the records the rule applies to.
        keep_duration: How long records are kept.
        reserved_space: Bytes always kept, regardless of the other limits.
        min_free_space: Bytes of disk that must stay free.
        max_used_space: Bytes the cache may use at most.
    """

    all: bool = False
    filter: List[str] = field(default_factory=list)
    keep_duration: timedelta = field(default_factory=timedelta)
    reserved_space: int = 0
    min_free_space: int = 0
    max_used_space: int = 0

    @classmethod
    def from_dict(cls, data: Dict) -> "GCRule":
        """
        Create a GC rule from a mapping.

        `keep_duration` may be a number of seconds or a duration string such
        as `48h`; sizes are integer byte counts. Missing values mean unset.

        Args:
            data: Mapping describing the rule.

        Returns:
            A `GCRule` instance.

        Raises:
            WorkerDataError: If a value is negative or malformed.
        """
        data = _require_mapping(data, "gc rule")
        filters = data.get("filter") or []
        if isinstance(filters, str):
            filters = [filters]
        try:
            keep_duration = parse_duration(data.get("keep_duration") or 0)
        except ValueError as exc:
            raise WorkerDataError(f"gc rule keep_duration: {exc}") from exc
        return cls(
            all=bool(data.get("all", False)),
            filter=[str(expr) for expr in filters],
            keep_duration=keep_duration,
            reserved_space=_size(data, "reserved_space", "gc rule"),
            min_free_space=_size(data, "min_free_space", "gc rule"),
            max_used_space=_size(data, "max_used_space", "gc rule"),
        )


@dataclass
class WorkerRecord:
    """
    One execution worker registered with the cluster controller.

    Attributes:
        id: Identifier of the worker, unique within a worker set.
        platforms: Platforms the worker can build for, in the order reported.
        buildkit_version: Version information of the worker's daemon.
        labels: Free-form worker labels.
        cdi_devices: Devices the worker can expose to build steps.
        gc_policy: Ordered garbage collection rules.
    """

    id: str
    platforms: List[Platform] = field(default_factory=list)
    buildkit_version: BuildkitVersion = field(default_factory=BuildkitVersion)
    labels: Dict[str, str] = field(default_factory=dict)
    cdi_devices: List[DeviceRecord] = field(default_factory=list)
    gc_policy: List[GCRule] = field(default_factory=list)

    @classmethod
    def from_dict(cls: Type[T], data: Dict) -> T:
        """
        Create a worker record from a mapping.

        Args:
            data: A dictionary describing one worker.

        Returns:
            A `WorkerRecord` instance.

        Raises:
            WorkerDataError: If the mapping is not a valid worker description.
        """
        data = _require_mapping(data, "worker")
        if not data.get("id"):
            raise WorkerDataError(f"Worker is missing an id: {data!r}")
        LOG.debug(f"Loading worker '{data['id']}'.")
        return cls(
            id=str(data["id"]),
            platforms=[Platform.from_dict(p) for p in data.get("platforms") or []],
            buildkit_version=BuildkitVersion.from_dict(data.get("buildkit_version")),
            labels=_string_map(data.get("labels"), "worker labels"),
            cdi_devices=[DeviceRecord.from_dict(d) for d in data.get("cdi_devices") or []],
            gc_policy=[GCRule.from_dict(r) for r in data.get("gc_policy") or []],
        )

    def to_dict(self) -> Dict:
        """
        Convert the worker record to a JSON-friendly dictionary.

        Durations are expressed in seconds.

        Returns:
            The worker as a dictionary.
        """
        data = asdict(self)
        for rule in data["gc_policy"]:
            rule["keep_duration"] = rule["keep_duration"].total_seconds()
        return data
