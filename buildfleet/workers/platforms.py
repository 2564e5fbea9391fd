##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Normalization and formatting of worker platform descriptors.

Workers report platforms the way their host describes them, so the same
machine may appear as `x86_64`, `x86-64` or `amd64`. Everything printed by
Buildfleet goes through `normalize_platform` first so that equal platforms
always render the same way.
"""

from typing import Iterable, Tuple

from buildfleet.workers.models import Platform


def _normalize_os(os_name: str) -> str:
    os_name = os_name.lower()
    if os_name == "macos":
        return "darwin"
    return os_name


def _normalize_arch(arch: str, variant: str) -> Tuple[str, str]:
    arch, variant = arch.lower(), variant.lower()
    if arch == "i386":
        arch, variant = "386", ""
    elif arch in ("x86_64", "x86-64", "amd64"):
        arch = "amd64"
        if variant == "v1":
            variant = ""
    elif arch in ("aarch64", "arm64"):
        arch = "arm64"
        if variant in ("8", "v8", "v8.0"):
            variant = ""
        elif variant in ("9", "9.0", "v9.0"):
            variant = "v9"
    elif arch == "armhf":
        arch, variant = "arm", "v7"
    elif arch == "armel":
        arch, variant = "arm", "v6"
    elif arch == "arm":
        if variant in ("", "7"):
            variant = "v7"
        elif variant in ("5", "6", "8"):
            variant = f"v{variant}"
    return arch, variant


def normalize_platform(platform: Platform) -> Platform:
    """
    Return a copy of `platform` with canonical field values.

    Operating systems are lower-cased and architecture aliases are resolved,
    filling in the default variant where the architecture requires one
    (e.g. `armhf` becomes `arm/v7`). Unknown values are kept as given.

    Args:
        platform: The platform descriptor to normalize.

    Returns:
        A new, normalized `Platform`.
    """
    arch, variant = _normalize_arch(platform.architecture, platform.variant)
    return Platform(os=_normalize_os(platform.os), architecture=arch, variant=variant)


def format_platform(platform: Platform) -> str:
    """
    Render a platform descriptor as `os/arch[/variant]`.

    Args:
        platform: The platform descriptor to format.

    Returns:
        The slash-joined platform string.
    """
    os_name = platform.os or "unknown"
    return "/".join(part for part in (os_name, platform.architecture, platform.variant) if part)


def join_platforms(platforms: Iterable[Platform]) -> str:
    """
    Normalize and format every platform, keeping the given order.

    Args:
        platforms: The platform descriptors of one worker.

    Returns:
        A comma-joined string of formatted platforms, or an empty string.
    """
    return ",".join(format_platform(normalize_platform(platform)) for platform in platforms)
