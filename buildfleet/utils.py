##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Helper functions shared by the worker renderers and the CLI.

The byte and duration helpers turn raw worker fields into the
strings operators read, and `sorted_keys` gives every printed mapping a
reproducible order. The YAML and namespace helpers back the configuration
loader.
"""

import math
import re
from copy import deepcopy
from datetime import timedelta
from types import SimpleNamespace
from typing import Dict, List, Union

import yaml


BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")
BYTE_BASE = 1000

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ms|us|µs|h|m|s)")
_DURATION_UNITS = {
    "h": timedelta(hours=1),
    "m": timedelta(minutes=1),
    "s": timedelta(seconds=1),
    "ms": timedelta(milliseconds=1),
    "us": timedelta(microseconds=1),
    "µs": timedelta(microseconds=1),
}


def load_yaml(filepath: str) -> Dict:
    """
    Safely read a YAML file and return its contents.

    Args:
        filepath: The file path to the YAML file to be read.

    Returns:
        A dict representing the contents of the YAML file.
    """
    with open(filepath, "r") as _file:
        return yaml.safe_load(_file)


def sorted_keys(mapping: Dict[str, object]) -> List[str]:
    """
    Return the keys of a string-keyed mapping in ordinal string order.

    Args:
        mapping: Any mapping with string keys.

    Returns:
        The keys of `mapping`, sorted.
    """
    return sorted(mapping)


# Size utilities
def format_bytes(num_bytes: int) -> str:
    """
    Render a byte count with a decimal (SI, base 1000) unit.

    Values keep three significant digits so that, for example, 1_234_567_890
    bytes reads as `1.23 GB` instead of a rounded `1 GB`.

    Args:
        num_bytes: A non-negative number of bytes.

    Returns:
        The human readable size, e.g. `512 B` or `1.5 KB`.
    """
    value = float(num_bytes)
    unit = 0
    while value >= BYTE_BASE and unit < len(BYTE_UNITS) - 1:
        value /= BYTE_BASE
        unit += 1

    text = f"{value:.3g}"
    # 999.95 KB rounds up to 1e+03, so carry into the next unit
    if float(text) >= BYTE_BASE and unit < len(BYTE_UNITS) - 1:
        value /= BYTE_BASE
        unit += 1
        text = f"{value:.3g}"

    if "e" in text:
        text = f"{value:.0f}"
    return f"{text} {BYTE_UNITS[unit]}"


# Time utilities
def _trim_fraction(whole: int, fraction: int, digits: int) -> str:
    if not fraction:
        return str(whole)
    return f"{whole}." + f"{fraction:0{digits}d}".rstrip("0")


def format_duration(duration: timedelta) -> str:
    """
    Render a duration in the compact `1h2m3s` notation.

    Durations of at least one second are written as hours, minutes and
    seconds, dropping leading zero units. Shorter ones use `ms` or `µs`.

    Args:
        duration: A non-negative timedelta.

    Returns:
        The formatted duration, e.g. `48h0m0s`, `1m30s`, `1.5s` or `250ms`.
    """
    total_us = (duration.days * 86400 + duration.seconds) * 1_000_000 + duration.microseconds
    if total_us == 0:
        return "0s"
    if total_us < 1000:
        return f"{total_us}µs"
    if total_us < 1_000_000:
        millis, micros = divmod(total_us, 1000)
        return _trim_fraction(millis, micros, 3) + "ms"

    seconds, micros = divmod(total_us, 1_000_000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    secs = _trim_fraction(seconds, micros, 6)
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def parse_duration(value: Union[str, int, float]) -> timedelta:
    """
    Convert a number of seconds or a duration string to a timedelta.

    Strings are a sequence of decimal numbers, each with a unit suffix
    (`h`, `m`, `s`, `ms`, `us`), such as `48h`, `1h30m` or `1.5s`. A bare
    number, as a string or not, is read as seconds.

    Args:
        value: The duration to convert.

    Returns:
        The equivalent timedelta.

    Raises:
        ValueError: If the value is negative or cannot be parsed.
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to a duration.")
    if isinstance(value, (int, float)):
        seconds = value
    else:
        text = str(value).strip()
        try:
            seconds = float(text)
        except ValueError:
            if not text or _DURATION_PART.sub("", text):
                raise ValueError(f"Cannot convert {value!r} to a duration. Example format: 1h30m.") from None
            total = timedelta()
            for number, unit in _DURATION_PART.findall(text):
                total += float(number) * _DURATION_UNITS[unit]
            return total

    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"Duration {value!r} must be a finite, non-negative number.")
    return timedelta(seconds=seconds)


def nested_dict_to_namespaces(dic: Dict) -> SimpleNamespace:
    """
    Convert a nested dictionary into a nested SimpleNamespace structure.

    Args:
        dic: The nested dictionary to be converted.

    Returns:
        A SimpleNamespace object representing the nested structure of the input dictionary.

    Raises:
        TypeError: If the input is not a dictionary.
    """

    def recurse(dic):
        if not isinstance(dic, dict):
            return dic
        for key, val in list(dic.items()):
            dic[key] = recurse(val)
        return SimpleNamespace(**dic)

    if not isinstance(dic, dict):
        raise TypeError(f"{dic} is not a dict")

    new_dic = deepcopy(dic)
    return recurse(new_dic)
