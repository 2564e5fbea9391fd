##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Tests for the duration helpers in `buildfleet/utils.py`.
"""

from datetime import timedelta
from typing import Union

import pytest

from buildfleet.utils import format_duration, parse_duration


@pytest.mark.parametrize(
    "duration, expected",
    [
        (timedelta(), "0s"),
        (timedelta(microseconds=5), "5µs"),
        (timedelta(milliseconds=250), "250ms"),
        (timedelta(microseconds=1500), "1.5ms"),
        (timedelta(seconds=1), "1s"),
        (timedelta(seconds=1, milliseconds=500), "1.5s"),
        (timedelta(seconds=90), "1m30s"),
        (timedelta(hours=1), "1h0m0s"),
        (timedelta(hours=48), "48h0m0s"),
        (timedelta(days=3, minutes=5, seconds=7), "72h5m7s"),
    ],
)
def test_format_duration(duration: timedelta, expected: str):
    """
    Test that durations render in the compact hour/minute/second notation.

    Args:
        duration: The duration to format.
        expected: The expected rendering.
    """
    assert format_duration(duration) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, timedelta()),
        (90, timedelta(seconds=90)),
        (1.5, timedelta(seconds=1.5)),
        ("3600", timedelta(hours=1)),
        ("48h", timedelta(hours=48)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("1m30s", timedelta(seconds=90)),
        ("250ms", timedelta(milliseconds=250)),
        ("1.5s", timedelta(seconds=1.5)),
        ("10us", timedelta(microseconds=10)),
    ],
)
def test_parse_duration(value: Union[str, int, float], expected: timedelta):
    """
    Test that seconds and duration strings are converted to timedeltas.

    Args:
        value: The value to parse.
        expected: The expected timedelta.
    """
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "forever", "1h30", "1d", "-5", -5, True, "nan"])
def test_parse_duration_invalid(value: Union[str, int]):
    """
    Test that malformed and negative durations raise a `ValueError`.

    Args:
        value: The invalid value.
    """
    with pytest.raises(ValueError):
        parse_duration(value)


def test_duration_round_trip():
    """Test that a formatted duration parses back to the same value."""
    duration = timedelta(hours=49, minutes=1, seconds=2)
    assert parse_duration(format_duration(duration)) == duration
