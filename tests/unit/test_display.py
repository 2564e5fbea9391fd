##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Tests for the `display.py` module.
"""

from _pytest.capture import CaptureFixture
from pytest_mock import MockerFixture

from buildfleet import VERSION
from buildfleet.config import Config
from buildfleet.display import print_formatters, print_info


def test_print_info(mocker: MockerFixture, capsys: CaptureFixture):
    """
    Test that `print_info` lists the version, config location and effective defaults.

    Args:
        mocker: PyTest mocker fixture.
        capsys: PyTest capsys fixture.
    """
    mocker.patch(
        "buildfleet.display.default_config_info",
        return_value={"config_file": None, "buildfleet_home": "/home/u/.buildfleet", "buildfleet_home_exists": False},
    )
    config = Config({"workers": {"verbose": True}}, source="/work/app.yaml")

    print_info(config)

    out = capsys.readouterr().out
    assert out.startswith("Buildfleet Configuration\n")
    rows = {line.split("|")[0].strip(): line.split("|")[1].strip() for line in out.splitlines() if "|" in line}
    assert rows["version"] == VERSION
    assert rows["buildfleet_home"] == "/home/u/.buildfleet"
    assert rows["buildfleet_home_exists"] == "False"
    assert rows["config file in use"] == "/work/app.yaml"
    assert rows["workers.verbose"] == "True"
    assert rows["logging.colors"] == "True"


def test_print_formatters(capsys: CaptureFixture):
    """
    Test that `print_formatters` lists every built-in formatter with its class.

    Args:
        capsys: PyTest capsys fixture.
    """
    print_formatters()

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["Name", "Class", "Description"]
    body = {line.split()[0]: line.split()[1] for line in lines[2:]}
    assert body == {
        "table": "TableWorkerFormatter",
        "verbose": "VerboseWorkerFormatter",
        "template": "TemplateWorkerFormatter",
    }
