##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Manages formatting for displaying diagnostic information to the console.
"""
from tabulate import tabulate

from buildfleet import VERSION
from buildfleet.config import Config
from buildfleet.config.configfile import default_config_info
from buildfleet.workers.formatters.formatter_factory import worker_formatter_factory


def print_info(config: Config):
    """
    Print the version, the configuration file in use and the effective
    report defaults.

    Args:
        config: The loaded app configuration.
    """
    print("Buildfleet Configuration")
    print("-" * 25)
    print("")

    conf = {"version": VERSION}
    conf.update(default_config_info())
    conf["config file in use"] = config.source
    for key, val in config.workers.__dict__.items():
        conf[f"workers.{key}"] = val
    for key, val in config.logging.__dict__.items():
        conf[f"logging.{key}"] = val

    print(tabulate(conf.items(), tablefmt="presto"))


def print_formatters():
    """
    Print every registered worker formatter with the first line of its description.
    """
    rows = []
    for name in worker_formatter_factory.list_available():
        info = worker_formatter_factory.get_component_info(name)
        summary = info["description"].strip().splitlines()[0]
        rows.append([name, info["class"], summary])
    print(tabulate(rows, headers=["Name", "Class", "Description"]))
