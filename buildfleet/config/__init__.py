##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Used to store the application configuration.

The `config` package loads the optional `app.yaml` file and exposes its
settings through the `Config` class.

Modules:
    config_filepaths.py: File path constants for the configuration.
    configfile.py: Locates and loads the configuration file and fills in defaults.
"""
from copy import deepcopy
from types import SimpleNamespace
from typing import Dict, List

from buildfleet.utils import nested_dict_to_namespaces


DEFAULT_APP_CONFIG: Dict = {
    "workers": {
        "verbose": False,
        "format": None,
    },
    "logging": {
        "colors": True,
    },
}


# Pylint complains that there's too few methods here but this class keeps
# config data retrieval uniform across the codebase
class Config:  # pylint: disable=R0903
    """
    The Config class, meant to store all Buildfleet config settings in one place.

    Every section of `DEFAULT_APP_CONFIG` is always present, so callers can read
    `config.workers.verbose` without checking whether the file set it.

    Attributes:
        workers (SimpleNamespace): Default presentation options for `buildfleet workers`.
        logging (SimpleNamespace): Logging options.
        source (Optional[str]): Path of the file the settings came from, if any.

    Methods:
        load_app_into_namespaces: Merges the configuration dictionary over the
            defaults and assigns each section as a namespace.
    """

    sections: List[str] = list(DEFAULT_APP_CONFIG)

    def __init__(self, app_dict: Dict = None, source: str = None):
        """
        Args:
            app_dict: Contents of the configuration file, or None for defaults only.
            source: Path of the configuration file.
        """
        self.workers: SimpleNamespace
        self.logging: SimpleNamespace
        self.source = source
        self.load_app_into_namespaces(app_dict or {})

    def __str__(self) -> str:
        formatted_str = "config:"
        for name in self.sections:
            items = (f"    {k}: {v!r}" for k, v in getattr(self, name).__dict__.items())
            joined_items = "\n".join(items)
            formatted_str += f"\n  {name}:\n{joined_items}"
        return formatted_str

    def load_app_into_namespaces(self, app_dict: Dict):
        """
        Merge `app_dict` over the defaults and store each section as a namespace.

        Args:
            app_dict: A dictionary containing configuration data for the application.

        Raises:
            TypeError: If `app_dict` or one of its sections is not a mapping.
        """
        if not isinstance(app_dict, dict):
            raise TypeError(f"App config must be a mapping, got {app_dict!r}")
        for section in self.sections:
            merged = deepcopy(DEFAULT_APP_CONFIG[section])
            overrides = app_dict.get(section) or {}
            if not isinstance(overrides, dict):
                raise TypeError(f"Config section '{section}' must be a mapping, got {overrides!r}")
            merged.update(overrides)
            setattr(self, section, nested_dict_to_namespaces(merged))
