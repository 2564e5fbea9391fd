##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
This module provides functionality for locating and loading Buildfleet's
application configuration file (`app.yaml`).

The file is optional: without one, every setting takes its default value.
"""
import logging
import os
from typing import Dict, Optional

from buildfleet.config import Config
from buildfleet.config.config_filepaths import APP_FILENAME, BUILDFLEET_HOME, CONFIG_PATH_FILE
from buildfleet.utils import load_yaml


LOG: logging.Logger = logging.getLogger("buildfleet")


def find_config_file(path: str = None) -> Optional[str]:
    """
    Locate the Buildfleet application configuration file (`app.yaml`).

    This function searches for the configuration file based on a given directory or,
    if no directory is provided, uses a fallback sequence:
      1. Check for `app.yaml` in the current working directory.
      2. Check if `CONFIG_PATH_FILE` exists and points to a valid config file.
      3. Check for `app.yaml` in the `BUILDFLEET_HOME` directory.

    Args:
        path (str, optional): A specific directory to look for `app.yaml`.

    Returns:
        The full path to the `app.yaml` file if found, otherwise `None`.
    """
    if path is None:
        local_app = os.path.join(os.getcwd(), APP_FILENAME)
        if os.path.isfile(local_app):
            return local_app

        if os.path.isfile(CONFIG_PATH_FILE):
            with open(CONFIG_PATH_FILE, "r") as f:
                config_path = f.read().strip()
            if os.path.isfile(config_path):
                return config_path

        path_app = os.path.join(BUILDFLEET_HOME, APP_FILENAME)
        if os.path.isfile(path_app):
            return path_app

        return None

    app_path = os.path.join(path, APP_FILENAME)
    if os.path.exists(app_path):
        return app_path

    return None


def load_config(filepath: str) -> Optional[Dict]:
    """
    Reads a Buildfleet YAML configuration file and returns its contents as a dictionary.

    Args:
        filepath (str): The path to the YAML configuration file.

    Returns:
        A dictionary containing the contents of the YAML file or None if file doesn't exist.
    """
    if not os.path.isfile(filepath):
        LOG.info(f"No app config file at {filepath}")
        return None
    LOG.debug(f"Reading app config from file {filepath}")
    return load_yaml(filepath)


def get_config(path: str = None) -> Config:
    """
    Build the `Config` object from the first configuration file found.

    Args:
        path (str, optional): A specific directory to look for `app.yaml`.

    Returns:
        A `Config` holding the file's settings over the defaults.
    """
    filepath = find_config_file(path)
    if filepath is None:
        LOG.debug("No app config file found, using defaults.")
        return Config()
    return Config(load_config(filepath), source=filepath)


def default_config_info() -> Dict:
    """
    Returns information about where Buildfleet looks for its configuration.

    Returns:
        A dictionary containing the following keys:\n
            - `config_file` (str): Path to the configuration file in use, or None.
            - `buildfleet_home` (str): Path to the Buildfleet home directory.
            - `buildfleet_home_exists` (bool): True if the home directory exists.
    """
    return {
        "config_file": find_config_file(),
        "buildfleet_home": BUILDFLEET_HOME,
        "buildfleet_home_exists": os.path.exists(BUILDFLEET_HOME),
    }
