##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Buildfleet Workers Package.

This package holds the worker data model and everything needed to turn a
worker set into a report.

Subpackages:
    formatters: The table, verbose and template renderers and their factory.

Modules:
    loader: Reads a fetched worker set from a YAML/JSON document.
    models: Dataclasses describing workers, devices and GC rules.
    platforms: Normalization and formatting of platform descriptors.
    reporter: `report_workers`, which selects and runs one formatter.
"""
