##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Buildfleet: worker inventory reports for distributed build clusters.

This package renders the set of execution workers registered with a build
cluster controller as a compact table, a verbose dump, or a user template.
"""


__version__ = "0.3.0"
VERSION = __version__
