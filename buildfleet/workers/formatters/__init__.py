##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Buildfleet Worker Formatters Package.

This package provides classes for rendering a worker set. Formatters write
plain text to a sink: a compact tab-aligned table, a verbose multi-section
dump, or the expansion of a user template.

Modules:
    formatter_factory: WorkerFormatterFactory for managing supported worker
        formatters by name.
    table_formatter: TableWorkerFormatter, one `ID`/`PLATFORMS` row per worker.
    template_formatter: TemplateWorkerFormatter, which expands a Jinja2
        template once against the whole worker set.
    verbose_formatter: VerboseWorkerFormatter, the detailed view including
        labels, devices and GC policy.
    worker_formatter: WorkerFormatter abstract base class defining the
        interface for all worker formatters.
"""
