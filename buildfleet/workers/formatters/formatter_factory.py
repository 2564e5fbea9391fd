##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Worker formatter factory for Buildfleet.

This module provides the `WorkerFormatterFactory`, the registry that maps the
report shapes (`table`, `verbose`, `template`) to their formatter classes.
The reporter creates formatters through it and the `formatters` command lists
what it holds.
"""

import logging
from typing import Dict, List, Type

from buildfleet.exceptions import WorkerFormatterNotSupportedError
from buildfleet.workers.formatters.table_formatter import TableWorkerFormatter
from buildfleet.workers.formatters.template_formatter import TemplateWorkerFormatter
from buildfleet.workers.formatters.verbose_formatter import VerboseWorkerFormatter
from buildfleet.workers.formatters.worker_formatter import WorkerFormatter


LOG = logging.getLogger("buildfleet")


class WorkerFormatterFactory:
    """
    Registry of worker formatter classes, keyed by report name.

    Attributes:
        _registry (Dict[str, Type[WorkerFormatter]]): Maps formatter names to formatter classes.

    Methods:
        register: Register a formatter class under a name.
        list_available: Return the registered formatter names.
        create: Instantiate a formatter by name.
        get_component_info: Return metadata about a registered formatter.
    """

    def __init__(self):
        self._registry: Dict[str, Type[WorkerFormatter]] = {}
        self.register("table", TableWorkerFormatter)
        self.register("verbose", VerboseWorkerFormatter)
        self.register("template", TemplateWorkerFormatter)

    def register(self, name: str, formatter_class: Type[WorkerFormatter]):
        """
        Register `formatter_class` under `name`, replacing any previous entry.

        Args:
            name: The report name, e.g. `table`.
            formatter_class: A `WorkerFormatter` subclass.

        Raises:
            TypeError: If `formatter_class` is not a `WorkerFormatter` subclass.
        """
        if not (isinstance(formatter_class, type) and issubclass(formatter_class, WorkerFormatter)):
            raise TypeError(f"{formatter_class} must inherit from WorkerFormatter")
        self._registry[name] = formatter_class
        LOG.debug(f"Registered worker formatter: {name}")

    def list_available(self) -> List[str]:
        """
        Return the registered formatter names in registration order.

        Returns:
            A list of formatter names.
        """
        return list(self._registry)

    def _get_formatter_class(self, name: str) -> Type[WorkerFormatter]:
        formatter_class = self._registry.get(name)
        if formatter_class is None:
            available = ", ".join(self.list_available())
            raise WorkerFormatterNotSupportedError(
                f"Worker formatter '{name}' is not supported. Available formatters: {available}"
            )
        return formatter_class

    def create(self, name: str, config: Dict = None) -> WorkerFormatter:
        """
        Instantiate the formatter registered under `name`.

        Args:
            name: The report name.
            config: Optional keyword arguments for the formatter's constructor.

        Returns:
            A new formatter instance.

        Raises:
            WorkerFormatterNotSupportedError: If no formatter is registered under `name`.
        """
        formatter_class = self._get_formatter_class(name)
        return formatter_class(**(config or {}))

    def get_component_info(self, name: str) -> Dict:
        """
        Describe a registered formatter.

        Args:
            name: The report name.

        Returns:
            Dictionary with the formatter's name, class, module and docstring.
        """
        formatter_class = self._get_formatter_class(name)
        return {
            "name": name,
            "class": formatter_class.__name__,
            "module": formatter_class.__module__,
            "description": formatter_class.__doc__ or "No description available",
        }


worker_formatter_factory = WorkerFormatterFactory()
