##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Template-based worker formatter for Buildfleet.

Users can shape the report themselves with a Jinja2 template. The template is
rendered exactly once with the whole worker set bound to the `workers`
variable, so the template decides how to iterate:

    buildfleet workers --format '{% for w in workers %}{{ w.id }} {% endfor %}'
    buildfleet workers --format '{{ workers | length }}'
    buildfleet workers --format '{{ workers | json }}'

Undefined variables and attributes are errors rather than empty strings.
On top of the Jinja2 built-ins the following filters are available:\n
    - `json`: compact JSON of a worker, a worker set or any model value
    - `platform` / `platforms`: normalized `os/arch[/variant]` strings
    - `bytes`: human readable SI sizes
    - `duration`: compact `1h2m3s` durations
"""

import json
import logging
from dataclasses import asdict, is_dataclass
from datetime import timedelta
from typing import Any, List, TextIO

from jinja2 import BaseLoader, Environment, StrictUndefined
from jinja2 import TemplateSyntaxError as JinjaTemplateSyntaxError

from buildfleet.exceptions import TemplateExecutionError, TemplateSyntaxError
from buildfleet.utils import format_bytes, format_duration
from buildfleet.workers.formatters.worker_formatter import WorkerFormatter
from buildfleet.workers.models import WorkerRecord
from buildfleet.workers.platforms import format_platform, join_platforms, normalize_platform


LOG = logging.getLogger("buildfleet")


def _to_plain(value: Any) -> Any:
    """Convert models (and containers of them) into JSON-serializable values."""
    if isinstance(value, WorkerRecord):
        return value.to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return _to_plain(asdict(value))
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value


def to_json(value: Any) -> str:
    """
    Serialize a worker set, a worker or any part of one as compact JSON.

    Args:
        value: The value to serialize.

    Returns:
        The JSON text.
    """
    return json.dumps(_to_plain(value), sort_keys=True)


def create_environment() -> Environment:
    """
    Build the Jinja2 environment shared by every report template.

    Returns:
        A configured `jinja2.Environment`.
    """
    env = Environment(
        loader=BaseLoader(),
        autoescape=False,  # reports are plain text
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.filters["json"] = to_json
    env.filters["platform"] = lambda platform: format_platform(normalize_platform(platform))
    env.filters["platforms"] = join_platforms
    env.filters["bytes"] = format_bytes
    env.filters["duration"] = format_duration
    return env


class TemplateWorkerFormatter(WorkerFormatter):
    """
    Render a worker set through a user-supplied Jinja2 template.

    Attributes:
        template: The raw template text.
        env: The Jinja2 environment used to compile it.

    Methods:
        format_and_display: Parse the template, expand it once against the
            whole worker set and write the result plus a newline.
    """

    def __init__(self, template: str):
        """
        Args:
            template: The template text supplied by the user.
        """
        self.template = template
        self.env = create_environment()

    def format_and_display(self, workers: List[WorkerRecord], sink: TextIO):
        """
        Expand the template with `workers` bound as the only variable.

        Args:
            workers: The worker set to expose to the template.
            sink: Text stream receiving the expansion.

        Raises:
            TemplateSyntaxError: If the template cannot be parsed.
            TemplateExecutionError: If the expansion fails.
            SinkWriteError: If the sink rejects the output.
        """
        try:
            compiled = self.env.from_string(self.template)
        except JinjaTemplateSyntaxError as exc:
            raise TemplateSyntaxError(self.template, exc.message or str(exc)) from exc

        LOG.debug(f"Expanding template against {len(workers)} worker(s).")
        try:
            output = compiled.render(workers=workers)
        except Exception as exc:  # pylint: disable=broad-except
            raise TemplateExecutionError(f"failed to execute template {self.template!r}: {exc}") from exc

        self.write(sink, output)
        self.write(sink, "\n")
