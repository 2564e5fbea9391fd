##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Module of all Buildfleet-specific exception types.
"""

__all__ = (
    "BuildfleetError",
    "TemplateSyntaxError",
    "TemplateExecutionError",
    "SinkWriteError",
    "WorkerDataError",
    "WorkerFormatterNotSupportedError",
)


class BuildfleetError(Exception):
    """
    Base class for every error raised by Buildfleet.
    """


class TemplateSyntaxError(BuildfleetError):
    """
    Exception to signal that a user-supplied report template could not be parsed.

    Attributes:
        template: The offending template text.
    """

    def __init__(self, template: str, message: str):
        super().__init__(f"invalid template {template!r}: {message}")
        self.template = template


class TemplateExecutionError(BuildfleetError):
    """
    Exception to signal that a report template failed while being expanded,
    e.g. because it referenced a field that workers do not have.
    """

    def __init__(self, message: str):
        super().__init__(message)


class SinkWriteError(BuildfleetError):
    """
    Exception to signal that the output destination rejected a write.
    """

    def __init__(self, message: str):
        super().__init__(message)


class WorkerDataError(BuildfleetError):
    """
    Exception to signal that an input document does not describe a worker set.
    """

    def __init__(self, message: str):
        super().__init__(message)


class WorkerFormatterNotSupportedError(BuildfleetError):
    """
    Exception to signal that an unsupported worker formatter was requested.
    """

    def __init__(self, message: str):
        super().__init__(message)
