"""Error taxonomy for analysis and autofill operations."""

from __future__ import annotations


class FormAssistError(Exception):
    """Base class for failures reported back to the caller."""


class AnalysisBusyError(FormAssistError):
    def __init__(self, message: str = "Analysis already in progress") -> None:
        super().__init__(message)


class NoFormsFoundError(FormAssistError):
    def __init__(self, message: str = "No forms detected on this page") -> None:
        super().__init__(message)


class NoResultAvailableError(FormAssistError):
    def __init__(self, message: str = "Please analyze the form first") -> None:
        super().__init__(message)


class AnalysisTransportError(FormAssistError):
    """The analysis service was unreachable or reported a failure."""


class FieldResolutionError(FormAssistError):
    """A single recommendation could not be mapped onto a live control.

    Never fatal: the reconciler absorbs it into the batch error count.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "FormAssistError",
    "AnalysisBusyError",
    "NoFormsFoundError",
    "NoResultAvailableError",
    "AnalysisTransportError",
    "FieldResolutionError",
]
