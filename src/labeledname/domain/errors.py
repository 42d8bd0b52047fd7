"""Exceptions raised by the labeled-name core.

Build errors and decode errors are distinct types so callers can tell a
bad argument from a bad string. All of them derive from
:class:`LabeledNameError`.
"""

from __future__ import annotations


class LabeledNameError(Exception):
    """Base class for all labeled-name errors."""


class InvalidLabelKeyError(LabeledNameError, ValueError):
    """A reserved key (``name`` or ``type``) was supplied to the builder."""

    def __init__(self, key: str) -> None:
        super().__init__(f"It is illegal to use label {key!r} for a metric.")
        self.key = key


class MalformedLabelTokenError(LabeledNameError, ValueError):
    """A bracketed label token did not split into exactly ``key=value``."""

    def __init__(self, name: str, token: str) -> None:
        super().__init__(f"Invalid metric name provided: {name!r} (bad label token {token!r})")
        self.name = name
        self.token = token


class UnquotableValueError(LabeledNameError):
    """The destination grammar rejected a value even after quoting."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"Invalid {field}: {value!r}")
        self.field = field
        self.value = value


class BuilderFinalizedError(LabeledNameError, RuntimeError):
    """A label was added to a builder whose output was already produced."""


class InvalidBaseNameError(LabeledNameError, ValueError):
    """The builder's base name is empty or contains ``[`` or ``]``."""

    def __init__(self, base: str) -> None:
        super().__init__(f"Invalid base name for a labeled metric: {base!r}")
        self.base = base
