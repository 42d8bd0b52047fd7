"""Labeled names — value types and the canonical-form builder.

A labeled name packs an ordered list of labels into one flat string::

    requests_total[method=GET,status=200]

so it can travel through APIs that only accept a bare metric name.
Labels are an ordered list, not a set: consumers display them in the
order the author supplied them.

INVARIANT: the canonical form is unquoted. Quoting happens only when a
name is rendered into a destination identifier.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from labeledname.domain.errors import (
    BuilderFinalizedError,
    InvalidBaseNameError,
    InvalidLabelKeyError,
)

# Keys the destination identifier injects itself.
RESERVED_KEYS: frozenset[str] = frozenset({"name", "type"})

LABELS_OPEN = "["
LABELS_CLOSE = "]"
LABEL_SEPARATOR = ","
KEY_VALUE_SEPARATOR = "="


def join_name(name: str, *segments: str | None) -> str:
    """Join a name with extra segments using dots, skipping empty parts.

    The leading *name* is skipped too when empty, so a caller may pass
    ``""`` and start the hierarchy at the first segment.

    Examples:
        >>> join_name("http", "server", "requests")
        'http.server.requests'
        >>> join_name("jobs", None, "", "failed")
        'jobs.failed'
        >>> join_name("", "a", "b")
        'a.b'
    """
    return ".".join(part for part in (name, *segments) if part)


@dataclass(frozen=True)
class Label:
    """A single ``key=value`` label."""

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}{KEY_VALUE_SEPARATOR}{self.value}"


@dataclass(frozen=True)
class LabeledName:
    """A base name plus its ordered labels."""

    base: str
    labels: tuple[Label, ...] = field(default_factory=tuple)

    @property
    def label_map(self) -> dict[str, str]:
        """Labels as an insertion-ordered dict."""
        return {label.key: label.value for label in self.labels}

    def to_dict(self) -> dict[str, Any]:
        return {
            "base": self.base,
            "labels": [{"key": lbl.key, "value": lbl.value} for lbl in self.labels],
        }

    def __str__(self) -> str:
        if not self.labels:
            return self.base
        body = LABEL_SEPARATOR.join(str(label) for label in self.labels)
        return f"{self.base}{LABELS_OPEN}{body}{LABELS_CLOSE}"


class BuilderState(StrEnum):
    """Lifecycle of a :class:`LabeledNameBuilder`."""

    OPEN = "open"
    HAS_LABELS = "has_labels"
    FINALIZED = "finalized"


class LabeledNameBuilder:
    """Incrementally assemble a canonical labeled name.

    Builders are cheap, short-lived, single-threaded objects: no two
    threads may add labels to or finalize the same instance concurrently.
    The first call to :meth:`build` (or ``str()``) finalizes the builder;
    later calls return the same value and adding labels raises
    :class:`BuilderFinalizedError`.

    Usage::

        name = str(
            LabeledNameBuilder.start("num_records")
            .label("device_id", "1312")
            .label("region", "eu")
        )
        # 'num_records[device_id=1312,region=eu]'
    """

    def __init__(self, base: str) -> None:
        # A base that is empty or holds a bracket would not parse back.
        if not base or LABELS_OPEN in base or LABELS_CLOSE in base:
            raise InvalidBaseNameError(base)
        self._base = base
        self._labels: list[Label] = []
        self._built: LabeledName | None = None

    @classmethod
    def start(cls, name: str, *segments: str | None) -> LabeledNameBuilder:
        """Begin a builder whose base is ``name`` dot-joined with *segments*.

        Raises:
            InvalidBaseNameError: The joined base is empty or contains a bracket.
        """
        return cls(join_name(name, *segments))

    @property
    def state(self) -> BuilderState:
        if self._built is not None:
            return BuilderState.FINALIZED
        return BuilderState.HAS_LABELS if self._labels else BuilderState.OPEN

    def label(self, key: str, value: str) -> LabeledNameBuilder:
        """Append one label. ``name`` and ``type`` are rejected."""
        if key in RESERVED_KEYS:
            raise InvalidLabelKeyError(key)
        if self._built is not None:
            raise BuilderFinalizedError(f"Builder for {self._base!r} is already finalized")
        self._labels.append(Label(key=key, value=value))
        return self

    def labels(self, labels: Mapping[str, str] | Iterable[tuple[str, str]]) -> LabeledNameBuilder:
        """Append labels in the iteration order of *labels*."""
        items = labels.items() if isinstance(labels, Mapping) else labels
        for key, value in items:
            self.label(key, value)
        return self

    def build(self) -> LabeledName:
        """Finalize and return the immutable :class:`LabeledName`."""
        if self._built is None:
            self._built = LabeledName(base=self._base, labels=tuple(self._labels))
        return self._built

    def __str__(self) -> str:
        return str(self.build())

    def __repr__(self) -> str:
        return f"LabeledNameBuilder({self._base!r}, labels={len(self._labels)}, state={self.state})"


def labeled_name(name: str, *segments: str | None, **labels: str) -> str:
    """One-shot helper: canonical string for *name* with keyword labels.

    >>> labeled_name("jobs", "failed", queue="emails")
    'jobs.failed[queue=emails]'
    """
    return str(LabeledNameBuilder.start(name, *segments).labels(labels))
