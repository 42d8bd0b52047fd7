"""Labeled-name parsing — recover base and labels from a flat string.

Pure functions, no infrastructure dependencies. Parsing is tolerant of
names that are not labeled at all: anything without the exact
``base[...]`` shape is returned verbatim as the base.

Whitespace is significant everywhere. ``m[a=1, b=2]`` has a second key
of ``" b"`` with a leading space; nothing is trimmed.
"""

from __future__ import annotations

from labeledname.domain.errors import MalformedLabelTokenError
from labeledname.domain.labels import (
    KEY_VALUE_SEPARATOR,
    LABEL_SEPARATOR,
    LABELS_CLOSE,
    LABELS_OPEN,
    Label,
    LabeledName,
)


def has_labels(name: str) -> bool:
    """Return True when *name* has the ``base[...]`` shape.

    Requires exactly one ``[`` and one ``]``, the ``]`` as the final
    character, and a non-empty base before the ``[``.

    Examples:
        >>> has_labels("m[a=1]")
        True
        >>> has_labels("[a=1]")
        False
        >>> has_labels("m[a=1]]")
        False
    """
    open_idx = name.find(LABELS_OPEN)
    return (
        name.endswith(LABELS_CLOSE)
        and open_idx >= 1
        and name.count(LABELS_OPEN) == 1
        and name.count(LABELS_CLOSE) == 1
    )


def extract_base(name: str) -> str:
    """Return the base name, or *name* unchanged when it has no labels."""
    if not has_labels(name):
        return name
    return name[: name.index(LABELS_OPEN)]


def extract_labels(name: str) -> list[Label]:
    """Return the labels of *name* in the order they appear.

    Returns an empty list when *name* is not labeled.

    Raises:
        MalformedLabelTokenError: A comma-separated token is empty, has no
            ``=``, or has more than one ``=``. ``key=`` (empty value) is
            well-formed.
    """
    if not has_labels(name):
        return []

    body = name[name.index(LABELS_OPEN) + 1 : name.rindex(LABELS_CLOSE)]
    labels: list[Label] = []
    for token in body.split(LABEL_SEPARATOR):
        parts = token.split(KEY_VALUE_SEPARATOR)
        if len(parts) != 2:
            raise MalformedLabelTokenError(name, token)
        labels.append(Label(key=parts[0], value=parts[1]))
    return labels


def extract_label_map(name: str) -> dict[str, str]:
    """Labels of *name* as an insertion-ordered dict (later duplicates win)."""
    return {label.key: label.value for label in extract_labels(name)}


def parse_labeled_name(name: str) -> LabeledName:
    """Decode *name* into a :class:`LabeledName`."""
    return LabeledName(base=extract_base(name), labels=tuple(extract_labels(name)))
