"""labeledname — labeled metric names that survive flat-string APIs.

Encode ``base[key=value,...]`` names, decode them back, and render them
as quoted destination identifiers (``domain:name=base,key=value``).
"""

from __future__ import annotations

from labeledname.domain.errors import (
    BuilderFinalizedError,
    InvalidBaseNameError,
    InvalidLabelKeyError,
    LabeledNameError,
    MalformedLabelTokenError,
    UnquotableValueError,
)
from labeledname.domain.labels import (
    Label,
    LabeledName,
    LabeledNameBuilder,
    join_name,
    labeled_name,
)
from labeledname.domain.parser import (
    extract_base,
    extract_label_map,
    extract_labels,
    has_labels,
    parse_labeled_name,
)
from labeledname.domain.rendering import LabelSupportedNameFactory, to_destination_name

__version__ = "0.3.0"

__all__ = [
    "BuilderFinalizedError",
    "InvalidBaseNameError",
    "InvalidLabelKeyError",
    "Label",
    "LabelSupportedNameFactory",
    "LabeledName",
    "LabeledNameBuilder",
    "LabeledNameError",
    "MalformedLabelTokenError",
    "UnquotableValueError",
    "__version__",
    "extract_base",
    "extract_label_map",
    "extract_labels",
    "has_labels",
    "join_name",
    "labeled_name",
    "parse_labeled_name",
    "to_destination_name",
]
