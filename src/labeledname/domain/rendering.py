"""Render labeled names into destination identifiers.

Assembly order is fixed: ``name`` first, then ``type`` when requested,
then one property per label in its original order. Some consumers read
the first key positionally, so this order is kept even though the
destination grammar does not require it.
"""

from __future__ import annotations

from collections.abc import Iterable

from labeledname.domain.errors import UnquotableValueError
from labeledname.domain.labels import Label
from labeledname.domain.objectname import MalformedObjectNameError, ObjectName
from labeledname.domain.parser import parse_labeled_name
from labeledname.domain.quoting import quote_domain_if_needed, quote_value_if_needed

NAME_KEY = "name"
TYPE_KEY = "type"


def render_object_name(
    domain: str,
    base: str,
    labels: Iterable[Label] = (),
    *,
    metric_type: str | None = None,
) -> ObjectName:
    """Assemble a destination identifier from decoded parts.

    Raises:
        UnquotableValueError: The domain or a value cannot be made literal,
            or the assembled name is rejected (invalid or duplicate key).
    """
    properties: list[tuple[str, str]] = [
        (NAME_KEY, quote_value_if_needed(base, field=NAME_KEY))
    ]
    if metric_type is not None:
        properties.append((TYPE_KEY, quote_value_if_needed(metric_type, field=TYPE_KEY)))
    properties.extend(
        (label.key, quote_value_if_needed(label.value, field=label.key)) for label in labels
    )

    quoted_domain = quote_domain_if_needed(domain)
    try:
        return ObjectName(quoted_domain, tuple(properties))
    except MalformedObjectNameError as exc:
        text = ",".join(f"{k}={v}" for k, v in properties)
        raise UnquotableValueError("identifier", f"{quoted_domain}:{text}") from exc


def to_destination_name(
    metric_type: str,
    domain: str,
    name: str,
    *,
    include_type: bool = False,
) -> ObjectName:
    """Convert an opaque (possibly labeled) metric name to an identifier.

    *metric_type* (``counters``, ``gauges`` ...) is only emitted when
    *include_type* is set.

    Raises:
        MalformedLabelTokenError: *name* has a malformed label section.
        UnquotableValueError: See :func:`render_object_name`.
    """
    parsed = parse_labeled_name(name)
    return render_object_name(
        domain,
        parsed.base,
        parsed.labels,
        metric_type=metric_type if include_type else None,
    )


class LabelSupportedNameFactory:
    """Name factory handed to a reporter; one call per registered metric.

    Usage::

        factory = LabelSupportedNameFactory()
        str(factory.create_name("counters", "my-metrics", "num_records[device_id=1312]"))
        # 'my-metrics:name=num_records,device_id=1312'
    """

    def __init__(self, *, include_type: bool = False) -> None:
        self.include_type = include_type

    def create_name(self, metric_type: str, domain: str, name: str) -> ObjectName:
        return to_destination_name(metric_type, domain, name, include_type=self.include_type)
