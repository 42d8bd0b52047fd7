"""Context-dependent quoting for destination identifiers.

Whether a value needs quoting depends on the whole value (a lone ``*``
is a wildcard, a leading quote starts a quoted string), so instead of a
static blacklist each candidate is run through the destination grammar:

1. build a probe name with the raw value; if it is a literal, keep it;
2. if it became a pattern, quote it and build again;
3. if any build was rejected, quote unconditionally and build once more;
4. if that still fails, raise :class:`UnquotableValueError`.

Keys are never quoted; the destination grammar does not allow it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from labeledname.domain.errors import UnquotableValueError
from labeledname.domain.objectname import MalformedObjectNameError, ObjectName, quote

logger = logging.getLogger(__name__)

# Placeholders for the parts of a probe name that are not under test.
_PROBE_DOMAIN = "domain"
_PROBE_KEY = "key"
_PROBE_VALUE = "value"


def _domain_probe(domain: str) -> bool:
    return ObjectName(domain, ((_PROBE_KEY, _PROBE_VALUE),)).is_domain_pattern


def _value_probe(value: str) -> bool:
    return ObjectName(_PROBE_DOMAIN, ((_PROBE_KEY, value),)).is_property_value_pattern


def _quote_if_needed(raw: str, probe: Callable[[str], bool], field: str) -> str:
    try:
        if not probe(raw):
            return raw
        quoted = quote(raw)
        if not probe(quoted):
            logger.debug("Quoted %s %r (pattern)", field, raw)
            return quoted
    except MalformedObjectNameError:
        pass

    quoted = quote(raw)
    try:
        still_pattern = probe(quoted)
    except MalformedObjectNameError as exc:
        raise UnquotableValueError(field, raw) from exc
    if still_pattern:
        raise UnquotableValueError(field, raw)
    logger.debug("Quoted %s %r (malformed)", field, raw)
    return quoted


def quote_domain_if_needed(domain: str) -> str:
    """Return *domain* as it must appear in a destination identifier.

    Raises:
        UnquotableValueError: No quoting makes *domain* a valid literal
            (for example, it contains ``:``).
    """
    return _quote_if_needed(domain, _domain_probe, "domain")


def quote_value_if_needed(value: str, *, field: str = "value") -> str:
    """Return *value* as it must appear in a destination identifier.

    *field* names the property the value belongs to (``name``, ``type`` or
    a label key) and is reported in :class:`UnquotableValueError`.

    >>> quote_value_if_needed("value1")
    'value1'
    >>> quote_value_if_needed("a,b")
    '"a,b"'
    """
    return _quote_if_needed(value, _value_probe, field)
