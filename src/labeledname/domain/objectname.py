"""Destination identifier grammar — ``domain:key=value,key=value``.

A pure-Python model of the naming registry's object-name grammar. The
renderer uses it as an oracle: it builds a candidate name and asks
whether the result is malformed or turned into a wildcard pattern,
instead of keeping its own list of characters that "look special".

Grammar rules enforced at construction:

- domain: any characters except ``:`` and newline. Unescaped ``*`` or
  ``?`` make it a domain pattern.
- key: non-empty, none of ``: , = * ? \\n``, unique within the name.
- unquoted value: non-empty, none of ``: , = " \\n``. ``*``/``?`` make it
  a value pattern.
- quoted value: ``"..."`` where a backslash may only escape
  ``\\ " * ? n`` and a bare ``"`` is illegal. Unescaped ``*``/``?``
  inside still make it a pattern.

Equality and hashing use the canonical name (keys sorted), so two names
with the same properties in different order are the same registry entry.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

QUOTE = '"'
WILDCARDS = frozenset("*?")

_DOMAIN_FORBIDDEN = frozenset(":\n")
_KEY_FORBIDDEN = frozenset(":,=*?\n")
_UNQUOTED_VALUE_FORBIDDEN = frozenset(':,="\n')
# Escape sequence (character after the backslash) -> literal character.
_ESCAPES: dict[str, str] = {"\\": "\\", QUOTE: QUOTE, "*": "*", "?": "?", "n": "\n"}


class MalformedObjectNameError(ValueError):
    """The text or parts do not form a valid destination identifier."""


# ── Quoting convention ────────────────────────────────────────────────


def quote(text: str) -> str:
    """Quote *text* so it reads back as a literal value.

    Examples:
        >>> quote("before?after")
        '"before\\\\?after"'
        >>> quote("")
        '""'
    """
    out = [QUOTE]
    for ch in text:
        if ch == "\n":
            out.append("\\n")
        elif ch in '\\"*?':
            out.append("\\" + ch)
        else:
            out.append(ch)
    out.append(QUOTE)
    return "".join(out)


def _scan_quoted(text: str) -> tuple[str, bool]:
    """Validate a quoted string; return ``(literal, has_unescaped_wildcard)``."""
    if len(text) < 2 or not (text.startswith(QUOTE) and text.endswith(QUOTE)):
        raise MalformedObjectNameError(f"Invalid quoted value: {text!r}")

    chars: list[str] = []
    wildcard = False
    end = len(text) - 1
    i = 1
    while i < end:
        ch = text[i]
        if ch == "\\":
            if i + 1 >= end:
                raise MalformedObjectNameError(f"Missing character after backslash: {text!r}")
            escaped = text[i + 1]
            if escaped not in _ESCAPES:
                raise MalformedObjectNameError(f"Invalid escape sequence '\\{escaped}': {text!r}")
            chars.append(_ESCAPES[escaped])
            i += 2
            continue
        if ch == QUOTE:
            raise MalformedObjectNameError(f"Unescaped quote inside quoted value: {text!r}")
        if ch == "\n":
            raise MalformedObjectNameError(f"Newline inside quoted value: {text!r}")
        if ch in WILDCARDS:
            wildcard = True
        chars.append(ch)
        i += 1
    return "".join(chars), wildcard


def unquote(text: str) -> str:
    """Inverse of :func:`quote`. Raises on text that is not properly quoted."""
    return _scan_quoted(text)[0]


# ── Component validation ─────────────────────────────────────────────


def _check_domain(domain: str) -> bool:
    """Validate *domain*; return True when it is a pattern."""
    bad = _DOMAIN_FORBIDDEN.intersection(domain)
    if bad:
        raise MalformedObjectNameError(f"Invalid character {sorted(bad)!r} in domain {domain!r}")
    if len(domain) >= 2 and domain.startswith(QUOTE) and domain.endswith(QUOTE):
        try:
            return _scan_quoted(domain)[1]
        except MalformedObjectNameError:
            pass  # not a quoted literal; read it as plain characters
    return not WILDCARDS.isdisjoint(domain)


def _check_key(key: str) -> None:
    if not key:
        raise MalformedObjectNameError("Invalid key (empty)")
    bad = _KEY_FORBIDDEN.intersection(key)
    if bad:
        raise MalformedObjectNameError(f"Invalid character {sorted(bad)!r} in key {key!r}")


def _check_value(key: str, value: str) -> bool:
    """Validate *value*; return True when it is a pattern."""
    if value.startswith(QUOTE):
        return _scan_quoted(value)[1]
    if not value:
        raise MalformedObjectNameError(f"Invalid value (empty) for key {key!r}")
    bad = _UNQUOTED_VALUE_FORBIDDEN.intersection(value)
    if bad:
        raise MalformedObjectNameError(
            f"Invalid character {sorted(bad)!r} in value {value!r} of key {key!r}"
        )
    return not WILDCARDS.isdisjoint(value)


def _wildcard_match(pattern: str, text: str) -> bool:
    regex = "".join(
        ".*" if ch == "*" else "." if ch == "?" else re.escape(ch) for ch in pattern
    )
    return re.fullmatch(regex, text, flags=re.DOTALL) is not None


# ── ObjectName ───────────────────────────────────────────────────────


@dataclass(frozen=True, eq=False)
class ObjectName:
    """An immutable, validated destination identifier.

    Attributes:
        domain: Domain component, possibly quoted.
        properties: Ordered ``(key, value)`` pairs, values possibly quoted.
        is_property_list_pattern: True for names ending in ``,*`` (queries only).
    """

    domain: str
    properties: tuple[tuple[str, str], ...]
    is_property_list_pattern: bool = False
    is_domain_pattern: bool = field(init=False, repr=False)
    is_property_value_pattern: bool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        properties = tuple((str(k), str(v)) for k, v in self.properties)
        object.__setattr__(self, "properties", properties)

        domain_pattern = _check_domain(self.domain)
        if not properties and not self.is_property_list_pattern:
            raise MalformedObjectNameError("Key properties cannot be empty")

        seen: set[str] = set()
        value_pattern = False
        for key, value in properties:
            _check_key(key)
            if key in seen:
                raise MalformedObjectNameError(f"Key {key!r} already defined")
            seen.add(key)
            value_pattern = _check_value(key, value) or value_pattern

        object.__setattr__(self, "is_domain_pattern", domain_pattern)
        object.__setattr__(self, "is_property_value_pattern", value_pattern)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_properties(
        cls,
        domain: str,
        properties: Mapping[str, str] | Iterable[tuple[str, str]],
    ) -> ObjectName:
        """Build a name from a domain and ordered key/value pairs."""
        items = properties.items() if isinstance(properties, Mapping) else properties
        return cls(domain, tuple(items))

    @classmethod
    def parse(cls, text: str) -> ObjectName:
        """Parse ``domain:key=value,...`` text (quoted values may hold ``,=:``)."""
        domain, sep, rest = text.partition(":")
        if not sep:
            raise MalformedObjectNameError(f"Domain part must be specified: {text!r}")
        if not rest:
            raise MalformedObjectNameError(f"Key properties cannot be empty: {text!r}")

        props: list[tuple[str, str]] = []
        list_pattern = False
        n = len(rest)
        i = 0
        while i < n:
            if rest[i] == "*":
                if i + 1 != n:
                    raise MalformedObjectNameError(f"Invalid use of wildcard in {text!r}")
                list_pattern = True
                break
            eq = rest.find("=", i)
            if eq < 0:
                raise MalformedObjectNameError(f"Unterminated key property part {rest[i:]!r}")
            key = rest[i:eq]
            i = eq + 1
            if i < n and rest[i] == QUOTE:
                j = i + 1
                while j < n and rest[j] != QUOTE:
                    j += 2 if rest[j] == "\\" else 1
                if j >= n:
                    raise MalformedObjectNameError(f"Unterminated quoted value in {text!r}")
                value = rest[i : j + 1]
                i = j + 1
            else:
                comma = rest.find(",", i)
                if comma < 0:
                    comma = n
                value = rest[i:comma]
                i = comma
            props.append((key, value))
            if i < n:
                if rest[i] != ",":
                    raise MalformedObjectNameError(f"Invalid character after value in {text!r}")
                i += 1
                if i == n:
                    raise MalformedObjectNameError(f"Trailing comma in {text!r}")
        return cls(domain, tuple(props), is_property_list_pattern=list_pattern)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_pattern(self) -> bool:
        return (
            self.is_domain_pattern
            or self.is_property_value_pattern
            or self.is_property_list_pattern
        )

    def get_key_property(self, key: str) -> str | None:
        for k, v in self.properties:
            if k == key:
                return v
        return None

    @property
    def key_property_list_string(self) -> str:
        """Properties in construction order, e.g. ``name=m,a=1``."""
        return self._property_list(self.properties)

    @property
    def canonical_key_property_list_string(self) -> str:
        """Properties sorted by key."""
        return self._property_list(sorted(self.properties))

    @property
    def canonical_name(self) -> str:
        return f"{self.domain}:{self.canonical_key_property_list_string}"

    def matches(self, name: ObjectName) -> bool:
        """Return True when concrete *name* is selected by this (pattern) name."""
        if self.is_domain_pattern:
            if not _wildcard_match(self.domain, name.domain):
                return False
        elif self.domain != name.domain:
            return False

        if not self.is_property_list_pattern and len(self.properties) != len(name.properties):
            return False
        for key, value in self.properties:
            actual = name.get_key_property(key)
            if actual is None:
                return False
            if _check_value(key, value):
                if not _wildcard_match(value, actual):
                    return False
            elif value != actual:
                return False
        return True

    def _property_list(self, pairs: Iterable[tuple[str, str]]) -> str:
        parts = [f"{k}={v}" for k, v in pairs]
        if self.is_property_list_pattern:
            parts.append("*")
        return ",".join(parts)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.domain}:{self.key_property_list_string}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectName):
            return NotImplemented
        return self.canonical_name == other.canonical_name

    def __hash__(self) -> int:
        return hash(self.canonical_name)
