"""NamingService — build, parse, render and quote labeled names.

Each public method is one operation and returns a :class:`ServiceResult`.
Naming errors become failed results with a stable error code:

- ``INVALID_BASE_NAME``: empty base, or a base holding ``[`` or ``]``
- ``INVALID_LABEL_KEY``: reserved key passed to the builder
- ``MALFORMED_LABEL_TOKEN``: bad token inside ``[...]``
- ``UNQUOTABLE_VALUE``: the destination grammar rejected a value
- ``INVALID_PATTERN``: the render filter is not a destination name
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from labeledname.config.models import RenderConfig
from labeledname.domain.errors import (
    InvalidBaseNameError,
    InvalidLabelKeyError,
    MalformedLabelTokenError,
    UnquotableValueError,
)
from labeledname.domain.labels import LabeledNameBuilder
from labeledname.domain.objectname import MalformedObjectNameError, ObjectName
from labeledname.domain.parser import has_labels, parse_labeled_name
from labeledname.domain.quoting import quote_domain_if_needed, quote_value_if_needed
from labeledname.domain.rendering import LabelSupportedNameFactory
from labeledname.infrastructure.registry import NameRegistry
from labeledname.services.result import ServiceResult

logger = logging.getLogger(__name__)


class NamingService:
    """Operations over labeled names, configured by a :class:`RenderConfig`.

    Usage::

        svc = NamingService(settings.render)
        result = svc.render(["jobs[queue=emails]"])
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config or RenderConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(
        self,
        base: str,
        segments: Sequence[str] = (),
        labels: Iterable[tuple[str, str]] = (),
    ) -> ServiceResult:
        """Build the canonical labeled name for *base* and *labels*."""
        op = "build"
        try:
            built = LabeledNameBuilder.start(base, *segments).labels(labels).build()
        except InvalidLabelKeyError as exc:
            logger.debug("Build of %r rejected", base, exc_info=True)
            return ServiceResult.failure(op, "INVALID_LABEL_KEY", str(exc), key=exc.key)
        except InvalidBaseNameError as exc:
            logger.debug("Build of %r rejected", base, exc_info=True)
            return ServiceResult.failure(op, "INVALID_BASE_NAME", str(exc), base=exc.base)

        return ServiceResult(ok=True, op=op, data={"name": str(built), **built.to_dict()})

    def parse(self, name: str) -> ServiceResult:
        """Decode *name* into its base and ordered labels."""
        op = "parse"
        try:
            parsed = parse_labeled_name(name)
        except MalformedLabelTokenError as exc:
            logger.debug("Parse of %r failed", name, exc_info=True)
            return ServiceResult.failure(
                op, "MALFORMED_LABEL_TOKEN", str(exc), name=name, token=exc.token
            )

        warnings: list[str] = []
        if not has_labels(name) and ("[" in name or "]" in name):
            warnings.append(f"Brackets in {name!r} do not form a label section; kept as base")
        return ServiceResult(
            ok=True,
            op=op,
            data={"name": name, "labeled": has_labels(name), **parsed.to_dict()},
            warnings=warnings,
        )

    def render(
        self,
        names: Sequence[str],
        *,
        domain: str | None = None,
        metric_type: str = "counters",
        include_type: bool | None = None,
        match: str | None = None,
    ) -> ServiceResult:
        """Render each name as a destination identifier.

        Stops at the first name that cannot be rendered. Names that render
        to an identifier already produced in this call are reported as
        warnings. With *match*, a destination pattern such as
        ``metrics:name=jobs*,*``, only the identifiers it selects are
        returned.
        """
        op = "render"
        target_domain = domain if domain is not None else self._config.domain
        with_type = self._config.include_type if include_type is None else include_type
        factory = LabelSupportedNameFactory(include_type=with_type)

        pattern: ObjectName | None = None
        if match is not None:
            try:
                pattern = ObjectName.parse(match)
            except MalformedObjectNameError as exc:
                return ServiceResult.failure(op, "INVALID_PATTERN", str(exc), pattern=match)

        registry = NameRegistry()
        warnings: list[str] = []
        rendered: list[tuple[str, ObjectName]] = []

        for name in names:
            try:
                object_name = factory.create_name(metric_type, target_domain, name)
            except MalformedLabelTokenError as exc:
                logger.debug("Render of %r failed", name, exc_info=True)
                return ServiceResult.failure(
                    op, "MALFORMED_LABEL_TOKEN", str(exc), name=name, token=exc.token
                )
            except UnquotableValueError as exc:
                logger.debug("Render of %r failed", name, exc_info=True)
                return ServiceResult.failure(
                    op, "UNQUOTABLE_VALUE", str(exc), name=name, field=exc.field, value=exc.value
                )

            if registry.is_registered(object_name):
                first = registry.get(object_name)
                warnings.append(f"{name!r} renders to the same identifier as {first!r}")
            else:
                registry.register(object_name, name)
            rendered.append((name, object_name))

        if pattern is not None:
            selected = set(registry.query_names(pattern))
            rendered = [(name, obj) for name, obj in rendered if obj in selected]

        items = [
            {
                "name": name,
                "identifier": str(object_name),
                "properties": [list(pair) for pair in object_name.properties],
            }
            for name, object_name in rendered
        ]
        data: dict[str, object] = {"domain": target_domain, "count": len(items), "items": items}
        if match is not None:
            data["match"] = match
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def quote(self, value: str, *, domain: bool = False) -> ServiceResult:
        """Show *value* as the renderer would emit it (as a value or a domain)."""
        op = "quote"
        try:
            quoted = quote_domain_if_needed(value) if domain else quote_value_if_needed(value)
        except UnquotableValueError as exc:
            return ServiceResult.failure(
                op, "UNQUOTABLE_VALUE", str(exc), field=exc.field, value=exc.value
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"value": value, "quoted": quoted, "changed": quoted != value},
        )
