"""Tests for NamingService."""

from __future__ import annotations

import pytest

from labeledname.config.models import RenderConfig
from labeledname.services.naming import NamingService


@pytest.fixture
def svc() -> NamingService:
    return NamingService(RenderConfig(domain="TestDomain"))


class TestBuild:
    def test_build(self, svc: NamingService) -> None:
        result = svc.build("http", ["server"], [("method", "GET"), ("status", "200")])
        assert result.ok
        assert result.op == "build"
        assert result.data["name"] == "http.server[method=GET,status=200]"
        assert result.data["base"] == "http.server"
        assert result.data["labels"] == [
            {"key": "method", "value": "GET"},
            {"key": "status", "value": "200"},
        ]

    def test_reserved_key(self, svc: NamingService) -> None:
        result = svc.build("m", labels=[("type", "x")])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_LABEL_KEY"
        assert result.error.detail == {"key": "type"}

    @pytest.mark.parametrize("base", ["", "a[b", "a]b"])
    def test_invalid_base(self, svc: NamingService, base: str) -> None:
        result = svc.build(base, labels=[("k", "v")])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_BASE_NAME"
        assert result.error.detail == {"base": base}

    def test_empty_base_with_segments(self, svc: NamingService) -> None:
        result = svc.build("", ["jobs", "failed"])
        assert result.data["name"] == "jobs.failed"


class TestParse:
    def test_labeled(self, svc: NamingService) -> None:
        result = svc.parse("m[a=1,b=]")
        assert result.ok
        assert result.data["labeled"] is True
        assert result.data["base"] == "m"
        assert result.data["labels"] == [{"key": "a", "value": "1"}, {"key": "b", "value": ""}]
        assert result.warnings == []

    def test_unlabeled(self, svc: NamingService) -> None:
        result = svc.parse("plain")
        assert result.data == {"name": "plain", "labeled": False, "base": "plain", "labels": []}

    def test_stray_brackets_warn(self, svc: NamingService) -> None:
        result = svc.parse("m[a=1]x")
        assert result.ok
        assert result.data["base"] == "m[a=1]x"
        assert len(result.warnings) == 1

    def test_malformed(self, svc: NamingService) -> None:
        result = svc.parse("metricName[key1=val1,key2]")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MALFORMED_LABEL_TOKEN"
        assert result.error.detail["token"] == "key2"


class TestRender:
    def test_uses_configured_domain(self, svc: NamingService) -> None:
        result = svc.render(["metricName[label1=value1]"])
        assert result.ok
        assert result.data["domain"] == "TestDomain"
        assert result.data["count"] == 1
        item = result.data["items"][0]
        assert item["identifier"] == "TestDomain:name=metricName,label1=value1"
        assert item["properties"] == [["name", "metricName"], ["label1", "value1"]]

    def test_domain_override(self, svc: NamingService) -> None:
        result = svc.render(["m"], domain="other")
        assert result.data["items"][0]["identifier"] == "other:name=m"

    def test_include_type_from_config(self) -> None:
        svc = NamingService(RenderConfig(domain="d", include_type=True))
        result = svc.render(["m[a=1]"], metric_type="gauges")
        assert result.data["items"][0]["identifier"] == "d:name=m,type=gauges,a=1"

    def test_include_type_argument_wins(self) -> None:
        svc = NamingService(RenderConfig(domain="d", include_type=True))
        result = svc.render(["m"], include_type=False)
        assert result.data["items"][0]["identifier"] == "d:name=m"

    def test_quoting(self, svc: NamingService) -> None:
        result = svc.render(["m[label1=before?after]"])
        assert result.data["items"][0]["identifier"] == 'TestDomain:name=m,label1="before\\?after"'

    def test_duplicates_warn(self, svc: NamingService) -> None:
        result = svc.render(["m[a=1,b=2]", "m[b=2,a=1]", "other"])
        assert result.ok
        assert result.data["count"] == 3
        assert len(result.warnings) == 1
        assert "m[b=2,a=1]" in result.warnings[0]

    def test_match_filters_items(self, svc: NamingService) -> None:
        result = svc.render(
            ["jobs[q=a]", "http[m=GET]", "jobs.failed"], match="TestDomain:name=jobs*,*"
        )
        assert result.ok
        assert result.data["match"] == "TestDomain:name=jobs*,*"
        assert [item["name"] for item in result.data["items"]] == ["jobs[q=a]", "jobs.failed"]
        assert result.data["count"] == 2

    def test_match_concrete_name(self, svc: NamingService) -> None:
        result = svc.render(["m[a=1,b=2]", "m[c=3]"], match="TestDomain:b=2,a=1,name=m")
        assert [item["name"] for item in result.data["items"]] == ["m[a=1,b=2]"]

    def test_match_keeps_duplicates(self, svc: NamingService) -> None:
        result = svc.render(["m[a=1,b=2]", "m[b=2,a=1]"], match="TestDomain:*")
        assert result.data["count"] == 2
        assert len(result.warnings) == 1

    def test_match_nothing(self, svc: NamingService) -> None:
        result = svc.render(["m"], match="other:*")
        assert result.ok
        assert result.data["items"] == []

    def test_no_match_key_without_filter(self, svc: NamingService) -> None:
        assert "match" not in svc.render(["m"]).data

    @pytest.mark.parametrize("pattern", ["no-colon", "d:", "d:a"])
    def test_invalid_pattern(self, svc: NamingService, pattern: str) -> None:
        result = svc.render(["m"], match=pattern)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_PATTERN"
        assert result.error.detail == {"pattern": pattern}

    def test_malformed_stops(self, svc: NamingService) -> None:
        result = svc.render(["ok", "metricName[key1]"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MALFORMED_LABEL_TOKEN"
        assert result.error.detail["name"] == "metricName[key1]"

    def test_unquotable_domain(self, svc: NamingService) -> None:
        result = svc.render(["m"], domain="a:b")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNQUOTABLE_VALUE"
        assert result.error.detail["field"] == "domain"

    def test_reserved_key_in_raw_name(self, svc: NamingService) -> None:
        result = svc.render(["m[name=x]"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNQUOTABLE_VALUE"


class TestQuote:
    def test_value(self, svc: NamingService) -> None:
        result = svc.quote("before?after")
        assert result.data == {
            "value": "before?after",
            "quoted": '"before\\?after"',
            "changed": True,
        }

    def test_plain_value(self, svc: NamingService) -> None:
        assert svc.quote("value1").data["changed"] is False

    def test_domain(self, svc: NamingService) -> None:
        assert svc.quote("metrics*", domain=True).data["quoted"] == '"metrics\\*"'

    def test_unquotable_domain(self, svc: NamingService) -> None:
        result = svc.quote("a:b", domain=True)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNQUOTABLE_VALUE"
