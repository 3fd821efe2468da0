"""End-to-end tests for interface collection from Go source."""

from pathlib import Path

import pytest

from gostub import collect_file, collect_source
from gostub.utils.exceptions import (
    ConfigurationError,
    MalformedSignatureError,
    ParsingError,
    UnresolvedTypeError,
)

pytestmark = pytest.mark.integration


def summary(methods) -> list[tuple[str, str, str, str]]:
    return [
        (m.name, m.param.full_fields, m.ret.signature_text, m.ret.default_values)
        for m in methods
    ]


class TestCollectSource:
    """Tests for collect_source()."""

    def test_store_interface(self, store_source) -> None:
        """Test every method of the store interface."""
        result = collect_source(store_source, "store.go")
        assert list(result) == ["Store", "Reader"]
        assert summary(result["Store"]) == [
            ("Get", "key string", "(Value, bool)", "nil, false"),
            ("Do", "ctx context.Context, ivalmap map[string]int", "error", "nil"),
            ("Sum", "ival int, ival0 int, ival1 int", "int", "0"),
            ("Temp", "", "Celsius", "0"),
            (
                "Watch",
                "ctx context.Context, keys ...string",
                "(<-chan Value, error)",
                "nil, nil",
            ),
            ("TTL", "key Key", "stdtime.Duration", "0"),
            ("Close", "", "", ""),
        ]

    def test_reader_interface(self, store_source) -> None:
        """Test named results."""
        (read,) = collect_source(store_source)["Reader"]
        assert read.param.names_only == "p"
        assert read.param.types_only == "[]byte"
        assert read.ret.signature_text == "(n int, err error)"
        assert read.ret.default_values == "0, nil"

    def test_error_policy(self, store_source) -> None:
        """Test the error policy rejects the result-less Close."""
        with pytest.raises(MalformedSignatureError) as exc_info:
            collect_source(store_source, empty_results="error")
        assert exc_info.value.details["method"] == "Close"

    def test_invalid_policy(self, store_source) -> None:
        """Test unknown policies are rejected up front."""
        with pytest.raises(ConfigurationError):
            collect_source(store_source, empty_results="skip")

    def test_unknown_foreign_type(self) -> None:
        """Test a result from an unlisted package fails resolution."""
        source = """package p

import "example.com/acme"

type Factory interface {
	Build() acme.Widget
}
"""
        with pytest.raises(UnresolvedTypeError) as exc_info:
            collect_source(source)
        assert exc_info.value.details["identifier"] == "acme.Widget"
        assert exc_info.value.details["interface"] == "Factory"

    def test_syntax_error(self) -> None:
        """Test broken source surfaces a parsing error."""
        with pytest.raises(ParsingError):
            collect_source("package p\n\ntype T interface {\n")

    def test_no_interfaces(self) -> None:
        """Test a file without interfaces gives an empty result."""
        assert collect_source("package p\n\ntype T int\n") == {}


class TestCollectFile:
    """Tests for collect_file()."""

    @pytest.fixture
    def meter_file(self, tmp_path: Path) -> Path:
        (tmp_path / "units.go").write_text("package geo\n\ntype Meters float64\n")
        path = tmp_path / "geo.go"
        path.write_text(
            "package geo\n\ntype Measurer interface {\n\tDistance() Meters\n}\n"
        )
        return path

    def test_collect_file(self, store_file) -> None:
        """Test collecting from a file on disk."""
        result = collect_file(store_file)
        assert [m.name for m in result["Store"]][:2] == ["Get", "Do"]

    def test_accepts_str_path(self, store_file) -> None:
        """Test string paths are accepted."""
        assert "Reader" in collect_file(str(store_file))

    def test_sibling_declarations(self, meter_file) -> None:
        """Test types declared in other package files resolve."""
        (distance,) = collect_file(meter_file)["Measurer"]
        assert distance.ret.default_values == "0"

    def test_without_siblings(self, meter_file) -> None:
        """Test sibling types are unknown when package files are off."""
        with pytest.raises(UnresolvedTypeError) as exc_info:
            collect_file(meter_file, include_package_files=False)
        assert exc_info.value.details["identifier"] == "Meters"

    def test_only_target_interfaces(self, meter_file) -> None:
        """Test interfaces from sibling files are not collected."""
        (meter_file.parent / "more.go").write_text(
            "package geo\n\ntype Other interface {\n\tRun()\n}\n"
        )
        assert list(collect_file(meter_file)) == ["Measurer"]
