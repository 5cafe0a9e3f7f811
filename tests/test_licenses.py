"""Tests for tree_hygiene.checks.licenses."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import pytest

from tree_hygiene.checks.licenses import check_extension, check_licenses, has_license
from tree_hygiene.config import DEFAULT_LICENSES, HygieneConfig, LicenseSpec, generate_license
from tree_hygiene.errors import ScopeIntegrityError

if TYPE_CHECKING:
    from collections.abc import Callable

    from tree_hygiene.checks.base import RunContext

DART = next(spec for spec in DEFAULT_LICENSES if spec.extension == "dart")
HTML = next(spec for spec in DEFAULT_LICENSES if spec.extension == "html")
SH = next(spec for spec in DEFAULT_LICENSES if spec.extension == "sh")

DART_HEADER = generate_license("// ") + "\n\n"


class TestHasLicense:
    def test_exact_header_with_blank_line(self) -> None:
        assert has_license(DART_HEADER + "void main() {}\n", DART)

    def test_missing_blank_line(self) -> None:
        assert not has_license(generate_license("// ") + "\nvoid main() {}\n", DART)

    def test_crlf_normalized(self) -> None:
        content = (DART_HEADER + "void main() {}\n").replace("\n", "\r\n")
        assert has_license(content, DART)

    def test_empty_file_exempt(self) -> None:
        assert has_license("", DART)

    def test_wrong_year(self) -> None:
        assert not has_license(DART_HEADER.replace("2014", "2015"), DART)

    def test_html_needs_no_blank_line(self) -> None:
        content = f"<!DOCTYPE HTML>\n<!-- {generate_license('')} -->\n<html></html>\n"
        assert has_license(content, HTML)

    def test_shell_shebang_first(self) -> None:
        content = "#!/usr/bin/env bash\n" + generate_license("# ") + "\n\necho hi\n"
        assert has_license(content, SH)
        assert not has_license(generate_license("# ") + "\n\necho hi\n", SH)


class TestCheckLicenses:
    def test_reports_missing_headers(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx(
            {
                "lib/good.dart": DART_HEADER + "void main() {}\n",
                "lib/bad.dart": "void main() {}\n",
                "lib/empty.dart": "",
            }
        )
        result = check_licenses(ctx)
        assert result.name == "licenses:dart"
        assert [str(v) for v in result.violations] == ["lib/bad.dart"]
        assert result.header == (
            "The following 1 file does not have the right license header:"
        )
        assert result.footer[1] == DART.header
        assert result.footer[-1] == "...followed by a blank line."

    def test_plural_header(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx({"a.dart": "x\n", "b.dart": "y\n"})
        result = check_licenses(ctx)
        assert result.header == "The following 2 files do not have the right license header:"

    def test_first_failing_extension_wins(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx({"a.java": "class A {}\n", "b.xml": "<a/>\n"})
        result = check_licenses(ctx)
        assert result.name == "licenses:java"

    def test_html_footer_has_no_blank_line_hint(
        self, make_ctx: Callable[..., RunContext]
    ) -> None:
        ctx = make_ctx({"index.html": "<html></html>\n"})
        result = check_extension(ctx, HTML)
        assert result.footer[-1] == HTML.header

    def test_all_good(self, make_ctx: Callable[..., RunContext]) -> None:
        ctx = make_ctx({"a.dart": DART_HEADER, "notes.txt": "no header needed\n"})
        result = check_licenses(ctx)
        assert result.ok
        assert result.name == "licenses"

    def test_minimum_per_extension(self, make_ctx: Callable[..., RunContext]) -> None:
        config = dataclasses.replace(
            HygieneConfig(),
            licenses=(
                LicenseSpec("gradle", generate_license("// "), 0),
                LicenseSpec("dart", generate_license("// "), 2000),
            ),
        )
        ctx = make_ctx({"a.dart": DART_HEADER}, config=config)
        with pytest.raises(ScopeIntegrityError, match='extension ".dart"'):
            check_licenses(ctx)
