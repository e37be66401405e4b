"""Tests for the @include directive scanner."""
from __future__ import annotations

import os
from pathlib import Path

import pytest

from mdinclude.core.includes import (
    IncludeDirective,
    ScanError,
    extract_include_path,
    is_include_directive,
    normalize_path,
    parse_include_line,
    scan,
)
from mdinclude.core.includes.scanner import EMPTY_PATH_MESSAGE

BASE = "/project/docs"


class TestNormalizePath:
    def test_home_with_subpath(self, home_dir: Path) -> None:
        assert normalize_path("~/.claude/rules.md", BASE) == os.path.join(str(home_dir), ".claude", "rules.md")

    def test_home_alone(self, home_dir: Path) -> None:
        assert normalize_path("~", BASE) == str(home_dir)

    def test_home_trailing_separator(self, home_dir: Path) -> None:
        assert normalize_path("~/", BASE) == str(home_dir)

    def test_home_with_doubled_separator_stays_under_home(self, home_dir: Path) -> None:
        assert normalize_path("~//notes/a.md", BASE) == os.path.join(str(home_dir), "notes", "a.md")

    def test_tilde_user_form_is_relative(self) -> None:
        assert normalize_path("~other/x.md", BASE) == "/project/docs/~other/x.md"

    def test_absolute_path_untouched(self) -> None:
        assert normalize_path("/absolute/path.md", BASE) == "/absolute/path.md"

    def test_absolute_redundant_separators_and_parent_segments(self) -> None:
        assert normalize_path("/a//b/../c", BASE) == "/a/c"

    def test_absolute_leading_double_slash_collapsed(self) -> None:
        assert normalize_path("//a/b.md", BASE) == "/a/b.md"

    def test_relative_dot_prefix(self) -> None:
        assert normalize_path("./local.md", BASE) == "/project/docs/local.md"

    def test_relative_without_prefix(self) -> None:
        assert normalize_path("local.md", BASE) == "/project/docs/local.md"

    def test_parent_directory(self) -> None:
        assert normalize_path("../shared/rules.md", BASE) == "/project/shared/rules.md"

    def test_climbs_above_base(self) -> None:
        assert normalize_path("../../../../etc/x.md", BASE) == "/etc/x.md"

    def test_trims_whitespace(self) -> None:
        assert normalize_path("  ./local.md  ", BASE) == "/project/docs/local.md"

    def test_complex_relative(self) -> None:
        assert normalize_path("./a/./b/../c/file.md", BASE) == "/project/docs/a/c/file.md"

    def test_deeply_nested(self) -> None:
        assert normalize_path("./a/b/c/d/e/f/deeply-nested.md", BASE) == "/project/docs/a/b/c/d/e/f/deeply-nested.md"

    def test_relative_base_is_made_absolute(self) -> None:
        assert normalize_path("x.md", "docs") == os.path.join(os.getcwd(), "docs", "x.md")

    def test_accepts_path_objects(self) -> None:
        assert normalize_path("x.md", Path(BASE)) == "/project/docs/x.md"

    def test_backslash_path_is_absolute_result(self) -> None:
        assert os.path.isabs(normalize_path("./folder\\file.md", BASE))


class TestParseIncludeLine:
    def test_simple_directive(self) -> None:
        result = parse_include_line("@include ./rules.md", 5, BASE)
        assert result == IncludeDirective(
            original_line="@include ./rules.md",
            line_number=5,
            raw_path="./rules.md",
            resolved_path="/project/docs/rules.md",
        )

    def test_leading_spaces(self) -> None:
        result = parse_include_line("    @include ./rules.md", 1, BASE)
        assert result is not None
        assert result.raw_path == "./rules.md"

    def test_leading_tabs(self) -> None:
        result = parse_include_line("\t@include /absolute/path.md", 10, BASE)
        assert result is not None
        assert result.resolved_path == "/absolute/path.md"

    @pytest.mark.parametrize("line", ["# Just a comment", "Some text", ""])
    def test_non_directive_lines(self, line: str) -> None:
        assert parse_include_line(line, 1, BASE) is None

    @pytest.mark.parametrize("line", ["@include", "@include ", "@include   "])
    def test_missing_path(self, line: str) -> None:
        assert parse_include_line(line, 1, BASE) is None

    def test_mid_line_keyword(self) -> None:
        assert parse_include_line("Some text @include ./file.md", 1, BASE) is None

    def test_keyword_must_be_followed_by_whitespace(self) -> None:
        assert parse_include_line("@include./file.md", 1, BASE) is None
        assert parse_include_line("@includes ./file.md", 1, BASE) is None

    def test_paths_with_spaces(self) -> None:
        result = parse_include_line("@include ./my file with spaces.md", 1, BASE)
        assert result is not None
        assert result.raw_path == "./my file with spaces.md"
        assert result.resolved_path == "/project/docs/my file with spaces.md"

    def test_preserves_original_line(self) -> None:
        line = "  @include ~/.claude/rules.md"
        result = parse_include_line(line, 1, BASE)
        assert result is not None
        assert result.original_line == line

    def test_unicode_path(self) -> None:
        result = parse_include_line("@include ./日本語/ファイル.md", 1, BASE)
        assert result is not None
        assert result.raw_path == "./日本語/ファイル.md"

    def test_emoji_path(self) -> None:
        result = parse_include_line("@include ./docs/📚-notes.md", 1, BASE)
        assert result is not None
        assert result.raw_path == "./docs/📚-notes.md"

    def test_carriage_return_is_trimmed(self) -> None:
        result = parse_include_line("@include ./a.md\r", 1, BASE)
        assert result is not None
        assert result.raw_path == "./a.md"

    @pytest.mark.parametrize("ext", ["md", "txt", "yaml", "json", "markdown"])
    def test_various_extensions(self, ext: str) -> None:
        result = parse_include_line(f"@include ./file.{ext}", 1, BASE)
        assert result is not None
        assert result.resolved_path == f"/project/docs/file.{ext}"


class TestScan:
    def test_multiple_directives_in_line_order(self) -> None:
        content = "\n".join(
            [
                "# Project Rules",
                "",
                "@include ~/.claude/languages/go.md",
                "@include ./local-rules.md",
                "",
                "Some text here",
                "",
                "  @include ../shared/common.md",
            ]
        )
        result = scan(content, BASE)

        assert [d.line_number for d in result.directives] == [3, 4, 8]
        assert [d.raw_path for d in result.directives] == [
            "~/.claude/languages/go.md",
            "./local-rules.md",
            "../shared/common.md",
        ]
        assert result.directives[2].resolved_path == "/project/shared/common.md"
        assert result.errors == ()

    def test_no_directives(self) -> None:
        result = scan("# Just a header\n\nSome content.", BASE)
        assert result.directives == ()
        assert result.errors == ()

    def test_preserves_original_content(self) -> None:
        content = "# Header\n@include ./file.md\nMore content\n"
        assert scan(content, BASE).original_content == content

    def test_reports_errors_for_invalid_directives(self) -> None:
        content = "@include ./valid.md\n@include\n@include \n@include ./another-valid.md\n"
        result = scan(content, BASE)

        assert len(result.directives) == 2
        assert [e.line_number for e in result.errors] == [2, 3]
        assert all("path cannot be empty" in e.message for e in result.errors)

    def test_keyword_only_and_whitespace_only_paths(self) -> None:
        result = scan("@include\n@include   \n@include ./ok.md", BASE)

        assert result.errors == (
            ScanError(line_number=1, line="@include", message=EMPTY_PATH_MESSAGE),
            ScanError(line_number=2, line="@include   ", message=EMPTY_PATH_MESSAGE),
        )
        assert len(result.directives) == 1
        assert result.directives[0].line_number == 3

    def test_indented_keyword_only_line_is_an_error(self) -> None:
        result = scan("\t@include\t", BASE)
        assert [e.line_number for e in result.errors] == [1]

    def test_a_line_is_never_both_directive_and_error(self) -> None:
        content = "@include\n@include ./a.md\n @include  \n@INCLUDE ./b.md\ntext"
        result = scan(content, BASE)
        directive_lines = {d.line_number for d in result.directives}
        error_lines = {e.line_number for e in result.errors}
        assert directive_lines == {2}
        assert error_lines == {1, 3}
        assert not directive_lines & error_lines

    def test_empty_content(self) -> None:
        result = scan("", BASE)
        assert result.directives == ()
        assert result.errors == ()
        assert result.original_content == ""

    def test_whitespace_only_content(self) -> None:
        result = scan("   \n\n  \t\n", BASE)
        assert result.directives == ()
        assert result.errors == ()

    def test_line_numbers(self) -> None:
        content = "Line 1\nLine 2\n@include ./first.md\nLine 4\nLine 5\n@include ./second.md"
        result = scan(content, BASE)
        assert [d.line_number for d in result.directives] == [3, 6]

    def test_is_pure(self) -> None:
        content = "@include ./a.md\n@include\ntext\n@include ~/b.md"
        assert scan(content, BASE) == scan(content, BASE)

    def test_legacy_at_path_syntax_is_ignored(self) -> None:
        content = "@./file.md\n@~/config.md\n@/absolute/path.md\n@path/to/file.md"
        result = scan(content, BASE)
        assert result.directives == ()
        assert result.errors == ()


class TestIsIncludeDirective:
    @pytest.mark.parametrize(
        "line",
        ["@include ./file.md", "  @include ~/.claude/rules.md", "\t@include /absolute/path.md"],
    )
    def test_valid_lines(self, line: str) -> None:
        assert is_include_directive(line) is True

    @pytest.mark.parametrize("line", ["# Comment", "Some text", "", "Text @include ./file.md"])
    def test_non_directive_lines(self, line: str) -> None:
        assert is_include_directive(line) is False

    def test_empty_path(self) -> None:
        assert is_include_directive("@include ") is False

    @pytest.mark.parametrize("line", ["@INCLUDE ./f.md", "@Include ./f.md"])
    def test_case_sensitive(self, line: str) -> None:
        assert is_include_directive(line) is False

    def test_must_start_the_line(self) -> None:
        assert is_include_directive("text @include ./f.md") is False

    @pytest.mark.parametrize("line", ["@./file.md", "@~/config.md", "@/absolute/path.md"])
    def test_legacy_syntax_never_matches(self, line: str) -> None:
        assert is_include_directive(line) is False


class TestExtractIncludePath:
    def test_valid_directive(self) -> None:
        assert extract_include_path("@include ./file.md") == "./file.md"
        assert extract_include_path("@include ~/.claude/rules.md") == "~/.claude/rules.md"
        assert extract_include_path("  @include /absolute/path.md") == "/absolute/path.md"

    @pytest.mark.parametrize("line", ["# Comment", "Some text", ""])
    def test_non_directive(self, line: str) -> None:
        assert extract_include_path(line) is None

    @pytest.mark.parametrize("line", ["@include ", "@include   "])
    def test_empty_path(self, line: str) -> None:
        assert extract_include_path(line) is None

    def test_trims(self) -> None:
        assert extract_include_path("@include   ./file.md   ") == "./file.md"
