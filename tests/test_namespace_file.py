"""Tests for namespace extraction from text files."""

from __future__ import annotations

import pytest

from nsaudit.dotnet.namespace_file import extract_namespaces, read_namespace_file


class TestExtractNamespaces:
    def test_both_notations_in_one_text(self):
        text = "namespace:'Foo.Bar' namespace==Baz.Qux"
        assert extract_namespaces(text) == ["Baz.Qux", "Foo.Bar"]

    def test_quoted_value_is_trimmed(self):
        assert extract_namespaces("namespace:'  Foo.Bar  '") == ["Foo.Bar"]

    def test_quoted_value_may_contain_any_character(self):
        assert extract_namespaces("namespace:'My App/Tools-2'") == ["My App/Tools-2"]

    def test_whitespace_only_quoted_value_is_dropped(self):
        assert extract_namespaces("namespace:'   '") == []

    def test_single_equals(self):
        assert extract_namespaces("namespace=Foo") == ["Foo"]

    def test_many_equals(self):
        assert extract_namespaces("namespace====Foo.Bar") == ["Foo.Bar"]

    def test_bare_identifier_stops_at_invalid_character(self):
        assert extract_namespaces("namespace==Foo.Bar-Baz") == ["Foo.Bar"]

    def test_bare_identifier_cannot_start_with_digit(self):
        assert extract_namespaces("namespace==9Lives") == []

    def test_marker_without_value_is_ignored(self):
        assert extract_namespaces("namespace Foo.Bar; namespace: Foo") == []

    def test_duplicates_collapse(self):
        text = "namespace==A.B\nnamespace:'A.B'\nnamespace=A.B"
        assert extract_namespaces(text) == ["A.B"]

    def test_embedded_in_markup(self):
        text = "<xref:api?namespace==Contoso.Data> see [docs](namespace:'Contoso.Web')"
        assert extract_namespaces(text) == ["Contoso.Data", "Contoso.Web"]

    def test_no_matches(self):
        assert extract_namespaces("nothing to see here") == []


class TestReadNamespaceFile:
    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "namespaces.md"
        path.write_text("# API\nnamespace==Zeta\nnamespace:'Alpha.Ünicode'\n", encoding="utf-8")
        assert read_namespace_file(str(path)) == ["Alpha.Ünicode", "Zeta"]

    def test_skips_byte_order_mark(self, tmp_path):
        path = tmp_path / "namespaces.txt"
        path.write_bytes(b"\xef\xbb\xbfnamespace==A.B")
        assert read_namespace_file(str(path)) == ["A.B"]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_namespace_file(str(tmp_path / "missing.txt"))
