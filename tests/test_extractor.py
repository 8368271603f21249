"""Tests for link token extraction."""

from __future__ import annotations

import pytest

from linkcheck.extractor import extract_links, read_document
from linkcheck.models import Document, LinkOccurrence


def _doc(text: str) -> Document:
    return Document(path="src/content/guides/bayes/basics.md", text=text)


class TestExtractLinks:
    def test_no_links_yields_nothing(self) -> None:
        assert list(extract_links(_doc("# Title\n\nJust prose, no links.\n"))) == []

    def test_empty_document(self) -> None:
        assert list(extract_links(_doc(""))) == []

    def test_single_link_fields(self) -> None:
        occurrences = list(extract_links(_doc("intro\nRead [the guide](/docs/guides/bayes/basics).\n")))
        assert occurrences == [
            LinkOccurrence(
                source_path="src/content/guides/bayes/basics.md",
                line_number=2,
                display_text="the guide",
                raw_url="/docs/guides/bayes/basics",
            )
        ]

    def test_multiple_links_on_a_line_in_order(self) -> None:
        text = "See [a](/docs/tutorials/one), [b](https://example.com) and [c](#top)."
        urls = [o.raw_url for o in extract_links(_doc(text))]
        assert urls == ["/docs/tutorials/one", "https://example.com", "#top"]

    def test_line_numbers_are_one_based(self) -> None:
        text = "[first](/a)\n\n\n[fourth](/b)"
        assert [o.line_number for o in extract_links(_doc(text))] == [1, 4]

    @pytest.mark.parametrize("separator", ["\x0c", "\x0b", "\x1c", "\x85", "\u2028", "\u2029"])
    def test_only_newline_ends_a_line(self, separator: str) -> None:
        text = f"intro {separator} page break\n[x](/docs/nope)\n"
        assert [o.line_number for o in extract_links(_doc(text))] == [2]

    def test_crlf_line_endings(self) -> None:
        occurrences = list(extract_links(_doc("intro\r\n[x](/docs/nope)\r\n")))
        assert [(o.line_number, o.raw_url) for o in occurrences] == [(2, "/docs/nope")]

    @pytest.mark.parametrize(
        "text",
        [
            "[text] (/gap)",
            "[unterminated(/x)",
            "[](/empty-text)",
            "[ref-style][ref]",
            "[text]()",
        ],
    )
    def test_malformed_tokens_are_skipped(self, text: str) -> None:
        assert list(extract_links(_doc(text))) == []

    def test_image_prefix_is_matched_as_link(self) -> None:
        occurrences = list(extract_links(_doc("![diagram](/images/flow.png)")))
        assert [o.raw_url for o in occurrences] == ["/images/flow.png"]

    def test_url_stops_at_first_closing_paren(self) -> None:
        occurrences = list(extract_links(_doc("[wiki](https://en.wikipedia.org/wiki/Foo_(bar))")))
        assert occurrences[0].raw_url == "https://en.wikipedia.org/wiki/Foo_(bar"

    def test_sequence_is_restartable(self) -> None:
        doc = _doc("[a](/x)\n[b](/y)")
        assert list(extract_links(doc)) == list(extract_links(doc))


class TestReadDocument:
    def test_path_is_relative_to_root(self, tmp_path) -> None:
        path = tmp_path / "src" / "content" / "tutorials" / "intro.md"
        path.parent.mkdir(parents=True)
        path.write_text("hello", encoding="utf-8")

        doc = read_document(path, tmp_path)

        assert doc.path == "src/content/tutorials/intro.md"
        assert doc.text == "hello"

    def test_path_outside_root_is_kept(self, tmp_path) -> None:
        path = tmp_path / "a.md"
        path.write_text("x", encoding="utf-8")
        other_root = tmp_path / "elsewhere"

        assert read_document(path, other_root).path == path.as_posix()

    def test_undecodable_bytes_do_not_raise(self, tmp_path) -> None:
        path = tmp_path / "bad.md"
        path.write_bytes(b"[ok](/docs)\n\xff\xfe")
        doc = read_document(path, tmp_path)
        assert "[ok](/docs)" in doc.text

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(OSError):
            read_document(tmp_path / "nope.md", tmp_path)
