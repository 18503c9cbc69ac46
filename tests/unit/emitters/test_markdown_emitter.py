#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/emitters/test_markdown_emitter.py
"""Unit tests for MarkdownEmitter.

Tests cover:
- Rendering every core node kind to Markdown
- Escaping of running text and exemption of code and HTML payloads
- Soft breaks, inline disambiguation and bold/italic requests
- Table-cell behavior of paragraphs and code spans
- Error conditions (unknown kinds, declaration links, wrong options)

"""

from dataclasses import dataclass
from io import StringIO
from typing import ClassVar

import pytest
from doc_tree_helpers import paragraph, section

from apidoc2md.ast import (
    DocCodeSpan,
    DocDeclarationReference,
    DocErrorText,
    DocEscapedText,
    DocFencedCode,
    DocHeading,
    DocHtmlAttribute,
    DocHtmlEndTag,
    DocHtmlStartTag,
    DocLinkTag,
    DocMemberReference,
    DocNode,
    DocParagraph,
    DocPlainText,
    DocSoftBreak,
)
from apidoc2md.emitters import MarkdownEmitter
from apidoc2md.exceptions import CodeDestinationNotSupportedError, InvalidOptionsError, UnsupportedNodeKindError
from apidoc2md.options import BaseEmitterOptions, MarkdownEmitterOptions


@dataclass(frozen=True)
class DocCallout(DocNode):
    """Node kind unknown to the core emitter."""

    kind: ClassVar[str] = "callout"

    text: str = ""


@pytest.mark.unit
class TestBasicEmission:
    """Tests for document-level behavior of emit()."""

    def test_paragraph_with_markdown_symbols(self, emitter):
        """Test the canonical paragraph example."""
        result = emitter.emit(None, paragraph("Hello *world*"))
        assert result == "Hello \\*world\\*\n\n"

    def test_multiple_paragraphs(self, emitter):
        """Test paragraphs are separated by one blank line."""
        result = emitter.emit(None, section(paragraph("First"), paragraph("Second")))
        assert result == "First\n\nSecond\n\n"

    def test_empty_section(self, emitter):
        """Test an empty tree produces empty output."""
        assert emitter.emit(None, section()) == ""

    def test_trailing_newline_appended(self, emitter):
        """Test output not ending in a newline gets exactly one."""
        assert emitter.emit(None, DocPlainText("abc")) == "abc\n"

    def test_no_extra_newline_when_already_terminated(self, emitter):
        """Test output already ending in a newline is left alone."""
        result = emitter.emit(None, DocFencedCode(code="x", language=""))
        assert result == "```\nx\n```\n"

    def test_existing_buffer_content_kept(self, emitter):
        """Test output is appended to the content of the given buffer."""
        result = emitter.emit(StringIO("# Title\n"), section(DocPlainText("Body")))
        assert result == "# Title\nBody\n"

    def test_tree_not_mutated(self, emitter):
        """Test emission leaves the input tree unchanged."""
        para = DocParagraph(nodes=[DocSoftBreak(), DocPlainText("  text  ")])
        emitter.emit(None, para)
        assert para.nodes == (DocSoftBreak(), DocPlainText("  text  "))

    def test_emitter_reusable(self, emitter):
        """Test the same emitter produces identical output on repeated calls."""
        tree = paragraph("Hello")
        assert emitter.emit(None, tree) == emitter.emit(None, tree)


@pytest.mark.unit
class TestTextEmission:
    """Tests for plain, escaped and error text."""

    def test_plain_text_is_escaped(self, emitter):
        """Test Markdown and HTML characters in plain text are escaped."""
        result = emitter.emit(None, DocPlainText("a_b | <c> & `d`"))
        assert result == "a\\_b \\| &lt;c&gt; &amp; \\`d\\`\n"

    def test_escaped_text_uses_decoded_text(self, emitter):
        """Test escaped text renders its decoded form."""
        result = emitter.emit(None, DocEscapedText(decoded_text="@param*", encoded_text="\\@param*"))
        assert result == "@param\\*\n"

    def test_error_text_rendered_like_plain_text(self, emitter):
        """Test error text gets no diagnostic marker."""
        result = emitter.emit(None, paragraph_of(DocErrorText("oops {@link", error_message="Unterminated tag")))
        assert result == "oops {@link\n\n"

    def test_error_text_escaped(self, emitter):
        """Test error text is escaped like plain text."""
        assert emitter.emit(None, DocErrorText("# heading?")) == "\\# heading?\n"

    def test_hyphen_runs(self, emitter):
        """Test three hyphens are escaped and two are not."""
        assert emitter.emit(None, DocPlainText("a -- b --- c")) == "a -- b \\-\\-\\- c\n"

    def test_entities_and_quotes(self, emitter):
        """Test existing entities are re-escaped and quotes are kept."""
        result = emitter.emit(None, DocPlainText("&lt; \"x\" 'y'"))
        assert result == "&amp;lt; \"x\" 'y'\n"


@pytest.mark.unit
class TestPlainTextWriter:
    """Tests for write_plain_text()."""

    def test_surrounding_whitespace_written_verbatim(self, emitter, context):
        """Test leading and trailing whitespace is kept."""
        emitter.write_plain_text("  a*b \n", context)
        assert context.writer.to_string() == "  a\\*b \n"

    def test_whitespace_only_text_has_no_marker(self, emitter, context):
        """Test whitespace-only text never gets a separator."""
        context.writer.write("x")
        emitter.write_plain_text("   ", context)
        assert context.writer.to_string() == "x   "

    def test_marker_after_unsafe_character(self, emitter, context):
        """Test adjacent runs are separated by an empty HTML comment."""
        context.writer.write("**one**")
        emitter.write_plain_text("*two*", context)
        assert context.writer.to_string() == "**one**<!-- -->\\*two\\*"

    @pytest.mark.parametrize("preceding", ["", "\n", " ", "[", ">"])
    def test_no_marker_after_safe_character(self, emitter, context, preceding):
        """Test no separator follows start of output, newline, space, '[' or '>'."""
        context.writer.write(preceding)
        emitter.write_plain_text("*x*", context)
        assert context.writer.to_string() == f"{preceding}\\*x\\*"

    def test_interior_newline_kept_in_middle(self, emitter, context):
        """Test text spanning lines is escaped as a whole."""
        emitter.write_plain_text("a*\n*b", context)
        assert context.writer.to_string() == "a\\*\n\\*b"

    def test_bold_requested(self, emitter, context):
        """Test bold requests wrap the trimmed text in <b> tags."""
        context.bold_requested = True
        emitter.write_plain_text(" hi ", context)
        assert context.writer.to_string() == " <b>hi</b> "

    def test_bold_and_italic_requested(self, emitter, context):
        """Test bold is opened outside italic and closed after it."""
        context.bold_requested = True
        context.italic_requested = True
        emitter.write_plain_text("hi", context)
        assert context.writer.to_string() == "<b><i>hi</i></b>"

    def test_italic_requested(self, emitter, context):
        """Test italic requests wrap the text in <i> tags."""
        context.italic_requested = True
        emitter.write_plain_text("a_b", context)
        assert context.writer.to_string() == "<i>a\\_b</i>"

    def test_requests_ignored_for_whitespace(self, emitter, context):
        """Test no tags are written for whitespace-only text."""
        context.bold_requested = True
        emitter.write_plain_text("  ", context)
        assert context.writer.to_string() == "  "


@pytest.mark.unit
class TestSoftBreak:
    """Tests for soft break handling."""

    def test_soft_break_between_words(self, emitter):
        """Test a soft break between two words becomes one space."""
        tree = paragraph_of(DocPlainText("one"), DocSoftBreak(), DocPlainText("two"))
        assert emitter.emit(None, tree) == "one two\n\n"

    def test_soft_break_after_space(self, emitter):
        """Test a soft break after a space adds nothing."""
        tree = paragraph_of(DocPlainText("one "), DocSoftBreak(), DocPlainText("two"))
        assert emitter.emit(None, tree) == "one two\n\n"

    def test_soft_break_at_start(self, emitter):
        """Test a soft break at the start of output adds nothing."""
        assert emitter.emit(None, section(DocSoftBreak())) == ""

    def test_soft_break_after_newline(self, emitter, context):
        """Test a soft break at the start of a line adds nothing."""
        context.writer.write("a\n")
        emitter.write_node(DocSoftBreak(), context)
        assert context.writer.to_string() == "a\n"

    def test_consecutive_soft_breaks(self, emitter):
        """Test repeated soft breaks still produce a single space."""
        tree = paragraph_of(DocPlainText("a"), DocSoftBreak(), DocSoftBreak(), DocPlainText("b"))
        assert emitter.emit(None, tree) == "a b\n\n"


@pytest.mark.unit
class TestHtmlEmission:
    """Tests for HTML tag pass-through."""

    def test_tags_written_verbatim(self, emitter):
        """Test HTML tags are not escaped and text between them is."""
        tree = paragraph_of(DocHtmlStartTag("b"), DocPlainText("a*b"), DocHtmlEndTag("b"))
        assert emitter.emit(None, tree) == "<b>a\\*b</b>\n\n"

    def test_attributes_not_escaped(self, emitter):
        """Test attribute values pass through untouched."""
        tag = DocHtmlStartTag("a", html_attributes=[DocHtmlAttribute("href", "x?a=1&b=2")])
        assert emitter.emit(None, tag) == '<a href="x?a=1&b=2">\n'

    def test_self_closing_tag(self, emitter):
        """Test self-closing tags keep their slash."""
        assert emitter.emit(None, DocHtmlStartTag("br", self_closing=True)) == "<br />\n"


@pytest.mark.unit
class TestCodeEmission:
    """Tests for code spans and fenced code."""

    def test_code_span_not_escaped(self, emitter):
        """Test code span content is never escaped."""
        tree = paragraph_of(DocPlainText("Call "), DocCodeSpan("a*b<T>"), DocPlainText(" now"))
        assert emitter.emit(None, tree) == "Call `a*b<T>` now\n\n"

    def test_code_span_newline_outside_table(self, emitter):
        """Test line breaks in code spans are kept outside tables."""
        assert emitter.emit(None, DocCodeSpan("a\nb")) == "`a\nb`\n"

    def test_code_span_newline_inside_table(self, emitter, context):
        """Test line breaks become `<p/>` inside table cells."""
        context.inside_table = True
        emitter.write_node(DocCodeSpan("a\r\nb\nc"), context)
        assert context.writer.to_string() == "`a`<p/>`b`<p/>`c`"

    def test_text_after_code_span_gets_marker(self, emitter):
        """Test text directly after a backtick is separated."""
        tree = paragraph_of(DocCodeSpan("x"), DocPlainText("s"))
        assert emitter.emit(None, tree) == "`x`<!-- -->s\n\n"

    def test_fenced_code(self, emitter):
        """Test the canonical fenced code example."""
        result = emitter.emit(None, DocFencedCode(code="const x = 1;", language="ts"))
        assert result == "```ts\nconst x = 1;\n```\n"

    def test_fenced_code_starts_on_new_line(self, emitter):
        """Test fenced code after text begins on a fresh line."""
        tree = section(DocPlainText("intro"), DocFencedCode(code="x", language="py"))
        assert emitter.emit(None, tree) == "intro\n```py\nx\n```\n"

    def test_fenced_code_body_not_escaped(self, emitter):
        """Test the code body is written verbatim."""
        result = emitter.emit(None, DocFencedCode(code="a_b *c* --- <d>"))
        assert result == "```\na_b *c* --- <d>\n```\n"

    def test_fenced_code_after_paragraph(self, emitter):
        """Test a code body ending in a newline keeps the blank line before the fence."""
        tree = section(paragraph("Example:"), DocFencedCode(code="x = 1\n", language="py"))
        assert emitter.emit(None, tree) == "Example:\n\n```py\nx = 1\n\n```\n"


@pytest.mark.unit
class TestLinkEmission:
    """Tests for link tags."""

    def test_url_link_without_text(self, emitter):
        """Test the display text defaults to the URL."""
        tree = paragraph_of(DocLinkTag(url_destination="https://example.com"))
        assert emitter.emit(None, tree) == "[https://example.com](https://example.com)\n\n"

    def test_url_link_with_text(self, emitter):
        """Test whitespace runs in link text collapse and text is escaped."""
        link = DocLinkTag(url_destination="https://example.com", link_text="the  *docs*\n site")
        assert emitter.emit(None, link) == "[the \\*docs\\* site](https://example.com)\n"

    def test_url_not_escaped(self, emitter):
        """Test the URL itself is written verbatim."""
        link = DocLinkTag(url_destination="https://example.com/a_b", link_text="x")
        assert emitter.emit(None, link) == "[x](https://example.com/a_b)\n"

    def test_link_text_only(self, emitter):
        """Test a link with only text renders as plain text."""
        assert emitter.emit(None, DocLinkTag(link_text="see *this*")) == "see \\*this\\*\n"

    def test_empty_link(self, emitter):
        """Test a link with no destination and no text renders nothing."""
        assert emitter.emit(None, DocLinkTag()) == ""

    def test_code_destination_fails(self, emitter):
        """Test the base emitter refuses declaration links."""
        reference = DocDeclarationReference(
            package_name="widgets", member_references=[DocMemberReference("Button")]
        )
        with pytest.raises(CodeDestinationNotSupportedError) as exc_info:
            emitter.emit(None, DocLinkTag(code_destination=reference, link_text="Button"))
        assert exc_info.value.reference == "widgets#Button"

    def test_code_destination_takes_precedence(self, emitter, button_reference):
        """Test a code destination wins over a URL destination."""
        link = DocLinkTag(code_destination=button_reference, url_destination="https://example.com")
        with pytest.raises(CodeDestinationNotSupportedError):
            emitter.emit(None, link)


@pytest.mark.unit
class TestParagraphEmission:
    """Tests for paragraph trimming and table behavior."""

    def test_paragraph_trimmed(self, emitter):
        """Test whitespace at paragraph ends is removed."""
        tree = paragraph_of(DocSoftBreak(), DocPlainText("  Hi  there  "), DocSoftBreak())
        assert emitter.emit(None, tree) == "Hi  there\n\n"

    def test_paragraph_inside_table(self, emitter, context):
        """Test paragraphs in table cells are wrapped in <p> without newlines."""
        context.inside_table = True
        emitter.write_node(paragraph(" Hi "), context)
        assert context.writer.to_string() == "<p>Hi</p>"

    def test_empty_paragraph(self, emitter):
        """Test an empty paragraph still ends the block."""
        assert emitter.emit(None, section(DocPlainText("a"), DocParagraph())) == "a\n\n"


@pytest.mark.unit
class TestEmitterErrors:
    """Tests for fatal error conditions."""

    def test_unknown_kind(self, emitter):
        """Test unknown node kinds fail instead of being skipped."""
        with pytest.raises(UnsupportedNodeKindError) as exc_info:
            emitter.emit(None, section(DocCallout("x")))
        assert exc_info.value.kind == "callout"
        assert "callout" in str(exc_info.value)

    def test_page_layout_nodes_unknown_to_core(self, emitter):
        """Test page-layout kinds need the custom emitter."""
        with pytest.raises(UnsupportedNodeKindError):
            emitter.emit(None, DocHeading(title="Title"))

    def test_wrong_options_type(self, emitter):
        """Test options of an unrelated type are rejected."""
        with pytest.raises(InvalidOptionsError):
            emitter.emit(None, paragraph("x"), BaseEmitterOptions())

    def test_options_available_in_context(self):
        """Test write methods can read the options passed to emit()."""
        seen = []

        class RecordingEmitter(MarkdownEmitter):
            def visit_plain_text(self, node, context):
                seen.append(context.options)
                super().visit_plain_text(node, context)

        options = MarkdownEmitterOptions()
        RecordingEmitter().emit(None, DocPlainText("x"), options)
        assert seen == [options]


@pytest.mark.unit
class TestEmitterExtension:
    """Tests for overriding per-kind behavior."""

    def test_override_visit_method(self):
        """Test a subclass can change how one kind is written."""

        class DoubleTickEmitter(MarkdownEmitter):
            def visit_code_span(self, node, context):
                context.writer.write(f"``{node.code}``")

        assert DoubleTickEmitter().emit(None, DocCodeSpan("a`b")) == "``a`b``\n"

    def test_add_kind(self):
        """Test a subclass can handle a new kind."""

        class CalloutEmitter(MarkdownEmitter):
            def visit_callout(self, node, context):
                self.write_plain_text(f"Note: {node.text}", context)

        assert CalloutEmitter().emit(None, DocCallout("a_b")) == "Note: a\\_b\n"

    def test_override_escaping(self):
        """Test get_escaped_text() controls escaping of all running text."""

        class UpperEmitter(MarkdownEmitter):
            def get_escaped_text(self, text):
                return text.upper()

        link = DocLinkTag(url_destination="https://example.com", link_text="docs")
        assert UpperEmitter().emit(None, section(DocPlainText("a*"), link)) == "A*[DOCS](https://example.com)\n"


def paragraph_of(*nodes: DocNode) -> DocParagraph:
    """Build a paragraph from arbitrary nodes."""
    return DocParagraph(nodes=list(nodes))
