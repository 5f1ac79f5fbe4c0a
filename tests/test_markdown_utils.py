"""
Tests for the Markdown conversion helper
"""

from docview.utils.markdown_utils import markdown_to_html


def test_heading_and_paragraph():
    html = markdown_to_html("# Title\n\nBody text\n")

    assert "<h1>Title</h1>" in html
    assert "<p>Body text</p>" in html


def test_tables_extra():
    html = markdown_to_html("| a | b |\n|---|---|\n| 1 | 2 |\n")

    assert "<table>" in html
    assert "<td>1</td>" in html


def test_fenced_code_blocks():
    html = markdown_to_html("```\nprint('hi')\n```\n")

    assert "<pre" in html
    assert "```" not in html


def test_strike_extra():
    html = markdown_to_html("~~gone~~\n")

    assert "gone" in html
    assert "~~" not in html
