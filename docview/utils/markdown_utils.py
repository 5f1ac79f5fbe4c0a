# markdown_utils.py
# Utility for converting Markdown documents to HTML for the document views
# Uses the markdown2 library for simplicity and compatibility

import markdown2

MARKDOWN_EXTRAS = ["fenced-code-blocks", "tables", "strike", "cuddled-lists"]


def markdown_to_html(text: str) -> str:
    """
    Convert Markdown text to HTML for display in a MarkdownView.

    May raise on input markdown2 cannot handle; callers treat that as a
    failed conversion.
    """
    return markdown2.markdown(text, extras=MARKDOWN_EXTRAS)
