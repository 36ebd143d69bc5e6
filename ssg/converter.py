"""Markdown to HTML conversion used for every page and post body."""

import markdown

EXTENSIONS = ["fenced_code", "tables", "toc"]

# Headings get slug ids and link to themselves; a date heading such as
# "#### *2026-01-28*" renders as <h4 id="2026-01-28"><a ...>.
EXTENSION_CONFIGS = {
    "toc": {"anchorlink": True},
}


def markdown_to_html(text: str) -> str:
    """Render Markdown with heading anchors."""
    md = markdown.Markdown(extensions=EXTENSIONS, extension_configs=EXTENSION_CONFIGS)
    return md.convert(text)
