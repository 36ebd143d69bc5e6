"""Prose word count for Markdown, excluding code blocks."""

import re

import markdown

_PRE_BLOCK_RE = re.compile(r"<pre>.*?</pre>", re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>")


def count_words(text: str) -> int:
    """Count whitespace-separated words in rendered Markdown.

    Fenced and indented code blocks are dropped whole. Inline code is
    stripped of its tags like any other markup and its words count.
    """
    if not text or not text.strip():
        return 0
    html = markdown.markdown(text, extensions=["fenced_code", "tables"])
    html = _PRE_BLOCK_RE.sub("", html)
    html = _TAG_RE.sub(" ", html)
    return len(html.split())
