"""Co-located post assets: finding references and relocating them."""

import re

ASSET_PREFIX = "assets/"

ASSET_REF_RE = re.compile(r"!\[.*?\]\((assets/[^)]+)\)")
_ASSET_SRC_RE = re.compile(r"""(src=["'])assets/""")


def extract_asset_references(markdown: str) -> list[str]:
    """Return every ``assets/...`` image path in document order.

    Duplicates are kept. Absolute URLs never match. An image title is not
    split off: ``![x](assets/a.png "t")`` yields ``assets/a.png "t"``.
    """
    return ASSET_REF_RE.findall(markdown)


def rewrite_asset_paths(html: str) -> str:
    """Point ``src="assets/x"`` at ``x``, for assets copied next to the post."""
    return _ASSET_SRC_RE.sub(r"\1", html)
