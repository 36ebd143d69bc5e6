"""YAML frontmatter extraction for Markdown content files.

A file may open with a block delimited by ``---`` lines holding
``title``, ``summary`` and ``date``. Dates are left as strings so the
date resolver can report the exact text that failed to parse.
"""

import yaml

DELIMITER = "---"

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class FrontmatterError(ValueError):
    """Raised when a frontmatter block cannot be deserialized."""


class _FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader that does not turn ISO dates into date objects."""


_FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def extract_frontmatter(text: str) -> tuple[dict, str]:
    """Split YAML frontmatter from the Markdown body.

    Text without a leading delimiter, or with an unterminated block, is
    returned whole as the body with empty metadata.

    Raises:
        FrontmatterError: If the block is not valid YAML or not a mapping.
    """
    if not text.startswith(DELIMITER):
        return {}, text
    parts = text.split(DELIMITER, 2)
    if len(parts) < 3:
        return {}, text
    try:
        fm = yaml.load(parts[1], Loader=_FrontmatterLoader)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"malformed frontmatter: {exc}") from exc

    if fm is None:
        fm = {}
    if not isinstance(fm, dict):
        raise FrontmatterError(
            f"frontmatter must be a mapping, got {type(fm).__name__}"
        )
    return fm, parts[2].strip()
