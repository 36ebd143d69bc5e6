"""Load site configuration from ssg.yaml."""

from pathlib import Path

import yaml

from .models import Config, NavItem


def _section(data: dict, key: str) -> dict:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"config: '{key}' must be a mapping")
    return value


def _path_list(section: dict, key: str) -> list[str]:
    value = section.get(key) or []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def load_config(
    config_path: str,
    content_dir: str | None = None,
    output_dir: str | None = None,
    assets_dir: str | None = None,
) -> Config:
    """Load site configuration from a YAML file.

    Args:
        config_path: Path to ssg.yaml
        content_dir: Overrides build.content
        output_dir: Overrides build.output
        assets_dir: Overrides build.assets

    Returns:
        Config with defaults applied for the build directories.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If site.title or site.baseURL is missing.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config is not a mapping: {config_path}")

    site = _section(data, "site")
    build = _section(data, "build")
    for key in ("title", "baseURL"):
        if not site.get(key):
            raise ValueError(f"config: missing required field 'site.{key}'")

    navigation = [
        NavItem(title=str(nav.get("title", "")), url=str(nav.get("url", "")))
        for nav in data.get("navigation") or []
    ]

    return Config(
        title=str(site["title"]),
        base_url=str(site["baseURL"]).rstrip("/"),
        description=str(site.get("description") or site["title"]),
        author=str(site.get("author") or ""),
        content_dir=content_dir or build.get("content") or "content",
        output_dir=output_dir or build.get("output") or "public",
        assets_dir=assets_dir or build.get("assets") or "assets",
        navigation=navigation,
        feed_pages=_path_list(_section(data, "feed"), "pages"),
        topic_pages=_path_list(_section(data, "topics"), "pages"),
    )
