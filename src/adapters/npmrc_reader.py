"""Feed discovery from a project .npmrc.

Only top-level `registry` / `@scope:registry` entries are inspected. Other
registries (npmjs, GitHub Packages, ...) are expected in that file and are
skipped without complaint.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.feed_url import match_feed_url
from core.domain.models import FeedUrl
from core.errors import ProjectNpmrcNotFoundError


logger = logging.getLogger(__name__)


def _is_quoted(value: str) -> bool:
    return len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'"


def _strip_inline_comment(value: str) -> str:
    r"""Cut an unquoted value at the first unescaped `;` or `#`.

    `\;`, `\#` and `\\` lose their backslash; any other backslash is kept.
    """

    out: list[str] = []
    escaped = False
    for char in value:
        if escaped:
            out.append(char if char in "\\;#" else "\\" + char)
            escaped = False
        elif char in ";#":
            break
        elif char == "\\":
            escaped = True
        else:
            out.append(char)
    if escaped:
        out.append("\\")
    return "".join(out).strip()


def _clean(value: str) -> str:
    value = value.strip().lstrip("\ufeff")
    if _is_quoted(value):
        return value[1:-1]
    return _strip_inline_comment(value)


def parse_npmrc(text: str) -> dict[str, str]:
    """Parse the top-level `key=value` entries of an .npmrc.

    Rules:
    - Parsing stops at the first `[section]` header.
    - Blank lines and `;` / `#` comments are skipped, as are lines without `=`.
    - Unquoted values lose trailing `;` / `#` comments; quoted values are unquoted.
    - Later duplicates overwrite earlier ones.
    """

    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip().lstrip("\ufeff")
        if not line or line.startswith((";", "#")):
            continue
        if line.startswith("[") and line.endswith("]"):
            break
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = _clean(key)
        if key:
            data[key] = _clean(value)
    return data


def is_registry_key(key: str) -> bool:
    return key == "registry" or (key.startswith("@") and key.endswith(":registry"))


def discover_feed_urls(path: Path) -> list[FeedUrl]:
    """Collect the Azure DevOps feeds declared in a project .npmrc, in file order."""

    if not path.exists():
        raise ProjectNpmrcNotFoundError(path)

    feeds: list[FeedUrl] = []
    for key, value in parse_npmrc(path.read_text(encoding="utf-8", errors="surrogateescape")).items():
        if not is_registry_key(key):
            continue
        feed = match_feed_url(value)
        if feed is None:
            logger.debug("Skipping %s=%s: not an Azure DevOps feed", key, value)
            continue
        logger.debug("Found %s feed %s (%s)", feed.scope, feed.url, key)
        feeds.append(feed)
    return feeds
