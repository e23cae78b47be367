"""Credential entries in a user-level .npmrc.

The target file is edited line by line instead of through an INI parser so
that comments, blank lines and section markers survive untouched. For every
feed three keys are guaranteed:

    //<host><path>:username=VssSessionToken
    //<host><path>:_password=<base64 PAT>
    //<host><path>:email=not-used@example.com

A key that already exists is rewritten in place (every matching line, so
duplicates stay duplicates); a missing key is appended at the end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Literal

from core.domain.models import PLACEHOLDER_EMAIL, SESSION_USERNAME, FeedUrl
from core.domain.pat import encode_password


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyUpdate:
    """What happened to one credential key."""

    key: str
    action: Literal["replaced", "appended"]
    matches: int = 0


@dataclass
class NpmrcRewrite:
    text: str
    updates: list[KeyUpdate] = field(default_factory=list)

    @property
    def duplicates(self) -> list[KeyUpdate]:
        """Keys that were found on more than one line."""

        return [u for u in self.updates if u.matches > 1]


def credential_entries(feed: FeedUrl, password: str) -> list[tuple[str, str]]:
    prefix = feed.key_prefix
    return [
        (f"{prefix}:username", SESSION_USERNAME),
        (f"{prefix}:_password", password),
        (f"{prefix}:email", PLACEHOLDER_EMAIL),
    ]


def _set_entry(lines: list[str], key: str, value: str) -> KeyUpdate:
    entry = f"{key}={value}"
    matches = 0
    for index, line in enumerate(lines):
        if line.strip().lstrip("\ufeff").startswith(key):
            lines[index] = entry
            matches += 1
    if matches:
        return KeyUpdate(key=key, action="replaced", matches=matches)
    lines.append(entry)
    return KeyUpdate(key=key, action="appended")


def rewrite_npmrc(text: str, feeds: Iterable[FeedUrl], password: str) -> NpmrcRewrite:
    """Return `text` with the credential entries of every feed set.

    Feeds are applied in order and each key is searched against the lines as
    they stand after the previous key, so the output is deterministic.
    An empty `text` has no lines at all (no leading blank line is produced).
    """

    lines = text.split("\n") if text else []
    updates: list[KeyUpdate] = []
    for feed in feeds:
        for key, value in credential_entries(feed, password):
            update = _set_entry(lines, key, value)
            logger.debug("%s %s (%d matching lines)", update.action, key, update.matches)
            updates.append(update)
    return NpmrcRewrite(text="\n".join(lines), updates=updates)


def write_feed_credentials(path: Path, feeds: Iterable[FeedUrl], pat: str) -> NpmrcRewrite:
    """Write the credentials for `feeds` into the .npmrc at `path`.

    Creates the file (and missing parent directories) when needed. The file
    is read whole and written whole.
    """

    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")
        logger.debug("Created %s", path)

    # Untouched lines keep their exact bytes: CRLF endings and non-UTF-8 bytes.
    with path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as fh:
        text = fh.read()

    rewrite = rewrite_npmrc(text, feeds, encode_password(pat))
    with path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
        fh.write(rewrite.text)
    return rewrite
