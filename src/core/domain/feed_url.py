"""Azure DevOps npm feed URL matching.

Feeds are either organization-scoped or project-scoped and each shape has its
own URL template. Only these two shapes exist, so a pair of anchored regular
expressions is all the matching we need.
"""

from __future__ import annotations

import re

from core.domain.models import FeedUrl


FEED_HOST = "pkgs.dev.azure.com"
FEED_URL_TEMPLATE = "https://pkgs.dev.azure.com/:organization(/:project)/_packaging/:feed/npm/registry/"

_SEGMENT = r"[^/?#\s]+"

ORGANIZATION_FEED_PATTERN = re.compile(
    rf"https://(?P<hostname>{re.escape(FEED_HOST)})"
    rf"(?P<pathname>/(?P<organization>{_SEGMENT})/_packaging/(?P<feed>{_SEGMENT})/npm/registry/)"
)
PROJECT_FEED_PATTERN = re.compile(
    rf"https://(?P<hostname>{re.escape(FEED_HOST)})"
    rf"(?P<pathname>/(?P<organization>{_SEGMENT})/(?P<project>{_SEGMENT})/_packaging/(?P<feed>{_SEGMENT})/npm/registry/)"
)


def match_feed_url(value: str) -> FeedUrl | None:
    """Return a `FeedUrl` if `value` is exactly one of the two feed URL shapes."""

    for pattern in (ORGANIZATION_FEED_PATTERN, PROJECT_FEED_PATTERN):
        match = pattern.fullmatch(value)
        if match is None:
            continue
        groups = match.groupdict()
        return FeedUrl(
            url=value,
            organization=groups["organization"],
            project=groups.get("project"),
            feed=groups["feed"],
            hostname=groups["hostname"],
            pathname=groups["pathname"],
        )
    return None
