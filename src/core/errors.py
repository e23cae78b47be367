"""Errors raised by the core.

Every `FeedAuthError` is a validation failure the user can fix; the CLI turns
them into a red message on stderr and exit code 1. File-system errors are not
wrapped.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.feed_url import FEED_URL_TEMPLATE
from core.domain.pat import INVALID_PAT_MESSAGE


class FeedAuthError(Exception):
    """Base class for input problems that stop the run."""


class InvalidPatError(FeedAuthError):
    def __init__(self) -> None:
        super().__init__(INVALID_PAT_MESSAGE)


class InvalidFeedUrlError(FeedAuthError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f'"{value}" is not a valid Azure DevOps NPM feed URL. Expected "{FEED_URL_TEMPLATE}"'
        )


class FeedUrlParseError(FeedAuthError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'Failed to parse Azure DevOps feed URL: "{value}"')


class ProjectNpmrcNotFoundError(FeedAuthError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Failed to find NPM configuration file. "{path}" does not exist.')


class NoFeedsFoundError(FeedAuthError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f'Could not find any Azure DevOps feeds in "{path}". '
            'Please add the feed to the file or specify the feed URL with the "--url" option.'
        )
