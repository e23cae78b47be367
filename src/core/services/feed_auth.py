"""Feed authentication flow.

Resolves the token and the feed URLs for a run, then hands them to the .npmrc
rewriter. Printing stays in the CLI: the only interaction the flow needs (the
token prompt) is injected as a `SecretPrompt`, and the token link is reported
through the `on_prompt` callback right before prompting.

Order:
1) token from --pat / settings (hard error when malformed)
2) feed URLs from --url (hard error on the first bad one)
3) otherwise feed URLs discovered in the project .npmrc
4) prompt for the token when none was supplied
5) rewrite the target .npmrc
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from adapters.npmrc_reader import discover_feed_urls
from adapters.npmrc_writer import NpmrcRewrite, write_feed_credentials
from core.config import expand_path
from core.domain.feed_url import match_feed_url
from core.domain.models import FeedUrl, TokenHelp
from core.domain.pat import check_pat_input, is_pat
from core.errors import FeedUrlParseError, InvalidFeedUrlError, InvalidPatError, NoFeedsFoundError
from core.interfaces.prompt import SecretPrompt


logger = logging.getLogger(__name__)

PAT_PROMPT = "PAT"


@dataclass
class AuthRequest:
    """Everything a run needs, built once by the CLI."""

    pat: str | None = None
    urls: Sequence[str] = field(default_factory=list)
    project_npmrc: Path = Path(".npmrc")
    target_npmrc: Path = field(default_factory=lambda: expand_path("~/.npmrc"))


@dataclass
class AuthResult:
    target: Path
    feeds: list[FeedUrl]
    prompted: bool
    rewrite: NpmrcRewrite


def validate_feed_urls(urls: Sequence[str]) -> list[FeedUrl]:
    feeds: list[FeedUrl] = []
    for value in urls:
        feed = match_feed_url(value)
        if feed is None:
            raise InvalidFeedUrlError(value)
        feeds.append(feed)
    return feeds


def resolve_feeds(request: AuthRequest) -> list[FeedUrl]:
    """Feeds from --url, or else from the project .npmrc. Never empty."""

    if request.urls:
        feeds = validate_feed_urls(request.urls)
    else:
        feeds = discover_feed_urls(request.project_npmrc)
        logger.debug("Discovered %d feed(s) in %s", len(feeds), request.project_npmrc)

    if not feeds:
        raise NoFeedsFoundError(request.project_npmrc)
    return feeds


def token_help_for(url: str) -> TokenHelp:
    feed = match_feed_url(url)
    if feed is None:
        raise FeedUrlParseError(url)
    return TokenHelp(organization=feed.organization)


def resolve_pat(
    request: AuthRequest,
    feeds: Sequence[FeedUrl],
    prompt: SecretPrompt,
    on_prompt: Callable[[TokenHelp], None] | None = None,
) -> tuple[str, bool]:
    """Return `(pat, prompted)`.

    A supplied token has already been validated by `authenticate`; otherwise
    the user is prompted until the input looks like a PAT.
    """

    if request.pat:
        return request.pat, False

    help_ = token_help_for(feeds[0].url)
    if on_prompt is not None:
        on_prompt(help_)
    value = prompt.ask(PAT_PROMPT, check_pat_input)
    return value.strip(), True


def authenticate(
    request: AuthRequest,
    prompt: SecretPrompt,
    on_prompt: Callable[[TokenHelp], None] | None = None,
) -> AuthResult:
    """Run the whole flow and write the target .npmrc."""

    if request.pat and not is_pat(request.pat):
        raise InvalidPatError()

    feeds = resolve_feeds(request)
    pat, prompted = resolve_pat(request, feeds, prompt, on_prompt)

    rewrite = write_feed_credentials(request.target_npmrc, feeds, pat)
    logger.debug("Wrote %d credential key(s) to %s", len(rewrite.updates), request.target_npmrc)
    return AuthResult(target=request.target_npmrc, feeds=feeds, prompted=prompted, rewrite=rewrite)
