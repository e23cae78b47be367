"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to I/O libraries.

Note:
- These models describe *what* a feed or token link is, not *how* it is
  discovered or written to disk.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


SESSION_USERNAME = "VssSessionToken"
PLACEHOLDER_EMAIL = "not-used@example.com"
PACKAGING_PERMISSION = "Packaging (Read & Write)"


class FeedUrl(BaseModel):
    """An Azure DevOps npm feed URL that matched one of the two known shapes.

    Only built by `core.domain.feed_url.match_feed_url`; anything that does
    not match never becomes a `FeedUrl`.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        ...,
        min_length=1,
        description="The feed URL exactly as it was supplied.",
    )
    organization: str = Field(
        ...,
        min_length=1,
        description="Azure DevOps organization that owns the feed.",
    )
    project: str | None = Field(
        default=None,
        description="Project segment for project-scoped feeds.",
    )
    feed: str = Field(
        ...,
        min_length=1,
        description="Feed name (only used for validation).",
    )
    hostname: str = Field(
        ...,
        min_length=1,
        description="Host part of the URL.",
    )
    pathname: str = Field(
        ...,
        min_length=1,
        description="Path part of the URL, including the trailing slash.",
    )

    @property
    def scope(self) -> str:
        return "project" if self.project else "organization"

    @property
    def key_prefix(self) -> str:
        """Prefix of the per-registry keys in a user-level .npmrc."""

        return f"//{self.hostname}{self.pathname}"


class TokenHelp(BaseModel):
    """What the user needs to know to create a PAT for a given organization."""

    organization: str = Field(..., min_length=1)
    permission: str = Field(default=PACKAGING_PERMISSION)

    @property
    def tokens_url(self) -> str:
        return f"https://dev.azure.com/{self.organization}/_usersSettings/tokens"
