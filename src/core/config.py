"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Gives the CLI a single place to fill in defaults for flags that were not passed.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def expand_path(path: Path | str) -> Path:
    """Expand a leading `~` to the user's home directory."""

    return Path(path).expanduser()


class AppSettings(BaseSettings):
    """Application settings.

    Why pydantic-settings:
    - Typed + validated at the edge (env vars) instead of scattered `os.environ` reads.
    - One contract shared by the CLI and tests.
    """

    model_config = SettingsConfigDict(
        env_prefix="ADO_NPM_AUTH_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    project_npmrc: Path = Field(
        default=Path("./.npmrc"),
        description="Project .npmrc scanned for Azure DevOps feeds when no --url is given.",
    )
    target_npmrc: Path = Field(
        default=Path("~/.npmrc"),
        description="The .npmrc file that receives the authentication token.",
    )
    pat: str | None = Field(
        default=None,
        description="Personal Access Token used when --pat is not passed.",
    )
