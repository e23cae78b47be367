"""Personal Access Token rules.

A PAT is only checked by shape; nothing here talks to Azure DevOps.
"""

from __future__ import annotations

import base64
import re


PAT_PATTERN = re.compile(r"[a-z\d]{52,}", re.IGNORECASE | re.ASCII)

INVALID_PAT_MESSAGE = "The input does not look like a PAT. Make sure you pasted it correctly."
EMPTY_PAT_MESSAGE = "PAT cannot be empty."


def is_pat(value: str) -> bool:
    return PAT_PATTERN.fullmatch(value) is not None


def check_pat_input(value: str) -> str | None:
    """Validate interactive input.

    Returns the message to show the user, or `None` when the (trimmed) input
    looks like a PAT.
    """

    value = value.strip()
    if not value:
        return EMPTY_PAT_MESSAGE
    if not is_pat(value):
        return INVALID_PAT_MESSAGE
    return None


def encode_password(pat: str) -> str:
    """Encode a PAT the way npm expects `_password` values (base64)."""

    return base64.b64encode(pat.encode("ascii")).decode("ascii")
