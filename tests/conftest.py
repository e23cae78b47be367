"""Shared test configuration.

Every test runs in its own temporary working directory with the
`ADO_NPM_AUTH_*` variables removed, so a developer's `.env` or shell
environment cannot leak into AppSettings.
"""

from __future__ import annotations

import pytest

ORG_URL = "https://pkgs.dev.azure.com/myorg/_packaging/myfeed/npm/registry/"
PROJECT_URL = "https://pkgs.dev.azure.com/myorg/myproj/_packaging/myfeed/npm/registry/"
PAT = "A" * 52
# base64 of PAT
PASSWORD = "QUFBQUFBQUFBQUFBQUFBQUFBQUFBQUFBQUFBQUFBQUFBQUFBQUFBQUFBQUFBQUFBQUFBQQ=="


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    for name in ("ADO_NPM_AUTH_PAT", "ADO_NPM_AUTH_PROJECT_NPMRC", "ADO_NPM_AUTH_TARGET_NPMRC"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
