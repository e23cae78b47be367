from __future__ import annotations

import pytest

from conftest import ORG_URL, PROJECT_URL
from core.domain.feed_url import match_feed_url


def test_organization_scoped_url():
    feed = match_feed_url(ORG_URL)

    assert feed is not None
    assert feed.organization == "myorg"
    assert feed.project is None
    assert feed.feed == "myfeed"
    assert feed.scope == "organization"
    assert feed.hostname == "pkgs.dev.azure.com"
    assert feed.pathname == "/myorg/_packaging/myfeed/npm/registry/"
    assert feed.key_prefix == "//pkgs.dev.azure.com/myorg/_packaging/myfeed/npm/registry/"


def test_project_scoped_url():
    feed = match_feed_url(PROJECT_URL)

    assert feed is not None
    assert feed.organization == "myorg"
    assert feed.project == "myproj"
    assert feed.feed == "myfeed"
    assert feed.scope == "project"
    assert feed.key_prefix == "//pkgs.dev.azure.com/myorg/myproj/_packaging/myfeed/npm/registry/"


@pytest.mark.parametrize(
    "value",
    [
        "",
        "https://registry.npmjs.org/",
        "http://pkgs.dev.azure.com/myorg/_packaging/myfeed/npm/registry/",
        "https://pkgs.example.com/myorg/_packaging/myfeed/npm/registry/",
        "https://pkgs.dev.azure.com/myorg/_packaging/myfeed/npm/registry",
        "https://pkgs.dev.azure.com/myorg/_packaging/npm/registry/",
        "https://pkgs.dev.azure.com/myorg/a/b/_packaging/myfeed/npm/registry/",
        "https://pkgs.dev.azure.com/myorg/_packaging/myfeed/nuget/v3/index.json",
        "https://pkgs.dev.azure.com/myorg/_packaging/myfeed/npm/registry/extra/",
        "https://pkgs.dev.azure.com/myorg/_packaging/myfeed/npm/registry/?x=1",
        " https://pkgs.dev.azure.com/myorg/_packaging/myfeed/npm/registry/",
    ],
)
def test_rejects_other_shapes(value):
    assert match_feed_url(value) is None

