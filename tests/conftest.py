"""Pytest fixtures for the static site stack tests."""

import pytest
from aws_cdk import App, Environment

from infra.static_site_stack import StaticSiteStack
from tests.constants import ACCOUNT, HOSTED_ZONE_ID


@pytest.fixture
def site_contents(tmp_path):
    """Create a built site directory to deploy."""
    contents = tmp_path / "out"
    contents.mkdir()
    (contents / "index.html").write_text("<h1>hello</h1>")
    (contents / "404.html").write_text("<h1>not found</h1>")
    return contents


@pytest.fixture
def base_context(site_contents):
    return {
        "domain": "example.com",
        "subdomain": "www",
        "hosted_zone_id": HOSTED_ZONE_ID,
        "site_contents": str(site_contents),
    }


@pytest.fixture
def make_stack(base_context):
    """Build a StaticSiteStack, overriding the base context with the given keys."""

    def _make_stack(region="us-east-1", **context):
        merged = dict(base_context)
        merged.update(context)
        merged = {key: value for key, value in merged.items() if value is not None}
        app = App(context=merged)
        return StaticSiteStack(app, "MyStaticSite", env=Environment(account=ACCOUNT, region=region))

    return _make_stack
