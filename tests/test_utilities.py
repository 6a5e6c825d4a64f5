"""Tests for the shared helpers."""

import pytest
from aws_cdk import RemovalPolicy

from infra.utilities import ConfigurationError, get_removal_policy, is_valid_dns_label


@pytest.mark.parametrize(
    "name,expected",
    [
        ("destroy", RemovalPolicy.DESTROY),
        ("RETAIN", RemovalPolicy.RETAIN),
        (" Snapshot ", RemovalPolicy.SNAPSHOT),
    ],
)
def test_get_removal_policy(name, expected):
    assert get_removal_policy(name) == expected


def test_get_removal_policy_rejects_unknown_names():
    with pytest.raises(ConfigurationError, match="unknown removal_policy 'keep'"):
        get_removal_policy("keep")


@pytest.mark.parametrize("label", ["www", "example", "my-site", "a", "x" * 63, "123"])
def test_valid_dns_labels(label):
    assert is_valid_dns_label(label)


@pytest.mark.parametrize("label", ["", "-www", "www-", "my_site", "x" * 64, "ex ample", "www\n"])
def test_invalid_dns_labels(label):
    assert not is_valid_dns_label(label)
