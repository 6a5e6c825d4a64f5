"""
helper functions shared by the static site constructs
"""
import re

from aws_cdk import RemovalPolicy

DNS_LABEL = re.compile(r"^(?!-)[a-z0-9-]{1,63}(?<!-)$", re.IGNORECASE)

REMOVAL_POLICIES = {
    "destroy": RemovalPolicy.DESTROY,
    "retain": RemovalPolicy.RETAIN,
    "snapshot": RemovalPolicy.SNAPSHOT,
}


class ConfigurationError(ValueError):
    """
    raised when the site configuration in the cdk context is missing or invalid
    """


def get_removal_policy(removal_policy: str) -> RemovalPolicy:
    """
    returns the removal policy matching the context value
    """
    try:
        return REMOVAL_POLICIES[str(removal_policy).strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"unknown removal_policy '{removal_policy}', "
            f"expected one of: {', '.join(REMOVAL_POLICIES)}"
        ) from None


def is_valid_dns_label(label: str) -> bool:
    return bool(DNS_LABEL.fullmatch(label))
