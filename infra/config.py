"""
Site configuration read from the cdk context.

Pass the values on the command line::

    cdk synth -c domain=mystaticsite.com -c subdomain=www

or add them to the ``context`` block of ``cdk.json``.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from constructs import Node

from .utilities import ConfigurationError, get_removal_policy, is_valid_dns_label

logger = logging.getLogger(__name__)

DEFAULT_SITE_CONTENTS = "../out"
DEFAULT_REMOVAL_POLICY = "destroy"
DEFAULT_INDEX_DOCUMENT = "index.html"
DEFAULT_ERROR_DOCUMENT = "404.html"

# the bucket is named after the site domain
MAX_SITE_DOMAIN_LENGTH = 63


@dataclass(frozen=True)
class SiteConfig:
    domain_name: str
    site_sub_domain: str
    hosted_zone_id: Optional[str] = None
    site_contents_path: str = DEFAULT_SITE_CONTENTS
    removal_policy: str = DEFAULT_REMOVAL_POLICY
    index_document: str = DEFAULT_INDEX_DOCUMENT
    error_document: str = DEFAULT_ERROR_DOCUMENT

    def __post_init__(self):
        for key, value in (("domain", self.domain_name), ("subdomain", self.site_sub_domain)):
            labels = value.split(".")
            if not all(is_valid_dns_label(label) for label in labels):
                raise ConfigurationError(f"'{value}' is not a valid value for '{key}'")
        if len(self.site_domain) > MAX_SITE_DOMAIN_LENGTH:
            raise ConfigurationError(
                f"site domain '{self.site_domain}' is longer than {MAX_SITE_DOMAIN_LENGTH} characters, "
                f"shorten 'subdomain' or 'domain' so it can be used as the bucket name"
            )
        # fails on unknown policy names
        get_removal_policy(self.removal_policy)

    @property
    def site_domain(self) -> str:
        return f"{self.site_sub_domain}.{self.domain_name}"

    @property
    def site_url(self) -> str:
        return f"https://{self.site_domain}"

    @classmethod
    def from_context(cls, node: Node) -> "SiteConfig":
        """
        returns the site configuration from the context of the given construct node
        """
        config = cls(
            domain_name=_required(node, "domain"),
            site_sub_domain=_required(node, "subdomain"),
            hosted_zone_id=_optional(node, "hosted_zone_id"),
            site_contents_path=_optional(node, "site_contents") or DEFAULT_SITE_CONTENTS,
            removal_policy=_optional(node, "removal_policy") or DEFAULT_REMOVAL_POLICY,
            index_document=_optional(node, "index_document") or DEFAULT_INDEX_DOCUMENT,
            error_document=_optional(node, "error_document") or DEFAULT_ERROR_DOCUMENT,
        )
        logger.info("Static site %s (zone %s, contents %s)", config.site_url,
                    config.hosted_zone_id or config.domain_name, config.site_contents_path)
        return config


def _optional(node: Node, key: str) -> Optional[str]:
    value = node.try_get_context(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _required(node: Node, key: str) -> str:
    value = _optional(node, key)
    if value is not None:
        value = value.strip(".")
    if not value:
        raise ConfigurationError(
            f"missing '{key}' in the cdk context, pass it with "
            f"'cdk synth -c {key}=<value>' or add it to cdk.json"
        )
    return value.lower()
