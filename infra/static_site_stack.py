from aws_cdk import Annotations, Stack, Token
from constructs import Construct

from .config import SiteConfig
from .static_site import StaticSite

# CloudFront only reads ACM certificates from this region
CERTIFICATE_REGION = "us-east-1"


class StaticSiteStack(Stack):
    """
    Stack holding the static site. The domain name comes from the cdk context:

        cdk synth -c domain=mystaticsite.com -c subdomain=www
    """

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.site_config: SiteConfig = SiteConfig.from_context(self.node)

        if not Token.is_unresolved(self.region) and self.region != CERTIFICATE_REGION:
            Annotations.of(self).add_error(
                f"stack must be deployed to {CERTIFICATE_REGION}, the certificate of a "
                f"CloudFront distribution can not live in {self.region}"
            )

        self.static_site = StaticSite(self, "StaticSite", self.site_config)
