#!/usr/bin/env python3
"""
Synthesise the static site stack into a CloudFormation template.

This stack relies on getting the domain name from the cdk context:

    cdk synth -c domain=mystaticsite.com -c subdomain=www

or on the "context" block of cdk.json.
"""
import logging
import os

from aws_cdk import App, Environment

from infra.static_site_stack import CERTIFICATE_REGION, StaticSiteStack

logging.basicConfig(
    level=getattr(logging, os.environ.get("LOG_LEVEL", "WARNING").upper(), logging.WARNING),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = App()

StaticSiteStack(
    app,
    "MyStaticSite",
    # env is required for HostedZone.from_lookup()
    # Cloudfront requires the certificate to be in us-east-1
    env=Environment(
        account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
        region=CERTIFICATE_REGION,
    ),
)

app.synth()
