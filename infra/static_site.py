"""
Static site infrastructure, which deploys site content to an S3 bucket.

The site redirects from HTTP to HTTPS, using a CloudFront distribution,
Route53 alias record, and ACM certificate.
"""
import os
from typing import Optional

from aws_cdk import Annotations, CfnOutput, RemovalPolicy
from aws_cdk.aws_certificatemanager import Certificate, CertificateValidation
from aws_cdk.aws_cloudfront import AllowedMethods, BehaviorOptions, Distribution, OriginProtocolPolicy, \
    SecurityPolicyProtocol, SSLMethod, ViewerProtocolPolicy
from aws_cdk.aws_cloudfront_origins import S3StaticWebsiteOrigin
from aws_cdk.aws_route53 import ARecord, HostedZone, IHostedZone, RecordTarget
from aws_cdk.aws_route53_targets import CloudFrontTarget
from aws_cdk.aws_s3 import BlockPublicAccess, Bucket
from aws_cdk.aws_s3_deployment import BucketDeployment, Source
from constructs import Construct

from .config import SiteConfig
from .utilities import get_removal_policy


class StaticSite(Construct):
    """
    returns an instance of the static site construct
    """

    def __init__(self, scope: Construct, construct_id: str, config: SiteConfig, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.config = config
        site_domain = config.site_domain

        self.zone: IHostedZone = self.get_hosted_zone()
        CfnOutput(self, "Site", value=config.site_url)

        # Content bucket
        self.bucket: Bucket = self.create_bucket()
        CfnOutput(self, "Bucket", value=self.bucket.bucket_name)

        # TLS certificate
        self.certificate: Certificate = self.create_certificate()
        CfnOutput(self, "Certificate", value=self.certificate.certificate_arn)

        # CloudFront distribution that provides HTTPS
        self.distribution: Distribution = self.create_distribution()
        CfnOutput(self, "DistributionId", value=self.distribution.distribution_id)

        # Route53 alias record for the CloudFront distribution
        self.alias_record = ARecord(
            self, "SiteAliasRecord",
            record_name=site_domain,
            target=RecordTarget.from_alias(CloudFrontTarget(self.distribution)),
            zone=self.zone
        )

        # Deploy site contents to S3 bucket
        self.deployment: Optional[BucketDeployment] = self.create_deployment()

    def get_hosted_zone(self) -> IHostedZone:
        """
        returns the hosted zone of the apex domain, looked up unless its id is configured
        """
        if self.config.hosted_zone_id:
            return HostedZone.from_hosted_zone_attributes(
                self, "Zone",
                hosted_zone_id=self.config.hosted_zone_id,
                zone_name=self.config.domain_name
            )
        return HostedZone.from_lookup(self, "Zone", domain_name=self.config.domain_name)

    def create_bucket(self) -> Bucket:
        """
        returns the website bucket, named after the site domain
        """
        removal_policy = get_removal_policy(self.config.removal_policy)
        return Bucket(
            self,
            "SiteBucket",
            bucket_name=self.config.site_domain,
            website_index_document=self.config.index_document,
            website_error_document=self.config.error_document,
            public_read_access=True,
            # objects are public through the bucket policy only
            block_public_access=BlockPublicAccess(
                block_public_acls=True,
                block_public_policy=False,
                ignore_public_acls=True,
                restrict_public_buckets=False
            ),
            removal_policy=removal_policy,
            auto_delete_objects=removal_policy == RemovalPolicy.DESTROY
        )

    def create_certificate(self) -> Certificate:
        """
        returns a dns validated certificate for the site domain
        """
        return Certificate(
            self,
            "SiteCertificate",
            domain_name=self.config.site_domain,
            validation=CertificateValidation.from_dns(self.zone)
        )

    def create_distribution(self) -> Distribution:
        return Distribution(
            self, "SiteDistribution",
            comment=self.config.site_domain,
            domain_names=[self.config.site_domain],
            certificate=self.certificate,
            ssl_support_method=SSLMethod.SNI,
            minimum_protocol_version=SecurityPolicyProtocol.TLS_V1_2_2021,
            default_root_object=self.config.index_document,
            default_behavior=BehaviorOptions(
                origin=S3StaticWebsiteOrigin(self.bucket, protocol_policy=OriginProtocolPolicy.HTTP_ONLY),
                allowed_methods=AllowedMethods.ALLOW_GET_HEAD,
                viewer_protocol_policy=ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
                compress=True
            )
        )

    def create_deployment(self) -> Optional[BucketDeployment]:
        """
        uploads the built site to the bucket and invalidates the distribution cache
        """
        contents = self.config.site_contents_path
        if not os.path.isdir(contents):
            Annotations.of(self).add_warning_v2(
                "static-site:missing-site-contents",
                f"site contents directory '{contents}' not found, skipping the bucket deployment"
            )
            return None

        return BucketDeployment(
            self, "DeployWithInvalidation",
            sources=[Source.asset(contents)],
            destination_bucket=self.bucket,
            distribution=self.distribution,
            distribution_paths=["/*"]
        )
