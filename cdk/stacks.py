# Standard Library
from typing import Optional, List

# Third Party
from aws_cdk import (
    Stack,
    CfnOutput,
    aws_s3 as s3,
    aws_ssm as ssm,
    aws_events as events,
    aws_codecommit as codecommit,
    aws_cloudfront as cloudfront,
)
from constructs import Construct

# Local Modules
from cdk.custom_constructs import (
    CodeCommitDependencyCheck,
    CustomCdn,
    CustomS3Bucket,
    EdgeFunction,
    EdgeRole,
    FullRegionS3CodeCommitBackup,
    S3CodeCommitBackup,
    SecretKey,
    SecretKeyStore,
    StripeEventBusProducer,
    StripeWebhook,
)


class CloudComponentsExampleStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        stack_suffix: Optional[str] = "",
        **kwargs,
    ) -> None:
        """Example stack wiring every Cloud Components construct.

        Lambda@Edge functions only deploy to us-east-1, so this stack has to
        be created in that region.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        construct_id : str
            The ID of the construct.
        stack_suffix : Optional[str], optional
            Suffix to append to resource names for this stack, by default ""
        """
        super().__init__(scope, construct_id, **kwargs)

        # region Context
        self.stack_suffix = (stack_suffix if stack_suffix else "").lower()
        self.repository_name = self.node.try_get_context("repository_name")
        self.backup_schedule = (
            self.node.try_get_context("backup_schedule") or "cron(0 3 * * ? *)"
        )
        self.check_schedule = (
            self.node.try_get_context("dependency_check_schedule")
            or "cron(0 4 * * ? *)"
        )
        self.stripe_secret_key_parameter = self.node.try_get_context(
            "stripe_secret_key_parameter"
        )
        self.stripe_endpoint_secret_parameter = (
            self.node.try_get_context("stripe_endpoint_secret_parameter")
            or "/cloud-components/stripe/endpoint-secret"
        )
        self.stripe_events = self.node.try_get_context("stripe_events") or [
            "charge.succeeded",
            "charge.failed",
        ]
        self.http_headers = self.node.try_get_context("http_headers") or {
            "Strict-Transport-Security": "max-age=63072000",
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "DENY",
        }
        # endregion

        # region Buckets
        self.backup_bucket = self.create_s3_bucket(
            construct_id="BackupBucket",
            name="cloud-components-backups",
            versioned=True,
        )
        self.reports_bucket = self.create_s3_bucket(
            construct_id="ReportsBucket",
            name="cloud-components-reports",
        )
        self.website_bucket = self.create_s3_bucket(
            construct_id="WebsiteBucket",
            name="cloud-components-website",
            retain_on_delete=False,
        )
        # endregion

        # region Repository Backups and Dependency Check
        if self.repository_name:
            repository = codecommit.Repository.from_repository_name(
                self, "Repository", self.repository_name
            )

            S3CodeCommitBackup(
                self,
                "RepositoryBackup",
                backup_bucket=self.backup_bucket,
                schedule=events.Schedule.expression(self.backup_schedule),
                repository=repository,
            )

            CodeCommitDependencyCheck(
                self,
                "DependencyCheck",
                repository=repository,
                schedule=events.Schedule.expression(self.check_schedule),
                reports_bucket=self.reports_bucket,
                fail_on_cvss=7,
            )

        FullRegionS3CodeCommitBackup(
            self,
            "FullRegionBackup",
            backup_bucket=self.backup_bucket,
            schedule=events.Schedule.expression(self.backup_schedule),
        )
        # endregion

        # region Stripe
        if self.stripe_secret_key_parameter:
            self.create_stripe_integration(events=self.stripe_events)
        # endregion

        # region Edge Function and Distribution
        edge_role = EdgeRole(self, "EdgeRole")

        http_headers_function = EdgeFunction(
            self,
            "HttpHeaders",
            src_folder_path="cc-edge-http-headers",
            event_type=cloudfront.LambdaEdgeEventType.ORIGIN_RESPONSE,
            configuration={
                "logLevel": "INFO",
                "httpHeaders": self.http_headers,
            },
            edge_role=edge_role,
            stack_suffix=self.stack_suffix,
        )

        self.cdn = CustomCdn(
            self,
            "WebsiteDistribution",
            name="cloud-components-website",
            s3_origin=self.website_bucket,
            edge_lambdas=[http_headers_function.edge_lambda],
            stack_suffix=self.stack_suffix,
        ).distribution

        CfnOutput(
            self,
            "DistributionDomainNameOutput",
            value=self.cdn.distribution_domain_name,
            description="Domain name of the example CloudFront distribution",
        )
        # endregion

    def create_s3_bucket(
        self,
        construct_id: str,
        name: str,
        versioned: Optional[bool] = False,
        retain_on_delete: Optional[bool] = True,
    ) -> s3.Bucket:
        """Helper method to create an S3 bucket with a specific name and versioning.

        Parameters
        ----------
        construct_id : str
            The ID of the construct.
        name : str
            The name of the S3 bucket.
        versioned : Optional[bool], optional
            Whether to enable versioning on the bucket, by default False
        retain_on_delete : Optional[bool], optional
            Whether to keep the bucket when the stack is deleted, by default
            True

        Returns
        -------
        s3.Bucket
            The created S3 bucket instance.
        """
        custom_s3_bucket = CustomS3Bucket(
            scope=self,
            id=construct_id,
            name=name,
            stack_suffix=self.stack_suffix,
            versioned=versioned,
            retain_on_delete=retain_on_delete,
        )
        return custom_s3_bucket.bucket

    def create_stripe_integration(self, events: List[str]) -> StripeWebhook:
        """Helper method to register a Stripe webhook feeding an event bus.

        The webhook points at the event bus producer's API, and the signing
        secret Stripe returns is written to an SSM parameter the producer
        reads to verify deliveries.

        Parameters
        ----------
        events : List[str]
            The Stripe event types to subscribe to.

        Returns
        -------
        StripeWebhook
            The created webhook construct.
        """
        secret_key = SecretKey.from_ssm_parameter(
            ssm.StringParameter.from_secure_string_parameter_attributes(
                self,
                "StripeSecretKeyParameter",
                parameter_name=self.stripe_secret_key_parameter,
            )
        )
        endpoint_secret_store = SecretKeyStore.from_ssm_parameter(
            ssm.StringParameter.from_secure_string_parameter_attributes(
                self,
                "StripeEndpointSecretParameter",
                parameter_name=self.stripe_endpoint_secret_parameter,
            )
        )

        producer = StripeEventBusProducer(
            self,
            "StripeEventBusProducer",
            endpoint_secret=endpoint_secret_store.to_secret_key(),
            stack_suffix=self.stack_suffix,
        )

        webhook = StripeWebhook(
            self,
            "StripeWebhook",
            secret_key=secret_key,
            url=producer.url,
            events=events,
            description="Forwards Stripe events to EventBridge",
            endpoint_secret_store=endpoint_secret_store,
            stack_suffix=self.stack_suffix,
        )

        CfnOutput(
            self,
            "StripeWebhookIdOutput",
            value=webhook.webhook_id,
            description="Id of the Stripe webhook endpoint",
        )
        return webhook
