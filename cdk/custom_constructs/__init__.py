"""This module provides the Cloud Components constructs for AWS CDK.

The constructs automate repository backups and dependency scans with
scheduled CodeBuild projects, manage Stripe webhook endpoints through custom
resources and deploy Lambda@Edge functions with an injected configuration.

The constructs included in this module are:
- S3CodeCommitBackup: Scheduled backup of one CodeCommit repository to S3.
- FullRegionS3CodeCommitBackup: Scheduled backup of a region's repositories.
- CodeCommitDependencyCheck: Scheduled OWASP dependency-check scan.
- StripeWebhook: Stripe webhook endpoint managed as a custom resource.
- StripeEventBusProducer: Forwards verified Stripe events to EventBridge.
- EdgeRole: Execution role for Lambda@Edge functions.
- EdgeFunction: Lambda@Edge function with an injected configuration.
- WithConfiguration: Publishes a function version with a configuration file.
- SecretKey / SecretKeyStore: References to secrets read or written by the
  handlers.
- CustomLambdaFunction: Lambda function bundled with the shared core package.
- CustomS3Bucket: Private, encrypted bucket for backups and reports.
- CustomCdn: CloudFront distribution serving a private bucket.
"""

from .cloudfront_distribution import CustomCdn
from .codecommit_backup import FullRegionS3CodeCommitBackup, S3CodeCommitBackup
from .dependency_check import CodeCommitDependencyCheck
from .edge_function import EdgeFunction, EdgeRole, WithConfiguration
from .lambda_function import CustomLambdaFunction
from .origins import CustomS3Origin
from .s3_bucket import CustomS3Bucket
from .secret_key import SecretKey, SecretKeyStore
from .stripe_webhook import StripeEventBusProducer, StripeWebhook

__all__ = [
    "CustomCdn",
    "FullRegionS3CodeCommitBackup",
    "S3CodeCommitBackup",
    "CodeCommitDependencyCheck",
    "EdgeFunction",
    "EdgeRole",
    "WithConfiguration",
    "CustomLambdaFunction",
    "CustomS3Origin",
    "CustomS3Bucket",
    "SecretKey",
    "SecretKeyStore",
    "StripeEventBusProducer",
    "StripeWebhook",
]
