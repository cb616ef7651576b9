"""Core AWS modules for the Cloud Components handlers.

This module provides thin wrappers around the boto3 clients used by the
custom resource and event handlers: SSM and Secrets Manager for secret
resolution, Lambda for republishing edge function code and EventBridge for
forwarding events.
"""

# Local Modules
from core.aws.ssm import SsmClient
from core.aws.secrets_manager import SecretsManagerClient
from core.aws.lambda_client import LambdaClient
from core.aws.eventbridge import EventBridgeClient

__all__ = [
    "SsmClient",
    "SecretsManagerClient",
    "LambdaClient",
    "EventBridgeClient",
]
