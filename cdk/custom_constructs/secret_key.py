"""Serializable references to secrets consumed by the Lambda handlers.

The handlers receive these references as JSON strings (custom resource
properties or environment variables) and resolve them at call time, so the
secret value itself never appears in the template unless ``from_plain_text``
is used.
"""

# Standard Library
from typing import Any, Dict, Optional

# Third Party
from aws_cdk import (
    Stack,
    aws_iam as iam,
    aws_secretsmanager as secretsmanager,
    aws_ssm as ssm,
)
from constructs import Construct


class SecretKey:
    """Reference to a secret value read by a handler."""

    def __init__(
        self,
        reference: Dict[str, Any],
        parameter: Optional[ssm.IParameter] = None,
        secret: Optional[secretsmanager.ISecret] = None,
    ) -> None:
        self.reference = reference
        self.parameter = parameter
        self.secret = secret

    @classmethod
    def from_plain_text(cls, value: str) -> "SecretKey":
        """Embed the value in the reference. Avoid outside of tests."""
        return cls({"secretKeyType": "PLAIN_TEXT", "value": value})

    @classmethod
    def from_ssm_parameter(cls, parameter: ssm.IParameter) -> "SecretKey":
        return cls(
            {
                "secretKeyType": "SSM_PARAMETER",
                "parameterName": parameter.parameter_name,
            },
            parameter=parameter,
        )

    @classmethod
    def from_secrets_manager(
        cls, secret: secretsmanager.ISecret, field_name: Optional[str] = None
    ) -> "SecretKey":
        """Reference a secret, or one field of a JSON secret."""
        reference = {
            "secretKeyType": "SECRETS_MANAGER",
            "secretId": secret.secret_arn,
        }
        if field_name:
            reference["fieldName"] = field_name
        return cls(reference, secret=secret)

    def serialize(self, scope: Construct) -> str:
        """Render the reference as the JSON string handlers expect."""
        return Stack.of(scope).to_json_string(self.reference)

    def grant_read(self, grantee: iam.IGrantable) -> None:
        if self.parameter is not None:
            self.parameter.grant_read(grantee)
        if self.secret is not None:
            self.secret.grant_read(grantee)


class SecretKeyStore:
    """Reference to a location a handler writes a secret to."""

    def __init__(
        self,
        reference: Dict[str, Any],
        parameter: Optional[ssm.IParameter] = None,
        secret: Optional[secretsmanager.ISecret] = None,
    ) -> None:
        self.reference = reference
        self.parameter = parameter
        self.secret = secret

    @classmethod
    def from_ssm_parameter(cls, parameter: ssm.IParameter) -> "SecretKeyStore":
        return cls(
            {
                "secretKeyType": "SSM_PARAMETER",
                "parameterName": parameter.parameter_name,
            },
            parameter=parameter,
        )

    @classmethod
    def from_secrets_manager(
        cls, secret: secretsmanager.ISecret
    ) -> "SecretKeyStore":
        return cls(
            {"secretKeyType": "SECRETS_MANAGER", "secretId": secret.secret_arn},
            secret=secret,
        )

    def serialize(self, scope: Construct) -> str:
        return Stack.of(scope).to_json_string(self.reference)

    def grant_write(self, grantee: iam.IGrantable) -> None:
        if self.parameter is not None:
            self.parameter.grant_write(grantee)
        if self.secret is not None:
            self.secret.grant_write(grantee)

    def to_secret_key(self) -> SecretKey:
        """Reference the stored value for reading."""
        return SecretKey(
            dict(self.reference), parameter=self.parameter, secret=self.secret
        )
