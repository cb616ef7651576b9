"""Secrets Manager client wrapper."""

# Standard Library
from typing import Optional

# Third Party
import boto3
from botocore.config import Config
from botocore.exceptions import ClientError
from aws_lambda_powertools import Logger

# Initialize logger
logger = Logger(service="secrets-manager-client-wrapper")


class SecretsManagerClient:
    """A wrapper for the Boto3 Secrets Manager client."""

    def __init__(
        self, region_name: Optional[str] = None, max_attempts: int = 5
    ) -> None:
        try:
            self.client = boto3.client(
                "secretsmanager",
                region_name=region_name,
                config=Config(
                    retries={"max_attempts": max_attempts, "mode": "standard"}
                ),
            )
        except Exception as e:
            logger.error("Failed to create Secrets Manager client: %s", e)
            raise e

    def get_secret_string(self, secret_id: str) -> Optional[str]:
        """Get the current ``SecretString`` of a secret.

        Parameters
        ----------
        secret_id : str
            The ARN or name of the secret.

        Returns
        -------
        Optional[str]
            The secret string, or None for binary secrets.

        Raises
        ------
        ClientError
            If the secret does not exist or cannot be read.
        """
        try:
            response = self.client.get_secret_value(SecretId=secret_id)
        except ClientError as e:
            logger.error(f"Failed to get secret value for {secret_id}: {e}")
            raise e

        return response.get("SecretString")

    def put_secret_string(self, secret_id: str, secret_string: str) -> str:
        """Store a new version of a secret.

        Parameters
        ----------
        secret_id : str
            The ARN or name of the secret.
        secret_string : str
            The value to store.

        Returns
        -------
        str
            The id of the new secret version.

        Raises
        ------
        ClientError
            If the secret cannot be updated.
        """
        try:
            logger.info(f"Storing new version of secret {secret_id}")
            response = self.client.put_secret_value(
                SecretId=secret_id, SecretString=secret_string
            )
        except ClientError as e:
            logger.error(f"Failed to put secret value for {secret_id}: {e}")
            raise e

        return response.get("VersionId", "")
