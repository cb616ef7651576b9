"""SSM client wrapper for AWS Systems Manager Parameter Store operations."""

# Standard Library
from typing import Optional

# Third Party
import boto3
from botocore.config import Config
from botocore.exceptions import ClientError
from aws_lambda_powertools import Logger

# Initialize logger
logger = Logger(service="ssm-client-wrapper")


class SsmClient:
    """A wrapper for the Boto3 SSM client."""

    def __init__(
        self, region_name: Optional[str] = None, max_attempts: int = 5
    ) -> None:
        try:
            self.client = boto3.client(
                "ssm",
                region_name=region_name,
                config=Config(
                    retries={"max_attempts": max_attempts, "mode": "standard"}
                ),
            )
        except Exception as e:
            logger.error("Failed to create SSM client: %s", e)
            raise e

    def get_parameter(
        self, name: str, with_decryption: bool = False
    ) -> Optional[str]:
        """Get the value of a single parameter.

        Parameters
        ----------
        name : str
            The name of the parameter.
        with_decryption : bool, optional
            Whether to decrypt SecureString values, by default False

        Returns
        -------
        Optional[str]
            The parameter value, or None if the response carries no value.

        Raises
        ------
        ClientError
            If the parameter does not exist or cannot be read.
        """
        try:
            response = self.client.get_parameter(
                Name=name, WithDecryption=with_decryption
            )
        except ClientError as e:
            logger.error(f"Failed to get parameter {name}: {e}")
            raise e

        return response.get("Parameter", {}).get("Value")

    def put_parameter(
        self,
        name: str,
        value: str,
        parameter_type: str = "SecureString",
        overwrite: bool = True,
    ) -> int:
        """Write a parameter value.

        Parameters
        ----------
        name : str
            The name of the parameter.
        value : str
            The value to store.
        parameter_type : str, optional
            The parameter type, by default "SecureString"
        overwrite : bool, optional
            Whether to overwrite an existing value, by default True

        Returns
        -------
        int
            The new version of the parameter.

        Raises
        ------
        ClientError
            If the parameter cannot be written.
        """
        try:
            logger.info(f"Writing parameter {name}")
            response = self.client.put_parameter(
                Name=name,
                Value=value,
                Type=parameter_type,
                Overwrite=overwrite,
            )
        except ClientError as e:
            logger.error(f"Failed to put parameter {name}: {e}")
            raise e

        return response.get("Version", 0)
