"""Lambda client wrapper used to republish function code."""

# Standard Library
from typing import Any, Dict, Optional

# Third Party
import boto3
from botocore.exceptions import ClientError
from aws_lambda_powertools import Logger

# Initialize logger
logger = Logger(service="lambda-client-wrapper")


class LambdaClient:
    """A wrapper for the Boto3 Lambda client."""

    def __init__(self, region_name: Optional[str] = None) -> None:
        try:
            self.client = boto3.client("lambda", region_name=region_name)
        except Exception as e:
            logger.exception(f"Failed to initialize Boto3 Lambda client: {e}")
            raise e

    def get_code_location(self, function_name: str) -> Optional[str]:
        """Get the pre-signed URL of the function's deployment package.

        Parameters
        ----------
        function_name : str
            The name or ARN of the Lambda function.

        Returns
        -------
        Optional[str]
            The download URL, valid for ten minutes, or None if the function
            has no downloadable code (e.g. container images).

        Raises
        ------
        ClientError
            If the function does not exist or cannot be read.
        """
        try:
            logger.info(f"Getting code location for function {function_name}")
            response = self.client.get_function(FunctionName=function_name)
        except ClientError as e:
            logger.error(f"Error getting function '{function_name}': {e}")
            raise e

        return response.get("Code", {}).get("Location")

    def update_function_code(
        self, function_name: str, zip_file: bytes, publish: bool = True
    ) -> Dict[str, Any]:
        """Upload a new deployment package and optionally publish a version.

        Parameters
        ----------
        function_name : str
            The name or ARN of the Lambda function.
        zip_file : bytes
            The zipped deployment package.
        publish : bool, optional
            Whether to publish a new version, by default True

        Returns
        -------
        Dict[str, Any]
            The function configuration returned by the API, including
            ``CodeSha256``, ``Version`` and ``FunctionArn``.

        Raises
        ------
        ClientError
            If the code cannot be updated.
        """
        try:
            logger.info(f"Updating code of function {function_name}")
            return self.client.update_function_code(
                FunctionName=function_name,
                ZipFile=zip_file,
                Publish=publish,
            )
        except ClientError as e:
            logger.error(f"Error updating code of '{function_name}': {e}")
            raise e

    def wait_until_active(
        self, function_name: str, delay: int, max_attempts: int
    ) -> None:
        """Block until the function reaches the ``Active`` state.

        Parameters
        ----------
        function_name : str
            The name or ARN of the Lambda function.
        delay : int
            Seconds between two status polls.
        max_attempts : int
            Maximum number of polls before giving up.

        Raises
        ------
        botocore.exceptions.WaiterError
            If the function is not active after ``max_attempts`` polls or
            enters a failed state.
        """
        logger.info(
            f"Waiting for {function_name} to go active "
            f"(delay={delay}s, max_attempts={max_attempts})"
        )
        waiter = self.client.get_waiter("function_active_v2")
        waiter.wait(
            FunctionName=function_name,
            WaiterConfig={"Delay": delay, "MaxAttempts": max_attempts},
        )
