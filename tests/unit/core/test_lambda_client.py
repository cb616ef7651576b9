"""Unit tests for the lambda_client module."""

# Standard Library
from unittest.mock import MagicMock, patch

# Third Party
import pytest
from botocore.exceptions import ClientError, WaiterError

# Local Modules
from core.aws.lambda_client import LambdaClient


class TestLambdaClient:
    """Test cases for the LambdaClient class."""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.function_name = "edge-http-headers"
        self.mock_client = MagicMock()

    @patch("core.aws.lambda_client.boto3.client")
    def test_init_with_region(self, mock_boto3_client):
        """Test the client is created for the given region."""
        mock_boto3_client.return_value = self.mock_client

        lambda_client = LambdaClient("us-east-1")

        mock_boto3_client.assert_called_once_with(
            "lambda", region_name="us-east-1"
        )
        assert lambda_client.client == self.mock_client

    @patch("core.aws.lambda_client.boto3.client")
    def test_get_code_location(self, mock_boto3_client):
        """Test the package URL is read from the Code block."""
        mock_boto3_client.return_value = self.mock_client
        self.mock_client.get_function.return_value = {
            "Configuration": {"FunctionName": self.function_name},
            "Code": {"Location": "https://bucket/package.zip"},
        }

        location = LambdaClient().get_code_location(self.function_name)

        self.mock_client.get_function.assert_called_once_with(
            FunctionName=self.function_name
        )
        assert location == "https://bucket/package.zip"

    @patch("core.aws.lambda_client.boto3.client")
    @patch("core.aws.lambda_client.logger")
    def test_get_code_location_client_error(
        self, mock_logger, mock_boto3_client
    ):
        """Test client errors are logged and re-raised."""
        mock_boto3_client.return_value = self.mock_client
        self.mock_client.get_function.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "x"}},
            "GetFunction",
        )

        with pytest.raises(ClientError):
            LambdaClient().get_code_location(self.function_name)

        mock_logger.error.assert_called_once()

    @patch("core.aws.lambda_client.boto3.client")
    def test_update_function_code_publishes(self, mock_boto3_client):
        """Test the new package is uploaded and published."""
        mock_boto3_client.return_value = self.mock_client
        self.mock_client.update_function_code.return_value = {"Version": "3"}

        result = LambdaClient().update_function_code(
            self.function_name, b"zip"
        )

        self.mock_client.update_function_code.assert_called_once_with(
            FunctionName=self.function_name, ZipFile=b"zip", Publish=True
        )
        assert result == {"Version": "3"}

    @patch("core.aws.lambda_client.boto3.client")
    def test_wait_until_active_uses_waiter_budget(self, mock_boto3_client):
        """Test the waiter polls with the given delay and attempts."""
        mock_boto3_client.return_value = self.mock_client
        waiter = self.mock_client.get_waiter.return_value

        LambdaClient().wait_until_active(
            self.function_name, delay=5, max_attempts=12
        )

        self.mock_client.get_waiter.assert_called_once_with(
            "function_active_v2"
        )
        waiter.wait.assert_called_once_with(
            FunctionName=self.function_name,
            WaiterConfig={"Delay": 5, "MaxAttempts": 12},
        )

    @patch("core.aws.lambda_client.boto3.client")
    def test_wait_until_active_timeout(self, mock_boto3_client):
        """Test waiter errors propagate to the caller."""
        mock_boto3_client.return_value = self.mock_client
        self.mock_client.get_waiter.return_value.wait.side_effect = (
            WaiterError(
                name="FunctionActiveV2",
                reason="Max attempts exceeded",
                last_response={},
            )
        )

        with pytest.raises(WaiterError):
            LambdaClient().wait_until_active(
                self.function_name, delay=1, max_attempts=2
            )
