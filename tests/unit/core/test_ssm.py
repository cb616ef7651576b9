"""Unit tests for the ssm module."""

# Standard Library
from unittest.mock import MagicMock, patch

# Third Party
import pytest
from botocore.exceptions import ClientError, NoCredentialsError

# Local Modules
from core.aws.ssm import SsmClient


class TestSsmClient:
    """Test cases for the SsmClient class."""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.parameter_name = "/stripe/secret-key"
        self.parameter_value = "sk_test_123"

    @patch("core.aws.ssm.boto3.client")
    def test_init_success_with_region(self, mock_boto3_client):
        """Test successful initialization with region_name."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client

        ssm_client = SsmClient(region_name="us-west-2")

        args, kwargs = mock_boto3_client.call_args
        assert args == ("ssm",)
        assert kwargs["region_name"] == "us-west-2"
        assert ssm_client.client == mock_client

    @patch("core.aws.ssm.boto3.client")
    def test_init_configures_retry_attempts(self, mock_boto3_client):
        """Test the retry budget is passed to the botocore config."""
        SsmClient(max_attempts=3)

        config = mock_boto3_client.call_args.kwargs["config"]
        assert config.retries == {"max_attempts": 3, "mode": "standard"}

    @patch("core.aws.ssm.boto3.client")
    @patch("core.aws.ssm.logger")
    def test_init_failure_no_credentials(self, mock_logger, mock_boto3_client):
        """Test initialization failure due to missing credentials."""
        error = NoCredentialsError()
        mock_boto3_client.side_effect = error

        with pytest.raises(NoCredentialsError):
            SsmClient()

        mock_logger.error.assert_called_once_with(
            "Failed to create SSM client: %s", error
        )

    @patch("core.aws.ssm.boto3.client")
    def test_get_parameter_with_decryption(self, mock_boto3_client):
        """Test successful parameter retrieval with decryption."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client
        mock_client.get_parameter.return_value = {
            "Parameter": {
                "Name": self.parameter_name,
                "Type": "SecureString",
                "Value": self.parameter_value,
                "Version": 1,
            }
        }

        result = SsmClient().get_parameter(
            self.parameter_name, with_decryption=True
        )

        mock_client.get_parameter.assert_called_once_with(
            Name=self.parameter_name, WithDecryption=True
        )
        assert result == self.parameter_value

    @patch("core.aws.ssm.boto3.client")
    def test_get_parameter_missing_value(self, mock_boto3_client):
        """Test parameter retrieval with no Value in the response."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client
        mock_client.get_parameter.return_value = {
            "Parameter": {"Name": self.parameter_name}
        }

        assert SsmClient().get_parameter(self.parameter_name) is None

    @patch("core.aws.ssm.boto3.client")
    @patch("core.aws.ssm.logger")
    def test_get_parameter_client_error(self, mock_logger, mock_boto3_client):
        """Test get_parameter logs and re-raises client errors."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client
        error = ClientError(
            {
                "Error": {
                    "Code": "ParameterNotFound",
                    "Message": "Parameter not found",
                }
            },
            "GetParameter",
        )
        mock_client.get_parameter.side_effect = error

        with pytest.raises(ClientError):
            SsmClient().get_parameter(self.parameter_name)

        mock_logger.error.assert_called_once_with(
            f"Failed to get parameter {self.parameter_name}: {error}"
        )

    @patch("core.aws.ssm.boto3.client")
    def test_put_parameter_success(self, mock_boto3_client):
        """Test writing a SecureString parameter."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client
        mock_client.put_parameter.return_value = {"Version": 4}

        version = SsmClient().put_parameter("/stripe/endpoint", "whsec_1")

        mock_client.put_parameter.assert_called_once_with(
            Name="/stripe/endpoint",
            Value="whsec_1",
            Type="SecureString",
            Overwrite=True,
        )
        assert version == 4

    @patch("core.aws.ssm.boto3.client")
    @patch("core.aws.ssm.logger")
    def test_put_parameter_client_error(self, mock_logger, mock_boto3_client):
        """Test put_parameter logs and re-raises client errors."""
        mock_client = MagicMock()
        mock_boto3_client.return_value = mock_client
        error = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "Access denied"}},
            "PutParameter",
        )
        mock_client.put_parameter.side_effect = error

        with pytest.raises(ClientError):
            SsmClient().put_parameter("/stripe/endpoint", "whsec_1")

        mock_logger.error.assert_called_once_with(
            f"Failed to put parameter /stripe/endpoint: {error}"
        )
