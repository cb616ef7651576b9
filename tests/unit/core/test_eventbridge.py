"""Unit tests for the eventbridge module."""

# Standard Library
import json
from unittest.mock import MagicMock, patch

# Third Party
import pytest
from botocore.exceptions import ClientError

# Local Modules
from core.aws.eventbridge import EventBridgeClient


class TestEventBridgeClient:
    """Test cases for the EventBridgeClient class."""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.mock_client = MagicMock()
        self.detail = {"id": "evt_1", "data": {"object": {"amount": 100}}}

    @patch("core.aws.eventbridge.boto3.client")
    def test_put_event_success(self, mock_boto3_client):
        """Test a single entry is put with a JSON detail."""
        mock_boto3_client.return_value = self.mock_client
        self.mock_client.put_events.return_value = {
            "FailedEntryCount": 0,
            "Entries": [{"EventId": "e-1"}],
        }

        event_id = EventBridgeClient().put_event(
            source="stripe.com",
            detail_type="charge.succeeded",
            detail=self.detail,
            event_bus_name="payments",
        )

        entries = self.mock_client.put_events.call_args.kwargs["Entries"]
        assert entries == [
            {
                "Source": "stripe.com",
                "DetailType": "charge.succeeded",
                "Detail": json.dumps(self.detail),
                "EventBusName": "payments",
                "Resources": [],
            }
        ]
        assert event_id == "e-1"

    @patch("core.aws.eventbridge.boto3.client")
    def test_put_event_rejected_entry(self, mock_boto3_client):
        """Test a failed entry in a successful response raises."""
        mock_boto3_client.return_value = self.mock_client
        self.mock_client.put_events.return_value = {
            "FailedEntryCount": 1,
            "Entries": [
                {
                    "ErrorCode": "InternalFailure",
                    "ErrorMessage": "try again",
                }
            ],
        }

        with pytest.raises(RuntimeError, match="InternalFailure"):
            EventBridgeClient().put_event(
                source="stripe.com", detail_type="x", detail={}
            )

    @patch("core.aws.eventbridge.boto3.client")
    @patch("core.aws.eventbridge.logger")
    def test_put_event_client_error(self, mock_logger, mock_boto3_client):
        """Test client errors are logged and re-raised."""
        mock_boto3_client.return_value = self.mock_client
        self.mock_client.put_events.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "Access denied"}},
            "PutEvents",
        )

        with pytest.raises(ClientError):
            EventBridgeClient().put_event(
                source="stripe.com", detail_type="x", detail={}
            )

        mock_logger.error.assert_called_once()
