"""EventBridge client wrapper."""

# Standard Library
import json
from typing import Any, Dict, List, Optional

# Third Party
import boto3
from botocore.exceptions import ClientError
from aws_lambda_powertools import Logger

# Initialize logger
logger = Logger(service="eventbridge-client-wrapper")


class EventBridgeClient:
    """A wrapper for the Boto3 EventBridge client."""

    def __init__(self, region_name: Optional[str] = None) -> None:
        try:
            self.client = boto3.client("events", region_name=region_name)
        except Exception as e:
            logger.exception(
                f"Failed to initialize Boto3 EventBridge client: {e}"
            )
            raise e

    def put_event(
        self,
        source: str,
        detail_type: str,
        detail: Dict[str, Any],
        event_bus_name: str = "default",
        resources: Optional[List[str]] = None,
    ) -> str:
        """Put a single event on an event bus.

        Parameters
        ----------
        source : str
            The event source.
        detail_type : str
            The event detail type.
        detail : Dict[str, Any]
            The event detail, serialized to JSON.
        event_bus_name : str, optional
            The name or ARN of the event bus, by default "default"
        resources : Optional[List[str]], optional
            Resource ARNs the event concerns, by default None

        Returns
        -------
        str
            The id EventBridge assigned to the event.

        Raises
        ------
        ClientError
            If the request fails.
        RuntimeError
            If EventBridge accepted the request but rejected the entry.
        """
        entry = {
            "Source": source,
            "DetailType": detail_type,
            "Detail": json.dumps(detail),
            "EventBusName": event_bus_name,
            "Resources": resources or [],
        }

        try:
            logger.info(
                f"Putting '{detail_type}' event on bus {event_bus_name}"
            )
            response = self.client.put_events(Entries=[entry])
        except ClientError as e:
            logger.error(f"Error putting event on bus {event_bus_name}: {e}")
            raise e

        # PutEvents reports per-entry failures in a successful response
        result = (response.get("Entries") or [{}])[0]
        if response.get("FailedEntryCount", 0) > 0 or "ErrorCode" in result:
            raise RuntimeError(
                f"Event was rejected by EventBridge: "
                f"{result.get('ErrorCode')} {result.get('ErrorMessage')}"
            )

        return result.get("EventId", "")
