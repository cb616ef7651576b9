# Standard Library
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

# Third Party
import stripe
from aws_lambda_powertools import Logger

# Local Modules
from core.aws import EventBridgeClient
from core.services import SecretKey

# Initialize logger
logger = Logger(service="stripe-event-bus-producer")


class MissingSignature(Exception):
    """The request carries no ``Stripe-Signature`` header or no body."""


@dataclass
class ProducerResponse:
    """API Gateway proxy response returned by the producer."""

    status_code: int
    body: str

    def to_dict(self) -> Dict[str, Any]:
        return {"statusCode": self.status_code, "body": self.body}


class StripeEventBusProducer:
    """Verifies Stripe webhook deliveries and forwards them to EventBridge.

    The Stripe event ``type`` becomes the EventBridge ``DetailType`` and the
    rest of the event becomes the ``Detail``.

    Parameters
    ----------
    endpoint_secret_string : str
        Serialized secret key of the endpoint signing secret.
    event_bridge : EventBridgeClient
        Client used to put the event.
    event_bus_name : str
        Name of the target event bus.
    source : str
        Source of the forwarded events.
    tolerance : int, optional
        Maximum age of a signature timestamp in seconds, by default 300
    secret_key_factory : Callable[[str], SecretKey], optional
        Builds the resolver for the endpoint secret key.
    """

    def __init__(
        self,
        endpoint_secret_string: str,
        event_bridge: EventBridgeClient,
        event_bus_name: str,
        source: str,
        tolerance: int = 300,
        secret_key_factory: Callable[[str], SecretKey] = SecretKey,
    ) -> None:
        self.endpoint_secret_string = endpoint_secret_string
        self.secret_key_factory = secret_key_factory
        self.event_bridge = event_bridge
        self.event_bus_name = event_bus_name
        self.source = source
        self.tolerance = tolerance

    def verify(
        self, payload: Optional[str], signature: Optional[str]
    ) -> Dict[str, Any]:
        """Verify the delivery signature and decode the Stripe event.

        Parameters
        ----------
        payload : Optional[str]
            The raw request body.
        signature : Optional[str]
            The ``Stripe-Signature`` header.

        Returns
        -------
        Dict[str, Any]
            The decoded Stripe event.

        Raises
        ------
        MissingSignature
            If the signature or the body is missing.
        stripe.SignatureVerificationError
            If the signature does not match the payload.
        """
        if not signature:
            raise MissingSignature("Stripe signature is missing")
        if not payload:
            raise MissingSignature("Event body undefined or null")

        stripe.WebhookSignature.verify_header(
            payload,
            signature,
            self.secret_key_factory(self.endpoint_secret_string).get_value(),
            self.tolerance,
        )
        return json.loads(payload)

    def forward(self, stripe_event: Dict[str, Any]) -> str:
        """Put a verified Stripe event on the event bus.

        Returns
        -------
        str
            The EventBridge event id.
        """
        details = dict(stripe_event)
        detail_type = details.pop("type")

        logger.info(
            f"Forwarding Stripe event {details.get('id')} ({detail_type})"
        )
        return self.event_bridge.put_event(
            source=self.source,
            detail_type=detail_type,
            detail=details,
            event_bus_name=self.event_bus_name,
        )

    def handle(
        self, payload: Optional[str], signature: Optional[str]
    ) -> ProducerResponse:
        """Verify and forward a webhook delivery.

        Returns
        -------
        ProducerResponse
            200 on success, 400 for missing or invalid signatures and 500
            for any other failure.
        """
        try:
            stripe_event = self.verify(payload, signature)
            self.forward(stripe_event)
        except (MissingSignature, stripe.SignatureVerificationError) as e:
            logger.warning(f"Rejected Stripe delivery: {e}")
            return ProducerResponse(400, f"Webhook Error: {e}")
        except Exception as e:
            logger.exception(f"Failed to forward Stripe event: {e}")
            return ProducerResponse(500, f"Error: {e}")

        return ProducerResponse(200, "Success")
