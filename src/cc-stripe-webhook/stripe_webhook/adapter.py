"""Stripe webhook endpoints managed as CloudFormation custom resources."""

# Standard Library
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional, Type

# Third Party
import stripe
from pydantic import BaseModel, ValidationError
from aws_lambda_powertools import Logger

# Local Modules
from core.lifecycle import (
    ExternalResourceAdapter,
    InvalidProperties,
    LifecycleError,
    LifecycleResult,
    TransportTimeout,
    UnknownResource,
    UpstreamRejected,
)
from core.services import SecretKey, SecretKeyStore
from core.utils.config import STRIPE_API_VERSION, STRIPE_MAX_NETWORK_RETRIES
from stripe_webhook.models import DeleteProperties, WebhookProperties

# Initialize logger
logger = Logger(service="stripe-webhook-adapter")

# Field of the created endpoint that holds the signing secret
SIGNING_SECRET_FIELD = "secret"


def create_stripe_client(api_key: str) -> stripe.StripeClient:
    """Build a Stripe client that retries network errors.

    Parameters
    ----------
    api_key : str
        The Stripe secret API key.

    Returns
    -------
    stripe.StripeClient
        The configured client.
    """
    return stripe.StripeClient(
        api_key,
        stripe_version=STRIPE_API_VERSION,
        max_network_retries=STRIPE_MAX_NETWORK_RETRIES,
    )


@contextmanager
def translate_stripe_errors(physical_id: Optional[str] = None) -> Iterator[None]:
    """Map Stripe SDK exceptions onto the lifecycle error taxonomy."""
    try:
        yield
    except stripe.InvalidRequestError as e:
        if e.code == "resource_missing" or e.http_status == 404:
            raise UnknownResource(
                f"Stripe webhook endpoint {physical_id} does not exist"
            ) from e
        raise UpstreamRejected(f"Stripe rejected the request: {e}") from e
    except (stripe.AuthenticationError, stripe.PermissionError) as e:
        raise UpstreamRejected(f"Stripe refused the API key: {e}") from e
    except (stripe.APIConnectionError, stripe.RateLimitError) as e:
        raise TransportTimeout(
            f"Stripe could not be reached after retries: {e}"
        ) from e
    except stripe.StripeError as e:
        raise UpstreamRejected(f"Stripe returned an error: {e}") from e


def _load(model: Type[BaseModel], properties: Dict[str, Any]) -> Any:
    try:
        return model.model_validate(properties)
    except ValidationError as e:
        raise InvalidProperties(str(e)) from e


class StripeWebhookAdapter(ExternalResourceAdapter):
    """Creates, updates and deletes Stripe webhook endpoints.

    The physical id of the resource is the Stripe endpoint id (``we_...``).
    The endpoint signing secret Stripe returns on creation is never part of
    the result payload; when an endpoint secret store is configured it is
    written there instead.

    Parameters
    ----------
    client_factory : Callable[[str], stripe.StripeClient], optional
        Builds a Stripe client from the resolved API key.
    secret_key_factory : Callable[[str], SecretKey], optional
        Builds a resolver for a serialized secret key.
    secret_store_factory : Callable[[str], SecretKeyStore], optional
        Builds a writer for a serialized secret store key.
    """

    def __init__(
        self,
        client_factory: Callable[[str], Any] = create_stripe_client,
        secret_key_factory: Callable[[str], SecretKey] = SecretKey,
        secret_store_factory: Callable[[str], SecretKeyStore] = SecretKeyStore,
    ) -> None:
        self.client_factory = client_factory
        self.secret_key_factory = secret_key_factory
        self.secret_store_factory = secret_store_factory

    def _client(self, secret_key_string: str) -> Any:
        api_key = self.secret_key_factory(secret_key_string).get_value()
        return self.client_factory(api_key)

    def create(self, properties: Dict[str, Any]) -> LifecycleResult:
        props = _load(WebhookProperties, properties)
        client = self._client(props.secret_key_string)

        logger.info(f"Creating Stripe webhook endpoint for {props.url}")
        with translate_stripe_errors():
            endpoint = client.v1.webhook_endpoints.create(
                params=props.endpoint_params()
            )

        payload = endpoint.to_dict()
        signing_secret = payload.pop(SIGNING_SECRET_FIELD, None)
        physical_id = payload["id"]

        if props.endpoint_secret_store_string and signing_secret:
            try:
                self.secret_store_factory(
                    props.endpoint_secret_store_string
                ).put_secret(signing_secret)
            except Exception:
                # A failed create reports no physical id, so nothing else
                # would ever delete the endpoint
                logger.error(
                    f"Could not store the signing secret of {physical_id}, "
                    "deleting the endpoint"
                )
                self._discard(client, physical_id)
                raise

        logger.info(f"Created Stripe webhook endpoint {physical_id}")
        return LifecycleResult(physical_id=physical_id, payload=payload)

    def update(
        self, physical_id: str, properties: Dict[str, Any]
    ) -> LifecycleResult:
        props = _load(WebhookProperties, properties)
        client = self._client(props.secret_key_string)

        logger.info(f"Updating Stripe webhook endpoint {physical_id}")
        with translate_stripe_errors(physical_id):
            endpoint = client.v1.webhook_endpoints.update(
                physical_id, params=props.endpoint_params()
            )

        payload = endpoint.to_dict()
        payload.pop(SIGNING_SECRET_FIELD, None)
        return LifecycleResult(physical_id=payload["id"], payload=payload)

    def delete(
        self, physical_id: str, properties: Optional[Dict[str, Any]] = None
    ) -> None:
        props = _load(DeleteProperties, properties or {})
        client = self._client(props.secret_key_string)

        self._delete(client, physical_id)

    def _delete(self, client: Any, physical_id: str) -> None:
        logger.info(f"Deleting Stripe webhook endpoint {physical_id}")
        try:
            with translate_stripe_errors(physical_id):
                client.v1.webhook_endpoints.delete(physical_id)
        except UnknownResource:
            logger.info(
                f"Stripe webhook endpoint {physical_id} is already gone"
            )

    def _discard(self, client: Any, physical_id: str) -> None:
        try:
            self._delete(client, physical_id)
        except LifecycleError:
            logger.exception(
                f"Stripe webhook endpoint {physical_id} could not be deleted"
            )
