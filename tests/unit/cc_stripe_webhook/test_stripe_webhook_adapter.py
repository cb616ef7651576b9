"""Unit tests for the Stripe webhook adapter."""

# Standard Library
import json
from unittest.mock import MagicMock, patch

# Third Party
import pytest
import stripe

# Local Modules
from core.lifecycle import (
    InvalidProperties,
    LifecycleRequest,
    SecretUnavailable,
    TransportTimeout,
    UnknownResource,
    UpstreamRejected,
    dispatch,
)
from core.utils import LifecycleOperation, LifecycleStatus
from stripe_webhook.adapter import (
    StripeWebhookAdapter,
    create_stripe_client,
    translate_stripe_errors,
)
from stripe_webhook.models import WebhookProperties

SECRET_KEY_STRING = json.dumps(
    {"secretKeyType": "SSM_PARAMETER", "parameterName": "/stripe/key"}
)
STORE_STRING = json.dumps(
    {"secretKeyType": "SSM_PARAMETER", "parameterName": "/stripe/endpoint"}
)


def _missing(physical_id="we_123"):
    return stripe.InvalidRequestError(
        f"No such webhook endpoint: '{physical_id}'",
        "id",
        code="resource_missing",
        http_status=404,
    )


class TestStripeWebhookAdapter:
    """Test cases for StripeWebhookAdapter."""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.client = MagicMock()
        self.client_factory = MagicMock(return_value=self.client)
        self.secret_key = MagicMock()
        self.secret_key.get_value.return_value = "sk_test_123"
        self.secret_key_factory = MagicMock(return_value=self.secret_key)
        self.secret_store = MagicMock()
        self.secret_store_factory = MagicMock(return_value=self.secret_store)

        self.adapter = StripeWebhookAdapter(
            client_factory=self.client_factory,
            secret_key_factory=self.secret_key_factory,
            secret_store_factory=self.secret_store_factory,
        )

        endpoint = MagicMock()
        endpoint.to_dict.side_effect = lambda: {
            "id": "we_123",
            "object": "webhook_endpoint",
            "url": "https://x/hook",
            "enabled_events": ["a"],
            "secret": "whsec_abc",
        }
        self.client.v1.webhook_endpoints.create.return_value = endpoint
        self.client.v1.webhook_endpoints.update.return_value = endpoint

        self.properties = {
            "SecretKeyString": SECRET_KEY_STRING,
            "Url": "https://x/hook",
            "Events": ["a"],
        }

    def test_create_returns_endpoint_id(self):
        """Test create returns the Stripe id without the signing secret."""
        result = self.adapter.create(self.properties)

        self.secret_key_factory.assert_called_once_with(SECRET_KEY_STRING)
        self.client_factory.assert_called_once_with("sk_test_123")
        self.client.v1.webhook_endpoints.create.assert_called_once_with(
            params={"url": "https://x/hook", "enabled_events": ["a"]}
        )
        assert result.physical_id == "we_123"
        assert result.payload["url"] == "https://x/hook"
        assert result.payload["enabled_events"] == ["a"]
        assert "secret" not in result.payload

    def test_create_stores_signing_secret(self):
        """Test the signing secret goes to the store, not the payload."""
        result = self.adapter.create(
            {**self.properties, "EndpointSecretStoreString": STORE_STRING}
        )

        self.secret_store_factory.assert_called_once_with(STORE_STRING)
        self.secret_store.put_secret.assert_called_once_with("whsec_abc")
        assert "whsec_abc" not in json.dumps(result.payload)

    def test_create_without_store_does_not_write(self):
        """Test no store is used when none is configured."""
        self.adapter.create(self.properties)

        self.secret_store_factory.assert_not_called()

    def test_create_with_description(self):
        """Test the description is forwarded when given."""
        self.adapter.create({**self.properties, "Description": "events"})

        params = self.client.v1.webhook_endpoints.create.call_args.kwargs[
            "params"
        ]
        assert params["description"] == "events"

    def test_create_validation_error(self):
        """Test Stripe validation errors become UpstreamRejected."""
        self.client.v1.webhook_endpoints.create.side_effect = (
            stripe.InvalidRequestError("Invalid URL", "url")
        )

        with pytest.raises(UpstreamRejected, match="Invalid URL"):
            self.adapter.create(self.properties)

    def test_create_secret_unavailable(self):
        """Test secret resolution failures stop before calling Stripe."""
        self.secret_key.get_value.side_effect = SecretUnavailable("no key")

        with pytest.raises(SecretUnavailable):
            self.adapter.create(self.properties)

        self.client.v1.webhook_endpoints.create.assert_not_called()

    def test_create_missing_secret_key_string(self):
        """Test properties without the API key reference are invalid."""
        with pytest.raises(InvalidProperties):
            self.adapter.create({"Url": "https://x/hook"})

    def test_create_missing_url(self):
        """Test properties without a URL are invalid before calling Stripe."""
        with pytest.raises(InvalidProperties, match="Url"):
            self.adapter.create(
                {"SecretKeyString": SECRET_KEY_STRING, "Events": ["a"]}
            )

        self.client_factory.assert_not_called()
        self.client.v1.webhook_endpoints.create.assert_not_called()

    def test_create_store_failure_deletes_endpoint(self):
        """Test an endpoint whose secret cannot be stored is removed."""
        self.secret_store.put_secret.side_effect = SecretUnavailable(
            "AccessDenied"
        )

        with pytest.raises(SecretUnavailable, match="AccessDenied"):
            self.adapter.create(
                {**self.properties, "EndpointSecretStoreString": STORE_STRING}
            )

        self.client.v1.webhook_endpoints.delete.assert_called_once_with(
            "we_123"
        )

    def test_create_store_failure_keeps_original_error(self):
        """Test a failed cleanup does not hide why the create failed."""
        self.secret_store.put_secret.side_effect = SecretUnavailable(
            "AccessDenied"
        )
        self.client.v1.webhook_endpoints.delete.side_effect = (
            stripe.APIConnectionError("timed out")
        )

        with pytest.raises(SecretUnavailable, match="AccessDenied"):
            self.adapter.create(
                {**self.properties, "EndpointSecretStoreString": STORE_STRING}
            )

    def test_create_store_failure_through_dispatch(self):
        """Test the failed create is reported and leaves no endpoint."""
        self.secret_store.put_secret.side_effect = SecretUnavailable(
            "AccessDenied"
        )

        response = dispatch(
            LifecycleRequest(
                operation=LifecycleOperation.create,
                properties={
                    **self.properties,
                    "EndpointSecretStoreString": STORE_STRING,
                },
            ),
            self.adapter,
        )

        assert response.status is LifecycleStatus.failed
        assert response.reason == "SecretUnavailable: AccessDenied"
        assert self.client.v1.webhook_endpoints.delete.call_count == 1

    def test_update_is_scoped_by_physical_id(self):
        """Test update targets the stored endpoint id."""
        result = self.adapter.update("we_123", self.properties)

        self.client.v1.webhook_endpoints.update.assert_called_once_with(
            "we_123",
            params={"url": "https://x/hook", "enabled_events": ["a"]},
        )
        assert result.physical_id == "we_123"
        assert "secret" not in result.payload

    def test_update_unknown_endpoint(self):
        """Test updating a removed endpoint reports UnknownResource."""
        self.client.v1.webhook_endpoints.update.side_effect = _missing()

        with pytest.raises(UnknownResource, match="we_123"):
            self.adapter.update("we_123", self.properties)

    def test_delete_twice(self):
        """Test a second delete of the same endpoint succeeds."""
        self.client.v1.webhook_endpoints.delete.side_effect = [
            MagicMock(deleted=True),
            _missing(),
        ]
        properties = {"SecretKeyString": SECRET_KEY_STRING}

        self.adapter.delete("we_123", properties)
        self.adapter.delete("we_123", properties)

        assert self.client.v1.webhook_endpoints.delete.call_count == 2

    def test_delete_ignores_other_properties(self):
        """Test delete only needs the API key reference."""
        self.adapter.delete("we_123", self.properties)

        self.client.v1.webhook_endpoints.delete.assert_called_once_with(
            "we_123"
        )

    def test_delete_other_error(self):
        """Test delete errors other than absence still fail."""
        self.client.v1.webhook_endpoints.delete.side_effect = (
            stripe.AuthenticationError("Invalid API Key")
        )

        with pytest.raises(UpstreamRejected):
            self.adapter.delete(
                "we_123", {"SecretKeyString": SECRET_KEY_STRING}
            )

    def test_lifecycle_through_dispatch(self):
        """Test create then delete twice through the dispatcher."""
        created = dispatch(
            LifecycleRequest(
                operation=LifecycleOperation.create,
                properties=self.properties,
            ),
            self.adapter,
        )
        self.client.v1.webhook_endpoints.delete.side_effect = [
            MagicMock(deleted=True),
            _missing(),
        ]
        delete_request = LifecycleRequest(
            operation=LifecycleOperation.delete,
            physical_id=created.physical_id,
            properties=self.properties,
        )

        first = dispatch(delete_request, self.adapter)
        second = dispatch(delete_request, self.adapter)

        assert created.status is LifecycleStatus.success
        assert created.physical_id == "we_123"
        assert "secret" not in created.response_data
        assert first.status is LifecycleStatus.success
        assert second.status is LifecycleStatus.success


class TestTranslateStripeErrors:
    """Test cases for translate_stripe_errors."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (_missing(), UnknownResource),
            (stripe.InvalidRequestError("bad", "url"), UpstreamRejected),
            (stripe.AuthenticationError("bad key"), UpstreamRejected),
            (stripe.PermissionError("no access"), UpstreamRejected),
            (stripe.APIConnectionError("timed out"), TransportTimeout),
            (stripe.RateLimitError("slow down"), TransportTimeout),
            (stripe.APIError("server error"), UpstreamRejected),
        ],
    )
    def test_mapping(self, error, expected):
        """Test each Stripe error maps to its lifecycle error."""
        with pytest.raises(expected):
            with translate_stripe_errors("we_123"):
                raise error

    def test_other_exceptions_pass_through(self):
        """Test non Stripe exceptions are not translated."""
        with pytest.raises(KeyError):
            with translate_stripe_errors():
                raise KeyError("id")


class TestCreateStripeClient:
    """Test cases for create_stripe_client."""

    @patch("stripe_webhook.adapter.stripe.StripeClient")
    def test_retries_network_errors(self, mock_stripe_client):
        """Test the client is pinned and retries network errors."""
        create_stripe_client("sk_test_123")

        mock_stripe_client.assert_called_once_with(
            "sk_test_123", stripe_version="2020-08-27", max_network_retries=5
        )


class TestWebhookProperties:
    """Test cases for WebhookProperties."""

    def test_endpoint_params(self):
        """Test only the Stripe parameters are produced."""
        props = WebhookProperties.model_validate(
            {
                "SecretKeyString": SECRET_KEY_STRING,
                "EndpointSecretStoreString": STORE_STRING,
                "Url": "https://x/hook",
                "Events": ["a", "b"],
            }
        )

        assert props.endpoint_params() == {
            "url": "https://x/hook",
            "enabled_events": ["a", "b"],
        }
