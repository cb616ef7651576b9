# Standard Library
from typing import List, Optional

# Third Party
from pydantic import BaseModel, ConfigDict, Field


class WebhookProperties(BaseModel):
    """Properties of the ``Custom::StripeWebhook`` resource.

    Attributes:
        secret_key_string: Serialized secret key of the Stripe API key.
        endpoint_secret_store_string: Serialized store key for the endpoint
            signing secret, if it should be kept.
        url: The URL Stripe delivers events to.
        description: An optional description of the endpoint.
        events: The Stripe event types to enable.
    """

    model_config = ConfigDict(populate_by_name=True)

    secret_key_string: str = Field(
        ..., alias="SecretKeyString", description="Stripe API key reference"
    )
    endpoint_secret_store_string: Optional[str] = Field(
        None,
        alias="EndpointSecretStoreString",
        description="Where to store the endpoint signing secret",
    )
    url: str = Field(..., alias="Url", description="Webhook endpoint URL")
    description: Optional[str] = Field(
        None, alias="Description", description="Endpoint description"
    )
    events: List[str] = Field(
        default_factory=list,
        alias="Events",
        description="Enabled Stripe event types",
    )

    def endpoint_params(self) -> dict:
        """Return the Stripe webhook endpoint create/update parameters."""
        params = {"url": self.url, "enabled_events": self.events}
        if self.description is not None:
            params["description"] = self.description
        return params


class DeleteProperties(BaseModel):
    """The subset of properties needed to delete an endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    secret_key_string: str = Field(
        ..., alias="SecretKeyString", description="Stripe API key reference"
    )
