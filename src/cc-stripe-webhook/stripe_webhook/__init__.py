"""
Stripe Webhook Custom Resource

Manages a Stripe webhook endpoint on behalf of a ``Custom::StripeWebhook``
CloudFormation resource.
"""

# Local Modules
from .adapter import (
    StripeWebhookAdapter,
    create_stripe_client,
    translate_stripe_errors,
)
from .models import DeleteProperties, WebhookProperties

__all__ = [
    "StripeWebhookAdapter",
    "create_stripe_client",
    "translate_stripe_errors",
    "DeleteProperties",
    "WebhookProperties",
]
