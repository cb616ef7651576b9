"""
Stripe Event Bus Producer

Receives Stripe webhook deliveries through API Gateway, checks their
signature and publishes them on an EventBridge event bus.
"""

# Local Modules
from .producer import (
    MissingSignature,
    ProducerResponse,
    StripeEventBusProducer,
)

__all__ = [
    "MissingSignature",
    "ProducerResponse",
    "StripeEventBusProducer",
]
