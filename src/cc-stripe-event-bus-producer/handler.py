# Standard Library
from typing import Any, Dict

# Third Party
from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

# Local Modules
from core.aws import EventBridgeClient
from core.utils.config import (
    ENDPOINT_SECRET_STRING,
    EVENT_BUS_NAME,
    EVENT_SOURCE,
    STRIPE_SIGNATURE_TOLERANCE,
)
from event_bus_producer import StripeEventBusProducer

# Initialize logger
logger = Logger()


@logger.inject_lambda_context(
    log_event=False, correlation_id_path=correlation_paths.API_GATEWAY_REST
)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(
    event: APIGatewayProxyEvent, context: LambdaContext
) -> Dict[str, Any]:
    """Lambda function receiving Stripe webhook deliveries.

    Parameters
    ----------
    event : APIGatewayProxyEvent
        The API Gateway proxy event carrying the Stripe delivery.
    context : LambdaContext
        The context object containing runtime information about the
        Lambda function invocation.

    Returns
    -------
    Dict[str, Any]
        The API Gateway proxy response.
    """
    producer = StripeEventBusProducer(
        endpoint_secret_string=ENDPOINT_SECRET_STRING,
        event_bridge=EventBridgeClient(),
        event_bus_name=EVENT_BUS_NAME,
        source=EVENT_SOURCE,
        tolerance=STRIPE_SIGNATURE_TOLERANCE,
    )

    signature = event.get_header_value(
        "Stripe-Signature", case_sensitive=False
    )
    return producer.handle(event.decoded_body, signature).to_dict()
