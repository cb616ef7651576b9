# Standard Library
from typing import Any, Dict

# Third Party
from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    CloudFormationCustomResourceEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

# Local Modules
from core.lifecycle import CustomResourceHandler
from stripe_webhook import StripeWebhookAdapter

# Initialize logger
logger = Logger()

# Initialize the custom resource helper
custom_resource = CustomResourceHandler(StripeWebhookAdapter)


@logger.inject_lambda_context(log_event=False)
@event_source(data_class=CloudFormationCustomResourceEvent)
def lambda_handler(
    event: CloudFormationCustomResourceEvent, context: LambdaContext
) -> None:
    """Lambda function backing the ``Custom::StripeWebhook`` resource.

    Parameters
    ----------
    event : CloudFormationCustomResourceEvent
        The custom resource event sent by CloudFormation.
    context : LambdaContext
        The context object containing runtime information about the
        Lambda function invocation.
    """
    logger.info(
        f"Stripe webhook custom resource invoked ({event.request_type})."
    )
    logger.append_keys(logical_resource_id=event.logical_resource_id)

    custom_resource(event.raw_event, context)
