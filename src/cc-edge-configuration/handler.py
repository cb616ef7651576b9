# Third Party
from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    CloudFormationCustomResourceEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

# Local Modules
from core.lifecycle import CustomResourceHandler
from edge_configuration import LambdaConfigurationAdapter

# Initialize logger
logger = Logger()

# Initialize the custom resource helper
custom_resource = CustomResourceHandler(LambdaConfigurationAdapter)


@logger.inject_lambda_context(log_event=False)
@event_source(data_class=CloudFormationCustomResourceEvent)
def lambda_handler(
    event: CloudFormationCustomResourceEvent, context: LambdaContext
) -> None:
    """Inject configuration into an edge function and report the outcome."""
    logger.info(
        f"Edge configuration custom resource invoked ({event.request_type})."
    )
    logger.append_keys(logical_resource_id=event.logical_resource_id)

    custom_resource(event.raw_event, context)
