# Standard Library
from typing import Dict, Any

# Third Party
from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

# Local Modules
from http_headers import apply_http_headers, load_configuration

# Edge functions have no environment, the level comes from the configuration
configuration = load_configuration()
logger = Logger(service="edge-http-headers")
logger.setLevel(configuration.get("logLevel", "INFO").upper())


@logger.inject_lambda_context(log_event=False)
def lambda_handler(
    event: Dict[str, Any], context: LambdaContext
) -> Dict[str, Any]:
    """Lambda@Edge origin-response handler adding the configured headers.

    Parameters
    ----------
    event : Dict[str, Any]
        The CloudFront event.
    context : LambdaContext
        The context object containing runtime information about the
        Lambda function invocation.

    Returns
    -------
    Dict[str, Any]
        The response CloudFront returns to the viewer.
    """
    response = event["Records"][0]["cf"]["response"]
    http_headers = configuration.get("httpHeaders") or {}

    logger.debug(f"Applying {len(http_headers)} configured headers")
    return apply_http_headers(response, http_headers)
