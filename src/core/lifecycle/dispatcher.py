# Third Party
from aws_lambda_powertools import Logger

# Local Modules
from core.lifecycle.adapter import ExternalResourceAdapter
from core.lifecycle.errors import LifecycleError
from core.lifecycle.models import (
    LifecycleRequest,
    LifecycleResponse,
    LifecycleResult,
)
from core.utils import LifecycleOperation

# Initialize logger
logger = Logger(service="lifecycle-dispatcher")


def dispatch(
    request: LifecycleRequest, adapter: ExternalResourceAdapter
) -> LifecycleResponse:
    """Run a lifecycle request against an adapter.

    The returned response is always terminal: adapter failures, whether
    typed ``LifecycleError`` or unexpected exceptions, become a FAILED
    response with a reason instead of propagating.

    Parameters
    ----------
    request : LifecycleRequest
        The request to run.
    adapter : ExternalResourceAdapter
        The adapter that talks to the external service.

    Returns
    -------
    LifecycleResponse
        SUCCESS with the physical id and payload, or FAILED with a reason.
    """
    logger.info(
        f"Dispatching {request.operation.value} request "
        f"(physical id: {request.physical_id})"
    )

    try:
        if request.operation is LifecycleOperation.create:
            result = adapter.create(request.properties)
        elif request.operation is LifecycleOperation.update:
            result = adapter.update(request.physical_id, request.properties)
        else:
            adapter.delete(request.physical_id, request.properties)
            result = LifecycleResult(physical_id=request.physical_id)
    except LifecycleError as e:
        logger.error(
            f"{request.operation.value} failed with {type(e).__name__}: {e}"
        )
        return LifecycleResponse.failed(
            reason=f"{type(e).__name__}: {e}",
            physical_id=request.physical_id,
        )
    except Exception as e:
        logger.exception(f"Unexpected error during {request.operation.value}")
        return LifecycleResponse.failed(
            reason=f"Internal Error: {e}", physical_id=request.physical_id
        )

    logger.info(
        f"{request.operation.value} succeeded for {result.physical_id}"
    )
    return LifecycleResponse.success(result)
