"""CloudFormation custom resources backed by a lifecycle adapter."""

# Standard Library
import json
from typing import Any, Callable, Dict, Optional

# Third Party
from crhelper import CfnResource
from pydantic import ValidationError
from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    CloudFormationCustomResourceEvent,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

# Local Modules
from core.lifecycle.adapter import ExternalResourceAdapter
from core.lifecycle.dispatcher import dispatch
from core.lifecycle.models import LifecycleRequest, LifecycleResponse
from core.utils import LifecycleStatus

# Initialize logger
logger = Logger(service="lifecycle-custom-resource")

# CloudFormation rejects response bodies larger than 4096 bytes; the rest of
# the body (ids and a reason crhelper truncates to 256 characters) fits in 1024
MAX_RESPONSE_DATA_BYTES = 3072

# Physical ids reported for creates that failed before anything existed
FAILED_CREATE_PREFIX = "failed-create-"


class CustomResourceFailed(Exception):
    """Raised to make crhelper report a FAILED response."""


def failed_create_physical_id(event: CloudFormationCustomResourceEvent) -> str:
    """Physical id reported when a create fails without a resource."""
    return (
        f"{FAILED_CREATE_PREFIX}{event.logical_resource_id}-{event.request_id}"
    )


def is_failed_create(physical_id: Optional[str]) -> bool:
    """Whether ``physical_id`` was reported for a failed create."""
    return bool(physical_id) and physical_id.startswith(FAILED_CREATE_PREFIX)


def fit_response_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``data`` if it fits in a CloudFormation response, else nothing.

    Parameters
    ----------
    data : Dict[str, Any]
        The attributes to expose through ``Fn::GetAtt``.

    Returns
    -------
    Dict[str, Any]
        ``data`` unchanged, or an empty dict when it is too large.
    """
    if len(json.dumps(data, default=str)) > MAX_RESPONSE_DATA_BYTES:
        logger.warning(
            "Response data exceeds the CloudFormation limit, dropping it"
        )
        return {}
    return data


class CustomResourceHandler:
    """Runs custom resource events against an adapter and reports them.

    Reporting goes through crhelper, which PUTs the response to the
    pre-signed ``ResponseURL``, retries the delivery until it succeeds and
    reports FAILED shortly before the Lambda function would time out.

    A create that fails before the external resource exists is reported with
    a ``failed-create-`` physical id. The rollback delete CloudFormation sends
    for that id succeeds without calling the adapter.

    Parameters
    ----------
    adapter_factory : Callable[[], ExternalResourceAdapter]
        Builds the adapter for each event.
    helper : Optional[CfnResource], optional
        The crhelper resource, by default a new one
    """

    def __init__(
        self,
        adapter_factory: Callable[[], ExternalResourceAdapter],
        helper: Optional[CfnResource] = None,
    ) -> None:
        self.adapter_factory = adapter_factory
        self.helper = helper or CfnResource(
            json_logging=False, log_level="INFO", boto_level="CRITICAL"
        )
        self.helper.create(self.run)
        self.helper.update(self.run)
        self.helper.delete(self.run)

    def __call__(self, event: Dict[str, Any], context: LambdaContext) -> None:
        self.helper(event, context)

    def respond(
        self, event: CloudFormationCustomResourceEvent
    ) -> LifecycleResponse:
        """Dispatch a custom resource event to a fresh adapter.

        Parameters
        ----------
        event : CloudFormationCustomResourceEvent
            The custom resource event.

        Returns
        -------
        LifecycleResponse
            The terminal lifecycle response.
        """
        try:
            request = LifecycleRequest.from_event(event)
        except (ValidationError, ValueError) as e:
            logger.error(f"Invalid custom resource event: {e}")
            return LifecycleResponse.failed(
                reason=f"Invalid request: {e}",
                physical_id=event.get("PhysicalResourceId"),
            )
        return dispatch(request, self.adapter_factory())

    def run(self, event: Dict[str, Any], context: LambdaContext) -> str:
        """crhelper create, update and delete function.

        Returns
        -------
        str
            The physical id to report.

        Raises
        ------
        CustomResourceFailed
            If the lifecycle response is FAILED; the reason is reported.
        """
        cfn_event = CloudFormationCustomResourceEvent(event)
        physical_id = cfn_event.get("PhysicalResourceId")

        if cfn_event.request_type == "Delete" and is_failed_create(
            physical_id
        ):
            logger.info(f"Nothing was created for {physical_id}")
            return physical_id

        response = self.respond(cfn_event)

        if response.status is LifecycleStatus.failed:
            # crhelper keeps this id when the function raises
            self.helper.PhysicalResourceId = (
                response.physical_id or failed_create_physical_id(cfn_event)
            )
            raise CustomResourceFailed(response.reason)

        self.helper.Data.update(fit_response_data(response.response_data))
        return response.physical_id
