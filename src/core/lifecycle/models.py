# Standard Library
from typing import Any, Dict, Optional

# Third Party
from pydantic import BaseModel, ConfigDict, Field, model_validator
from aws_lambda_powertools.utilities.data_classes import (
    CloudFormationCustomResourceEvent,
)

# Local Modules
from core.utils import LifecycleOperation, LifecycleStatus


class LifecycleRequest(BaseModel):
    """A single create, update or delete instruction for an external resource.

    Attributes:
        operation: The lifecycle operation to perform.
        physical_id: The external id produced by a previous create. Required
            for update and delete.
        properties: The resource properties, without the service token.
    """

    model_config = ConfigDict(frozen=True)

    operation: LifecycleOperation = Field(
        ..., description="Lifecycle operation to perform"
    )
    physical_id: Optional[str] = Field(
        None, description="Physical id returned by a previous create"
    )
    properties: Dict[str, Any] = Field(
        default_factory=dict, description="Opaque resource properties"
    )

    @model_validator(mode="after")
    def require_physical_id(self) -> "LifecycleRequest":
        is_create = self.operation is LifecycleOperation.create
        if not is_create and not self.physical_id:
            raise ValueError(
                f"{self.operation.value} requests must carry the physical id "
                "returned by the create request"
            )
        return self

    @classmethod
    def from_event(
        cls, event: CloudFormationCustomResourceEvent
    ) -> "LifecycleRequest":
        """Build a request from a CloudFormation custom resource event.

        Parameters
        ----------
        event : CloudFormationCustomResourceEvent
            The event CloudFormation sent to the handler.

        Returns
        -------
        LifecycleRequest
            The corresponding lifecycle request.
        """
        properties = dict(event.get("ResourceProperties") or {})
        properties.pop("ServiceToken", None)

        operation = LifecycleOperation(event.request_type)
        return cls(
            operation=operation,
            physical_id=(
                None
                if operation is LifecycleOperation.create
                else event.get("PhysicalResourceId")
            ),
            properties=properties,
        )


class LifecycleResult(BaseModel):
    """The normalized outcome of a successful create or update.

    Attributes:
        physical_id: The external system's id for the resource.
        payload: The response payload, with secrets removed.
    """

    physical_id: str = Field(..., description="External resource id")
    payload: Dict[str, Any] = Field(
        default_factory=dict, description="Response payload"
    )


class LifecycleResponse(BaseModel):
    """The terminal status of a lifecycle request.

    Attributes:
        status: SUCCESS or FAILED.
        physical_id: The physical id to report, if known.
        reason: A human readable explanation, set on failure.
        response_data: Attributes exposed through ``Fn::GetAtt``.
    """

    status: LifecycleStatus = Field(..., description="Terminal status")
    physical_id: Optional[str] = Field(
        None, description="Physical id to report"
    )
    reason: Optional[str] = Field(None, description="Reason for the status")
    response_data: Dict[str, Any] = Field(
        default_factory=dict, description="Data returned to CloudFormation"
    )

    @classmethod
    def success(
        cls, result: LifecycleResult, reason: Optional[str] = None
    ) -> "LifecycleResponse":
        return cls(
            status=LifecycleStatus.success,
            physical_id=result.physical_id,
            reason=reason,
            response_data=result.payload,
        )

    @classmethod
    def failed(
        cls, reason: str, physical_id: Optional[str] = None
    ) -> "LifecycleResponse":
        return cls(
            status=LifecycleStatus.failed,
            physical_id=physical_id,
            reason=reason,
        )
