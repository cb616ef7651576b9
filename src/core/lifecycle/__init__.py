"""External-resource lifecycle adapters.

CloudFormation custom resources hand a create, update or delete request to a
Lambda function, which must manage a resource in some external system and
report back a terminal status. This package holds the pieces shared by every
such handler:

- ``LifecycleRequest`` / ``LifecycleResult`` / ``LifecycleResponse`` models.
- ``ExternalResourceAdapter``, the contract adapters implement.
- ``dispatch``, which runs a request against an adapter and always returns a
  terminal response.
- ``CustomResourceHandler``, which parses the event, dispatches it and
  reports the response to CloudFormation through crhelper.
"""

# Local Modules
from core.lifecycle.adapter import ExternalResourceAdapter
from core.lifecycle.dispatcher import dispatch
from core.lifecycle.errors import (
    InvalidProperties,
    LifecycleError,
    PollTimeout,
    SecretUnavailable,
    TransportTimeout,
    UnknownResource,
    UpstreamRejected,
)
from core.lifecycle.models import (
    LifecycleRequest,
    LifecycleResponse,
    LifecycleResult,
)
from core.lifecycle.custom_resource import (
    CustomResourceFailed,
    CustomResourceHandler,
    fit_response_data,
    is_failed_create,
)

__all__ = [
    "ExternalResourceAdapter",
    "dispatch",
    "InvalidProperties",
    "LifecycleError",
    "PollTimeout",
    "SecretUnavailable",
    "TransportTimeout",
    "UnknownResource",
    "UpstreamRejected",
    "LifecycleRequest",
    "LifecycleResponse",
    "LifecycleResult",
    "CustomResourceFailed",
    "CustomResourceHandler",
    "fit_response_data",
    "is_failed_create",
]
