"""Error taxonomy for external-resource lifecycle operations.

Every failure an adapter can report is a ``LifecycleError``; the dispatcher
turns them into a FAILED response whose reason is the exception message.
"""


class LifecycleError(Exception):
    """Base class for failures reported back to CloudFormation."""


class InvalidProperties(LifecycleError):
    """The resource properties are missing a field or have the wrong type."""


class SecretUnavailable(LifecycleError):
    """A secret reference could not be resolved or a secret not stored."""


class UpstreamRejected(LifecycleError):
    """The remote API rejected the request (validation, auth, signature)."""


class UnknownResource(LifecycleError):
    """The remote API does not know the given physical id."""


class TransportTimeout(LifecycleError):
    """The remote API could not be reached after all retries."""


class PollTimeout(LifecycleError):
    """The resource did not become active within the polling budget."""
