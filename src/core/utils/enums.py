# Standard Library
from enum import Enum


class LifecycleOperation(str, Enum):
    """Enumeration of custom resource lifecycle operations.

    Attributes:
        create: The resource is being created.
        update: The resource properties changed.
        delete: The resource is being removed.
    """

    create = "Create"
    update = "Update"
    delete = "Delete"


class LifecycleStatus(str, Enum):
    """Enumeration of terminal lifecycle statuses reported to CloudFormation.

    Attributes:
        success: The operation completed.
        failed: The operation failed and the reason should be reported.
    """

    success = "SUCCESS"
    failed = "FAILED"


class SecretKeyType(str, Enum):
    """Enumeration of the places a secret key can be read from or stored in.

    Attributes:
        plain_text: The value is embedded in the reference itself.
        ssm_parameter: The value lives in an SSM (SecureString) parameter.
        secrets_manager: The value lives in a Secrets Manager secret.
    """

    plain_text = "PLAIN_TEXT"
    ssm_parameter = "SSM_PARAMETER"
    secrets_manager = "SECRETS_MANAGER"
