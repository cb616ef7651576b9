# Local Modules
from core.utils.enums import (
    LifecycleOperation,
    LifecycleStatus,
    SecretKeyType,
)

__all__ = [
    "LifecycleOperation",
    "LifecycleStatus",
    "SecretKeyType",
]
