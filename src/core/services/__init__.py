"""Services shared by the Cloud Components handlers."""

# Local Modules
from core.services.secret_key import SecretKey, SecretKeyStore

__all__ = ["SecretKey", "SecretKeyStore"]
