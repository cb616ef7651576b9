# Local Modules
from .adapter import (
    LambdaConfigurationAdapter,
    download_package,
    inject_configuration,
    version_arn,
)
from .models import WithConfigurationProperties

__all__ = [
    "LambdaConfigurationAdapter",
    "download_package",
    "inject_configuration",
    "version_arn",
    "WithConfigurationProperties",
]
