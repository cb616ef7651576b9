"""Helpers producing build spec documents and CLI command lines.

Nothing in this package imports ``aws_cdk``, so the generated commands can
be unit tested without the CDK runtime.
"""

# Local Modules
from cdk.utils.build_specs import (
    SCRIPTS_BUCKET_ENV,
    SCRIPTS_BUCKET_KEY_ENV,
    dependency_check_build_spec,
    dependency_check_install_commands,
    full_region_backup_build_spec,
    repository_backup_build_spec,
)
from cdk.utils.dependency_check_cli import DependencyCheckCli, ScanProps

__all__ = [
    "SCRIPTS_BUCKET_ENV",
    "SCRIPTS_BUCKET_KEY_ENV",
    "dependency_check_build_spec",
    "dependency_check_install_commands",
    "full_region_backup_build_spec",
    "repository_backup_build_spec",
    "DependencyCheckCli",
    "ScanProps",
]
