"""CodeBuild build spec documents used by the backup and scan constructs.

The functions return plain dictionaries so the shell commands can be checked
without synthesizing a stack; constructs wrap them in
``codebuild.BuildSpec.from_object``.
"""

# Standard Library
from typing import Any, Dict, List, Optional

# Local Modules
from cdk.utils.dependency_check_cli import DependencyCheckCli, ScanProps

BUILD_SPEC_VERSION = "0.2"
SCRIPTS_BUCKET_ENV = "SCRIPTS_BUCKET"
SCRIPTS_BUCKET_KEY_ENV = "SCRIPTS_BUCKET_KEY"
BACKUP_SCRIPT = "backup_codecommit.sh"
DEPENDENCY_CHECK_RELEASES = (
    "https://github.com/jeremylong/DependencyCheck/releases/download"
)
DEPENDENCY_CHECK_HOME = "/opt/dependency-check"
REPORTS_DIR = "reports"


def repository_backup_build_spec(
    repository_name: str, clone_url: str, bucket_name: str
) -> Dict[str, Any]:
    """Build spec cloning one repository and uploading a tarball of it.

    Parameters
    ----------
    repository_name : str
        The name of the CodeCommit repository.
    clone_url : str
        The HTTPS clone URL of the repository.
    bucket_name : str
        The bucket receiving the backup under ``<repository_name>/``.

    Returns
    -------
    Dict[str, Any]
        The build spec document.
    """
    return {
        "version": BUILD_SPEC_VERSION,
        "env": {"git-credential-helper": "yes"},
        "phases": {
            "pre_build": {
                "commands": [
                    f'echo "[===== Clone repository: {repository_name} =====]"',
                    f'git clone "{clone_url}"',
                ],
            },
            "build": {
                "commands": [
                    "dt=$(date -u '+%Y_%m_%d_%H_%M')",
                    f'zipfile="{repository_name}_backup_${{dt}}_UTC.tar.gz"',
                    (
                        f'echo "Compressing repository: {repository_name} '
                        f"into file: ${{zipfile}} and uploading to S3 bucket: "
                        f'{bucket_name}/{repository_name}"'
                    ),
                    f'tar -zcvf "${{zipfile}}" "{repository_name}/"',
                    (
                        f'aws s3 cp "${{zipfile}}" '
                        f'"s3://{bucket_name}/{repository_name}/${{zipfile}}"'
                    ),
                ],
            },
        },
    }


def full_region_backup_build_spec() -> Dict[str, Any]:
    """Build spec downloading the backup script asset and running it.

    The script reads ``BACKUP_BUCKET`` and ``REPOSITORY_NAMES`` from the
    project environment.
    """
    location = f"s3://${{{SCRIPTS_BUCKET_ENV}}}/${{{SCRIPTS_BUCKET_KEY_ENV}}}"
    return {
        "version": BUILD_SPEC_VERSION,
        "env": {"git-credential-helper": "yes"},
        "phases": {
            "pre_build": {
                "commands": [
                    f'echo "Downloading scripts from {location}"',
                    f"aws s3 cp {location} ./",
                    f"unzip ./$(basename ${{{SCRIPTS_BUCKET_KEY_ENV}}})",
                ],
            },
            "build": {
                "commands": [
                    f"chmod +x {BACKUP_SCRIPT}",
                    f"./{BACKUP_SCRIPT}",
                ],
            },
        },
    }


def dependency_check_install_commands(
    version: str, gpg_key_id: Optional[str] = None
) -> List[str]:
    """Commands installing a dependency-check release under /opt.

    Parameters
    ----------
    version : str
        The dependency-check version, e.g. "5.3.2".
    gpg_key_id : Optional[str], optional
        Id of the release signing key. When given the release archive is
        verified against its detached signature, by default None

    Returns
    -------
    List[str]
        The install commands.
    """
    archive = f"dependency-check-{version}-release.zip"
    url = f"{DEPENDENCY_CHECK_RELEASES}/v{version}/{archive}"

    commands = [
        'echo "[===== Install OWASP Dependency Check =====]"',
        f"wget -q {url}",
    ]
    if gpg_key_id:
        commands += [
            f"wget -q {url}.asc",
            f"gpg --keyserver hkps://keys.openpgp.org --recv-keys {gpg_key_id}",
            f"gpg --verify {archive}.asc {archive}",
        ]
    commands += [
        f"unzip -q {archive} -d /opt",
        f"chmod +x {DEPENDENCY_CHECK_HOME}/bin/dependency-check.sh",
        f'export PATH="$PATH:{DEPENDENCY_CHECK_HOME}/bin"',
    ]
    return commands


def dependency_check_build_spec(
    repository_name: str,
    clone_url: str,
    scan: ScanProps,
    version: str = "5.3.2",
    pre_check_command: str = 'echo "No preCheckCommand!"',
    reports_bucket_name: Optional[str] = None,
    gpg_key_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Build spec scanning a repository with OWASP dependency-check.

    Parameters
    ----------
    repository_name : str
        The name of the CodeCommit repository.
    clone_url : str
        The HTTPS clone URL of the repository.
    scan : ScanProps
        The scan options; ``basedir`` should be the repository name.
    version : str, optional
        The dependency-check version, by default "5.3.2"
    pre_check_command : str, optional
        Command run inside the clone before scanning, e.g. to install
        dependencies, by default a no-op echo
    reports_bucket_name : Optional[str], optional
        Bucket the HTML report is uploaded to, by default None
    gpg_key_id : Optional[str], optional
        Release signing key id used to verify the download, by default None

    Returns
    -------
    Dict[str, Any]
        The build spec document.
    """
    cli = DependencyCheckCli()

    if reports_bucket_name:
        upload = (
            f"aws s3 cp {REPORTS_DIR}/dependency-check-report.html "
            f"s3://{reports_bucket_name}/{repository_name}/${{dt}}_UTC/"
        )
    else:
        upload = 'echo "No reportsBuckets"'

    return {
        "version": BUILD_SPEC_VERSION,
        "env": {"git-credential-helper": "yes"},
        "phases": {
            "install": {
                "commands": dependency_check_install_commands(
                    version, gpg_key_id
                ),
            },
            "pre_build": {
                "commands": [
                    f'echo "[===== Clone repository: {repository_name} =====]"',
                    f'git clone "{clone_url}"',
                    f"cd {repository_name}",
                    pre_check_command,
                    "SHA=$(git rev-parse HEAD)",
                    "cd ${CODEBUILD_SRC_DIR}",
                ],
            },
            "build": {
                "commands": [
                    f'echo "[===== Scan repository: {repository_name} =====]"',
                    'echo "[===== SHA: $SHA =====]"',
                    f"mkdir {REPORTS_DIR}",
                    cli.version(),
                    cli.scan(scan),
                ],
                "finally": [
                    'echo "[===== Upload reports =====]"',
                    "dt=$(date -u '+%Y_%m_%d_%H_%M')",
                    upload,
                ],
            },
        },
        "reports": {
            "dependencyCheckReport": {
                "files": [f"{REPORTS_DIR}/dependency-check-junit.xml"],
            },
        },
        "cache": {
            "paths": [f"{DEPENDENCY_CHECK_HOME}/data/**/*"],
        },
    }
