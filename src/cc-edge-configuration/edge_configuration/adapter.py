"""Injection of a configuration file into a Lambda deployment package.

Lambda@Edge functions cannot read environment variables, so their settings
are shipped as a ``configuration.json`` file inside the code package. The
adapter downloads the current package, adds the file, uploads the result as
a new published version and waits for the function to become active before
reporting success.
"""

# Standard Library
import io
import zipfile
from typing import Any, Callable, Dict, Optional

# Third Party
import requests
from botocore.exceptions import BotoCoreError, ClientError, WaiterError
from pydantic import ValidationError
from aws_lambda_powertools import Logger

# Local Modules
from core.aws import LambdaClient
from core.lifecycle import (
    ExternalResourceAdapter,
    InvalidProperties,
    LifecycleResult,
    PollTimeout,
    TransportTimeout,
    UnknownResource,
    UpstreamRejected,
)
from core.utils.config import (
    CODE_DOWNLOAD_TIMEOUT_SECONDS,
    CONFIGURATION_FILE_NAME,
    POLL_DELAY_SECONDS,
    POLL_MAX_ATTEMPTS,
)
from edge_configuration.models import WithConfigurationProperties

# Initialize logger
logger = Logger(service="edge-configuration-adapter")


def download_package(url: str, timeout: int) -> bytes:
    """Download a deployment package from its pre-signed URL."""
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except (requests.ConnectionError, requests.Timeout) as e:
        raise TransportTimeout(f"Could not download function code: {e}") from e
    except requests.HTTPError as e:
        raise UpstreamRejected(f"Could not download function code: {e}") from e
    return response.content


def inject_configuration(package: bytes, configuration: str) -> bytes:
    """Return a copy of a zip package with the configuration file replaced.

    Parameters
    ----------
    package : bytes
        The original zip package.
    configuration : str
        The JSON document to write.

    Returns
    -------
    bytes
        The new zip package.
    """
    output = io.BytesIO()

    with zipfile.ZipFile(io.BytesIO(package)) as source, zipfile.ZipFile(
        output, "w", compression=zipfile.ZIP_DEFLATED
    ) as target:
        for item in source.infolist():
            if item.filename == CONFIGURATION_FILE_NAME:
                continue
            target.writestr(item, source.read(item.filename))
        target.writestr(CONFIGURATION_FILE_NAME, configuration)

    return output.getvalue()


def version_arn(function_arn: str, version: str) -> str:
    """Qualify a function ARN with a version, replacing any qualifier."""
    # arn:aws:lambda:<region>:<account>:function:<name>[:<qualifier>]
    unqualified = ":".join(function_arn.split(":")[:7])
    return f"{unqualified}:{version}"


class LambdaConfigurationAdapter(ExternalResourceAdapter):
    """Writes ``configuration.json`` into a function and publishes a version.

    The physical id is the function name. Create and update perform the same
    injection; delete leaves the function alone because it is owned by the
    stack.

    Parameters
    ----------
    client_factory : Callable[[str], LambdaClient], optional
        Builds a Lambda client for a region.
    downloader : Callable[[str, int], bytes], optional
        Downloads the current package from its pre-signed URL.
    poll_delay : int, optional
        Seconds between two status polls.
    poll_max_attempts : int, optional
        Maximum number of status polls.
    """

    def __init__(
        self,
        client_factory: Callable[[str], LambdaClient] = LambdaClient,
        downloader: Callable[[str, int], bytes] = download_package,
        poll_delay: int = POLL_DELAY_SECONDS,
        poll_max_attempts: int = POLL_MAX_ATTEMPTS,
    ) -> None:
        self.client_factory = client_factory
        self.downloader = downloader
        self.poll_delay = poll_delay
        self.poll_max_attempts = poll_max_attempts

    def create(self, properties: Dict[str, Any]) -> LifecycleResult:
        return self._configure(properties)

    def update(
        self, physical_id: str, properties: Dict[str, Any]
    ) -> LifecycleResult:
        return self._configure(properties)

    def delete(
        self, physical_id: str, properties: Optional[Dict[str, Any]] = None
    ) -> None:
        logger.info(f"Nothing to delete for {physical_id}")

    def _configure(self, properties: Dict[str, Any]) -> LifecycleResult:
        try:
            props = WithConfigurationProperties.model_validate(properties)
        except ValidationError as e:
            raise InvalidProperties(str(e)) from e

        function_name = props.function_name
        client = self.client_factory(props.region)

        try:
            location = client.get_code_location(function_name)
            if not location:
                raise UpstreamRejected(
                    f"The code of the lambda function {function_name} "
                    "could not be downloaded."
                )

            package = self.downloader(location, CODE_DOWNLOAD_TIMEOUT_SECONDS)
            configured = inject_configuration(package, props.configuration)

            updated = client.update_function_code(
                function_name, configured, publish=True
            )
            client.wait_until_active(
                function_name,
                delay=self.poll_delay,
                max_attempts=self.poll_max_attempts,
            )
        except WaiterError as e:
            raise PollTimeout(
                f"Encountered error while waiting for {function_name} "
                f"to go active: {e}"
            ) from e
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            if code == "ResourceNotFoundException":
                raise UnknownResource(
                    f"Lambda function {function_name} does not exist"
                ) from e
            raise UpstreamRejected(
                f"Lambda rejected the request for {function_name}: {e}"
            ) from e
        except BotoCoreError as e:
            raise TransportTimeout(
                f"Could not reach Lambda for {function_name}: {e}"
            ) from e
        except zipfile.BadZipFile as e:
            raise UpstreamRejected(
                f"The code of {function_name} is not a zip package: {e}"
            ) from e

        logger.info(f"Lambda function {function_name} is active.")
        return LifecycleResult(
            physical_id=function_name,
            payload={
                "CodeSha256": updated.get("CodeSha256"),
                "Version": updated.get("Version"),
                "FunctionArn": updated.get("FunctionArn"),
                "VersionArn": version_arn(
                    updated["FunctionArn"], updated["Version"]
                ),
            },
        )
