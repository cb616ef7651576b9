"""Resolution and storage of secrets referenced by serialized secret keys.

A secret key is a small JSON document produced by the CDK ``SecretKey`` and
``SecretKeyStore`` helpers. It tells the handler where a secret lives without
embedding the secret in the CloudFormation template (unless the plain text
variant is used on purpose).
"""

# Standard Library
import json
from typing import Any, Callable, Dict, Optional

# Third Party
from botocore.exceptions import BotoCoreError, ClientError
from aws_lambda_powertools import Logger

# Local Modules
from core.aws import SecretsManagerClient, SsmClient
from core.lifecycle.errors import SecretUnavailable
from core.utils import SecretKeyType
from core.utils.config import SECRET_MAX_ATTEMPTS

# Initialize logger
logger = Logger(service="secret-key-service")


def _parse(secret_key_string: str) -> Dict[str, Any]:
    try:
        reference = json.loads(secret_key_string)
    except (TypeError, json.JSONDecodeError) as e:
        raise SecretUnavailable(f"Secret key is not valid JSON: {e}") from e

    if not isinstance(reference, dict) or "secretKeyType" not in reference:
        raise SecretUnavailable("Secret key is missing 'secretKeyType'")

    try:
        reference["secretKeyType"] = SecretKeyType(reference["secretKeyType"])
    except ValueError as e:
        raise SecretUnavailable(
            f"Unsupported secret key type: {reference['secretKeyType']}"
        ) from e

    return reference


def _require(reference: Dict[str, Any], field: str) -> str:
    value = reference.get(field)
    if not value:
        raise SecretUnavailable(
            f"{reference['secretKeyType'].value} secret key is missing "
            f"'{field}'"
        )
    return value


class SecretKey:
    """Resolves a serialized secret key to the secret value.

    Parameters
    ----------
    secret_key_string : str
        The serialized secret key.
    ssm_client_factory : Optional[Callable[[], SsmClient]], optional
        Builds the SSM client, by default an ``SsmClient`` with
        ``SECRET_MAX_ATTEMPTS`` retries.
    secrets_manager_client_factory : Optional[Callable[[], SecretsManagerClient]], optional
        Builds the Secrets Manager client, by default a
        ``SecretsManagerClient`` with ``SECRET_MAX_ATTEMPTS`` retries.
    """

    def __init__(
        self,
        secret_key_string: str,
        ssm_client_factory: Optional[Callable[[], SsmClient]] = None,
        secrets_manager_client_factory: Optional[
            Callable[[], SecretsManagerClient]
        ] = None,
    ) -> None:
        self.reference = _parse(secret_key_string)
        self.ssm_client_factory = ssm_client_factory or (
            lambda: SsmClient(max_attempts=SECRET_MAX_ATTEMPTS)
        )
        self.secrets_manager_client_factory = (
            secrets_manager_client_factory
            or (lambda: SecretsManagerClient(max_attempts=SECRET_MAX_ATTEMPTS))
        )

    @property
    def secret_key_type(self) -> SecretKeyType:
        return self.reference["secretKeyType"]

    def get_value(self) -> str:
        """Resolve the secret value.

        Returns
        -------
        str
            The secret value.

        Raises
        ------
        SecretUnavailable
            If the secret cannot be read or is empty.
        """
        key_type = self.secret_key_type

        if key_type is SecretKeyType.plain_text:
            return _require(self.reference, "value")

        try:
            if key_type is SecretKeyType.ssm_parameter:
                name = _require(self.reference, "parameterName")
                value = self.ssm_client_factory().get_parameter(
                    name, with_decryption=True
                )
            else:
                secret_id = _require(self.reference, "secretId")
                value = self.secrets_manager_client_factory().get_secret_string(
                    secret_id
                )
                value = self._select_field(value)
        except (ClientError, BotoCoreError) as e:
            raise SecretUnavailable(
                f"Could not resolve {key_type.value} secret key: {e}"
            ) from e

        if not value:
            raise SecretUnavailable(f"{key_type.value} secret key is empty")
        return value

    def _select_field(self, secret_string: Optional[str]) -> Optional[str]:
        field_name = self.reference.get("fieldName")
        if not field_name or secret_string is None:
            return secret_string

        try:
            fields = json.loads(secret_string)
        except json.JSONDecodeError as e:
            raise SecretUnavailable(
                f"Secret is not a JSON document, cannot read field "
                f"'{field_name}'"
            ) from e

        if not isinstance(fields, dict) or field_name not in fields:
            raise SecretUnavailable(f"Secret has no field '{field_name}'")
        return str(fields[field_name])


class SecretKeyStore:
    """Writes a secret to the location named by a serialized store key.

    Parameters
    ----------
    secret_key_store_string : str
        The serialized store key. Only ``SSM_PARAMETER`` and
        ``SECRETS_MANAGER`` locations can be written.
    ssm_client_factory : Optional[Callable[[], SsmClient]], optional
        Builds the SSM client.
    secrets_manager_client_factory : Optional[Callable[[], SecretsManagerClient]], optional
        Builds the Secrets Manager client.
    """

    def __init__(
        self,
        secret_key_store_string: str,
        ssm_client_factory: Optional[Callable[[], SsmClient]] = None,
        secrets_manager_client_factory: Optional[
            Callable[[], SecretsManagerClient]
        ] = None,
    ) -> None:
        self.reference = _parse(secret_key_store_string)
        if self.reference["secretKeyType"] is SecretKeyType.plain_text:
            raise SecretUnavailable("A plain text secret key cannot be written")

        self.ssm_client_factory = ssm_client_factory or (
            lambda: SsmClient(max_attempts=SECRET_MAX_ATTEMPTS)
        )
        self.secrets_manager_client_factory = (
            secrets_manager_client_factory
            or (lambda: SecretsManagerClient(max_attempts=SECRET_MAX_ATTEMPTS))
        )

    def put_secret(self, value: str) -> None:
        """Store the secret value.

        Raises
        ------
        SecretUnavailable
            If the secret cannot be written.
        """
        key_type = self.reference["secretKeyType"]

        try:
            if key_type is SecretKeyType.ssm_parameter:
                self.ssm_client_factory().put_parameter(
                    _require(self.reference, "parameterName"), value
                )
            else:
                self.secrets_manager_client_factory().put_secret_string(
                    _require(self.reference, "secretId"), value
                )
        except (ClientError, BotoCoreError) as e:
            raise SecretUnavailable(
                f"Could not store secret in {key_type.value}: {e}"
            ) from e

        logger.info(f"Stored secret in {key_type.value}")
