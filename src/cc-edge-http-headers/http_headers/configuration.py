# Standard Library
import json
import os
from typing import Any, Dict, Optional

# Local Modules
from core.utils.config import CONFIGURATION_FILE_NAME

_configuration: Optional[Dict[str, Any]] = None


def load_configuration(directory: Optional[str] = None) -> Dict[str, Any]:
    """Load the ``configuration.json`` injected into the code package.

    The file is read once per execution environment.

    Parameters
    ----------
    directory : Optional[str], optional
        Directory holding the file, by default the Lambda task root.

    Returns
    -------
    Dict[str, Any]
        The decoded configuration.

    Raises
    ------
    FileNotFoundError
        If the package was deployed without a configuration.
    """
    global _configuration

    if _configuration is None:
        directory = directory or os.environ.get(
            "LAMBDA_TASK_ROOT", os.getcwd()
        )
        with open(os.path.join(directory, CONFIGURATION_FILE_NAME)) as f:
            _configuration = json.load(f)
    return _configuration


def reset_configuration() -> None:
    """Forget the cached configuration."""
    global _configuration
    _configuration = None
