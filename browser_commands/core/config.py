"""Loading host globals from the environment."""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv
from pydantic import ValidationError

from ..types import Globals
from .errors import ConfigurationError

ENV_WAIT_TIMEOUT = "WAIT_FOR_CONDITION_TIMEOUT"
ENV_ABORT_ON_FAILURE = "ABORT_ON_ASSERTION_FAILURE"


def load_globals(env_file: Optional[Union[str, Path]] = None) -> Globals:
    """
    Build ``Globals`` from environment variables.

    Values in ``env_file`` (or a ``.env`` found from the working directory)
    never override variables already set in the process environment.

    Args:
        env_file: Optional path to a dotenv file

    Returns:
        Globals

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    load_dotenv(env_file)

    values: Dict[str, Any] = {}
    timeout = os.getenv(ENV_WAIT_TIMEOUT)
    if timeout:
        values["wait_for_condition_timeout"] = timeout
    abort = os.getenv(ENV_ABORT_ON_FAILURE)
    if abort:
        values["abort_on_assertion_failure"] = abort

    try:
        return Globals(**values)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
