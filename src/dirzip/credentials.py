"""
Password resolution for a dirzip run.

The password comes from ZIP_PASSWORD when set, then from the system keyring
when a service is configured, and finally from a single interactive prompt.
It is resolved once per run and handed to every archive invocation.
"""

import sys
import logging
from typing import Optional, TextIO

import keyring
import typer
from keyring.errors import KeyringError

from dirzip.core.config import Settings
from dirzip.core.errors import InputError

logger = logging.getLogger(__name__)

PASSWORD_PROMPT = "Please enter a password for the ZIP file: "
KEYRING_USERNAME = "zip_password"

ENV_HINT = (
    "The `ZIP_PASSWORD` environment variable is not set.\n"
    "You can set it by running:\n"
    "For Linux/macOS: export ZIP_PASSWORD=\"your_password\"\n"
    "For Windows: set ZIP_PASSWORD=\"your_password\"\n"
)


def password_from_keyring(service: str) -> Optional[str]:
    """Look up the password stored under the given keyring service, if any."""
    try:
        return keyring.get_password(service, KEYRING_USERNAME)
    except KeyringError as e:
        logger.warning(f"Keyring lookup for service '{service}' failed: {e}")
        return None


def prompt_for_password(stdin: Optional[TextIO] = None) -> str:
    """
    Print the prompt and read one line from stdin.

    Surrounding whitespace and the line terminator are stripped. No masking
    and no confirmation.

    Raises:
        InputError: If stdin is closed or cannot be read
    """
    stream = stdin if stdin is not None else sys.stdin
    typer.echo(PASSWORD_PROMPT, nl=False)

    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        raise InputError(str(e)) from e

    if not line:
        raise InputError("unexpected end of input")
    return line.strip()


def resolve_password(settings: Settings, stdin: Optional[TextIO] = None) -> str:
    """
    Resolve the archive password for this run.

    Args:
        settings: Settings loaded once at startup
        stdin: Stream to read the interactive answer from (defaults to sys.stdin)

    Returns:
        The password, verbatim when it comes from the environment or keyring

    Raises:
        InputError: If the password has to be prompted for and reading fails
    """
    if settings.zip_password is not None:
        logger.debug("Using password from ZIP_PASSWORD")
        return settings.zip_password

    if settings.keyring_service:
        password = password_from_keyring(settings.keyring_service)
        if password is not None:
            logger.debug(f"Using password from keyring service '{settings.keyring_service}'")
            return password

    typer.echo(ENV_HINT, err=True)
    return prompt_for_password(stdin)
