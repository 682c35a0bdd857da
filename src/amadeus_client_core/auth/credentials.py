"""Client-credential resolution for the OAuth2 token provider.

The token provider needs a client id and client secret. They are looked up
from several sources, highest priority first:

1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, merged into the environment on load)
4. Default value

Client secrets may also live in a file whose path is given directly or
through ``AMADEUS_CLIENT_SECRET_FILE``.

Example:
    ```python
    from amadeus_client_core.auth import CredentialResolver

    resolver = CredentialResolver()
    credentials = resolver.resolve_client_credentials()
    ```

Security Considerations:
    - Credential values are never logged, only where they came from
    - File-based credentials have whitespace stripped
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from amadeus_client_core.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

CLIENT_ID_ENV_VAR = "AMADEUS_CLIENT_ID"
CLIENT_SECRET_ENV_VAR = "AMADEUS_CLIENT_SECRET"
CLIENT_SECRET_FILE_ENV_VAR = "AMADEUS_CLIENT_SECRET_FILE"


@dataclass(frozen=True)
class ClientCredentials:
    """OAuth2 client id and secret used for the client-credentials grant."""

    client_id: str
    client_secret: str

    def __repr__(self) -> str:
        return f"ClientCredentials(client_id={self.client_id!r}, client_secret='***')"


class CredentialResolver:
    """Resolve credentials from explicit values, the environment, .env files and defaults.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Set to False to skip .env loading entirely.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Resolve a single credential.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to consult.
            default: Fallback when no other source has a value.
            required: Raise instead of returning None when nothing is found.

        Returns:
            The resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and no source has a value.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            logger.debug(f"Resolved credential from {source}: ***")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file.

        The path comes from ``file_path`` or, failing that, from the environment
        variable ``env_var_name``. ``~`` and ``$VAR`` are expanded.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name) or None

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except PermissionError:
            error_msg = f"Permission denied reading credential file: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.warning(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content

    def resolve_client_credentials(
        self,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        client_secret_file: str | Path | None = None,
    ) -> ClientCredentials:
        """Resolve the OAuth2 client id and secret.

        The secret is taken from ``client_secret``, then ``AMADEUS_CLIENT_SECRET``,
        then the file named by ``client_secret_file`` or ``AMADEUS_CLIENT_SECRET_FILE``.

        Raises:
            CredentialNotFoundError: If the client id or secret cannot be found.
        """
        resolved_id = self.resolve(value=client_id, env_var_name=CLIENT_ID_ENV_VAR, required=True)

        resolved_secret = self.resolve(value=client_secret, env_var_name=CLIENT_SECRET_ENV_VAR)
        if resolved_secret is None:
            resolved_secret = self.resolve_from_file(
                file_path=client_secret_file,
                env_var_name=CLIENT_SECRET_FILE_ENV_VAR,
            )
        if not resolved_secret:
            raise CredentialNotFoundError(
                f"Required credential not found (checked env vars: {CLIENT_SECRET_ENV_VAR}, "
                f"{CLIENT_SECRET_FILE_ENV_VAR})",
                env_var_name=CLIENT_SECRET_ENV_VAR,
            )

        return ClientCredentials(client_id=resolved_id, client_secret=resolved_secret)
