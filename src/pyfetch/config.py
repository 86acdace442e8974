"""Runtime configuration for pyfetch."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_LOG_FILE = "pyfetch.log"


@dataclass(slots=True, frozen=True)
class Config:
    """
    Settings resolved once at startup and passed down.

    Attributes:
        user: Login name shown in the header (``USER``).
        shell: Path of the login shell (``SHELL``).
        log_file: Diagnostic log path (``PYFETCH_LOG``); empty disables it.
    """

    user: str = ""
    shell: str = ""
    log_file: str = DEFAULT_LOG_FILE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Build a Config from environment variables."""
        if environ is None:
            environ = os.environ
        return cls(
            user=environ.get("USER", ""),
            shell=environ.get("SHELL", ""),
            log_file=environ.get("PYFETCH_LOG", DEFAULT_LOG_FILE),
        )
