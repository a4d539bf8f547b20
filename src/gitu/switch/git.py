"""Runner for `git config` invocations."""

import logging
import subprocess
from enum import Enum

from ..errors import GitConfigError
from .plan import ConfigDirective

logger = logging.getLogger(__name__)

# `git config --unset` exits with 5 when the key is not set
GIT_UNSET_MISSING_KEY = 5


class ConfigScope(str, Enum):
    """Which git configuration file directives are written to."""

    GLOBAL = "global"
    LOCAL = "local"


class GitConfig:
    """Applies configuration directives through the git command line."""

    def __init__(
        self,
        scope: ConfigScope | str = ConfigScope.GLOBAL,
        executable: str = "git",
    ):
        """Initialize the runner.

        Args:
            scope: Configuration scope passed as --global or --local
            executable: git binary to invoke
        """
        self.scope = ConfigScope(scope)
        self.executable = executable

    def command(self, directive: ConfigDirective) -> list[str]:
        """Build the argument list for a directive."""
        return [
            self.executable,
            "config",
            f"--{self.scope.value}",
            *directive.config_args(),
        ]

    def apply(self, directive: ConfigDirective) -> None:
        """Run one directive and wait for git to exit.

        Args:
            directive: Directive to apply

        Raises:
            GitConfigError: If git cannot be started or exits non-zero
        """
        args = self.command(directive)
        logger.debug("Running %s", args)

        try:
            result = subprocess.run(args, capture_output=True, text=True)
        except OSError as e:
            raise GitConfigError(directive, None, str(e)) from e

        if result.returncode == 0:
            return
        if directive.is_unset and result.returncode == GIT_UNSET_MISSING_KEY:
            logger.debug("%s was not set", directive.key)
            return

        raise GitConfigError(directive, result.returncode, result.stderr or "")
