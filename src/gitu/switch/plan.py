"""Switch plans: the git configuration directives behind an identity switch."""

import shlex
from pathlib import Path

from pydantic import BaseModel, Field

from ..identities.models import Identity

USER_NAME = "user.name"
USER_EMAIL = "user.email"
SSH_COMMAND = "core.sshCommand"


class ConfigDirective(BaseModel):
    """A single `git config` write (or unset when value is None)."""

    key: str = Field(..., description="git configuration key")
    value: str | None = Field(default=None, description="Value to set; None unsets the key")

    @property
    def is_unset(self) -> bool:
        return self.value is None

    def config_args(self) -> list[str]:
        """Arguments following `git config --<scope>`."""
        if self.is_unset:
            return ["--unset", self.key]
        return [self.key, self.value]

    def display(self) -> str:
        """Render the directive as a double-quoted shell command line."""
        if self.is_unset:
            return f"git config --unset {self.key}"
        escaped = self.value.replace('"', '\\"')
        return f'git config {self.key} "{escaped}"'

    class Config:
        frozen = True


class SwitchPlan(BaseModel):
    """Ordered directives that make an identity active."""

    identity_id: str
    directives: list[ConfigDirective] = Field(default_factory=list)


def expand_home(path: str, home: Path) -> str:
    """Replace a leading ``~`` with the home directory."""
    if path.startswith("~"):
        return str(home) + path[1:]
    return path


def ssh_command(key_path: str, ssh_executable: str = "ssh") -> str:
    """Build a core.sshCommand that only offers the given key.

    ``-F /dev/null`` keeps ~/.ssh/config and system config from adding
    other identities.
    """
    return (
        f"{ssh_executable} -i {shlex.quote(key_path)} "
        "-o IdentitiesOnly=yes -F /dev/null"
    )


def build_plan(
    identity_id: str,
    identity: Identity,
    home: Path | None = None,
    ssh_executable: str = "ssh",
) -> SwitchPlan:
    """Derive the git configuration directives for an identity.

    Args:
        identity_id: Id of the identity being activated
        identity: The identity record
        home: Home directory used to expand ``~`` in the key path
        ssh_executable: SSH client named in core.sshCommand

    Returns:
        SwitchPlan with user.name, user.email and a core.sshCommand set or unset
    """
    directives = [
        ConfigDirective(key=USER_NAME, value=identity.display_name),
        ConfigDirective(key=USER_EMAIL, value=identity.email),
    ]

    if identity.ssh_key_path:
        key_path = expand_home(identity.ssh_key_path, home or Path.home())
        directives.append(
            ConfigDirective(key=SSH_COMMAND, value=ssh_command(key_path, ssh_executable))
        )
    else:
        directives.append(ConfigDirective(key=SSH_COMMAND))

    return SwitchPlan(identity_id=identity_id, directives=directives)
