"""Settings schema for gitu."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from ..switch.git import ConfigScope


class GituSettings(BaseSettings):
    """Main gitu settings."""

    store_path: str = Field(
        default="~/.gitu.json", description="JSON file holding the identities"
    )
    scope: ConfigScope = Field(
        default=ConfigScope.GLOBAL,
        description="git configuration scope written on switch (global or local)",
    )
    git_executable: str = Field(default="git", description="git binary to invoke")
    ssh_executable: str = Field(
        default="ssh", description="SSH client used in core.sshCommand"
    )
    log_level: str = Field(default="WARNING", description="Log level for diagnostics")

    @property
    def resolved_store_path(self) -> Path:
        return Path(self.store_path).expanduser()

    class Config:
        env_prefix = "GITU_"
