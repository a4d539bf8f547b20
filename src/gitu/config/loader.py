"""Settings loading utilities."""

from pathlib import Path

import yaml

from .schema import GituSettings


def default_settings_paths() -> list[Path]:
    return [
        Path.home() / ".config" / "gitu" / "config.yaml",
        Path.home() / ".gitu.yaml",
    ]


def find_settings_file() -> Path | None:
    """Return the first default settings file that exists."""
    for path in default_settings_paths():
        if path.exists():
            return path
    return None


def load_settings(settings_path: str | Path | None = None) -> GituSettings:
    """Load gitu settings from a YAML file.

    Values from the file take precedence over ``GITU_`` environment
    variables, which in turn override the defaults.

    Args:
        settings_path: Path to settings file. If None, uses default locations.

    Returns:
        GituSettings instance
    """
    if settings_path is None:
        settings_path = find_settings_file()

    if settings_path is None:
        # No settings file found, use defaults
        return GituSettings()

    settings_path = Path(settings_path).expanduser()
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with open(settings_path) as f:
        settings_data = yaml.safe_load(f) or {}

    if not isinstance(settings_data, dict):
        raise ValueError(f"Settings file must contain a mapping: {settings_path}")

    return GituSettings(**settings_data)


def save_settings(settings: GituSettings, settings_path: str | Path) -> None:
    """Save gitu settings to a YAML file.

    Args:
        settings: GituSettings instance
        settings_path: Path to save settings file
    """
    settings_path = Path(settings_path).expanduser()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    settings_dict = settings.model_dump(mode="json")

    with open(settings_path, "w") as f:
        yaml.dump(settings_dict, f, default_flow_style=False, sort_keys=False)
