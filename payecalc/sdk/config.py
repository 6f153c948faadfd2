"""Configuration management for PAYE Calc.

Configuration is split into two files:

1. settings.json - Machine-specific tool preferences
   - profile: path to profile.yaml (optional, if not colocated)
   - default_input_type: 'monthly' or 'annual'
   - default_output_format: 'text', 'json' or 'csv'

2. profile.yaml - User's personal data
   - deductions: default monthly pension/nhf/insurance
   - employees: roster for batch comparison

Config directory resolution:
1. PAYE_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/paye-calc/ (XDG_CONFIG_HOME fallback)

Profile resolution:
1. settings.json "profile" key (if set)
2. profile.yaml in same config directory
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

import yaml


APP_NAME = "paye-calc"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"

# Known settings and their allowed values (None = free-form)
SETTINGS_CHOICES = {
    "profile": None,
    "default_input_type": ("monthly", "annual"),
    "default_output_format": ("text", "json", "csv"),
}


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


class InvalidSettingError(ValueError):
    """Raised when a setting key or value is not recognized."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. PAYE_CALC_CONFIG_PATH environment variable
    2. ~/.config/paye-calc/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("PAYE_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json, or default if unset."""
    settings = load_settings()
    return settings.get(key, default)


def validate_setting(key: str, value: Any) -> None:
    """Check a setting key and value against SETTINGS_CHOICES.

    Raises:
        InvalidSettingError: If the key is unknown or the value not allowed
    """
    if key not in SETTINGS_CHOICES:
        raise InvalidSettingError(
            f"Unknown setting '{key}'. Known settings: {', '.join(SETTINGS_CHOICES)}"
        )
    choices = SETTINGS_CHOICES[key]
    if choices is not None and value not in choices:
        raise InvalidSettingError(
            f"Invalid value '{value}' for {key}. Must be one of: {', '.join(choices)}"
        )


def set_setting(key: str, value: Any) -> Path:
    """Validate and set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    validate_setting(key, value)
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was set."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_profile_path(require_exists: bool = False) -> Path:
    """Get the path to the profile.yaml file.

    Resolution order:
    1. settings.json "profile" key (if set)
    2. profile.yaml in config directory

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    config_dir = get_config_dir()

    custom_profile = load_settings().get("profile")
    if custom_profile:
        profile_path = Path(custom_profile).expanduser()
        if require_exists and not profile_path.exists():
            raise ProfileNotFoundError(
                f"Profile not found at configured path: {profile_path}\n\n"
                f"Update with: paye-calc settings set profile /path/to/profile.yaml"
            )
        return profile_path

    profile_path = config_dir / PROFILE_FILENAME
    if require_exists and not profile_path.exists():
        raise ProfileNotFoundError(
            f"No profile found. Checked:\n"
            f"  1. settings.json 'profile' key (not set)\n"
            f"  2. {profile_path} (not found)\n\n"
            f"Set a custom path: paye-calc settings set profile /path/to/profile.yaml"
        )

    return profile_path


def load_profile(require_exists: bool = True) -> dict:
    """Load user profile from profile.yaml.

    Returns:
        Profile dictionary (empty dict if not required and not found)

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    profile_path = get_profile_path(require_exists=require_exists)

    if not profile_path.exists():
        return {}

    with open(profile_path, "r") as f:
        return yaml.safe_load(f) or {}


def save_profile(profile: dict, path: Optional[Path] = None) -> Path:
    """Save user profile to profile.yaml (default location unless path given)."""
    if path is None:
        path = get_profile_path(require_exists=False)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    return path


def get_profile_value(key: str, default: Any = None) -> Any:
    """Get a profile value by dot-notation key (e.g., "deductions.pension")."""
    profile = load_profile(require_exists=False)

    value = profile
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return default

    return value


def set_profile_value(key: str, value: Any) -> Path:
    """Set a profile value by dot-notation key, creating nested sections."""
    profile = load_profile(require_exists=False)

    parts = key.split(".")
    current = profile
    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]

    current[parts[-1]] = value

    return save_profile(profile)


def get_default_deductions() -> dict:
    """Default monthly deductions from the profile's 'deductions' section.

    Values are returned as text, the way a form would hold them; missing
    entries are empty strings.

    Raises:
        ValueError: If 'deductions' is present but not a mapping
    """
    configured = get_profile_value("deductions", {}) or {}
    if not isinstance(configured, dict):
        raise ValueError(
            f"Profile 'deductions' must be a mapping of pension/nhf/insurance, "
            f"got {type(configured).__name__}: {configured!r}"
        )
    return {
        key: "" if configured.get(key) is None else str(configured[key])
        for key in ("pension", "nhf", "insurance")
    }
