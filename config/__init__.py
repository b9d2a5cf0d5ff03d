"""Settings modules, one per deployment environment."""

import os

_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def get_settings_module() -> str:
    """Dotted path of the settings module named by APP_ENV.

    Unknown or unset values fall back to development.
    """
    env = os.getenv("APP_ENV", "").strip().lower()
    return f"config.{_ALIASES.get(env, 'development')}"
