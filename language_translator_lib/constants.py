"""
Configuration defaults for the language‑translator client.

All values are loaded from environment variables, allowing the deployment
environment to control behaviour without code changes.  Arguments passed
explicitly to :class:`~language_translator_lib.client.LanguageTranslatorClient`
always take precedence over these values.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "LANGUAGE_TRANSLATOR_"


# Public endpoint of the service
DEFAULT_SERVICE_URL = "https://gateway.watsonplatform.net/language-translator/api"

# Service url used when none is given explicitly
SERVICE_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}URL", DEFAULT_SERVICE_URL
).strip()

# Basic auth credentials
SERVICE_USERNAME = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}USERNAME", ""
).strip()
SERVICE_PASSWORD = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}PASSWORD", ""
).strip()

# Bearer token, used instead of username/password when set
SERVICE_TOKEN = os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}TOKEN", "").strip()

# Per-request timeout in seconds
SERVICE_TIMEOUT = int(os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}TIMEOUT", 60))

# Default logging level
LOG_LEVEL = os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO").strip()
