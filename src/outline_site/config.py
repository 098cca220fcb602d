"""Configuration for the Outline site, sourced from the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from outline_site.errors import ConfigError

# Required variables, in the order they are reported when missing.
REQUIRED_ENV: tuple[str, ...] = (
    "OUTLINE_API_KEY",
    "OUTLINE_COLLECTION_ID",
    "OUTLINE_API_HOST",
    "WEBSITE_URL",
    "TEMPLATE_PATH",
)

DEFAULT_PORT: int = 3000
DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_SITE_TITLE: str = "leo"

# Loaded when no --env-file is given on the command line.
DEFAULT_ENV_FILE: Path = Path(".env")


@dataclass(frozen=True)
class Settings:
    """Startup configuration, passed explicitly to whatever needs it."""

    api_key: str
    collection_id: str
    api_host: str
    website_url: str
    template_path: Path
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    site_title: str = DEFAULT_SITE_TITLE


def load_env_file(path: Path = DEFAULT_ENV_FILE) -> bool:
    """Load KEY=value pairs from ``path`` into ``os.environ``.

    Variables that are already set (shell, systemd, docker) win over the file.
    A missing file is fine; returns whether anything was loaded.
    """
    if not path.is_file():
        return False
    return load_dotenv(path, override=False)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from an environment mapping (``os.environ`` by default).

    Raises:
        ConfigError: If any required variable is missing, listing all of them,
            or if PORT is not an integer.
    """
    env = os.environ if environ is None else environ

    missing = [key for key in REQUIRED_ENV if not env.get(key)]
    if missing:
        msg = f"Missing required environment variable(s): {', '.join(missing)}"
        raise ConfigError(msg)

    raw_port = env.get("PORT") or str(DEFAULT_PORT)
    try:
        port = int(raw_port)
    except ValueError:
        msg = f"PORT must be an integer, got {raw_port!r}"
        raise ConfigError(msg) from None

    return Settings(
        api_key=env["OUTLINE_API_KEY"],
        collection_id=env["OUTLINE_COLLECTION_ID"],
        api_host=env["OUTLINE_API_HOST"],
        website_url=env["WEBSITE_URL"],
        template_path=Path(env["TEMPLATE_PATH"]).expanduser(),
        port=port,
        host=env.get("HOST") or DEFAULT_HOST,
        site_title=env.get("SITE_TITLE") or DEFAULT_SITE_TITLE,
    )
