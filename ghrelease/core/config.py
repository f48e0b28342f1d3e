"""Typed configuration loading and access.

Configuration is optional. When present, ``.ghrelease.toml`` in the working
directory looks like:

    [github]
    api_url = "https://api.github.com"
    token_env = "GITHUB_TOKEN"
    user_agent = "ghrelease/0.1.0"
    timeout = 30.0
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ghrelease import __version__

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_API_URL",
    "DEFAULT_TOKEN_ENV",
    "Config",
    "ConfigError",
    "GitHubConfig",
    "load_config",
    "load_config_or_default",
    "resolve_token",
]

CONFIG_FILENAME = ".ghrelease.toml"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TOKEN_ENV = "GITHUB_TOKEN"
DEFAULT_USER_AGENT = f"ghrelease/{__version__}"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """GitHub API access settings.

    Attributes:
        api_url: REST API base URL (GitHub Enterprise uses ``https://host/api/v3``)
        token_env: Environment variable holding the bearer token
        user_agent: User-Agent header value (GitHub rejects requests without one)
        timeout: Request timeout in seconds, None to block until the server answers
    """

    api_url: str = DEFAULT_API_URL
    token_env: str = DEFAULT_TOKEN_ENV
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    github: GitHubConfig = field(default_factory=GitHubConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        github: StrDict = get_table(data, "github") or {}

        timeout = get_float(github, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"github.timeout must be positive, got {timeout}")

        return cls(
            github=GitHubConfig(
                api_url=(get_str(github, "api_url") or DEFAULT_API_URL).rstrip("/"),
                token_env=get_str(github, "token_env") or DEFAULT_TOKEN_ENV,
                user_agent=get_str(github, "user_agent") or DEFAULT_USER_AGENT,
                timeout=timeout,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the config file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(workdir: Path) -> Result[Config, ConfigError]:
    """Load ``<workdir>/.ghrelease.toml``; a missing file means defaults.

    A file that exists but cannot be parsed is still an error.
    """
    path = workdir / CONFIG_FILENAME
    if not path.exists():
        return Ok(Config())
    return load_config(path)


def resolve_token(
    config: Config,
    explicit: str | None = None,
    env: Mapping[str, str] | None = None,
) -> str:
    """Pick the bearer token: explicit value first, then the configured env var.

    Returns "" when neither is set, which downstream means "automation disabled".
    """
    if explicit:
        return explicit.strip()
    source = os.environ if env is None else env
    return source.get(config.github.token_env, "").strip()
