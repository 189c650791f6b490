#!/usr/bin/env python3
"""
Runtime configuration.

Settings come from a YAML file (explicit path, or ./loctrans.yaml when
present), then environment variables, then CLI flags:

```yaml
endpoint: https://translate.example.com/api/translate
retries: 3
timeout: 300
retry_delay: 1.0
batch_size: 50
chunk_tokens: 5000
languages:
  French: fr
  German: de
```
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .errors import ConfigError
from .languages import LANGUAGES

DEFAULT_CONFIG_FILE = "loctrans.yaml"

ENV_ENDPOINT = "LOCTRANS_ENDPOINT"
ENV_BATCH_SIZE = "LOCTRANS_BATCH_SIZE"


@dataclass
class Settings:
    """Configuration for a translation run."""
    endpoint: Optional[str] = None
    retries: int = 3
    timeout: float = 300
    retry_delay: float = 1.0
    batch_size: int = 50
    chunk_tokens: int = 5000
    languages: dict[str, str] = field(default_factory=lambda: dict(LANGUAGES))

    def validate(self, require_endpoint: bool = False) -> "Settings":
        """
        Check value ranges.

        Args:
            require_endpoint: Whether the command talks to the translation API

        Raises:
            ConfigError: On any invalid value
        """
        if require_endpoint and not self.endpoint:
            raise ConfigError(
                f"No translation endpoint configured. Set 'endpoint' in {DEFAULT_CONFIG_FILE}, "
                f"export {ENV_ENDPOINT}, or pass --endpoint."
            )
        if self.retries < 1:
            raise ConfigError(f"retries must be at least 1, got {self.retries}")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")
        if self.retry_delay < 0:
            raise ConfigError(f"retry_delay must not be negative, got {self.retry_delay}")
        if self.batch_size < 1:
            raise ConfigError(f"batch_size must be at least 1, got {self.batch_size}")
        if self.chunk_tokens < 0:
            raise ConfigError(f"chunk_tokens must not be negative, got {self.chunk_tokens}")
        if not self.languages:
            raise ConfigError("languages must not be empty")
        return self


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _coerce(name: str, value: Any, kind: type) -> Any:
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value for {name}: {value!r}") from e


def load_settings(
    config_file: Optional[Union[str, Path]] = None,
    environ: Optional[dict[str, str]] = None,
    **overrides: Any,
) -> Settings:
    """
    Load settings from YAML, environment and explicit overrides.

    Args:
        config_file: YAML path; when None, ./loctrans.yaml is used if it exists
        environ: Environment mapping (defaults to os.environ)
        **overrides: Values from the command line; None values are ignored

    Returns:
        Settings (not yet validated)

    Raises:
        ConfigError: Unreadable file, unknown keys or wrongly typed values
    """
    environ = os.environ if environ is None else environ

    data: dict[str, Any] = {}
    if config_file is not None:
        data = _read_yaml(Path(config_file))
    elif Path(DEFAULT_CONFIG_FILE).is_file():
        data = _read_yaml(Path(DEFAULT_CONFIG_FILE))

    if environ.get(ENV_ENDPOINT):
        data["endpoint"] = environ[ENV_ENDPOINT]
    if environ.get(ENV_BATCH_SIZE):
        data["batch_size"] = environ[ENV_BATCH_SIZE]

    data.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name: f for f in fields(Settings)}
    unknown = set(data) - set(known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    settings = Settings()
    for name, value in data.items():
        if name == "languages":
            if not isinstance(value, dict):
                raise ConfigError("languages must be a mapping of name -> code")
            value = {str(k): str(v) for k, v in value.items()}
        elif name == "endpoint":
            value = str(value)
        elif name in ("retries", "batch_size", "chunk_tokens"):
            value = _coerce(name, value, int)
        else:
            value = _coerce(name, value, float)
        setattr(settings, name, value)

    return settings
