"""Configuration file loading and validation.

A config file declares the limbs a service grows at startup and where its
logs go. Limb names and the log directory may reference environment
variables as ``${VAR}``; everything else is taken literally.
"""

import logging
import os
import re
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError

from organism.config.schema import OrganismConfig
from organism.errors import ConfigurationError

logger = logging.getLogger(__name__)

_YAML_EXTS = frozenset({".yaml", ".yml"})

# ${VAR_NAME}; unset variables are left in place
_ENV_REF_RE = re.compile(r"\$\{(\w+)\}")


def _read_config_file(cfg_fpath: str) -> Dict[str, Any]:
    """Parse *cfg_fpath* as a YAML mapping or raise :class:`ConfigurationError`."""
    ext = os.path.splitext(cfg_fpath)[1].lower()
    if ext not in _YAML_EXTS:
        raise ConfigurationError(
            f"Unsupported config file extension '{ext}'. "
            "Only YAML files (.yaml, .yml) are supported."
        )
    if not os.path.exists(cfg_fpath):
        raise ConfigurationError(f"Configuration file does not exist: {cfg_fpath}")

    try:
        with open(cfg_fpath, "r", encoding="utf-8") as f:
            raw_data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Error reading configuration file: {cfg_fpath}\n  {exc}") from exc

    if not isinstance(raw_data, dict):
        raise ConfigurationError(
            f"Configuration in {cfg_fpath} must be a YAML mapping, "
            f"got {type(raw_data).__name__}."
        )
    return raw_data


def _substitute_env(text: str) -> str:
    return _ENV_REF_RE.sub(lambda m: os.environ.get(m.group(1), m.group(0)), text)


def _expand_env_refs(raw_data: Dict[str, Any]) -> Dict[str, Any]:
    """Expand ``${VAR}`` in limb names and ``logging.directory``.

    Non-string entries are passed through so validation can report them.
    """
    expanded = dict(raw_data)
    limbs = expanded.get("limbs")
    if isinstance(limbs, list):
        expanded["limbs"] = [
            _substitute_env(name) if isinstance(name, str) else name for name in limbs
        ]
    log_section = expanded.get("logging")
    if isinstance(log_section, dict) and isinstance(log_section.get("directory"), str):
        expanded["logging"] = {
            **log_section,
            "directory": _substitute_env(log_section["directory"]),
        }
    return expanded


def _format_validation_errors(exc: ValidationError) -> str:
    lines: List[str] = []
    for err in exc.errors():
        loc = " → ".join(str(part) for part in err["loc"])
        lines.append(f"  • {loc}: {err['msg']}")
    return "\n".join(lines)


# ── Public API ───────────────────────────────────────────────────────────


def load_organism_config(cfg_fpath: str) -> OrganismConfig:
    """Load an organism config file.

    Raises:
        ConfigurationError: On a missing or unreadable file, invalid YAML,
            or validation failures (all errors reported at once).
    """
    logger.debug("Loading configuration file: %s", cfg_fpath)
    raw_data = _expand_env_refs(_read_config_file(cfg_fpath))

    try:
        config = OrganismConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Configuration validation failed ({len(exc.errors())} error(s)):\n"
            f"{_format_validation_errors(exc)}"
        ) from exc

    logger.info(
        "Configuration loaded from %s: %d limb(s) declared",
        cfg_fpath,
        len(config.limbs),
    )
    return config
