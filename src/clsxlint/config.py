"""
Configuration for clsxlint.

Three options, all optional:

    attribute: className      # attribute to inspect
    composer: clsx            # function used in rewrites
    mode: fix                 # fix | report-only

Sources, lowest priority first:
    built-in defaults → YAML file → command-line flags
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from clsxlint.classifier import DEFAULT_COMPOSER
from clsxlint.errors import ConfigError

DEFAULT_ATTRIBUTE = "className"
CONFIG_FILENAMES = (".clsxlint.yaml", ".clsxlint.yml")

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")
_ATTRIBUTE_RE = re.compile(r"^[A-Za-z_$][\w$:.-]*$")


class Mode(Enum):
    """What to do with a flagged attribute."""
    FIX = "fix"                    # diagnostic + replacement
    REPORT_ONLY = "report-only"    # diagnostic only


@dataclass(frozen=True)
class LintConfig:
    """
    Resolved configuration.

    Properties:
        attribute: name of the attribute to inspect
        composer: composer function name used in canonical calls
        mode: Mode.FIX or Mode.REPORT_ONLY
    """

    attribute: str = DEFAULT_ATTRIBUTE
    composer: str = DEFAULT_COMPOSER
    mode: Mode = Mode.FIX

    def __post_init__(self) -> None:
        if not isinstance(self.attribute, str) or not _ATTRIBUTE_RE.match(self.attribute):
            raise ConfigError(f"Invalid attribute name: {self.attribute!r}")
        if not isinstance(self.composer, str) or not _IDENTIFIER_RE.match(self.composer):
            raise ConfigError(f"Invalid composer name: {self.composer!r}")
        if not isinstance(self.mode, Mode):
            raise ConfigError(f"Invalid mode: {self.mode!r}")

    def with_overrides(self, **overrides: Any) -> LintConfig:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "mode" in changes and not isinstance(changes["mode"], Mode):
            changes["mode"] = parse_mode(changes["mode"])
        return replace(self, **changes)


def parse_mode(value: Any) -> Mode:
    try:
        return Mode(value)
    except ValueError:
        choices = ", ".join(m.value for m in Mode)
        raise ConfigError(f"Invalid mode {value!r} (expected one of: {choices})")


def config_to_dict(config: LintConfig) -> Dict[str, Any]:
    return {
        "attribute": config.attribute,
        "composer": config.composer,
        "mode": config.mode.value,
    }


def config_from_dict(d: Optional[Dict[str, Any]]) -> LintConfig:
    if d is None:
        return LintConfig()
    if not isinstance(d, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(d).__name__}")

    unknown = set(d) - {"attribute", "composer", "mode"}
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")

    return LintConfig(
        attribute=d.get("attribute", DEFAULT_ATTRIBUTE),
        composer=d.get("composer", DEFAULT_COMPOSER),
        mode=parse_mode(d.get("mode", Mode.FIX.value)),
    )


def config_to_yaml(config: LintConfig) -> str:
    return yaml.safe_dump(config_to_dict(config), sort_keys=False)


def config_from_yaml(s: str) -> LintConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML configuration: {e}")
    return config_from_dict(d)


def load_config(path: str | Path) -> LintConfig:
    """
    Load configuration from a YAML file.

    Raises:
        ConfigError: If the file is missing or its content is invalid
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e.strerror or e}")
    return config_from_yaml(content)


def find_config_file(directory: str | Path = ".") -> Optional[Path]:
    """Return the first known config file in ``directory``, if any."""
    for name in CONFIG_FILENAMES:
        candidate = Path(directory) / name
        if candidate.is_file():
            return candidate
    return None


__all__ = [
    "DEFAULT_ATTRIBUTE",
    "CONFIG_FILENAMES",
    "Mode",
    "LintConfig",
    "parse_mode",
    "config_to_dict",
    "config_from_dict",
    "config_to_yaml",
    "config_from_yaml",
    "load_config",
    "find_config_file",
]
