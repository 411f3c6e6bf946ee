#!/usr/bin/env python3
"""
DECLSORT CONFIGURATION
----------------------
Per-check settings, loaded from a YAML file such as:

    checks:
      import_order:
        sort_method: ascii
      deps_order:
        functions: [app_deps, optimum_deps, test_deps]
      typespec_order:
        enabled: false

Author: DeclSort Team
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from ruamel.yaml import YAML, YAMLError

from declsort.checks.registry import CHECKS
from declsort.core.comparators import resolve_sort_method
from declsort.core.errors import ConfigurationError

logger = logging.getLogger("declsort.config")


@dataclass(frozen=True)
class CheckSettings:
    enabled: bool = True
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AnalysisConfig:
    checks: Dict[str, CheckSettings] = field(default_factory=dict)

    def settings_for(self, name: str) -> CheckSettings:
        return self.checks.get(name, CheckSettings())

    def with_sort_method(self, value: Union[str, None]) -> "AnalysisConfig":
        """
        Applies a global sort_method override to every check that supports it.
        Checks that only know 'alpha' keep their own setting.
        """
        method = resolve_sort_method(value)
        checks = dict(self.checks)
        for name, check_cls in CHECKS.items():
            if method not in check_cls.supported_sort_methods:
                logger.debug(f"Ignoring sort_method override '{method.value}' for {name}")
                continue
            settings = self.settings_for(name)
            checks[name] = replace(settings, params={**settings.params, "sort_method": method.value})
        return AnalysisConfig(checks)

    def only(self, names: Iterable[str]) -> "AnalysisConfig":
        """Disables every check not listed in `names`."""
        wanted = set(names)
        _ensure_known(wanted)
        return AnalysisConfig({
            name: replace(self.settings_for(name), enabled=self.settings_for(name).enabled and name in wanted)
            for name in CHECKS
        })


def _ensure_known(names: Iterable[str]):
    unknown = sorted(set(names) - set(CHECKS))
    if unknown:
        raise ConfigurationError(
            f"Unknown check(s): {', '.join(unknown)} (available: {', '.join(CHECKS)})"
        )


def parse_config(data: Optional[Dict[str, Any]]) -> AnalysisConfig:
    """Builds an AnalysisConfig from already-loaded YAML data."""
    if data is None:
        return AnalysisConfig()
    if not isinstance(data, dict):
        raise ConfigurationError("Config root must be a mapping")

    sections = data.get("checks") or {}
    if not isinstance(sections, dict):
        raise ConfigurationError("'checks' must be a mapping of check name to settings")
    _ensure_known(sections)

    checks = {}
    for name, section in sections.items():
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"Settings for '{name}' must be a mapping")
        section = dict(section)
        enabled = section.pop("enabled", True)
        if not isinstance(enabled, bool):
            raise ConfigurationError(f"'enabled' for '{name}' must be true or false, got {enabled!r}")
        checks[name] = CheckSettings(enabled=enabled, params=section)
    return AnalysisConfig(checks)


def load_config(path: Union[str, Path]) -> AnalysisConfig:
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = YAML(typ="safe").load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Config file not found: {config_path}")
    except YAMLError as e:
        logger.error(f"Unable to parse config {config_path}")
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}")

    logger.debug(f"Loaded config from {config_path}")
    return parse_config(data)
