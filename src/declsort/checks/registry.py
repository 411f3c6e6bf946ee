#!/usr/bin/env python3
"""
DECLSORT CHECK REGISTRY
-----------------------
The set of available checks, keyed by name, and the factory that turns an
AnalysisConfig into configured check instances.

Author: DeclSort Team
"""

from typing import Dict, List, Type

from declsort.checks.base import BaseCheck
from declsort.checks.deps_order import DepsOrderCheck
from declsort.checks.import_order import ImportOrderCheck
from declsort.checks.typespec_order import TypespecOrderCheck

CHECKS: Dict[str, Type[BaseCheck]] = {
    check.name: check
    for check in (ImportOrderCheck, DepsOrderCheck, TypespecOrderCheck)
}


def build_checks(config) -> List[BaseCheck]:
    """Instantiates every enabled check with its configured params, in id order."""
    active = []
    for name, check_cls in CHECKS.items():
        settings = config.settings_for(name)
        if settings.enabled:
            active.append(check_cls(**settings.params))
    return active
