#!/usr/bin/env python3
"""
DECLSORT ERRORS
---------------
Exception hierarchy shared by the engine, the codec and the config layer.
Extraction itself never raises on unrecognized shapes; these are reserved
for caller mistakes and unreadable inputs.

Author: DeclSort Team
"""


class DeclSortError(Exception):
    """Base class for every error raised by declsort."""


class ConfigurationError(DeclSortError, ValueError):
    """An option value (e.g. sort_method) or a config file is invalid."""


class RepresentationError(DeclSortError):
    """A serialized token stream or parse tree could not be decoded."""
