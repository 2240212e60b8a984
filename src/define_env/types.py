"""
Type aliases for define_env.

This module provides centralized type definitions used throughout the application
to ensure consistency and maintainability.

Type Aliases:
    ArgsList: List of string arguments
    EnvDefines: Ordered mapping of env file keys to values
    JsonValue: Any value found in a parsed JSON document
    JsonObject: A parsed JSON object
    ConfigEntry: One entry of the launch.json "configurations" list
    LaunchDocument: The parsed launch.json document
    ExitCode: Integer representing exit codes
"""

from typing import Dict, List, Union

ArgsList = List[str]
"""List of string arguments, e.g. the "args" field of a launch configuration."""

EnvDefines = Dict[str, str]
"""Mapping of env file keys to their values, in file order."""

JsonValue = Union[
    str, int, float, bool, None, List["JsonValue"], Dict[str, "JsonValue"]
]
"""Any value that json.loads can produce."""

JsonObject = Dict[str, JsonValue]
"""A JSON object with string keys and arbitrary JSON values."""

ConfigEntry = JsonObject
"""A single launch configuration (has at least "name", optionally "args")."""

LaunchDocument = JsonObject
"""The parsed launch.json document (has a "configurations" list)."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""
