"""Parameter configuration loading for the CLI.

Reads one parameter definition from YAML or JSON, validates it against a
Draft-7 schema, runs credential migrations and applies CLI overrides with
highest precedence.
"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from typing import Any, Dict, Optional

import yaml
from jsonschema import Draft7Validator

from constants import Constants
from credentials.migration import migrate_parameter_config
from credentials.store import CredentialStore
from metadata.parser import parse_coordinate_token
from parameter.definition import MavenMetadataParameter, check_version_filter

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is unusable."""


class SchemaError(ConfigError):
    """Raised when configuration data fails to validate against the schema."""


_STRING_OR_NULL = {"type": ["string", "null"]}

PARAMETER_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["repo_base_url", "group_id", "artifact_id"],
    "properties": {
        "config_version": {"type": "integer", "minimum": 1},
        "name": _STRING_OR_NULL,
        "description": _STRING_OR_NULL,
        "repo_base_url": {"type": "string", "pattern": "^[A-Za-z][A-Za-z0-9+.-]*://"},
        "group_id": {"type": "string", "minLength": 1},
        "artifact_id": {"type": "string", "minLength": 1},
        "packaging": _STRING_OR_NULL,
        "classifier": _STRING_OR_NULL,
        "version_filter": _STRING_OR_NULL,
        "sort_order": {"enum": Constants.SORT_ORDERS + [None]},
        "default_value": _STRING_OR_NULL,
        "max_versions": {"type": ["string", "integer", "null"]},
        "credentials_id": _STRING_OR_NULL,
        "username": _STRING_OR_NULL,
        "password": _STRING_OR_NULL,
        "current_artifact_info_url": _STRING_OR_NULL,
        "current_artifact_info_label": _STRING_OR_NULL,
        "current_artifact_info_pattern": _STRING_OR_NULL,
        "request_timeout": {"type": "number", "exclusiveMinimum": 0},
    },
    "additionalProperties": False,
}

_PARAMETER_FIELDS = frozenset(f.name for f in fields(MavenMetadataParameter))


def validate_config(data: Dict[str, Any]) -> None:
    """Validate a raw definition strictly and raise on the first error."""
    validator = Draft7Validator(PARAMETER_SCHEMA)
    errs = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errs:
        first = errs[0]
        path = "/".join([str(p) for p in first.path])
        raise SchemaError(f"Invalid configuration at '{path}': {first.message}")


def read_config_file(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON mapping from ``path``."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            if path.lower().endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration {path}: {exc}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot parse configuration {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {path} must contain a mapping")
    return data


def apply_cli_overrides(config: Dict[str, Any], args) -> Dict[str, Any]:
    """Overlay non-empty CLI values onto ``config`` (CLI has highest precedence).

    ``--coordinate`` is applied first so the individual coordinate flags win
    over its parts.
    """
    overrides = {
        "name": getattr(args, "NAME", None),
        "repo_base_url": getattr(args, "REPO_URL", None),
        "group_id": getattr(args, "GROUP_ID", None),
        "artifact_id": getattr(args, "ARTIFACT_ID", None),
        "packaging": getattr(args, "PACKAGING", None),
        "classifier": getattr(args, "CLASSIFIER", None),
        "version_filter": getattr(args, "VERSION_FILTER", None),
        "sort_order": getattr(args, "SORT_ORDER", None),
        "default_value": getattr(args, "DEFAULT_VALUE", None),
        "max_versions": getattr(args, "MAX_VERSIONS", None),
        "credentials_id": getattr(args, "CREDENTIALS_ID", None),
        "current_artifact_info_url": getattr(args, "INFO_URL", None),
        "current_artifact_info_label": getattr(args, "INFO_LABEL", None),
        "current_artifact_info_pattern": getattr(args, "INFO_PATTERN", None),
        "request_timeout": getattr(args, "TIMEOUT", None),
    }
    merged = dict(config)
    token = getattr(args, "COORDINATE", None)
    if token:
        try:
            group_id, artifact_id, packaging, classifier = parse_coordinate_token(token)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        merged.update(group_id=group_id, artifact_id=artifact_id)
        if packaging:
            merged["packaging"] = packaging
        if classifier:
            merged["classifier"] = classifier
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def build_parameter(config: Dict[str, Any]) -> MavenMetadataParameter:
    """Create the parameter from a validated, migrated definition.

    ``request_timeout`` is not part of the parameter; it tunes
    ``Constants.REQUEST_TIMEOUT`` for the process and falls back to the
    default when absent.
    """
    timeout = config.get("request_timeout")
    Constants.REQUEST_TIMEOUT = timeout if timeout is not None else Constants.DEFAULT_REQUEST_TIMEOUT

    filter_error = check_version_filter(config.get("version_filter"))
    if filter_error:
        # resolution still proceeds and treats the filter as match-all
        logger.warning("version_filter: %s", filter_error)

    kwargs = {
        key: value
        for key, value in config.items()
        if key in _PARAMETER_FIELDS and value is not None
    }
    if "max_versions" in kwargs:
        kwargs["max_versions"] = str(kwargs["max_versions"])
    kwargs.setdefault("name", "ARTIFACT")
    return MavenMetadataParameter(**kwargs)


def load_parameter(
    path: Optional[str],
    args,
    store: CredentialStore,
) -> MavenMetadataParameter:
    """Read, override, validate and migrate a definition, then build it.

    Args:
        path: Optional YAML/JSON file; CLI arguments alone suffice when None.
        args: Parsed CLI namespace.
        store: Credential store receiving migrated legacy credentials.

    Raises:
        ConfigError: When the file is unreadable or the result is invalid.
    """
    config = read_config_file(path) if path else {}
    config = apply_cli_overrides(config, args)
    validate_config(config)
    config = migrate_parameter_config(config, store)
    return build_parameter(config)
