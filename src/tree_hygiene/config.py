"""Hygiene configuration: immutable defaults plus an optional ``.hygiene.yml`` overlay."""

from __future__ import annotations

import dataclasses
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import yaml

from tree_hygiene.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".hygiene.yml"

AGGREGATION_FAIL_FAST = "fail-fast"
AGGREGATION_COLLECT_ALL = "collect-all"
VALID_AGGREGATIONS: frozenset[str] = frozenset({AGGREGATION_FAIL_FAST, AGGREGATION_COLLECT_ALL})

# ---------------------------------------------------------------------------
# License headers
# ---------------------------------------------------------------------------


def generate_license(prefix: str) -> str:
    """Return the three-line copyright block with *prefix* on every line."""
    return (
        f"{prefix}Copyright 2014 The Flutter Authors. All rights reserved.\n"
        f"{prefix}Use of this source code is governed by a BSD-style license that can be\n"
        f"{prefix}found in the LICENSE file."
    )


@dataclass(frozen=True)
class LicenseSpec:
    """Expected header for one file extension."""

    extension: str  # without leading dot
    header: str  # must not end with a newline
    minimum: int  # minimum number of files expected with this extension
    trailing_blank: bool = True

    @property
    def pattern(self) -> str:
        """Text every non-empty file of this extension must start with."""
        return self.header + "\n" + ("\n" if self.trailing_blank else "")


DEFAULT_LICENSES: tuple[LicenseSpec, ...] = (
    LicenseSpec("dart", generate_license("// "), 2000),
    LicenseSpec("java", generate_license("// "), 39),
    LicenseSpec("h", generate_license("// "), 30),
    LicenseSpec("m", generate_license("// "), 30),
    LicenseSpec("swift", generate_license("// "), 10),
    LicenseSpec("gradle", generate_license("// "), 80),
    LicenseSpec("gn", generate_license("# "), 0),
    LicenseSpec("sh", "#!/usr/bin/env bash\n" + generate_license("# "), 1),
    LicenseSpec("bat", "@ECHO off\n" + generate_license("REM "), 1),
    LicenseSpec("ps1", generate_license("# "), 1),
    LicenseSpec(
        "html",
        f"<!DOCTYPE HTML>\n<!-- {generate_license('')} -->",
        1,
        trailing_blank=False,
    ),
    LicenseSpec("xml", f"<!-- {generate_license('')} -->", 1),
)


@dataclass(frozen=True)
class LocalizationTarget:
    """A generated localization file and the generator flag that produces it."""

    flag: str
    generated_file: str  # relative to the repository root


# ---------------------------------------------------------------------------
# Main configuration object
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HygieneConfig:
    """All rule tables, exclusion sets and thresholds used by a run.

    Instances are immutable and are handed to every check; tests build
    synthetic variants with :func:`dataclasses.replace`.
    """

    # Run policy
    check_minimums: bool = True
    aggregation: str = AGGREGATION_FAIL_FAST
    skip: frozenset[str] = frozenset()

    # File enumeration
    ignore_marker: str = ".dartignore"
    template_suffix: str = ".tmpl"
    excluded_dirs: frozenset[str] = frozenset(
        {".git", ".idea", ".gradle", ".dart_tool", "build"}
    )
    excluded_filenames: frozenset[str] = frozenset(
        {"flutter_export_environment.sh", "gradlew.bat", ".DS_Store"}
    )
    generated_registrants: frozenset[str] = frozenset(
        {
            "GeneratedPluginRegistrant.java",
            "GeneratedPluginRegistrant.h",
            "GeneratedPluginRegistrant.m",
            "generated_plugin_registrant.dart",
            "generated_plugin_registrant.h",
        }
    )

    # Content checks
    utf8_excluded_names: frozenset[str] = frozenset()
    whitespace_excluded_names: frozenset[str] = frozenset({"serviceaccount.enc", "Ahem.ttf"})
    whitespace_excluded_extensions: frozenset[str] = frozenset(
        {".snapshot", ".png", ".jpg", ".ico", ".jar", ".swp"}
    )
    whitespace_minimum: int = 4000
    deprecation_minimum: int = 2000
    licenses: tuple[LicenseSpec, ...] = DEFAULT_LICENSES

    # Framework package (dependency graph)
    framework_package: str = "packages/flutter"
    framework_import_name: str = "flutter"
    framework_leaf: str = "foundation"
    expected_dependencies: tuple[tuple[str, str], ...] = (
        ("material", "widgets"),
        ("widgets", "rendering"),
        ("rendering", "painting"),
    )
    tostring_minimum: int = 400
    tostring_excluded: frozenset[str] = frozenset({"src/foundation/object.dart"})

    # Test imports
    test_import_root: str = "packages"
    test_import_minimum: int = 1500
    exempt_test_imports: frozenset[str] = frozenset(
        {
            "package:flutter_test/flutter_test.dart",
            "hit_test.dart",
            "package:test_api/src/backend/live_test.dart",
            "package:integration_test/integration_test.dart",
        }
    )

    # Tools package
    tools_lib: str = "packages/flutter_tools/lib"
    tools_import_marker: str = "package:flutter_tools/"
    tools_minimum: int = 200

    # External collaborators
    flutter: str = "bin/flutter"
    dart: str = "bin/cache/dart-sdk/bin/dart"
    localization_script: str = "dev/tools/localization/bin/gen_localizations.dart"
    localization_targets: tuple[LocalizationTarget, ...] = (
        LocalizationTarget(
            "--material",
            "packages/flutter_localizations/lib/src/l10n/generated_material_localizations.dart",
        ),
        LocalizationTarget(
            "--cupertino",
            "packages/flutter_localizations/lib/src/l10n/generated_cupertino_localizations.dart",
        ),
    )
    sample_code_script: str = "dev/bots/analyze_sample_code.dart"
    mega_gallery_script: str = "dev/tools/mega_gallery.dart"

    def minimum(self, value: int) -> int:
        """Return *value*, or 0 when minimum checking is disabled."""
        return value if self.check_minimums else 0

    @property
    def fail_fast(self) -> bool:
        return self.aggregation == AGGREGATION_FAIL_FAST

    def executable(self, root: Path, name: str) -> Path:
        """Resolve the ``flutter`` or ``dart`` executable under *root*."""
        relative = Path(self.flutter if name == "flutter" else self.dart)
        if sys.platform == "win32" and not relative.suffix:
            relative = relative.with_suffix(".bat" if name == "flutter" else ".exe")
        return relative if relative.is_absolute() else root / relative


# ---------------------------------------------------------------------------
# YAML overlay
# ---------------------------------------------------------------------------

# Named scan minimums that can be overridden under ``minimums:``.
_MINIMUM_FIELDS: dict[str, str] = {
    "trailing-whitespace": "whitespace_minimum",
    "deprecations": "deprecation_minimum",
    "runtime-type-in-tostring": "tostring_minimum",
    "test-imports": "test_import_minimum",
    "tools-imports": "tools_minimum",
}

_STRING_SET_FIELDS: frozenset[str] = frozenset(
    {
        "excluded_dirs",
        "excluded_filenames",
        "exempt_test_imports",
        "utf8_excluded_names",
        "whitespace_excluded_names",
    }
)

_STRING_FIELDS: frozenset[str] = frozenset(
    {"ignore_marker", "flutter", "dart", "framework_package", "tools_lib"}
)

_KNOWN_KEYS: frozenset[str] = (
    frozenset({"check_minimums", "aggregation", "skip", "minimums"})
    | _STRING_SET_FIELDS
    | _STRING_FIELDS
)


def _string_list(value: object, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        msg = f"'{key}' must be a list of strings"
        raise ValueError(msg)
    return list(value)


def _apply_minimums(config: HygieneConfig, data: object) -> HygieneConfig:
    """Apply a ``minimums:`` mapping of extension or check name to count."""
    if not isinstance(data, dict):
        msg = "'minimums' must be a mapping"
        raise ValueError(msg)

    licenses = {spec.extension: spec for spec in config.licenses}
    changes: dict[str, int] = {}
    for key, raw in data.items():
        if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
            msg = f"minimums.{key} must be a non-negative integer"
            raise ValueError(msg)
        name = str(key).lstrip(".")
        if name in _MINIMUM_FIELDS:
            changes[_MINIMUM_FIELDS[name]] = raw
        elif name in licenses:
            licenses[name] = dataclasses.replace(licenses[name], minimum=raw)
        else:
            msg = (
                f"minimums: unknown key '{key}', must be a license extension "
                f"{sorted(licenses)} or one of {sorted(_MINIMUM_FIELDS)}"
            )
            raise ValueError(msg)

    return dataclasses.replace(
        config,
        licenses=tuple(licenses[spec.extension] for spec in config.licenses),
        **changes,  # type: ignore[arg-type]
    )


def parse_config(data: object, base: HygieneConfig | None = None) -> HygieneConfig:
    """Overlay a parsed YAML document onto *base* (defaults when omitted).

    Raises
    ------
    ValueError
        When a key is unknown or a value has the wrong type.
    """
    config = base or HygieneConfig()
    if data is None:
        return config
    if not isinstance(data, dict):
        msg = "configuration must be a mapping"
        raise ValueError(msg)

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        msg = f"unknown configuration keys: {', '.join(unknown)}"
        raise ValueError(msg)

    changes: dict[str, object] = {}

    if "check_minimums" in data:
        if not isinstance(data["check_minimums"], bool):
            msg = "'check_minimums' must be a boolean"
            raise ValueError(msg)
        changes["check_minimums"] = data["check_minimums"]

    if "aggregation" in data:
        aggregation = str(data["aggregation"])
        if aggregation not in VALID_AGGREGATIONS:
            msg = (
                f"invalid aggregation '{aggregation}', "
                f"must be one of {sorted(VALID_AGGREGATIONS)}"
            )
            raise ValueError(msg)
        changes["aggregation"] = aggregation

    if "skip" in data:
        changes["skip"] = frozenset(_string_list(data["skip"], "skip"))

    # Set-valued keys extend the defaults rather than replacing them.
    for key in sorted(_STRING_SET_FIELDS & set(data)):
        current: frozenset[str] = getattr(config, key)
        changes[key] = current | frozenset(_string_list(data[key], key))

    for key in sorted(_STRING_FIELDS & set(data)):
        value = data[key]
        if not isinstance(value, str) or not value.strip():
            msg = f"'{key}' must be a non-empty string"
            raise ValueError(msg)
        changes[key] = value

    config = dataclasses.replace(config, **changes)  # type: ignore[arg-type]

    if "minimums" in data:
        config = _apply_minimums(config, data["minimums"])

    return config


def load_config(path: Path | None, base: HygieneConfig | None = None) -> HygieneConfig:
    """Load configuration from *path*, falling back to defaults when it is absent.

    Raises
    ------
    ConfigError
        When the file exists but cannot be parsed or holds invalid values.
    """
    if path is None or not path.is_file():
        if path is not None:
            logger.debug("No configuration at %s, using defaults", path)
        return base or HygieneConfig()

    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Failed to read {path}: {exc}"
        raise ConfigError(msg) from exc

    try:
        return parse_config(data, base)
    except ValueError as exc:
        msg = f"Invalid configuration in {path}: {exc}"
        raise ConfigError(msg) from exc
