"""Hygiene checks: each takes a RunContext and returns a CheckResult."""

from tree_hygiene.checks.analyzer import (
    check_analyze,
    check_analyze_watch,
    check_mega_gallery,
    check_package_dependencies,
    check_sample_code,
)
from tree_hygiene.checks.base import CheckResult, RunContext, Violation
from tree_hygiene.checks.binaries import check_binaries
from tree_hygiene.checks.cross_imports import check_test_imports
from tree_hygiene.checks.deprecations import check_deprecations
from tree_hygiene.checks.import_graph import (
    DependencyGraph,
    check_framework_imports,
    check_tools_imports,
)
from tree_hygiene.checks.licenses import check_licenses
from tree_hygiene.checks.localizations import check_localizations
from tree_hygiene.checks.tostring import check_runtime_type_in_to_string
from tree_hygiene.checks.whitespace import check_trailing_whitespace

__all__ = [
    "CheckResult",
    "DependencyGraph",
    "RunContext",
    "Violation",
    "check_analyze",
    "check_analyze_watch",
    "check_binaries",
    "check_deprecations",
    "check_framework_imports",
    "check_licenses",
    "check_localizations",
    "check_mega_gallery",
    "check_package_dependencies",
    "check_runtime_type_in_to_string",
    "check_sample_code",
    "check_test_imports",
    "check_tools_imports",
    "check_trailing_whitespace",
]
