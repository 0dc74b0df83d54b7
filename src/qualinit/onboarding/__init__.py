"""Onboarding domain — preconditions, feature selection, install and setup."""

from qualinit.onboarding.configurator import (
    SETUP_ORDER,
    configure_features,
    eslint_config_source,
    lint_staged_rules,
    run_routine,
)
from qualinit.onboarding.features import (
    BUNDLES,
    COMPAT_PACKAGE,
    Feature,
    FeatureSelection,
    ask_features,
)
from qualinit.onboarding.installer import install_dependencies, resolve_packages
from qualinit.onboarding.pipeline import run_setup
from qualinit.onboarding.preconditions import (
    check_manifest,
    check_repository,
    note_directory,
)

__all__ = [
    "BUNDLES",
    "COMPAT_PACKAGE",
    "SETUP_ORDER",
    "Feature",
    "FeatureSelection",
    "ask_features",
    "check_manifest",
    "check_repository",
    "configure_features",
    "eslint_config_source",
    "install_dependencies",
    "lint_staged_rules",
    "note_directory",
    "resolve_packages",
    "run_routine",
    "run_setup",
]
