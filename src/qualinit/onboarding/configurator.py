"""Feature configurator: per-feature setup routines and their fixed order.

Each routine receives the complete :class:`FeatureSelection` because several
of them change what they generate depending on sibling features (a commit
hook only exists when husky is enabled, lint-staged runs whichever of
prettier and eslint are enabled, eslint extends the prettier-compat config
only when prettier is enabled).
"""

from __future__ import annotations

import logging
import stat
from typing import TYPE_CHECKING, Any

from qualinit.infrastructure.console import error
from qualinit.infrastructure.documents import update_document, write_document
from qualinit.infrastructure.shell import run_command
from qualinit.onboarding.features import Feature
from qualinit.onboarding.preconditions import MANIFEST_FILE

if TYPE_CHECKING:
    from pathlib import Path

    from qualinit.infrastructure.settings import Settings
    from qualinit.onboarding.features import FeatureSelection

logger = logging.getLogger(__name__)

HOOKS_DIR = ".husky"
LINT_STAGED_FILE = ".lintstagedrc.json"
PRETTIER_FILE = ".prettierrc"
PRETTIER_IGNORE_FILE = ".prettierignore"
ESLINT_FILE = "eslint.config.js"

COMMIT_SCRIPT = "cz"
COMMITIZEN_ADAPTER = "cz-conventional-changelog"
FORMATTER_FIX_COMMAND = "prettier -w"
LINTER_COMMAND = "eslint"

# Re-attach the terminal so commitizen can prompt from inside the hook.
PREPARE_COMMIT_MSG_HOOK = "exec </dev/tty >&0 && node_modules/.bin/cz --hook\n"
PRE_COMMIT_HOOK = "lint-staged\n"

PRETTIER_RULES: dict[str, Any] = {
    "trailingComma": "es5",
    "tabWidth": 4,
    "semi": False,
    "singleQuote": True,
    "endOfLine": "lf",
    "printWidth": 80,
}

# Routines run in this order, not in question order.
SETUP_ORDER: tuple[Feature, ...] = (
    Feature.HOOKS,
    Feature.COMMIT_ASSISTANT,
    Feature.STAGED_LINT,
    Feature.FORMATTER,
    Feature.LINTER,
)


def write_hook(project_root: Path, name: str, content: str) -> Path:
    """Write an executable hook script into the husky directory."""
    hook_path = project_root / HOOKS_DIR / name
    hook_path.parent.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(content, encoding="utf-8")
    hook_path.chmod(hook_path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    logger.debug("Wrote hook %s", hook_path)
    return hook_path


# ---------------------------------------------------------------------------
# Routines
# ---------------------------------------------------------------------------


def setup_hooks(selection: FeatureSelection, settings: Settings, project_root: Path) -> None:
    run_command(f"{settings.exec_command} husky init", cwd=project_root)


def _add_commitizen(pkg: dict[str, Any]) -> None:
    """Add the commit script and commitizen adapter, keeping existing values."""
    scripts = pkg.setdefault("scripts", {})
    if "commit" not in scripts:
        scripts["commit"] = COMMIT_SCRIPT

    config = pkg.setdefault("config", {})
    if "commitizen" not in config:
        config["commitizen"] = {"path": COMMITIZEN_ADAPTER}


def setup_commit_assistant(
    selection: FeatureSelection, settings: Settings, project_root: Path
) -> None:
    update_document(project_root / MANIFEST_FILE, _add_commitizen)
    if selection.hooks:
        write_hook(project_root, "prepare-commit-msg", PREPARE_COMMIT_MSG_HOOK)


def lint_staged_rules(selection: FeatureSelection, glob: str = "*.js") -> dict[str, list[str]]:
    """lint-staged rules: prettier first, then eslint; empty if neither."""
    commands: list[str] = []
    if selection.formatter:
        commands.append(FORMATTER_FIX_COMMAND)
    if selection.linter:
        commands.append(LINTER_COMMAND)
    if not commands:
        return {}
    return {glob: commands}


def setup_staged_lint(selection: FeatureSelection, settings: Settings, project_root: Path) -> None:
    rules_path = project_root / LINT_STAGED_FILE
    rules_path.touch()
    write_document(rules_path, lint_staged_rules(selection, settings.staged_glob))
    if selection.hooks:
        write_hook(project_root, "pre-commit", PRE_COMMIT_HOOK)


def setup_formatter(selection: FeatureSelection, settings: Settings, project_root: Path) -> None:
    (project_root / PRETTIER_IGNORE_FILE).touch()
    rules_path = project_root / PRETTIER_FILE
    rules_path.touch()
    write_document(rules_path, PRETTIER_RULES)


def eslint_config_source(selection: FeatureSelection) -> str:
    """Source of ``eslint.config.js`` for *selection*."""
    imports = ['import pluginJs from "@eslint/js"']
    configs = ["pluginJs.configs.recommended"]
    if selection.formatter:
        imports.append('import eslintConfigPrettier from "eslint-config-prettier"')
        configs.append("eslintConfigPrettier")

    lines = [*imports, "", "export default ["]
    lines.extend(f"  {name}," for name in configs)
    lines.append("]")
    return "\n".join(lines) + "\n"


def setup_linter(selection: FeatureSelection, settings: Settings, project_root: Path) -> None:
    config_path = project_root / ESLINT_FILE
    config_path.touch()
    config_path.write_text(eslint_config_source(selection), encoding="utf-8")


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def run_routine(
    feature: Feature,
    selection: FeatureSelection,
    settings: Settings,
    project_root: Path,
) -> None:
    """Run the setup routine bound to *feature*."""
    if feature is Feature.HOOKS:
        setup_hooks(selection, settings, project_root)
    elif feature is Feature.COMMIT_ASSISTANT:
        setup_commit_assistant(selection, settings, project_root)
    elif feature is Feature.STAGED_LINT:
        setup_staged_lint(selection, settings, project_root)
    elif feature is Feature.FORMATTER:
        setup_formatter(selection, settings, project_root)
    elif feature is Feature.LINTER:
        setup_linter(selection, settings, project_root)


def configure_features(
    selection: FeatureSelection,
    settings: Settings,
    project_root: Path,
) -> bool:
    """Run the routine of every enabled feature in :data:`SETUP_ORDER`.

    The first routine that raises stops the sequence; files written by
    earlier routines stay in place.  Returns ``True`` if all routines ran.
    """
    for feature in SETUP_ORDER:
        if not selection.is_enabled(feature):
            continue
        logger.debug("Configuring %s", feature.value)
        try:
            run_routine(feature, selection, settings, project_root)
        except Exception as exc:
            logger.debug("Setup of %s failed", feature.value, exc_info=True)
            error(f"Setting up {feature.value} failed: {exc}")
            return False
    return True
