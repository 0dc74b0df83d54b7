"""Feature identifiers, the operator's selection, and package bundles.

The set of features is closed: each member of :class:`Feature` has a fixed
question, a fixed package bundle and a setup routine in
:mod:`qualinit.onboarding.configurator`.
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from qualinit.infrastructure.console import info

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


class Feature(enum.Enum):
    """Optional tooling features, in the order they are asked about."""

    HOOKS = "hooks"
    STAGED_LINT = "stagedLint"
    COMMIT_ASSISTANT = "commitAssistant"
    LINTER = "linter"
    FORMATTER = "formatter"


# Packages installed for each enabled feature.
BUNDLES: Mapping[Feature, tuple[str, ...]] = MappingProxyType({
    Feature.HOOKS: ("husky",),
    Feature.STAGED_LINT: ("lint-staged",),
    Feature.COMMIT_ASSISTANT: ("commitizen", "cz-conventional-changelog"),
    Feature.LINTER: ("eslint", "@eslint/js"),
    Feature.FORMATTER: ("prettier",),
})

# Turns off eslint's stylistic rules when prettier owns formatting.
COMPAT_PACKAGE = "eslint-config-prettier"

QUESTIONS: Mapping[Feature, str] = MappingProxyType({
    Feature.HOOKS: "Install husky (git hooks)?",
    Feature.STAGED_LINT: "Install lint-staged (lint staged files)?",
    Feature.COMMIT_ASSISTANT: "Install commitizen (guided commit messages)?",
    Feature.LINTER: "Install eslint?",
    Feature.FORMATTER: "Install prettier?",
})


@dataclass(frozen=True)
class FeatureSelection:
    """Which features the operator enabled; every feature is always present."""

    hooks: bool
    staged_lint: bool
    commit_assistant: bool
    linter: bool
    formatter: bool

    @classmethod
    def from_mapping(cls, answers: Mapping[Feature, bool]) -> FeatureSelection:
        """Build a selection from a complete ``Feature -> bool`` mapping."""
        missing = [f.value for f in Feature if f not in answers]
        if missing:
            raise ValueError(f"selection is missing features: {', '.join(missing)}")
        return cls(
            hooks=bool(answers[Feature.HOOKS]),
            staged_lint=bool(answers[Feature.STAGED_LINT]),
            commit_assistant=bool(answers[Feature.COMMIT_ASSISTANT]),
            linter=bool(answers[Feature.LINTER]),
            formatter=bool(answers[Feature.FORMATTER]),
        )

    @classmethod
    def none(cls) -> FeatureSelection:
        return cls(
            hooks=False,
            staged_lint=False,
            commit_assistant=False,
            linter=False,
            formatter=False,
        )

    @classmethod
    def all(cls) -> FeatureSelection:
        return cls(
            hooks=True,
            staged_lint=True,
            commit_assistant=True,
            linter=True,
            formatter=True,
        )

    def is_enabled(self, feature: Feature) -> bool:
        return self.as_dict()[feature.value]

    def enabled(self) -> Iterator[Feature]:
        """Yield enabled features in declaration order."""
        return (f for f in Feature if self.is_enabled(f))

    def as_dict(self) -> dict[str, bool]:
        return {
            Feature.HOOKS.value: self.hooks,
            Feature.STAGED_LINT.value: self.staged_lint,
            Feature.COMMIT_ASSISTANT.value: self.commit_assistant,
            Feature.LINTER.value: self.linter,
            Feature.FORMATTER.value: self.formatter,
        }


def ask_features() -> FeatureSelection:
    """Ask one yes/no question per feature (default yes).

    Closing the input (EOF or Ctrl-C) aborts the run with status 1.
    """
    from rich.prompt import Confirm

    answers: dict[Feature, bool] = {}
    try:
        for feature in Feature:
            answers[feature] = Confirm.ask(QUESTIONS[feature], default=True)
    except (EOFError, KeyboardInterrupt):
        info("Input closed by operator.")
        sys.exit(1)
    return FeatureSelection.from_mapping(answers)
