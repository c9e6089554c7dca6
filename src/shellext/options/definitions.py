"""Option table for the extension generator.

Each option the generator understands is described by one OptionSpec that
bundles its kind, validator, default, applicability rule, and the question
asked when the value has to be collected interactively. The table order is
the order in which missing options are prompted for.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

# Oldest GNOME Shell release using the ESM extension format
MIN_SHELL_VERSION = 45

DEFAULT_LICENSE = "GPL-2.0-or-later"
DEFAULT_VERSION_NAME = "1.0.0"

NEGATION_PREFIX = "no-"

_WORD_RE = re.compile(r"\w", re.ASCII)
_VERSION_RE = re.compile(r"\d+", re.ASCII)


class OptionKind(str, Enum):
    """Value kind of an option."""

    STRING = "string"
    BOOLEAN = "boolean"
    LIST = "list"


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def is_string(value: Any) -> bool:
    """Accept any string, including the empty one."""
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    """Accept real booleans only; '--flag=yes' style strings are rejected."""
    return isinstance(value, bool)


def is_text(value: Any) -> bool:
    """Accept strings with at least one word character."""
    return isinstance(value, str) and _WORD_RE.search(value.strip()) is not None


def is_new_directory(value: Any) -> bool:
    """Accept paths that do not exist yet.

    The generator refuses to scaffold into an existing directory, so an
    existing path is treated like any other invalid value.
    """
    if not isinstance(value, str):
        return False
    return not Path(value).resolve().exists()


def is_shell_version_list(value: Any) -> bool:
    """Accept comma-separated Shell versions, each >= MIN_SHELL_VERSION."""
    if not isinstance(value, str):
        return False
    for version in (part.strip() for part in value.split(",")):
        if not _VERSION_RE.fullmatch(version):
            return False
        if int(version) < MIN_SHELL_VERSION:
            return False
    return True


def _absolute_path(value: str) -> str:
    return str(Path(value).resolve())


def _always(record: Mapping[str, Any]) -> bool:
    return True


def _no_default(record: Mapping[str, Any]) -> Any:
    return None


def _constant(value: Any) -> Callable[[Mapping[str, Any]], Any]:
    def default(record: Mapping[str, Any]) -> Any:
        return value

    return default


def _uuid_default(record: Mapping[str, Any]) -> Any:
    return record.get("uuid")


# ---------------------------------------------------------------------------
# Option table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OptionSpec:
    """Behavior of a single generator option.

    Attributes:
        name: Option name as used on the command line (without dashes).
        kind: Value kind. Booleans get a 'no-<name>' alias.
        question: Prompt text used when the value is collected interactively.
        validate: Returns True if a value is acceptable for this option.
        default: Computes the default from the options resolved so far.
        applies: Returns True if the option is relevant given the options
            resolved so far. Inapplicable options are removed.
        hint: Optional explanation printed before the question.
        error: Message shown when an interactive answer fails validation.
        normalize: Optional transform applied to interactive answers.
    """

    name: str
    kind: OptionKind
    question: str
    validate: Callable[[Any], bool]
    default: Callable[[Mapping[str, Any]], Any] = _no_default
    applies: Callable[[Mapping[str, Any]], bool] = _always
    hint: str | None = None
    error: str = "Invalid input."
    normalize: Callable[[str], Any] | None = None

    @property
    def negated_name(self) -> str | None:
        """The 'no-' alias for boolean options, None otherwise."""
        if self.kind is OptionKind.BOOLEAN:
            return f"{NEGATION_PREFIX}{self.name}"
        return None


OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec(
        name="target-dir",
        kind=OptionKind.STRING,
        question="Target directory",
        validate=is_new_directory,
        hint="Enter the path for your project",
        error="Enter a path to a directory that does not exist.",
        normalize=_absolute_path,
    ),
    OptionSpec(
        name="project-name",
        kind=OptionKind.STRING,
        question="Project name",
        validate=is_text,
        hint="Enter a project name. A name should be a short and descriptive string",
        error="Project name cannot be empty.",
    ),
    OptionSpec(
        name="description",
        kind=OptionKind.STRING,
        question="Description",
        validate=is_text,
        hint="Enter a description, a single-sentence explanation of what your extension does",
        error="Description cannot be empty.",
    ),
    OptionSpec(
        name="version-name",
        kind=OptionKind.STRING,
        question="Version",
        validate=is_string,
        default=_constant(DEFAULT_VERSION_NAME),
    ),
    OptionSpec(
        name="license",
        kind=OptionKind.STRING,
        question="License",
        validate=is_string,
        default=_constant(DEFAULT_LICENSE),
        hint="Enter a SPDX License Identifier",
    ),
    OptionSpec(
        name="home-page",
        kind=OptionKind.STRING,
        question="Homepage",
        validate=is_string,
        default=_constant(""),
        hint="Optionally, enter a homepage, for example, a Git repository",
    ),
    OptionSpec(
        name="uuid",
        kind=OptionKind.STRING,
        question="UUID",
        validate=is_text,
        hint=(
            "Enter a UUID. The UUID is a globally-unique identifier for your "
            "extension. This should be in the format of an email address "
            "(clicktofocus@janedoe.example.com)"
        ),
        error="UUID cannot be empty.",
    ),
    OptionSpec(
        name="shell-version",
        kind=OptionKind.LIST,
        question="Supported GNOME Shell versions",
        validate=is_shell_version_list,
        hint=(
            "List the GNOME Shell versions that your extension supports in a "
            f"comma-separated list of numbers >= {MIN_SHELL_VERSION}. "
            "For example: 45,46,47"
        ),
        error=(
            "The supported GNOME Shell versions should be a comma-separated "
            f"list of numbers >= {MIN_SHELL_VERSION}."
        ),
    ),
    OptionSpec(
        name="use-typescript",
        kind=OptionKind.BOOLEAN,
        question="Add TypeScript?",
        validate=is_boolean,
        default=_constant(False),
        applies=lambda record: not record.get("use-types"),
    ),
    OptionSpec(
        name="use-esbuild",
        kind=OptionKind.BOOLEAN,
        question="Add esbuild?",
        validate=is_boolean,
        default=_constant(True),
        applies=lambda record: bool(record.get("use-typescript")),
        hint=(
            "esbuild allows for faster builds but doesn't check your code during "
            "the build process. So you will need to rely on your editor's type "
            "checking or use `npm run check:types` manually. esbuild also comes "
            "with some caveats. E. g. esbuild doesn't support stage 3 decorators, "
            "so you will use TypeScripts experimental stage 2 decorators. Visit "
            "https://esbuild.github.io/content-types/#typescript-caveats for more."
        ),
    ),
    OptionSpec(
        name="use-types",
        kind=OptionKind.BOOLEAN,
        question="Add types to JavaScript with gjsify/ts-for-gir?",
        validate=is_boolean,
        default=_constant(False),
        applies=lambda record: not record.get("use-typescript"),
    ),
    OptionSpec(
        name="use-eslint",
        kind=OptionKind.BOOLEAN,
        question="Add ESlint?",
        validate=is_boolean,
        default=_constant(True),
    ),
    OptionSpec(
        name="use-prettier",
        kind=OptionKind.BOOLEAN,
        question="Add Prettier?",
        validate=is_boolean,
        default=_constant(True),
    ),
    OptionSpec(
        name="use-translations",
        kind=OptionKind.BOOLEAN,
        question="Add translations?",
        validate=is_boolean,
        default=_constant(False),
    ),
    OptionSpec(
        name="gettext-domain",
        kind=OptionKind.STRING,
        question="Enter gettext domain",
        validate=is_string,
        default=_uuid_default,
        applies=lambda record: bool(record.get("use-translations")),
    ),
    OptionSpec(
        name="use-prefs",
        kind=OptionKind.BOOLEAN,
        question="Add preferences?",
        validate=is_boolean,
        default=_constant(False),
    ),
    OptionSpec(
        name="settings-schema",
        kind=OptionKind.STRING,
        question="Enter settings schema",
        validate=is_string,
        default=_uuid_default,
        applies=lambda record: bool(record.get("use-prefs")),
    ),
    OptionSpec(
        name="use-prefs-window",
        kind=OptionKind.BOOLEAN,
        question="Add preference window?",
        validate=is_boolean,
        default=_constant(False),
        applies=lambda record: bool(record.get("use-prefs")),
    ),
    OptionSpec(
        name="use-stylesheet",
        kind=OptionKind.BOOLEAN,
        question="Add a stylesheet?",
        validate=is_boolean,
        default=_constant(False),
    ),
    OptionSpec(
        name="use-resources",
        kind=OptionKind.BOOLEAN,
        question="Use GResources?",
        validate=is_boolean,
        default=_constant(False),
    ),
)

OPTION_MAP: dict[str, OptionSpec] = {spec.name: spec for spec in OPTIONS}

# Root conflicts only. Options gated behind one of these (use-esbuild) are
# pruned through their applicability rule instead.
CONFLICTING_OPTIONS: tuple[tuple[str, ...], ...] = (("use-typescript", "use-types"),)

# Options whose dependencies must be installed with npm before coding
INSTALL_OPTIONS: tuple[str, ...] = (
    "use-typescript",
    "use-types",
    "use-eslint",
    "use-prettier",
)


def get_option(name: str) -> OptionSpec | None:
    """Look up an option by its positive name."""
    return OPTION_MAP.get(name)


def flag_names() -> list[str]:
    """All accepted flag names, including the 'no-' aliases of booleans."""
    names: list[str] = []
    for spec in OPTIONS:
        names.append(spec.name)
        if spec.negated_name is not None:
            names.append(spec.negated_name)
    return names


def _check_table() -> None:
    """Fail at import time if the option table is inconsistent."""
    if len(OPTION_MAP) != len(OPTIONS):
        raise RuntimeError("Duplicate option names in OPTIONS")
    for spec in OPTIONS:
        if spec.name.startswith(NEGATION_PREFIX):
            raise RuntimeError(f"Option name must not start with 'no-': {spec.name}")
    for group in (*CONFLICTING_OPTIONS, INSTALL_OPTIONS):
        for name in group:
            spec = OPTION_MAP.get(name)
            if spec is None or spec.kind is not OptionKind.BOOLEAN:
                raise RuntimeError(f"Option group member is not a boolean option: {name}")


_check_table()
