"""Option resolution: command line + interactive answers + defaults.

Resolution is a chain of steps over plain option mappings. Each step takes
the previous mapping and returns a new one:

1. apply_tokens        -- fold '--x' / '--no-x' tokens, last occurrence wins
2. resolve_conflicts   -- keep the first enabled option of each exclusive group
3. default_target_dir  -- fall back to the first positional argument
4. prune_options       -- drop unknown and invalid values, expand '' to defaults
5. collect_project_info -- prompt for missing applicable options, drop the rest
6. split_list_options  -- turn comma-separated lists into lists

The final mapping is frozen into a ProjectConfig.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from rich.console import Console
from rich.markup import escape

from shellext.models.config import GeneratorSettings, ProjectConfig
from shellext.options.definitions import (
    CONFLICTING_OPTIONS,
    NEGATION_PREFIX,
    OPTIONS,
    OptionKind,
    OptionSpec,
    get_option,
)
from shellext.options.tokens import RawToken
from shellext.prompts import Prompter

console = Console(stderr=True)


def default_for(
    spec: OptionSpec,
    record: Mapping[str, Any],
    settings: GeneratorSettings | None = None,
) -> Any:
    """Default value of an option, preferring the operator's settings file."""
    if settings is not None and spec.name in settings.defaults:
        return settings.defaults[spec.name]
    return spec.default(record)


def apply_tokens(tokens: Sequence[RawToken]) -> tuple[dict[str, Any], list[str]]:
    """Fold option tokens into a name -> value mapping.

    '--name' sets True, '--name=value' sets the string, '--no-name' sets
    False on the positive name. Tokens are applied in arrival order, so the
    last of '--x' / '--no-x' wins.

    Returns:
        Tuple of (option values, positional arguments).
    """
    values: dict[str, Any] = {}
    positionals: list[str] = []

    for token in tokens:
        if token.kind == "positional":
            positionals.append(token.value or "")
            continue
        name = token.name or ""
        if name.startswith(NEGATION_PREFIX):
            values[name[len(NEGATION_PREFIX):]] = False
        else:
            values[name] = True if token.value is None else token.value

    return values, positionals


def resolve_conflicts(values: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the first enabled option of each mutually exclusive group."""
    resolved = dict(values)
    for group in CONFLICTING_OPTIONS:
        enabled = [name for name in group if resolved.get(name) is True]
        for name in enabled[1:]:
            del resolved[name]
    return resolved


def default_target_dir(values: Mapping[str, Any], positionals: Sequence[str]) -> dict[str, Any]:
    """Use the first positional argument when --target-dir was not given."""
    resolved = dict(values)
    if "target-dir" not in resolved and positionals:
        resolved["target-dir"] = positionals[0]
    return resolved


def prune_options(
    values: Mapping[str, Any],
    settings: GeneratorSettings | None = None,
) -> dict[str, Any]:
    """Drop unknown and invalid options and expand empty strings to defaults.

    Unknown option names are reported on stderr. Defaults are computed once
    invalid values are gone, so derived defaults (gettext-domain from uuid)
    only ever see valid input. An empty value whose default is itself
    missing is dropped.
    """
    valid: dict[str, Any] = {}
    for name, value in values.items():
        spec = get_option(name)
        if spec is None:
            console.print(
                f"[yellow]Unknown option passed: {escape(name)}[/yellow]", soft_wrap=True
            )
            continue
        if spec.validate(value):
            valid[name] = value

    pruned: dict[str, Any] = {}
    for spec in OPTIONS:
        if spec.name not in valid:
            continue
        value = valid[spec.name]
        if value == "":
            value = default_for(spec, {**valid, **pruned}, settings)
            if value is None:
                continue
        pruned[spec.name] = value
    return pruned


def process_cli_args(
    tokens: Sequence[RawToken],
    settings: GeneratorSettings | None = None,
) -> dict[str, Any]:
    """Turn command-line tokens into a validated, conflict-free option mapping."""
    values, positionals = apply_tokens(tokens)
    values = resolve_conflicts(values)
    values = default_target_dir(values, positionals)
    return prune_options(values, settings)


def query_user_for(
    spec: OptionSpec,
    record: Mapping[str, Any],
    prompter: Prompter,
    settings: GeneratorSettings | None = None,
) -> Any:
    """Ask the operator for a single option value."""
    if spec.hint:
        prompter.hint(spec.hint)
    default = default_for(spec, record, settings)

    if spec.kind is OptionKind.BOOLEAN:
        return prompter.confirm(spec.question, default=bool(default))

    answer = prompter.ask(
        spec.question,
        validate=spec.validate,
        default=default,
        error=spec.error,
    )
    if spec.normalize is not None:
        return spec.normalize(answer)
    return answer


def collect_project_info(
    values: Mapping[str, Any],
    prompter: Prompter,
    settings: GeneratorSettings | None = None,
) -> dict[str, Any]:
    """Fill in missing options interactively.

    Walks the option table in order. Applicable options that are still
    missing are asked for; options that do not apply given the answers so
    far are removed, even when they were passed on the command line.
    """
    record = dict(values)
    for spec in OPTIONS:
        if not spec.applies(record):
            record.pop(spec.name, None)
        elif spec.name not in record:
            record[spec.name] = query_user_for(spec, record, prompter, settings)
    return record


def split_list_options(values: Mapping[str, Any]) -> dict[str, Any]:
    """Split comma-separated list options, trimming and dropping empty entries."""
    resolved = dict(values)
    for spec in OPTIONS:
        value = resolved.get(spec.name)
        if spec.kind is OptionKind.LIST and isinstance(value, str):
            resolved[spec.name] = [part.strip() for part in value.split(",") if part.strip()]
    return resolved


def resolve(
    tokens: Sequence[RawToken],
    prompter: Prompter,
    settings: GeneratorSettings | None = None,
) -> ProjectConfig:
    """Resolve the full project configuration.

    Args:
        tokens: Command-line tokens from tokenize().
        prompter: Source of answers for options the command line left open.
        settings: Operator overrides for option defaults.

    Returns:
        The frozen ProjectConfig.

    Raises:
        PromptCancelledError: If the operator cancels a prompt.
    """
    cli_values = process_cli_args(tokens, settings)
    record = collect_project_info(cli_values, prompter, settings)
    return ProjectConfig.from_options(split_list_options(record))
