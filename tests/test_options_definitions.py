"""Tests for shellext.options.definitions - option table and validators."""

from __future__ import annotations

from pathlib import Path

import pytest

from shellext.options.definitions import (
    CONFLICTING_OPTIONS,
    DEFAULT_LICENSE,
    OPTION_MAP,
    OPTIONS,
    OptionKind,
    flag_names,
    get_option,
    is_boolean,
    is_new_directory,
    is_shell_version_list,
    is_string,
    is_text,
)


class TestValidators:
    """Tests for the per-kind validators."""

    @pytest.mark.parametrize("value", ["Project", "  my ext ", "a", "_"])
    def test_text_accepts_word_characters(self, value: str) -> None:
        assert is_text(value)

    @pytest.mark.parametrize("value", ["", "   ", "!!!", "żółć", "ñ", True, None])
    def test_text_rejects_blank_and_non_strings(self, value: object) -> None:
        assert not is_text(value)

    def test_string_accepts_empty(self) -> None:
        """Plain string options accept '' so it can be expanded to a default."""
        assert is_string("")
        assert not is_string(True)

    def test_boolean_rejects_strings(self) -> None:
        """'--use-prefs=yes' gives a string, which is not a boolean."""
        assert is_boolean(True)
        assert is_boolean(False)
        assert not is_boolean("yes")
        assert not is_boolean("true")

    @pytest.mark.parametrize("value", ["45", "45,46,47", " 46 , 47 ", "100"])
    def test_shell_versions_valid(self, value: str) -> None:
        assert is_shell_version_list(value)

    @pytest.mark.parametrize(
        "value",
        ["", "44", "45,44", "abc", "45,,46", "45.1", "46a", "４６", True],
    )
    def test_shell_versions_invalid(self, value: object) -> None:
        assert not is_shell_version_list(value)

    def test_new_directory_accepts_missing_path(self, tmp_path: Path) -> None:
        assert is_new_directory(str(tmp_path / "new"))

    def test_new_directory_rejects_existing_path(self, tmp_path: Path) -> None:
        """Scaffolding into an existing directory is refused."""
        assert not is_new_directory(str(tmp_path))

    def test_new_directory_rejects_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "file.txt"
        path.write_text("x")
        assert not is_new_directory(str(path))

    def test_new_directory_rejects_empty_string(self) -> None:
        """'' resolves to the current directory, which exists."""
        assert not is_new_directory("")

    def test_new_directory_rejects_non_string(self) -> None:
        assert not is_new_directory(True)


class TestOptionTable:
    """Tests for the OPTIONS table itself."""

    def test_declaration_order(self) -> None:
        """Prompts follow the declared order, starting with the target directory."""
        names = [spec.name for spec in OPTIONS]
        assert names[0] == "target-dir"
        assert names.index("uuid") < names.index("gettext-domain")
        assert names.index("use-prefs") < names.index("settings-schema")
        assert names.index("use-prefs") < names.index("use-prefs-window")
        assert names.index("use-typescript") < names.index("use-esbuild")

    def test_every_boolean_has_one_negated_alias(self) -> None:
        flags = flag_names()
        for spec in OPTIONS:
            if spec.kind is OptionKind.BOOLEAN:
                assert flags.count(f"no-{spec.name}") == 1
            else:
                assert spec.negated_name is None
                assert f"no-{spec.name}" not in flags

    def test_conflict_groups_are_booleans(self) -> None:
        for group in CONFLICTING_OPTIONS:
            for name in group:
                assert OPTION_MAP[name].kind is OptionKind.BOOLEAN

    def test_get_option_unknown(self) -> None:
        assert get_option("frobnicate") is None
        assert get_option("no-use-prefs") is None

    def test_required_options_have_no_default(self) -> None:
        for name in ("target-dir", "project-name", "description", "uuid", "shell-version"):
            assert get_option(name).default({}) is None

    def test_static_defaults(self) -> None:
        assert get_option("license").default({}) == DEFAULT_LICENSE
        assert get_option("version-name").default({}) == "1.0.0"
        assert get_option("home-page").default({}) == ""
        assert get_option("use-eslint").default({}) is True
        assert get_option("use-typescript").default({}) is False

    def test_derived_defaults_follow_uuid(self) -> None:
        record = {"uuid": "ext@example.com"}
        assert get_option("gettext-domain").default(record) == "ext@example.com"
        assert get_option("settings-schema").default(record) == "ext@example.com"

    def test_applicability(self) -> None:
        assert not get_option("use-esbuild").applies({})
        assert get_option("use-esbuild").applies({"use-typescript": True})
        assert not get_option("use-types").applies({"use-typescript": True})
        assert not get_option("use-typescript").applies({"use-types": True})
        assert not get_option("settings-schema").applies({"use-prefs": False})
        assert get_option("use-prefs-window").applies({"use-prefs": True})
        assert get_option("gettext-domain").applies({"use-translations": True})

    def test_target_dir_answers_become_absolute(self, tmp_path: Path) -> None:
        normalize = get_option("target-dir").normalize
        assert normalize is not None
        assert Path(normalize("relative/dir")).is_absolute()
