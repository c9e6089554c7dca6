"""Project materialization for `create-shell-extension`.

Writes the extension skeleton described by a resolved ProjectConfig:
copies the static template files for every enabled feature, fills the
entry-point templates with the derived class names, and serializes the
metadata.json / package.json manifests. Files that do not depend on each
other are written concurrently.
"""

from __future__ import annotations

import asyncio
import json
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from shellext.models.config import ProjectConfig
from shellext.scaffold.naming import to_kebab_case, to_pascal_case
from shellext.scaffold.versions import type_dependencies_for

PLACEHOLDER = "$PLACEHOLDER$"

SCHEMA_PREFIX = "org.gnome.shell.extensions"

_GSCHEMA_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<schemalist>
    <schema id="{schema_id}" path="/org/gnome/shell/extensions/{name}/">
    </schema>
</schemalist>
"""


class TargetExistsError(Exception):
    """Raised when the target directory already exists."""

    def __init__(self, target: Path) -> None:
        self.target = target
        super().__init__(f"Target directory already exists: {target}")


def _get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def _read_json(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def _drop(mapping: dict[str, Any], *keys: str) -> None:
    for key in keys:
        mapping.pop(key, None)


@dataclass
class _Scaffold:
    """Working state shared by the configure steps.

    The manifests are fresh copies of the template JSON and are edited in
    place by the steps before being written at the end.
    """

    config: ProjectConfig
    target: Path
    templates: Path
    lang_dir: str
    metadata: dict[str, Any]
    package: dict[str, Any]
    tsconfig: dict[str, Any]
    created: list[str] = field(default_factory=list)

    @property
    def ext(self) -> str:
        return "ts" if self.config.use_typescript else "js"

    @property
    def scripts(self) -> dict[str, Any]:
        return self.package.setdefault("scripts", {})

    @property
    def dev_dependencies(self) -> dict[str, Any]:
        return self.package.setdefault("devDependencies", {})

    async def copy_file(self, source: str, dest: str, executable: bool = False) -> None:
        target = self.target / dest
        await asyncio.to_thread(shutil.copyfile, self.templates / source, target)
        if executable:
            target.chmod(target.stat().st_mode | 0o111)
        self.created.append(dest)

    async def copy_tree(self, source: str, dest: str) -> None:
        await asyncio.to_thread(shutil.copytree, self.templates / source, self.target / dest)
        self.created.append(f"{dest}/")

    async def write_text(self, dest: str, content: str) -> None:
        await asyncio.to_thread((self.target / dest).write_text, content, encoding="utf-8")
        self.created.append(dest)

    async def write_json(self, dest: str, data: dict[str, Any]) -> None:
        await self.write_text(dest, json.dumps(data, indent=2) + "\n")

    async def render(self, source: str, dest: str, name: str) -> None:
        """Copy a template, replacing the first $PLACEHOLDER$ with name."""
        content = await asyncio.to_thread(
            (self.templates / source).read_text, encoding="utf-8"
        )
        await self.write_text(dest, content.replace(PLACEHOLDER, name, 1))


async def _configure_types(s: _Scaffold) -> None:
    config = s.config
    if not (config.use_types or config.use_typescript):
        _drop(s.dev_dependencies, "@girs/gjs", "@girs/gnome-shell")
        return

    s.dev_dependencies.update(type_dependencies_for(config.shell_version))

    tasks = []
    if config.use_typescript:
        if config.use_esbuild:
            tasks.append(s.copy_file("scripts/esbuild.js", "scripts/esbuild.js"))
        else:
            _drop(s.dev_dependencies, "esbuild", "esbuild-plugin-tsc")
            _drop(
                s.tsconfig.setdefault("compilerOptions", {}),
                "isolatedModules",
                "experimentalDecorators",
            )
        tasks.append(s.write_json("tsconfig.json", s.tsconfig))
    else:
        tasks.append(s.copy_file("template.js/jsconfig.json", "jsconfig.json"))
    tasks.append(s.copy_file("ambient.d.ts", "ambient.d.ts"))
    await asyncio.gather(*tasks)


async def _configure_eslint(s: _Scaffold) -> None:
    if not s.config.use_eslint:
        _drop(s.scripts, "check:lint")
        _drop(
            s.dev_dependencies,
            "@eslint/js",
            "eslint",
            "globals",
            "eslint-plugin-jsdoc",
            "typescript-eslint",
            "@types/eslint__js",
        )
        return

    tasks = [s.copy_file(f"{s.lang_dir}/eslint.config.js", "eslint.config.js")]
    if not s.config.use_typescript:
        tasks.append(s.copy_tree("template.js/lint", "lint"))
    await asyncio.gather(*tasks)


async def _configure_prettier(s: _Scaffold) -> None:
    if not s.config.use_prettier:
        _drop(s.scripts, "check:format")
        _drop(s.dev_dependencies, "prettier", "eslint-config-prettier")
        return

    await asyncio.gather(
        s.copy_file("prettier.config.js", "prettier.config.js"),
        s.copy_file("_prettierignore", ".prettierignore"),
    )
    if not s.config.use_eslint:
        _drop(s.dev_dependencies, "eslint-config-prettier")


async def _configure_prefs(s: _Scaffold) -> None:
    config = s.config
    if not config.use_prefs:
        return

    name = to_kebab_case(config.project_name)
    schema_id = f"{SCHEMA_PREFIX}.{name}"
    await asyncio.to_thread((s.target / "src" / "schemas").mkdir, parents=True, exist_ok=True)
    await s.write_text(
        f"src/schemas/{schema_id}.gschema.xml",
        _GSCHEMA_TEMPLATE.format(schema_id=schema_id, name=name),
    )
    s.metadata["settings-schema"] = config.settings_schema or config.uuid

    if config.use_prefs_window:
        await s.render(
            f"{s.lang_dir}/src/prefs.{s.ext}",
            f"src/prefs.{s.ext}",
            f"{to_pascal_case(config.project_name)}Prefs",
        )


async def _configure_translations(s: _Scaffold) -> None:
    config = s.config
    if not config.use_translations:
        _drop(s.scripts, "translations:update")
        return

    await asyncio.gather(
        s.copy_tree("po", "po"),
        s.copy_file(
            "scripts/update-translations.sh",
            "scripts/update-translations.sh",
            executable=True,
        ),
    )
    s.metadata["gettext-domain"] = config.gettext_domain or config.uuid


async def _configure_resources(s: _Scaffold) -> None:
    if s.config.use_resources:
        await s.copy_tree("data", "data")


async def _configure_stylesheet(s: _Scaffold) -> None:
    if s.config.use_stylesheet:
        await s.write_text("src/stylesheet.css", "")


async def _configure_mandatory_files(s: _Scaffold) -> None:
    config = s.config
    s.metadata["name"] = config.project_name
    s.metadata["description"] = config.description
    s.metadata["uuid"] = config.uuid
    s.metadata["shell-version"] = list(config.shell_version)
    if config.version_name:
        s.metadata["version-name"] = config.version_name
    if config.home_page:
        s.metadata["url"] = config.home_page

    s.package["name"] = to_kebab_case(config.project_name)
    s.package["description"] = config.description
    if config.version_name:
        s.package["version"] = config.version_name
    if config.license:
        s.package["license"] = config.license

    await asyncio.gather(
        s.render(
            f"{s.lang_dir}/src/extension.{s.ext}",
            f"src/extension.{s.ext}",
            to_pascal_case(config.project_name),
        ),
        s.copy_file("_gitignore", ".gitignore"),
        s.copy_file("_editorconfig", ".editorconfig"),
        s.copy_file("scripts/build.sh", "scripts/build.sh", executable=True),
        s.write_json("metadata.json", s.metadata),
        s.write_json("package.json", s.package),
        s.copy_file("README.md", "README.md"),
    )


_STEPS = (
    _configure_types,
    _configure_eslint,
    _configure_prettier,
    _configure_prefs,
    _configure_translations,
    _configure_resources,
    _configure_stylesheet,
    _configure_mandatory_files,
)


async def materialize(config: ProjectConfig, templates_dir: Path | None = None) -> list[str]:
    """Write the extension project described by config.

    Args:
        config: The resolved project configuration.
        templates_dir: Alternative template directory, mainly for tests.

    Returns:
        Sorted list of created paths relative to the target directory.
        Copied directories end with '/'.

    Raises:
        TargetExistsError: If the target directory already exists.
        OSError: If a template is missing or the target cannot be written.
    """
    target = Path(config.target_dir).resolve()
    if target.exists():
        raise TargetExistsError(target)

    templates = templates_dir or _get_templates_dir()
    lang_dir = "template.ts" if config.use_typescript else "template.js"

    await asyncio.gather(
        asyncio.to_thread((target / "src").mkdir, parents=True, exist_ok=True),
        asyncio.to_thread((target / "scripts").mkdir, parents=True, exist_ok=True),
    )

    metadata, package, tsconfig = await asyncio.gather(
        asyncio.to_thread(_read_json, templates / "metadata.json"),
        asyncio.to_thread(_read_json, templates / lang_dir / "package.json"),
        asyncio.to_thread(_read_json, templates / "template.ts" / "tsconfig.json"),
    )

    scaffold = _Scaffold(
        config=config,
        target=target,
        templates=templates,
        lang_dir=lang_dir,
        metadata=metadata,
        package=package,
        tsconfig=tsconfig,
    )
    for step in _STEPS:
        await step(scaffold)

    return sorted(scaffold.created)
