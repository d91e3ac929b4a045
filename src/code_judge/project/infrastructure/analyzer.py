"""ProjectAnalyzer — reads a project tree into a ProjectSnapshot."""

import json
import re
import tomllib
from pathlib import Path
from typing import Any

from code_judge.project.domain.snapshot import FileStat, ProjectSnapshot
from code_judge.project.infrastructure.errors import ProjectAnalysisError

SOURCE_SUFFIXES = frozenset({".py", ".ts", ".tsx", ".js", ".jsx"})
EXCLUDED_DIRS = frozenset(
    {"node_modules", ".git", ".venv", "venv", "__pycache__", "dist", "build"}
)
REQUIREMENTS_FILES = ("CLAUDE.md", "README.md")

_REQUIREMENT_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*")


class ProjectAnalyzer:
    """Collects requirements, dependencies and source file sizes of a project.

    A target is either a directory path or a project name resolved under
    ``projects_dir``. Anything that stops a project from being read is raised
    as ProjectAnalysisError so callers can skip that project.
    """

    def __init__(
        self,
        projects_dir: Path,
        max_files: int = 20,
        large_file_lines: int = 500,
    ) -> None:
        self._projects_dir = projects_dir
        self._max_files = max_files
        self._large_file_lines = large_file_lines

    def resolve(self, target: str) -> Path:
        """
        Return the project directory for *target*.

        Raises:
            ProjectAnalysisError: if neither *target* nor projects_dir/target
                is a directory.
        """
        candidate = Path(target)
        if candidate.is_dir():
            return candidate
        candidate = self._projects_dir / target
        if candidate.is_dir():
            return candidate
        raise ProjectAnalysisError(
            target=target,
            reason=f"no project directory found (looked in {self._projects_dir})",
        )

    def analyze(self, target: str) -> ProjectSnapshot:
        root = self.resolve(target=target)
        description, dependencies = self._read_manifest(root=root, target=target)
        return ProjectSnapshot(
            name=root.resolve().name,
            description=description,
            requirements=self._read_requirements(root=root, target=target),
            dependencies=dependencies,
            files=self._file_stats(root=root, target=target),
            large_file_lines=self._large_file_lines,
        )

    def _read_requirements(self, root: Path, target: str) -> str:
        for name in REQUIREMENTS_FILES:
            path = root / name
            if path.is_file():
                return _read_text(path=path, target=target)
        return ""

    def _read_manifest(self, root: Path, target: str) -> tuple[str, list[str]]:
        """Description and dependency names from package.json or pyproject.toml."""
        package_json = root / "package.json"
        if package_json.is_file():
            return _package_json_manifest(path=package_json, target=target)
        pyproject = root / "pyproject.toml"
        if pyproject.is_file():
            return _pyproject_manifest(path=pyproject, target=target)
        return "", []

    def _file_stats(self, root: Path, target: str) -> list[FileStat]:
        stats: list[FileStat] = []
        for dirpath, dirnames, filenames in root.walk():
            dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDED_DIRS)
            for filename in sorted(filenames):
                if len(stats) >= self._max_files:
                    return stats
                path = dirpath / filename
                if path.suffix not in SOURCE_SUFFIXES:
                    continue
                text = _read_text(path=path, target=target)
                stats.append(
                    FileStat(
                        path=path.relative_to(root).as_posix(),
                        lines=len(text.splitlines()),
                    )
                )
        return stats


def _read_text(path: Path, target: str) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ProjectAnalysisError(
            target=target, reason=f"cannot read {path.name}: {exc}"
        ) from exc


def _package_json_manifest(path: Path, target: str) -> tuple[str, list[str]]:
    try:
        data = json.loads(_read_text(path=path, target=target))
    except json.JSONDecodeError as exc:
        raise ProjectAnalysisError(
            target=target, reason=f"invalid package.json: {exc}"
        ) from exc
    if not isinstance(data, dict):
        raise ProjectAnalysisError(
            target=target, reason="invalid package.json: expected a JSON object"
        )

    dependencies = data.get("dependencies") or {}
    if not isinstance(dependencies, dict):
        raise ProjectAnalysisError(
            target=target,
            reason="invalid package.json: 'dependencies' must be an object",
        )
    return _description(data), list(dependencies)


def _pyproject_manifest(path: Path, target: str) -> tuple[str, list[str]]:
    try:
        data = tomllib.loads(_read_text(path=path, target=target))
    except tomllib.TOMLDecodeError as exc:
        raise ProjectAnalysisError(
            target=target, reason=f"invalid pyproject.toml: {exc}"
        ) from exc

    project: Any = data.get("project") or {}
    if not isinstance(project, dict):
        raise ProjectAnalysisError(
            target=target, reason="invalid pyproject.toml: [project] must be a table"
        )
    specs = project.get("dependencies") or []
    if not isinstance(specs, list) or not all(isinstance(s, str) for s in specs):
        raise ProjectAnalysisError(
            target=target,
            reason="invalid pyproject.toml: 'dependencies' must be a list of strings",
        )
    names = [
        match.group(0)
        for spec in specs
        if (match := _REQUIREMENT_NAME.match(spec.strip()))
    ]
    return _description(project), names


def _description(data: dict[str, Any]) -> str:
    value = data.get("description")
    return value if isinstance(value, str) else ""
