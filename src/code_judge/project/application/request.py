"""Renders a ProjectSnapshot into an EvaluationRequest for the project rubric."""

from code_judge.project.domain.snapshot import ProjectSnapshot
from code_judge.prompt.domain.request import EvaluationRequest

_REQUIREMENTS_CHARS = 1500
_LISTED_LARGE_FILES = 5
_LISTED_DEPENDENCIES = 10


def build_project_request(snapshot: ProjectSnapshot) -> EvaluationRequest:
    """Task: the project's own requirements. Output: its measured structure."""
    requirements = snapshot.requirements[:_REQUIREMENTS_CHARS].strip()
    task = (
        f"PROJECT: {snapshot.name}\n"
        f"DESCRIPTION: {snapshot.description or 'No description'}\n\n"
        "KEY REQUIREMENTS:\n"
        f"{requirements or '(no requirements document found)'}"
    )

    large = snapshot.large_files
    status = "VIOLATION" if large else "OK"
    lines = [
        "FILE STATISTICS:",
        f"- Total files analyzed: {len(snapshot.files)}",
        f"- Files over {snapshot.large_file_lines} lines: {len(large)} {status}",
        *(f"  - {f.path}: {f.lines} lines" for f in large[:_LISTED_LARGE_FILES]),
        "",
        "FILE SIZES:",
        *(f"- {f.path}: {f.lines} lines" for f in snapshot.files),
        "",
        f"DEPENDENCIES: {len(snapshot.dependencies)} packages",
        *(f"- {dep}" for dep in snapshot.dependencies[:_LISTED_DEPENDENCIES]),
    ]
    return EvaluationRequest(task=task, output="\n".join(lines))
