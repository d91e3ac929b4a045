"""ProjectSnapshot — the facts about a project tree shown to the judge."""

from pydantic import BaseModel, Field


class FileStat(BaseModel, frozen=True):
    path: str
    lines: int = Field(ge=0)


class ProjectSnapshot(BaseModel, frozen=True):
    """File statistics, requirements text and dependencies of one project."""

    name: str = Field(min_length=1)
    description: str = ""
    requirements: str = ""
    dependencies: list[str] = Field(default_factory=list)
    files: list[FileStat] = Field(default_factory=list)
    large_file_lines: int = 500

    @property
    def large_files(self) -> list[FileStat]:
        return [f for f in self.files if f.lines > self.large_file_lines]
