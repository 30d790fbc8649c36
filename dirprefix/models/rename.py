"""Rename operation data models."""

from collections.abc import Iterator
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


PREFIX_SEPARATOR = "_"


class RenameOptions(BaseModel):
    """Parameters of a single invocation, immutable once parsed."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Directory whose entries will be renamed")
    pattern: str = Field(description="Regular expression applied to the directory name")
    dry_run: bool = Field(description="Report planned renames without performing them", default=False)


class RenameOp(BaseModel):
    """A single entry rename inside the target directory."""

    source_name: str = Field(description="Original entry name (without directory path)")
    dest_name: str = Field(description="New entry name (without directory path)")

    @classmethod
    def from_prefix(cls, prefix: str, source_name: str) -> "RenameOp":
        return cls(source_name=source_name, dest_name=f"{prefix}{PREFIX_SEPARATOR}{source_name}")

    def __str__(self) -> str:
        return f"{self.source_name} -> {self.dest_name}"


class RenamePlan(BaseModel):
    """All renames planned for one directory, in enumeration order."""

    directory: Path = Field(description="Directory containing the entries")
    prefix: str = Field(description="Prefix prepended to every entry name")
    operations: list[RenameOp] = Field(
        description="List of rename operations to perform",
        default_factory=list,
    )

    def __len__(self) -> int:
        return len(self.operations)

    def resolve(self) -> Iterator[tuple[Path, Path]]:
        """Yield (source_path, target_path) pairs, both inside `directory`."""
        for op in self.operations:
            yield self.directory / op.source_name, self.directory / op.dest_name
