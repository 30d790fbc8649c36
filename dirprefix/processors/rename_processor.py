"""Batch renamer that prefixes every entry of a directory."""

import os
import sys
from pathlib import Path
from typing import TextIO

import click

from dirprefix.models.rename import RenameOp, RenamePlan


def display_name(name: str) -> str:
    """Return a printable form of an entry name.

    Bytes that are not valid in the filesystem encoding come back from
    `os.listdir` as surrogates; they are shown as U+FFFD instead.
    """
    return os.fsencode(name).decode(sys.getfilesystemencoding(), "replace")


class RenameProcessor:
    """Processor renaming directory entries to `{prefix}_{name}`."""

    def __init__(self, prefix: str, output: TextIO | None = None) -> None:
        """Initialize the rename processor.

        Args:
            prefix: Prefix prepended to every entry name.
            output: Stream receiving the report lines. Defaults to stdout.
        """
        self.prefix = prefix
        self.output = output

    def _list_entries(self, directory: Path) -> list[str]:
        """List the immediate entries of a directory in filesystem order.

        The listing is taken in full before anything is renamed, so renamed
        entries are never visited a second time.

        Raises:
            OSError: If the directory cannot be listed.
        """
        return [entry.name for entry in directory.iterdir()]

    def build_plan(self, directory: Path) -> RenamePlan:
        """Build the rename plan for `directory` without touching the filesystem.

        Args:
            directory: Directory whose entries will be renamed.

        Returns:
            RenamePlan with one operation per entry.

        Raises:
            OSError: If the directory does not exist, is not a directory or cannot be read.
        """
        operations = [RenameOp.from_prefix(self.prefix, name) for name in self._list_entries(directory)]
        return RenamePlan(directory=directory, prefix=self.prefix, operations=operations)

    def _report(self, op: RenameOp) -> None:
        # Written as-is: tabs and control characters in names are kept
        click.echo(f"{display_name(op.source_name)} -> {display_name(op.dest_name)}", file=self.output)

    def rename_files(self, directory: Path, dry_run: bool = False) -> RenamePlan:
        """Rename every entry of `directory`, reporting each one first.

        Each report line is printed before its rename is attempted, so a dry
        run prints exactly what a real run would. The first failure aborts the
        run; entries renamed before it stay renamed.

        Args:
            directory: Directory whose entries will be renamed.
            dry_run: If True, only report the planned renames.

        Returns:
            The executed (or, for a dry run, planned) RenamePlan.

        Raises:
            FileExistsError: If a destination name already exists.
            OSError: If listing the directory or renaming an entry fails.
        """
        plan = self.build_plan(directory)

        for op, (source, target) in zip(plan.operations, plan.resolve(), strict=True):
            self._report(op)
            if dry_run:
                continue

            # Never overwrite an existing name. Best-effort only: a destination
            # created between this check and the rename is still replaced.
            if target.exists() or target.is_symlink():
                raise FileExistsError(f"Target already exists: {display_name(os.fspath(target))}")
            source.rename(target)

        return plan
