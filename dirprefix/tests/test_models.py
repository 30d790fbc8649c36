"""Unit tests for data models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from dirprefix.models.rename import RenameOp, RenameOptions, RenamePlan


class TestRenameOp:
    """Tests for RenameOp model."""

    def test_from_prefix(self):
        """Test destination name is prefix, underscore, source name."""
        op = RenameOp.from_prefix("X", "a.txt")

        assert op.source_name == "a.txt"
        assert op.dest_name == "X_a.txt"

    def test_from_empty_prefix(self):
        """Test that an empty prefix still adds the separator."""
        assert RenameOp.from_prefix("", "a.txt").dest_name == "_a.txt"

    def test_str_representation(self):
        """Test the report line format."""
        op = RenameOp(source_name="a.txt", dest_name="X_a.txt")

        assert str(op) == "a.txt -> X_a.txt"


class TestRenamePlan:
    """Tests for RenamePlan model."""

    @pytest.fixture
    def sample_plan(self):
        return RenamePlan(
            directory=Path("/data/20241231_sample"),
            prefix="20241231",
            operations=[
                RenameOp.from_prefix("20241231", "a.txt"),
                RenameOp.from_prefix("20241231", "b.txt"),
            ],
        )

    def test_len(self, sample_plan):
        assert len(sample_plan) == 2

    def test_empty_plan(self):
        """Test plan without operations."""
        plan = RenamePlan(directory=Path("/data"), prefix="X")

        assert len(plan) == 0
        assert list(plan.resolve()) == []

    def test_resolve_keeps_directory(self, sample_plan):
        """Test that resolved paths stay inside the plan directory."""
        resolved = list(sample_plan.resolve())

        assert resolved == [
            (Path("/data/20241231_sample/a.txt"), Path("/data/20241231_sample/20241231_a.txt")),
            (Path("/data/20241231_sample/b.txt"), Path("/data/20241231_sample/20241231_b.txt")),
        ]


class TestRenameOptions:
    """Tests for RenameOptions model."""

    def test_defaults(self):
        options = RenameOptions(path=Path("photos"), pattern=r"\d+")

        assert options.dry_run is False

    def test_empty_pattern_allowed(self):
        """Test that an empty pattern is a valid value."""
        assert RenameOptions(path=Path("photos"), pattern="").pattern == ""

    def test_is_frozen(self):
        """Test that options cannot change once parsed."""
        options = RenameOptions(path=Path("photos"), pattern=r"\d+", dry_run=True)

        with pytest.raises(ValidationError):
            options.dry_run = False
