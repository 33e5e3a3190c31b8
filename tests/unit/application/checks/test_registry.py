"""Tests for checks/_registry.py."""

from barrelcheck.application.checks import (
    DanglingExportCheck,
    OrphanFileCheck,
    SentinelConstantCheck,
    default_checks,
)


class TestDefaultChecks:
    """Tests for default_checks."""

    def test_reporting_order(self) -> None:
        """Orphans, then dangling exports, then sentinels."""
        checks = default_checks()

        assert [type(c) for c in checks] == [
            OrphanFileCheck,
            DanglingExportCheck,
            SentinelConstantCheck,
        ]

    def test_fresh_instances(self) -> None:
        """Each call returns new instances."""
        first = default_checks()
        second = default_checks()

        assert all(a is not b for a, b in zip(first, second, strict=True))
