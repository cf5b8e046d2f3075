"""
Test Fixtures - Shared Test Data Builders.

Usage:
    from tests.fixtures import make_identifiers, make_table
"""

from __future__ import annotations

from typing import List


def make_identifiers(count: int) -> List[str]:
    """Generate distinct profile URLs."""
    return [f"https://www.linkedin.com/in/candidate-{i:03d}" for i in range(count)]


def make_table(rows: List[List[str]], header: List[str]) -> str:
    """Render rows as comma-separated text (values must not need quoting)."""
    lines = [",".join(header)] + [",".join(row) for row in rows]
    return "\n".join(lines) + "\n"
