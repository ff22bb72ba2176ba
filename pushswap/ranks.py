"""Replacing values by their ranks."""

from __future__ import annotations

from collections.abc import Sequence


def create_ranks(values: Sequence[int]) -> list[int]:
    """Return, for each value, its index in the sorted order of all values."""
    position = {value: index for index, value in enumerate(sorted(values))}
    return [position[value] for value in values]