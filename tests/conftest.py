# -*- coding: utf-8 -*-
"""
Shared fixtures for the ride max-time tests.
"""

from __future__ import annotations
from typing import List

import pytest

from src.business_objects.rides import RideItem


@pytest.fixture
def trivial_rides() -> List[RideItem]:
    return [
        RideItem("test Ferris Wheel", 10.0, 20.0),
        RideItem("test Speedway", 4.0, 5.0),
    ]


@pytest.fixture
def write_catalog(tmp_path):
    """Write caret-delimited lines (header included) to a temp file and return its path."""
    def _write(*lines: str, name: str = "rides.csv") -> str:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def write_catalog_bytes(tmp_path):
    """Write a raw byte payload to a temp catalog file and return its path."""
    def _write(payload: bytes, name: str = "rides.csv") -> str:
        path = tmp_path / name
        path.write_bytes(payload)
        return str(path)
    return _write
