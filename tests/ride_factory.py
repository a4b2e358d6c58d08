# -*- coding: utf-8 -*-
"""
Test data builders shared across the ride max-time tests.
"""

from __future__ import annotations
import random
from pathlib import Path
from typing import List

from src.business_objects.rides import RideItem

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
RIDE_CSV = DATA_DIR / "ride.csv"
RIDE_SAMPLE_CSV = DATA_DIR / "ride_sample.csv"


def make_random_rides(seed: int, n: int, max_cost: int = 15) -> List[RideItem]:
    rng = random.Random(seed)
    return [
        RideItem(f"ride {seed}-{i}", rng.randint(1, max_cost), round(rng.uniform(0.0, 100.0), 2))
        for i in range(n)
    ]
