from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Reading:
    sensor: str
    value: float


READINGS: list[Reading] = [
    Reading("north", 12.5),
    Reading("south", -1.0),
    Reading("north", 13.0),
    Reading("east", 9.75),
    Reading("south", 4.25),
]


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
