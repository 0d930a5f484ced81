from __future__ import annotations

from collections import deque

from _infra import READINGS, banner

from pushseq import lift as L
from pushseq import repeat, show


def main() -> None:
    banner("01_quickstart: list -> seq -> dict / deque / str")

    readings = L.up.of_list(READINGS)

    # Last reading per sensor, skipping invalid values. Nothing runs until to_hashtbl.
    latest = L.down.to_hashtbl(
        readings.filter(lambda r: r.value >= 0).map(lambda r: (r.sensor, r.value))
    )
    print(f"latest: {latest!r}")

    queue: deque[str] = deque()
    L.down.to_queue(queue, L.up.hashtbl_keys(latest).rev())
    print(f"queue: {list(queue)!r}")

    # Infinite sources are fine as long as something bounds them.
    print("dashes:", L.down.to_str(repeat("-").take(10)))
    print("cycle:", show(L.up.int_range(1, 3).cycle().take(7)))
    print("empty?", readings.drop(len(READINGS)).is_empty())


if __name__ == "__main__":
    main()
