from __future__ import annotations

import io
import sys

from _infra import READINGS, banner

from pushseq import PrettyPolicy, make_map, make_set, of_in_channel, of_list, pp_seq


def main() -> None:
    banner("03_ordered_and_pretty: ordered adapters, streams, printing")

    sensors = make_set(lambda a, b: (a > b) - (a < b))
    names = sensors.of_seq(of_list(READINGS).map(lambda r: r.sensor))
    pp_seq(sys.stdout, sensors.to_seq(names), lambda out, s: out.write(s),
           policy=PrettyPolicy(sep=" | ", start="sensors: ", stop="\n"))

    by_value = make_map(lambda a, b: (a > b) - (a < b))
    table = by_value.of_seq(of_list(READINGS).map(lambda r: (r.value, r.sensor)))
    pp_seq(sys.stdout, by_value.keys(table), lambda out, v: out.write(f"{v:g}"),
           policy=PrettyPolicy(sep=", ", start="[", stop="]\n"))

    # Single-pass source: read once, lazily.
    stream = io.StringIO("north,south,east")
    vowels = of_in_channel(stream).filter(lambda ch: ch in "aeiou").length()
    print(f"vowels: {vowels}")


if __name__ == "__main__":
    main()
