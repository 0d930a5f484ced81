from __future__ import annotations

from _infra import READINGS, Reading, banner

from kungfu import Error, Ok

from pushseq import fold_w, of_list
from pushseq.writer import Log, WriterResult, written, written_error


def accumulate(total: float, reading: Reading) -> WriterResult[float, str, Log[str]]:
    """
    "Pure" Writer step: returns the new total plus what happened, no side effects.
    """
    if reading.value < 0:
        return written_error(f"negative reading from {reading.sensor}", f"reject:{reading.sensor}")
    return written(total + reading.value, f"add:{reading.sensor}:{reading.value}")


def main() -> None:
    banner("02_writer_logs: fold_w (value + log, stops at first Error)")

    for name, source in (("valid only", [r for r in READINGS if r.value >= 0]), ("all", READINGS)):
        wr = fold_w(of_list(source), accumulate, initial=0.0)
        match wr.result:
            case Ok(total):
                print(f"{name}: ok {total}")
            case Error(err):
                print(f"{name}: error {err!r}")
        print(f"  log: {list(wr.log)!r}")


if __name__ == "__main__":
    main()
