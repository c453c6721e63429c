from __future__ import annotations

from _infra import banner

from lazyseq import ArraySequence, PairPolicy, collect_writer, pairs


def main() -> None:
    banner("03_tracing: watch the diagonal sweep")

    seq = pairs(ArraySequence.of("a0", "a1"), ArraySequence.of("b0", "b1"), policy=PairPolicy(trace=True))
    wr = collect_writer(seq)

    print("pairs:", wr.result.unwrap())
    for event in wr.log:
        side = f" {event.side}" if event.side else ""
        value = f" {event.value}" if event.value is not None else ""
        print(f"  {event.kind}{side}{value}")


if __name__ == "__main__":
    main()
