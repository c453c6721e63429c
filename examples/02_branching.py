from __future__ import annotations

from _infra import banner, feed

from lazyseq import IteratorSequence, MemoizingSequence, PairPolicy, collect, pairs, take


def main() -> None:
    banner("02_branching: continue a cross product from a checkpoint")

    colours = feed("colours", ["red", "green", "blue"])
    sizes = feed("sizes", ["S", "M", "L"])
    first = MemoizingSequence(IteratorSequence(colours))
    second = MemoizingSequence(IteratorSequence(sizes))

    checkpoint = pairs(first, second)
    print("checkpoint:", take(checkpoint, 3).unwrap())

    branch = pairs(first, second, parent=checkpoint, policy=PairPolicy(replay_parent=True))
    print("branch:", collect(branch))
    print(f"pulled colours={colours.pulled} sizes={sizes.pulled}")


if __name__ == "__main__":
    main()
