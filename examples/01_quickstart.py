from __future__ import annotations

import itertools

from _infra import banner

from lazyseq import ArraySequence, ConcatSequence, IteratorSequence, collect, flow_of, pairs, take
from kungfu import Error, Ok


def main() -> None:
    banner("01_quickstart: sources + flow + pairs")

    words = ConcatSequence.of(ArraySequence.of("lazy", "seq"), ArraySequence(None), ArraySequence.of("combinators"))
    print(collect(words))

    shouted = flow_of("a", "bb", "ccc").filter(lambda w: len(w) > 1).map(str.upper).collect()
    print(shouted)

    # Neither side has to end for pairs to come out
    grid = pairs(IteratorSequence(itertools.count()), IteratorSequence(itertools.count()))
    match take(grid, 9):
        case Ok(cells):
            print(cells)
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    main()
