from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(slots=True)
class Feed:
    """Live source that reports every element it hands out."""

    name: str
    items: list[str] = field(default_factory=list)
    pulled: int = 0

    def __iter__(self) -> Iterator[str]:
        for item in self.items:
            self.pulled += 1
            print(f"  [{self.name}] pulled {item}")
            yield item


def feed(name: str, items: Iterable[str]) -> Feed:
    return Feed(name=name, items=list(items))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
