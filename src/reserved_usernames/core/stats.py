from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class UsernameStats:
    """Length statistics over a set of names.

    Notes:
    - `average` is rounded half-up to the nearest integer.
    - An empty set reports zeros and an empty `by_length` mapping.
    """

    total: int
    shortest: int
    longest: int
    average: int
    by_length: dict[int, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "shortest": self.shortest,
            "longest": self.longest,
            "average": self.average,
            # JSON object keys are strings.
            "byLength": {str(k): list(v) for k, v in self.by_length.items()},
        }


def group_by_length(names: list[str]) -> dict[int, list[str]]:
    grouped: dict[int, list[str]] = {}
    for name in names:
        grouped.setdefault(len(name), []).append(name)
    return dict(sorted(grouped.items()))


def compute_stats(names: list[str]) -> UsernameStats:
    if not names:
        return UsernameStats(total=0, shortest=0, longest=0, average=0, by_length={})

    lengths = np.fromiter((len(n) for n in names), dtype=np.int64, count=len(names))
    return UsernameStats(
        total=int(lengths.size),
        shortest=int(lengths.min()),
        longest=int(lengths.max()),
        average=int(np.floor(lengths.mean() + 0.5)),
        by_length=group_by_length(names),
    )
