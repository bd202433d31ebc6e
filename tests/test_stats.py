from __future__ import annotations

import asyncio
from pathlib import Path

from reserved_usernames import ReservedUsernames
from reserved_usernames.core.stats import UsernameStats, compute_stats


def test_stats_over_known_names() -> None:
    stats = compute_stats(["ab", "abc", "abcd", "xy"])

    assert stats.total == 4
    assert stats.shortest == 2
    assert stats.longest == 4
    # 11 / 4 = 2.75
    assert stats.average == 3
    assert stats.by_length == {2: ["ab", "xy"], 3: ["abc"], 4: ["abcd"]}


def test_average_rounds_half_up() -> None:
    # 5 / 2 = 2.5
    assert compute_stats(["a", "bcd"]).average == 3
    # 7 / 2 = 3.5
    assert compute_stats(["abc", "defg"]).average == 4


def test_empty_set_reports_zeros() -> None:
    assert compute_stats([]) == UsernameStats(total=0, shortest=0, longest=0, average=0, by_length={})


def test_registry_stats_are_consistent(tmp_path: Path) -> None:
    reg = asyncio.run(ReservedUsernames.create(cache_file=tmp_path / "cache.json"))

    stats = reg.get_stats()

    assert stats.total == len(reg)
    assert stats.shortest <= stats.average <= stats.longest
    assert sum(len(v) for v in stats.by_length.values()) == stats.total
    assert all(len(n) == k for k, names in stats.by_length.items() for n in names)

    d = stats.to_dict()
    assert d["total"] == stats.total
    assert d["byLength"][str(stats.shortest)] == stats.by_length[stats.shortest]


def test_uninitialized_registry_has_empty_stats(tmp_path: Path) -> None:
    reg = ReservedUsernames(cache_file=tmp_path / "cache.json")
    assert reg.get_stats().total == 0
    assert reg.get_stats().longest == 0
