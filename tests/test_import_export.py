from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from reserved_usernames import InvalidArgumentError, NameFormat, ReservedUsernames, UnsupportedFormatError
from reserved_usernames.core.formats import decode_names, encode_names


def _registry(tmp_path: Path, **kwargs) -> ReservedUsernames:
    return asyncio.run(ReservedUsernames.create(cache_file=tmp_path / "cache.json", **kwargs))


def test_encodings() -> None:
    names = ["admin", "root"]

    assert json.loads(encode_names(names, "json")) == names
    assert encode_names(names, "csv") == "name\nadmin\nroot"
    assert encode_names(names, "TXT") == "admin\nroot"
    out = encode_names(names, NameFormat.ARRAY)
    assert out == names and out is not names


@pytest.mark.parametrize("fmt", ["xml", "yaml", "", None, 3])
def test_unknown_format_is_rejected(tmp_path: Path, fmt: object) -> None:
    reg = _registry(tmp_path)

    with pytest.raises(UnsupportedFormatError):
        reg.export(fmt)  # type: ignore[arg-type]
    with pytest.raises(UnsupportedFormatError):
        reg.import_usernames([], fmt)  # type: ignore[arg-type]


def test_unsupported_format_is_also_a_value_error(tmp_path: Path) -> None:
    reg = _registry(tmp_path)
    with pytest.raises(ValueError, match="Unsupported format: xml"):
        reg.export("xml")


def test_json_export_then_import_is_a_superset(tmp_path: Path) -> None:
    reg = _registry(tmp_path)
    source_names = reg.get_all()

    other = _registry(tmp_path / "other", custom_reserved=["zeta"])
    count = other.import_usernames(reg.export("json"), "json")

    assert count == len(source_names)
    assert set(source_names) <= set(other.get_all())
    assert other.is_reserved("zeta")


def test_import_csv_skips_header_and_blank_lines(tmp_path: Path) -> None:
    reg = _registry(tmp_path)

    count = reg.import_usernames("name\n  Foo \n\nbar\n", "csv")

    assert count == 2
    assert reg.is_reserved("foo")
    assert reg.is_reserved("BAR")
    assert not reg.is_reserved("name")


def test_import_txt_and_array_normalize(tmp_path: Path) -> None:
    reg = _registry(tmp_path)

    assert reg.import_usernames("Alpha\nbeta\n", "txt") == 2
    assert reg.import_usernames(["Gamma", "delta"]) == 2
    assert reg.import_usernames(("Epsilon",), "array") == 1

    all_names = reg.get_all()
    assert {"alpha", "beta", "gamma", "delta", "epsilon"} <= set(all_names)
    assert "Gamma" not in all_names


def test_import_merges_never_shrinks(tmp_path: Path) -> None:
    reg = _registry(tmp_path)
    before = set(reg.get_all())

    reg.import_usernames(["admin", "new-one"])

    assert before | {"new-one"} == set(reg.get_all())


@pytest.mark.parametrize(
    "data,fmt",
    [
        ("{\"admin\": 1}", "json"),
        ("[1, 2]", "json"),
        ("not json", "json"),
        ("admin", "array"),
        (["ok", 5], "array"),
        (["admin"], "txt"),
    ],
)
def test_malformed_import_payloads(data: object, fmt: str) -> None:
    with pytest.raises(InvalidArgumentError):
        decode_names(data, fmt)
