import pytest

from app.enums.abi import AbiEntryKind
from app.models.abi import AbiEntry, AbiInput, AbiOutput
from app.services.abi import AbiService
from app.services.presentation import (
    describe_entry,
    entry_kind_color,
    entry_kind_label,
    entry_title,
    format_type,
    group_by_kind,
    state_mutability_color,
    state_mutability_label,
    summarize,
)


def test_format_type_flat() -> None:
    assert format_type(AbiInput(name="owner", type="address")) == "address"
    assert format_type(AbiOutput(type="bytes32[]")) == "bytes32[]"
    assert format_type(AbiInput(name="t", type="tuple", components=[])) == "tuple"


def test_format_type_tuple() -> None:
    param = AbiInput(
        name="p",
        type="tuple",
        components=[AbiInput(name="a", type="address"), AbiInput(name="b", type="uint256")],
    )
    assert format_type(param) == "tuple(address, uint256)"


def test_format_type_recurses_uniformly() -> None:
    c1 = AbiOutput(type="tuple[]", components=[AbiOutput(type="bool"), AbiOutput(type="tuple", components=[AbiOutput(type="int8")])])
    c2 = AbiOutput(type="string")
    param = AbiOutput(type="tuple", components=[c1, c2])
    assert format_type(param) == param.type + "(" + format_type(c1) + ", " + format_type(c2) + ")"
    assert format_type(param) == "tuple(tuple[](bool, tuple(int8)), string)"


def test_group_by_kind(sample_abi: list[AbiEntry]) -> None:
    groups = group_by_kind(sample_abi)
    assert list(groups) == [
        AbiEntryKind.FUNCTION,
        AbiEntryKind.EVENT,
        AbiEntryKind.CONSTRUCTOR,
        AbiEntryKind.ERROR,
    ]
    assert [entry.name for entry in groups[AbiEntryKind.FUNCTION]] == ["balanceOf", "transfer"]
    assert AbiEntryKind.RECEIVE not in groups


def test_group_by_kind_is_a_partition(sample_abi: list[AbiEntry]) -> None:
    groups = group_by_kind(sample_abi)
    flattened = [entry for group in groups.values() for entry in group]
    assert len(flattened) == len(sample_abi)
    for kind, group in groups.items():
        assert all(entry.type == kind for entry in group)
        positions = [next(i for i, e in enumerate(sample_abi) if e is entry) for entry in group]
        assert positions == sorted(positions)


def test_group_by_kind_empty() -> None:
    assert group_by_kind([]) == {}


def test_balance_of_scenario() -> None:
    entries = AbiService.validate(
        '[{"type":"function","name":"balanceOf","inputs":[{"name":"owner","type":"address"}],'
        '"outputs":[{"name":"","type":"uint256"}],"stateMutability":"view"}]'
    )
    assert group_by_kind(entries) == {"function": entries}
    assert format_type(entries[0].inputs[0]) == "address"


@pytest.mark.parametrize(
    "value, color",
    [
        ("pure", "text-green-400"),
        ("view", "text-blue-400"),
        ("nonpayable", "text-yellow-400"),
        ("payable", "text-red-400"),
        (None, "text-gray-400"),
        ("constant", "text-gray-400"),
    ],
)
def test_state_mutability_color(value: str | None, color: str) -> None:
    assert state_mutability_color(value) == color


@pytest.mark.parametrize(
    "value, color",
    [
        ("function", "text-blue-400"),
        (AbiEntryKind.CONSTRUCTOR, "text-purple-400"),
        ("event", "text-green-400"),
        ("error", "text-red-400"),
        ("fallback", "text-gray-400"),
        ("receive", "text-gray-400"),
        ("bogus", "text-gray-400"),
    ],
)
def test_entry_kind_color(value: str, color: str) -> None:
    assert entry_kind_color(value) == color


def test_labels_fall_back() -> None:
    assert state_mutability_label(None) == "Unknown state mutability"
    assert state_mutability_label("view") == "View function - reads state but does not modify"
    assert entry_kind_label("event") == "Contract event"
    assert entry_kind_label(AbiEntryKind.RECEIVE) == "Contract receive"
    assert entry_kind_label("bogus") == "Contract bogus"


def test_entry_title_falls_back_to_kind(sample_abi: list[AbiEntry]) -> None:
    assert entry_title(sample_abi[0]) == "balanceOf"
    assert entry_title(sample_abi[3]) == "constructor"


def test_describe_entry(sample_abi: list[AbiEntry]) -> None:
    view = describe_entry(sample_abi[0])
    assert view["title"] == "balanceOf"
    assert view["kind_color"] == "text-blue-400"
    assert view["state_mutability"] == "view"
    assert view["inputs"] == [{"name": "owner", "type": "address", "indexed": False}]
    assert view["outputs"] == [{"name": "", "type": "uint256"}]

    event_view = describe_entry(sample_abi[1])
    assert "state_mutability" not in event_view
    assert event_view["inputs"][0]["indexed"] is True


def test_summarize(sample_abi: list[AbiEntry]) -> None:
    summary = summarize(sample_abi)
    assert summary["total"] == 5
    assert summary["kinds"] == [
        {"kind": "function", "count": 2},
        {"kind": "event", "count": 1},
        {"kind": "constructor", "count": 1},
        {"kind": "error", "count": 1},
    ]
    assert [view["title"] for view in summary["groups"]["function"]] == ["balanceOf", "transfer"]
