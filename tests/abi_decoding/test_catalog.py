import dataclasses

import pytest

from nethermind.cairo_decoder.decoding import build_catalog
from nethermind.cairo_decoder.types.decoding import (
    ArrayType,
    EventDef,
    FunctionDef,
    PrimitiveType,
    StructRef,
)


def test_catalog_registries(token_catalog):
    assert [f.name for f in token_catalog.functions] == [
        "name",
        "decimals",
        "balance_of",
        "get_point",
        "get_positions",
        "get_bytes",
        "symbol",
        "maybe_count",
        "get_stats",
        "decimals",
    ]
    assert [e.name for e in token_catalog.events] == ["example::token::Transfer", "example::token::Event"]
    assert [s.name for s in token_catalog.structs] == [
        "core::integer::u256",
        "core::byte_array::ByteArray",
        "example::token::Point",
        "example::token::Position",
    ]
    assert [e.name for e in token_catalog.enums] == ["core::bool", "core::option::Option::<core::integer::u32>"]


def test_ignored_entry_types(token_catalog):
    function_names = {f.name for f in token_catalog.functions}
    assert "constructor" not in function_names
    assert "handle_deposit" not in function_names
    assert "TokenImpl" not in {i.name for i in token_catalog.interfaces}


def test_interface_items_are_kept(token_catalog):
    assert len(token_catalog.interfaces) == 1

    interface = token_catalog.interfaces[0]
    assert interface.name == "example::token::IToken"
    assert len(interface.items) == 9
    assert isinstance(interface.items[0], FunctionDef)
    assert isinstance(interface.items[-1], EventDef)

    # Interface items are the same entries that are flattened into the function list
    assert interface.items[0] is token_catalog.functions[0]


def test_parameter_parsing(token_catalog):
    balance_of = token_catalog.find_function("balance_of")
    assert balance_of.inputs[0].name == "account"
    assert balance_of.inputs[0].type == PrimitiveType("core::starknet::contract_address::ContractAddress")
    assert balance_of.outputs[0].name is None
    assert balance_of.outputs[0].type_name == "core::integer::u256"

    get_positions = token_catalog.find_function("get_positions")
    assert get_positions.outputs[0].type == ArrayType(StructRef("example::token::Position"))

    position = token_catalog.struct_registry()["example::token::Position"]
    assert [m.name for m in position.members] == ["owner", "point", "liquidity", "active"]
    assert position.members[1].type == StructRef("example::token::Point")


def test_events_have_no_variants(token_catalog):
    transfer = token_catalog.find_event("example::token::Transfer")
    assert transfer.kind == "struct"
    assert [i.name for i in transfer.inputs] == ["from", "to"]

    enum_event = token_catalog.find_event("example::token::Event")
    assert enum_event.kind == "enum"
    assert enum_event.variants == ()
    assert enum_event.inputs == ()


def test_first_function_match_is_returned(token_catalog):
    decimals = token_catalog.find_function("decimals")
    assert decimals.outputs[0].type == PrimitiveType("core::integer::u8")

    assert token_catalog.find_function("transfer") is None
    assert token_catalog.find_event("Approval") is None


def test_missing_optional_fields_default_to_empty():
    catalog = build_catalog(
        [
            {"type": "function", "name": "ping"},
            {"type": "event", "name": "Pinged"},
            {"type": "struct", "name": "example::Empty"},
            {"type": "enum", "name": "example::Never"},
            {"type": "interface", "name": "example::IEmpty", "items": []},
        ]
    )

    assert catalog.functions[0].inputs == ()
    assert catalog.functions[0].outputs == ()
    assert catalog.events[0].inputs == ()
    assert catalog.structs[0].members == ()
    assert catalog.enums[0].variants == ()
    assert catalog.interfaces[0].items == ()


def test_struct_registry_last_definition_wins():
    catalog = build_catalog(
        [
            {"type": "struct", "name": "example::Pair", "members": [{"name": "a", "type": "u8"}]},
            {"type": "struct", "name": "example::Pair", "members": [{"name": "b", "type": "u16"}]},
        ]
    )

    assert len(catalog.structs) == 2
    assert catalog.struct_registry()["example::Pair"].members[0].name == "b"


def test_catalog_is_read_only(token_catalog):
    with pytest.raises(dataclasses.FrozenInstanceError):
        token_catalog.functions = ()  # type: ignore

    with pytest.raises(TypeError):
        token_catalog.struct_registry()["example::token::Point"] = None  # type: ignore


def test_function_signature_strings(token_catalog):
    assert token_catalog.find_function("get_bytes").id_str() == "get_bytes() -> (Array<core::integer::u8>)"
    assert (
        token_catalog.find_function("balance_of").id_str()
        == "balance_of(account:core::starknet::contract_address::ContractAddress) -> (core::integer::u256)"
    )
