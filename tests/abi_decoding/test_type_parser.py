from nethermind.cairo_decoder.decoding.type_parser import canonical_type_name, parse_type
from nethermind.cairo_decoder.types.decoding import ArrayType, PrimitiveType, StructRef


def test_parse_primitives():
    assert parse_type("u8") == PrimitiveType("u8")
    assert parse_type("core::integer::u8") == PrimitiveType("core::integer::u8")
    assert parse_type("core::felt252") == PrimitiveType("core::felt252")
    assert parse_type("core::bool") == PrimitiveType("core::bool")
    assert parse_type("core::starknet::contract_address::ContractAddress") == PrimitiveType(
        "core::starknet::contract_address::ContractAddress"
    )
    assert parse_type("core::byte_array::ByteArray") == PrimitiveType("core::byte_array::ByteArray")
    assert parse_type("core::integer::u256") == PrimitiveType("core::integer::u256")


def test_parse_wrapped_arrays():
    assert parse_type("core::array::Array::<core::integer::u32>") == ArrayType(PrimitiveType("core::integer::u32"))
    assert parse_type("core::array::Span::<core::felt252>") == ArrayType(PrimitiveType("core::felt252"))
    assert parse_type("Array::<u8>") == ArrayType(PrimitiveType("u8"))

    nested = parse_type("core::array::Array::<core::array::Span::<core::integer::u8>>")
    assert nested == ArrayType(ArrayType(PrimitiveType("core::integer::u8")))

    struct_array = parse_type("core::array::Array::<example::token::Position>")
    assert struct_array == ArrayType(StructRef("example::token::Position"))


def test_parse_cairo_zero_arrays():
    assert parse_type("felt*") == ArrayType(PrimitiveType("felt"))
    assert parse_type("Uint256*") == ArrayType(PrimitiveType("Uint256"))


def test_parse_struct_references():
    assert parse_type("example::token::Point") == StructRef("example::token::Point")
    assert parse_type("core::option::Option::<core::integer::u32>") == StructRef(
        "core::option::Option::<core::integer::u32>"
    )


def test_unknown_types_are_deferred():
    assert parse_type("Uint256") == PrimitiveType("Uint256")
    assert parse_type("u512") == PrimitiveType("u512")


def test_parse_is_idempotent():
    parsed = parse_type("core::array::Array::<example::token::Point>")
    assert parse_type(parsed) is parsed
    assert parse_type(parse_type("u32")) == PrimitiveType("u32")


def test_canonical_type_names():
    assert canonical_type_name("felt") == "core::felt252"
    assert canonical_type_name("felt252") == "core::felt252"
    assert canonical_type_name("uint256") == "core::integer::u256"
    assert canonical_type_name("contract_address") == "core::starknet::contract_address::ContractAddress"
    assert canonical_type_name("example::token::Point") == "example::token::Point"
