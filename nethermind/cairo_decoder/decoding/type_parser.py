from nethermind.cairo_decoder.types.decoding import (
    ArrayType,
    PrimitiveType,
    StarknetType,
    StructRef,
)

# Short alias -> fully qualified Cairo 1 path.  Aliases that share a qualified name (felt & felt252) map to the
# same path
CORE_TYPE_ALIASES: dict[str, str] = {
    "bool": "core::bool",
    "felt": "core::felt252",
    "felt252": "core::felt252",
    "u8": "core::integer::u8",
    "u16": "core::integer::u16",
    "u32": "core::integer::u32",
    "u64": "core::integer::u64",
    "u128": "core::integer::u128",
    "u256": "core::integer::u256",
    "uint256": "core::integer::u256",
    "i8": "core::integer::i8",
    "i16": "core::integer::i16",
    "i32": "core::integer::i32",
    "i64": "core::integer::i64",
    "i128": "core::integer::i128",
    "contract_address": "core::starknet::contract_address::ContractAddress",
    "ContractAddress": "core::starknet::contract_address::ContractAddress",
    "class_hash": "core::starknet::class_hash::ClassHash",
    "ClassHash": "core::starknet::class_hash::ClassHash",
    "bytes31": "core::bytes_31::bytes31",
    "ByteArray": "core::byte_array::ByteArray",
}

PRIMITIVE_TYPES: frozenset[str] = frozenset(CORE_TYPE_ALIASES) | frozenset(CORE_TYPE_ALIASES.values())

ARRAY_CONTAINERS: tuple[str, ...] = ("core::array::Array", "core::array::Span", "Array", "Span")


def canonical_type_name(type_name: str) -> str:
    """
    Returns the fully qualified name for a core type alias.  Names that are not aliases are returned unchanged

    >>> canonical_type_name("u32")
    'core::integer::u32'
    >>> canonical_type_name("core::integer::u32")
    'core::integer::u32'
    """
    return CORE_TYPE_ALIASES.get(type_name, type_name)


def _unwrap_array(type_str: str) -> str | None:
    """Returns the inner type of ``Container::<Inner>``, or None if type_str is not a wrapped array"""
    for container in ARRAY_CONTAINERS:
        prefix = f"{container}::<"
        if type_str.startswith(prefix) and type_str.endswith(">"):
            return type_str[len(prefix) : -1]
    return None


def parse_type(type_str: str | StarknetType) -> StarknetType:
    """
    Parses a Cairo type string into a StarknetType.  Already parsed types are returned unchanged.

    >>> parse_type("core::array::Array::<core::integer::u32>")
    ArrayType(element=PrimitiveType(name='core::integer::u32'))
    >>> parse_type("felt*")
    ArrayType(element=PrimitiveType(name='felt'))
    >>> parse_type("openzeppelin::token::erc20::Balance")
    StructRef(name='openzeppelin::token::erc20::Balance')

    Unknown names without a namespace are returned as primitives, and fail with UnsupportedType only once they
    are decoded.

    :param type_str: Type string from ABI JSON
    """
    if not isinstance(type_str, str):
        return type_str

    inner = _unwrap_array(type_str)
    if inner is not None:
        return ArrayType(element=parse_type(inner))

    # Cairo 0 arrays are declared as felt*
    if type_str.endswith("*"):
        return ArrayType(element=parse_type(type_str[:-1]))

    if type_str in PRIMITIVE_TYPES:
        return PrimitiveType(name=type_str)

    if "::" in type_str:
        return StructRef(name=type_str)

    return PrimitiveType(name=type_str)
