from types import MappingProxyType
from typing import Any, Mapping, Sequence

from nethermind.cairo_decoder.exceptions import (
    InvalidValue,
    UndefinedStruct,
    UnsupportedType,
)
from nethermind.cairo_decoder.types.decoding import (
    AbiParameter,
    ArrayType,
    EnumDef,
    PrimitiveType,
    StarknetType,
    StructDef,
    StructRef,
)

from .byte_array import decode_byte_array, looks_like_byte_array
from .type_parser import PRIMITIVE_TYPES, canonical_type_name, parse_type
from .utils import felt_to_hex, felt_to_signed, logger

_EMPTY_REGISTRY: Mapping[str, Any] = MappingProxyType({})

_UNSIGNED = {
    "core::integer::u8",
    "core::integer::u16",
    "core::integer::u32",
    "core::integer::u64",
    "core::integer::u128",
}
_SIGNED_BITS = {
    "core::integer::i8": 8,
    "core::integer::i16": 16,
    "core::integer::i32": 32,
    "core::integer::i64": 64,
    "core::integer::i128": 128,
}
_HEX_IDENTIFIERS = {
    "core::starknet::contract_address::ContractAddress",
    "core::starknet::class_hash::ClassHash",
}


def _read_slot(values: Sequence[int], offset: int, type_name: str) -> int:
    if offset >= len(values):
        raise InvalidValue(type_name, offset, "missing result slot")
    return values[offset]


def decode_core_type(
    typ: StarknetType,
    values: Sequence[int],
    offset: int,
    structs: Mapping[str, StructDef] | None = None,
    enums: Mapping[str, EnumDef] | None = None,
    byte_array_heuristic: bool = True,
) -> tuple[Any, int]:
    """
    Decodes a single Cairo type from the felt buffer starting at ``offset``.  Returns the decoded value and the
    offset of the next unread slot.

    Structs are decoded member by member into dicts, arrays into lists.  Integers up to 128 bits and u256 are
    returned as python ints, felts, addresses, class hashes & ByteArrays as hex strings.

    :param typ: Parsed Cairo type
    :param values: felt buffer
    :param offset: index of the first slot to decode
    :param structs: Read-only mapping of struct name to StructDef
    :param enums: Read-only mapping of enum name to EnumDef.  Enum fields raise UnsupportedType
    :param byte_array_heuristic: If True, bare felts matching a ByteArray layout are decoded as ByteArrays
    """
    structs = structs or _EMPTY_REGISTRY
    enums = enums or _EMPTY_REGISTRY

    match typ:
        case StructRef(name=name):
            struct_def = structs.get(name)
            if struct_def is None:
                if name in enums:
                    raise UnsupportedType(name)
                raise UndefinedStruct(name)

            result: dict[str, Any] = {}
            for member in struct_def.members:
                result[member.name or ""], offset = decode_core_type(
                    parse_type(member.type), values, offset, structs, enums, byte_array_heuristic
                )
            return result, offset

        case ArrayType(element=element):
            length = values[offset] if offset < len(values) else 0
            offset += 1

            array: list[Any] = []
            for _ in range(length):
                element_start = offset
                value, offset = decode_core_type(element, values, offset, structs, enums, byte_array_heuristic)

                # Zero width elements never advance the offset, so their count is bounded by the buffer size
                if offset > len(values) or (offset == element_start and length > len(values)):
                    raise InvalidValue(element.id_str(), offset, "array extends past end of result")
                array.append(value)
            return array, offset

        case PrimitiveType(name=name) if name not in PRIMITIVE_TYPES and name in structs:
            # Cairo 0 struct names are not namespaced
            return decode_core_type(StructRef(name=name), values, offset, structs, enums, byte_array_heuristic)

        case PrimitiveType(name=name):
            return _decode_primitive(name, values, offset, byte_array_heuristic)

        case _:
            raise UnsupportedType(str(typ))


def _decode_primitive(name: str, values: Sequence[int], offset: int, byte_array_heuristic: bool) -> tuple[Any, int]:
    type_name = canonical_type_name(name)

    if type_name == "core::bool":
        return _read_slot(values, offset, name) != 0, offset + 1

    if type_name in _UNSIGNED:
        return _read_slot(values, offset, name), offset + 1

    if type_name in _SIGNED_BITS:
        return felt_to_signed(_read_slot(values, offset, name), _SIGNED_BITS[type_name]), offset + 1

    if type_name == "core::integer::u256":
        low = _read_slot(values, offset, name)
        high = _read_slot(values, offset + 1, name)
        return low + (high << 128), offset + 2

    if type_name in _HEX_IDENTIFIERS:
        return felt_to_hex(_read_slot(values, offset, name)), offset + 1

    if type_name == "core::bytes_31::bytes31":
        return _read_slot(values, offset, name), offset + 1

    if type_name == "core::felt252":
        felt = _read_slot(values, offset, name)
        if byte_array_heuristic and looks_like_byte_array(values, offset):
            logger.debug(f"Decoding felt {felt} at offset {offset} as ByteArray")
            return decode_byte_array(values, offset)
        return felt_to_hex(felt), offset + 1

    if type_name == "core::byte_array::ByteArray":
        return decode_byte_array(values, offset)

    raise UnsupportedType(name)


def decode_from_types(
    types: Sequence[StarknetType | str],
    values: Sequence[int],
    structs: Mapping[str, StructDef] | None = None,
    enums: Mapping[str, EnumDef] | None = None,
    byte_array_heuristic: bool = True,
) -> list[Any]:
    """
    Decodes a list of types positionally from a single felt buffer

    >>> decode_from_types(["u32", "core::array::Array::<core::integer::u8>"], [7, 2, 10, 20])
    [7, [10, 20]]
    """
    offset, results = 0, []
    for typ in types:
        value, offset = decode_core_type(parse_type(typ), values, offset, structs, enums, byte_array_heuristic)
        results.append(value)
    return results


def placeholder_name(index: int) -> str:
    """Name used for unnamed parameters.  Function outputs in Cairo 1 ABIs are never named"""
    return "data" if index == 0 else f"data_{index}"


def decode_from_params(
    params: Sequence[AbiParameter],
    values: Sequence[int],
    structs: Mapping[str, StructDef] | None = None,
    enums: Mapping[str, EnumDef] | None = None,
    byte_array_heuristic: bool = True,
) -> dict[str, Any]:
    """
    Decodes a list of ABI parameters from a single felt buffer into a dict keyed by parameter name
    """
    offset, result = 0, {}
    for index, param in enumerate(params):
        value, offset = decode_core_type(param.type, values, offset, structs, enums, byte_array_heuristic)
        result[param.name or placeholder_name(index)] = value
    return result
