import logging
from typing import Any, Sequence

from nethermind.cairo_decoder.types.abi import AbiParameterDict
from nethermind.cairo_decoder.types.decoding import (
    AbiCatalog,
    AbiParameter,
    EnumDef,
    EventDef,
    FunctionDef,
    InterfaceDef,
    StructDef,
)

from .type_parser import parse_type

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("cairo_decoder").getChild("catalog")


def parse_abi_parameter(param: AbiParameterDict) -> AbiParameter:
    """Parses the type string of a single ABI parameter"""
    return AbiParameter(name=param.get("name"), type=parse_type(param["type"]), type_name=param["type"])


def parse_abi_parameters(params: Sequence[AbiParameterDict] | None) -> tuple[AbiParameter, ...]:
    """Parses a list of ABI parameters.  Missing lists are treated as empty"""
    return tuple(parse_abi_parameter(param) for param in params or [])


def _parse_function(abi_entry: dict[str, Any]) -> FunctionDef:
    return FunctionDef(
        name=abi_entry["name"],
        inputs=parse_abi_parameters(abi_entry.get("inputs")),
        outputs=parse_abi_parameters(abi_entry.get("outputs")),
    )


def _parse_event(abi_entry: dict[str, Any]) -> EventDef:
    return EventDef(
        name=abi_entry["name"],
        inputs=parse_abi_parameters(abi_entry.get("inputs")),
        kind=abi_entry.get("kind", "enum"),
    )


def build_catalog(abi_json: Sequence[dict[str, Any]]) -> AbiCatalog:
    """
    Parses raw Starknet ABI JSON into an AbiCatalog.  Functions & events declared inside an interface are
    flattened into the top level function & event lists, and the interface itself is kept with its items.

    Constructors, impls, l1 handlers, and any other entry types are ignored.  Declaration order is kept within
    each list, and duplicate names are not removed.

    :param abi_json: List of ABI entries
    """
    functions: list[FunctionDef] = []
    events: list[EventDef] = []
    structs: list[StructDef] = []
    enums: list[EnumDef] = []
    interfaces: list[InterfaceDef] = []

    for abi_entry in abi_json:
        match abi_entry.get("type"):
            case "function":
                functions.append(_parse_function(abi_entry))

            case "event":
                events.append(_parse_event(abi_entry))

            case "interface":
                items: list[FunctionDef | EventDef] = []
                for item in abi_entry.get("items") or []:
                    match item.get("type"):
                        case "function":
                            interface_func = _parse_function(item)
                            functions.append(interface_func)
                            items.append(interface_func)
                        case "event":
                            interface_event = _parse_event(item)
                            events.append(interface_event)
                            items.append(interface_event)

                interfaces.append(InterfaceDef(name=abi_entry["name"], items=tuple(items)))

            case "struct":
                structs.append(
                    StructDef(name=abi_entry["name"], members=parse_abi_parameters(abi_entry.get("members")))
                )

            case "enum":
                enums.append(EnumDef(name=abi_entry["name"], variants=parse_abi_parameters(abi_entry.get("variants"))))

            case _:
                logger.debug(f"Skipping ABI entry of type {abi_entry.get('type')}")

    logger.info(
        f"Parsed ABI with {len(functions)} functions, {len(events)} events, {len(structs)} structs, "
        f"{len(enums)} enums and {len(interfaces)} interfaces"
    )

    return AbiCatalog(
        functions=tuple(functions),
        events=tuple(events),
        structs=tuple(structs),
        enums=tuple(enums),
        interfaces=tuple(interfaces),
    )
