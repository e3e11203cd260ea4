from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping, Union


@dataclass(frozen=True, slots=True)
class PrimitiveType:
    """Core Cairo type stored by its textual name.  ie, ``u32`` or ``core::integer::u32``"""

    name: str

    def id_str(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ArrayType:
    """Length prefixed array of ``element`` values"""

    element: "StarknetType"

    def id_str(self) -> str:
        return f"Array<{self.element.id_str()}>"


@dataclass(frozen=True, slots=True)
class StructRef:
    """
    Reference to a struct by its fully qualified name.  Members are not stored on the reference, and are resolved
    from the struct registry at decode time
    """

    name: str

    def id_str(self) -> str:
        return self.name


StarknetType = Union[PrimitiveType, ArrayType, StructRef]


@dataclass(frozen=True, slots=True)
class AbiParameter:
    """Named & Typed ABI Parameter.  ``name`` is None for unnamed function outputs"""

    name: str | None
    type: StarknetType
    type_name: str

    def id_str(self) -> str:
        return f"{self.name}:{self.type.id_str()}" if self.name else self.type.id_str()


@dataclass(frozen=True, slots=True)
class StructDef:
    """Struct Definition with ordered members"""

    name: str
    members: tuple[AbiParameter, ...]


@dataclass(frozen=True, slots=True)
class EnumDef:
    """Enum Definition with ordered variants"""

    name: str
    variants: tuple[AbiParameter, ...]


@dataclass(frozen=True, slots=True)
class EventDef:
    """Event Definition.  Variants are not parsed, and are always empty"""

    name: str
    inputs: tuple[AbiParameter, ...]
    kind: Literal["struct", "enum"] = "enum"
    variants: tuple[AbiParameter, ...] = ()


@dataclass(frozen=True, slots=True)
class FunctionDef:
    """Function Definition with parsed inputs & outputs"""

    name: str
    inputs: tuple[AbiParameter, ...]
    outputs: tuple[AbiParameter, ...]

    def id_str(self) -> str:
        """Returns signature of the form ``name(param:type,...) -> (type,...)``"""
        inputs = ",".join(param.id_str() for param in self.inputs)
        outputs = ",".join(param.id_str() for param in self.outputs)
        return f"{self.name}({inputs}) -> ({outputs})"


@dataclass(frozen=True, slots=True)
class InterfaceDef:
    """Interface Definition retaining its declared functions & events"""

    name: str
    items: tuple[FunctionDef | EventDef, ...]


@dataclass(frozen=True)
class AbiCatalog:
    """
    Parsed Starknet ABI.  Built once with :func:`~nethermind.cairo_decoder.decoding.catalog.build_catalog`, and
    read-only afterwards, so a single catalog can be shared between any number of decode calls.

    Functions and events keep the order they are declared in, including those flattened out of interfaces.
    Duplicate names are kept, and lookups return the first match.
    """

    functions: tuple[FunctionDef, ...] = ()
    events: tuple[EventDef, ...] = ()
    structs: tuple[StructDef, ...] = ()
    enums: tuple[EnumDef, ...] = ()
    interfaces: tuple[InterfaceDef, ...] = ()

    _struct_registry: Mapping[str, StructDef] = field(init=False, repr=False, compare=False)
    _enum_registry: Mapping[str, EnumDef] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Later definitions overwrite earlier ones with the same name
        object.__setattr__(self, "_struct_registry", MappingProxyType({s.name: s for s in self.structs}))
        object.__setattr__(self, "_enum_registry", MappingProxyType({e.name: e for e in self.enums}))

    def find_function(self, name: str) -> FunctionDef | None:
        """Returns the first function declared with ``name``, or None"""
        return next((func for func in self.functions if func.name == name), None)

    def find_event(self, name: str) -> EventDef | None:
        """Returns the first event declared with ``name``, or None"""
        return next((event for event in self.events if event.name == name), None)

    def struct_registry(self) -> Mapping[str, StructDef]:
        """Read-only mapping of struct name to StructDef"""
        return self._struct_registry

    def enum_registry(self) -> Mapping[str, EnumDef]:
        """Read-only mapping of enum name to EnumDef"""
        return self._enum_registry


DecodedValue = Union[bool, int, str, list[Any], dict[str, Any]]
