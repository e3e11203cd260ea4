from typing import Literal, NotRequired, TypedDict, Union

# Raw Starknet ABI JSON shapes, as returned by starknet_getClass


class AbiParameterDict(TypedDict):
    """Function input/output, struct member or enum variant"""

    name: NotRequired[str]
    type: str


class AbiFunctionDict(TypedDict):
    """Function Definition Entry"""

    type: Literal["function"]
    name: str
    inputs: NotRequired[list[AbiParameterDict]]
    outputs: NotRequired[list[AbiParameterDict]]
    state_mutability: NotRequired[Literal["view", "external"]]


class AbiEventDict(TypedDict):
    """Event Definition Entry"""

    type: Literal["event"]
    name: str
    kind: NotRequired[Literal["struct", "enum"]]
    inputs: NotRequired[list[AbiParameterDict]]


class AbiInterfaceDict(TypedDict):
    """Interface Entry grouping functions & events"""

    type: Literal["interface"]
    name: str
    items: list[AbiFunctionDict | AbiEventDict]


class AbiStructDict(TypedDict):
    """Struct Definition Entry"""

    type: Literal["struct"]
    name: str
    members: NotRequired[list[AbiParameterDict]]


class AbiEnumDict(TypedDict):
    """Enum Definition Entry"""

    type: Literal["enum"]
    name: str
    variants: NotRequired[list[AbiParameterDict]]


AbiEntryDict = Union[AbiFunctionDict, AbiEventDict, AbiInterfaceDict, AbiStructDict, AbiEnumDict, dict]
AbiJson = list[AbiEntryDict]
