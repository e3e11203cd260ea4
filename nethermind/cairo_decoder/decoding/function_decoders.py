import logging
from typing import Any, Sequence

from nethermind.cairo_decoder.exceptions import FunctionNotFound
from nethermind.cairo_decoder.types.decoding import AbiCatalog, FunctionDef

from .catalog import build_catalog
from .core import decode_from_params
from .utils import parse_felts

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("cairo_decoder").getChild("decoding")


class FunctionResultDecoder:
    """
    Decodes call results for the functions of a single Starknet ABI.  The catalog and its struct & enum registries
    are built once, and are never mutated, so a decoder can be shared between threads.
    """

    catalog: AbiCatalog
    byte_array_heuristic: bool

    def __init__(self, catalog: AbiCatalog, byte_array_heuristic: bool = True):
        self.catalog = catalog
        self.byte_array_heuristic = byte_array_heuristic

    @classmethod
    def from_abi(cls, abi_json: Sequence[dict[str, Any]], byte_array_heuristic: bool = True) -> "FunctionResultDecoder":
        """Parses raw ABI JSON and returns a decoder for its functions"""
        return cls(build_catalog(abi_json), byte_array_heuristic=byte_array_heuristic)

    def get_function(self, function_name: str) -> FunctionDef:
        """Returns the first function named ``function_name``.  Raises FunctionNotFound if none is declared"""
        function = self.catalog.find_function(function_name)
        if function is None:
            raise FunctionNotFound(function_name)
        return function

    def decode(self, function_name: str, result: list[str] | list[int] | list[bytes]) -> dict[str, Any]:
        """
        Decodes the raw result of a call to ``function_name``.

        :param function_name: Name of the called function
        :param result: Raw result slots as decimal or hex strings, ints, or big-endian bytes
        :return: dict mapping output names to decoded values.  Unnamed outputs are keyed as data, data_1, ...
        """
        function = self.get_function(function_name)

        values = parse_felts(result)
        logger.debug(f"Decoding {len(values)} result felts for {function.id_str()}")

        return decode_from_params(
            function.outputs,
            values,
            structs=self.catalog.struct_registry(),
            enums=self.catalog.enum_registry(),
            byte_array_heuristic=self.byte_array_heuristic,
        )

    def id_str(self, function_name: str, full_signature: bool = True) -> str:
        """
        If full_signature is true, returns function name with parameter names and types.
        If false, returns function name
        """
        function = self.get_function(function_name)
        if full_signature:
            return function.id_str()
        return function.name


def decode_function_result(
    result: list[str] | list[int] | list[bytes],
    function_name: str,
    abi_json: Sequence[dict[str, Any]] | AbiCatalog,
    byte_array_heuristic: bool = True,
) -> dict[str, Any]:
    """
    Decodes the result of a Starknet contract call into a dict keyed by output name.

    >>> abi = [{"type": "function", "name": "get_count", "inputs": [], "outputs": [{"type": "core::integer::u32"}]}]
    >>> decode_function_result(["0x5"], "get_count", abi)
    {'data': 5}

    :param result: Raw result slots returned by starknet_call
    :param function_name: Name of the called function
    :param abi_json: Raw ABI JSON, or an already built AbiCatalog to skip re-parsing
    :param byte_array_heuristic: If True, felts matching a ByteArray layout are decoded as ByteArrays
    """
    catalog = abi_json if isinstance(abi_json, AbiCatalog) else build_catalog(abi_json)
    return FunctionResultDecoder(catalog, byte_array_heuristic=byte_array_heuristic).decode(function_name, result)
