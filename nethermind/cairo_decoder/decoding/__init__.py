from .byte_array import byte_array_to_hex, decode_byte_array, looks_like_byte_array
from .catalog import build_catalog
from .core import decode_core_type, decode_from_params, decode_from_types
from .function_decoders import FunctionResultDecoder, decode_function_result
from .type_parser import parse_type
