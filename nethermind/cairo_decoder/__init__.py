from nethermind.cairo_decoder.decoding import (
    FunctionResultDecoder,
    build_catalog,
    decode_core_type,
    decode_from_params,
    decode_from_types,
    decode_function_result,
    parse_type,
)
from nethermind.cairo_decoder.exceptions import (
    DecodingError,
    FunctionNotFound,
    InvalidByteArray,
    InvalidValue,
    UndefinedStruct,
    UnsupportedType,
)
from nethermind.cairo_decoder.types.decoding import AbiCatalog
