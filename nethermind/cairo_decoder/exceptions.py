class DecodingError(Exception):
    """

    Raised when a Cairo call result cannot be decoded with the supplied ABI.  All decoding errors are terminal
    for the current decode call, and no partially decoded result is returned.

    """


class FunctionNotFound(DecodingError):
    """Raised when the requested function is not declared anywhere in the ABI"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Function {name} not found in ABI")


class UndefinedStruct(DecodingError):
    """Raised when a struct reference can not be resolved from the struct registry"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined struct: {name}")


class InvalidValue(DecodingError):
    """
    Raised when a required result slot is missing, or when a raw result slot can not be parsed as a felt.
    """

    def __init__(self, type_name: str, offset: int, reason: str | None = None):
        self.type_name = type_name
        self.offset = offset
        self.reason = reason
        message = f"Invalid {type_name} value at offset {offset}"
        super().__init__(f"{message}: {reason}" if reason else message)


class InvalidByteArray(DecodingError):
    """Raised when an explicit ByteArray field is malformed.  ie, the data_len slot is missing"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid ByteArray: {reason}")


class UnsupportedType(DecodingError):
    """
    Raised when a type has no known felt layout.  Enum typed fields raise this error, since the variant encoding
    is not decoded.
    """

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unsupported type: {type_name}")
