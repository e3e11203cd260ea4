import logging

from eth_utils import is_0x_prefixed, to_hex

from nethermind.cairo_decoder.exceptions import InvalidValue

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("cairo_decoder").getChild("decoding")

# Starknet field prime.  Felts are residues mod this value
FIELD_PRIME = 2**251 + 17 * 2**192 + 1


def parse_felt(value: str | int | bytes, index: int = 0) -> int:
    """
    Converts a single raw result slot into an integer felt.  Accepts decimal strings, 0x-prefixed hex strings,
    python ints, and big-endian bytes.

    >>> from nethermind.cairo_decoder.decoding.utils import parse_felt
    >>> parse_felt("0x48656c6c6f")
    310939249775
    >>> parse_felt("42")
    42

    :param value: raw slot value
    :param index: position of the slot in the result, used for error reporting
    """
    if isinstance(value, bytes):
        return int.from_bytes(value, "big")

    if isinstance(value, int):
        felt = value
    else:
        text = value.strip()
        try:
            felt = int(text, 16) if is_0x_prefixed(text) else int(text, 10)
        except ValueError as e:
            raise InvalidValue("felt", index, f"could not parse {value!r}") from e

    if felt < 0:
        raise InvalidValue("felt", index, f"negative value {felt}")
    return felt


def parse_felts(values: list[str] | list[int] | list[bytes]) -> list[int]:
    """Converts a list of raw result slots into integer felts"""
    return [parse_felt(value, index) for index, value in enumerate(values)]


def felt_to_hex(value: int) -> str:
    """
    Renders a felt as a lowercase, 0x-prefixed hex string with no zero padding

    >>> felt_to_hex(0)
    '0x0'
    >>> felt_to_hex(255)
    '0xff'
    """
    return to_hex(value)


def felt_to_signed(value: int, bits: int) -> int:
    """
    Converts a felt encoded signed integer into a python int.  Negative values are stored as ``FIELD_PRIME - abs(x)``

    >>> felt_to_signed(FIELD_PRIME - 5, 8)
    -5
    >>> felt_to_signed(127, 8)
    127
    """
    if value > (FIELD_PRIME - 1) // 2:
        signed = value - FIELD_PRIME
        if signed < -(2 ** (bits - 1)):
            logger.debug(f"Signed value {signed} underflows i{bits}")
        return signed
    return value
