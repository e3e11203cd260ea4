"""
ByteArray layout in a flat felt buffer::

    [data_len, data_word_0, ..., data_word_{data_len - 1}, pending_word, pending_word_len]

Each data word holds 31 big-endian bytes, and the pending word holds the trailing ``pending_word_len`` bytes.
"""

from nethermind.cairo_decoder.exceptions import InvalidByteArray

from .utils import felt_to_hex, logger

BYTES_PER_WORD = 31

# Felts at or below this value are checked for a ByteArray layout when decoding a bare felt
MAX_HEURISTIC_DATA_LEN = 10

MAX_PENDING_WORD_LEN = 31

# Explicit ByteArrays with more data words than this are treated as plain felts
MAX_BYTE_ARRAY_DATA_LEN = 1000


def _word_to_bytes(word: int, length: int) -> bytes:
    """Returns the low ``length`` bytes of word in big-endian order"""
    return (word & ((1 << (8 * length)) - 1)).to_bytes(length, "big")


def byte_array_to_hex(data_words: list[int], pending_word: int, pending_word_len: int) -> str:
    """
    Concatenates 31 byte data words and the pending word into one 0x-prefixed hex string

    >>> byte_array_to_hex([], 0x48656c6c6f, 5)
    '0x48656c6c6f'

    :param data_words: full 31 byte words
    :param pending_word: trailing partial word
    :param pending_word_len: number of bytes stored in the pending word
    """
    data = b"".join(_word_to_bytes(word, BYTES_PER_WORD) for word in data_words)
    if pending_word_len > 0:
        data += _word_to_bytes(pending_word, pending_word_len)

    return "0x" + data.hex()


def looks_like_byte_array(values: list[int], offset: int) -> bool:
    """
    Decides if the felt at ``offset`` is the data_len of a ByteArray rather than a plain felt.  A felt is treated
    as a ByteArray when:

    * its value is at most ``MAX_HEURISTIC_DATA_LEN``
    * the buffer holds every data word, the pending word & the pending word length
    * the pending word length is in the range (0, 31]

    Small felts followed by a matching pattern are misclassified as ByteArrays.  Pass
    ``byte_array_heuristic=False`` to the decoder to always decode felts as single slots.
    """
    data_len = values[offset]
    if data_len > MAX_HEURISTIC_DATA_LEN:
        return False

    pending_len_index = offset + data_len + 2
    if pending_len_index >= len(values):
        return False

    return 0 < values[pending_len_index] <= MAX_PENDING_WORD_LEN


def decode_byte_array(values: list[int], offset: int) -> tuple[str, int]:
    """
    Decodes a ByteArray starting at ``offset``.  Returns the hex encoded bytes and the offset of the next
    unread slot.

    If data_len is larger than ``MAX_BYTE_ARRAY_DATA_LEN``, or the buffer is too short to hold the full layout,
    the first slot is returned as a hex felt and a single slot is consumed.

    :param values: felt buffer
    :param offset: index of the data_len slot
    """
    if offset >= len(values):
        raise InvalidByteArray("missing length")

    data_len = values[offset]
    if data_len > MAX_BYTE_ARRAY_DATA_LEN or offset + data_len + 3 > len(values):
        logger.debug(f"Felt {data_len} at offset {offset} is not a valid ByteArray length.  Decoding as felt")
        return felt_to_hex(data_len), offset + 1

    data_start = offset + 1
    pending_index = data_start + data_len

    pending_word_len = values[pending_index + 1]
    if pending_word_len > MAX_PENDING_WORD_LEN:
        raise InvalidByteArray(f"pending word length {pending_word_len} exceeds {MAX_PENDING_WORD_LEN} bytes")

    hex_string = byte_array_to_hex(values[data_start:pending_index], values[pending_index], pending_word_len)
    return hex_string, pending_index + 2
