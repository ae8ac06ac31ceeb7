# preprocessing.py
# Input normalization and message padding, see NIST FIPS 180-4, Sections 5.1 and 5.2

from __future__ import annotations

import typing as t

from constants import BLOCK_SIZE, BLOCK_WORDS, LENGTH_FIELD_SIZE, WORD_MASK
from utils import ReadableBuffer, UnsupportedInputKind


def _encode_text(text: str) -> bytes:
    '''UTF-8 encode *text*, joining surrogate pairs and replacing lone
    surrogates with U+FFFD the way a browser TextEncoder does.'''
    try:
        return text.encode('utf-8')
    except UnicodeEncodeError:
        text = text.encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'replace')
        return text.encode('utf-8')


def normalize(value: ReadableBuffer) -> bytes:
    '''Return *value* as bytes. Text is UTF-8 encoded, buffers are copied as-is.'''
    if isinstance(value, str):
        return _encode_text(value)

    try:
        view = memoryview(value)
    except TypeError:
        view = None

    if view is not None:
        # Raw contents regardless of item format or strides
        return view.tobytes()

    if isinstance(value, t.Sequence):
        try:
            return bytes(value)
        except (TypeError, ValueError) as exc:
            raise UnsupportedInputKind(value, str(exc)) from exc

    raise UnsupportedInputKind(value)


def block_count(length: int) -> int:
    '''Number of 512-bit blocks needed for a message of *length* bytes'''
    return (length + LENGTH_FIELD_SIZE) // BLOCK_SIZE + 1


def pad(message: bytes, message_len: int, *, truncate_length: bool = False) -> bytearray:
    """The purpose of this padding is to ensure that the padded
    message is a multiple of 512 bits. See definition in NIST FIPS 180-4,
    Section 5.1.1

    With *truncate_length* only the low 32 bits of *message_len* are kept,
    which is what older pure-JS implementations did."""

    if truncate_length:
        message_len &= WORD_MASK

    size = block_count(len(message)) * BLOCK_SIZE

    padded = bytearray(message)
    padded.append(0x80)
    padded += bytes(size - LENGTH_FIELD_SIZE - len(padded))
    padded += message_len.to_bytes(LENGTH_FIELD_SIZE, 'big')
    return padded


def align(message: bytes, message_len: int, *, truncate_length: bool = False) -> list[list[int]]:
    '''Pad *message* and split it into blocks of 16 big-endian 32-bit words.

    *message_len* is the bit length written into the length field.'''
    padded = pad(message, message_len, truncate_length=truncate_length)
    words = [int.from_bytes(padded[i : i + 4], 'big') for i in range(0, len(padded), 4)]
    return [words[i : i + BLOCK_WORDS] for i in range(0, len(words), BLOCK_WORDS)]


__all__: list = ['normalize', 'block_count', 'pad', 'align']
