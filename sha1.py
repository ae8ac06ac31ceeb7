# sha1.py
# A naive Python implementation of SHA-1 (NIST FIPS 180-4, Section 6.1).

from __future__ import annotations

import typing as t
import warnings

from typing_extensions import deprecated

from constants import DIGEST_SIZE, BLOCK_SIZE, K1, ROUNDS, SHA1_INITIAL_HASH_VALUES, WORD_MASK
from functions import ROUND_FUNCTIONS, rotl
from preprocessing import align, normalize
from utils import ReadableBuffer, UnsupportedInputKind

digest_size: int = DIGEST_SIZE
block_size: int = BLOCK_SIZE
name: str = 'sha1'


def expand(block: t.Sequence[int]) -> list[int]:
    '''Message schedule W₀..W₇₉ for one 16-word block, Section 6.1.2 step 1'''
    W: list = list(block)
    for i in range(16, ROUNDS):
        W.append(rotl(W[i - 3] ^ W[i - 8] ^ W[i - 14] ^ W[i - 16], 1))
    return W


def compress(state: t.Sequence[int], W: t.Sequence[int]) -> tuple:
    '''Run the 80 rounds over *W* and add the result into *state*.

    Returns the new intermediate hash value; *state* itself is left untouched.'''
    a, b, c, d, e = state

    for i in range(ROUNDS):
        q = i // 20
        f = ROUND_FUNCTIONS[q](b, c, d)
        temp = (rotl(a, 5) + f + e + K1[q] + W[i]) & WORD_MASK
        a, b, c, d, e = temp, a, rotl(b, 30), c, d

    return tuple((x + y) & WORD_MASK for x, y in zip(state, (a, b, c, d, e)))


def encode(state: t.Sequence[int]) -> bytes:
    return b''.join(h.to_bytes(4, 'big') for h in state)


def _hash(data: ReadableBuffer, *, truncate_length: bool = False) -> bytes:
    message: bytes = normalize(data)
    H: tuple = SHA1_INITIAL_HASH_VALUES

    for block in align(message, len(message) * 8, truncate_length=truncate_length):
        H = compress(H, expand(block))

    return encode(H)


def _warn_if_for_security(usedforsecurity: bool) -> None:
    if usedforsecurity:
        warnings.warn(
            'SHA-1 is not considered secure for cryptographic purposes.',
            UserWarning,
            stacklevel=3,
        )


def digest_bytes(data: ReadableBuffer, *, usedforsecurity: bool = False) -> bytes:
    '''Return the 20-byte SHA-1 digest of *data*.'''
    _warn_if_for_security(usedforsecurity)
    return _hash(data)


def digest(data: ReadableBuffer, *, usedforsecurity: bool = False) -> str:
    """Return the SHA-1 digest of *data* as 40 lowercase hex digits.

    *data* may be text (hashed as UTF-8), any object supporting the buffer
    protocol, or a sequence of ints in range(256). Anything else raises
    UnsupportedInputKind.

    >>> digest('abc')
    'a9993e364706816aba3e25717850c26c9cd0d89d'
    """
    _warn_if_for_security(usedforsecurity)
    return _hash(data).hex()


@deprecated('legacy_digest() stores only 32 bits of the message length; use digest()')
def legacy_digest(data: ReadableBuffer) -> str:
    '''Digest with the length field truncated to its low 32 bits.

    Identical to digest() for inputs under 2²⁹ bytes.'''
    return _hash(data, truncate_length=True).hex()


__all__: list = [
    'digest',
    'digest_bytes',
    'legacy_digest',
    'expand',
    'compress',
    'encode',
    'digest_size',
    'block_size',
    'name',
    'UnsupportedInputKind',
]
