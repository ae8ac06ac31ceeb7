# constants.py
# SHA-1 constants, see definition in NIST FIPS 180-4.

# Initial Hash Values
# See definition in NIST FIPS 180-4, Section 5.3.1.
SHA1_INITIAL_HASH_VALUES: tuple = (
    0x67452301,
    0xEFCDAB89,
    0x98BADCFE,
    0x10325476,
    0xC3D2E1F0,
)

# ⌊2³⁰·√n⌋ for n in (2, 3, 5, 10), one per group of 20 rounds.
# See definition in NIST FIPS 180-4, Section 4.2.1.
K1: tuple = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)

WORD_MASK: int = 0xFFFFFFFF
WORD_BIT_LENGTH: int = 32

BLOCK_SIZE: int = 64  # bytes
BLOCK_WORDS: int = 16
LENGTH_FIELD_SIZE: int = 8  # bytes
ROUNDS: int = 80
DIGEST_SIZE: int = 20
