# functions.py
# Operations on words and logical functions, NIST FIPS 180-4 Sections 3.2 and 4.1.1

from __future__ import annotations

from constants import WORD_BIT_LENGTH, WORD_MASK


def rotl(x: int, n: int, w: int = WORD_BIT_LENGTH) -> int:
    '''Rotate Left (circular left shift) operation'''
    return ((x << n) | (x >> (w - n))) & WORD_MASK


def choice(x: int, y: int, z: int) -> int:
    '''Ch(x, y, z), rounds 0-19'''
    return (x & y) | (~x & z)

def parity(x: int, y: int, z: int) -> int:
    '''Parity(x, y, z), rounds 20-39 and 60-79'''
    return x ^ y ^ z

def majority(x: int, y: int, z: int) -> int:
    '''Maj(x, y, z), rounds 40-59'''
    return (x & y) | (x & z) | (y & z)


# f(t) for each group of 20 rounds
ROUND_FUNCTIONS: tuple = (choice, parity, majority, parity)


__all__: list = ['rotl', 'choice', 'parity', 'majority', 'ROUND_FUNCTIONS']
