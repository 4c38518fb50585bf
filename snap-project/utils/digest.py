# What it does: Turns a byte sequence into the 40-character identifier used to name objects in the store
# How it does: The default `checksum` strategy folds every byte into a 20-byte accumulator (XOR with a positional offset), then mixes each accumulator byte with the input length. It is a checksum, not a cryptographic hash, and is kept bit-for-bit so stores written by earlier tools stay readable. `sha1` is available as an opt-in strategy through the `core.digest` config key
# What data structure it uses: Byte array (the 20-byte accumulator), Dictionary (strategy name -> function)

import hashlib
import string

DIGEST_SIZE = 20
HEX_LENGTH = DIGEST_SIZE * 2
DEFAULT_ALGORITHM = 'checksum'


def checksum_digest(data):
    acc = bytearray(DIGEST_SIZE)
    for i, byte in enumerate(data):
        acc[i % DIGEST_SIZE] ^= (byte + (i & 0xFF)) & 0xFF

    length = len(data)
    for j in range(DIGEST_SIZE):
        acc[j] = (acc[j] * 131 + length) & 0xFF

    return acc.hex()


def sha1_digest(data):
    return hashlib.sha1(data).hexdigest()


_ALGORITHMS = {
    'checksum': checksum_digest,
    'sha1': sha1_digest,
}


def available_algorithms():
    return sorted(_ALGORITHMS)


def get_digest_function(name=DEFAULT_ALGORITHM): # Returns the digest strategy registered under `name`
    try:
        return _ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown digest algorithm '{name}'. Choose one of: {', '.join(available_algorithms())}"
        ) from None


def is_valid_digest(value): # True for exactly 40 lowercase hex characters
    return (
        isinstance(value, str)
        and len(value) == HEX_LENGTH
        and all(c in string.hexdigits and not c.isupper() for c in value)
    )
