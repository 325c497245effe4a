from hashlib import sha256
from .errors import InternalInvariantError
from .util import bytes_to_number

# The independent random functions H1..H5 of RFC 5683, built from a
# single hash (see Bellare and Rogaway, "Random Oracles are Practical: A
# Paradigm for Designing Efficient Protocols", 1993). The RFC uses SHA-1;
# we use SHA-256 and keep the lower 128 bits of each digest, which is what
# deployed peers expect.
#
#  H1(z), H2(z) = SHA(t|1|z) mod 2^128 | ... | SHA(t|9|z) mod 2^128
#  H3(z) .. H5(z) = SHA(t|len(z)|z|z) mod 2^128
#
# t, the block index and len(z) are written as decimal text and simply
# concatenated with z, with no separators. This is part of the wire
# contract: changing it breaks interop silently.

BLOCK_BYTES = 16
EXTENDED_BLOCKS = 9
EXTENDED_BYTES = BLOCK_BYTES * EXTENDED_BLOCKS # 1152 bits
COMPACT_BYTES = BLOCK_BYTES # 128 bits

def lsb128(digest):
    # the 128 least significant bits of a big-endian digest
    return digest[-BLOCK_BYTES:]

def js_length(s):
    # the length JavaScript reports for a string: UTF-16 code units
    return len(s.encode("utf-16-le")) // 2

def _sha(text):
    return sha256(text.encode("utf-8")).digest()

def extended_oracle(message, t):
    """Return the 1152-bit H1/H2 output as an int.

    The width is fixed at 144 bytes before conversion, so a result whose
    leading bytes happen to be zero has bit_length() below 1152. Use
    number_to_bytes(h, 2**1152-1) rather than bit_length() to get the
    fixed-width form.
    """
    blocks = [lsb128(_sha(str(t) + str(i) + message))
              for i in range(1, EXTENDED_BLOCKS+1)]
    h = b"".join(blocks)
    if len(h) != EXTENDED_BYTES:
        raise InternalInvariantError("extended oracle produced %d bits,"
                                     " wanted %d"
                                     % (len(h)*8, EXTENDED_BYTES*8))
    return bytes_to_number(h)

def compact_oracle(message, t):
    h = lsb128(_sha(str(t) + str(js_length(message)) + message + message))
    if len(h) != COMPACT_BYTES:
        raise InternalInvariantError("compact oracle produced %d bits,"
                                     " wanted %d"
                                     % (len(h)*8, COMPACT_BYTES*8))
    return bytes_to_number(h)

def H1(message):
    return extended_oracle(message, 1)

def H2(message):
    return extended_oracle(message, 2)

def H3(message):
    return compact_oracle(message, 3)

def H4(message):
    return compact_oracle(message, 4)

def H5(message):
    return compact_oracle(message, 5)

# the oracles allowed for blinding a Diffie-Hellman public value
BLINDING_ORACLES = (H1, H2)
