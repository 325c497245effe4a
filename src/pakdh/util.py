import os, binascii, math
from .errors import EntropyError

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def number_to_bytes(num, maxval):
    if num > maxval:
        raise ValueError
    num_bytes = size_bytes(maxval)
    fmt_str = "%0" + str(2*num_bytes) + "x"
    s_hex = fmt_str % num
    s = binascii.unhexlify(s_hex.encode("ascii"))
    assert len(s) == num_bytes
    assert isinstance(s, bytes)
    return s

def bytes_to_number(s):
    if not isinstance(s, bytes):
        raise TypeError
    return int(binascii.hexlify(s), 16)

def number_to_hex(num):
    """Big-endian lowercase hex with no leading zeros. This is the wire
    encoding for blinded values and the text hashed into S1/S2/K."""
    if not isinstance(num, int) or isinstance(num, bool):
        raise TypeError("number_to_hex requires an int")
    if num < 0:
        raise ValueError("negative numbers have no wire encoding")
    return "%x" % num

def hex_to_number(s):
    if isinstance(s, bytes):
        try:
            s = s.decode("ascii")
        except UnicodeDecodeError:
            raise ValueError("hex string must be ASCII")
    if not isinstance(s, str):
        raise TypeError("hex_to_number requires str or bytes")
    # int(s, 16) would also accept "0x", "_" and whitespace
    if not s or s.strip("0123456789abcdefABCDEF"):
        raise ValueError("not a hex string: %r" % (s[:20],))
    return int(s, 16)

def generate_mask(num_bits):
    num_bytes = int(math.ceil(num_bits / 8))
    leftover_bits = num_bits % 8
    if leftover_bits:
        top_byte_mask_int = (0x1 << leftover_bits) - 1
    else:
        top_byte_mask_int = 0xff
    assert 0 <= top_byte_mask_int <= 0xff
    return (top_byte_mask_int, num_bytes)

def random_exponent(num_bits, entropy_f=os.urandom):
    """Return a random integer of exactly num_bits bits.

    The top bit is always set, so the result lies in
    [2**(num_bits-1), 2**num_bits). entropy_f is expected to behave like
    os.urandom; a short read is fatal.
    """
    top_byte_mask_int, num_bytes = generate_mask(num_bits)
    raw = entropy_f(num_bytes)
    if not isinstance(raw, bytes) or len(raw) != num_bytes:
        raise EntropyError("entropy source returned a short read,"
                           " wanted %d bytes" % num_bytes)
    masked = bytes([raw[0] & top_byte_mask_int]) + raw[1:]
    r = bytes_to_number(masked) | (1 << (num_bits - 1))
    if r.bit_length() != num_bits:
        raise EntropyError("random exponent has %d bits, wanted %d"
                           % (r.bit_length(), num_bits))
    return r
