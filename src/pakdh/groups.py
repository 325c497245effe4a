import os
from .util import size_bits, size_bytes, random_exponent

"""Interface notes for the PAK-DH group.

PAK-DH works in the multiplicative group of integers modulo a safe prime
N, with a fixed generator g. Unlike SPAKE2-style groups, the protocol
never reduces blinded values modulo N: a Diffie-Hellman public value is
multiplied by a 1152-bit hash output as a plain integer, and the receiver
removes the factor again with exact integer division. So this class
exposes ordinary big-integer multiply/divide next to modular
exponentiation, and callers must not swap one for the other.

    G = lookup(1024)

    r = G.random_exponent(entropy_f)   # exactly G.exponent_size_bits bits
    e = G.modpow(r)                    # g^r mod N
    c = G.multiply(a, b)               # a*b, no reduction
    a = G.divide(c, b)                 # c//b, reverses multiply()
"""

# RFC 5683 section 3: "if short exponents are used for Diffie-Hellman
# parameters Ra and Rb, then they should have a minimum size of 384 bits".
MIN_EXPONENT_BITS = 384

class IntegerGroup:
    def __init__(self, N, g, exponent_size_bits=MIN_EXPONENT_BITS):
        assert N % 2 == 1
        assert 1 < g < N
        assert exponent_size_bits >= MIN_EXPONENT_BITS
        # these are the public system parameters
        self.N = N # the safe prime modulus
        self.g = g # the generator
        self.element_size_bits = size_bits(self.N)
        self.element_size_bytes = size_bytes(self.N)
        self.exponent_size_bits = exponent_size_bits

    def random_exponent(self, entropy_f=os.urandom):
        return random_exponent(self.exponent_size_bits, entropy_f)

    def modpow(self, x):
        # pow() is not constant-time in the exponent. The exponents here are
        # either fresh ephemeral secrets or public values, never the password.
        if not isinstance(x, int):
            raise TypeError("modpow requires an int exponent")
        return pow(self.g, x, self.N)

    def multiply(self, a, b):
        return a * b

    def divide(self, a, b):
        # exact division reversing multiply(), not a modular inverse
        if b == 0:
            raise ZeroDivisionError("divide() by zero")
        return a // b

    def __repr__(self):
        return "<IntegerGroup %d-bit>" % self.element_size_bits
