import unittest
from pakdh import params
from pakdh.groups import IntegerGroup, MIN_EXPONENT_BITS
from pakdh.parameters.i1024 import I1024
from pakdh.errors import ConfigurationError
from .common import PRG

class Group(unittest.TestCase):
    def test_constants(self):
        g = I1024
        self.assertEqual(g.element_size_bits, 1024)
        self.assertEqual(g.element_size_bytes, 128)
        self.assertEqual(g.exponent_size_bits, 384)
        self.assertEqual(g.g, 19)
        # the Oakley primes start and end with 64 one-bits
        self.assertEqual(g.N >> 960, 2**64-1)
        self.assertEqual(g.N & (2**64-1), 2**64-1)

    def test_random_exponent(self):
        fr = PRG(b"0")
        for i in range(50):
            r = I1024.random_exponent(fr)
            self.assertEqual(r.bit_length(), 384)

    def test_modpow(self):
        g = I1024
        self.assertEqual(g.modpow(0), 1)
        self.assertEqual(g.modpow(1), 19)
        self.assertEqual(g.modpow(2), 361)
        # g^(a+b) == g^a * g^b
        a, b = 2**300 + 7, 2**200 + 11
        self.assertEqual(g.modpow(a + b), (g.modpow(a) * g.modpow(b)) % g.N)
        # Fermat: g^(N-1) == 1
        self.assertEqual(g.modpow(g.N - 1), 1)
        e = g.modpow(g.random_exponent(PRG(b"1")))
        self.assertTrue(1 < e < g.N)
        self.assertRaises(TypeError, g.modpow, "2")

    def test_multiply_divide(self):
        g = I1024
        fr = PRG(b"2")
        e = g.modpow(g.random_exponent(fr))
        factor = 2**1151 + 99
        blinded = g.multiply(factor, e)
        # no reduction mod N
        self.assertTrue(blinded > g.N)
        self.assertEqual(blinded, factor * e)
        self.assertEqual(g.divide(blinded, factor), e)
        self.assertRaises(ZeroDivisionError, g.divide, blinded, 0)

    def test_divide_is_not_modular_inverse(self):
        g = I1024
        e = g.modpow(12345)
        factor = 2**1151 + 99
        reduced = g.multiply(factor, e) % g.N
        # reducing the product first breaks exact division
        self.assertEqual(g.divide(reduced, factor), 0)
        self.assertNotEqual(g.divide(reduced, factor), e)

    def test_small_group(self):
        g = IntegerGroup(N=23, g=5)
        self.assertEqual([g.modpow(i) for i in range(1, 5)], [5, 2, 10, 4])
        self.assertEqual(g.exponent_size_bits, MIN_EXPONENT_BITS)

    def test_bad_group(self):
        self.assertRaises(AssertionError, IntegerGroup, N=24, g=5)
        self.assertRaises(AssertionError, IntegerGroup, N=23, g=1)
        self.assertRaises(AssertionError, IntegerGroup, N=23, g=23)
        self.assertRaises(AssertionError, IntegerGroup, N=23, g=5,
                          exponent_size_bits=128)

class Registry(unittest.TestCase):
    def test_lookup(self):
        self.assertIs(params.lookup(1024), I1024)
        self.assertIs(params.lookup(), I1024)

    def test_unknown(self):
        self.assertRaises(ConfigurationError, params.lookup, 2048)
        self.assertRaises(ConfigurationError, params.lookup, 0)
        self.assertRaises(ConfigurationError, params.lookup, "1024")
        self.assertRaises(ConfigurationError, params.lookup, None)
        self.assertRaises(ConfigurationError, params.lookup, True)

    def test_read_only(self):
        def _add():
            params.GROUPS[2048] = I1024
        self.assertRaises(TypeError, _add)
        self.assertEqual(list(params.GROUPS), [1024])
