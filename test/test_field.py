import hashlib
import random
import unittest

from Cryptodome.Util.number import isPrime

from sss.config import Config
from sss.field import Field, mod_inv, mod_sub


class FieldTest(unittest.TestCase):
    def test_prime_has_exact_bit_length(self):
        for bits in (17, 33, 65, 129):
            field = Field.new(bits)
            self.assertEqual(field.bit_length, bits)
            self.assertTrue(isPrime(field.prime))

    def test_rejects_small_fields(self):
        with self.assertRaises(AssertionError):
            Field.new(16)

    def test_field_bits_for_chunk(self):
        self.assertEqual(Config.field_bits(8), 65)
        field = Field.new(Config.field_bits(2))
        self.assertGreater(field.prime, 2 ** 16)

    def test_seeded_generator_is_deterministic(self):
        a = Field.new(65, random.Random(7))
        b = Field.new(65, random.Random(7))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_fingerprint(self):
        field = Field(65537)
        expected = hashlib.sha256((65537).to_bytes(3, "little")).hexdigest()
        self.assertEqual(field.fingerprint(), expected)
        self.assertNotEqual(field.fingerprint(), Field(65539).fingerprint())


class ModArithmeticTest(unittest.TestCase):
    def test_mod_sub_wraps_instead_of_going_negative(self):
        self.assertEqual(mod_sub(3, 5, 7), 5)
        self.assertEqual(mod_sub(5, 3, 7), 2)
        self.assertEqual(mod_sub(4, 4, 7), 0)

    def test_mod_inv(self):
        self.assertEqual(mod_inv(3, 7), 5)
        prime = 65537
        for a in (1, 2, 12345, prime - 1):
            self.assertEqual(a * mod_inv(a, prime) % prime, 1)

    def test_mod_inv_of_zero(self):
        with self.assertRaises(ZeroDivisionError):
            mod_inv(7, 7)


if __name__ == '__main__':
    unittest.main()
