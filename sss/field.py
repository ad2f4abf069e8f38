import logging
import random

from Cryptodome.Util.number import getPrime
from cryptography.hazmat.primitives import hashes

from sss.config import Config

logger = logging.getLogger(__name__)

# Process-wide source used when no generator is injected
system_random = random.SystemRandom()


def mod_sub(a: int, b: int, prime: int) -> int:
    """(a - b) mod prime, adding the modulus first so operands never go negative"""
    return (a % prime + prime - b % prime) % prime


def mod_inv(a: int, prime: int) -> int:
    """Modular inverse via Fermat's little theorem, prime must be prime"""
    a %= prime
    if a == 0:
        raise ZeroDivisionError("0 has no inverse modulo a prime")
    return pow(a, prime - 2, prime)


class Field:
    """
    Prime field shared by every polynomial and share of one distribute call.
    The prime is fixed at construction; instances are never mutated.
    """
    __slots__ = ("_prime",)

    def __init__(self, prime: int):
        self._prime = prime

    @classmethod
    def new(cls, bit_length: int, rng=None) -> "Field":
        """Generate a field over a probable prime of exactly bit_length bits"""
        assert bit_length >= Config.MIN_FIELD_BITS, \
            f"field needs more than 16 bits, got {bit_length}"
        rng = rng or system_random
        prime = getPrime(bit_length, randfunc=rng.randbytes)
        logger.debug("Generated %d-bit prime for new field", bit_length)
        return cls(prime)

    @property
    def prime(self) -> int:
        return self._prime

    @property
    def bit_length(self) -> int:
        return self._prime.bit_length()

    def fingerprint(self) -> str:
        """SHA-256 digest of the prime, used to tell fields apart"""
        digest = hashes.Hash(hashes.SHA256())
        digest.update(self._prime.to_bytes((self.bit_length + 7) // 8, "little"))
        return digest.finalize().hex()

    def __eq__(self, other):
        if not isinstance(other, Field):
            return NotImplemented
        return self._prime == other._prime

    def __hash__(self):
        return hash(self._prime)

    def __repr__(self):
        return f"Field(bits={self.bit_length}, prime={self._prime:#x})"
