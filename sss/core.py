"""
Chunked Shamir secret sharing.

The secret is cut into chunks of chunk_size bytes, each chunk is the constant
term of its own random polynomial, and share k holds every polynomial
evaluated at x = k. Reconstruction interpolates each chunk back at x = 0.
"""
import logging

from sss.config import Config
from sss.errors import (
    ChunkLayoutMismatch,
    DuplicateKey,
    FieldMismatch,
    InsufficientShares,
    InvalidKey,
    NoShares,
)
from sss.field import Field, mod_inv, mod_sub
from sss.polynomial import Polynomial
from sss.shares import Share, Value

logger = logging.getLogger(__name__)


def distribute(secret: bytes, chunk_size: int, n: int, threshold: int, rng=None) -> list:
    """
    Split secret into n shares, any threshold of which recover it.

    Args:
        secret: bytes to protect
        chunk_size: byte length of one chunk; the last chunk may be shorter
        n: number of shares
        threshold: minimum number of shares needed to reconstruct
        rng: random.Random-like source for the prime and coefficients

    Returns:
        n shares keyed 1..n, each holding one value per chunk
    """
    assert chunk_size >= 1, "chunk_size must be at least 1"
    assert 1 <= threshold <= n, f"threshold must be in 1..{n}, got {threshold}"

    field = Field.new(Config.field_bits(chunk_size), rng)
    shares = [Share(key, field) for key in range(1, n + 1)]

    for offset in range(0, len(secret), chunk_size):
        chunk = secret[offset:offset + chunk_size]
        polynomial = Polynomial(field, int.from_bytes(chunk, "little"), threshold - 1, rng)
        for share in shares:
            share.values.append(Value(polynomial.evaluate(share.key), len(chunk)))

    logger.debug("Distributed %d bytes as %d chunks over %d shares (threshold %d)",
                 len(secret), shares[0].chunk_count, n, threshold)
    return shares


def beta(prime: int, current: Share, shares) -> int:
    """Lagrange weight of current at x = 0: product of xi / (xi - x) over the others"""
    x = current.key
    result = 1
    for s in shares:
        if s.key == x:
            continue
        xi = s.key
        factor = xi * mod_inv(mod_sub(xi, x, prime), prime)
        result = (result * factor) % prime
    return result


def validate_shares(shares):
    """Check that shares could have come from a single distribute call"""
    first = shares[0]
    prime = first.prime
    layout = first.chunk_lengths()
    seen = set()
    for s in shares:
        if isinstance(s.key, bool) or not isinstance(s.key, int) or s.key < 1:
            raise InvalidKey(s.key)
        if s.field != first.field:
            raise FieldMismatch(s.key)
        # keys are points in the field, so compare them mod p
        residue = s.key % prime
        if residue == 0:
            raise InvalidKey(s.key)
        if residue in seen:
            raise DuplicateKey(s.key)
        seen.add(residue)
        if s.chunk_lengths() != layout:
            raise ChunkLayoutMismatch(s.key)


def reconstruct(shares, strict=None, threshold=None) -> bytes:
    """
    Recover the secret from a subset of shares.

    Fewer shares than the distribution threshold give a wrong result that
    cannot be detected here, unless threshold is passed.

    Raises:
        NoShares: shares is empty
        InsufficientShares: threshold given and not met
        InvalidKey, DuplicateKey, FieldMismatch, ChunkLayoutMismatch:
            strict validation failed
    """
    shares = list(shares)
    if not shares:
        raise NoShares()
    if threshold is not None and len(shares) < threshold:
        raise InsufficientShares(threshold, len(shares))

    if strict is None:
        strict = Config.STRICT_VALIDATION
    if strict:
        validate_shares(shares)
    else:
        logger.debug("Reconstructing without share validation")

    prime = shares[0].prime
    betas = [beta(prime, s, shares) for s in shares]

    result = bytearray()
    for chunk, first_value in enumerate(shares[0].values):
        acc = 0
        for s, b in zip(shares, betas):
            acc = (acc + s.values[chunk].value * b) % prime
        raw = acc.to_bytes((acc.bit_length() + 7) // 8, "little")
        result += raw[:first_value.length].ljust(first_value.length, b"\0")

    logger.debug("Reconstructed %d bytes from %d shares", len(result), len(shares))
    return bytes(result)
