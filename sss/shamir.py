from sss.config import Config
from sss.core import distribute, reconstruct


class ShamirSecretSharing:
    """Implementation of Shamir's Secret Sharing scheme"""

    def __init__(self, threshold: int, total_shares: int,
                 chunk_size: int = Config.DEFAULT_CHUNK_SIZE, rng=None):
        if not 1 <= threshold <= total_shares:
            raise ValueError(f"Threshold must be between 1 and {total_shares}, got {threshold}")
        if Config.field_bits(chunk_size) < Config.MIN_FIELD_BITS:
            raise ValueError(f"Chunk size must be at least 2 bytes, got {chunk_size}")
        self.threshold = threshold
        self.total_shares = total_shares
        self.chunk_size = chunk_size
        self.rng = rng

    def split_secret(self, secret: bytes) -> list:
        """Split secret into shares"""
        return distribute(secret, self.chunk_size, self.total_shares, self.threshold, self.rng)

    def recover_secret(self, shares: list) -> bytes:
        """Recover secret from at least threshold shares"""
        return reconstruct(shares, threshold=self.threshold)
