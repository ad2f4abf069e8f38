# Global configuration for the secret sharing library
import logging
import os

class Config:
    # Field parameters
    MIN_FIELD_BITS = 17  # smaller fields cannot hold meaningful chunks
    DEFAULT_CHUNK_SIZE = 8  # bytes per chunk, 65-bit field

    # Reconstruction
    STRICT_VALIDATION = True

    # Logging
    LOG_LEVEL = os.environ.get("SSS_LOG_LEVEL", "WARNING")
    LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"

    # Research parameters
    PERFORMANCE_SAMPLES = 100  # For benchmarking
    BENCH_SECRET_LENGTH = 1024
    BENCH_CHUNK_SIZE = 8
    BENCH_SHARES = 10
    BENCH_THRESHOLD = 10
    BENCH_RESULTS = os.path.join("data", "performance_results.json")

    @classmethod
    def field_bits(cls, chunk_size):
        return chunk_size * 8 + 1

    @classmethod
    def configure_logging(cls, level=None):
        logging.basicConfig(level=level or cls.LOG_LEVEL, format=cls.LOG_FORMAT)
