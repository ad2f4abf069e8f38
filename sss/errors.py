class SSSError(ValueError):
    """Base class for secret sharing errors"""


class NoShares(SSSError):
    def __init__(self):
        super().__init__("No shares")


class InsufficientShares(SSSError):
    def __init__(self, threshold, got):
        self.threshold = threshold
        self.got = got
        super().__init__(f"Not enough shares. Need {threshold}, got {got}")


class InvalidKey(SSSError):
    def __init__(self, key):
        self.key = key
        super().__init__(f"Invalid participant key {key!r}, keys start at 1")


class DuplicateKey(SSSError):
    def __init__(self, key):
        self.key = key
        super().__init__(f"Participant key {key} appears more than once")


class FieldMismatch(SSSError):
    def __init__(self, key):
        self.key = key
        super().__init__(f"Share {key} was produced over a different field")


class ChunkLayoutMismatch(SSSError):
    def __init__(self, key):
        self.key = key
        super().__init__(f"Share {key} has a different chunk layout")


class CorruptShare(SSSError):
    pass
