import base64
import json

from sss.errors import CorruptShare
from sss.field import Field


class Value:
    """One evaluated chunk, with the byte length the chunk had in the secret"""
    __slots__ = ("value", "length")

    def __init__(self, value: int, length: int):
        self.value = value
        self.length = length

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return (self.value, self.length) == (other.value, other.length)

    def __repr__(self):
        return f"Value(value={self.value:#x}, length={self.length})"


class Share:
    """
    A participant's evaluation of every chunk polynomial at its key.

    All shares from one distribute call hold the same Field object and the
    same number of values, in chunk order.
    """

    def __init__(self, key: int, field: Field, values=None):
        self.key = key
        self.field = field
        self.values = values if values is not None else []

    @property
    def prime(self) -> int:
        return self.field.prime

    @property
    def chunk_count(self) -> int:
        return len(self.values)

    def chunk_lengths(self) -> list:
        return [v.length for v in self.values]

    def to_dict(self) -> dict:
        """JSON-safe form for storage; values are base64 little-endian bytes"""
        return {
            "key": self.key,
            "prime": format(self.field.prime, "x"),
            "field": self.field.fingerprint(),
            "values": [
                {
                    "length": v.length,
                    "value": base64.b64encode(
                        v.value.to_bytes((v.value.bit_length() + 7) // 8, "little")
                    ).decode('utf-8')
                }
                for v in self.values
            ]
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Share":
        try:
            field = Field(int(data["prime"], 16))
            fingerprint = data["field"]
            values = [
                Value(int.from_bytes(base64.b64decode(v["value"]), "little"),
                      int(v["length"]))
                for v in data["values"]
            ]
            key = int(data["key"])
        except (KeyError, TypeError, ValueError) as e:
            raise CorruptShare(f"Malformed share data: {e}") from e

        if key < 1:
            raise CorruptShare(f"Invalid participant key {key}")
        if any(v.length < 0 for v in values):
            raise CorruptShare(f"Negative chunk length in share {key}")

        if field.fingerprint() != fingerprint:
            raise CorruptShare(f"Field fingerprint mismatch for share {key}")
        return cls(key, field, values)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "Share":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CorruptShare(f"Share is not valid JSON: {e}") from e
        return cls.from_dict(data)

    def __repr__(self):
        return f"Share(key={self.key}, chunks={self.chunk_count}, field={self.field!r})"
