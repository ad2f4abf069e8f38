from sss.field import Field, system_random


class Polynomial:
    """Random polynomial over a field with a fixed constant term"""

    def __init__(self, field: Field, constant: int, degree: int, rng=None):
        assert 0 <= constant < field.prime, \
            f"constant={constant:#x}; prime={field.prime:#x}"
        rng = rng or system_random
        self.field = field
        self.constant = constant
        self.coefficients = [rng.randrange(field.prime) for _ in range(degree)]

    @property
    def degree(self) -> int:
        return len(self.coefficients)

    def evaluate(self, x: int) -> int:
        """Evaluate at x, accumulating the power of x term by term"""
        prime = self.field.prime
        result = self.constant
        power = x
        for coefficient in self.coefficients:
            result = (result + coefficient * power) % prime
            power = (power * x) % prime
        return result

    __call__ = evaluate
