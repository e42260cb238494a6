import random
import string
from typing import AbstractSet, Optional

from .errors import CapacityExhausted


class CodeGenerator:
    """Draws short join codes that are not in use by an active session."""

    def __init__(self, length: int = 4, alphabet: str = string.ascii_uppercase,
                 max_attempts: int = 1000, rng: Optional[random.Random] = None):
        if length < 1:
            raise ValueError('length must be positive')
        if not alphabet:
            raise ValueError('alphabet must not be empty')
        if max_attempts < 1:
            raise ValueError('max_attempts must be positive')
        self.length = length
        self.alphabet = alphabet
        self.max_attempts = max_attempts
        self._rng = rng or random.Random()

    def generate(self, existing_codes: AbstractSet[str]) -> str:
        """Return a code absent from ``existing_codes``.

        The whole code is redrawn on collision. Raises CapacityExhausted
        once ``max_attempts`` candidates have all collided.
        """
        for _ in range(self.max_attempts):
            code = ''.join(self._rng.choices(self.alphabet, k=self.length))
            if code not in existing_codes:
                return code
        raise CapacityExhausted()
