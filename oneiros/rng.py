import os

MASK64 = 0xFFFFFFFFFFFFFFFF


class Xorshift64:
    """
    Non-cryptographic xorshift generator (shifts 13, 17, 43 on a 64-bit word).

    A given seed always reproduces the same sequence, which is what makes a
    derivation replayable. Never use it for anything security related.
    """
    __slots__ = ("_state",)

    def __init__(self, seed=0):
        self._state = 0
        self.seed(seed)

    @classmethod
    def from_entropy(cls):
        return cls(int.from_bytes(os.urandom(8), "little"))

    @property
    def state(self):
        return self._state

    def seed(self, value: int):
        self._state = value & MASK64

    def next(self) -> int:
        state = self._state
        state ^= (state << 13) & MASK64
        state ^= state >> 17
        state ^= (state << 43) & MASK64
        self._state = state
        return state

    def randbelow(self, n: int) -> int:
        return self.next() % n

    def copy(self):
        return Xorshift64(self._state)

    def __iter__(self):
        return self

    def __next__(self):
        return self.next()

    def __repr__(self):
        return f"Xorshift64(state={self._state:#018x})"
