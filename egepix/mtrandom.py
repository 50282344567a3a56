"""Mersenne Twister (MT19937) generator and module-level random helpers."""

import itertools
import time

_N = 624
_M = 397
_MASK32 = 0xFFFFFFFF
_DEFAULT_SEED = 19650218


def _initial_state(seed):
    state = [seed & _MASK32]
    for j in range(1, _N):
        prev = state[j - 1]
        state.append((1812433253 * (prev ^ (prev >> 30)) + j) & _MASK32)
    return state


def _twist(u, v):
    mixed = (u & 0x80000000) | (v & 0x7FFFFFFF)
    return (mixed >> 1) ^ (0x9908B0DF if v & 1 else 0)


class MersenneTwister:
    """MT19937 producing 32-bit unsigned integers."""

    def __init__(self, seed=_DEFAULT_SEED):
        self._state = _initial_state(seed)
        self._left = 1
        self._next = 0

    @classmethod
    def from_key(cls, key):
        """Create a generator seeded from a sequence of 32-bit integers."""
        key = [k & _MASK32 for k in key]
        if not key:
            raise ValueError("key must not be empty")
        gen = cls()
        state = gen._state
        i, j = 1, 0
        for _ in range(max(_N, len(key))):
            prev = state[i - 1]
            state[i] = ((state[i] ^ ((prev ^ (prev >> 30)) * 1664525)) + key[j] + j) & _MASK32
            i += 1
            j += 1
            if i >= _N:
                state[0] = state[_N - 1]
                i = 1
            if j >= len(key):
                j = 0
        for _ in range(_N - 1):
            prev = state[i - 1]
            state[i] = ((state[i] ^ ((prev ^ (prev >> 30)) * 1566083941)) - i) & _MASK32
            i += 1
            if i >= _N:
                state[0] = state[_N - 1]
                i = 1
        state[0] = 0x80000000
        return gen

    def reset(self, seed):
        """Reseed and regenerate the state immediately."""
        self._state = _initial_state(seed)
        self._next_state()

    def _next_state(self):
        state = self._state
        for idx in range(_N):
            state[idx] = state[(idx + _M) % _N] ^ _twist(state[idx], state[(idx + 1) % _N])
        self._left = _N
        self._next = 0

    def rand(self):
        """Next 32-bit unsigned integer."""
        self._left -= 1
        if self._left == 0:
            self._next_state()
        y = self._state[self._next]
        self._next += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def real(self):
        """Float in [0, 1) with 32-bit resolution."""
        return self.rand() / 4294967296.0

    def res53(self):
        """Float in [0, 1) with 53-bit resolution."""
        a = self.rand() >> 5
        b = self.rand() >> 6
        return (a * 67108864.0 + b) / 9007199254740992.0


_shared = MersenneTwister()
_randomize_counter = itertools.count()


def mtsrand(seed):
    """Reseed the shared generator."""
    _shared.reset(seed & _MASK32)


def mtirand():
    """Next 32-bit integer from the shared generator."""
    return _shared.rand()


def mtdrand():
    """Next float in [0, 1) from the shared generator."""
    return _shared.real()


def randomize():
    """Reseed the shared generator from the clock."""
    mtsrand(int(time.time()) + next(_randomize_counter))


def random(n):
    """Integer in [0, n); with ``n == 0`` a full 32-bit integer."""
    n &= _MASK32
    if n == 0:
        return mtirand()
    return int(mtdrand() * n)


def randomf():
    """Float in [0, 1)."""
    return mtdrand()