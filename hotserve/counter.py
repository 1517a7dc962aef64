import threading

# The counter cycles through 65536 values, like an unsigned 16-bit word.
WRAP = 1 << 16


class VersionCounter:
    """
    Process-wide reload version, bumped once per filesystem change.

    The watcher thread is the only writer; request handlers only read.
    """

    def __init__(self, initial: int = 0):
        if not 0 <= initial < WRAP:
            raise ValueError(f"initial must be in [0, {WRAP}).")
        self._value = initial
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value = (self._value + 1) % WRAP
            return self._value

    @property
    def value(self) -> int:
        return self._value

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return f"VersionCounter({self._value})"
