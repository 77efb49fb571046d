# burst.py

import re

RANDOM_NUMBER_FILE_NAME = "random-numbers"
SEED_VALUE = 200
FALLBACK_RANDOM_VALUE = 1804289383

_LEADING_INT = re.compile(r"\s*(\d+)")


def _read_int(line):
    """Leading digits of a line as an int, 0 if there are none"""
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else 0


class BurstSource:
    """
    Deterministic CPU burst lookup backed by a table of random integers
    Attributes:
        values: the table, where values[0] is line 1 of the random-number file
        seed: line offset added to the process id on every lookup
        fallback: value returned for lines past the end of the table
    Methods:
        random_value(line): the integer on a 1-based line of the table
        burst(pid, upper_bound): 1 + (random value for pid) % upper_bound
    """

    def __init__(self, values, seed=SEED_VALUE, fallback=FALLBACK_RANDOM_VALUE):
        self.values = list(values)
        self.seed = seed
        self.fallback = fallback

    @classmethod
    def from_file(cls, filename=RANDOM_NUMBER_FILE_NAME, verbose=False, **kwargs):
        """Load the table; an unreadable file gives an empty table, so every lookup falls back"""
        try:
            with open(filename, encoding="utf-8", errors="replace") as f:
                values = [_read_int(line) for line in f]
        except OSError as e:
            if verbose:
                print(f"Warning: random number file '{filename}' not readable ({e}), "
                      f"every burst uses the fallback value")
            values = []
        return cls(values, **kwargs)

    def random_value(self, line):
        if 1 <= line <= len(self.values):
            return self.values[line - 1]
        return self.fallback

    def burst(self, pid, upper_bound):
        return 1 + self.random_value(self.seed + pid) % upper_bound
