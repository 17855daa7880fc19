# bursts.py
#
# Deterministic CPU/I-O burst generation from a line-indexed
# file of random numbers.

RANDOM_NUMBER_FILE = "random-numbers"
SEED_OFFSET = 200
FALLBACK_RANDOM = 1804289383


class RandomNumbers:
    """
    Line-indexed sequence of non-negative integers
    Attributes:
        values: the integers, values[0] is line 1
        fallback: value returned for any line past the end
    Methods:
        get(line): integer on the 1-based line, or the fallback
        from_file(filename): read one integer per line
    """

    def __init__(self, values, fallback=FALLBACK_RANDOM):
        self.values = list(values)
        self.fallback = fallback

    @classmethod
    def from_file(cls, filename, fallback=FALLBACK_RANDOM):
        values = []
        with open(filename) as f:
            # trailing blank lines are not part of the sequence
            lines = f.read().rstrip().splitlines()
            for lineno, line in enumerate(lines, start=1):
                line = line.strip()
                try:
                    values.append(int(line))
                except ValueError:
                    raise ValueError(f"{filename}:{lineno}: not an integer: {line!r}")
        return cls(values, fallback=fallback)

    def get(self, line):
        if 1 <= line <= len(self.values):
            return self.values[line - 1]
        return self.fallback

    def __len__(self):
        return len(self.values)


def random_os(upper_bound, pid, randoms, seed_offset=SEED_OFFSET):
    """Sampled CPU burst: 1 + (X mod B), X read from line seed_offset + pid"""
    return 1 + randoms.get(seed_offset + pid) % upper_bound


def next_burst(process, randoms, seed_offset=SEED_OFFSET):
    """
    Compute the (cpu, io) burst pair for a process entering the CPU
    Args:
        process: Process with no CPU burst in progress
        randoms: RandomNumbers source
        seed_offset: line offset added to the process id
    Returns: tuple (cpu_burst, io_burst)

    A sampled burst longer than the CPU time still required is capped
    at that remainder, and no I/O follows it (io_burst is 0).
    """
    burst = random_os(process.burst_bound, process.pid, randoms, seed_offset)
    remaining = process.remaining()
    if remaining < burst:
        return remaining, 0
    return burst, burst * process.io_multiplier
