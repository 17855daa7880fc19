import pytest

from cpusim import Process, RandomNumbers, next_burst, random_os
from cpusim.bursts import FALLBACK_RANDOM, SEED_OFFSET


def _source_with(value, line=SEED_OFFSET):
    """A source whose given line holds value and every other line holds 0"""
    values = [0] * (line + 10)
    values[line - 1] = value
    return RandomNumbers(values)


def test_lines_are_one_based():
    randoms = RandomNumbers([10, 20, 30])
    assert randoms.get(1) == 10
    assert randoms.get(3) == 30
    assert len(randoms) == 3


def test_past_the_end_uses_fallback():
    randoms = RandomNumbers([10, 20, 30])
    assert randoms.get(4) == FALLBACK_RANDOM
    assert randoms.get(0) == FALLBACK_RANDOM
    assert RandomNumbers([], fallback=7).get(1) == 7


def test_from_file(tmp_path):
    path = tmp_path / "random-numbers"
    path.write_text("1804289383\n846930886\n1681692777\n\n")
    randoms = RandomNumbers.from_file(str(path), fallback=3)
    assert randoms.values == [1804289383, 846930886, 1681692777]
    assert randoms.get(4) == 3


def test_from_file_rejects_garbage(tmp_path):
    path = tmp_path / "random-numbers"
    path.write_text("12\nabc\n")
    with pytest.raises(ValueError, match=":2:"):
        RandomNumbers.from_file(str(path))


def test_random_os_reads_seed_offset_plus_pid():
    randoms = _source_with(13, line=SEED_OFFSET + 3)
    assert random_os(5, 3, randoms) == 1 + 13 % 5
    # a different pid reads a different line
    assert random_os(5, 2, randoms) == 1


def test_burst_with_io():
    p = Process(0, 0, 5, 10, 3)
    assert next_burst(p, _source_with(13)) == (4, 12)


def test_burst_capped_at_remaining_has_no_io():
    p = Process(0, 0, 5, 10, 3)
    p.cpu_time_run = 7
    assert next_burst(p, _source_with(13)) == (3, 0)


def test_burst_equal_to_remaining_is_not_capped():
    p = Process(0, 0, 5, 4, 3)
    assert next_burst(p, _source_with(13)) == (4, 12)


def test_burst_is_deterministic():
    p = Process(1, 0, 7, 50, 2)
    randoms = _source_with(1234, line=SEED_OFFSET + 1)
    assert next_burst(p, randoms) == next_burst(p, randoms)


def test_custom_seed_offset():
    p = Process(0, 0, 5, 10, 1)
    randoms = _source_with(3, line=11)
    assert next_burst(p, randoms, seed_offset=11) == (4, 4)


def test_fallback_feeds_the_burst():
    p = Process(0, 0, 5, 10, 2)
    assert next_burst(p, RandomNumbers([], fallback=4)) == (5, 10)
