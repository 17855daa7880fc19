from cpusim import BlockedQueue, Process


def _blocked(pid, io_burst):
    p = Process(pid, 0, 1, 10, 1)
    p.io_burst = io_burst
    return p


def test_ascending_by_io_burst_with_stable_ties():
    queue = BlockedQueue()
    for pid, io in [(0, 3), (1, 1), (2, 3), (3, 2)]:
        queue.add(_blocked(pid, io))
    assert queue.pids() == [1, 3, 0, 2]
    assert all(p.state == "blocked" for p in queue)


def test_advance_charges_every_blocked_process():
    queue = BlockedQueue()
    a, b = _blocked(0, 1), _blocked(1, 3)
    queue.add(a)
    queue.add(b)

    done = queue.advance()

    assert done == [a]
    assert queue.pids() == [1]
    assert a.io_blocked_time == 1 and a.io_burst == 0
    assert b.io_blocked_time == 1 and b.io_burst == 2


def test_simultaneous_completions_keep_queue_order():
    queue = BlockedQueue()
    first, second, later = _blocked(4, 2), _blocked(2, 2), _blocked(0, 5)
    for p in (first, second, later):
        queue.add(p)

    assert queue.advance() == []
    assert queue.advance() == [first, second]
    assert queue.pids() == [0]


def test_zero_io_burst_is_released_on_next_advance():
    queue = BlockedQueue()
    p = _blocked(0, 0)
    queue.add(p)
    assert queue.advance() == [p]
    assert p.io_burst == 0
    assert p.io_blocked_time == 1
    assert len(queue) == 0
