# context.py


class RunContext:
    """
    Cycle counter and run statistics owned by a single scheduler run
    Attributes:
        clock: current cycle
        total_created: number of processes in the run
        total_started: processes dispatched at least once
        total_finished: processes terminated
        cycles_blocked: cycles in which at least one process was blocked
    """

    def __init__(self, total_created=0):
        self.clock = 0
        self.total_created = total_created
        self.total_started = 0
        self.total_finished = 0
        self.cycles_blocked = 0

    def now(self):
        return self.clock

    def tick(self):
        self.clock += 1

    def all_finished(self):
        return self.total_finished >= self.total_created

    def final_cycle(self):
        """Finishing time of the whole run (the last cycle that did work)"""
        return self.clock - 1

    def __repr__(self):
        return (
            f"RunContext(clock={self.clock}, created={self.total_created}, "
            f"started={self.total_started}, finished={self.total_finished}, "
            f"blocked={self.cycles_blocked})"
        )
