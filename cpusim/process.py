# process.py

UNSTARTED = "unstarted"
READY = "ready"
RUNNING = "running"
BLOCKED = "blocked"
TERMINATED = "terminated"


class Process:
    """
    Represents one simulated job described by its (A, B, C, M) quadruple
    Attributes:
        pid: stable id, assigned in input order (used for tie-breaks)
        arrival_time: A, the cycle the process arrives on
        burst_bound: B, upper bound for CPU burst sampling
        cpu_time: C, total CPU time required
        io_multiplier: M, I/O burst = CPU burst * M
        state: one of "unstarted", "ready", "running", "blocked", "terminated"
        finishing_time: cycle the process terminated on (None until then)
        cpu_time_run: cycles spent running
        io_blocked_time: cycles spent blocked
        waiting_time: cycles spent in the ready queue
        cpu_burst: cycles left in the current CPU burst (0 = no burst in progress)
        io_burst: cycles of I/O owed when the current CPU burst ends
        quantum: cycles left in the current Round Robin slice
        has_run_before: False until the first dispatch
    Methods:
        reset(): restore the pre-simulation state
        remaining(): CPU time still required
        start_burst(cpu, io): begin a new CPU burst
    """

    def __init__(self, pid, arrival_time, burst_bound, cpu_time, io_multiplier):
        self.pid = pid
        self.arrival_time = arrival_time
        self.burst_bound = burst_bound
        self.cpu_time = cpu_time
        self.io_multiplier = io_multiplier
        self.reset()

    def reset(self):
        """Put every mutable counter back to its initial value"""
        self.state = UNSTARTED
        self.finishing_time = None
        self.cpu_time_run = 0
        self.io_blocked_time = 0
        self.waiting_time = 0
        self.io_burst = 0
        self.cpu_burst = 0
        self.quantum = 0
        self.has_run_before = False

    def remaining(self):
        """CPU time still required before the process can terminate"""
        return self.cpu_time - self.cpu_time_run

    def start_burst(self, cpu, io):
        self.cpu_burst = cpu
        self.io_burst = io

    def is_complete(self):
        return self.cpu_time_run == self.cpu_time

    def quadruple(self):
        return (self.arrival_time, self.burst_bound, self.cpu_time, self.io_multiplier)

    def __repr__(self):
        return f"{self.pid}"

    def __str__(self):
        return (
            f"Process[pid:{self.pid}, (A,B,C,M)={self.quadruple()}, state:{self.state}, "
            f"run:{self.cpu_time_run}, io:{self.io_blocked_time}, wait:{self.waiting_time}]"
        )
