# Round Robin Scheduling Algorithm Implementation
# schedulers/round_robin.py

from cpusim import Scheduler

DEFAULT_QUANTUM = 2


class RRScheduler(Scheduler):
    """
    Round Robin (RR) Scheduling.
    - Processes are served in FIFO order with a fixed time quantum
    - Preemptive: a process still inside its CPU burst when the quantum
      runs out goes back to the tail of the ready queue
    - The quantum is reset on every dispatch
    """

    name = "Round Robin"

    def __init__(self, processes, randoms, quantum=DEFAULT_QUANTUM, **kwargs):
        if quantum < 1:
            raise ValueError(f"quantum must be positive, got {quantum}")
        self.quantum = quantum
        super().__init__(processes, randoms, **kwargs)
