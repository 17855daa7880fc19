# Shortest Job First (SJF) Scheduling Algorithm Implementation
# schedulers/sjf.py

from cpusim import Scheduler


def sjf_key(process):
    """Ordering key: remaining CPU time, then arrival time, then id"""
    return (process.remaining(), process.arrival_time, process.pid)


class SJFScheduler(Scheduler):
    """
    Shortest Job First (SJF) Scheduling.
    - The ready queue is kept ascending by remaining CPU time (C - run time)
    - Ties go to the earlier arrival, then to the smaller id
    - The order is decided when a process is inserted; a running process
      is never preempted
    """

    name = "Shortest Job First"

    def precedes(self, process, other):
        return sjf_key(process) < sjf_key(other)
