# First-Come, First-Served (FCFS) Scheduling Algorithm Implementation
# schedulers/fcfs.py

from cpusim import Scheduler


class FCFSScheduler(Scheduler):
    """
    First-Come, First-Served (FCFS) Scheduling.
    - Every newly ready process joins the tail of the ready queue
    - Non-preemptive: a dispatched process keeps the CPU until its burst ends
    """

    name = "First Come First Serve"
