from .fcfs import FCFSScheduler
from .round_robin import DEFAULT_QUANTUM, RRScheduler
from .sjf import SJFScheduler

__all__ = ["FCFSScheduler", "RRScheduler", "SJFScheduler", "DEFAULT_QUANTUM"]
