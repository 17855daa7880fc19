from .blocked import BlockedQueue
from .bursts import RandomNumbers, next_burst, random_os
from .context import RunContext
from .process import Process
from .scheduler import Scheduler

__all__ = [
    "BlockedQueue",
    "RandomNumbers",
    "RunContext",
    "Process",
    "Scheduler",
    "next_burst",
    "random_os",
]
