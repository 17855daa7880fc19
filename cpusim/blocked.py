# blocked.py

from cpusim.process import BLOCKED


class BlockedQueue:
    """
    Processes doing I/O, ascending by remaining I/O burst.
    Equal bursts keep insertion order (a newcomer goes after its equals).
    """

    def __init__(self):
        self.items = []

    def add(self, process):
        process.state = BLOCKED
        for index, other in enumerate(self.items):
            if other.io_burst > process.io_burst:
                self.items.insert(index, process)
                return
        self.items.append(process)

    def advance(self):
        """
        Charge one cycle of I/O to every blocked process
        Returns: processes whose I/O completed, in queue order
        """
        done = []
        still_blocked = []
        for process in self.items:
            process.io_blocked_time += 1
            process.io_burst -= 1
            if process.io_burst > 0:
                still_blocked.append(process)
            else:
                process.io_burst = 0
                done.append(process)
        self.items = still_blocked
        return done

    def pids(self):
        return [p.pid for p in self.items]

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)
