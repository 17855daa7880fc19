import copy
import csv
import json
from collections import deque

from cpusim.blocked import BlockedQueue
from cpusim.bursts import SEED_OFFSET, next_burst
from cpusim.context import RunContext
from cpusim.process import READY, RUNNING, TERMINATED


class Scheduler:
    """
    A single-CPU, cycle-stepped scheduler

    Subclasses choose the discipline by overriding precedes() (where a
    newly ready process is inserted) and by setting quantum (Round Robin
    preemption). The cycle itself is the same for every discipline.

    Attributes:
        name: display name of the discipline
        quantum: time slice in cycles, or None for no preemption
        processes: this run's copies of the input processes, in input order
        not_arrived: processes whose arrival cycle has not been reached
        ready_queue: deque of processes ready for the CPU, head first
        blocked: BlockedQueue of processes doing I/O
        running: the process on the CPU or None
        finished: copies of terminated processes, in completion order
        context: RunContext holding the clock and run statistics
        log: human-readable log of events
        events: structured log of events for export
        verbose: if True, print log entries to console
    Methods:
        add_ready(process): insert a process into the ready queue
        step(): advance the simulation by one cycle
        run(): step until every process has terminated
        export_json(filename): export the event timeline and results
        export_csv(filename): export per-process results
    """

    name = "Scheduler"
    quantum = None

    def __init__(self, processes, randoms, seed_offset=SEED_OFFSET, verbose=False):
        # every run works on its own copies so runs cannot interfere
        self.processes = [copy.copy(p) for p in processes]
        for p in self.processes:
            p.reset()
        self.randoms = randoms
        self.seed_offset = seed_offset
        self.verbose = verbose

        # stable sort keeps input order among equal arrival times
        self.not_arrived = sorted(self.processes, key=lambda p: p.arrival_time)
        self.ready_queue = deque()
        self.blocked = BlockedQueue()
        self.running = None
        self.finished = []

        self.context = RunContext(total_created=len(self.processes))
        self.log = []
        self.events = []

    def precedes(self, process, other):
        """True if a newly ready process must go ahead of one already queued

        The default never jumps the queue, which gives FIFO order.
        """
        return False

    def add_ready(self, process):
        """
        Insert a process into the ready queue in front of the first
        queued process it precedes, else at the tail
        Args:
            process: Process instance becoming ready
        Returns: None
        """
        process.state = READY
        for index, other in enumerate(self.ready_queue):
            if self.precedes(process, other):
                self.ready_queue.insert(index, process)
                return
        self.ready_queue.append(process)

    def _record(self, event, event_type="info", proc=None):
        """
        Record an event in the log and structured events list
        Args:
            event: description of the event
            event_type: type/category of the event (e.g., "dispatch", "block", etc.)
            proc: process ID involved in the event (if any)
        Returns: None
        """
        entry = f"time={self.context.now():<3} | {event}"
        self.log.append(entry)

        if self.verbose:
            print(entry)

        self.events.append(
            {
                "time": self.context.now(),
                "event": event,
                "event_type": event_type,
                "process": proc,
                "ready_queue": [p.pid for p in self.ready_queue],
                "blocked_queue": self.blocked.pids(),
                "running": self.running.pid if self.running else None,
            }
        )

    def snapshot(self):
        """Return current state for the visualizer"""
        return {
            "clock": self.context.clock,
            "not_arrived": [p.pid for p in self.not_arrived],
            "ready": [p.pid for p in self.ready_queue],
            "blocked": self.blocked.pids(),
            "running": self.running.pid if self.running else None,
            "finished": [p.pid for p in self.finished],
            "quantum": self.quantum,
        }

    def has_jobs(self):
        return not self.context.all_finished()

    def step(self):
        """
        Advance the simulation by one cycle
        Returns: None
        """
        self._process_io()
        self._check_arrivals()
        self._process_cpu()
        self._dispatch()

        for p in self.ready_queue:
            p.waiting_time += 1

        self.context.tick()

    def run(self):
        while self.has_jobs():
            self.step()
        return self

    def _process_io(self):
        """Charge one cycle of I/O and return completed processes to ready"""
        if not len(self.blocked):
            return
        self.context.cycles_blocked += 1
        for p in self.blocked.advance():
            self.add_ready(p)
            self._record(f"{p.pid} finished I/O → ready queue", event_type="unblock", proc=p.pid)

    def _check_arrivals(self):
        while self.not_arrived and self.not_arrived[0].arrival_time <= self.context.clock:
            p = self.not_arrived.pop(0)
            self.add_ready(p)
            self._record(f"{p.pid} arrived", event_type="arrive", proc=p.pid)

    def _process_cpu(self):
        """Charge the running process for this cycle and decide where it goes next"""
        p = self.running
        if p is None:
            return

        p.cpu_burst -= 1
        p.cpu_time_run += 1
        if self.quantum is not None:
            p.quantum -= 1

        # termination wins over burst exhaustion: a capped burst never blocks
        if p.is_complete():
            self._terminate(p)
        elif p.cpu_burst == 0:
            self.running = None
            self.blocked.add(p)
            self._record(
                f"{p.pid} finished CPU burst → blocked for {p.io_burst}",
                event_type="block",
                proc=p.pid,
            )
        elif self.quantum is not None and p.quantum == 0:
            if not self.ready_queue:
                # nobody to hand the CPU to: start a fresh slice in place
                p.quantum = self.quantum
                return
            self.running = None
            p.state = READY
            self.ready_queue.append(p)
            self._record(f"{p.pid} preempted (quantum expired)", event_type="preempt", proc=p.pid)

    def _terminate(self, p):
        p.finishing_time = self.context.clock
        p.state = TERMINATED
        self.running = None
        self.finished.append(copy.copy(p))
        self.context.total_finished += 1
        self._record(f"{p.pid} terminated", event_type="terminate", proc=p.pid)

    def _dispatch(self):
        if self.running is not None or not self.ready_queue:
            return

        p = self.ready_queue.popleft()
        if not p.has_run_before:
            p.has_run_before = True
            self.context.total_started += 1

        p.state = RUNNING
        if self.quantum is not None:
            p.quantum = self.quantum

        # a preempted process resumes the burst it was in
        if p.cpu_burst == 0:
            cpu, io = next_burst(p, self.randoms, self.seed_offset)
            p.start_burst(cpu, io)

        self.running = p
        self._record(
            f"{p.pid} dispatched (burst: {p.cpu_burst})", event_type="dispatch", proc=p.pid
        )

    def results(self):
        """Per-process results in input order"""
        return [
            {
                "pid": p.pid,
                "arrival_time": p.arrival_time,
                "burst_bound": p.burst_bound,
                "cpu_time": p.cpu_time,
                "io_multiplier": p.io_multiplier,
                "finishing_time": p.finishing_time,
                "turnaround_time": (
                    p.finishing_time - p.arrival_time if p.finishing_time is not None else None
                ),
                "cpu_time_run": p.cpu_time_run,
                "io_blocked_time": p.io_blocked_time,
                "waiting_time": p.waiting_time,
            }
            for p in self.processes
        ]

    def export_json(self, filename):
        """Export simulation timeline to JSON file"""
        timeline_data = {
            "algorithm": self.name,
            "total_time": self.context.final_cycle(),
            "finish_order": [p.pid for p in self.finished],
            "processes": self.results(),
            "events": self.events,
        }

        with open(filename, "w") as f:
            json.dump(timeline_data, f, indent=2)

    def export_csv(self, filename):
        """Export simulation results to CSV file"""
        rows = self.results()
        with open(filename, "w", newline="") as csvfile:
            fieldnames = list(rows[0].keys()) if rows else ["pid"]
            writer = csv.DictWriter(csvfile, fieldnames=fieldnames)

            writer.writeheader()
            for row in rows:
                writer.writerow(row)
