# main.py
import os
import re
import sys

from rich.console import Console
from rich.rule import Rule

from cpusim import Process, RandomNumbers
from cpusim.bursts import RANDOM_NUMBER_FILE, SEED_OFFSET
from cpusim.report import print_report
from schedulers import DEFAULT_QUANTUM, FCFSScheduler, RRScheduler, SJFScheduler

QUADRUPLE = re.compile(r"\(\s*(\S+)\s+(\S+)\s+(\S+)\s+(\S+)\s*\)")


def parse_processes(text):
    """
    Parse "N (A B C M) (A B C M) ..." into Process objects
    Ids are assigned 0..N-1 in the order the quadruples appear.
    """
    head = text.strip().split(None, 1)
    if not head:
        raise ValueError("empty process file")
    try:
        count = int(head[0])
    except ValueError:
        raise ValueError(f"process count is not an integer: {head[0]!r}")

    body = head[1] if len(head) > 1 else ""
    quads = QUADRUPLE.findall(body)
    if len(quads) != count:
        raise ValueError(f"expected {count} processes, found {len(quads)}")

    processes = []
    for pid, quad in enumerate(quads):
        try:
            a, b, c, m = (int(v) for v in quad)
        except ValueError:
            raise ValueError(f"process {pid}: non-integer field in {quad}")
        processes.append(Process(pid, a, b, c, m))
    return processes


def load_processes(filename):
    with open(filename) as f:
        return parse_processes(f.read())


# Map scheduler name to class (case-insensitive)
scheduler_map = {
    "fcfs": FCFSScheduler,
    "fcfsscheduler": FCFSScheduler,
    "rr": RRScheduler,
    "rrscheduler": RRScheduler,
    "roundrobin": RRScheduler,
    "sjf": SJFScheduler,
    "sjfscheduler": SJFScheduler,
}

RUN_ORDER = ["fcfs", "rr", "sjf"]


def build_scheduler(key, processes, randoms, quantum=DEFAULT_QUANTUM, seed=SEED_OFFSET, verbose=False):
    SchedulerClass = scheduler_map[key]
    if SchedulerClass is RRScheduler:
        return SchedulerClass(processes, randoms, quantum=quantum, seed_offset=seed, verbose=verbose)
    return SchedulerClass(processes, randoms, seed_offset=seed, verbose=verbose)


def parse_args(argv):
    args = {}
    positional = []
    for arg in argv:
        if "=" in arg:
            k, v = arg.split("=", 1)
            args[k] = v
        else:
            positional.append(arg)
    if positional and "input" not in args:
        args["input"] = positional[0]
    return args


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    console = Console()

    if "input" not in args:
        print("Usage: python main.py <process-file> [random=FILE] [scheduler=all|fcfs|rr|sjf] "
              "[quantum=N] [seed=N] [verbose=1] [export=DIR] [visual=1] [fps=N]")
        return 1

    try:
        quantum = int(args.get("quantum", DEFAULT_QUANTUM))
        seed = int(args.get("seed", SEED_OFFSET))
        fps = int(args.get("fps", "2"))
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    if quantum < 1:
        print(f"Error: quantum must be positive, got {quantum}")
        return 1
    verbose = args.get("verbose", "0") not in ("0", "", "false")
    visual = args.get("visual", "0") not in ("0", "", "false")

    choice = args.get("scheduler", "all").lower()
    if choice == "all":
        keys = RUN_ORDER
    elif choice in scheduler_map:
        keys = [choice]
    else:
        print(f"Error: Invalid scheduler '{choice}'. Must be one of: all, fcfs, rr, sjf")
        return 1

    try:
        processes = load_processes(args["input"])
        randoms = RandomNumbers.from_file(args.get("random", RANDOM_NUMBER_FILE))
    except OSError as e:
        print(f"Error: {e.filename} not found" if isinstance(e, FileNotFoundError) else f"Error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if not processes:
        print("Error: No processes loaded!")
        return 1

    if visual:
        if len(keys) != 1:
            print("Error: visual=1 needs a single scheduler (fcfs, rr or sjf)")
            return 1
        from visualizer import run_pygame_visualization

        scheduler = build_scheduler(keys[0], processes, randoms, quantum, seed, verbose)
        run_pygame_visualization(scheduler, fps=fps)
        if scheduler.has_jobs():
            print("Visualization closed before the simulation finished.")
            return 0
        print_report(scheduler, console)
        return 0

    export_dir = args.get("export")
    if export_dir:
        os.makedirs(export_dir, exist_ok=True)

    for key in keys:
        scheduler = build_scheduler(key, processes, randoms, quantum, seed, verbose)
        console.print(Rule(f"START OF {scheduler.name.upper()}"))
        scheduler.run()
        print_report(scheduler, console)
        console.print(Rule(f"END OF {scheduler.name.upper()}"))

        if export_dir:
            scheduler.export_json(os.path.join(export_dir, f"timeline_{key}.json"))
            scheduler.export_csv(os.path.join(export_dir, f"results_{key}.csv"))

    if export_dir:
        print(f"\nTimeline data exported to: {export_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
