# report.py
#
# Human-readable output for a finished scheduler run.

from rich.console import Console
from rich.table import Table


def quadruples(processes):
    return " ".join(f"( {p.arrival_time} {p.burst_bound} {p.cpu_time} {p.io_multiplier})" for p in processes)


def summary_data(scheduler):
    """
    Derived metrics for a finished run
    Args:
        scheduler: Scheduler instance after run()
    Returns: dict of summary values
    """
    processes = scheduler.processes
    total = len(processes)
    finishing = scheduler.context.final_cycle()

    cpu_time = sum(p.cpu_time_run for p in processes)
    waiting = sum(p.waiting_time for p in processes)
    turnaround = sum(p.finishing_time - p.arrival_time for p in processes)

    return {
        "finishing_time": finishing,
        "cpu_utilisation": cpu_time / finishing,
        "io_utilisation": scheduler.context.cycles_blocked / finishing,
        "throughput": 100 * total / finishing,
        "average_turnaround": turnaround / total,
        "average_waiting": waiting / total,
    }


def print_report(scheduler, console=None):
    """Print input, finish order, per-process details and summary for one run"""
    if console is None:
        console = Console()

    ctx = scheduler.context
    console.print(f"The original input was: {ctx.total_created} {quadruples(scheduler.processes)}")
    console.print(f"The (sorted) input is: {ctx.total_created} {quadruples(scheduler.finished)}")
    console.print(f"\nThe scheduling algorithm used was {scheduler.name}\n")

    table = Table(title="Process Details")
    for col in ["Process", "(A,B,C,M)", "Finishing", "Turnaround", "I/O", "Waiting"]:
        table.add_column(col, justify="center")

    for p in scheduler.processes:
        table.add_row(
            str(p.pid),
            f"({p.arrival_time},{p.burst_bound},{p.cpu_time},{p.io_multiplier})",
            str(p.finishing_time),
            str(p.finishing_time - p.arrival_time),
            str(p.io_blocked_time),
            str(p.waiting_time),
        )
    console.print(table)

    summary = summary_data(scheduler)
    summary_table = Table(title="Summary Data", show_header=False)
    summary_table.add_column("Metric")
    summary_table.add_column("Value", justify="right")
    summary_table.add_row("Finishing time", str(summary["finishing_time"]))
    summary_table.add_row("CPU Utilisation", f"{summary['cpu_utilisation']:.6f}")
    summary_table.add_row("I/O Utilisation", f"{summary['io_utilisation']:.6f}")
    summary_table.add_row(
        "Throughput", f"{summary['throughput']:.6f} processes per hundred cycles"
    )
    summary_table.add_row("Average turnaround time", f"{summary['average_turnaround']:.6f}")
    summary_table.add_row("Average waiting time", f"{summary['average_waiting']:.6f}")
    console.print(summary_table)
