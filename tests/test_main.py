import json

import pytest

from main import build_scheduler, main, parse_args, parse_processes
from schedulers import RRScheduler, SJFScheduler


def test_parse_processes():
    procs = parse_processes("3 (0 1 5 1)\n(0 1 5 1)  ( 3 2 8 4 )\n")
    assert [p.pid for p in procs] == [0, 1, 2]
    assert procs[2].quadruple() == (3, 2, 8, 4)
    assert all(p.state == "unstarted" for p in procs)


@pytest.mark.parametrize(
    "text",
    ["", "x (0 1 5 1)", "2 (0 1 5 1)", "1 (0 1 five 1)"],
)
def test_parse_processes_rejects_malformed_input(text):
    with pytest.raises(ValueError):
        parse_processes(text)


def test_parse_args():
    args = parse_args(["input-1", "scheduler=rr", "quantum=3"])
    assert args == {"input": "input-1", "scheduler": "rr", "quantum": "3"}


def test_build_scheduler_passes_quantum():
    procs = parse_processes("1 (0 1 5 1)")
    sched = build_scheduler("roundrobin", procs, None, quantum=5)
    assert isinstance(sched, RRScheduler)
    assert sched.quantum == 5
    assert isinstance(build_scheduler("sjf", procs, None), SJFScheduler)


@pytest.fixture
def input_files(tmp_path):
    processes = tmp_path / "input-1"
    processes.write_text("2 (0 5 5 1) (0 5 5 1)\n")
    randoms = tmp_path / "random-numbers"
    randoms.write_text("4\n" * 250)
    return processes, randoms


def test_main_runs_all_disciplines(input_files, capsys):
    processes, randoms = input_files
    assert main([str(processes), f"random={randoms}"]) == 0

    out = capsys.readouterr().out
    assert "First Come First Serve" in out
    assert "Round Robin" in out
    assert "Shortest Job First" in out


def test_main_exports(input_files, tmp_path):
    processes, randoms = input_files
    out_dir = tmp_path / "out"
    assert main([str(processes), f"random={randoms}", "scheduler=fcfs", f"export={out_dir}"]) == 0

    timeline = json.loads((out_dir / "timeline_fcfs.json").read_text())
    assert timeline["algorithm"] == "First Come First Serve"
    assert timeline["total_time"] == 10
    assert timeline["finish_order"] == [0, 1]
    assert [p["finishing_time"] for p in timeline["processes"]] == [5, 10]

    csv_lines = (out_dir / "results_fcfs.csv").read_text().splitlines()
    assert csv_lines[0].startswith("pid,arrival_time")
    assert len(csv_lines) == 3


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope")]) == 1
    assert "Error:" in capsys.readouterr().out


@pytest.mark.parametrize("extra", ["scheduler=lottery", "quantum=0", "quantum=two"])
def test_main_rejects_bad_options(input_files, capsys, extra):
    processes, randoms = input_files
    assert main([str(processes), f"random={randoms}", extra]) == 1
    assert "Error:" in capsys.readouterr().out


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out
