"""Properties every policy must hold, plus the run lifecycle and exporters."""

import csv
import json

import pytest

from cyclesim import BurstSource, ProcessStatus, RunPhase, parse_workload
from schedulers import POLICIES, FCFSScheduler, RRScheduler

from .conftest import StubBurst, make_processes

WORKLOAD = "5 (2 4 6 1) (0 3 7 2) (4 2 5 1) (0 5 4 3) (1 1 3 2)"


@pytest.fixture
def table():
    return BurstSource([(i * 2654435761) % 1000 for i in range(400)])


@pytest.mark.parametrize("policy", POLICIES)
class TestInvariants:
    def test_every_post_arrival_cycle_is_accounted_once(self, policy, table):
        results = policy(parse_workload(WORKLOAD), table).run()
        for s in results["processes"]:
            assert s["finishing_time"] is not None
            assert s["finishing_time"] >= s["arrival"]
            assert s["cpu_time"] == s["total_cpu"]
            assert (s["waiting_time"] + s["cpu_time"] + s["io_time"]
                    == s["finishing_time"] - s["arrival"])

    def test_at_most_one_process_running(self, policy, table):
        scheduler = policy(parse_workload(WORKLOAD), table)
        scheduler.run()
        for snap in scheduler.run_state.history:
            assert list(snap["status"].values()).count("running") <= 1

    def test_runs_are_deterministic(self, policy, table):
        first = policy(parse_workload(WORKLOAD), table).run()
        second = policy(parse_workload(WORKLOAD), table).run()
        assert first == second

    def test_finishing_horizon_is_last_termination(self, policy, table):
        results = policy(parse_workload(WORKLOAD), table).run()
        assert results["total_time"] == max(s["finishing_time"] for s in results["processes"])

    def test_blocked_total_matches_io_time(self, policy, table):
        results = policy(parse_workload(WORKLOAD), table).run()
        total_io = sum(s["io_time"] for s in results["processes"])
        assert results["summary"]["io_utilization"] == pytest.approx(total_io / results["total_time"])


class TestRunIsolation:
    def test_runs_share_records_without_leaking(self, table):
        processes = parse_workload(WORKLOAD)
        first = FCFSScheduler(processes, table).run()
        RRScheduler(processes, table).run()
        again = FCFSScheduler(processes, table).run()
        assert first == again

    def test_each_reset_creates_a_new_run(self, two_process_workload):
        scheduler = FCFSScheduler(two_process_workload, StubBurst(5))
        before = scheduler.run_state
        scheduler.run()
        assert scheduler.run_state is not before
        assert before.clock == 0


class TestLifecycle:
    def test_phases(self, two_process_workload):
        scheduler = FCFSScheduler(two_process_workload, StubBurst(5))
        assert scheduler.run_state.phase is RunPhase.NOT_STARTED
        assert scheduler.run_state.to_run is two_process_workload[0]
        scheduler.step()
        assert scheduler.run_state.phase is RunPhase.STEPPING
        assert scheduler.clock == 1
        assert scheduler.ready_queue.pids() == []
        scheduler.step()
        assert scheduler.ready_queue.pids() == [1]
        while scheduler.has_jobs():
            scheduler.step()
        assert scheduler.run_state.phase is RunPhase.FINISHED
        assert all(p.status is ProcessStatus.TERMINATED for p in two_process_workload)

    def test_empty_workload(self):
        results = FCFSScheduler([], StubBurst(5)).run()
        assert results["total_time"] == 0
        assert results["summary"]["cpu_utilization"] == 0.0
        assert results["summary"]["average_waiting"] == 0.0

    def test_designated_terminated_process_is_dropped(self):
        processes = make_processes((0, 5, 1, 1))
        scheduler = FCFSScheduler(processes, StubBurst(5))
        scheduler.run()
        scheduler.run_state.to_run = processes[0]
        scheduler._dispatch()
        assert scheduler.run_state.to_run is None


class TestLogging:
    def test_timeline_records_events(self, two_process_workload):
        scheduler = FCFSScheduler(two_process_workload, StubBurst(5))
        scheduler.run()
        timeline = scheduler.timeline()
        assert "time=2   | 1 arrived → ready queue" in timeline
        assert "time=5   | 0 finished" in timeline
        finished = [e for e in scheduler.run_state.events if e["event_type"] == "finished"]
        assert [e["process"] for e in finished] == [0, 1]

    def test_verbose_prints(self, two_process_workload, capsys):
        FCFSScheduler(two_process_workload, StubBurst(5), verbose=True).run()
        out = capsys.readouterr().out
        assert "0 first dispatch, cpu burst 5, io burst 5" in out
        assert "[Ready: 1]" in out


class TestExporters:
    def test_export_json(self, two_process_workload, tmp_path):
        scheduler = FCFSScheduler(two_process_workload, StubBurst(5))
        scheduler.run()
        path = tmp_path / "fcfs.json"
        scheduler.export_json(str(path))
        data = json.loads(path.read_text())
        assert data["algorithm"] == "FCFS"
        assert data["total_time"] == 10
        assert [p["finishing_time"] for p in data["processes"]] == [5, 10]
        assert data["summary"]["throughput"] == pytest.approx(20.0)

    def test_export_csv(self, two_process_workload, tmp_path):
        scheduler = FCFSScheduler(two_process_workload, StubBurst(5))
        scheduler.run()
        path = tmp_path / "fcfs.csv"
        scheduler.export_csv(str(path))
        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert [row["pid"] for row in rows] == ["0", "1"]
        assert rows[1]["waiting_time"] == "4"
