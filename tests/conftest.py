import pytest

from cyclesim import ProcessRecord


class StubBurst:
    """Burst source returning fixed values and remembering every lookup"""

    def __init__(self, value=5, per_pid=None):
        self.value = value
        self.per_pid = per_pid or {}
        self.calls = []

    def burst(self, pid, upper_bound):
        self.calls.append((pid, upper_bound))
        return self.per_pid.get(pid, self.value)


def make_processes(*quads):
    return [ProcessRecord(pid, *quad) for pid, quad in enumerate(quads)]


def dispatch_order(history):
    """Pids in the order they first accumulated CPU time"""
    order = []
    for snap in history:
        if snap["cpu"] is not None and snap["cpu"] not in order:
            order.append(snap["cpu"])
    return order


def by_pid(results):
    return {s["pid"]: s for s in results["processes"]}


@pytest.fixture
def two_process_workload():
    return make_processes((0, 5, 5, 1), (1, 5, 5, 1))
