# process.py

from enum import Enum

DEFAULT_QUANTUM = 2


class ProcessStatus(Enum):
    UNSTARTED = "unstarted"
    READY = "ready"
    RUNNING = "running"
    BLOCKED = "blocked"
    TERMINATED = "terminated"


# Legal status changes. The engine re-marks the designated process RUNNING
# every cycle, and first arrivals re-enter the READY status they were reset
# into.
TRANSITIONS = {
    ProcessStatus.UNSTARTED: {ProcessStatus.READY},
    ProcessStatus.READY: {ProcessStatus.READY, ProcessStatus.RUNNING},
    ProcessStatus.RUNNING: {
        ProcessStatus.RUNNING,
        ProcessStatus.BLOCKED,
        ProcessStatus.TERMINATED,
    },
    ProcessStatus.BLOCKED: {ProcessStatus.READY},
    ProcessStatus.TERMINATED: set(),
}


class StateTransitionError(RuntimeError):
    """Raised when a process is moved along an edge the state machine lacks"""


def is_positive_multiple(value, period):
    """True when value > 0 and value is a whole number of periods.

    A zero period (an I/O multiplier of 0) counts as a period of one cycle.
    """
    return value > 0 and value % max(period, 1) == 0


class ProcessRecord:
    """
    Represents one simulated process and its accumulated timing statistics
    Attributes:
        pid: zero-based read order, final tie-break and burst table index
        arrival: cycle at which the process becomes eligible to run (A)
        burst_bound: upper bound for the random CPU burst (B)
        total_cpu: cycles of CPU time needed before termination (C)
        io_multiplier: converts a CPU burst into the following I/O burst (M)
        status: current ProcessStatus
        finishing_time: cycle of termination, None until then
        cpu_time / io_time / waiting_time: cycles spent Running / Blocked / Ready
        cpu_burst / io_burst: burst lengths, fixed on first dispatch
        quantum: preemption threshold, only consulted by round robin
        block_reason: "io" or "preempted" while blocked, else None
        preemptions: number of quantum-triggered blocks
    Methods:
        reset(): return to the ready-at-arrival configuration
        assign_bursts(cpu_burst): store the CPU burst and derived I/O burst
        transition(status): move along the state machine
        tick(): account one cycle to the counter of the current status
        stats(): plain dict of the process parameters and statistics
    """

    def __init__(self, pid, arrival, burst_bound, total_cpu, io_multiplier,
                 quantum=DEFAULT_QUANTUM):
        self.pid = pid
        self.arrival = arrival
        self.burst_bound = burst_bound
        self.total_cpu = total_cpu
        self.io_multiplier = io_multiplier
        self.quantum = quantum
        self.status = ProcessStatus.UNSTARTED
        self._clear()

    def _clear(self):
        self.finishing_time = None
        self.cpu_time = 0
        self.io_time = 0
        self.waiting_time = 0
        self.cpu_burst = 0
        self.io_burst = 0
        self.first_dispatch = True
        self.block_reason = None
        self.preemptions = 0

    def reset(self):
        """Zero every counter and make the process ready at its arrival"""
        self._clear()
        self.status = ProcessStatus.READY

    @property
    def quadruple(self):
        return (self.arrival, self.burst_bound, self.total_cpu, self.io_multiplier)

    @property
    def remaining(self):
        return self.total_cpu - self.cpu_time

    @property
    def turnaround_time(self):
        if self.finishing_time is None:
            return None
        return self.finishing_time - self.arrival

    def assign_bursts(self, cpu_burst):
        """Fix the burst lengths; only the first dispatch of a run computes them"""
        self.cpu_burst = cpu_burst
        self.io_burst = cpu_burst * self.io_multiplier
        self.first_dispatch = False

    def transition(self, status):
        if status not in TRANSITIONS[self.status]:
            raise StateTransitionError(
                f"Process {self.pid} cannot go from {self.status.value} to {status.value}"
            )
        if status is not ProcessStatus.BLOCKED:
            self.block_reason = None
        self.status = status

    def tick(self):
        if self.status is ProcessStatus.READY:
            self.waiting_time += 1
        elif self.status is ProcessStatus.RUNNING:
            self.cpu_time += 1
        elif self.status is ProcessStatus.BLOCKED:
            self.io_time += 1

    # ---- Transition predicates, checked in this order after tick() ----
    def should_terminate(self):
        return self.status is ProcessStatus.RUNNING and self.cpu_time == self.total_cpu

    def burst_exhausted(self):
        return (self.status is ProcessStatus.RUNNING
                and is_positive_multiple(self.cpu_time, self.cpu_burst))

    def io_finished(self):
        return (self.status is ProcessStatus.BLOCKED
                and is_positive_multiple(self.io_time, self.io_burst))

    def has_arrived(self, clock):
        """True only on the cycle right after arrival, the first one it waits"""
        return self.waiting_time == 1 and clock == self.arrival + 1

    def terminate(self, clock):
        self.transition(ProcessStatus.TERMINATED)
        self.finishing_time = clock

    def block(self, preempted=False):
        self.transition(ProcessStatus.BLOCKED)
        if preempted:
            self.block_reason = "preempted"
            self.preemptions += 1
        else:
            self.block_reason = "io"

    def stats(self):
        return {
            "pid": self.pid,
            "arrival": self.arrival,
            "burst_bound": self.burst_bound,
            "total_cpu": self.total_cpu,
            "io_multiplier": self.io_multiplier,
            "finishing_time": self.finishing_time,
            "turnaround_time": self.turnaround_time,
            "cpu_time": self.cpu_time,
            "io_time": self.io_time,
            "waiting_time": self.waiting_time,
            "cpu_burst": self.cpu_burst,
            "io_burst": self.io_burst,
            "preemptions": self.preemptions,
        }

    def __repr__(self):
        return f"{self.pid}"

    def __str__(self):
        return (f"Process[pid:{self.pid}, (A,B,C,M):({self.arrival},{self.burst_bound},"
                f"{self.total_cpu},{self.io_multiplier}), status:{self.status.value}, "
                f"cpu:{self.cpu_time}, io:{self.io_time}, wait:{self.waiting_time}]")
