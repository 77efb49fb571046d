# scheduler.py
# Cycle-stepped engine shared by every policy in schedulers/
import csv
import json
from enum import Enum

from .metrics import summarize
from .process import ProcessStatus
from .ready_queue import ReadyQueue
from .report import render_run


class RunPhase(Enum):
    NOT_STARTED = "not_started"
    STEPPING = "stepping"
    FINISHED = "finished"


class SimulationRun:
    """
    Everything that belongs to a single policy run. A fresh instance is
    created by Scheduler.reset(), so nothing leaks from one run to the next.
    Attributes:
        clock: the current cycle
        phase: RunPhase
        to_run: the process holding the CPU slot, or None when idle
        ready_queue: ReadyQueue of processes behind to_run
        consecutive_running: cycles to_run has held the CPU (round robin only)
        total_blocked: blocked cycles of terminated processes
        ran: pid that accumulated CPU time in the current cycle
        log / events / history: human-readable log, structured events, per-cycle snapshots
    """

    def __init__(self):
        self.clock = 0
        self.phase = RunPhase.NOT_STARTED
        self.to_run = None
        self.ready_queue = ReadyQueue()
        self.consecutive_running = 0
        self.total_blocked = 0
        self.ran = None
        self.log = []
        self.events = []
        self.history = []


class Scheduler:
    """
    Single CPU short-term scheduler over a fixed set of processes

    Subclasses choose the policy by overriding initial_key() and ready_key(),
    and round robin also hooks dispatch and preemption.

    Attributes:
        processes: every ProcessRecord, indexed by pid
        burst_source: object with burst(pid, upper_bound) used on first dispatch
        verbose: if True, print log entries to console
        run_state: the SimulationRun in progress
    Methods:
        reset(): start a new run with fresh state
        step(): advance the simulation by one cycle
        run(): reset and step until every process terminated, return results()
        results(): run results as a plain dict
        timeline(): human-readable log as a string
        export_json(filename) / export_csv(filename): write the results
        print_stats(console): render the report for this run
    """

    name = "BASE"
    title = "Base Scheduler"

    def __init__(self, processes, burst_source, verbose=False):
        self.processes = list(processes)
        self.burst_source = burst_source
        self.verbose = verbose
        self.reset()

    # ---- Policy hooks ----
    def initial_key(self, process):
        """Sort key choosing the process designated before the first cycle"""
        raise NotImplementedError

    def ready_key(self, process, arriving):
        """Sort key placing a newly ready process in the ready queue"""
        raise NotImplementedError

    def quantum_expired(self, process):
        return False

    def _on_dispatch(self):
        pass

    def _on_switch(self):
        pass

    # ---- Run lifecycle ----
    def reset(self):
        """Reset every process and create a new run context"""
        for p in self.processes:
            p.reset()
        self.run_state = SimulationRun()
        if self.processes:
            self.run_state.to_run = min(self.processes, key=self.initial_key)
        return self.run_state

    @property
    def clock(self):
        return self.run_state.clock

    @property
    def ready_queue(self):
        return self.run_state.ready_queue

    def has_jobs(self):
        """True while any process has not terminated"""
        return any(p.status is not ProcessStatus.TERMINATED for p in self.processes)

    def step(self):
        """
        Advance the simulation by one cycle
        Returns: None
        """
        state = self.run_state
        state.phase = RunPhase.STEPPING
        state.clock += 1
        state.ran = None

        self._dispatch()

        # processes are always scanned in pid order
        for process in self.processes:
            self._advance(process)

        self._reselect()

        state.history.append(self.snapshot())
        if self.verbose:
            self._snapshot()
        if not self.has_jobs():
            state.phase = RunPhase.FINISHED

    def run(self):
        """
        Run the simulation from a clean state until all processes are finished
        Returns: results() dict
        """
        self.reset()
        while self.has_jobs():
            self.step()
        self.run_state.phase = RunPhase.FINISHED
        return self.results()

    # ---- Cycle phases ----
    def _dispatch(self):
        """Give the CPU to the designated process, fetching bursts on its first dispatch"""
        state = self.run_state
        process = state.to_run
        if process is None:
            return

        if process.first_dispatch:
            process.assign_bursts(self.burst_source.burst(process.pid, process.burst_bound))
            self._record(
                f"{process.pid} first dispatch, cpu burst {process.cpu_burst}, "
                f"io burst {process.io_burst}",
                event_type="bursts",
                proc=process.pid,
            )

        if process.status is ProcessStatus.TERMINATED:
            state.to_run = None
            return

        if process.status is not ProcessStatus.RUNNING:
            self._record(f"{process.pid} dispatched to CPU", event_type="dispatch", proc=process.pid)
        process.transition(ProcessStatus.RUNNING)
        self._on_dispatch()

    def _advance(self, process):
        """Account one cycle to a process and apply the first transition that fires"""
        state = self.run_state
        if process.status is ProcessStatus.TERMINATED:
            return
        if state.clock <= process.arrival:
            return

        process.tick()
        if process.status is ProcessStatus.RUNNING:
            state.ran = process.pid

        if process.should_terminate():
            process.terminate(state.clock)
            state.total_blocked += process.io_time
            self._record(f"{process.pid} finished", event_type="finished", proc=process.pid)
            return

        if process.status is ProcessStatus.RUNNING:
            exhausted = process.burst_exhausted()
            if exhausted or self.quantum_expired(process):
                process.block(preempted=not exhausted)
                if exhausted:
                    self._record(f"{process.pid} blocked for I/O", event_type="cpu_to_io",
                                 proc=process.pid)
                else:
                    self._record(f"{process.pid} preempted (quantum expired)",
                                 event_type="preempted", proc=process.pid)
                return

        arriving = process.has_arrived(state.clock)
        if arriving or process.io_finished():
            process.transition(ProcessStatus.READY)
            if state.to_run is None:
                # idle CPU: the process takes the slot without queueing
                state.to_run = process
                process.transition(ProcessStatus.RUNNING)
                self._on_switch()
                self._record(f"{process.pid} ready, takes idle CPU", event_type="dispatch",
                             proc=process.pid)
            else:
                state.ready_queue.push(process, self.ready_key(process, arriving))
                what = "arrived" if arriving else "finished I/O"
                self._record(f"{process.pid} {what} → ready queue", event_type="enqueue",
                             proc=process.pid)

    def _reselect(self):
        state = self.run_state
        if state.to_run is not None and state.to_run.status is not ProcessStatus.RUNNING:
            state.to_run = state.ready_queue.pop()
            self._on_switch()

    # ---- Logging ----
    def _record(self, event, event_type="info", proc=None):
        """
        Record an event in the log and structured events list
        Args:
            event: description of the event
            event_type: category of the event (e.g., "dispatch", "enqueue", etc.)
            proc: process ID involved in the event (if any)
        Returns: None
        """
        state = self.run_state
        entry = f"time={state.clock:<3} | {event}"
        state.log.append(entry)

        if self.verbose:
            print(entry)

        state.events.append(
            {
                "time": state.clock,
                "event": event,
                "event_type": event_type,
                "process": proc,
                "ready_queue": state.ready_queue.pids(),
                "cpu": state.to_run.pid if state.to_run else None,
            }
        )

    def _snapshot(self):
        """Print a one-line view of the queues"""
        snap = self.snapshot()
        rq = ", ".join(str(pid) for pid in snap["ready_queue"]) or "empty"
        blocked = ", ".join(str(pid) for pid in snap["blocked"]) or "empty"
        cpu = snap["cpu"] if snap["cpu"] is not None else "idle"
        entry = f"  [Ready: {rq}]  [Blocked: {blocked}]  Cpu:[{cpu}]"
        self.run_state.log.append(entry)
        print(entry)

    def snapshot(self):
        """Return the current state of the run"""
        state = self.run_state

        def with_status(status):
            return [p.pid for p in self.processes if p.status is status]

        return {
            "clock": state.clock,
            "cpu": state.ran,
            "to_run": state.to_run.pid if state.to_run else None,
            "ready_queue": state.ready_queue.pids(),
            "blocked": with_status(ProcessStatus.BLOCKED),
            "terminated": with_status(ProcessStatus.TERMINATED),
            "status": {p.pid: p.status.value for p in self.processes},
        }

    def timeline(self):
        """Return the human-readable log as a single string"""
        return "\n".join(self.run_state.log)

    # ---- Results and exporters ----
    def results(self):
        state = self.run_state
        stats = [p.stats() for p in self.processes]
        summary = summarize(stats, state.clock, state.total_blocked)
        return {
            "algorithm": self.name,
            "title": self.title,
            "total_time": state.clock,
            "original_input": [p.quadruple for p in self.processes],
            "processes": stats,
            "summary": summary.as_dict(),
        }

    def export_json(self, filename):
        """Export the run results to a JSON file"""
        with open(filename, "w") as f:
            json.dump(self.results(), f, indent=2)
        if self.verbose:
            print(f"Results exported to {filename}")

    def export_csv(self, filename):
        """Export per-process statistics to a CSV file"""
        stats = [p.stats() for p in self.processes]
        if not stats:
            return

        with open(filename, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(stats[0].keys()))
            writer.writeheader()
            writer.writerows(stats)
        if self.verbose:
            print(f"Results exported to {filename}")

    def print_stats(self, console=None):
        """Render the report for the current run"""
        render_run(self.results(), console=console)
