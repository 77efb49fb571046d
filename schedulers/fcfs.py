# First-Come, First-Served (FCFS) Scheduling Algorithm Implementation
# schedulers/fcfs.py

from cyclesim import Scheduler


class FCFSScheduler(Scheduler):
    """
    First-Come, First-Served (FCFS) Scheduling.
    - The process that became ready first is dispatched first
    - Non-preemptive: a dispatched process runs until it blocks or finishes
    - Processes ready in the same cycle: first-time arrivals before processes
      returning from I/O, then earlier arrival time, then lower pid
    """

    name = "FCFS"
    title = "First Come First Serve"

    def initial_key(self, process):
        # earliest arrival, input order breaks ties
        return (process.arrival, process.pid)

    def ready_key(self, process, arriving):
        return (self.clock, 0 if arriving else 1, process.arrival, process.pid)
