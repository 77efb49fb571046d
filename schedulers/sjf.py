# Shortest Job First (SJF) Scheduling Algorithm Implementation
# schedulers/sjf.py

from cyclesim import Scheduler


class SJFScheduler(Scheduler):
    """
    Shortest Job First (SJF) Scheduling.
    - Non-preemptive: selects the ready process with the least remaining CPU time
    - Ties go to the earlier arrival, then the lower pid
    """

    name = "SJF"
    title = "Shortest Job First"

    def initial_key(self, process):
        return (process.total_cpu, process.pid)

    def ready_key(self, process, arriving):
        return (process.remaining, process.arrival, process.pid)
