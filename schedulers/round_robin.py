# Round Robin Scheduling Algorithm Implementation
# schedulers/round_robin.py

from .fcfs import FCFSScheduler


class RRScheduler(FCFSScheduler):
    """
    Round Robin (RR) Scheduling.
    - Ready queue ordered exactly like FCFS
    - Preemptive: a process that has run for its quantum of consecutive cycles
      is blocked, and comes back ready after an I/O burst like any other block
    """

    name = "RR"
    title = "Round Robin"

    def quantum_expired(self, process):
        return self.run_state.consecutive_running >= process.quantum

    def _on_dispatch(self):
        self.run_state.consecutive_running += 1

    def _on_switch(self):
        self.run_state.consecutive_running = 0
