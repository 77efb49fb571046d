from .fcfs import FCFSScheduler
from .round_robin import RRScheduler
from .sjf import SJFScheduler

# Run order of the three policies over a workload
POLICIES = [FCFSScheduler, RRScheduler, SJFScheduler]

__all__ = ["FCFSScheduler", "RRScheduler", "SJFScheduler", "POLICIES"]
