from .burst import BurstSource
from .metrics import RunSummary, summarize
from .process import ProcessRecord, ProcessStatus, StateTransitionError
from .ready_queue import ReadyQueue
from .scheduler import RunPhase, Scheduler, SimulationRun
from .workload import WorkloadError, load_workload, parse_workload

__all__ = [
    "BurstSource",
    "ProcessRecord",
    "ProcessStatus",
    "ReadyQueue",
    "RunPhase",
    "RunSummary",
    "Scheduler",
    "SimulationRun",
    "StateTransitionError",
    "WorkloadError",
    "load_workload",
    "parse_workload",
    "summarize",
]
