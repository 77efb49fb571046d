# workload.py
# Reads a workload file: a process count followed by that many (A B C M) records

import re

from .process import ProcessRecord

_COUNT = re.compile(r"\s*(\d+)")
_RECORD = re.compile(r"\(([^)]*)\)")
_FIELD = re.compile(r"\d+")


class WorkloadError(ValueError):
    """Raised when a workload description cannot be turned into processes"""


def _parse_record(pid, body):
    fields = body.split()
    if len(fields) != 4 or not all(_FIELD.fullmatch(f) for f in fields):
        raise WorkloadError(
            f"process {pid}: expected four non-negative integers (A B C M), got '({body})'"
        )
    arrival, burst_bound, total_cpu, io_multiplier = (int(f) for f in fields)
    if burst_bound == 0:
        raise WorkloadError(f"process {pid}: burst bound B must be positive")
    if total_cpu == 0:
        raise WorkloadError(f"process {pid}: total CPU time C must be positive")
    return ProcessRecord(pid, arrival, burst_bound, total_cpu, io_multiplier)


def parse_workload(text):
    """
    Parse workload text into process records
    Args:
        text: "N (A B C M) (A B C M) ..." with any whitespace or text around the records
    Returns: list of ProcessRecord, pid = zero-based read order
    """
    match = _COUNT.match(text)
    if not match:
        raise WorkloadError("workload must start with the number of processes")
    count = int(match.group(1))

    processes = []
    for record in _RECORD.finditer(text, match.end()):
        if len(processes) == count:
            break
        processes.append(_parse_record(len(processes), record.group(1)))

    if len(processes) < count:
        raise WorkloadError(f"expected {count} (A B C M) records, found {len(processes)}")
    return processes


def load_workload(filename):
    with open(filename, encoding="utf-8") as f:
        return parse_workload(f.read())
