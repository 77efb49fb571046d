# main.py
# Runs FCFS, Round Robin and SJF over one workload file and prints a report for each
import sys

from rich.console import Console

from cyclesim import BurstSource, WorkloadError, load_workload
from cyclesim.burst import RANDOM_NUMBER_FILE_NAME
from schedulers import POLICIES


def run_all(processes, burst_source, console=None):
    """
    Run every policy in turn over the same processes
    Returns: list of results() dicts, one per policy
    """
    results = []
    for scheduler_cls in POLICIES:
        scheduler = scheduler_cls(processes, burst_source)
        results.append(scheduler.run())
        scheduler.print_stats(console=console)
    return results


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: main.py <workload-file>")
        return 1

    try:
        processes = load_workload(args[0])
    except (OSError, UnicodeDecodeError, WorkloadError) as e:
        print(f"Error: cannot read workload '{args[0]}': {e}")
        return 1

    burst_source = BurstSource.from_file(RANDOM_NUMBER_FILE_NAME)
    run_all(processes, burst_source, console=Console())
    return 0


if __name__ == "__main__":
    sys.exit(main())
