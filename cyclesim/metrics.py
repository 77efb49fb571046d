# metrics.py


class RunSummary:
    """Aggregate statistics of one finished run"""

    def __init__(self, finishing_time, process_count, cpu_utilization, io_utilization,
                 throughput, average_turnaround, average_waiting):
        self.finishing_time = finishing_time
        self.process_count = process_count
        self.cpu_utilization = cpu_utilization
        self.io_utilization = io_utilization
        self.throughput = throughput
        self.average_turnaround = average_turnaround
        self.average_waiting = average_waiting

    def as_dict(self):
        return dict(vars(self))


def summarize(stats, finishing_time, total_blocked):
    """
    Compute the run summary from the final per-process statistics
    Args:
        stats: list of per-process dicts (ProcessRecord.stats())
        finishing_time: the clock when the last process terminated
        total_blocked: blocked cycles accumulated at each termination
    Returns: RunSummary
    """
    count = len(stats)
    total_cpu = sum(s["cpu_time"] for s in stats)
    total_turnaround = sum(s["finishing_time"] - s["arrival"] for s in stats)
    total_waiting = sum(s["waiting_time"] for s in stats)

    def per_cycle(value):
        return value / finishing_time if finishing_time else 0.0

    def mean(value):
        return value / count if count else 0.0

    return RunSummary(
        finishing_time=finishing_time,
        process_count=count,
        cpu_utilization=per_cycle(total_cpu),
        io_utilization=per_cycle(total_blocked),
        throughput=100 * per_cycle(count),
        average_turnaround=mean(total_turnaround),
        average_waiting=mean(total_waiting),
    )
