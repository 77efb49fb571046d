# report.py
# Text report of one run, rendered with rich

from rich.console import Console
from rich.table import Table


def _quadruples(quads):
    return "".join(f" ( {a} {b} {c} {m})" for a, b, c, m in quads)


def banner(text):
    return f"######################### {text} #########################"


def render_run(results, console=None):
    """
    Print the report of one run
    Args:
        results: dict returned by Scheduler.results()
        console: rich Console to print to, a new one on stdout by default
    Returns: None
    """
    if console is None:
        console = Console()

    def say(text=""):
        # report lines are never wrapped, however long the input echo gets
        console.print(text, highlight=False, soft_wrap=True)

    title = results["title"]
    stats = results["processes"]
    summary = results["summary"]
    count = len(results["original_input"])
    final = sorted(stats, key=lambda s: (s["arrival"], s["pid"]))
    final_quads = [(s["arrival"], s["burst_bound"], s["total_cpu"], s["io_multiplier"])
                   for s in final]

    say()
    say(banner(f"START OF {title.upper()}"))
    say(f"The original input was: {count}{_quadruples(results['original_input'])}")
    say(f"The (sorted) input is: {count}{_quadruples(final_quads)}")
    say(f"\nThe scheduling algorithm used was {title}\n")

    table = Table(title="Process Details")
    for col in ["Process", "(A,B,C,M)", "Finishing time", "Turnaround time",
                "I/O time", "Waiting time"]:
        table.add_column(col, justify="center")
    for s in stats:
        table.add_row(
            str(s["pid"]),
            f"({s['arrival']},{s['burst_bound']},{s['total_cpu']},{s['io_multiplier']})",
            str(s["finishing_time"]),
            str(s["turnaround_time"]),
            str(s["io_time"]),
            str(s["waiting_time"]),
        )
    console.print(table)

    say("Summary Data:")
    say(f"\tFinishing time: {summary['finishing_time']}")
    say(f"\tCPU Utilisation: {summary['cpu_utilization']:.6f}")
    say(f"\tI/O Utilisation: {summary['io_utilization']:.6f}")
    say(f"\tThroughput: {summary['throughput']:.6f} processes per hundred cycles")
    say(f"\tAverage turnaround time: {summary['average_turnaround']:.6f}")
    say(f"\tAverage waiting time: {summary['average_waiting']:.6f}")
    say()
    say(banner(f"END OF {title.upper()}"))
