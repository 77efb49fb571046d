# ready_queue.py

import bisect


class ReadyQueue:
    """
    Ready processes waiting behind the one designated to run next, kept
    sorted by a policy key. Keys end with the pid, so no two entries tie.
    Methods:
        push(process, key): insert in key order
        pop(): remove and return the head, None when empty
        pids(): pids in dispatch order
    """

    def __init__(self):
        self._entries = []  # (key, pid, process), ascending

    def push(self, process, key):
        bisect.insort(self._entries, (key, process.pid, process))

    def pop(self):
        if not self._entries:
            return None
        return self._entries.pop(0)[2]

    def pids(self):
        return [entry[1] for entry in self._entries]
