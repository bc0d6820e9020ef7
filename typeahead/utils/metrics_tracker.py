# metrics_tracker.py - running averages of timings for /stats

from collections import defaultdict

from rich.console import Console
from rich.table import Table


class Metrics:
    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key, val):
        self.m[key] += val
        self.n[key] += 1

    def count(self, key):
        return self.n.get(key, 0)

    def avg(self, key):
        if not self.n.get(key):
            return 0.0
        return self.m[key] / self.n[key]

    def show(self, console=None, extra=None):
        table = Table(title="metrics")
        table.add_column("metric")
        table.add_column("value", justify="right")
        for k in self.m:
            table.add_row(f"{k} (avg ms)", f"{self.avg(k) * 1000:.3f}")
            table.add_row(f"{k} (calls)", str(self.n[k]))
        for k, v in (extra or {}).items():
            table.add_row(k, str(v))
        (console or Console()).print(table)
