# vizhelper/logging_utils.py
import csv, os, time
from typing import Mapping, Optional

HEADER = ["timestamp", "screen", "params", "n_points", "outcome"]

# one row per completed load so runs can be compared afterwards
def log_fetch_run(path: Optional[str], screen: str, params: Mapping, n_points: int, outcome: str) -> None:
    if not path:
        return
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    p = ";".join(f"{k}={v}" for k, v in params.items())
    row = [time.strftime("%Y-%m-%d %H:%M:%S"), screen, p, n_points, outcome]
    write_header = not os.path.exists(path)
    with open(path, "a", newline="") as f:
        w = csv.writer(f)
        if write_header: w.writerow(HEADER)
        w.writerow(row)
