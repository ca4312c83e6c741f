import time
import csv
from contextlib import contextmanager


class Perf:
    def __init__(self):
        self.totals_exclusive = {}
        self.totals_inclusive = {}
        self.counts = {}
        self.meta = {}
        self.levels = []
        self._stack = []

    @contextmanager
    def section(self, label: str):
        frame = {"label": label, "start": time.perf_counter(), "child": 0.0}
        self._stack.append(frame)
        try:
            yield frame
        finally:
            dt = time.perf_counter() - frame["start"]
            frame["elapsed"] = dt
            exclusive = dt - frame["child"]
            self.totals_exclusive[label] = self.totals_exclusive.get(label, 0.0) + max(0.0, exclusive)
            self.totals_inclusive[label] = self.totals_inclusive.get(label, 0.0) + dt
            self.counts[label] = self.counts.get(label, 0) + 1
            self._stack.pop()
            if self._stack:
                self._stack[-1]["child"] += dt

    def set_meta(self, **kwargs):
        self.meta.update(kwargs)

    def record_level(self, stats, sec: float):
        self.levels.append({
            "level": stats.level,
            "faces": stats.faces,
            "vertices": stats.vertices,
            "new_vertices": stats.new_vertices,
            "cache_hits": stats.cache_hits,
            "sec": float(sec),
        })

    def reset(self):
        self.totals_exclusive.clear()
        self.totals_inclusive.clear()
        self.counts.clear()
        self.meta.clear()
        self.levels.clear()
        self._stack.clear()

    def write_csv(self, path: str):
        total_exc = sum(self.totals_exclusive.values())
        total_inc = sum(self.totals_inclusive.values())
        level = self.meta.get("level", "")
        vertices = self.meta.get("vertices", "")
        faces = self.meta.get("faces", "")
        with open(path, "w", newline="") as f:
            w = csv.writer(f)
            w.writerow([
                "key",
                "exclusive_sec",
                "inclusive_sec",
                "count",
                "avg_ms",
                "exclusive_percent",
                "level",
                "vertices",
                "faces",
            ])
            for k in sorted(self.totals_exclusive.keys()):
                tot_exc = float(self.totals_exclusive[k])
                tot_inc = float(self.totals_inclusive.get(k, 0.0))
                cnt = int(self.counts.get(k, 0))
                avg_ms = (tot_exc / cnt * 1000.0) if cnt > 0 else 0.0
                pct = (tot_exc / total_exc * 100.0) if total_exc > 0 else 0.0
                w.writerow([k, f"{tot_exc:.9f}", f"{tot_inc:.9f}", cnt, f"{avg_ms:.6f}", f"{pct:.4f}", level, vertices, faces])
            w.writerow(["TOTAL", f"{total_exc:.9f}", f"{total_inc:.9f}", "", "", "100.00", level, vertices, faces])

    def write_levels_csv(self, path: str):
        cols = ["level", "faces", "vertices", "new_vertices", "cache_hits", "sec", "new_per_sec"]
        with open(path, "w", newline="") as f:
            w = csv.writer(f)
            w.writerow(cols)
            for row in self.levels:
                rate = row["new_vertices"] / row["sec"] if row["sec"] > 0 else 0.0
                w.writerow([row["level"], row["faces"], row["vertices"], row["new_vertices"],
                            row["cache_hits"], f"{row['sec']:.9f}", f"{rate:.1f}"])


perf = Perf()
