# vizhelper/ve/views.py
"""
State -> view model. Everything here is a pure function of the state object
it is given (read-only attribute access, no I/O); the page draws whatever
these return.
"""
from __future__ import annotations
import math
from typing import Any, Dict, List, Optional

from vizhelper.ve.plotly_adapter import line_figure, pr_figure, roc_figure

LOADING_TEXT = "Loading…"


def _error_panel(message: str) -> Dict[str, Any]:
    return {"title": "Error", "message": message}

def format_auc(label: str, value: Optional[float]) -> str:
    v = math.nan if value is None else value
    return f"{label}: {v:.3f}"   # NaN formats as "nan"


def metrics_body(s) -> Dict[str, Any]:
    # exactly one of four states, first match wins
    if s.loading:
        return {"state": "loading", "message": LOADING_TEXT}
    if s.error:
        return {"state": "error", **_error_panel(s.error)}
    if not s.points:
        return {"state": "empty", "title": "No Data", "message": "Press Load"}
    return {
        "state": "chart",
        "n_points": len(s.points),
        "figure": line_figure([p.t for p in s.points], [p.y for p in s.points],
                              title=s.kind.capitalize()),
    }

def render_metrics(s) -> Dict[str, Any]:
    return {
        "screen": "metrics",
        "revision": s.revision,
        "loading": s.loading,
        "controls": {
            "kind": s.kind,
            "kinds": list(s.kinds),
            "n": s.n,
            "n_range": list(s.n_range),
            "n_label": f"n {int(s.n)}",
            "noise": s.noise,
            "noise_range": list(s.noise_range),
            "noise_label": f"noise {s.noise:.2f}",
            "action": "Load",
        },
        "body": metrics_body(s),
    }


def auc_texts(s) -> List[str]:
    out = []
    if s.roc: out.append(format_auc("ROC AUC", s.roc_auc))
    if s.pr:  out.append(format_auc("PR AUC", s.pr_auc))
    return out

def render_roc_pr(s) -> Dict[str, Any]:
    return {
        "screen": "roc_pr",
        "revision": s.revision,
        "loading": s.loading,
        "controls": {"action": "Generate"},
        "auc": auc_texts(s),
        "charts": [
            roc_figure([p.x for p in s.roc], [p.y for p in s.roc]),
            pr_figure([p.x for p in s.pr], [p.y for p in s.pr]),
        ],
        # shown alongside the charts, never instead of them
        "error": _error_panel(s.error) if s.error else None,
    }
