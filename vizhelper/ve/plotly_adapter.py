# vizhelper/ve/plotly_adapter.py
from typing import Any, Dict, Sequence

UNIT = [0, 1]
MARGIN = {"l": 60, "r": 10, "t": 50, "b": 60}

def _line_trace(x, y, name: str) -> Dict[str, Any]:
    return {"type": "scatter", "mode": "lines", "name": name, "x": list(x), "y": list(y)}

def line_figure(x: Sequence[float], y: Sequence[float], title: str = "Series",
                x_label: str = "t", y_label: str = "y") -> Dict[str, Any]:
    return {
        "data": [_line_trace(x, y, "series")],
        "layout": {
            "title": {"text": title},
            "xaxis": {"title": {"text": x_label}},
            "yaxis": {"title": {"text": y_label}},
            "margin": MARGIN,
        },
    }

def unit_figure(x: Sequence[float], y: Sequence[float], title: str,
                x_label: str, y_label: str, name: str) -> Dict[str, Any]:
    # both axes pinned to [0,1], also when there is nothing to draw yet
    return {
        "data": [_line_trace(x, y, name)],
        "layout": {
            "title": {"text": title},
            "xaxis": {"title": {"text": x_label}, "range": UNIT, "autorange": False},
            "yaxis": {"title": {"text": y_label}, "range": UNIT, "autorange": False},
            "margin": MARGIN,
            "showlegend": False,
        },
    }

def roc_figure(fpr, tpr, title: str = "ROC Curve") -> Dict[str, Any]:
    return unit_figure(fpr, tpr, title, "FPR", "TPR", "ROC")

def pr_figure(recall, precision, title: str = "Precision–Recall Curve") -> Dict[str, Any]:
    return unit_figure(recall, precision, title, "Recall", "Precision", "PR")
