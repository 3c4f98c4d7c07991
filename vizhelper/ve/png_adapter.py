# vizhelper/ve/png_adapter.py
import io
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def _png_bytes(fig) -> bytes:
    buff = io.BytesIO()
    fig.savefig(buff, format="png", bbox_inches="tight", dpi=160)
    plt.close(fig)
    buff.seek(0)
    return buff.getvalue()

def metrics_png(points, kind: str = "series") -> bytes:
    fig, ax = plt.subplots(figsize=(7.5, 3.2))
    if points:
        ax.plot([p.t for p in points], [p.y for p in points], label=kind)
        ax.legend()
    else:
        ax.text(0.5, 0.5, "No Data", ha="center", va="center", transform=ax.transAxes)
    ax.set_title(kind.capitalize())
    ax.set_xlabel("t"); ax.set_ylabel("y")
    ax.grid(True, alpha=0.3)
    return _png_bytes(fig)

def _unit_axes(ax, pts, title, x_label, y_label, auc_text=None):
    ax.plot([p.x for p in pts], [p.y for p in pts])
    ax.set_xlim(0, 1); ax.set_ylim(0, 1)
    ax.set_title(f"{title} ({auc_text})" if auc_text else title)
    ax.set_xlabel(x_label); ax.set_ylabel(y_label)
    ax.grid(True, alpha=0.3)

def roc_pr_png(roc, pr, roc_auc_text=None, pr_auc_text=None) -> bytes:
    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(5.5, 8.0))
    _unit_axes(ax1, roc, "ROC Curve", "FPR", "TPR", roc_auc_text)
    _unit_axes(ax2, pr, "Precision–Recall Curve", "Recall", "Precision", pr_auc_text)
    fig.tight_layout()
    return _png_bytes(fig)
