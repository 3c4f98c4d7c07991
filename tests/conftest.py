"""Shared pytest fixtures: stubbed metrics API and realistic payloads."""

import math
from typing import Callable

import httpx
import numpy as np
import pytest
from sklearn.metrics import auc, precision_recall_curve, roc_curve

from vizhelper.api.client import APIClient

BASE = "http://metrics.test"


@pytest.fixture()
def make_api() -> Callable[..., APIClient]:
    """Return a factory: handler -> APIClient talking to an httpx.MockTransport."""

    def _make(handler, base_url: str = BASE) -> APIClient:
        return APIClient(base_url=base_url, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture()
def metrics_payload() -> Callable[..., dict]:
    """Return a factory for /api/metrics bodies: n ordered samples of a sine."""

    def _payload(series: str = "sine", n: int = 300) -> dict:
        return {
            "series": series,
            "points": [{"t": float(i), "y": math.sin(i / 10.0)} for i in range(n)],
        }

    return _payload


@pytest.fixture()
def roc_pr_payload() -> dict:
    """A /api/metrics/roc_pr body computed from a small scored sample."""
    y_true = np.array([0, 0, 1, 1, 1, 0, 1, 0, 1, 0])
    y_score = np.array([0.1, 0.3, 0.9, 0.8, 0.7, 0.2, 0.65, 0.4, 0.55, 0.05])
    fpr, tpr, _ = roc_curve(y_true, y_score)
    precision, recall, _ = precision_recall_curve(y_true, y_score)
    return {
        "roc": {
            "points": [{"x": float(a), "y": float(b)} for a, b in zip(fpr, tpr)],
            "auc": float(auc(fpr, tpr)),
        },
        "pr": {
            "points": [{"x": float(r), "y": float(p)} for r, p in zip(recall, precision)],
            "auc": float(auc(recall, precision)),
        },
    }
