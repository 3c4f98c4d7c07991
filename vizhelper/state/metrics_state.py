# vizhelper/state/metrics_state.py
from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Tuple

from vizhelper.api.client import APIClient
from vizhelper.api.errors import APIError
from vizhelper.state.base import ViewState
from vizhelper.svl.metrics_spec import MetricPoint
from vizhelper.ve.views import render_metrics

log = logging.getLogger(__name__)

# choices the UI offers; the API accepts any kind string
KINDS = ("sine", "cosine", "ramp", "random")
N_RANGE = (50, 2000, 50)          # min, max, step
NOISE_RANGE = (0.0, 0.5, 0.01)

ERROR_MSG = "Failed to fetch metrics"


class MetricsState(ViewState):
    screen = "metrics"
    kinds = KINDS
    n_range = N_RANGE
    noise_range = NOISE_RANGE

    def __init__(self, api: APIClient, fetch_log: Optional[str] = None,
                 kind: str = "sine", n: int = 300, noise: float = 0.05):
        super().__init__(api, fetch_log)
        self.kind = kind
        self.n = n
        self.noise = noise
        self.points: Tuple[MetricPoint, ...] = ()
        self.view = self.render()

    def params(self) -> Dict[str, Any]:
        return {"kind": self.kind, "n": self.n, "noise": self.noise}

    def update(self, kind: Optional[str] = None, n: Optional[int] = None,
               noise: Optional[float] = None) -> None:
        # no clamping: the sliders bound what a user can pick, the server judges the rest
        if kind is not None: self.kind = kind
        if n is not None: self.n = int(n)
        if noise is not None: self.noise = float(noise)
        self._emit()

    def render(self) -> Dict[str, Any]:
        return render_metrics(self)

    async def load(self) -> None:
        self.loading = True
        self.error = None
        self._emit()
        params = self.params()
        outcome = "ok"
        try:
            resp = await self.api.fetch_metrics(**params)
            # fresh render ids for every fetch
            self.points = tuple(MetricPoint(t=p.t, y=p.y) for p in resp.points)
            self.error = None
        except APIError as e:
            log.info("metrics load failed (%s): %s", type(e).__name__, e)
            self.points = ()
            self.error = ERROR_MSG
            outcome = type(e).__name__
        finally:
            self.loading = False
            self._emit()
        self._record(params, len(self.points), outcome)
