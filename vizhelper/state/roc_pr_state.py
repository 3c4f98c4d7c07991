# vizhelper/state/roc_pr_state.py
from __future__ import annotations
import logging, math
from typing import Any, Dict, Optional, Tuple

from vizhelper.api.client import APIClient
from vizhelper.api.errors import APIError
from vizhelper.state.base import ViewState
from vizhelper.svl.roc_pr_spec import Curve, XYPoint
from vizhelper.ve.views import render_roc_pr

log = logging.getLogger(__name__)

ERROR_MSG = "Failed to fetch ROC/PR"


def _fresh(curve: Curve) -> Tuple[XYPoint, ...]:
    return tuple(XYPoint(x=p.x, y=p.y) for p in curve.points)

def _auc(curve: Curve) -> float:
    return curve.auc if curve.auc is not None else math.nan


class RocPrState(ViewState):
    screen = "roc_pr"

    def __init__(self, api: APIClient, fetch_log: Optional[str] = None):
        super().__init__(api, fetch_log)
        self.roc: Tuple[XYPoint, ...] = ()
        self.pr: Tuple[XYPoint, ...] = ()
        self.roc_auc = math.nan
        self.pr_auc = math.nan
        self.view = self.render()

    def render(self) -> Dict[str, Any]:
        return render_roc_pr(self)

    async def load(self) -> None:
        self.loading = True
        self.error = None
        self._emit()
        outcome = "ok"
        try:
            resp = await self.api.fetch_roc_pr()
            self.roc = _fresh(resp.roc)
            self.pr = _fresh(resp.pr)
            self.roc_auc = _auc(resp.roc)
            self.pr_auc = _auc(resp.pr)
        except APIError as e:
            log.info("roc/pr load failed (%s): %s", type(e).__name__, e)
            self.roc, self.pr = (), ()
            self.roc_auc = self.pr_auc = math.nan
            self.error = ERROR_MSG
            outcome = type(e).__name__
        finally:
            self.loading = False
            self._emit()
        self._record({}, len(self.roc) + len(self.pr), outcome)
