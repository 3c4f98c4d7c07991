# vizhelper/api/client.py
from __future__ import annotations
import logging
from typing import Any, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from vizhelper import config
from vizhelper.api.errors import DecodeFailure, HTTPStatusFailure, MalformedRequest, TransportFailure
from vizhelper.svl.metrics_spec import MetricsResponse
from vizhelper.svl.roc_pr_spec import RocPrResponse

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

METRICS_PATH = "/api/metrics"
ROC_PR_PATH = "/api/metrics/roc_pr"


class APIClient:
    """
    Thin JSON-over-HTTP client for the metrics API.
    Every call opens a fresh httpx client: no retries, no caching,
    timeouts are httpx's defaults. Redirects are followed and the final
    status decides success.
    """

    def __init__(self, base_url: Optional[str] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url if base_url is not None else config.BASE_URL
        self._transport = transport  # tests plug an httpx.MockTransport in here

    def build_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> httpx.URL:
        try:
            base = httpx.URL(self.base_url)
        except (httpx.InvalidURL, TypeError) as e:
            raise MalformedRequest(f"bad base url {self.base_url!r}: {e}") from e
        if base.scheme not in ("http", "https") or not base.host:
            raise MalformedRequest(f"base url must be absolute http(s): {self.base_url!r}")

        joined = base.path.rstrip("/") + "/" + path.lstrip("/")
        try:
            url = base.copy_with(path=joined)
            if params:
                url = url.copy_with(params={k: str(v) for k, v in params.items()})
        except httpx.InvalidURL as e:
            raise MalformedRequest(f"cannot build url for {path!r}: {e}") from e
        return url

    async def get(self, path: str, model: Type[M],
                  params: Optional[Mapping[str, Any]] = None) -> M:
        url = self.build_url(path, params)  # MalformedRequest surfaces before any I/O
        log.debug("GET %s", url)
        try:
            async with httpx.AsyncClient(transport=self._transport, follow_redirects=True) as hx:
                r = await hx.get(url)
        except httpx.InvalidURL as e:
            raise MalformedRequest(str(e)) from e
        except httpx.HTTPError as e:
            log.warning("transport failure for %s: %s", url, e)
            raise TransportFailure(f"{type(e).__name__}: {e}") from e

        if not (200 <= r.status_code < 300):
            log.warning("HTTP %s for %s", r.status_code, url)
            raise HTTPStatusFailure(r.status_code, str(url))

        try:
            return model.model_validate_json(r.content)
        except ValidationError as e:
            log.warning("decode failure for %s: %d error(s)", url, e.error_count())
            raise DecodeFailure(f"{model.__name__}: {e.error_count()} validation error(s)") from e

    # ---------- endpoints ----------

    async def fetch_metrics(self, kind: str = "sine", n: int = 300, noise: float = 0.05) -> MetricsResponse:
        # passed through as-is; range checks are the server's business
        return await self.get(METRICS_PATH, MetricsResponse,
                              params={"kind": kind, "n": n, "noise": noise})

    async def fetch_roc_pr(self) -> RocPrResponse:
        return await self.get(ROC_PR_PATH, RocPrResponse)
