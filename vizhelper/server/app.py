# vizhelper/server/app.py — FastAPI app factory for the local chart UI

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from vizhelper.api.client import APIClient
from vizhelper.server.viz_routes import router as viz_router
from vizhelper.state.metrics_state import MetricsState
from vizhelper.state.roc_pr_state import RocPrState

log = logging.getLogger(__name__)


def create_app(api: Optional[APIClient] = None, initial_load: bool = True,
               fetch_log: Optional[str] = None) -> FastAPI:
    api = api or APIClient()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if initial_load:
            # each screen fetches once as soon as the UI is up
            log.info("initial load from %s", api.base_url)
            app.state.metrics.start()
            app.state.roc_pr.start()
        yield

    app = FastAPI(title="VizHelper", lifespan=lifespan)
    # screens keep their own state; switching tabs never touches the other one
    app.state.api = api
    app.state.metrics = MetricsState(api, fetch_log=fetch_log)
    app.state.roc_pr = RocPrState(api, fetch_log=fetch_log)

    app.include_router(viz_router)

    @app.get("/health")
    def health():
        return {"ok": True, "base_url": api.base_url}

    return app


app = create_app()
