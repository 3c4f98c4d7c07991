"""Local chart UI: routes, initial load, PNG export."""

import asyncio

import httpx
import pytest

from vizhelper.server.app import create_app


def _api_handler(metrics_payload, roc_pr_payload):
    def handler(request):
        if request.url.path == "/api/metrics/roc_pr":
            return httpx.Response(200, json=roc_pr_payload)
        kind = request.url.params.get("kind", "sine")
        n = int(request.url.params.get("n", "300"))
        return httpx.Response(200, json=metrics_payload(kind, n))
    return handler


@pytest.fixture()
def viz_app(make_api, metrics_payload, roc_pr_payload):
    """App wired to a stubbed metrics API, initial load disabled."""
    return create_app(api=make_api(_api_handler(metrics_payload, roc_pr_payload)),
                      initial_load=False)


def _client(app) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")


@pytest.mark.asyncio
async def test_index_serves_page(viz_app) -> None:
    async with _client(viz_app) as c:
        r = await c.get("/")
    assert r.status_code == 200
    assert "Minimal ML Charts" in r.text
    assert "ROC &amp; PR" in r.text


@pytest.mark.asyncio
async def test_health(viz_app) -> None:
    async with _client(viz_app) as c:
        r = await c.get("/health")
    assert r.json() == {"ok": True, "base_url": "http://metrics.test"}


@pytest.mark.asyncio
async def test_metrics_load_with_params_and_wait(viz_app) -> None:
    async with _client(viz_app) as c:
        r = await c.post("/metrics/load", params={"kind": "cosine", "n": 100, "noise": 0.2, "wait": True})
        v = (await c.get("/view/metrics")).json()
    assert r.status_code == 200
    assert r.json()["body"]["n_points"] == 100
    assert v["controls"]["kind"] == "cosine"
    assert v["controls"]["n_label"] == "n 100"
    assert v["body"]["state"] == "chart"


@pytest.mark.asyncio
async def test_load_without_wait_reports_loading(make_api, roc_pr_payload) -> None:
    gate = asyncio.Event()

    async def handler(request):
        await gate.wait()
        return httpx.Response(200, json=roc_pr_payload)

    app = create_app(api=make_api(handler), initial_load=False)
    async with _client(app) as c:
        r = await c.post("/roc_pr/load")
        assert r.json()["loading"] is True
        assert (await c.get("/view/roc_pr")).json()["loading"] is True
        gate.set()
        while app.state.roc_pr.pending:
            await asyncio.sleep(0)
        v = (await c.get("/view/roc_pr")).json()
    assert v["loading"] is False
    assert len(v["auc"]) == 2


@pytest.mark.asyncio
async def test_switching_screens_keeps_other_state(viz_app) -> None:
    async with _client(viz_app) as c:
        await c.post("/metrics/load", params={"n": 50, "wait": True})
        await c.post("/roc_pr/load", params={"wait": True})
        v = (await c.get("/view/metrics")).json()
    assert v["body"]["n_points"] == 50


@pytest.mark.asyncio
async def test_bad_query_type_is_422(viz_app) -> None:
    async with _client(viz_app) as c:
        r = await c.post("/metrics/load", params={"n": "abc"})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_unknown_screen_is_404(viz_app) -> None:
    async with _client(viz_app) as c:
        r = await c.get("/view/settings")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_api_down_shows_error_view(make_api) -> None:
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    app = create_app(api=make_api(handler), initial_load=False)
    async with _client(app) as c:
        v = (await c.post("/metrics/load", params={"wait": True})).json()
    assert v["body"]["state"] == "error"
    assert v["body"]["message"] == "Failed to fetch metrics"


@pytest.mark.asyncio
async def test_lifespan_triggers_initial_load(make_api, metrics_payload, roc_pr_payload) -> None:
    app = create_app(api=make_api(_api_handler(metrics_payload, roc_pr_payload)))
    async with app.router.lifespan_context(app):
        while app.state.metrics.pending or app.state.roc_pr.pending:
            await asyncio.sleep(0)
    assert len(app.state.metrics.points) == 300
    assert app.state.roc_pr.roc


@pytest.mark.asyncio
async def test_png_export(viz_app) -> None:
    async with _client(viz_app) as c:
        empty = await c.get("/metrics/chart.png")
        await c.post("/roc_pr/load", params={"wait": True})
        curves = await c.get("/roc_pr/chart.png")
    for r in (empty, curves):
        assert r.status_code == 200
        assert r.headers["content-type"] == "image/png"
        assert r.content.startswith(b"\x89PNG")


@pytest.mark.asyncio
async def test_fetch_log_rows(make_api, metrics_payload, roc_pr_payload, tmp_path) -> None:
    log_path = tmp_path / "runs" / "fetch.csv"
    app = create_app(api=make_api(_api_handler(metrics_payload, roc_pr_payload)),
                     initial_load=False, fetch_log=str(log_path))
    async with _client(app) as c:
        await c.post("/metrics/load", params={"kind": "ramp", "n": 60, "wait": True})
        await c.post("/roc_pr/load", params={"wait": True})
    lines = log_path.read_text().splitlines()
    assert lines[0] == "timestamp,screen,params,n_points,outcome"
    assert lines[1].split(",")[1:] == ["metrics", "kind=ramp;n=60;noise=0.05", "60", "ok"]
    assert lines[2].split(",")[1] == "roc_pr"


@pytest.mark.asyncio
@pytest.mark.parametrize("noise", ["nan", "inf", "-inf"])
async def test_non_finite_noise_is_422_and_view_stays_servable(viz_app, noise) -> None:
    async with _client(viz_app) as c:
        r = await c.post("/metrics/load", params={"noise": noise, "wait": True})
        v = await c.get("/view/metrics")
    assert r.status_code == 422
    assert v.status_code == 200
    assert v.json()["controls"]["noise"] == 0.05


@pytest.mark.asyncio
async def test_non_finite_api_values_become_error_view(make_api) -> None:
    body = b'{"series": "sine", "points": [{"t": 0, "y": NaN}, {"t": 1, "y": 0.5}]}'
    app = create_app(api=make_api(lambda r: httpx.Response(200, content=body)), initial_load=False)
    async with _client(app) as c:
        r = await c.post("/metrics/load", params={"wait": True})
        v = await c.get("/view/metrics")
    assert r.status_code == 200
    assert v.status_code == 200
    assert v.json()["body"]["state"] == "error"
    assert app.state.metrics.points == ()


@pytest.mark.asyncio
async def test_unwritable_fetch_log_does_not_fail_load(make_api, metrics_payload, roc_pr_payload, tmp_path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    app = create_app(api=make_api(_api_handler(metrics_payload, roc_pr_payload)),
                     initial_load=False, fetch_log=str(blocker / "fetch.csv"))
    async with _client(app) as c:
        r = await c.post("/metrics/load", params={"n": 50, "wait": True})
    assert r.status_code == 200
    assert r.json()["body"]["n_points"] == 50
