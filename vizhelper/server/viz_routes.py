# vizhelper/server/viz_routes.py — page + view-model endpoints for both screens

from __future__ import annotations
import asyncio
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, Response
from pydantic import FiniteFloat

from vizhelper.ve.png_adapter import metrics_png, roc_pr_png
from vizhelper.ve.views import format_auc

router = APIRouter(tags=["viz"])

SCREENS = ("metrics", "roc_pr")


def _screen(request: Request, name: str):
    if name not in SCREENS:
        raise HTTPException(404, f"unknown screen: {name}")
    return getattr(request.app.state, name)

async def _run(state, wait: bool) -> dict:
    task = state.start()
    if wait:
        await task
    else:
        # let load() reach its first await so the response already says "loading"
        await asyncio.sleep(0)
    return state.view


@router.get("/view/{screen}")
def view(request: Request, screen: str):
    return _screen(request, screen).view

@router.post("/metrics/load")
async def metrics_load(request: Request,
                       kind: Optional[str] = Query(None),
                       n: Optional[int] = Query(None),
                       noise: Optional[FiniteFloat] = Query(None),
                       wait: bool = Query(False)):
    s = request.app.state.metrics
    s.update(kind=kind, n=n, noise=noise)
    return await _run(s, wait)

@router.post("/roc_pr/load")
async def roc_pr_load(request: Request, wait: bool = Query(False)):
    return await _run(request.app.state.roc_pr, wait)

@router.get("/metrics/chart.png")
def metrics_chart_png(request: Request):
    s = request.app.state.metrics
    return Response(content=metrics_png(s.points, s.kind), media_type="image/png")

@router.get("/roc_pr/chart.png")
def roc_pr_chart_png(request: Request):
    s = request.app.state.roc_pr
    roc_txt = format_auc("AUC", s.roc_auc) if s.roc else None
    pr_txt = format_auc("AUC", s.pr_auc) if s.pr else None
    return Response(content=roc_pr_png(s.roc, s.pr, roc_txt, pr_txt), media_type="image/png")


PAGE = """
<!doctype html><html><head>
<meta charset="utf-8"/><title>Minimal ML Charts</title>
<script src="https://cdn.plot.ly/plotly-2.35.2.min.js"></script>
<style>
body{font-family:ui-sans-serif,system-ui,-apple-system;margin:0} header{background:#0f172a;color:#fff;padding:12px 16px}
main{max-width:960px;margin:0 auto;padding:16px} .card{border:1px solid #e5e7eb;border-radius:12px;padding:14px;margin:12px 0}
button,select,input{font-size:14px} .row{display:flex;gap:12px;align-items:center;flex-wrap:wrap}
button{background:#111827;color:#fff;border:none;border-radius:8px;padding:8px 12px;cursor:pointer} button:hover{background:#0f172a}
.tab{background:#e5e7eb;color:#111827} .tab.on{background:#111827;color:#fff}
.panel{text-align:center;color:#6b7280;padding:40px 0} .panel h3{margin:0 0 6px;color:#111827}
.plot{width:100%;min-height:320px} .small{min-height:220px}
</style>
</head><body>
<header><h1 style="margin:0;font-size:18px">Minimal ML Charts</h1></header>
<main>
<div class="row">
  <button class="tab on" data-tab="metrics">Metrics</button>
  <button class="tab" data-tab="roc_pr">ROC &amp; PR</button>
</div>

<section id="tab_metrics" class="card">
  <div class="row">
    <select id="m_kind"></select>
    <label><span id="m_n_lbl" style="display:inline-block;width:70px"></span><input id="m_n" type="range"/></label>
    <label><span id="m_noise_lbl" style="display:inline-block;width:100px"></span><input id="m_noise" type="range"/></label>
    <button id="m_load">Load</button>
  </div>
  <div id="m_body"></div>
</section>

<section id="tab_roc_pr" class="card" style="display:none">
  <div class="row"><button id="r_load">Generate</button><span id="r_auc"></span></div>
  <div id="r_roc" class="plot small"></div>
  <div id="r_pr" class="plot small"></div>
  <div id="r_err"></div>
</section>
</main>
<script>
const SEEN = {metrics:-1, roc_pr:-1};

function panel(p){ return `<div class="panel"><h3>${p.title||''}</h3><div>${p.message||''}</div></div>`; }

function drawMetrics(v){
  const c = v.controls;
  const sel = document.getElementById('m_kind');
  if (!sel.options.length){
    c.kinds.forEach(k => sel.add(new Option(k[0].toUpperCase()+k.slice(1), k)));
    const n = document.getElementById('m_n'), z = document.getElementById('m_noise');
    [n.min, n.max, n.step] = c.n_range; [z.min, z.max, z.step] = c.noise_range;
    n.value = c.n; z.value = c.noise; sel.value = c.kind;
  }
  document.getElementById('m_n_lbl').textContent = c.n_label;
  document.getElementById('m_noise_lbl').textContent = c.noise_label;
  const b = v.body, el = document.getElementById('m_body');
  if (b.state === 'chart'){
    if (!el.querySelector('.plot')) el.innerHTML = '<div class="plot"></div>';
    Plotly.react(el.querySelector('.plot'), b.figure.data, b.figure.layout, {displayModeBar:false});
  } else if (b.state === 'loading'){
    el.innerHTML = panel({title:'', message:b.message});
  } else {
    el.innerHTML = panel(b);
  }
}

function drawRocPr(v){
  document.getElementById('r_auc').textContent = v.auc.join('   ');
  Plotly.react('r_roc', v.charts[0].data, v.charts[0].layout, {displayModeBar:false});
  Plotly.react('r_pr',  v.charts[1].data, v.charts[1].layout, {displayModeBar:false});
  document.getElementById('r_err').innerHTML = v.error ? panel(v.error) : '';
}

const DRAW = {metrics: drawMetrics, roc_pr: drawRocPr};

function show(screen, v){
  if (v.revision === SEEN[screen]) return;
  SEEN[screen] = v.revision; DRAW[screen](v);
}

async function refresh(screen){
  const v = await (await fetch('/view/' + screen)).json();
  show(screen, v);
  if (v.loading) setTimeout(() => refresh(screen), 250);
}

async function load(screen, qs){
  const v = await (await fetch(`/${screen}/load` + (qs ? '?' + qs : ''), {method:'POST'})).json();
  show(screen, v);
  refresh(screen);
}

document.querySelectorAll('.tab').forEach(t => t.onclick = () => {
  document.querySelectorAll('.tab').forEach(x => x.classList.toggle('on', x === t));
  SEEN[t.dataset.tab] = -1;  // redraw: plots laid out while hidden have no size
  for (const s of Object.keys(DRAW))
    document.getElementById('tab_' + s).style.display = (s === t.dataset.tab) ? '' : 'none';
  refresh(t.dataset.tab);
});
document.getElementById('m_n').oninput = e => document.getElementById('m_n_lbl').textContent = 'n ' + e.target.value;
document.getElementById('m_noise').oninput = e => document.getElementById('m_noise_lbl').textContent = 'noise ' + Number(e.target.value).toFixed(2);
document.getElementById('m_load').onclick = () => load('metrics', new URLSearchParams({
  kind: document.getElementById('m_kind').value,
  n: document.getElementById('m_n').value,
  noise: document.getElementById('m_noise').value,
}).toString());
document.getElementById('r_load').onclick = () => load('roc_pr');

refresh('metrics'); refresh('roc_pr');
</script>
</body></html>
"""

@router.get("/", response_class=HTMLResponse)
def index():
    return HTMLResponse(PAGE)
