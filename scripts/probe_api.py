# scripts/probe_api.py — hit the metrics API directly and summarize what comes back
import os, sys, requests

BASE = os.environ.get("VIZHELPER_BASE_URL", "http://127.0.0.1:8000").rstrip("/")
KINDS = ["sine", "cosine", "ramp", "random"]


def probe_metrics(kind, n=300, noise=0.05):
    r = requests.get(BASE + "/api/metrics", params={"kind": kind, "n": str(n), "noise": str(noise)})
    r.raise_for_status(); j = r.json()
    ys = [p["y"] for p in j["points"]]
    return j["series"], len(ys), (min(ys), max(ys)) if ys else (None, None)

def probe_roc_pr():
    r = requests.get(BASE + "/api/metrics/roc_pr")
    r.raise_for_status(); j = r.json()
    return len(j["roc"]["points"]), j["roc"].get("auc"), len(j["pr"]["points"]), j["pr"].get("auc")

def main():
    for k in KINDS:
        series, n, (lo, hi) = probe_metrics(k)
        print(f"{k:7s} series={series} points={n} y∈[{lo}, {hi}]")
    nroc, roc_auc, npr, pr_auc = probe_roc_pr()
    print(f"roc points={nroc} auc={roc_auc}   pr points={npr} auc={pr_auc}")

if __name__ == "__main__":
    try:
        main()
    except requests.RequestException as e:
        print(f"probe failed against {BASE}: {e}", file=sys.stderr)
        sys.exit(1)
