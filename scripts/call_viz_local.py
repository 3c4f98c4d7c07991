# scripts/call_viz_local.py — drive the chart UI in-process and print its view models
import sys, pathlib, json
from dotenv import load_dotenv, find_dotenv

# Ensure project root is on sys.path (run from anywhere)
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

load_dotenv(find_dotenv())

from fastapi.testclient import TestClient
from vizhelper.server.app import create_app

client = TestClient(create_app(initial_load=False))

r = client.post("/metrics/load", params={"kind": "sine", "n": 300, "noise": 0.05, "wait": True})
print("metrics status:", r.status_code, "body:", r.json()["body"]["state"])

r = client.post("/roc_pr/load", params={"wait": True})
v = r.json()
print("roc_pr status:", r.status_code, "auc:", v["auc"], "error:", v["error"])
print(json.dumps(v["charts"][0]["layout"], indent=2)[:600])
