from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse
from pathlib import Path
import json
import os

app = FastAPI(title="Mock Persistence Server", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/persistence_stub") if os.path.exists("/persistence_stub") else Path(__file__).resolve().parents[1] / "persistence_stub"

TABLES = {"budget_entries", "ebt_accounts"}


def _user_from_filter(value: str) -> str:
    # PostgREST filter syntax: user_id=eq.<id>
    if not value.startswith("eq."):
        raise HTTPException(status_code=400, detail="only eq. filters are supported")
    return value[3:]


def _load_persona(user_id: str) -> dict:
    if not user_id or "/" in user_id or "\\" in user_id or ".." in user_id:
        raise HTTPException(status_code=400, detail="invalid user_id")
    file = DATA_DIR / f"{user_id}.json"
    if not file.exists():
        return {"budget_entries": [], "ebt_accounts": []}
    return json.loads(file.read_text())


@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/rest/v1/{table}")
def get_rows(table: str, user_id: str = Query(...), date: str | None = Query(None)):
    if table not in TABLES:
        raise HTTPException(status_code=404, detail="table not found")
    rows = _load_persona(_user_from_filter(user_id)).get(table, [])
    if table == "budget_entries":
        if date and date.startswith("gte."):
            rows = [r for r in rows if r["date"] >= date[4:]]
        rows = sorted(rows, key=lambda r: r["date"])
    return JSONResponse(content=rows)
