from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from charselect import config as CFG
from charselect.engine import Engine
from charselect.models import CharSelectGroup

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/search")
def api_search():
    if _engine is None or _engine.catalog is None:
        return jsonify({"error": "engine not initialized"}), 503
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", CFG.TOP_K, type=int)
    raw_group = request.args.get("group", "", type=str)
    try:
        group = CharSelectGroup.parse(raw_group) if raw_group else CFG.DEFAULT_GROUP
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    rows = _engine.search(q, group, limit=k)  # type: ignore
    return jsonify(rows)

@app.get("/api/groups")
def api_groups():
    return jsonify([{"value": g.value, "label": g.label} for g in CharSelectGroup])

@app.get("/health")
def health():
    entries = len(_engine.catalog) if _engine and _engine.catalog is not None else 0
    return jsonify({"ok": _engine is not None and _engine.catalog is not None, "entries": entries})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page: search box + group picker, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Character Select</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.card{ max-width:760px; margin:24px auto; background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
.controls{ display:flex; gap:12px; margin-bottom:12px }
input,select{ padding:10px 12px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:16px }
input{ flex:1 }
.row{ display:grid; grid-template-columns:3rem 1fr 10rem; gap:10px; padding:8px 12px; border-top:1px solid var(--border); cursor:pointer }
.row:hover{ background:#0d131a }
.glyph{ font-size:22px }
.cp{ color:var(--muted); font-family:ui-monospace,Menlo,Consolas,monospace; font-size:13px }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="card">
    <h1>Character Select</h1>
    <div class="controls">
      <input id="q" type="text" placeholder="Name, shortcode or U+hex…" autocomplete="off" autofocus />
      <select id="group"></select>
    </div>
    <div id="out" class="empty">Loading…</div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
const q = $("#q"), out = $("#out"), group = $("#group");
let t;
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
async function search(){
  const url = `/api/search?q=${encodeURIComponent(q.value)}&group=${encodeURIComponent(group.value)}&k=50`;
  const resp = await fetch(url);
  const data = await resp.json();
  if(!resp.ok){ out.className = "empty"; out.textContent = data.error || `HTTP ${resp.status}`; return; }
  if(data.length === 0){ out.className = "empty"; out.textContent = "No matches."; return; }
  out.className = "";
  out.innerHTML = data.map(r => `
    <div class="row" data-glyph="${esc(r.glyph)}">
      <div class="glyph">${esc(r.glyph)}</div><div>${esc(r.name)}</div><div class="cp">${esc(r.codepoints)}</div>
    </div>`).join("");
}
out.addEventListener("click", (ev) => {
  const row = ev.target.closest(".row");
  if(row && navigator.clipboard){ navigator.clipboard.writeText(row.dataset.glyph); }
});
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(search, 80); });
group.addEventListener("change", search);
fetch("/api/groups").then(r => r.json()).then(gs => {
  group.innerHTML = gs.map(g => `<option value="${g.value}">${esc(g.label)}</option>`).join("");
  search();
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.build(verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
