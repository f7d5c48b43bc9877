from __future__ import annotations
import argparse
from dataclasses import asdict
from flask import Flask, request, jsonify, Response

from subtlex.engine import Norms
from subtlex.config import DEFAULT_LDIST_LIMIT

app = Flask(__name__)
_norms: Norms | None = None


def _handle() -> Norms:
    if _norms is None:
        raise RuntimeError("Norms not initialized. Run main() or set subtlex_web.web._norms first.")
    return _norms


def _range_arg(name: str) -> list[str] | None:
    """?freq=2:400 -> ['2', '400'];  ?length=4 -> ['4', '4']."""
    raw = request.args.get(name, None, type=str)
    if raw is None or raw == "":
        return None
    if ":" not in raw:
        return [raw, raw]
    lo, hi = raw.split(":", 1)
    return [lo, hi]


@app.errorhandler(ValueError)
def _bad_request(e: ValueError):
    return jsonify({"error": str(e)}), 400


@app.errorhandler(TimeoutError)
def _timeout(e: TimeoutError):
    return jsonify({"error": str(e)}), 504


# ---------- API ----------
@app.get("/api/health")
def api_health():
    return jsonify({"ok": _norms is not None})


@app.get("/api/word/<word>")
def api_word(word: str):
    n = _handle()
    return jsonify({
        "word": word,
        "exists": n.exists(word),
        "frequency": n.frequency(word),
        "log_frequency": n.log_frequency(word),
        "zipf": n.zipf(word),
        "part_of_speech": n.part_of_speech(word),
    })


@app.get("/api/neighbors/<word>")
def api_neighbors(word: str):
    n = _handle()
    limit = request.args.get("limit", DEFAULT_LDIST_LIMIT, type=int)
    count, words = n.neighbors(word)
    return jsonify({
        "word": word,
        "count": count,
        "neighbors": words,
        "frequency_max": n.neighbor_frequency_max(word),
        "frequency_mean": n.neighbor_frequency_mean(word),
        "log_frequency_mean": n.neighbor_log_frequency_mean(word),
        "zipf_mean": n.neighbor_zipf_mean(word),
        "mean_closest_distance": n.mean_closest_distance(word, limit),
    })


@app.get("/api/list")
def api_list():
    words = _handle().list_words(
        regex=request.args.get("regex") or None,
        cv_pattern=request.args.get("cv") or None,
        frequency=_range_arg("freq"),
        zipf=_range_arg("zipf"),
        length=_range_arg("length"),
        neighbor_count=_range_arg("onc"),
    )
    return jsonify(words)


@app.get("/api/random")
def api_random():
    return jsonify(asdict(_handle().random_record()))


# ---------- UI ----------
@app.get("/")
def home():
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>SUBTLEX norms</title>
<style>
body{margin:0;background:#0b0f14;color:#cfd8e3;font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial}
.container{max-width:760px;margin:24px auto;padding:0 16px}
input{padding:10px 12px;border-radius:10px;border:1px solid #1c2530;background:#0b1117;color:#cfd8e3;font-size:16px;width:60%}
pre{background:#0f141b;border:1px solid #1c2530;border-radius:12px;padding:14px;white-space:pre-wrap}
</style>
</head>
<body>
  <div class="container">
    <h1>SUBTLEX norms</h1>
    <form id="f"><input id="w" placeholder="Type a word and press Enter" autofocus /></form>
    <pre id="out">Frequencies, part of speech and orthographic neighbours.</pre>
  </div>
<script>
const f = document.querySelector("#f"), w = document.querySelector("#w"), out = document.querySelector("#out");
f.addEventListener("submit", async (ev)=>{
  ev.preventDefault();
  const word = w.value.trim();
  if(!word) return;
  try{
    const [a, b] = await Promise.all([
      fetch(`/api/word/${encodeURIComponent(word)}`).then(r=>r.json()),
      fetch(`/api/neighbors/${encodeURIComponent(word)}`).then(r=>r.json()),
    ]);
    out.textContent = JSON.stringify({...a, ...b}, null, 2);
  }catch(e){
    out.textContent = `Error: ${e.message ?? e}`;
  }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve SUBTLEX norms over HTTP")
    ap.add_argument("--dir", default=None)
    ap.add_argument("--filename", default=None)
    ap.add_argument("--store", default="memory://")  # a server benefits from loading once
    ap.add_argument("--timeout", type=float, default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _norms
    _norms = Norms(args.dir, filename=args.filename, store=args.store,
                   scan_timeout=args.timeout, verbose=args.verbose)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _norms.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
