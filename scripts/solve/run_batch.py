from __future__ import annotations
import argparse, csv, os, time
from dataclasses import replace
from typing import Dict, Optional
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from sokobot_core.errors import SokobanError
from sokobot_core.levels.resolve import load_level_by_id
from search.config import DEFAULT_CONFIG, SearchConfig, load_config
from search.solver import run_search

FIELDS = ["level_id", "heuristic", "ordering", "success", "exhausted", "nodes", "generated",
          "runtime", "solution_len", "moves", "error"]


def _run_one(args_tuple) -> Dict[str, object]:
    level_id, cfg = args_tuple
    row: Dict[str, object] = {
        "level_id": level_id,
        "heuristic": cfg.heuristic,
        "ordering": cfg.ordering,
        "success": False,
        "exhausted": False,
        "nodes": 0,
        "generated": 0,
        "runtime": 0.0,
        "solution_len": -1,
        "moves": "",
        "error": "",
    }
    try:
        level = load_level_by_id(level_id)
    except (OSError, IndexError, SokobanError) as e:
        row["error"] = f"{type(e).__name__}: {e}"
        return row

    res = run_search(level, cfg)
    row.update({
        "success": bool(res.get("success", False)),
        "exhausted": bool(res.get("exhausted", False)),
        "nodes": int(res.get("nodes", 0)),
        "generated": int(res.get("generated", 0)),
        "runtime": float(res.get("runtime", 0.0)),
        "solution_len": int(res.get("solution_len", -1)),
        "moves": res.get("moves", ""),
    })
    return row


def main():
    p = argparse.ArgumentParser(description="Batch solver runs → CSV (flags, parallel)")
    p.add_argument("--list", required=True, help="file with one level id per line")
    p.add_argument("--config", default=None, help="YAML file with a 'search:' section")
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--time_limit", type=float, default=None)
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    args = p.parse_args()

    cfg: SearchConfig = load_config(args.config) if args.config else DEFAULT_CONFIG
    overrides: Dict[str, Optional[float]] = {}
    if args.time_limit is not None:
        overrides["time_limit_s"] = args.time_limit
    if args.node_limit is not None:
        overrides["node_limit"] = args.node_limit
    if overrides:
        cfg = replace(cfg, **overrides)

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(args.list, "r", encoding="utf-8") as f:
        level_ids = [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]

    jobs = args.jobs or cpu_count()
    payload = [(lid, cfg) for lid in level_ids]

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc="Solving", unit="level")]
    else:
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc="Solving", unit="level"))

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    solved = sum(1 for r in rows if r["success"])
    print(f"done: {solved}/{len(rows)} solved → {args.out}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()
