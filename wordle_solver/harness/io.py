"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- summarize:      aggregate a batch into solved/failed counts, average score
                  and a turns histogram.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, answer, status, guesses, time_ms,
      guess_1, mask_1, ..., guess_<max_turns>, mask_<max_turns>

    Only failed guesses appear in the history columns; a solved game's final
    guess is the answer itself.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "status", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"mask_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "status": r["status"],
                "guesses": "" if r["guesses"] is None else r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, mask = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"mask_{i}"] = mask
                else:
                    row[f"guess_{i}"] = ""
                    row[f"mask_{i}"] = ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - dictionary: output of datasets.validate_dictionary(...)
      - summary: output of summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """Games played, solved, failed, average turns over solved games, histogram."""
    solved = [r["guesses"] for r in results if r["success"]]
    hist = Counter(solved)
    return {
        "games": len(results),
        "solved": len(solved),
        "failed": len(results) - len(solved),
        "average_score": (sum(solved) / len(solved)) if solved else None,
        "histogram": {str(k): hist[k] for k in sorted(hist)},
    }


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
