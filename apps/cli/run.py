# apps/cli/run.py
"""
CLI entry point for benchmarking the entropy solvers.

This script:
  1) Validates the dictionary and answers list (counts, SHA, answers ⊆ dictionary).
  2) Loads the frequency table once and, for lookup-based solvers, builds the
     shared pairwise cache once.
  3) Plays every answer (or the first --max) with a fresh session per game,
     printing how many turns each took, then the average score, and writes:
       - CSV:  per-game results + guess/mask history columns
       - JSON: manifest with config, dictionary hashes, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordle_solver.datasets import (
    ANSWERS_PATH, DICTIONARY_PATH, load_answers, load_frequency_table,
    pretty_summary, validate_dictionary,
)
from wordle_solver.engine import PairwiseLookup
from wordle_solver.harness import MAX_TURNS, run_batch, summarize
from wordle_solver.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordle_solver.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids

log = logging.getLogger("wordle_solver.cli")


def main():
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordle_solver: run entropy solver benchmarks")
    ap.add_argument("-i", "--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--dictionary", default=str(DICTIONARY_PATH),
                    help="path to '<word> <count>' frequency dictionary")
    ap.add_argument("--answers", default=str(ANSWERS_PATH),
                    help="path to answers list (one word per line)")
    ap.add_argument("-m", "--max", type=int, help="play only the first N answers")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS,
                    help=f"turn budget per game (default {MAX_TURNS})")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate inputs and print a one-liner summary
    rep = validate_dictionary(args.dictionary, args.answers)
    print(pretty_summary(rep))

    # 2) Load shared, read-only resources (fatal on a malformed dictionary)
    table = load_frequency_table(args.dictionary)
    answers = load_answers(args.answers)
    if args.max is not None:
        answers = answers[: args.max]

    solver = create_solver(args.solver)
    lookup = None
    if solver.config.use_lookup:
        t0 = time.perf_counter()
        lookup = PairwiseLookup.build(table, limit=solver.config.lookup_limit)
        log.info("built pairwise lookup for %d words in %.1fs", len(lookup), time.perf_counter() - t0)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    total = len(answers)
    start = time.time()
    last_print = 0.0
    bar = tqdm(total=total, ncols=80, desc="Running", unit="game") if mode == "bar" else None
    done = 0

    def report(r):
        nonlocal done, last_print
        done += 1
        if r["success"]:
            line, err = f"guessed '{r['answer']}' in {r['guesses']}", False
        else:
            line, err = f"failed to guess '{r['answer']}' within {args.max_turns} turns", True
        if bar is not None:
            tqdm.write(line, file=sys.stderr if err else sys.stdout)
            bar.update(1)
        else:
            print(line, file=sys.stderr if err else sys.stdout)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (done == total):
                elapsed = now - start
                pct = 100.0 * done / max(1, total)
                sys.stderr.write(f"\r[{done}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    results = run_batch(solver, answers, table=table, lookup=lookup,
                        max_turns=args.max_turns, on_result=report)

    if bar is not None:
        bar.close()
    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize(results)
    if summary["average_score"] is not None:
        print(f"average score {summary['average_score']:.2f}")
    if summary["failed"]:
        print(f"failed games: {summary['failed']}")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{solver.id}_{run_id}.csv"
    manifest_path = outdir / f"run_{solver.id}_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "summary": summary,
        "solver_id": solver.id,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
