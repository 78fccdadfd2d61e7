import csv
import json
import runpy
import sys
from pathlib import Path

import pytest
from wordle_solver.datasets import load_answers, load_frequency_table
from wordle_solver.engine import FrequencyTable, PairwiseLookup
from wordle_solver.harness import MAX_TURNS, run_batch, run_case, summarize, write_csv, write_manifest
from wordle_solver.solvers import BaseSolver, create_solver

TABLE = FrequencyTable.from_pairs([
    ("tares", 5), ("right", 40), ("wrong", 30), ("might", 20), ("night", 20),
    ("light", 15), ("sight", 10), ("tight", 8), ("fight", 6), ("eight", 4),
])


class ScriptedSolver(BaseSolver):
    """Guesses 'right' once the history has `n` entries, 'wrong' before that."""
    id = "scripted"

    def __init__(self, n=None):
        super().__init__()
        self.n = n

    def next_guess(self, history):
        self._check_active()
        return "right" if len(history) == self.n else "wrong"


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5])
def test_solved_on_turn_n_plus_one(n):
    r = run_case(ScriptedSolver(n), "right", table=TABLE)
    assert r["success"] is True and r["status"] == "solved"
    assert r["guesses"] == n + 1
    assert len(r["history"]) == n
    assert all(g.word == "wrong" and g.mask == "WMWWM" for g in r["history"])


def test_all_wrong_guesses_exhaust_the_budget():
    solver = ScriptedSolver(None)
    r = run_case(solver, "right", table=TABLE)
    assert MAX_TURNS == 32
    assert r["success"] is False and r["status"] == "exhausted"
    assert r["guesses"] is None
    assert len(r["history"]) == 32
    assert solver.state.value == "exhausted"


def test_guess_outside_dictionary_is_rejected():
    class Inventor(BaseSolver):
        id = "inventor"

        def next_guess(self, history):
            return "zzzzz"

    with pytest.raises(ValueError):
        run_case(Inventor(), "right", table=TABLE)


def test_max_turns_must_be_positive():
    with pytest.raises(ValueError):
        run_case(create_solver("prune"), "right", table=TABLE, max_turns=0)


@pytest.mark.parametrize("sid", ["unoptimized", "vecrem", "precalc", "weight", "prune"])
def test_every_variant_solves_every_word(sid):
    solver = create_solver(sid)
    lookup = PairwiseLookup.build(TABLE) if sid == "precalc" else None
    results = run_batch(solver, TABLE.words(), table=TABLE, lookup=lookup)
    assert all(r["success"] for r in results)
    assert all(r["guesses"] <= MAX_TURNS for r in results)
    assert {r["solver_id"] for r in results} == {sid}


def test_prune_solves_every_bundled_dictionary_word():
    table = load_frequency_table()
    solver = create_solver("prune")
    for word in table.words():
        r = run_case(solver, word, table=table)
        assert r["success"], word


def test_summary_and_outputs(tmp_path):
    results = run_batch(create_solver("prune"), ["right", "night", "tares"], table=TABLE, sample=2)
    assert [r["answer"] for r in results] == ["right", "night"]

    s = summarize(results)
    assert s["games"] == 2 and s["solved"] == 2 and s["failed"] == 0
    assert s["average_score"] == sum(r["guesses"] for r in results) / 2

    out = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=MAX_TURNS)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == ["right", "night"]
    assert rows[0]["guess_1"] == "tares" and rows[0]["mask_1"]
    assert rows[0]["status"] == "solved"

    m = write_manifest({"summary": s}, str(tmp_path / "m.json"))
    with open(m, encoding="utf-8") as f:
        assert json.load(f)["summary"]["games"] == 2


def test_precalc_builds_its_lookup_once_per_table(monkeypatch):
    builds = []
    build = PairwiseLookup.build

    def counting_build(table, limit=1024):
        builds.append(len(table))
        return build(table, limit=limit)

    monkeypatch.setattr(PairwiseLookup, "build", counting_build)

    solver = create_solver("precalc")
    results = run_batch(solver, TABLE.words(), table=TABLE)
    assert all(r["success"] for r in results)
    assert builds == [len(TABLE)]

    other = FrequencyTable.from_pairs([("tares", 1), ("right", 2), ("night", 3)])
    run_case(solver, "night", table=other)
    run_case(solver, "right", table=other)
    assert builds == [len(TABLE), 3]

    # a lookup handed in by the caller is used as is
    run_case(create_solver("precalc"), "right", table=TABLE, lookup=build(TABLE))
    assert builds == [len(TABLE), 3]


def test_run_batch_reports_each_result_as_it_finishes():
    seen = []
    results = run_batch(create_solver("prune"), ["right", "night", "eight"], table=TABLE,
                        on_result=lambda r: seen.append(r["answer"]))
    assert seen == ["right", "night", "eight"]
    assert [r["answer"] for r in results] == seen


def test_cli_sends_failures_to_stderr(tmp_path, monkeypatch, capsys):
    script = Path(__file__).resolve().parents[1] / "apps" / "cli" / "run.py"
    monkeypatch.setattr(sys, "argv", [
        "run.py", "--max", "2", "--max-turns", "1", "--progress", "off",
        "--outdir", str(tmp_path),
    ])
    runpy.run_path(str(script), run_name="__main__")

    out, err = capsys.readouterr()
    answers = load_answers()[:2]
    for ans in answers:
        assert f"failed to guess '{ans}' within 1 turns" in err
        assert "failed to guess" not in out
    assert "failed games: 2" in out
    assert len(list(tmp_path.glob("run_prune_*.csv"))) == 1
