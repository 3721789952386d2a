from __future__ import annotations

import pytest

from imastack import InteractiveImastack, StepBudgetExceeded, run_bounded, see


def feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_run_bounded_stops_runaway_loop():
    with pytest.raises(StepBudgetExceeded) as exc:
        run_bounded("1 0 jnz", max_steps=50)
    assert exc.value.steps == 50


def test_run_bounded_allows_exact_budget():
    machine = run_bounded("1 2 + print", max_steps=4)
    assert machine.output == [3.0]


def test_run_bounded_unlimited():
    assert run_bounded("7 print", max_steps=None).output == [7.0]


def test_see_lists_instructions():
    listing = see("2 dup print").splitlines()
    assert listing[0].split() == ["0.", "LITERAL", "2.0"]
    assert listing[1].split() == ["1.", "DUP", "dup"]
    assert listing[2].split() == ["2.", "PRINT", "print"]


def test_interactive_call_returns_output():
    f = InteractiveImastack()
    assert f("1 2 + print") == [3.0]
    assert f("print") == [0.0]
    assert "<0>" in repr(f)


def test_repl_session(monkeypatch, capsys):
    feed(monkeypatch, ["1 2 + print 9", ".s", "see 1 print", "help", "bye", "never"])
    InteractiveImastack().repl(ipython_mode=False)
    out = capsys.readouterr().out
    assert "\n3\n" in out
    assert "<1> 9" in out
    assert "LITERAL" in out
    assert "swp" in out
    assert "Bye!" in out


def test_repl_reports_budget_and_continues(monkeypatch, capsys):
    monkeypatch.setenv("IMASTACK_STEP_BUDGET", "100")
    feed(monkeypatch, ["1 0 jnz", "4 print"])
    InteractiveImastack().repl(ipython_mode=False)
    out = capsys.readouterr().out
    assert "Error: step budget exhausted after 100 instructions" in out
    assert "\n4\n" in out


def test_repl_ignores_bad_budget(monkeypatch):
    monkeypatch.setenv("IMASTACK_STEP_BUDGET", "lots")
    feed(monkeypatch, [])
    f = InteractiveImastack(step_budget=10)
    f.repl(ipython_mode=False)
    assert f.step_budget == 10
