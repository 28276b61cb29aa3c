"""Smoke test for the narrative walkthrough (demo.py)."""

import demo


def test_demo_runs_end_to_end(capsys):
    demo.main()
    out = capsys.readouterr().out

    assert "Example 1" in out and "Example 5" in out
    assert '"temperature": 18' in out
    assert "Returns a halt result" in out
    # Gold + winter, limit 2: the first Silver winter destination leads.
    assert "Top result: Mexico City, Mexico" in out
    assert "Parameters: destination='Mexico City, Mexico', days=3" in out
