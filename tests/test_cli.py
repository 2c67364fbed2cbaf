import json

import pytest

from src.cli import main


@pytest.fixture
def snapshot_file(tmp_path):
    path = tmp_path / "loans.json"
    path.write_text(json.dumps({
        "loans": [
            {"id": "A", "balance": "1000", "annual_rate_percent": "10", "loan_type": "Grad PLUS"},
            {"id": "B", "balance": "1000", "annual_rate_percent": "5", "loan_type": "Subsidized"},
        ]
    }))
    return path


def test_summary(snapshot_file, capsys):
    main([str(snapshot_file), "--start", "2026-01-01", "summary", "--payment", "1000"])
    out = capsys.readouterr().out
    assert "Avalanche order:    A, B" in out
    assert "Months:             3" in out
    assert "Payoff date:        2026-03-01" in out


def test_schedule_limit(snapshot_file, capsys):
    main([str(snapshot_file), "--start", "2026-01-01", "schedule", "--payment", "100", "--limit", "2"])
    out = capsys.readouterr().out
    assert "2026-01-01" in out
    assert "2026-02-01" in out
    assert "more periods" in out


def test_compare(snapshot_file, capsys):
    main([str(snapshot_file), "compare", "--payments", "100", "500"])
    out = capsys.readouterr().out
    assert "$100.00" in out
    assert "$500.00" in out


def test_allocate(snapshot_file, capsys):
    main([str(snapshot_file), "allocate", "--amount", "3000"])
    out = capsys.readouterr().out
    assert "PAID OFF" in out
    assert "Leftover:           $987.50" in out


def test_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.json"), "summary", "--payment", "100"])


def test_bad_amount(snapshot_file):
    with pytest.raises(SystemExit):
        main([str(snapshot_file), "allocate", "--amount", "lots"])
