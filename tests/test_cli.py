import csv

import pytest

from mastermind import benchmark_solver, mastermind_main


def test_cli_plays_one_game(capsys):
    code = mastermind_main.main(
        ["--solver", "bruteforce", "--width", "2", "--colors", "2", "--seed", "1"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "SOLVED" in out


def test_cli_given_secret(capsys):
    code = mastermind_main.main(
        ["--solver", "bruteforce", "--width", "2", "--colors", "3", "--secret", "green blue"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "Secret was: green, blue" in out


def test_cli_rejects_bad_settings(capsys):
    code = mastermind_main.main(["--width", "4", "--colors", "2", "--no-repeats"])
    assert code == 2
    assert "Error" in capsys.readouterr().out


def test_cli_rejects_invalid_secret(capsys):
    code = mastermind_main.main(["--width", "2", "--colors", "2", "--secret", "red blue"])
    assert code == 2


def test_cli_speed_test(capsys):
    code = mastermind_main.main(
        ["--solver", "random", "--width", "2", "--colors", "2", "--games", "3", "--seed", "4"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "Repetitions: 3" in out


def test_benchmark_writes_csv_and_plot(tmp_path):
    out = tmp_path / "bench.csv"
    png = tmp_path / "bench.png"
    benchmark_solver.main([
        "--solvers", "bruteforce", "random",
        "--games", "2",
        "--width", "2",
        "--colors", "2",
        "--seed", "3",
        "--out", str(out),
        "--png", str(png),
    ])
    with out.open() as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    assert {r["solver"] for r in rows} == {"bruteforce", "random"}
    assert png.exists()


def test_guess_distribution_bins():
    from mastermind.mastermind_sim import GameResult

    results = {
        "x": [
            GameResult(secret=(), solved=True, guesses_used=1, seconds=0.0),
            GameResult(secret=(), solved=False, guesses_used=3, seconds=0.0),
        ]
    }
    assert benchmark_solver.guess_distribution(results, 3) == {"x": [1, 0, 0, 1]}


@pytest.mark.parametrize("games", ["0", "-3"])
def test_cli_rejects_non_positive_game_count(games):
    with pytest.raises(SystemExit) as exc:
        mastermind_main.main(["--games", games])
    assert exc.value.code == 2
