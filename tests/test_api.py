import sys

import pytest

from stat_core import (
    AverageComputationResult,
    Strategy,
    compute_averages,
    roll_outcome,
    strategy_names,
)
from stat_core.cli import main


def test_strategy_names_in_declaration_order() -> None:
    assert strategy_names() == ["traditional", "drop-twice"]


def test_roll_outcome_is_reproducible_with_seed() -> None:
    assert roll_outcome("traditional", seed=42) == roll_outcome("traditional", seed=42)


def test_compute_averages_bundle() -> None:
    result = compute_averages("drop-twice", 100, seed=8)
    assert isinstance(result, AverageComputationResult)
    assert result.strategy is Strategy.DROP_TWICE
    assert result.trials == 100
    assert result.accumulator.count == 100
    assert result.means == result.accumulator.render()
    assert result.compute_seconds >= 0.0
    assert len(result.format_means().split(", ")) == 6


def test_compute_averages_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        compute_averages("traditional", 0)
    with pytest.raises(ValueError):
        compute_averages("heroic", 10)


def test_cli_prints_single_roll(capsys) -> None:
    assert main(["--seed", "5"]) == 0
    line = capsys.readouterr().out.strip()
    assert line == str(roll_outcome("traditional", seed=5))
    assert len(line.split(", ")) == 6


def test_cli_prints_average(capsys) -> None:
    assert main(["50", "--strategy", "drop-twice", "--seed", "5"]) == 0
    line = capsys.readouterr().out.strip()
    assert line == compute_averages("drop-twice", 50, seed=5).format_means()


def test_cli_lists_strategies(capsys) -> None:
    assert main(["--list-strategies"]) == 0
    out = capsys.readouterr().out
    assert "traditional - 4d6 drop lowest" in out
    assert "drop-twice - 4d6 drop lowest, then drop lowest stat" in out


@pytest.mark.parametrize("argv", [["0"], ["-3"], ["many"], ["--strategy", "heroic"]])
def test_cli_rejects_bad_arguments(argv, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_cli_does_not_load_ui_libraries() -> None:
    import stat_core.cli  # noqa: F401

    assert "streamlit" not in sys.modules
    assert "altair" not in sys.modules
