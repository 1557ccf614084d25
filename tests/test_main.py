"""End-to-end tests for the pipeline entry point."""

import logging

import numpy as np
import pandas as pd
import pytest

import main
from analysis import clean, hypothesis_test, load, render, summarize


@pytest.fixture
def trial_csv(tmp_path):
    """100 records, 4 of them without an Outcome."""
    rng = np.random.default_rng(42)
    df = pd.DataFrame({
        'PatientID': range(1, 101),
        'Treatment': rng.choice(['Drug A', 'Drug B', 'Placebo'], size=100),
        'Outcome': rng.choice(['Success', 'Failure'], size=100),
        'Visit_Date': pd.date_range('2024-01-01', periods=100, freq='D').strftime('%Y-%m-%d'),
    })
    df.loc[[3, 17, 58, 91], 'Outcome'] = None
    path = tmp_path / 'trials.csv'
    df.to_csv(path, index=False)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)


def test_pipeline_functions_end_to_end(trial_csv, capsys):
    """
    Tests load -> clean -> summarize -> hypothesis_test -> render on a
    100 row file with 4 missing outcomes.
    """
    cleaned = clean(load(trial_csv))
    assert len(cleaned) == 96

    summary = summarize(cleaned)
    out = capsys.readouterr().out

    assert sum(summary.frequencies['Outcome']) == 96
    assert sum(summary.frequencies['Treatment']) == 96
    assert summary.date_range('Visit_Date') == (pd.Timestamp('2024-01-01'), pd.Timestamp('2024-04-09'))
    assert "Summary Statistics:" in out

    result = hypothesis_test(cleaned, verbose=False)
    assert result.degrees_of_freedom == 2

    fig = render(cleaned)
    assert len(fig.axes[0].containers) == 2


def test_main_runs_all_steps(trial_csv, tmp_path, capsys):
    argv = ['--input', str(trial_csv), '--output-dir', str(tmp_path / 'img'),
            '--log-dir', str(tmp_path / 'logs')]

    with pytest.raises(SystemExit) as exc_info:
        main.main(argv)

    out = capsys.readouterr().out
    assert exc_info.value.code == 0
    assert "Summary Statistics:" in out
    assert "Chi-square test for independence:" in out
    assert (tmp_path / 'img' / 'treatment_outcomes.png').exists()
    assert (tmp_path / 'logs' / 'analysis_log.log').exists()


def test_main_fails_on_missing_file(tmp_path):
    argv = ['--input', str(tmp_path / 'missing.csv'), '--log-dir', str(tmp_path / 'logs')]

    with pytest.raises(SystemExit) as exc_info:
        main.main(argv)

    assert exc_info.value.code == 1


def test_main_fails_on_missing_columns(tmp_path, capsys):
    path = tmp_path / 'partial.csv'
    path.write_text("PatientID,Treatment,Outcome\n1,Drug A,Success\n")

    with pytest.raises(SystemExit) as exc_info:
        main.main(['--input', str(path), '--step', 'clean', '--log-dir', str(tmp_path / 'logs')])

    assert exc_info.value.code == 1
    assert "Visit_Date" in capsys.readouterr().err


def test_main_strict_dates(tmp_path):
    path = tmp_path / 'dates.csv'
    path.write_text(
        "PatientID,Treatment,Outcome,Visit_Date\n"
        "1,Drug A,Success,2024-01-05\n"
        "2,Drug B,Failure,2024-01-06\n"
    )
    argv = ['--input', str(path), '--step', 'clean', '--strict-dates', '--log-dir', str(tmp_path / 'logs')]

    with pytest.raises(SystemExit) as exc_info:
        main.main(argv)

    assert exc_info.value.code == 0


def test_setup_logging_modes(tmp_path):
    config = main.setup_logging('testing', log_dir=str(tmp_path / 'logs'))

    assert config['root']['level'] == 'DEBUG'
    assert config['handlers']['testing_handler']['filename'].startswith(str(tmp_path / 'logs'))
    assert (tmp_path / 'logs').is_dir()


def test_setup_logging_unknown_mode(tmp_path):
    with pytest.raises(ValueError, match="Unknown logging mode"):
        main.setup_logging('verbose', log_dir=str(tmp_path / 'logs'))
