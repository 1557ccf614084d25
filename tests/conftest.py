import matplotlib
matplotlib.use('Agg')  # headless backend for tests

import matplotlib.pyplot as plt
import pandas as pd
import pytest


def make_records(table, treatments=('A', 'B'), outcomes=('Success', 'Failure'), start='2024-01-01'):
    """Build a record set whose Treatment x Outcome counts equal `table`."""
    rows = []
    for treatment, counts in zip(treatments, table):
        for outcome, count in zip(outcomes, counts):
            for _ in range(count):
                rows.append({'Treatment': treatment, 'Outcome': outcome})
    df = pd.DataFrame(rows)
    df.insert(0, 'PatientID', range(1, len(df) + 1))
    df['Visit_Date'] = pd.date_range(start, periods=len(df), freq='D')
    return df


@pytest.fixture
def records():
    """Small complete record set, dates already parsed."""
    return pd.DataFrame({
        'PatientID': [1, 2, 3, 4, 5, 6],
        'Treatment': ['Drug A', 'Drug A', 'Drug B', 'Drug B', 'Placebo', 'Placebo'],
        'Outcome': ['Success', 'Failure', 'Success', 'Success', 'Failure', 'Failure'],
        'Visit_Date': pd.to_datetime(['2024-01-05', '2024-01-12', '2024-02-01',
                                      '2024-02-15', '2024-03-01', '2024-03-20']),
    })


@pytest.fixture
def two_by_two():
    """Treatment {A, B} x Outcome {Success, Failure} = [[10, 5], [3, 12]]."""
    return make_records([[10, 5], [3, 12]])


@pytest.fixture
def csv_file(tmp_path):
    """Write CSV text to a temporary file and return its path."""
    def _write(text, name='trials.csv'):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')
