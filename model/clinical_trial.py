# model/clinical_trial.py

"""
Record set definitions for clinical trial data.

A record set is a plain pandas DataFrame holding at least the columns in
REQUIRED_COLUMNS. This module holds the column contracts, the schema
validators and the result containers returned by the analysis functions.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

import pandas as pd

from config import CLINICAL_TRIAL_SETTINGS

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: List[str] = list(CLINICAL_TRIAL_SETTINGS['required_columns'])
TEST_COLUMNS: List[str] = list(CLINICAL_TRIAL_SETTINGS['test_columns'])


class ClinicalTrialDataError(Exception):
    """Base class for errors raised by the clinical trial toolkit"""


class SchemaError(ClinicalTrialDataError, ValueError):
    """One or more required columns are absent from the record set"""

    def __init__(self, missing_columns: List[str], message: str = None):
        self.missing_columns = list(missing_columns)
        if message is None:
            message = f"Missing required columns: {', '.join(self.missing_columns)}"
        super().__init__(message)


class DateFormatError(ClinicalTrialDataError, ValueError):
    """A date column holds values that cannot be parsed as calendar dates"""


class StatisticalError(ClinicalTrialDataError, ValueError):
    """A statistical test is undefined for the given data"""


def missing_columns(data: pd.DataFrame, required: Iterable[str]) -> List[str]:
    """Return the required columns absent from `data`, in required order."""
    present = set(data.columns)
    return [col for col in required if col not in present]


def check_required_columns(data: pd.DataFrame,
                           required: Iterable[str] = None,
                           context: str = 'clinical trial') -> None:
    """Fail fast when any of the four record set columns is absent.

    Args:
        data: record set to validate.
        required: ordered column names, defaults to REQUIRED_COLUMNS.
        context: dataset description used in the error message,
            e.g. 'clinical trial' or 'preprocessed clinical trial'.

    Raises:
        SchemaError: naming the missing columns comma-joined in required order.
    """
    required = REQUIRED_COLUMNS if required is None else list(required)
    missing = missing_columns(data, required)
    if missing:
        message = f"Missing required columns in the {context} dataset: {', '.join(missing)}"
        logger.error(message)
        raise SchemaError(missing, message)


def check_test_columns(data: pd.DataFrame, required: Iterable[str] = None) -> None:
    """Check only the columns a treatment/outcome cross-tabulation needs.

    Unlike check_required_columns, the error always names the full pair
    of test columns, whichever of them is missing.
    """
    required = TEST_COLUMNS if required is None else list(required)
    if missing_columns(data, required):
        quoted = ' and '.join(f"'{col}'" for col in required)
        message = f"Required columns {quoted} are missing."
        logger.error(message)
        raise SchemaError(required, message)


@dataclass
class ChiSquareResult:
    """Outcome of a chi-square test of independence"""
    statistic: float
    degrees_of_freedom: int
    p_value: float
    contingency_table: Optional[pd.DataFrame] = None
    expected: Optional[pd.DataFrame] = None
    correction: bool = False

    def significant(self, alpha: float = None) -> bool:
        if alpha is None:
            alpha = CLINICAL_TRIAL_SETTINGS['significance_level']
        return self.p_value < alpha

    def to_dict(self) -> Dict:
        return {
            'statistic': self.statistic,
            'degrees_of_freedom': self.degrees_of_freedom,
            'p_value': self.p_value
        }

    def __str__(self):
        method = "Pearson's Chi-squared test"
        if self.correction:
            method += " with Yates' continuity correction"
        p_text = f"{self.p_value:.4g}" if self.p_value >= 0.0001 else "< 0.0001"
        lines = [method]
        if self.contingency_table is not None:
            lines += ["", self.contingency_table.to_string(), ""]
        lines.append(f"X-squared = {self.statistic:.4f}, df = {self.degrees_of_freedom}, p-value = {p_text}")
        return "\n".join(lines)


@dataclass
class SummaryStatistics:
    """Descriptive summary of a record set, meant for reporting"""
    n_rows: int
    numeric: pd.DataFrame = field(default_factory=pd.DataFrame)
    dates: pd.DataFrame = field(default_factory=pd.DataFrame)
    frequencies: Dict[str, pd.Series] = field(default_factory=dict)

    def date_range(self, column: str):
        """(min, max) of a date column"""
        return self.dates.loc['min', column], self.dates.loc['max', column]

    def __str__(self):
        lines = [f"Rows: {self.n_rows}"]
        if not self.numeric.empty:
            lines += ["", "Numeric columns:", self.numeric.to_string()]
        if not self.dates.empty:
            lines += ["", "Date columns:", self.dates.to_string()]
        for column, counts in self.frequencies.items():
            lines += ["", f"{column}:", counts.to_string()]
        return "\n".join(lines)
