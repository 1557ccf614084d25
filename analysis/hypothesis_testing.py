# analysis/hypothesis_testing.py

import logging

import pandas as pd
from scipy.stats import chi2_contingency

from config import CLINICAL_TRIAL_SETTINGS
from model.clinical_trial import (
    TEST_COLUMNS,
    ChiSquareResult,
    StatisticalError,
    check_test_columns,
)

logger = logging.getLogger(__name__)


def build_contingency_table(data: pd.DataFrame,
                            row: str = TEST_COLUMNS[0],
                            column: str = TEST_COLUMNS[1]) -> pd.DataFrame:
    """Cross-tabulate co-occurrence counts of two categorical columns"""
    return pd.crosstab(data[row], data[column])


def perform_hypothesis_test(data: pd.DataFrame,
                            correction: bool = None,
                            verbose: bool = True) -> ChiSquareResult:
    """Chi-square test for independence of treatment and outcome.

    Only the 'Treatment' and 'Outcome' columns are required here; a record
    set without 'Visit_Date' or 'PatientID' can still be tested.

    Args:
        data: clinical trial record set.
        correction: apply Yates' continuity correction to 2x2 tables.
            Defaults to the configured value (uncorrected Pearson).
        verbose: print the test result.

    Raises:
        SchemaError: 'Treatment' or 'Outcome' is missing.
        StatisticalError: the test is undefined for the contingency table,
            e.g. an empty table or a zero expected frequency.
    """
    check_test_columns(data)

    if correction is None:
        correction = CLINICAL_TRIAL_SETTINGS['yates_correction']

    if data[TEST_COLUMNS].dropna().empty:
        logger.error("Chi-square test undefined: no complete treatment/outcome pairs")
        raise StatisticalError("No data; the contingency table is empty")

    try:
        contingency_table = build_contingency_table(data)
        chi2, p_val, dof, expected = chi2_contingency(contingency_table, correction=correction)
    except ValueError as e:
        logger.error(f"Chi-square test undefined for {len(data)} records: {e}")
        raise StatisticalError(str(e)) from e

    result = ChiSquareResult(
        statistic=float(chi2),
        degrees_of_freedom=int(dof),
        p_value=float(p_val),
        contingency_table=contingency_table,
        expected=pd.DataFrame(expected, index=contingency_table.index, columns=contingency_table.columns),
        correction=bool(correction and dof == 1)
    )

    if result.degrees_of_freedom == 0:
        logger.warning(f"Chi-square test is degenerate: contingency table of shape "
                       f"{contingency_table.shape} has 0 degrees of freedom")

    logger.info(f"Chi-square test: X2={result.statistic:.4f}, df={result.degrees_of_freedom}, "
                f"p={result.p_value:.4g}")

    if verbose:
        print("Chi-square test for independence:")
        print(result)

    return result
