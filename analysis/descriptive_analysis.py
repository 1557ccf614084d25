# analysis/descriptive_analysis.py

import logging
from typing import Dict

import numpy as np
import pandas as pd

from model.clinical_trial import SummaryStatistics, check_required_columns

logger = logging.getLogger(__name__)


def analyze_clinical_trial_data(data: pd.DataFrame, verbose: bool = True) -> SummaryStatistics:
    """Compute summary statistics of preprocessed clinical trial data.

    Numeric columns get count/mean/std/min/quartiles/max, date columns
    get min/quartiles/mean/max and every other column gets frequency
    counts. With `verbose` the summary is printed.
    """
    check_required_columns(data, context='preprocessed clinical trial')

    numeric_df = data.select_dtypes(include=[np.number])
    date_df = data.select_dtypes(include=['datetime', 'datetimetz'])
    categorical_columns = [col for col in data.columns
                           if col not in numeric_df.columns and col not in date_df.columns]

    summary = SummaryStatistics(
        n_rows=len(data),
        numeric=numeric_df.describe() if not numeric_df.empty else pd.DataFrame(),
        dates=_describe_dates(date_df),
        frequencies=_frequency_counts(data, categorical_columns)
    )

    logger.info(f"Summarized {summary.n_rows} rows: {len(numeric_df.columns)} numeric, "
                f"{len(date_df.columns)} date, {len(categorical_columns)} categorical columns")

    if verbose:
        print("Summary Statistics:")
        print(summary)

    return summary


def _describe_dates(date_df: pd.DataFrame) -> pd.DataFrame:
    if len(date_df.columns) == 0:
        return pd.DataFrame()

    stats = {}
    for column in date_df.columns:
        values = date_df[column]
        stats[column] = {
            'count': values.count(),
            'min': values.min(),
            '25%': values.quantile(0.25),
            '50%': values.quantile(0.50),
            'mean': values.mean(),
            '75%': values.quantile(0.75),
            'max': values.max()
        }
    return pd.DataFrame(stats)


def _frequency_counts(data: pd.DataFrame, columns) -> Dict[str, pd.Series]:
    return {column: data[column].value_counts(dropna=False) for column in columns}
