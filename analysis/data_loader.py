# analysis/data_loader.py

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from config import CLINICAL_TRIAL_SETTINGS
from model.clinical_trial import DateFormatError

logger = logging.getLogger(__name__)


def load_clinical_trial_data(path: Union[str, Path],
                             date_column: str = None,
                             **read_csv_kwargs) -> pd.DataFrame:
    """Load clinical trial data from a CSV file.

    The visit date column is parsed as calendar dates with the format
    inferred by pandas. Empty date cells become NaT.

    Args:
        path: path to a comma-separated file with a header row.
        date_column: column to parse as dates, defaults to 'Visit_Date'.
        **read_csv_kwargs: passed through to pandas.read_csv.

    Returns:
        DataFrame holding the clinical trial records.

    Raises:
        FileNotFoundError / OSError: the file is missing or unreadable.
        DateFormatError: date values cannot be parsed.
    """
    date_column = date_column or CLINICAL_TRIAL_SETTINGS['date_column']
    logger.info(f"Loading clinical trial data from {path}")

    try:
        df = pd.read_csv(path, **read_csv_kwargs)
    except OSError as e:
        logger.error(f"Could not read clinical trial data from {path}: {e}")
        raise

    if date_column not in df.columns:
        logger.warning(f"Date column '{date_column}' not found in {path}; dates left unparsed")
        return df

    try:
        df[date_column] = pd.to_datetime(df[date_column])
    except (ValueError, TypeError) as e:
        logger.error(f"Unparseable values in date column '{date_column}': {e}")
        raise DateFormatError(f"Could not parse '{date_column}' as dates: {e}") from e

    logger.info(f"Loaded {len(df)} rows and {len(df.columns)} columns")
    return df
