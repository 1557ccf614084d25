# analysis/preprocessing.py

import logging

import pandas as pd
from pandas.api.types import is_datetime64_any_dtype

from config import CLINICAL_TRIAL_SETTINGS
from model.clinical_trial import DateFormatError, check_required_columns

logger = logging.getLogger(__name__)

DATE_MODES = ('lenient', 'strict')


def preprocess_clinical_trial_data(data: pd.DataFrame,
                                   date_mode: str = None,
                                   date_format: str = None) -> pd.DataFrame:
    """Preprocess clinical trial data: schema check, missing values, date formatting.

    Steps:
        1. All required columns must be present, otherwise SchemaError is
           raised before any row is touched.
        2. Rows with a missing value in any column are dropped.
        3. The visit date column is re-parsed with an explicit format.
           Values that are already dates are kept as they are. String
           values that do not match the format become NaT in 'lenient'
           mode and raise DateFormatError in 'strict' mode.

    The input frame is not modified; a new frame is returned.

    Args:
        data: record set as returned by load_clinical_trial_data.
        date_mode: 'lenient' or 'strict', defaults to the configured mode.
        date_format: strptime format, defaults to '%Y-%m-%d'.
    """
    date_mode = date_mode or CLINICAL_TRIAL_SETTINGS['date_mode']
    date_format = date_format or CLINICAL_TRIAL_SETTINGS['date_format']
    date_column = CLINICAL_TRIAL_SETTINGS['date_column']

    if date_mode not in DATE_MODES:
        raise ValueError(f"Unknown date mode: {date_mode} (expected one of {', '.join(DATE_MODES)})")

    check_required_columns(data, context='clinical trial')

    # Handle missing values
    df = data.dropna()
    dropped = len(data) - len(df)
    if dropped:
        logger.info(f"Dropped {dropped} of {len(data)} rows with missing values")

    df = df.copy()
    df[date_column] = normalize_dates(df[date_column], date_format, date_mode)

    logger.info(f"Preprocessing finished: {len(df)} rows remain")
    return df


def normalize_dates(values: pd.Series, date_format: str, date_mode: str = 'lenient') -> pd.Series:
    """Parse a column as calendar dates using an explicit format"""
    if is_datetime64_any_dtype(values):
        return values

    parsed = pd.to_datetime(values, format=date_format, errors='coerce')
    failed = parsed.isna() & values.notna()

    if failed.any():
        examples = ', '.join(str(v) for v in values[failed].unique()[:5])
        if date_mode == 'strict':
            message = f"{failed.sum()} value(s) in '{values.name}' do not match {date_format}: {examples}"
            logger.error(message)
            raise DateFormatError(message)
        logger.warning(f"{failed.sum()} value(s) in '{values.name}' do not match {date_format} "
                       f"and were set to NaT: {examples}")

    return parsed
