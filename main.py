#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Clinical Trial Data Toolkit
Description: Main orchestration script for clinical trial data analysis
"""

import os
import sys
import copy
import logging
import logging.config
import argparse

# Import project modules
from config import PROJECT_SETTINGS, LOGGING_CONFIG, DATA_PATHS, CLINICAL_TRIAL_SETTINGS
from model.clinical_trial import ClinicalTrialDataError
from analysis.data_loader import load_clinical_trial_data
from analysis.preprocessing import preprocess_clinical_trial_data
from analysis.descriptive_analysis import analyze_clinical_trial_data
from analysis.hypothesis_testing import perform_hypothesis_test
from analysis.visualization import visualize_clinical_trial_data

logger = logging.getLogger(__name__)

STEPS = ['load', 'clean', 'summary', 'hypothesis', 'plot', 'all']


def setup_logging(mode='basic', log_dir=None):
    """Setup logging configuration"""

    # Create logs directory
    log_dir = log_dir or DATA_PATHS['logger']['dir']
    os.makedirs(log_dir, exist_ok=True)

    # Get base config and modify it based on mode
    config = copy.deepcopy(LOGGING_CONFIG)
    for handler in config['handlers'].values():
        if 'filename' in handler:
            handler['filename'] = os.path.join(log_dir, os.path.basename(handler['filename']))

    if mode == 'basic':
        config['root']['handlers'] = ['file_handler']
    elif mode == 'testing':
        config['root']['handlers'] = ['testing_handler']
        config['root']['level'] = 'DEBUG'
    elif mode == 'analysis':
        config['root']['handlers'] = ['analysis_handler']
        config['root']['level'] = PROJECT_SETTINGS.get('log_level', 'INFO')
        config['loggers'] = {}
    else:
        raise ValueError(f"Unknown logging mode: {mode}")

    logging.config.dictConfig(config)
    return config


def run_pipeline(input_path, step='all', date_mode=None, correction=None, output_dir=None):
    """Run load -> clean -> analyze -> visualize up to the requested step"""
    df = load_clinical_trial_data(input_path)
    logger.info(f"Loaded {len(df)} records from {input_path}")
    if step == 'load':
        return True

    df = preprocess_clinical_trial_data(df, date_mode=date_mode)
    logger.info(f"{len(df)} records after preprocessing")
    if step == 'clean':
        return True

    if step in ['summary', 'all']:
        analyze_clinical_trial_data(df)

    if step in ['hypothesis', 'all']:
        perform_hypothesis_test(df, correction=correction)

    if step in ['plot', 'all']:
        visualize_clinical_trial_data(
            df,
            save_name='treatment_outcomes.png',
            path=output_dir or DATA_PATHS['img']['outcomes']
        )

    return True


def main(argv=None):
    """Main execution function"""
    parser = argparse.ArgumentParser(
        description="Clinical Trial Data Analysis Pipeline"
    )

    parser.add_argument(
        '--input',
        required=True,
        help='Path to the clinical trial CSV file'
    )

    parser.add_argument(
        '--step',
        choices=STEPS,
        default='all',
        help='Which step to run (default: all)'
    )

    parser.add_argument(
        '--strict-dates',
        action='store_true',
        help='Fail on visit dates not in YYYY-MM-DD format instead of setting them to NaT'
    )

    parser.add_argument(
        '--yates',
        action='store_true',
        help="Apply Yates' continuity correction to 2x2 chi-square tests"
    )

    parser.add_argument(
        '--output-dir',
        default=None,
        help='Directory for the outcome chart'
    )

    parser.add_argument(
        '--log-dir',
        default=None,
        help='Directory for log files'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    setup_logging('testing' if args.debug else 'analysis', log_dir=args.log_dir)

    if args.debug:
        logger.info("Debug logging enabled")

    logger.info("=" * 80)
    logger.info("CLINICAL TRIAL DATA ANALYSIS PIPELINE")
    logger.info("=" * 80)

    date_mode = 'strict' if args.strict_dates else CLINICAL_TRIAL_SETTINGS['date_mode']
    correction = True if args.yates else None

    try:
        success = run_pipeline(args.input, step=args.step, date_mode=date_mode,
                               correction=correction, output_dir=args.output_dir)
    except (ClinicalTrialDataError, OSError) as e:
        logger.error(f"Pipeline aborted: {e}")
        print(f"Error: {e}", file=sys.stderr)
        success = False

    # Final status
    if success:
        logger.info("Pipeline completed successfully")
        sys.exit(0)
    else:
        logger.error("Pipeline failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
