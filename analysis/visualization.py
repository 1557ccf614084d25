# analysis/visualization.py

import logging
from typing import Dict

import matplotlib.pyplot as plt
import pandas as pd

from config import PLOT_SETTINGS
from model.clinical_trial import TEST_COLUMNS, check_required_columns
from analysis.hypothesis_testing import build_contingency_table
from utils.plotting import MasterPlotter

logger = logging.getLogger(__name__)


def visualize_clinical_trial_data(data: pd.DataFrame,
                                  outcome_colors: Dict[str, str] = None,
                                  save_name: str = None,
                                  path: str = None,
                                  plotter: MasterPlotter = None) -> plt.Figure:
    """Stacked bar chart of the distribution of treatment outcomes.

    The x-axis holds the treatments, each bar is split into outcome
    segments whose height is the number of records. Success is drawn
    green and Failure red unless `outcome_colors` says otherwise; other
    outcome values are drawn as their own segment in a default color.

    Args:
        data: preprocessed clinical trial record set.
        outcome_colors: mapping from outcome value to fill color.
        save_name: file name to save the chart under, e.g. 'outcomes.png'.
        path: directory for `save_name`, defaults to the image directory.
        plotter: MasterPlotter to draw with.

    Returns:
        The matplotlib figure.
    """
    check_required_columns(data, context='preprocessed clinical trial')

    plotter = plotter or MasterPlotter()
    if data[TEST_COLUMNS].dropna().empty:
        logger.warning("No complete treatment/outcome pairs to plot; drawing empty chart")
        counts = pd.DataFrame()
    else:
        counts = build_contingency_table(data)

    color_map = plotter.style_manager.category_colors if outcome_colors is None else outcome_colors
    unmapped = [outcome for outcome in counts.columns if outcome not in color_map]
    if unmapped:
        logger.warning(f"No color configured for outcome(s) {unmapped}; using default colors")

    fig = plotter.stacked_bar_plot(
        data=counts,
        title=PLOT_SETTINGS['title'],
        xlabel=PLOT_SETTINGS['xlabel'],
        ylabel=PLOT_SETTINGS['ylabel'],
        colors=outcome_colors,
        save_name=save_name,
        path=path
    )

    logger.info(f"Visualized {counts.values.sum()} records across {len(counts.index)} treatments")
    return fig
