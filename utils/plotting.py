import os
import logging
from typing import Dict, List, Tuple, Union

import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.colors import same_color

from config import DATA_PATHS, PLOT_SETTINGS, CLINICAL_TRIAL_SETTINGS


class PlotManager:
    """Style and layout manager for plots"""

    def __init__(self, style_name: str = 'clinical_trial'):
        self.style_name = style_name
        self.setup_style()
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.info(f"PlotManager initialized with style: {self.style_name}")

    def setup_style(self):
        """Set up the plotting style"""

        plt.style.use('seaborn-v0_8-paper')
        sns.set_style('whitegrid')

        # custom colors
        self.colors = {
            'primary': "#2D3E50", # dark blue
            'secondary': '#4ECDC4', # light blue
            'neutral': '#BDC3C7',
            'light': '#F4F6F7',
            'dark': '#1A252F'
        }

        # outcome value -> fill color, anything unmapped falls back to the default cycle
        self.category_colors = dict(CLINICAL_TRIAL_SETTINGS['outcome_colors'])

        plt.rcParams.update({
            'figure.figsize': PLOT_SETTINGS['figsize'],
            'font.family': 'sans-serif',
            'font.size': 14,
            'axes.titlesize': 18,
            'axes.labelsize': 16,
            'xtick.labelsize': 14,
            'ytick.labelsize': 14,
            'legend.fontsize': 14,
            'axes.grid': True,
            'grid.alpha': 0.3,
            'grid.color': self.colors['light'],
            'axes.edgecolor': self.colors['dark'],
            'axes.spines.top': False,
            'axes.spines.right': False,
            'figure.facecolor': 'white',
            'axes.facecolor': 'white',
            'savefig.facecolor': 'white',
            'figure.max_open_warning': 0,
            'figure.constrained_layout.use': True
        })

    def colors_for(self, categories: List, color_map: Dict = None) -> List[str]:
        """Fill colors for `categories`; unmapped ones get the matplotlib default cycle colors."""
        color_map = self.category_colors if color_map is None else color_map

        # cycle colors that look like a mapped color are skipped
        cycle = [f"C{i}" for i in range(10)
                 if not any(same_color(f"C{i}", mapped) for mapped in color_map.values())]
        cycle = cycle or [f"C{i}" for i in range(10)]

        colors = []
        fallback = 0
        for category in categories:
            if category in color_map:
                colors.append(color_map[category])
            else:
                colors.append(cycle[fallback % len(cycle)])
                fallback += 1
        return colors


class MasterPlotter:
    """Class for creating standardized plots"""

    def __init__(self, style_manager: PlotManager = None, output_dir: str = DATA_PATHS['img']['default']):
        self.style_manager = style_manager or PlotManager()
        self.output_dir = output_dir

        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.info("MasterPlotter initialized")

    def save_plot(self, fig, filename: str, path: str = None, dpi: int = PLOT_SETTINGS['dpi'], bbox_inches: str = 'tight') -> str:
        """Save the plot to the output directory"""
        if not path:
            path = self.output_dir
        os.makedirs(path, exist_ok=True)
        filepath = os.path.join(path, filename)
        fig.savefig(filepath, dpi=dpi, bbox_inches=bbox_inches, edgecolor=None)
        self.logger.info(f"Plot saved to {filepath}")
        plt.close(fig)
        return filepath

    def _handle_layout(self):
        """Handle layout consistently across all plot types"""
        if not plt.rcParams.get('figure.constrained_layout.use', False):
            plt.tight_layout()

    def stacked_bar_plot(self, data: pd.DataFrame,
                         title: str = None, xlabel: str = None, ylabel: str = None,
                         colors: Union[Dict, List, None] = None,
                         horizontal: bool = False, figsize: Tuple = None,
                         save_name: str = None, path: str = None, **kwargs) -> plt.Figure:
        """Create a stacked bar plot from pivot table data.

        Each row of `data` is one bar, each column one stacked segment.
        `colors` is either a list (one per column) or a mapping from column
        value to color; columns missing from the mapping get default colors.
        """
        fig, ax = plt.subplots(figsize=figsize or PLOT_SETTINGS['figsize'])

        if data.empty:
            self.logger.warning("No data to plot; returning empty axes")
            if title:
                ax.set_title(title)
            ax.set_xlabel(xlabel or "Categories")
            ax.set_ylabel(ylabel or "Values")
            self._handle_layout()
            if save_name:
                self.save_plot(fig, save_name, path)
            return fig

        if colors is None or isinstance(colors, dict):
            colors = self.style_manager.colors_for(list(data.columns), colors)

        kwargs.setdefault('rot', 0)
        if horizontal:
            data.plot(kind='barh', stacked=True, ax=ax, color=colors, **kwargs)
        else:
            data.plot(kind='bar', stacked=True, ax=ax, color=colors, **kwargs)

        # Styling
        if title:
            ax.set_title(title)
        ax.set_xlabel(xlabel or data.index.name or 'Categories')
        ax.set_ylabel(ylabel or 'Values')
        ax.legend(title=data.columns.name, bbox_to_anchor=(1.02, 1), loc='upper left')

        # Rotate x-axis labels if needed
        if not horizontal and len(data.index) > 5:
            plt.setp(ax.get_xticklabels(), rotation=45, ha='right')

        # Add value labels on non-empty segments
        for container in ax.containers:
            values = [bar.get_width() if horizontal else bar.get_height() for bar in container]
            labels = [f"{v:.0f}" if v > 0 else '' for v in values]
            ax.bar_label(container, labels=labels, label_type='center', fontsize=10)

        self._handle_layout()

        if save_name:
            self.save_plot(fig, save_name, path)

        return fig
