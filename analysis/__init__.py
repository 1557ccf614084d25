# analysis/__init__.py

"""
Analysis package for clinical trial data analysis
Contains modules for loading, preprocessing, descriptive analysis,
hypothesis testing and visualization of clinical trial records
"""

from analysis.data_loader import load_clinical_trial_data
from analysis.preprocessing import preprocess_clinical_trial_data
from analysis.descriptive_analysis import analyze_clinical_trial_data
from analysis.hypothesis_testing import build_contingency_table, perform_hypothesis_test
from analysis.visualization import visualize_clinical_trial_data

__version__ = "1.0.0"

# short names for the load -> clean -> analyze -> visualize pipeline
load = load_clinical_trial_data
clean = preprocess_clinical_trial_data
summarize = analyze_clinical_trial_data
hypothesis_test = perform_hypothesis_test
render = visualize_clinical_trial_data

__all__ = [
    "load_clinical_trial_data",
    "preprocess_clinical_trial_data",
    "analyze_clinical_trial_data",
    "build_contingency_table",
    "perform_hypothesis_test",
    "visualize_clinical_trial_data",
    "load",
    "clean",
    "summarize",
    "hypothesis_test",
    "render",
]
