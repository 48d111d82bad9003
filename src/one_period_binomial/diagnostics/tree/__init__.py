from .plots import chart_description, plot_price_trees, plot_tree_series
from .tables import format_frame, series_frame, tree_tables

__all__ = [
    "chart_description",
    "plot_price_trees",
    "plot_tree_series",
    "format_frame",
    "series_frame",
    "tree_tables",
]
