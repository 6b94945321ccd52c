"""Re-export individual schema modules for easy imports."""

from .analysis import AnalyzeImageIn, AnalysisOut, ErrorOut, FoodItem

__all__ = [
    "AnalyzeImageIn",
    "AnalysisOut",
    "ErrorOut",
    "FoodItem",
]
