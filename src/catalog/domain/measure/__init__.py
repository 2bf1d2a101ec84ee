"""Measure domain - named units within a measure type."""

from .aggregate import Measure, MeasureFullName, MeasureShortName

__all__ = ["Measure", "MeasureFullName", "MeasureShortName"]
