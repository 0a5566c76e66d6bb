"""
Removal statistics rendering for DocxCleaner.
"""

from .statistics_reporter import ReportRow, StatisticsReporter

__all__ = ["ReportRow", "StatisticsReporter"]
