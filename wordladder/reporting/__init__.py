"""
wordladder Reporting Module
===========================

Console formatting, text summaries and JSON reports.
"""

from .report_builder import ReportBuilder, format_result, generate_text_report
