"""
Reporting Package - Ranked Report Output.

Components:
    - Aggregator: rank, to_table, parse_table, summarize, write
"""

from profile_screener.reporting.aggregator import REPORT_COLUMNS, Aggregator

__all__ = ["Aggregator", "REPORT_COLUMNS"]
