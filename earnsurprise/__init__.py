"""Earnings-surprise event study: stocks, abnormal returns, bootstrapped AAR/CAAR, reports and CAAR plots."""

__version__ = "0.1.0"
__all__ = ["calculation", "display", "plotting", "stocks", "utils"]