"""
Report rendering module
"""

from .report_printer import ReportPrinter

__all__ = ["ReportPrinter"]
