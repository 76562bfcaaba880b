"""
YouTube Channel Report Pipeline
Resolves a channel, lists its most viewed videos and prints a view report.
"""

__version__ = "0.1.0"
