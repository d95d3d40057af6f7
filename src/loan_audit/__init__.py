"""Loan Agreement Audit Core.

Validates and normalizes structured loan agreement analyses and derives
clause confidence bands, deal readiness status and financial covenant slack.
"""

__version__ = "1.0.0"
