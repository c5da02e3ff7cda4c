"""
Reporting helpers for the CLI.

Modules
-------
formatters : plain-text profile and search-result rendering.
export     : JSON / CSV export of roster assessments.
"""
