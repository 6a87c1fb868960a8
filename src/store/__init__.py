"""JSON output stages.

This module renders records and writes them as a JSON array document.
"""
