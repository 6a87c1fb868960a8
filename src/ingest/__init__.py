"""CSV ingestion stages.

This module reads CSV tables into ordered records and coordinates their
handoff to the JSON writer.
"""
