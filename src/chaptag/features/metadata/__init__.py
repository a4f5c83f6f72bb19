"""Metadata feature: domain values and tag/document pipelines."""
