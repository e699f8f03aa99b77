"""Camera feed ingestion.

This module fetches and validates the upstream GeoNet camera feed.
It runs the end-to-end pipeline that feeds the submission layer.
"""
