"""Feature collection submission layer.

This module serializes output features into GeoJSON payloads and
hands the finished collection to a downstream sink.
"""
