"""Candlestream: incremental technical-analysis signals over candle streams."""

__version__ = "1.0.0"
