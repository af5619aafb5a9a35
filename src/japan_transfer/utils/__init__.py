"""Utility modules for japan-transfer-search."""

from .japan_time import JST, japan_now, parse_search_datetime

__all__ = ["JST", "japan_now", "parse_search_datetime"]
