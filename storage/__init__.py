"""Persistence for conversion history."""

from .history import HistoryLoadError, HistorySaveError, MeasurementHistory

__all__ = ['HistoryLoadError', 'HistorySaveError', 'MeasurementHistory']
