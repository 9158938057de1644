"""Local persistence for analyses and auth state"""
from .local_store import LocalStore
from .history import AnalysisHistory, ANALYSES_KEY

__all__ = [
    'LocalStore',
    'AnalysisHistory',
    'ANALYSES_KEY',
]
