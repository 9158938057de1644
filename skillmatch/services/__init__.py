"""Async services wiring the analysis pipeline to its collaborators"""
from .http import HttpClient, run_blocking
from .backends import ResumeBackend, HttpResumeBackend
from .resume_service import ResumeService
from .match_service import MatchService

__all__ = [
    'HttpClient',
    'run_blocking',
    'ResumeBackend',
    'HttpResumeBackend',
    'ResumeService',
    'MatchService',
]
