"""Resume parsing and heuristic analysis"""
from .models import Contact, ParsedResume, MLAnalysis, ResumeAnalysis
from .parser import ResumeParser, create_resume_parser, SAMPLE_RESUME_TEXT
from .analysis import ResumeAnalyzer

__all__ = [
    'Contact',
    'ParsedResume',
    'MLAnalysis',
    'ResumeAnalysis',
    'ResumeParser',
    'create_resume_parser',
    'SAMPLE_RESUME_TEXT',
    'ResumeAnalyzer',
]
