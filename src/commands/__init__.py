"""
Commands Module

Command-line interface commands for vocab-drill.
"""

from .answers import check, hint
from .extract import extract
from .quiz import quiz
from .wordlist import validate

__all__ = ['check', 'hint', 'extract', 'quiz', 'validate']
