"""
vocab-drill

Vocabulary trainer for photographed bilingual word lists.
"""

__version__ = "1.0.0"
