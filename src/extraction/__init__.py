"""
Extraction Module

Vision-model extraction of bilingual word lists from photos.
"""

from .parser import build_extraction_prompt, parse_extraction_output
from .client import VisionExtractor, image_to_data_url

__all__ = [
    "build_extraction_prompt",
    "parse_extraction_output",
    "VisionExtractor",
    "image_to_data_url",
]
