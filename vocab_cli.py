#!/usr/bin/env python3
"""
vocab-drill CLI Entry Point

This file serves as the main entry point for the vocab command-line tool.
"""

import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent / 'src'
if src_path.exists():
    sys.path.insert(0, str(src_path))

from main import main

if __name__ == '__main__':
    main()
