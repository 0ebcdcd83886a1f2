#!/usr/bin/env python3
"""
Styled Text - Markdown inline markup to styled text spans

Simple usage:
    python styled.py notes.md                    # Outputs notes-styled.html
    python styled.py /folder/path                # Processes all files in folder
    python styled.py --text "See [1](https://example.com)" --format console
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from styled_text.cli import app

if __name__ == "__main__":
    app()
