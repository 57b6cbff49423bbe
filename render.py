#!/usr/bin/env python3
"""
Chat Format - render assistant chat replies

Simple usage:
    python render.py reply.md                      # Styled terminal preview
    cat reply.md | python render.py -f html        # HTML fragment on stdout
    python render.py chat.json -t -f json          # Whole transcript as JSON
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from chat_format.cli import app

if __name__ == "__main__":
    app()
