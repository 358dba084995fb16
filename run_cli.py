#!/usr/bin/env python3
"""
Start the assistant console from a source checkout, without installing it.

    python run_cli.py [--config PATH] [--debug]
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from my_assistant.clients.cli.cli import main

if __name__ == "__main__":
    main()
