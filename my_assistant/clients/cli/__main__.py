"""
Entry point for running the CLI as a module.

Usage: python -m my_assistant.clients.cli
"""
from .cli import main

if __name__ == "__main__":
    main()
