# file: src/tape_cipher/__main__.py

"""
Entry point for `python -m tape_cipher`.
"""

from .cli import run

run()
