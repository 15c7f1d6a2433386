#!/usr/bin/env python3
"""
prompter - interactive console prompts

Entry point that runs the demo interview from the prompter package:
- text prompts with defaults and backslash line continuation
- yes/no, integer (any radix) and float prompts
- numbered and one-line shorthand option menus

To run: python main.py [--debug]
"""

import sys

from prompter.cli import run

if __name__ == "__main__":
    sys.exit(run())
