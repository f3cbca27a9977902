# main.py
#!/usr/bin/env python3
"""
Legacy runner - prints the tokens of a small demo program, or forwards
its arguments to the esh CLI.
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from esh.cli.main import cli

DEMO_SOURCE = """
    let five = 5;
    let ten = 10;
"""

if __name__ == "__main__":
    # No arguments: scan the demo program
    if len(sys.argv) == 1:
        sys.argv.extend(['tokens', '--format', 'plain', '--code', DEMO_SOURCE])

    # Support legacy: esh filename.esh -> esh tokens filename.esh
    elif len(sys.argv) == 2 and sys.argv[1].endswith('.esh'):
        sys.argv.insert(1, 'tokens')

    cli()
