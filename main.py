"""main.py

Run the interactive hash table menu:

    python main.py --hashsize 26 --debug
    python main.py --hashsize 5
"""

import sys

from cli import run_cli


if __name__ == '__main__':
    sys.exit(run_cli())
