import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), ".."))

from usbip_action.cli import run

if __name__ == "__main__":
        sys.exit(run())
