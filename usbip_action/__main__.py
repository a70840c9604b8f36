import sys

from usbip_action.cli import run

sys.exit(run())
