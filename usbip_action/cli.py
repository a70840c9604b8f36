import argparse
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from usbip_action.controller import DEFAULT_PROGRAM, ExternalCommandFailed, UsbipController

DETACH_BUSID = "1-7"

ACTION_PROMPT = "Do you want to (a)ttach or (d)tach: "
BUSID_PROMPT = "Enter the bus ID of the USB device to bind (e.g. 1-1): "
PAUSE_PROMPT = "Press Enter to continue..."

logger = logging.getLogger(__name__)


class Action(enum.Enum):
        ATTACH = "a"
        DETACH = "d"

        @classmethod
        def parse(cls, reply):
                """Exactly "a" or "A" selects ATTACH; anything else, empty or padded included, is DETACH."""
                if reply.lower() == cls.ATTACH.value:
                        return cls.ATTACH
                return cls.DETACH


@dataclass
class Outcome:
        action: Action
        busid: str
        returncode: Optional[int] = None

        @property
        def ok(self):
                return not self.returncode


def list_devices(controller):
        try:
                controller.list()
        except ExternalCommandFailed as e:
                logger.debug("list ignored: %s", e)


def prompt_action(read=None):
        read = read or input
        return Action.parse(read(ACTION_PROMPT))


def prompt_busid(read=None):
        read = read or input
        return read(BUSID_PROMPT).strip()


def run_attach(controller, busid):
        try:
                controller.check_bind(busid)
        except ExternalCommandFailed as e:
                logger.debug("%s", e)
                print("Failed to bind device {}. Please check the bus ID and try again.".format(busid))
                return e.returncode

        print("Device {} bound successfully.".format(busid))
        return 0


def run_detach(controller, busid=DETACH_BUSID):
        try:
                controller.detach(busid)
        except ExternalCommandFailed as e:
                logger.debug("detach ignored: %s", e)


def main(controller, read=None, pause=True, detach_busid=DETACH_BUSID):
        read = read or input
        list_devices(controller)

        action = prompt_action(read)
        if action is Action.ATTACH:
                busid = prompt_busid(read)
                outcome = Outcome(action, busid, run_attach(controller, busid))
        else:
                run_detach(controller, detach_busid)
                outcome = Outcome(action, detach_busid)

        if pause:
                try:
                        read(PAUSE_PROMPT)
                except EOFError:
                        logger.debug("stdin closed before pause")

        return outcome


def parse_args(argv=None):
        p = argparse.ArgumentParser(description='list, bind or detach USB devices with usbipd',
                                    formatter_class=argparse.ArgumentDefaultsHelpFormatter)

        p.add_argument('-p', '--program', type=str, default=DEFAULT_PROGRAM, dest='usbip', metavar='PATH',
                        help='path to the USB/IP control utility')

        p.add_argument('--detach-busid', type=str, default=DETACH_BUSID, dest='detach_busid', metavar='ID',
                        help='bus-id used by the detach action')

        p.add_argument('--no-pause', action='store_false', dest='pause',
                        help='do not wait for Enter before exiting')

        p.add_argument('--strict', action='store_true',
                        help='exit with the bind exit code instead of 0')

        p.add_argument('-v', '--verbose', action='store_true',
                        help='log every command that is run')

        return p.parse_args(argv)


def run(argv=None):
        args = parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                            format='%(levelname)s %(name)s: %(message)s')

        try:
                outcome = main(UsbipController(args.usbip), pause=args.pause, detach_busid=args.detach_busid)
        except (KeyboardInterrupt, EOFError):
                print()
                return 0

        if args.strict and not outcome.ok:
                return outcome.returncode if outcome.returncode > 0 else 1
        return 0
