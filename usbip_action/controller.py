import logging
import subprocess

DEFAULT_PROGRAM = "usbipd"

logger = logging.getLogger(__name__)


class ExternalCommandFailed(Exception):
        """The USB/IP utility exited with a non-zero code."""

        def __init__(self, args, returncode):
                super().__init__("{} exited with code {}".format(" ".join(args), returncode))
                self.args_ = list(args)
                self.returncode = returncode


class DeviceController:
        """Operations of the USB/IP control utility.

        Subclasses run the real tool; tests substitute a recording fake.
        """

        program = DEFAULT_PROGRAM

        def list(self):
                raise NotImplementedError

        def bind(self, busid):
                raise NotImplementedError

        def detach(self, busid):
                raise NotImplementedError

        def check_bind(self, busid):
                code = self.bind(busid)
                if code:
                        raise ExternalCommandFailed([self.program, "bind", "--busid", busid], code)


class UsbipController(DeviceController):

        def __init__(self, program=DEFAULT_PROGRAM):
                self.program = program

        def run(self, *args):
                cmd = [self.program, *args]
                logger.debug("run: %s", " ".join(cmd))
                try:
                        result = subprocess.run(cmd, stderr=subprocess.STDOUT, text=True)
                except (FileNotFoundError, PermissionError) as e:
                        logger.debug("cannot start %s: %s", self.program, e)
                        raise ExternalCommandFailed(cmd, 127) from e

                logger.debug("exit code %d", result.returncode)
                return result.returncode

        def list(self):
                return self.run("list")

        def bind(self, busid):
                return self.run("bind", "--busid", busid)

        def detach(self, busid):
                return self.run("detach", "--busid", busid)
