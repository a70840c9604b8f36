from usbip_action.cli import Action, Outcome, main, run
from usbip_action.controller import DeviceController, ExternalCommandFailed, UsbipController

__all__ = [
        "Action",
        "DeviceController",
        "ExternalCommandFailed",
        "Outcome",
        "UsbipController",
        "main",
        "run",
]
