from enum import Enum

from license_checker.models import ScanStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    WHITE = "white"


SCAN_STATUS_STYLE = {
    ScanStatus.OK: UIStyle.GREEN.value,
    ScanStatus.NO_LICENSE_DETECTED: UIStyle.YELLOW.value,
    ScanStatus.LICENSE_NOT_PERMITTED: UIStyle.RED.value,
    ScanStatus.READ_FAILURE: UIStyle.MAGENTA.value,
}
