"""Version information for the keyboard-friendly graphics view."""

from typing import List


def get_version() -> str:
    return "1.4"


def get_version_history() -> List[str]:
    """Release history, oldest first."""
    return [
        "2012-12-13: version 1.0: initial version",
        "2012-12-31: version 1.1: improved moving focus",
        "2015-08-24: version 1.2: move item with CTRL, add selected with SHIFT, "
        "can move multiple items",
        "2015-09-18: version 1.3: added verbosity",
        "2015-08-16: version 1.4: keyPressEvent may throw",
    ]
