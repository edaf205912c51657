"""Logging for py_convtable.

All messages go through the ``py_convtable`` logger, which writes to the console at
INFO level. What is logged where:

    - DEBUG: normalized tables (unit count, base, precision), registry installs and
      removals, operations that returned an `Err`, config files being read.
    - WARNING: tables rejected by `TableRegistry.register`, config files without a
      ``[convtab.tables]`` section.
    - ERROR: tables of a config file that could not be registered, `convtab` failures.

`convtab -d` lowers the level to DEBUG. For a persistent trace of table loading, add
a DEBUG file handler:

    ```python
    from py_convtable import TableRegistry, basicConfig
    from py_convtable.logger import enable_file_logging, disable_file_logging

    enable_file_logging("convtab_debug.log")
    basicConfig(TableRegistry(), "convtab.toml")
    disable_file_logging()
    ```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)
console_handler.setLevel(logging.DEBUG)  # Lowest level for console

logger: logging.Logger = logging.getLogger('py_convtable')
logger.addHandler(console_handler)
logger.setLevel(logging.INFO)

# File handler (optional, added dynamically)
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "debug.log") -> None:
    """Enable logging to a file with DEBUG level output.

    Replaces any existing file handler. The file is opened in append mode.

    Args:
        filename: Name of the log file to create. Defaults to "debug.log".
    """
    global file_handler
    if file_handler is not None:
        disable_file_logging()

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)  # Log everything to the file
    file_formatter = logging.Formatter("%(asctime)s:%(levelname)s:%(message)s")
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)


def disable_file_logging() -> None:
    """Disable file logging and close the file handle.

    Safe to call when file logging is not enabled.
    """
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
