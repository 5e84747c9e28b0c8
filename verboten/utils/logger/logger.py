import logging
import os
from time import localtime, strftime
from typing import Optional

from verboten.utils.configuration import log_dir, log_level


LOG_FORMAT = '[%(levelname)s][%(filename)s:%(lineno)s][%(asctime)s] %(message)s'
DATE_FORMAT = '%Y:%m:%d, %H:%M'
CONSOLE_HANDLER_NAME = "verboten.console"


def init_logger(level: Optional[str] = None, directory: Optional[str] = None) -> None:

    level = level or log_level()
    directory = directory or log_dir()

    root = logging.getLogger()
    root.setLevel(level)

    # Sets config for logging to file
    if directory:
        os.makedirs(directory, exist_ok=True)
        file_handler = logging.FileHandler(
            os.path.join(directory, f"{strftime('%Y-%m-%d_%H-%M-%S', localtime())}.log")
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(file_handler)

    # Add StreamHandler to print logs to the console, once
    console_handler = next((h for h in root.handlers if h.get_name() == CONSOLE_HANDLER_NAME), None)
    if console_handler is None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(console_handler)
    console_handler.setLevel(level)
