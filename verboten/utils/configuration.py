import os


def log_level() -> str:
    return os.getenv("VERBOTEN_LOG_LEVEL", "INFO").upper()


def log_dir():
    # No file logging unless a directory is given
    return os.getenv("VERBOTEN_LOG_DIR") or None
