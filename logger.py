# logger.py
import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def init_log(path=None, level="INFO", root=None):
    """
    Configure the root logger. Without a path records are dropped, since
    anything written to the terminal would land on top of the timer screen.
    """
    if root is None:
        root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if path:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    else:
        handler = logging.NullHandler()

    root.addHandler(handler)
    root.setLevel(level)
    return handler
