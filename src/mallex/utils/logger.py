"""Logger factory: standard library loggers under the ``mallex`` namespace."""

import logging


def get_logger(name: str) -> logging.Logger:
    if name != "mallex" and not name.startswith("mallex."):
        name = f"mallex.{name}"
    return logging.getLogger(name)
