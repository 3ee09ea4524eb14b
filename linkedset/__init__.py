"""
linkedset is a small library providing a mutable, insertion-ordered set
stored as a singly linked list.

The set only relies on ``==`` between its elements, so it also holds values
that are not hashable. Lookups are linear scans.

The main entry points are:

- `LinkedSet`: the container, usable anywhere a
  `collections.abc.MutableSet` is expected.
- `config`: library flags, overridable through the ``LINKEDSET_FLAGS``
  environment variable or temporarily with ``config.change_flags``.
"""

__docformat__ = "restructuredtext en"

import logging


linkedset_logger = logging.getLogger("linkedset")
logging_default_handler = logging.StreamHandler()
logging_default_formatter = logging.Formatter(
    fmt="%(levelname)s (%(name)s): %(message)s"
)
logging_default_handler.setFormatter(logging_default_formatter)
linkedset_logger.setLevel(logging.WARNING)

if not linkedset_logger.hasHandlers():
    linkedset_logger.addHandler(logging_default_handler)


def disable_log_handler(logger=linkedset_logger, handler=logging_default_handler):
    if logger.hasHandlers():
        logger.removeHandler(handler)


from linkedset.configdefaults import config  # noqa: E402
from linkedset.linked_set import LinkedSet, LinkedSetIterator  # noqa: E402
from linkedset.node import Node  # noqa: E402
from linkedset.utils import ConcurrentModificationError, InconsistencyError  # noqa: E402


__all__ = [
    "ConcurrentModificationError",
    "InconsistencyError",
    "LinkedSet",
    "LinkedSetIterator",
    "Node",
    "config",
    "disable_log_handler",
]
