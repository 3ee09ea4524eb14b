import logging

from linkedset.configdefaults import config


_logger = logging.getLogger("linkedset.utils")


class ConcurrentModificationError(RuntimeError):
    """
    Raised by an iterator whose set was structurally modified after the
    iterator was created.
    """


class InconsistencyError(Exception):
    """
    The chain of a set no longer matches its element count, or holds two
    equal elements.
    """


def values_equal(stored, probe) -> bool:
    """Return whether `stored` and `probe` count as the same element.

    Identity wins first, so values that are not equal to themselves
    (``float("nan")``) can still be found. Comparisons that raise are
    treated as "not equal" unless ``config.strict_equality`` is set.
    """
    if stored is probe:
        return True
    try:
        return bool(stored == probe)
    except (TypeError, ValueError) as err:
        if config.strict_equality:
            raise
        _logger.debug(
            f"Treating {type(stored).__name__} and {type(probe).__name__} "
            f"as not equal: {err}"
        )
        return False
