from linkedset.configparser import (
    BoolParam,
    LinkedSetConfigParser,
    _create_default_config_parser,
)


def add_basic_configvars(config: LinkedSetConfigParser):
    config.add(
        "strict_equality",
        "If True, errors raised while comparing two elements (for instance "
        "a TypeError, or the ValueError of a numpy array with an ambiguous "
        "truth value) propagate out of contains/add/remove. If False, such a "
        "pair is treated as not equal.",
        BoolParam(False),
    )

    config.add(
        "check_iterator_modification",
        "If True, an iterator raises ConcurrentModificationError when the set "
        "it walks was structurally modified after the iterator was created.",
        BoolParam(True),
    )

    config.add(
        "check_invariants",
        "If True, verify the element count and the uniqueness of the chain "
        "after every mutation. Quadratic, meant for debugging.",
        BoolParam(False),
    )


def _create_default_config(environ=None) -> LinkedSetConfigParser:
    config = _create_default_config_parser(environ)
    add_basic_configvars(config)
    config.check_unused_flags()
    return config


config = _create_default_config()
