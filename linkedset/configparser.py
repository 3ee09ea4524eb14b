import logging
import os
from collections.abc import Callable
from functools import wraps
from typing import Any


_logger = logging.getLogger("linkedset.configparser")


def parse_config_string(config_string: str) -> dict[str, str]:
    """Parse a comma separated ``name=value`` list into a dict.

    Empty entries are ignored, so ``"a=1,,b=2,"`` is fine.
    """
    config_dict = {}
    for kv_pair in config_string.split(","):
        kv_pair = kv_pair.strip()
        if not kv_pair:
            continue
        kv_tuple = kv_pair.split("=", 1)
        if len(kv_tuple) != 2:
            raise ValueError(
                f"Config key '{kv_tuple[0]}' has no value, use name=value"
            )
        k, v = kv_tuple
        config_dict[k.strip()] = v.strip()
    return config_dict


class ConfigParam:
    """Base class of config parameters.

    ``apply`` validates and converts a raw value (possibly a string coming
    from the environment) before it is stored.
    """

    def __init__(
        self,
        default: Any,
        apply: Callable[[Any], Any] | None = None,
        doc: str = "",
    ):
        self._apply = apply
        self.doc = doc
        self.name: str | None = None
        self.default = self.apply(default)

    def apply(self, value):
        if self._apply is not None:
            return self._apply(value)
        return value


class BoolParam(ConfigParam):
    """A boolean parameter that also accepts the usual string spellings."""

    _true_strings = ("true", "1", "yes", "on")
    _false_strings = ("false", "0", "no", "off")

    def __init__(self, default: bool, doc: str = ""):
        super().__init__(default, apply=self._to_bool, doc=doc)

    def _to_bool(self, value) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in self._true_strings:
                return True
            if lowered in self._false_strings:
                return False
        raise ValueError(f"Invalid value ({value!r}) for boolean config {self.name}")


class _ChangeFlagsDecorator:
    def __init__(self, _root: "LinkedSetConfigParser", **kwargs):
        self.confs = {k: _root._config_var_dict[k] for k in kwargs}
        self.new_vals = kwargs
        self._root = _root
        self.old_vals: dict[str, Any] = {}

    def __call__(self, f):
        @wraps(f)
        def res(*args, **kwargs):
            with self:
                return f(*args, **kwargs)

        return res

    def __enter__(self):
        self.old_vals = {}
        for k in self.confs:
            self.old_vals[k] = getattr(self._root, k)
        try:
            for k, v in self.new_vals.items():
                setattr(self._root, k, v)
        except Exception:
            self.__exit__()
            raise

    def __exit__(self, *args):
        for k, v in self.old_vals.items():
            setattr(self._root, k, v)


class LinkedSetConfigParser:
    """Object that holds the configuration flags of the library.

    Flags are registered with ``add`` and then read and written as plain
    attributes::

        config.add("strict_equality", "doc", BoolParam(False))
        config.strict_equality = True
    """

    def __init__(self, flags_dict: dict[str, str] | None = None):
        object.__setattr__(self, "_flags_dict", dict(flags_dict or {}))
        object.__setattr__(self, "_config_var_dict", {})
        object.__setattr__(self, "_values", {})

    def add(self, name: str, doc: str, configparam: ConfigParam):
        if name in self._config_var_dict:
            raise AttributeError(f"This name is already taken: {name}")
        configparam.name = name
        configparam.doc = doc
        self._config_var_dict[name] = configparam

        if name in self._flags_dict:
            value = configparam.apply(self._flags_dict.pop(name))
            _logger.debug(f"Flag {name} set to {value!r} from the environment")
        else:
            value = configparam.default
        self._values[name] = value

    def check_unused_flags(self):
        if self._flags_dict:
            raise ValueError(
                f"Unknown config flags: {sorted(self._flags_dict)}. "
                f"Known flags are {sorted(self._config_var_dict)}"
            )

    def __getattr__(self, name):
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"Unknown config flag: {name}") from None

    def __setattr__(self, name, value):
        if name not in self._config_var_dict:
            raise AttributeError(f"Unknown config flag: {name}")
        self._values[name] = self._config_var_dict[name].apply(value)

    def __dir__(self):
        return [*super().__dir__(), *self._config_var_dict]

    def change_flags(self, **kwargs) -> _ChangeFlagsDecorator:
        """Use this as a decorator or context manager to change the value of
        config flags temporarily.

        Examples
        --------
        >>> from linkedset import config
        >>> with config.change_flags(strict_equality=True):
        ...     config.strict_equality
        True
        """
        for k in kwargs:
            if k not in self._config_var_dict:
                raise AttributeError(f"Unknown config flag: {k}")
        return _ChangeFlagsDecorator(self, **kwargs)


def _create_default_config_parser(
    environ: dict[str, str] | None = None,
) -> LinkedSetConfigParser:
    if environ is None:
        environ = os.environ
    return LinkedSetConfigParser(parse_config_string(environ.get("LINKEDSET_FLAGS", "")))
