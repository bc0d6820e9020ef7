# config_manager.py - JSON config manager

import json
import logging
import os

from rich.console import Console
from rich.table import Table

from typeahead.core.ranker import TIE_BREAKS

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_suggestions": 5,
    "vocabulary": "queries.csv",
    "tie_break": "encounter",  # or "alpha"
    "show_latency": True,
    "log_level": "WARNING",
    "log_file": "",  # empty = no log file
}

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class ConfigError(KeyError):
    """Unknown config option."""


def _coerce(default, val):
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError(f"not a boolean: {val!r}")
    return type(default)(val)


def _check_tie_break(v):
    if v not in TIE_BREAKS:
        raise ValueError(f"unknown tie_break {v!r}, expected one of {TIE_BREAKS}")
    return v


def _check_log_level(v):
    v = v.upper()
    if not isinstance(logging.getLevelName(v), int):
        raise ValueError(f"unknown log level {v!r}")
    return v


def _check_count(v):
    if v < 0:
        raise ValueError(f"must be >= 0, got {v}")
    return v


# per-option checks, run after type coercion and before a value is stored
VALIDATORS = {
    "max_suggestions": _check_count,
    "tie_break": _check_tie_break,
    "log_level": _check_log_level,
}


def _convert(key, val):
    v = _coerce(DEFAULTS[key], val)
    check = VALIDATORS.get(key)
    return check(v) if check else v


class Config:
    """
    Settings kept in a JSON file. Missing file = defaults; the file is only
    written by save().
    """

    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(raw, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        for k, v in raw.items():
            if k not in DEFAULTS:
                logger.warning("unknown config option %r in %s", k, self.path)
                continue
            try:
                self.data[k] = _convert(k, v)
            except (TypeError, ValueError) as e:
                logger.warning("bad value for %r in %s: %s", k, self.path, e)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def show(self, console=None):
        table = Table(title="config", show_header=False)
        for k, v in self.data.items():
            table.add_row(k, repr(v))
        (console or Console()).print(table)

    def set(self, key, val, persist=True):
        """
        Set an option, coerced to the default's type and checked before it is
        stored. Raises ConfigError / ValueError; on any error nothing changes.
        """
        if key not in DEFAULTS:
            raise ConfigError(key)
        new = _convert(key, val)
        old = self.data[key]
        self.data[key] = new
        if persist:
            try:
                self.save()
            except OSError:
                self.data[key] = old
                raise
