"""
Configuration for the NFA to DFA conversion pipeline.

Values come from dataclass defaults, can be overridden through
``NFA_DETERMINIZER_*`` environment variables with ``from_env`` and, in the
command line tool, through explicit flags.
"""

import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

DEFAULT_EPSILON = "ε"
DEFAULT_STATE_PREFIX = "S"
ENV_PREFIX = "NFA_DETERMINIZER_"


@dataclass
class ConverterConfig:
    """Settings shared by the CSV parser, the DFA builder and the CSV writer"""
    epsilon: str = DEFAULT_EPSILON
    delimiter: str = ";"
    target_separator: str = ","
    final_marker: str = "F"
    state_prefix: str = DEFAULT_STATE_PREFIX
    input_encoding: str = "utf-8-sig"
    output_encoding: str = "utf-8"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    custom_settings: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.epsilon:
            raise ValueError("Epsilon marker must be a non-empty string")
        if len(self.delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {self.delimiter!r}")
        if not self.target_separator or self.target_separator == self.delimiter:
            raise ValueError("Target separator must be non-empty and differ from the delimiter")
        if not self.state_prefix:
            raise ValueError("State prefix must be a non-empty string")
        for name, value in (("State prefix", self.state_prefix), ("Final marker", self.final_marker)):
            if self.delimiter in value or "\n" in value or "\r" in value:
                raise ValueError(f"{name} {value!r} must not contain the delimiter or a line break")

    def get_setting(self, key: str, default=None):
        return self.custom_settings.get(key, default)

    def with_overrides(self, **overrides) -> "ConverterConfig":
        """Return a copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "ConverterConfig":
        """
        Build a configuration from environment variables.

        Recognised variables are ``NFA_DETERMINIZER_EPSILON``, ``_DELIMITER``,
        ``_TARGET_SEPARATOR``, ``_FINAL_MARKER``, ``_STATE_PREFIX``,
        ``_INPUT_ENCODING``, ``_OUTPUT_ENCODING``, ``_LOG_LEVEL`` and
        ``_LOG_FILE``. Unset variables keep the dataclass defaults.
        """
        env = os.environ if environ is None else environ
        names = (
            "epsilon", "delimiter", "target_separator", "final_marker",
            "state_prefix", "input_encoding", "output_encoding",
            "log_level", "log_file",
        )
        values = {}
        for name in names:
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw != "":
                values[name] = raw
        return cls(**values)
