from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ENV_NOSECTION_COMPAT = "PYINIFILE_NOSECTION_COMPAT"

_TRUE = {"1", "true", "y", "yes", "on"}
_FALSE = {"0", "false", "n", "no", "off"}


def _parse_bool(raw: str) -> bool | None:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


@dataclass(frozen=True)
class IniConfig:
    """Options shared by the parser and the serializer.

    ``nosection_compat`` enables the no-section compatibility mode: key/value
    lines found before any ``[section]`` header are stored under the reserved
    :data:`pyinifile.model.NO_SECTION` section instead of being rejected, and
    that section is written back without a header line.
    """

    nosection_compat: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> IniConfig:
        env = os.environ if environ is None else environ
        raw = env.get(ENV_NOSECTION_COMPAT)
        if raw is None:
            return cls()
        flag = _parse_bool(raw)
        if flag is None:
            logger.warning(
                "Ignoring %s=%r: expected a boolean", ENV_NOSECTION_COMPAT, raw
            )
            return cls()
        return cls(nosection_compat=flag)


DEFAULT_CONFIG = IniConfig()
