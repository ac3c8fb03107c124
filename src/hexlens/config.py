import enum
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 16 * 1024  # 16 KiB, the head is elided beyond this
DEFAULT_PRINTABLE_LIMIT = 4096


class BinariesMode(enum.Enum):
    AS_BINARIES = "dump"
    AS_STRINGS = "text"
    INFER = "infer"


@dataclass(frozen=True)
class HexdumpOptions:
    binaries: BinariesMode = BinariesMode.AS_BINARIES
    printable_limit: int = DEFAULT_PRINTABLE_LIMIT
    limit: Optional[int] = DEFAULT_LIMIT  # None renders everything
    color: bool = True

    def __post_init__(self):
        if not isinstance(self.binaries, BinariesMode):
            object.__setattr__(self, "binaries", BinariesMode(self.binaries))
        if self.limit is not None and (
            isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 0
        ):
            raise InvalidInputError(f"limit must be None or a non-negative integer, got {self.limit!r}")
        if isinstance(self.printable_limit, bool) or not isinstance(self.printable_limit, int) or self.printable_limit < 0:
            raise InvalidInputError(f"printable_limit must be a non-negative integer, got {self.printable_limit!r}")


DEFAULT_OPTIONS = HexdumpOptions()


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidInputError(f"{name} must be an integer, got {raw!r}") from None


def options_from_env(environ: Mapping[str, str] = os.environ) -> HexdumpOptions:
    """
    Build options from the environment:

      HEXLENS_LIMIT            - byte limit, or "none" for no limit
      HEXLENS_MODE             - dump, text or infer
      HEXLENS_PRINTABLE_LIMIT  - characters checked when inferring
      NO_COLOR                 - any value turns colours off
    """
    kwargs = {}

    raw_limit = environ.get("HEXLENS_LIMIT")
    if raw_limit is not None:
        kwargs["limit"] = None if raw_limit.strip().lower() == "none" else _parse_int("HEXLENS_LIMIT", raw_limit)

    raw_mode = environ.get("HEXLENS_MODE")
    if raw_mode is not None:
        try:
            kwargs["binaries"] = BinariesMode(raw_mode.strip().lower())
        except ValueError:
            raise InvalidInputError(
                f"HEXLENS_MODE must be one of {[m.value for m in BinariesMode]}, got {raw_mode!r}"
            ) from None

    raw_printable = environ.get("HEXLENS_PRINTABLE_LIMIT")
    if raw_printable is not None:
        kwargs["printable_limit"] = _parse_int("HEXLENS_PRINTABLE_LIMIT", raw_printable)

    if "NO_COLOR" in environ:
        kwargs["color"] = False

    logger.debug(f"Options from environment: {kwargs}")
    return HexdumpOptions(**kwargs)
