import contextlib
import datetime
from pathlib import Path
from typing import Optional

import pytz
from structlog.types import EventDict


class PathPrettifier:
    """
    Rewrite `Path` values in an event as paths relative to `base_dir`.

    Paths outside `base_dir` are left untouched.
    """

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self.base_dir = base_dir or Path.cwd()

    def __call__(
        self, _: object, __: object, event_dict: EventDict
    ) -> EventDict:
        if not isinstance(event_dict, dict):
            msg = "event_dict must be a dictionary"
            raise TypeError(msg)

        for key, value in event_dict.items():
            if isinstance(value, Path):
                with contextlib.suppress(ValueError):
                    event_dict[key] = str(value.relative_to(self.base_dir))
        return event_dict


class CallPrettifier:
    """
    Collapse the module/func_name/lineno call-site fields into a `call` key.

    Args:
            concise (bool): Render as ``module.func:lineno`` when True,
                otherwise keep a dict of the three fields.
    """

    def __init__(self, concise: bool = True) -> None:
        self.concise = concise

    def __call__(
        self, _: object, __: object, event_dict: EventDict
    ) -> EventDict:
        if not isinstance(event_dict, dict):
            msg = "event_dict must be a dictionary"
            raise TypeError(msg)

        call = {
            "module": event_dict.pop("module", ""),
            "func_name": event_dict.pop("func_name", ""),
            "lineno": event_dict.pop("lineno", ""),
        }

        event_dict["call"] = (
            f"{call['module']}.{call['func_name']}:{call['lineno']}"
            if self.concise
            else call
        )
        return event_dict


class ESTTimeStamper:
    """Add a US/Eastern `timestamp` formatted with `fmt`."""

    def __init__(self, fmt: str = "%Y-%m-%dT%H:%M:%S%z") -> None:
        self.fmt = fmt
        self.est = pytz.timezone("US/Eastern")

    def __call__(
        self, _: object, __: object, event_dict: EventDict
    ) -> EventDict:
        if not isinstance(event_dict, dict):
            msg = "event_dict must be a dictionary"
            raise TypeError(msg)

        now = datetime.datetime.now(self.est)
        event_dict["timestamp"] = now.strftime(self.fmt)
        return event_dict
