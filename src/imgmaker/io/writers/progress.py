from __future__ import annotations

from typing import Optional

import SimpleITK as sitk
from tqdm import tqdm

from imgmaker.loggers import logger


class WriterProgressWatcher:
    """
    Report start, progress and end of a write through tqdm and the logger.

    Attach it to a SimpleITK process object with `attach`, or drive it by
    hand with `start`/`update`/`end` for writers that emit no events.

    Parameters
    ----------
    description : str
        Label of the progress bar.
    disable : bool
        Hide the progress bar (log events are still emitted).
    """

    def __init__(self, description: str = "Write Volume", disable: bool = False) -> None:
        self.description = description
        self.disable = disable
        self._bar: Optional[tqdm] = None
        self.started = False
        self.finished = False

    def attach(self, process_object: sitk.ProcessObject) -> None:
        process_object.AddCommand(sitk.sitkStartEvent, self.start)
        process_object.AddCommand(
            sitk.sitkProgressEvent,
            lambda: self.update(process_object.GetProgress()),
        )
        process_object.AddCommand(sitk.sitkEndEvent, self.end)

    def start(self) -> None:
        self.started = True
        logger.debug(f"{self.description} started")
        self._bar = tqdm(
            total=100,
            desc=self.description,
            unit="%",
            leave=False,
            disable=self.disable,
        )

    def update(self, progress: float) -> None:
        """Move the bar to `progress` (0.0 - 1.0)."""
        if self._bar is None:
            return
        target = round(progress * 100)
        if target > self._bar.n:
            self._bar.update(target - self._bar.n)

    def end(self) -> None:
        self.update(1.0)
        self.finished = True
        logger.debug(f"{self.description} finished")
        self.close()

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None
