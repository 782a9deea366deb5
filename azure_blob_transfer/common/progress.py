"""
Progress reporting for blob transfers.

The storage SDK reports progress through a ``progress_hook(current, total)``
callback where ``current`` is the absolute number of bytes moved so far.
``TransferProgress`` adapts that callback onto a tqdm byte counter.
"""

import sys
from typing import IO, Optional

from tqdm import tqdm


class TransferProgress:
    """Byte-count callback that drives a tqdm progress bar.

    Example:
        >>> with TransferProgress(size, f"Downloading {asset}") as progress:
        ...     blob.download_blob(progress_hook=progress).readinto(f)
        ...     print(progress.finish())
    """

    def __init__(
        self,
        total: Optional[int],
        description: str,
        file: Optional[IO[str]] = None,
        disable: bool = False,
    ):
        self.description = description
        self._finished = False
        self._final = ""
        self._bar = tqdm(
            total=total,
            desc=description,
            unit="B",
            unit_scale=True,
            unit_divisor=1024,
            file=file if file is not None else sys.stdout,
            disable=disable,
            leave=False,
        )

    @property
    def total(self) -> Optional[int]:
        return self._bar.total

    @property
    def transferred(self) -> int:
        return int(self._bar.n)

    @property
    def finished(self) -> bool:
        return self._finished

    def __call__(self, current: int, total: Optional[int] = None) -> None:
        if self._finished:
            return

        if total is not None and total != self._bar.total:
            self._bar.total = total

        position = max(int(current), 0)
        if self._bar.total is not None:
            position = min(position, int(self._bar.total))

        # tqdm only tracks increments; the SDK reports absolute positions.
        self._bar.n = position
        self._bar.refresh()

    def render(self) -> str:
        """Return the current bar as a single line of text."""
        if self._bar.disable:
            return ""
        return str(self._bar)

    def finish(self) -> str:
        """Close the bar and return its final rendering."""
        if self._finished:
            return self._final
        self._final = self.render()
        self._finished = True
        self._bar.close()
        return self._final

    def __enter__(self) -> "TransferProgress":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.finish()
