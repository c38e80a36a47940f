"""Best score kept in a save file under the assets directory."""

from __future__ import annotations

from pathlib import Path
from typing import IO


class HighScore:
    """Reads and updates the stored best score."""

    SAVE_NAMES = ("save", "save.txt")

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = Path(directory) if directory is not None else Path.cwd()
        self.high_score = 0
        self._file: IO[str] | None = None

    def open_file(self) -> None:
        """Open the save file for reading and writing.

        Raises FileNotFoundError if no save file exists.
        """
        self.close()
        assets = self.directory / "assets"
        for name in self.SAVE_NAMES:
            path = assets / name
            try:
                self._file = path.open("r+", encoding="utf-8")
                return
            except OSError:
                continue
        raise FileNotFoundError(f"can't open save file {assets / self.SAVE_NAMES[-1]}")

    def check_score(self, score: int) -> None:
        """Compare a score with the stored best, saving it if higher.

        The save file is closed afterwards unless it was empty.
        """
        if self._file is None:
            raise RuntimeError("save file is not open")
        line = self._file.readline()
        if not line:
            return
        stored = int(line.strip())
        self.high_score = stored
        if score > stored:
            self._file.seek(0)
            self._file.write(str(score))
            self.high_score = score
        self.close()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> HighScore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()