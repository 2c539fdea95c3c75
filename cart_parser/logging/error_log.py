from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from cart_parser.models.validation_error import ValidationError

"""Error log buffering.

Validation errors of a failed run are buffered and written as JSON Lines to
`<logs_dir>/errors-YYYYMMDD-HHMMSS.log` (UTC). Each line has a fixed set of
keys: timestamp, file, type, row, column, message.
"""

__all__ = [
    "ErrorLogBuffer",
    "SCHEMA_PATH",
]

LOGS_DIR = Path("./logs")
SCHEMA_PATH = Path(__file__).parent / "error_log_schema.json"
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class ErrorLogBuffer:
    """In-memory buffer for validation errors. Flush writes JSON Lines.

    - The file path is decided on first access and reused by later flushes
    - flush() appends, so several flushes land in the same file
    - No thread safety (serial execution only)
    """
    def __init__(self, logs_dir: Path | None = None) -> None:
        self._logs_dir = logs_dir if logs_dir is not None else LOGS_DIR
        self._lines: list[str] = []
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._logs_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._logs_dir / f"errors-{stamp}.log"
        return self._file_path

    def append(self, error: ValidationError, file: str) -> None:
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        self._lines.append(error.to_json_line(timestamp=ts, file=file))

    def extend(self, errors: list[ValidationError], file: str) -> None:
        for error in errors:
            self.append(error, file)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._lines)

    def flush(self) -> Path:
        if not self._lines:
            return self.file_path
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for line in self._lines:
                f.write(line + "\n")
        self._lines.clear()
        return fp
