"""Grid store: the spreadsheet-like surface the plan is read from and written to.

Sheets are named, cells are addressed 1-based (row, column) like a spreadsheet and
empty cells read back as "". ``InMemoryGridStore`` keeps everything in a dict of
row lists; ``JsonGridStore`` persists the same structure to a JSON file after every
mutation, or once at the end of a ``batch()`` block.
"""
from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)

Rows = List[List[Any]]


@dataclass(frozen=True)
class GridRange:
    sheet: str
    row: int
    col: int
    num_rows: int = 1
    num_cols: int = 1

    def __post_init__(self):
        if self.row < 1 or self.col < 1:
            raise ValueError(f"grid ranges are 1-based, got row={self.row} col={self.col}")
        if self.num_rows < 1 or self.num_cols < 1:
            raise ValueError("grid ranges must span at least one cell")


class GridStore:
    """Interface shared by the store implementations."""

    def read(self, rng: GridRange) -> Rows:
        raise NotImplementedError

    def write(self, rng: GridRange, rows: Rows) -> None:
        raise NotImplementedError

    def clear(self, sheet: str) -> None:
        raise NotImplementedError

    def sheet_names(self) -> List[str]:
        raise NotImplementedError

    def last_row(self, sheet: str) -> int:
        """Index of the last row holding a non-empty cell (0 for an empty sheet)."""
        raise NotImplementedError

    def has_sheet(self, sheet: str) -> bool:
        return sheet in self.sheet_names()

    def read_row(self, sheet: str, row: int, col: int, num_cols: int) -> List[Any]:
        return self.read(GridRange(sheet, row, col, 1, num_cols))[0]

    def write_row(self, sheet: str, row: int, col: int, values: List[Any]) -> None:
        self.write(GridRange(sheet, row, col, 1, len(values)), [list(values)])

    @contextmanager
    def batch(self) -> Iterator["GridStore"]:
        yield self


def _blank(value) -> bool:
    return value is None or value == ""


class InMemoryGridStore(GridStore):
    def __init__(self, sheets: Optional[Dict[str, Rows]] = None):
        self._sheets: Dict[str, Rows] = {name: [list(r) for r in rows] for name, rows in (sheets or {}).items()}
        self._batch_depth = 0
        self._dirty = False

    def sheet_names(self) -> List[str]:
        return list(self._sheets)

    def read(self, rng: GridRange) -> Rows:
        data = self._sheets.get(rng.sheet, [])
        out = []
        for r in range(rng.row - 1, rng.row - 1 + rng.num_rows):
            src = data[r] if r < len(data) else []
            out.append([
                src[c] if c < len(src) and src[c] is not None else ""
                for c in range(rng.col - 1, rng.col - 1 + rng.num_cols)
            ])
        return out

    def write(self, rng: GridRange, rows: Rows) -> None:
        if len(rows) != rng.num_rows or any(len(r) != rng.num_cols for r in rows):
            raise ValueError(
                f"data shape does not match range {rng.num_rows}x{rng.num_cols} on sheet {rng.sheet!r}")
        data = self._sheets.setdefault(rng.sheet, [])
        while len(data) < rng.row - 1 + rng.num_rows:
            data.append([])
        for i, values in enumerate(rows):
            target = data[rng.row - 1 + i]
            end = rng.col - 1 + rng.num_cols
            if len(target) < end:
                target.extend([""] * (end - len(target)))
            target[rng.col - 1:end] = list(values)
        self._changed()

    def clear(self, sheet: str) -> None:
        self._sheets[sheet] = []
        self._changed()

    def last_row(self, sheet: str) -> int:
        data = self._sheets.get(sheet, [])
        for idx in range(len(data), 0, -1):
            if any(not _blank(v) for v in data[idx - 1]):
                return idx
        return 0

    @contextmanager
    def batch(self) -> Iterator["InMemoryGridStore"]:
        """Group writes so a persistent store saves once, when the outermost batch exits."""
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._dirty:
                self._dirty = False
                self._persist()

    def _changed(self) -> None:
        if self._batch_depth:
            self._dirty = True
        else:
            self._persist()

    def _persist(self) -> None:
        """Hook for persistent subclasses."""


class JsonGridStore(InMemoryGridStore):
    """Grid persisted as ``{sheet: [[cell, ...], ...]}`` in a JSON file."""

    def __init__(self, path):
        self.path = Path(path)
        sheets: Dict[str, Rows] = {}
        if self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    sheets = json.load(f) or {}
            except json.JSONDecodeError as e:
                logger.error(f"Invalid JSON in grid file {self.path}: {e}")
                raise
        super().__init__(sheets)

    def _persist(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".grid_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(self._sheets, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
