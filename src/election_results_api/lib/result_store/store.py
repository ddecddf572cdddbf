"""Read-only file store for election result documents.

Resolves ``ResultKey`` values to files under a base directory and loads them
with async I/O.  Documents are opaque: they are decoded as generic JSON and
checked for well-formedness only.
"""

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import aiofiles
from loguru import logger

from election_results_api.lib.result_store.keys import RESULT_SUFFIX, InvalidResultKeyError, ResultKey


def _reject_constant(name: str) -> float:
    """Refuse the NaN/Infinity literals Python's json module accepts by default."""
    msg = f"Non-standard JSON constant: {name}"
    raise ValueError(msg)


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        msg = f"Number out of range: {literal}"
        raise ValueError(msg)
    return value


class ResultStoreError(Exception):
    """Base class for failures loading a result document."""

    def __init__(self, message: str, key: ResultKey, path: Path) -> None:
        super().__init__(message)
        self.key = key
        self.path = path


class ResultNotFoundError(ResultStoreError):
    """Raised when no result file exists for a key."""


class ResultReadError(ResultStoreError):
    """Raised when a result file exists but cannot be read."""


class MalformedResultError(ResultStoreError):
    """Raised when a result file is not valid UTF-8 JSON."""


@dataclass(frozen=True)
class DatasetEntry:
    """A result file discovered in the data tree."""

    key: ResultKey
    path: Path


class ResultStore:
    """Local filesystem store laid out as ``{base_dir}/{type}/{year}/*.json``.

    Args:
        base_dir: Root directory of the result tree.
    """

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def resolve(self, key: ResultKey) -> Path:
        """Return the file path for a key (the file need not exist)."""
        return self._base_dir.joinpath(*key.relative_path.parts)

    async def load(self, key: ResultKey) -> bytes:
        """Read the raw bytes of the result file for ``key``.

        Args:
            key: Validated result key.

        Returns:
            Full file contents.

        Raises:
            ResultNotFoundError: If the file does not exist.
            ResultReadError: If the path cannot be opened or read.
        """
        path = self.resolve(key)
        try:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()
        except FileNotFoundError as e:
            logger.warning(f"No result file for {key}: {path}")
            msg = f"Result file not found: {path}"
            raise ResultNotFoundError(msg, key, path) from e
        except OSError as e:
            logger.error(f"Failed to read result file for {key}: {path} ({e})")
            msg = f"Result file could not be read: {path}"
            raise ResultReadError(msg, key, path) from e

    async def load_json(self, key: ResultKey) -> Any:
        """Load and decode the result document for ``key``.

        Returns:
            The decoded JSON value (object, array, scalar or None).

        Raises:
            ResultNotFoundError: If the file does not exist.
            ResultReadError: If the file cannot be read.
            MalformedResultError: If the content is not valid UTF-8 JSON.
        """
        raw = await self.load(key)
        try:
            return json.loads(
                raw.decode("utf-8"),
                parse_constant=_reject_constant,
                parse_float=_parse_finite_float,
            )
        except ValueError as e:
            # UnicodeDecodeError and JSONDecodeError are ValueErrors too.
            path = self.resolve(key)
            logger.warning(f"Malformed result file for {key}: {path} ({e})")
            msg = f"Result file is not valid JSON: {path}"
            raise MalformedResultError(msg, key, path) from e

    def list_datasets(self) -> list[DatasetEntry]:
        """Discover every result file in the data tree.

        Files whose stem is ``{year}{election_type}`` are national results;
        any other ``.json`` file in a year directory is a county result.
        Entries whose names are not valid key segments are skipped.

        Returns:
            Entries sorted by URL path.
        """
        entries: list[DatasetEntry] = []
        if not self._base_dir.is_dir():
            logger.warning(f"Data directory does not exist: {self._base_dir}")
            return entries

        for path in self._base_dir.glob(f"*/*/*{RESULT_SUFFIX}"):
            if not path.is_file():
                continue
            election_type = path.parent.parent.name
            year = path.parent.name
            county = None if path.stem == f"{year}{election_type}" else path.stem
            try:
                key = ResultKey(election_type, year, county)
            except InvalidResultKeyError:
                logger.debug(f"Skipping file with unsupported name: {path}")
                continue
            entries.append(DatasetEntry(key=key, path=path))

        entries.sort(key=lambda entry: entry.key.url_path)
        return entries
