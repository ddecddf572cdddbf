"""Result store library — key validation and file loading for result documents.

Public API:
    - ResultKey: Composite (election_type, year, county) lookup key
    - ResultStore: Async loader over a ``{type}/{year}/*.json`` tree
    - DatasetEntry: A result file discovered in the tree
    - InvalidResultKeyError, ResultNotFoundError, ResultReadError,
      MalformedResultError: Failure types
"""

from election_results_api.lib.result_store.keys import InvalidResultKeyError, ResultKey, validate_segment
from election_results_api.lib.result_store.store import (
    DatasetEntry,
    MalformedResultError,
    ResultNotFoundError,
    ResultReadError,
    ResultStore,
    ResultStoreError,
)

__all__ = [
    "DatasetEntry",
    "InvalidResultKeyError",
    "MalformedResultError",
    "ResultKey",
    "ResultNotFoundError",
    "ResultReadError",
    "ResultStore",
    "ResultStoreError",
    "validate_segment",
]
