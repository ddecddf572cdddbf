"""Election results service — national and county result lookups."""

from typing import Any

from loguru import logger

from election_results_api.lib.result_store import ResultKey, ResultStore


async def get_national_results(store: ResultStore, election_type: str, year: str) -> Any:
    """Load the national result document for an election.

    Args:
        store: Result store to read from.
        election_type: Election type segment (e.g. "general").
        year: Election year segment.

    Returns:
        The decoded result document.

    Raises:
        InvalidResultKeyError: If a segment is not a valid path component.
        ResultStoreError: If the document is missing, unreadable or malformed.
    """
    key = ResultKey(election_type, year)
    document = await store.load_json(key)
    logger.debug(f"Loaded national results {key}")
    return document


async def get_county_results(store: ResultStore, election_type: str, year: str, county: str) -> Any:
    """Load the county result document for an election.

    Raises:
        InvalidResultKeyError: If a segment is not a valid path component.
        ResultStoreError: If the document is missing, unreadable or malformed.
    """
    key = ResultKey(election_type, year, county)
    document = await store.load_json(key)
    logger.debug(f"Loaded county results {key}")
    return document
