"""FastAPI dependency injection for settings and the result store.

Both objects are created once by the application factory and stored on
``app.state``; these dependencies hand them to request handlers.
"""

from fastapi import Request

from election_results_api.core.config import Settings
from election_results_api.lib.result_store import ResultStore


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings


def get_result_store(request: Request) -> ResultStore:
    """Return the application's result store."""
    return request.app.state.result_store
