"""Unit tests for the allow-origin middleware."""

from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient

from election_results_api.api.middleware import AllowOriginMiddleware, setup_cors
from election_results_api.core.config import Settings


def _make_app(allow_origin: str = "*") -> FastAPI:
    app = FastAPI()
    app.add_middleware(AllowOriginMiddleware, allow_origin=allow_origin)

    @app.get("/ok")
    async def ok() -> dict:
        return {"ok": True}

    @app.get("/fail")
    async def fail() -> dict:
        raise HTTPException(status_code=404, detail="nope")

    return app


async def _get(app: FastAPI, path: str, **kwargs):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        return await ac.get(path, **kwargs)


class TestAllowOriginMiddleware:
    async def test_header_without_origin_request_header(self) -> None:
        resp = await _get(_make_app(), "/ok")
        assert resp.headers["access-control-allow-origin"] == "*"

    async def test_header_on_http_exception(self) -> None:
        resp = await _get(_make_app(), "/fail")
        assert resp.status_code == 404
        assert resp.headers["access-control-allow-origin"] == "*"

    async def test_header_overrides_request_origin(self) -> None:
        resp = await _get(_make_app("https://a.example"), "/ok", headers={"Origin": "https://b.example"})
        assert resp.headers["access-control-allow-origin"] == "https://a.example"

    async def test_setup_cors_uses_settings(self) -> None:
        app = FastAPI()
        setup_cors(app, Settings(_env_file=None, cors_allow_origin="https://valg.example.no"))

        @app.get("/ok")
        async def ok() -> dict:
            return {}

        resp = await _get(app, "/ok")
        assert resp.headers["access-control-allow-origin"] == "https://valg.example.no"
