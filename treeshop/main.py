"""Application entrypoint for the TreeShop pricing and lead scoring API."""

from __future__ import annotations

from fastapi import FastAPI

from treeshop.api.v1.router import get_api_router
from treeshop.core.config import get_config
from treeshop.core.startup import bootstrap


def create_app() -> FastAPI:
    cfg = get_config()
    app = FastAPI(title=cfg.APP_NAME, version=cfg.APP_VERSION, debug=cfg.DEBUG)
    app.include_router(get_api_router())

    @app.get("/")
    def root() -> dict:
        return {"service": cfg.APP_NAME, "version": cfg.APP_VERSION, "api_prefix": cfg.API_PREFIX}

    return app


# Expose ASGI app for `uvicorn treeshop.main:app`.
app = create_app()


def run() -> None:
    import uvicorn

    bootstrap()
    cfg = get_config()
    uvicorn.run("treeshop.main:app", host=cfg.API_HOST, port=cfg.API_PORT)


if __name__ == "__main__":
    run()
