from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import get_cors_origins
from api.routes.spoilers import router as spoilers_router


def create_app() -> FastAPI:
    app = FastAPI(title="Spoiler Reader API", version="0.1.0")
    origins = get_cors_origins()
    # Credentialed requests only for an explicit origin list, never for "*".
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.include_router(spoilers_router)

    @app.get("/healthz")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
