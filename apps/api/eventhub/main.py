from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from eventhub.api.errors import register_exception_handlers
from eventhub.api.router import router as api_router
from eventhub.core.config import Settings, load_settings
from eventhub.core.logging import configure_logging
from eventhub.db import configure_database, init_db
from eventhub.middleware.request_id import RequestIdMiddleware


def create_app(config: Settings | None = None) -> FastAPI:
    config = (config or load_settings()).validate()

    configure_logging(config.log_level, json_logs=config.log_json)
    engine = configure_database(config.database_url, echo=config.database_echo)
    init_db(engine)

    app = FastAPI(title="EventHub API")
    app.state.settings = config

    # Starlette runs the last added middleware first, so request ids wrap CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)

    register_exception_handlers(app)

    Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)

    @app.get("/")
    def root():
        return {"name": "EventHub API", "status": "ok"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
