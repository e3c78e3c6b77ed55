import logging

from fastapi import FastAPI

from src.api.app_runtime import ApiRuntime, build_runtime
from src.api.config import ApiConfig
from src.api.routes import admin, events, guides, health


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def create_app(runtime: ApiRuntime | None = None) -> FastAPI:
    if runtime is None:
        config = ApiConfig.from_env()
        _setup_logging(config.log_level)
        runtime = build_runtime(config)

    app = FastAPI(title="Guide Triage API", version="0.3.0")
    app.state.runtime = runtime
    app.include_router(health.router)
    app.include_router(guides.router)
    app.include_router(events.router)
    app.include_router(admin.router)
    return app


if __name__ == "__main__":
    import uvicorn

    _config = ApiConfig.from_env()
    uvicorn.run("src.api.main:create_app", factory=True, host=_config.host, port=_config.port)
