# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from dotenv import load_dotenv, find_dotenv
from pathlib import Path
import os
import structlog

# ========= ENV =========
DOTENV_PATH = Path(__file__).with_name(".env")
if DOTENV_PATH.exists():
    load_dotenv(dotenv_path=DOTENV_PATH)
else:
    load_dotenv(find_dotenv())

from config import settings  # noqa: E402
from middleware.error_handler import ErrorHandlerMiddleware  # noqa: E402
from routers import health, dominio  # noqa: E402

# ---------- Logging estruturado ----------
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)
logger = structlog.get_logger()


def create_app() -> FastAPI:
    root_path = settings.ROOT_PATH

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Resolve o domínio externo pelo qual os clientes alcançam o serviço.",
        debug=settings.debug,
        root_path=root_path,
        servers=[{"url": root_path or "/"}],
    )

    # Middlewares
    app.add_middleware(ErrorHandlerMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    # Raiz simples
    @app.get("/")
    def read_root():
        return {"mensagem": "API online com sucesso!", "root_path": root_path}

    app.include_router(health.router, prefix="/api/v1", tags=["Health"])
    app.include_router(dominio.router, prefix="/api/v1")

    # Métricas
    Instrumentator().instrument(app).expose(app)

    @app.on_event("startup")
    async def startup_event():
        logger.info(
            "Iniciando API",
            version=settings.app_version,
            environment=settings.ENVIRONMENT,
            dev_domain_env_var=settings.DEV_DOMAIN_ENV_VAR,
        )

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Encerrando API")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=int(os.environ.get("PORT", 10000)))
