from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from schemas.health import HealthResponse
from config import settings
from datetime import datetime, timezone
import structlog

logger = structlog.get_logger()
router = APIRouter()

@router.get("/health",
            response_model=HealthResponse,
            summary="Health Check",
            description="Verifica a saúde da aplicação")
async def health_check():
    """
    Endpoint de health check. Este serviço não tem dependências externas,
    então só informa status, timestamp e versão.
    """
    health_response = HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        services={"app": "running"},
    )

    logger.info("Health check executado", status=health_response.status)

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=health_response.model_dump(mode="json"),
    )
