"""
Middleware para tratamento centralizado de erros
"""
import traceback
from typing import Optional

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from config import Settings, settings as settings_globais
from utils.host_utils import RequestHostSource, resolver_dominio_externo

logger = structlog.get_logger()


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Converte exceções não tratadas em 500 JSON. HTTPException não chega aqui:
    o ExceptionMiddleware do FastAPI já a transformou em resposta.
    """

    def __init__(self, app: ASGIApp, settings: Optional[Settings] = None):
        super().__init__(app)
        self.settings = settings if settings is not None else settings_globais

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            tb = traceback.format_exc()
            # Domínio pelo qual o cliente chegou, para cruzar com os logs do proxy
            resolucao = resolver_dominio_externo(
                RequestHostSource(request), self.settings.dev_domain
            )
            logger.error(
                "Erro inesperado",
                error=str(e),
                path=request.url.path,
                dominio=resolucao.dominio,
                origem=resolucao.origem.value,
                exc_info=True,
            )

            content = {"detail": "Erro interno do servidor"}
            if self.settings.is_development:
                content["error"] = str(e)
                content["traceback"] = tb if self.settings.DEBUG else None
            return JSONResponse(status_code=500, content=content)
