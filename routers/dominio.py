# routers/dominio.py
# -*- coding: utf-8 -*-
"""
Diagnóstico do domínio externo: mostra como a requisição atual é vista
de fora (override de dev, x-forwarded-host, host ou hostname) e a URL de
callback que seria usada em fluxos de login/redirect.
"""
from typing import Optional

from fastapi import APIRouter, Query, Request

from config import settings
from schemas.dominio import DominioResponse, CallbackUrlResponse
from utils.host_utils import dominio_externo_da_request, montar_url_externa

router = APIRouter(prefix="/dominio", tags=["Domínio"])


@router.get("", response_model=DominioResponse, summary="Domínio externo da requisição")
def obter_dominio(request: Request):
    resolucao = dominio_externo_da_request(request, settings)
    return DominioResponse(dominio=resolucao.dominio, origem=resolucao.origem)


@router.get("/callback", response_model=CallbackUrlResponse, summary="URL de callback externa")
def obter_callback_url(
    request: Request,
    path: Optional[str] = Query(None, description="Caminho do callback (padrão: CALLBACK_PATH)"),
):
    resolucao = dominio_externo_da_request(request, settings)
    callback_url = montar_url_externa(
        resolucao.dominio or "",
        path if path is not None else settings.callback_path,
        settings.public_scheme,
    )
    return CallbackUrlResponse(dominio=resolucao.dominio, callback_url=callback_url)
