# schemas/dominio.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from utils.host_utils import OrigemDominio


class DominioResponse(BaseModel):
    """Domínio externo resolvido e qual passo da cadeia venceu"""
    dominio: Optional[str]
    origem: OrigemDominio

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "dominio": "app.exemplo.com",
                "origem": "x-forwarded-host",
            }
        }
    )


class CallbackUrlResponse(BaseModel):
    """URL externa de callback montada a partir do domínio resolvido"""
    dominio: Optional[str]
    callback_url: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "dominio": "app.exemplo.com",
                "callback_url": "https://app.exemplo.com/api/callback",
            }
        }
    )

