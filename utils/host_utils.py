# utils/host_utils.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Protocol

import structlog
from starlette.requests import Request

if TYPE_CHECKING:
    from config import Settings

logger = structlog.get_logger()

HEADER_FORWARDED_HOST = "x-forwarded-host"
HEADER_HOST = "host"


class HostSource(Protocol):
    """
    O mínimo que a resolução precisa de uma requisição:
    busca de header (case-insensitive) e o hostname já calculado pelo framework.
    """
    hostname: Optional[str]

    def get(self, name: str) -> Optional[str]: ...


class RequestHostSource:
    """Adapta uma Request do Starlette/FastAPI para HostSource."""

    def __init__(self, request: Request):
        self._request = request

    def get(self, name: str) -> Optional[str]:
        return self._request.headers.get(name)

    @property
    def hostname(self) -> Optional[str]:
        return self._request.url.hostname


class OrigemDominio(str, Enum):
    ENV = "env"
    FORWARDED_HOST = HEADER_FORWARDED_HOST
    HOST = HEADER_HOST
    HOSTNAME = "hostname"


@dataclass(frozen=True)
class ResolucaoDominio:
    dominio: Optional[str]
    origem: OrigemDominio


def resolver_dominio_externo(
    fonte: HostSource, dev_domain: Optional[str] = None
) -> ResolucaoDominio:
    """
    Resolve o domínio externo em ordem estrita (o primeiro que existir vence):
      1) dev_domain (override de desenvolvimento), literal
      2) x-forwarded-host → primeiro item da lista separada por vírgula, sem espaços
      3) host → tudo antes do primeiro ':' (tira a porta)
      4) hostname do framework, literal

    String vazia conta como ausente. Não lança.
    Obs.: o corte no primeiro ':' trunca literais IPv6 (ex.: "[::1]:8080" → "[").
    """
    # Em desenvolvimento o proxy pode reescrever os headers; o override sempre vence
    if dev_domain:
        return ResolucaoDominio(dev_domain, OrigemDominio.ENV)

    # Em produção o load balancer seta x-forwarded-host (pode vir em cadeia)
    forwarded_host = fonte.get(HEADER_FORWARDED_HOST)
    if forwarded_host:
        return ResolucaoDominio(
            forwarded_host.split(",")[0].strip(), OrigemDominio.FORWARDED_HOST
        )

    host = fonte.get(HEADER_HOST)
    if host:
        return ResolucaoDominio(host.split(":")[0], OrigemDominio.HOST)

    # Último recurso
    return ResolucaoDominio(fonte.hostname, OrigemDominio.HOSTNAME)


def obter_dominio_externo(fonte: HostSource, dev_domain: Optional[str] = None) -> Optional[str]:
    return resolver_dominio_externo(fonte, dev_domain).dominio


def dominio_externo_da_request(
    request: Request, settings: Optional["Settings"] = None
) -> ResolucaoDominio:
    """Resolve a partir da Request do FastAPI, lendo o override do ambiente agora."""
    if settings is None:
        from config import settings as settings_globais

        settings = settings_globais

    resolucao = resolver_dominio_externo(RequestHostSource(request), settings.dev_domain)
    logger.debug(
        "Dominio externo resolvido",
        dominio=resolucao.dominio,
        origem=resolucao.origem.value,
        path=request.url.path,
    )
    return resolucao


def montar_url_externa(dominio: str, path: str = "/", scheme: str = "https") -> str:
    """Monta scheme://dominio/path com exatamente uma barra entre domínio e caminho."""
    return f"{scheme}://{dominio.rstrip('/')}/{(path or '').lstrip('/')}"
