import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

MENSAGEM_ROTA_NAO_ENCONTRADA = "Rota não encontrada."
MENSAGEM_JSON_MALFORMADO = "Corpo da requisição inválido."


def _erro(status_code: int, mensagem: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"erro": mensagem}, headers=headers)


def _rota_nao_encontrada(request: Request, exc: StarletteHTTPException) -> bool:
    # Nenhum endpoint levanta 405; e o FastAPI só grava "route" no scope
    # quando alguma rota casa com o caminho.
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return True
    return exc.status_code == status.HTTP_404_NOT_FOUND and request.scope.get("route") is None


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if _rota_nao_encontrada(request, exc):
        logger.info(f"Rota não encontrada: {request.method} {request.url.path}")
        return _erro(status.HTTP_404_NOT_FOUND, MENSAGEM_ROTA_NAO_ENCONTRADA)
    return _erro(exc.status_code, str(exc.detail), headers=exc.headers)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info(f"Requisição malformada em {request.method} {request.url.path}: {exc.errors()}")
    return _erro(status.HTTP_400_BAD_REQUEST, MENSAGEM_JSON_MALFORMADO)


def register_error_handlers(app: FastAPI) -> None:
    """Todas as respostas de erro usam o formato {"erro": "<mensagem>"}."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
