import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import register_error_handlers
from backend_fastapi.api.routes.tarefas import router as tarefas_router
from core.domain.ports.tarefa_repository import TarefaRepository
from infrastructure.container import get_tarefa_repository
from infrastructure.logging_config import configurar_logging

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def _cors_origins() -> list[str]:
    cors_origins = os.getenv("CORS_ORIGINS", "*")
    if cors_origins == "*":
        return ["*"]
    return [origin.strip() for origin in cors_origins.split(",")]


def create_app(repository: TarefaRepository | None = None) -> FastAPI:
    """
    Monta a aplicação. Cada app é dona do seu próprio repositório de tarefas.

    Args:
        repository: Repositório a usar. Se for None, cria um store em memória vazio.
    """
    configurar_logging(os.getenv("LOG_LEVEL", "info"))

    app = FastAPI(title="Tarefas API")
    if repository is None:
        repository = get_tarefa_repository()
    app.state.tarefa_repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
        allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
        allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
    )

    register_error_handlers(app)
    app.include_router(tarefas_router)

    logger.info(f"Aplicação criada com {type(repository).__name__}")
    return app


app = create_app()
