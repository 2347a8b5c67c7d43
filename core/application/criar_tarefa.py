import logging
from dataclasses import dataclass
from uuid import uuid4

from core.domain.models.tarefa import Tarefa
from core.domain.ports.tarefa_repository import TarefaRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CriarTarefaCommand:
    titulo: str
    descricao: str
    concluida: bool = False


class CriarTarefaUseCase:
    def __init__(self, repository: TarefaRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CriarTarefaCommand) -> Tarefa:
        tarefa = Tarefa(
            id=str(uuid4()),
            titulo=cmd.titulo,
            descricao=cmd.descricao,
            concluida=cmd.concluida,
        )
        self._repository.save(tarefa)
        logger.info(f"Tarefa {tarefa.id} criada")
        return tarefa
