import logging
from dataclasses import dataclass

from core.domain.ports.tarefa_repository import TarefaRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExcluirTarefaCommand:
    id: str


class ExcluirTarefaUseCase:
    def __init__(self, repository: TarefaRepository) -> None:
        self._repository = repository

    def execute(self, cmd: ExcluirTarefaCommand) -> bool:
        removida = self._repository.remover(cmd.id)
        if removida:
            logger.info(f"Tarefa {cmd.id} excluída")
        else:
            logger.info(f"Tarefa {cmd.id} não encontrada para exclusão")
        return removida
