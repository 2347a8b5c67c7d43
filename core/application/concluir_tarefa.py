import logging

from core.domain.models.tarefa import Tarefa
from core.domain.ports.tarefa_repository import TarefaRepository

logger = logging.getLogger(__name__)


class ConcluirTarefaUseCase:
    def __init__(self, repository: TarefaRepository) -> None:
        self._repository = repository

    def execute(self, tarefa_id: str) -> Tarefa | None:
        tarefa = self._repository.get(tarefa_id)
        if tarefa is None:
            logger.info(f"Tarefa {tarefa_id} não encontrada para conclusão")
            return None

        tarefa.concluida = True
        if not self._repository.substituir(tarefa):
            logger.info(f"Tarefa {tarefa_id} excluída durante a conclusão")
            return None

        logger.info(f"Tarefa {tarefa_id} concluída")
        return tarefa
