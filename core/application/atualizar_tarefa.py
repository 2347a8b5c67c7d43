import logging
from dataclasses import dataclass

from core.domain.models.tarefa import Tarefa
from core.domain.ports.tarefa_repository import TarefaRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AtualizarTarefaCommand:
    """Campos em None não foram enviados e mantêm o valor atual."""

    titulo: str | None = None
    descricao: str | None = None
    concluida: bool | None = None


class AtualizarTarefaUseCase:
    def __init__(self, repository: TarefaRepository) -> None:
        self._repository = repository

    def execute(self, tarefa_id: str, cmd: AtualizarTarefaCommand) -> Tarefa | None:
        tarefa = self._repository.get(tarefa_id)
        if tarefa is None:
            logger.info(f"Tarefa {tarefa_id} não encontrada para atualização")
            return None

        if cmd.titulo is not None:
            tarefa.titulo = cmd.titulo
        if cmd.descricao is not None:
            tarefa.descricao = cmd.descricao
        if cmd.concluida is not None:
            tarefa.concluida = cmd.concluida

        if not self._repository.substituir(tarefa):
            logger.info(f"Tarefa {tarefa_id} excluída durante a atualização")
            return None

        logger.info(f"Tarefa {tarefa_id} atualizada")
        return tarefa
