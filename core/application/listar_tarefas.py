from dataclasses import dataclass

from core.domain.models.tarefa import Tarefa
from core.domain.ports.tarefa_repository import TarefaRepository


@dataclass(slots=True)
class ListarTarefasCommand:
    # Filtro textual vindo da query string; só "true" seleciona as concluídas.
    concluida: str | None = None


class ListarTarefasUseCase:
    def __init__(self, repository: TarefaRepository) -> None:
        self._repository = repository

    def execute(self, cmd: ListarTarefasCommand | None = None) -> list[Tarefa]:
        tarefas = self._repository.list()
        if cmd is None or cmd.concluida is None:
            return tarefas

        concluida = cmd.concluida == "true"
        return [t for t in tarefas if t.concluida is concluida]
