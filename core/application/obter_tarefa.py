from core.domain.models.tarefa import Tarefa
from core.domain.ports.tarefa_repository import TarefaRepository


class ObterTarefaUseCase:
    def __init__(self, repository: TarefaRepository) -> None:
        self._repository = repository

    def execute(self, tarefa_id: str) -> Tarefa | None:
        return self._repository.get(tarefa_id)
