from abc import ABC, abstractmethod

from core.domain.models.tarefa import Tarefa


class TarefaRepository(ABC):
    @abstractmethod
    def list(self) -> list[Tarefa]:
        raise NotImplementedError

    @abstractmethod
    def save(self, tarefa: Tarefa) -> None:
        raise NotImplementedError

    @abstractmethod
    def substituir(self, tarefa: Tarefa) -> bool:
        raise NotImplementedError

    @abstractmethod
    def find_index(self, tarefa_id: str) -> int:
        raise NotImplementedError

    @abstractmethod
    def get(self, tarefa_id: str) -> Tarefa | None:
        raise NotImplementedError

    @abstractmethod
    def remover(self, tarefa_id: str) -> bool:
        raise NotImplementedError
