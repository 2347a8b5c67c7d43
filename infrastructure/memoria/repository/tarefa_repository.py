"""
Repositório em memória de tarefas.

A lista interna é a única dona das instâncias de Tarefa e preserva a ordem de
inserção. Leituras devolvem cópias: `save` só acrescenta tarefas novas e
`substituir` só troca um registro que ainda existe, ambos sob o lock.
"""

import logging
import threading
from dataclasses import replace

from core.domain.models.tarefa import Tarefa
from core.domain.ports.tarefa_repository import TarefaRepository

logger = logging.getLogger(__name__)

NOT_FOUND = -1


class InMemoryTarefaRepository(TarefaRepository):
    """
    Coleção ordenada de tarefas protegida por um único lock.

    O FastAPI executa endpoints síncronos num thread pool, então todas as
    operações de leitura, inserção, alteração e remoção passam pelo mesmo
    `threading.Lock`.
    """

    def __init__(self) -> None:
        self._tarefas: list[Tarefa] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tarefas)

    def _find_index(self, tarefa_id: str) -> int:
        for index, tarefa in enumerate(self._tarefas):
            if tarefa.id == tarefa_id:
                return index
        return NOT_FOUND

    def find_index(self, tarefa_id: str) -> int:
        with self._lock:
            return self._find_index(tarefa_id)

    def list(self) -> list[Tarefa]:
        with self._lock:
            return [replace(t) for t in self._tarefas]

    def get(self, tarefa_id: str) -> Tarefa | None:
        with self._lock:
            index = self._find_index(tarefa_id)
            if index == NOT_FOUND:
                return None
            return replace(self._tarefas[index])

    def save(self, tarefa: Tarefa) -> None:
        with self._lock:
            self._tarefas.append(replace(tarefa))
            logger.debug(f"Tarefa {tarefa.id} adicionada na posição {len(self._tarefas) - 1}")

    def substituir(self, tarefa: Tarefa) -> bool:
        with self._lock:
            index = self._find_index(tarefa.id)
            if index == NOT_FOUND:
                logger.debug(f"Tarefa {tarefa.id} não encontrada para substituição")
                return False
            self._tarefas[index] = replace(tarefa)
            return True

    def remover(self, tarefa_id: str) -> bool:
        with self._lock:
            index = self._find_index(tarefa_id)
            if index == NOT_FOUND:
                return False
            del self._tarefas[index]
            return True
