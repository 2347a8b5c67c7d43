from core.application.atualizar_tarefa import AtualizarTarefaUseCase
from core.application.concluir_tarefa import ConcluirTarefaUseCase
from core.application.criar_tarefa import CriarTarefaUseCase
from core.application.excluir_tarefa import ExcluirTarefaUseCase
from core.application.listar_tarefas import ListarTarefasUseCase
from core.application.obter_tarefa import ObterTarefaUseCase
from core.domain.ports.tarefa_repository import TarefaRepository
from infrastructure.memoria.repository.tarefa_repository import (
    InMemoryTarefaRepository,
)


def get_tarefa_repository() -> TarefaRepository:
    # Cada chamada cria um store novo e vazio; quem o possui é a app.
    return InMemoryTarefaRepository()


def get_criar_tarefa_use_case(repository: TarefaRepository) -> CriarTarefaUseCase:
    return CriarTarefaUseCase(repository=repository)


def get_listar_tarefas_use_case(repository: TarefaRepository) -> ListarTarefasUseCase:
    return ListarTarefasUseCase(repository=repository)


def get_obter_tarefa_use_case(repository: TarefaRepository) -> ObterTarefaUseCase:
    return ObterTarefaUseCase(repository=repository)


def get_atualizar_tarefa_use_case(
    repository: TarefaRepository,
) -> AtualizarTarefaUseCase:
    return AtualizarTarefaUseCase(repository=repository)


def get_concluir_tarefa_use_case(
    repository: TarefaRepository,
) -> ConcluirTarefaUseCase:
    return ConcluirTarefaUseCase(repository=repository)


def get_excluir_tarefa_use_case(repository: TarefaRepository) -> ExcluirTarefaUseCase:
    return ExcluirTarefaUseCase(repository=repository)
