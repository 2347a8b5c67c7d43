from fastapi import Depends, Request

from core.application.atualizar_tarefa import AtualizarTarefaUseCase
from core.application.concluir_tarefa import ConcluirTarefaUseCase
from core.application.criar_tarefa import CriarTarefaUseCase
from core.application.excluir_tarefa import ExcluirTarefaUseCase
from core.application.listar_tarefas import ListarTarefasUseCase
from core.application.obter_tarefa import ObterTarefaUseCase
from core.domain.ports.tarefa_repository import TarefaRepository
from infrastructure.container import (
    get_atualizar_tarefa_use_case,
    get_concluir_tarefa_use_case,
    get_criar_tarefa_use_case,
    get_excluir_tarefa_use_case,
    get_listar_tarefas_use_case,
    get_obter_tarefa_use_case,
)


def tarefa_repository(request: Request) -> TarefaRepository:
    return request.app.state.tarefa_repository


def criar_tarefa_use_case(
    repository: TarefaRepository = Depends(tarefa_repository),
) -> CriarTarefaUseCase:
    return get_criar_tarefa_use_case(repository)


def listar_tarefas_use_case(
    repository: TarefaRepository = Depends(tarefa_repository),
) -> ListarTarefasUseCase:
    return get_listar_tarefas_use_case(repository)


def obter_tarefa_use_case(
    repository: TarefaRepository = Depends(tarefa_repository),
) -> ObterTarefaUseCase:
    return get_obter_tarefa_use_case(repository)


def atualizar_tarefa_use_case(
    repository: TarefaRepository = Depends(tarefa_repository),
) -> AtualizarTarefaUseCase:
    return get_atualizar_tarefa_use_case(repository)


def concluir_tarefa_use_case(
    repository: TarefaRepository = Depends(tarefa_repository),
) -> ConcluirTarefaUseCase:
    return get_concluir_tarefa_use_case(repository)


def excluir_tarefa_use_case(
    repository: TarefaRepository = Depends(tarefa_repository),
) -> ExcluirTarefaUseCase:
    return get_excluir_tarefa_use_case(repository)
