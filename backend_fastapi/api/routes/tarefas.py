import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from backend_fastapi.api.deps import (
    atualizar_tarefa_use_case,
    concluir_tarefa_use_case,
    criar_tarefa_use_case,
    excluir_tarefa_use_case,
    listar_tarefas_use_case,
    obter_tarefa_use_case,
)
from core.application.atualizar_tarefa import (
    AtualizarTarefaCommand,
    AtualizarTarefaUseCase,
)
from core.application.concluir_tarefa import ConcluirTarefaUseCase
from core.application.criar_tarefa import CriarTarefaCommand, CriarTarefaUseCase
from core.application.excluir_tarefa import ExcluirTarefaCommand, ExcluirTarefaUseCase
from core.application.listar_tarefas import ListarTarefasCommand, ListarTarefasUseCase
from core.application.obter_tarefa import ObterTarefaUseCase
from core.domain.errors import ErroValidacao
from core.domain.models.tarefa import Tarefa
from core.domain.validacao import TarefaPayload, validar_tarefa

logger = logging.getLogger(__name__)

MENSAGEM_NAO_ENCONTRADA = "Tarefa não encontrada."
MENSAGEM_ERRO_INTERNO = "Erro interno ao criar tarefa."

router = APIRouter(prefix="/tarefas", tags=["tarefas"])


def _validar(dados: Any) -> TarefaPayload:
    try:
        return validar_tarefa(dados)
    except ErroValidacao as e:
        logger.info(f"Payload rejeitado: {e.mensagem}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.mensagem)


def _nao_encontrada() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=MENSAGEM_NAO_ENCONTRADA
    )


@router.post(
    "",
    response_model=Tarefa,
    status_code=status.HTTP_201_CREATED,
    summary="Criar uma nova tarefa",
)
def criar_tarefa(
    dados: Any = Body(default=None),
    use_case: CriarTarefaUseCase = Depends(criar_tarefa_use_case),
) -> Tarefa:
    """
    Cria uma nova tarefa.

    - **titulo**: Título da tarefa (mínimo 3 caracteres).
    - **descricao**: Descrição da tarefa.
    - **concluida**: Se a tarefa já nasce concluída.
    """
    payload = _validar(dados)
    try:
        return use_case.execute(
            CriarTarefaCommand(
                titulo=payload.titulo,
                descricao=payload.descricao,
                concluida=payload.concluida,
            )
        )
    except Exception:
        logger.exception("Falha inesperada ao criar tarefa")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=MENSAGEM_ERRO_INTERNO,
        )


@router.get(
    "",
    response_model=list[Tarefa],
    summary="Listar tarefas",
)
def listar_tarefas(
    concluida: str | None = Query(default=None),
    use_case: ListarTarefasUseCase = Depends(listar_tarefas_use_case),
) -> list[Tarefa]:
    """
    Lista as tarefas na ordem de criação.

    - **concluida**: `true` devolve só as concluídas; qualquer outro valor, só as pendentes.
    """
    return use_case.execute(ListarTarefasCommand(concluida=concluida))


@router.get(
    "/{tarefa_id}",
    response_model=Tarefa,
    summary="Obter uma tarefa",
)
def obter_tarefa(
    tarefa_id: str,
    use_case: ObterTarefaUseCase = Depends(obter_tarefa_use_case),
) -> Tarefa:
    tarefa = use_case.execute(tarefa_id)
    if tarefa is None:
        raise _nao_encontrada()
    return tarefa


@router.put(
    "/{tarefa_id}",
    response_model=Tarefa,
    summary="Editar uma tarefa existente",
)
def atualizar_tarefa(
    tarefa_id: str,
    dados: Any = Body(default=None),
    use_case: AtualizarTarefaUseCase = Depends(atualizar_tarefa_use_case),
) -> Tarefa:
    """
    Substitui os dados de uma tarefa existente. O `id` nunca muda.

    - **tarefa_id**: Identificador da tarefa.
    - **titulo**, **descricao**, **concluida**: Mesmas regras da criação.
    """
    payload = _validar(dados)
    tarefa = use_case.execute(
        tarefa_id,
        AtualizarTarefaCommand(
            titulo=payload.titulo,
            descricao=payload.descricao,
            concluida=payload.concluida,
        ),
    )
    if tarefa is None:
        raise _nao_encontrada()
    return tarefa


@router.patch(
    "/{tarefa_id}/concluir",
    response_model=Tarefa,
    summary="Marcar uma tarefa como concluída",
)
def concluir_tarefa(
    tarefa_id: str,
    use_case: ConcluirTarefaUseCase = Depends(concluir_tarefa_use_case),
) -> Tarefa:
    tarefa = use_case.execute(tarefa_id)
    if tarefa is None:
        raise _nao_encontrada()
    return tarefa


@router.delete(
    "/{tarefa_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Excluir uma tarefa",
)
def excluir_tarefa(
    tarefa_id: str,
    use_case: ExcluirTarefaUseCase = Depends(excluir_tarefa_use_case),
) -> None:
    """
    Remove uma tarefa. O identificador deixa de referir qualquer registro.
    """
    if not use_case.execute(ExcluirTarefaCommand(id=tarefa_id)):
        raise _nao_encontrada()
