"""
Validação dos payloads de criação e edição de tarefas.

As regras são avaliadas na ordem dos campos (titulo, descricao, concluida) e
a primeira violação encontrada interrompe a validação: o chamador recebe uma
única mensagem legível, nunca a lista completa de erros.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.domain.errors import ErroValidacao

TITULO_MIN_LENGTH = 3

MENSAGEM_CORPO_NAO_OBJETO = "O corpo da requisição deve ser um objeto JSON."

_MENSAGENS: dict[tuple[str, str], str] = {
    ("titulo", "missing"): "O campo 'titulo' é obrigatório.",
    ("titulo", "string_type"): "O campo 'titulo' deve ser um texto.",
    ("titulo", "string_too_short"): (
        f"O campo 'titulo' deve ter no mínimo {TITULO_MIN_LENGTH} caracteres."
    ),
    ("descricao", "missing"): "O campo 'descricao' é obrigatório.",
    ("descricao", "string_type"): "O campo 'descricao' deve ser um texto.",
    ("concluida", "missing"): "O campo 'concluida' é obrigatório.",
    ("concluida", "bool_type"): "O campo 'concluida' deve ser booleano.",
}


class TarefaPayload(BaseModel):
    """
    Contrato do corpo aceito em POST/PUT /tarefas.

    Campos desconhecidos são ignorados e não chegam ao domínio.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    titulo: str = Field(min_length=TITULO_MIN_LENGTH)
    descricao: str
    concluida: bool


def _mensagem_para(erro: dict[str, Any]) -> str:
    loc = erro.get("loc") or ()
    if not loc:
        return MENSAGEM_CORPO_NAO_OBJETO
    campo = str(loc[0])
    return _MENSAGENS.get((campo, erro["type"]), f"O campo '{campo}' é inválido.")


def validar_tarefa(dados: Any) -> TarefaPayload:
    """
    Valida o corpo bruto de uma requisição de tarefa.

    Args:
        dados: Corpo JSON já decodificado.

    Returns:
        TarefaPayload com os três campos reconhecidos.

    Raises:
        ErroValidacao: com a mensagem da primeira regra violada.
    """
    if not isinstance(dados, dict):
        raise ErroValidacao(MENSAGEM_CORPO_NAO_OBJETO)

    try:
        return TarefaPayload.model_validate(dados)
    except ValidationError as e:
        primeiro = e.errors()[0]
        raise ErroValidacao(_mensagem_para(primeiro)) from None
