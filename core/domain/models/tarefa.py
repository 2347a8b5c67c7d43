from dataclasses import dataclass


@dataclass(slots=True)
class Tarefa:
    id: str
    titulo: str
    descricao: str
    concluida: bool = False
