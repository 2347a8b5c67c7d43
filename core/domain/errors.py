class ErroValidacao(Exception):
    """Payload de tarefa que não cumpre o contrato de criação/atualização."""

    def __init__(self, mensagem: str) -> None:
        super().__init__(mensagem)
        self.mensagem = mensagem
