"""Validators — validação de input recebido pela borda HTTP.

Estrutura:
- customer/: cadastro e consulta de clientes
"""

__all__: list[str] = []
