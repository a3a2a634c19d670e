"""API — camada de borda do gateway.

Responsabilidades:
- Receber requests JSON e autenticar o chamador
- Traduzir modelos internos para envelopes XML do legado e vice-versa
- Falar HTTP com o sistema legado

Subpastas:
- connectors/: cliente HTTP do sistema legado
- normalizers/: XML do legado → modelos internos
- payload_builders/: modelos internos → XML do legado
- validators/: validação de input do chamador
- middleware/: autenticação e contexto de requisição
- routes/: endpoints HTTP

NÃO PODE conter: orquestração de use cases nem cifra do CPF.
"""
