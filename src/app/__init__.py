"""App — coração do gateway: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (cadastro e consulta de clientes)
- domain/: modelos de cliente (CPF em claro vs cifrado)
- infra/: implementações concretas (cifra, codec XML, stores)
- protocols/: contratos/interfaces
- observability/: correlation_id dos logs estruturados

Padrão: app executa; api adapta; utils apoia.
"""
