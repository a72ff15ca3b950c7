"""App: wiring, contratos e infraestrutura do cliente.

Subpastas:
- bootstrap/: composition root (factory do cliente, inicialização de logging)
- infra/: implementações concretas de IO (stores)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app monta; api fala HTTP; config carrega ambiente.
"""
