"""API: camada de borda com serviços externos.

Subpastas:
- connectors/: clientes HTTP por serviço (Canvas LMS)

NÃO PODE conter: wiring de settings, stores concretos, inicialização.
"""
