"""Connectors: adapters de borda para APIs externas.

Estrutura:
- canvas/: Canvas LMS REST API (registry de endpoints, paginação, refresh OAuth)
"""

__all__: list[str] = []
