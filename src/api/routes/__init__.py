"""Rotas HTTP do servidor de webhook embutido.

Os endpoints de cada canal vivem no router do próprio adapter
(app/adapters); aqui ficam health check e agregação.
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
