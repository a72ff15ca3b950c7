"""Conector Canvas LMS - adapter de borda para a API REST do Canvas.

Responsabilidades:
- Registro de endpoints (ação simbólica → método, URI, parâmetros)
- Validação de parâmetros obrigatórios e montagem de URL
- Paginação por cabeçalho Link
- Refresh de token OAuth em 401 com lock no registro de autenticação
- Taxonomia de erros
"""

from .auth import (
    RefreshTokenOptions,
    TokenAuthentication,
    default_refresh_strategy,
    token_refresh_strategy,
)
from .client import CanvasClient
from .errors import (
    CanvasError,
    InvalidAPIMethod,
    InvalidAPIRequest,
    InvalidAPIRequestFailed,
    InvalidRefreshOptions,
    MissingRequiredParameter,
    RefreshTokenFailed,
    RefreshTokenRequired,
)
from .helpers import HelperAction
from .http_client import ApiResponse, CanvasHttpClient, CanvasHttpClientConfig
from .payload import RawPayload, StructuredPayload
from .registry import EndpointRegistry, EndpointSpec, HttpMethod, ParameterLocation, ParameterSpec
from .urls import CANVAS_URLS

__all__ = [
    "CANVAS_URLS",
    "ApiResponse",
    "CanvasClient",
    "CanvasError",
    "CanvasHttpClient",
    "CanvasHttpClientConfig",
    "EndpointRegistry",
    "EndpointSpec",
    "HelperAction",
    "HttpMethod",
    "InvalidAPIMethod",
    "InvalidAPIRequest",
    "InvalidAPIRequestFailed",
    "InvalidRefreshOptions",
    "MissingRequiredParameter",
    "ParameterLocation",
    "ParameterSpec",
    "RawPayload",
    "RefreshTokenFailed",
    "RefreshTokenOptions",
    "RefreshTokenRequired",
    "StructuredPayload",
    "TokenAuthentication",
    "default_refresh_strategy",
    "token_refresh_strategy",
]
