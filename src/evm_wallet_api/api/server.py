# File: src/evm_wallet_api/api/server.py
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from .. import __version__
from ..chain.explorer import ExplorerClient
from ..chain.provider import ChainGateway
from ..exceptions import ProviderError, WalletApiError
from ..monitoring.metrics import MetricsCollector
from ..utils.config import Settings, load_settings
from ..utils.logger import get_logger
from ..wallet import AccountInspector, StatusTracker, TransactionService, WalletGenerator
from .routes import explorer_router, transactions_router, wallet_router

logger = get_logger(__name__)

def create_app(
    settings: Optional[Settings] = None,
    gateway: Optional[ChainGateway] = None,
    explorer: Optional[ExplorerClient] = None,
    generator: Optional[WalletGenerator] = None,
    metrics: Optional[MetricsCollector] = None,
) -> FastAPI:
    # Missing POLYGON_RPC stops the process here, before serving anything
    if settings is None:
        settings = load_settings()
    if gateway is None:
        gateway = ChainGateway.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await app.state.gateway.close()

    app = FastAPI(title="EVM Wallet API", version=__version__, lifespan=lifespan)

    app.state.settings = settings
    app.state.gateway = gateway
    app.state.generator = generator if generator is not None else WalletGenerator()
    app.state.inspector = AccountInspector(gateway, settings)
    app.state.transactions = TransactionService(gateway)
    app.state.status_tracker = StatusTracker(gateway)
    if explorer is None:
        explorer = ExplorerClient(
            settings.EXPLORER_API_URL,
            api_key=settings.EXPLORER_API_KEY,
            timeout=settings.EXPLORER_TIMEOUT,
        )
    app.state.explorer = explorer
    app.state.metrics = metrics if metrics is not None else MetricsCollector()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start
        route = request.scope.get("route")
        route_path = getattr(route, "path", "unmatched")
        app.state.metrics.observe_request(
            request.method, route_path, response.status_code, duration
        )
        logger.info(
            f"{request.method} {route_path} -> {response.status_code} "
            f"({duration * 1000:.1f} ms)"
        )
        return response

    @app.exception_handler(WalletApiError)
    async def wallet_error_handler(request: Request, exc: WalletApiError):
        if isinstance(exc, ProviderError):
            app.state.metrics.record_provider_error(exc.verb)
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return JSONResponse(
            status_code=400,
            content={"error": f"Invalid request: {details}", "kind": "ValidationError"},
        )

    @app.get("/", include_in_schema=False)
    async def health():
        return {"status": "ok", "network": settings.NETWORK_NAME, "version": __version__}

    @app.get("/metrics", include_in_schema=False)
    async def metrics_endpoint():
        collector = app.state.metrics
        return Response(content=collector.render(), media_type=collector.content_type)

    # Include routers
    app.include_router(wallet_router)
    app.include_router(transactions_router)
    app.include_router(explorer_router)

    return app
