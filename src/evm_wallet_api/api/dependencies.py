# File: src/evm_wallet_api/api/dependencies.py
from fastapi import Request

from ..chain.explorer import ExplorerClient
from ..monitoring.metrics import MetricsCollector
from ..utils.config import Settings
from ..wallet import AccountInspector, StatusTracker, TransactionService, WalletGenerator

# Components are built once by create_app and stored on app.state

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_generator(request: Request) -> WalletGenerator:
    return request.app.state.generator

def get_inspector(request: Request) -> AccountInspector:
    return request.app.state.inspector

def get_transaction_service(request: Request) -> TransactionService:
    return request.app.state.transactions

def get_status_tracker(request: Request) -> StatusTracker:
    return request.app.state.status_tracker

def get_explorer(request: Request) -> ExplorerClient:
    return request.app.state.explorer

def get_metrics(request: Request) -> MetricsCollector:
    return request.app.state.metrics
