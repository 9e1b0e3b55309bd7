"""Dependency injection for FastAPI endpoints"""

import random
from fastapi import Request
from meridian_cashflow.config import Settings, settings
from meridian_cashflow.domain.integration import DataIntegrationService
from meridian_cashflow.domain.sample_data import DEMO_MONTHS
from meridian_cashflow.infrastructure.clients.transactions import TransactionSourceClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def build_integration_service(config: Settings) -> DataIntegrationService:
    """Construct an analytics service from configuration"""
    rng = random.Random(config.history_seed) if config.history_seed is not None else None
    return DataIntegrationService(
        observation_window_months=config.observation_window_months,
        history_months=config.history_months,
        emergency_fund_target_months=config.emergency_fund_target_months,
        emergency_fund_current_months=config.emergency_fund_current_months,
        rng=rng,
    )


def get_integration_service() -> DataIntegrationService:
    """Provide a fresh analytics service per request"""
    return build_integration_service(settings)


def get_transaction_source_client() -> TransactionSourceClient:
    """Provide transaction source client instance"""
    return TransactionSourceClient()


def get_demo_integration_service() -> DataIntegrationService:
    """Analytics service whose observation window matches the demo data set"""
    return build_integration_service(settings.model_copy(update={"observation_window_months": DEMO_MONTHS}))
