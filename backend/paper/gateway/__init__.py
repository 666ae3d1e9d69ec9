"""
API Gateway Module

Centralized gateway layer: application construction, middleware,
router registration, API documentation and health endpoints.
"""
from .gateway import APIGateway

__all__ = ["APIGateway"]
