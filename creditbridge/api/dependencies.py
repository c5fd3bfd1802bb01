"""Dependency injection for FastAPI endpoints"""

import random
from fastapi import Request
from creditbridge.config import Settings, settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_rng() -> random.Random:
    """Random source for synthetic history; overridden with a seeded instance in tests"""
    return random.Random()


def get_settings() -> Settings:
    return settings
