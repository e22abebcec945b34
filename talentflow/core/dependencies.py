"""
FastAPI dependencies for the application.
"""

from fastapi import Request

from talentflow.services.backend import MockBackend


def get_backend(request: Request) -> MockBackend:
    """The backend created by the application lifespan."""
    return request.app.state.backend
