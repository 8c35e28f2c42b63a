# app/core/deps.py
from fastapi import Request

from app.services.catalog import CatalogService


def get_catalog(request: Request) -> CatalogService:
    # one catalog per application instance, created by main.create_app
    return request.app.state.catalog
