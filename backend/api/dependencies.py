"""Shared dependencies for API routes."""

from services import catalog, recommendation_store
from services.gemini_client import get_client


def get_gemini_client():
    return get_client()


def get_storage_client():
    return recommendation_store.get_client()


def get_catalog():
    return catalog.load_catalog()
