"""Shared repository contracts and ORM helpers."""

from modules.core.repositories.django_repository import compare_and_swap, insert
from modules.core.repositories.interfaces import IRepository, WriteResult

__all__ = ["IRepository", "WriteResult", "compare_and_swap", "insert"]
