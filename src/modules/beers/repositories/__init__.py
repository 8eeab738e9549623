"""Beer repositories package."""

from modules.beers.repositories.django_repository import BeerDjangoRepository
from modules.beers.repositories.interfaces import IBeerRepository

__all__ = ["BeerDjangoRepository", "IBeerRepository"]
