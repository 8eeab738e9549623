"""Base abstract model shared by every persisted record.

Provides ``BaseModel``: integer auto-increment primary key, an optimistic
``version`` counter and ``created_at`` / ``updated_at`` timestamps.

Design decisions:
- ``version`` starts at 0 and is bumped by the store on every successful
  update (see ``modules.core.repositories.django_repository.compare_and_swap``).
  Plain ``save()`` on an existing row does **not** check or bump it; updates
  must go through the repositories.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

from django.db import models


class BaseModel(models.Model):
    """Abstract base with auto-increment PK, version and timestamp bookkeeping."""

    id = models.BigAutoField(primary_key=True)
    version = models.PositiveIntegerField(default=0, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
