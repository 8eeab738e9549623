"""Django ORM building blocks shared by the concrete repositories.

``compare_and_swap`` is the only way rows are updated: it issues a single
``UPDATE ... WHERE id = %s AND version = %s`` that also bumps ``version``
and ``updated_at``.  Zero affected rows means somebody else wrote first.
"""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

import structlog
from django.db.models import F
from django.utils import timezone

from modules.core.models import BaseModel
from modules.core.repositories.interfaces import WriteResult

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def insert(entity: M) -> WriteResult[M]:
    """Persist a brand-new entity (``version`` stays at its initial value)."""
    entity.save(force_insert=True)
    return WriteResult(entity=entity, applied=True, expected_version=entity.version)


def compare_and_swap(
    entity: M,
    fields: Iterable[str],
    expected_version: Optional[int] = None,
) -> WriteResult[M]:
    """Write ``fields`` of ``entity`` only if the stored version is unchanged.

    ``expected_version`` defaults to ``entity.version`` (the version read by
    the caller).  On success the in-memory entity gets the new ``version``
    and ``updated_at``.
    """
    model = type(entity)
    expected = entity.version if expected_version is None else expected_version
    now = timezone.now()
    attnames = [model._meta.get_field(name).attname for name in fields]
    values = {attname: getattr(entity, attname) for attname in attnames}

    updated = model.objects.filter(pk=entity.pk, version=expected).update(
        **values,
        version=F("version") + 1,
        updated_at=now,
    )
    if not updated:
        logger.warning(
            "store.version_conflict",
            model=model._meta.label,
            entity_id=entity.pk,
            expected_version=expected,
        )
        return WriteResult(entity=entity, applied=False, expected_version=expected)

    entity.version = expected + 1
    entity.updated_at = now
    return WriteResult(entity=entity, applied=True, expected_version=expected)
