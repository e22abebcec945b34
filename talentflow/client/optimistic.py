"""
Caller-side optimistic updates.

The backend answers after a delay and may fail any mutation, so callers apply
their change to local state immediately, keep it when the request succeeds and
restore the previous state when it raises.
"""

import copy
import logging
from typing import Awaitable, Callable, List, Optional, TypeVar

from talentflow.errors import AppError, NotFoundError
from talentflow.schemas.base import Page
from talentflow.schemas.job import JobRead, JobReorder, JobUpdate
from talentflow.services.backend import MockBackend
from talentflow.services.reorder_service import absolute_position, move_item

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def optimistic_update(
    apply: Callable[[], None],
    revert: Callable[[], None],
    request: Callable[[], Awaitable[T]],
) -> T:
    """
    Apply locally, await the request, roll back on AppError.

    The error is re-raised after the rollback so the caller can report it.
    """
    apply()
    try:
        return await request()
    except AppError as exc:
        logger.info("Rolling back optimistic change: %s", exc.message)
        revert()
        raise


class OptimisticJobPage:
    """
    A locally held page of jobs (sorted by order, unfiltered) that mirrors
    archive toggles and moves ahead of the backend's confirmation.
    """

    def __init__(self, backend: MockBackend, page: Page[JobRead]):
        self.backend = backend
        self.page = page

    @property
    def jobs(self) -> List[JobRead]:
        return self.page.data

    def _snapshot(self) -> Page[JobRead]:
        return copy.deepcopy(self.page)

    def _replace(self, job: JobRead) -> None:
        self.page.data = [job if current.id == job.id else current for current in self.jobs]

    def _restore(self, previous: Page[JobRead]) -> Callable[[], None]:
        def revert() -> None:
            self.page = previous
        return revert

    async def toggle_archive(self, job_id: int) -> JobRead:
        target = next((job for job in self.jobs if job.id == job_id), None)
        if target is None:
            raise NotFoundError("Job", job_id)
        previous = self._snapshot()
        new_status = "archived" if target.status == "active" else "active"

        def apply() -> None:
            target.status = new_status

        saved = await optimistic_update(
            apply,
            self._restore(previous),
            lambda: self.backend.patch_job(job_id, JobUpdate(status=new_status)),
        )
        # Reconcile with the stored snapshot (updatedAt is set server-side)
        self._replace(saved)
        return saved

    async def move(self, job_id: int, to_visible_index: int, from_visible_index: Optional[int] = None):
        """Move within this page; the request carries absolute positions."""
        ids = [job.id for job in self.jobs]
        if job_id not in ids:
            raise NotFoundError("Job", job_id)
        previous = self._snapshot()
        if from_visible_index is None:
            from_visible_index = ids.index(job_id)
        first_order = self.jobs[0].order if self.jobs else 0

        def apply() -> None:
            by_id = {job.id: job for job in self.jobs}
            reordered = [by_id[i] for i in move_item(ids, job_id, to_visible_index)]
            for offset, job in enumerate(reordered):
                job.order = first_order + offset
            self.page.data = reordered

        body = JobReorder(
            from_order=absolute_position(self.page.page, self.page.page_size, from_visible_index),
            to_order=absolute_position(self.page.page, self.page.page_size, to_visible_index),
        )
        return await optimistic_update(
            apply,
            self._restore(previous),
            lambda: self.backend.reorder_job(job_id, body),
        )
