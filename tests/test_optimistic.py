"""Caller-side optimistic updates: keep on success, roll back on failure."""

import asyncio

import pytest

from talentflow.client.optimistic import OptimisticJobPage, optimistic_update
from talentflow.errors import ClientError, InjectedFailure, NotFoundError
from talentflow.schemas.job import JobQuery
from talentflow.services.request_simulator import AlwaysFailPolicy, NeverFailPolicy
from tests.conftest import build_backend, run_scenario, store_url


@pytest.mark.unit
def test_optimistic_update_keeps_change_on_success():
    state = {"value": 1}

    async def request():
        return "saved"

    def apply():
        state["value"] = 2

    def revert():
        state["value"] = 1

    assert asyncio.run(optimistic_update(apply, revert, request)) == "saved"
    assert state == {"value": 2}


@pytest.mark.unit
def test_optimistic_update_rolls_back_and_reraises():
    state = {"value": 1}
    seen_during_request = []

    async def request():
        seen_during_request.append(state["value"])
        raise InjectedFailure("patch_job")

    def apply():
        state["value"] = 2

    def revert():
        state["value"] = 1

    with pytest.raises(InjectedFailure):
        asyncio.run(optimistic_update(apply, revert, request))
    assert seen_during_request == [2]
    assert state == {"value": 1}


@pytest.mark.unit
def test_non_app_errors_are_not_rolled_back():
    state = {"value": 1}

    async def request():
        raise RuntimeError("bug")

    with pytest.raises(RuntimeError):
        asyncio.run(optimistic_update(lambda: state.update(value=2), lambda: state.update(value=1), request))
    assert state == {"value": 2}


@pytest.mark.db
def test_toggle_archive_success_matches_backend(tmp_path):
    backend = build_backend(store_url(tmp_path))

    async def scenario(backend):
        local = OptimisticJobPage(backend, await backend.list_jobs(JobQuery(page_size=3)))
        job_id, status = local.jobs[0].id, local.jobs[0].status
        saved = await local.toggle_archive(job_id)
        return status, saved, local.jobs[0], await backend.get_job(job_id)

    status, saved, local_job, stored = run_scenario(backend, scenario)
    assert local_job.status != status
    assert local_job == saved
    assert local_job == stored


@pytest.mark.db
def test_actions_on_job_missing_from_page_are_not_found(tmp_path):
    backend = build_backend(store_url(tmp_path))

    async def scenario(backend):
        page = await backend.list_jobs(JobQuery(page_size=2))
        before = page.model_copy(deep=True)
        local = OptimisticJobPage(backend, page)
        with pytest.raises(NotFoundError):
            await local.toggle_archive(4242)
        with pytest.raises(NotFoundError):
            await local.move(4242, 0)
        return before, local.page

    before, after = run_scenario(backend, scenario)
    assert after == before


@pytest.mark.db
def test_toggle_archive_failure_restores_page(tmp_path):
    backend = build_backend(store_url(tmp_path), failure_policy=AlwaysFailPolicy())

    async def scenario(backend):
        page = await backend.list_jobs(JobQuery(page_size=3))
        original = page.model_copy(deep=True)
        local = OptimisticJobPage(backend, page)
        with pytest.raises(InjectedFailure):
            await local.toggle_archive(page.data[0].id)
        return original, local.page

    original, restored = run_scenario(backend, scenario)
    assert restored == original


@pytest.mark.db
def test_move_on_second_page_sends_absolute_positions(tmp_path):
    backend = build_backend(store_url(tmp_path))

    async def scenario(backend):
        local = OptimisticJobPage(backend, await backend.list_jobs(JobQuery(page=2, page_size=3)))
        moving = local.jobs[2]
        await local.move(moving.id, 0)
        stored = (await backend.list_jobs(JobQuery(page_size=100))).data
        return moving, local.jobs, stored

    moving, local_jobs, stored = run_scenario(backend, scenario)
    assert local_jobs[0].id == moving.id
    assert [job.order for job in local_jobs] == [3, 4, 5]
    assert stored[3].id == moving.id
    assert [(job.id, job.order) for job in stored[3:]] == [(job.id, job.order) for job in local_jobs]


@pytest.mark.db
def test_failed_move_restores_local_order(tmp_path):
    backend = build_backend(store_url(tmp_path))

    async def scenario(backend):
        page = await backend.list_jobs(JobQuery(page_size=4))
        before = [(job.id, job.order) for job in page.data]
        local = OptimisticJobPage(backend, page)
        backend.simulator.failure_policy = AlwaysFailPolicy()
        with pytest.raises(InjectedFailure):
            await local.move(page.data[0].id, 3)
        backend.simulator.failure_policy = NeverFailPolicy()
        stored = (await backend.list_jobs(JobQuery(page_size=4))).data
        return before, local.jobs, stored

    before, local_jobs, stored = run_scenario(backend, scenario)
    assert [(job.id, job.order) for job in local_jobs] == before
    assert [(job.id, job.order) for job in stored] == before


@pytest.mark.db
def test_rejected_patch_also_rolls_back(tmp_path):
    backend = build_backend(store_url(tmp_path))

    async def scenario(backend):
        local = OptimisticJobPage(backend, await backend.list_jobs(JobQuery(page_size=2)))
        status = local.jobs[0].status
        # Unknown on the backend, so the patch is rejected before the coin
        local.jobs[0].id = 4242
        with pytest.raises(ClientError):
            await local.toggle_archive(4242)
        return status, local.jobs[0].status

    status, after = run_scenario(backend, scenario)
    assert after == status
