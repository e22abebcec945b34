"""
Mock backend.

The logical request surface consumed by callers (and by the HTTP routers).
Every operation makes sure the store is seeded, then goes through the request
simulator: reads are only delayed, mutations are delayed, validated and exposed
to failure injection before they touch the store.

Callers are expected to apply their change locally first and roll it back when
an operation raises (see talentflow.client.optimistic).
"""

import random
from typing import Any, Dict, List, Optional

from sqlalchemy import text

from talentflow.core.config import Settings
from talentflow.db.store import DurableStore
from talentflow.schemas.assessment import (
    AssessmentRead,
    AssessmentSubmission,
    AssessmentUpsert,
    ResponseValidationRequest,
    ResponseValidationResult,
)
from talentflow.schemas.base import OkResponse, Page
from talentflow.schemas.candidate import (
    CandidateCreate,
    CandidateQuery,
    CandidateRead,
    CandidateUpdate,
    NoteCreate,
    TimelineEventRead,
)
from talentflow.schemas.job import JobCreate, JobQuery, JobRead, JobReorder, JobUpdate
from talentflow.services.assessment_service import AssessmentService
from talentflow.services.candidate_service import CandidateService
from talentflow.services.job_service import JobService
from talentflow.services.reorder_service import ReorderTransaction
from talentflow.services.request_simulator import RequestSimulator, build_failure_policy
from talentflow.services.seed_service import SeedCounts, Seeder


class MockBackend:
    """Store + seeder + simulator behind one set of async operations."""

    def __init__(
        self,
        store: DurableStore,
        simulator: RequestSimulator,
        seeder: Seeder,
        mutation_failure_rate: float = 0.08,
        reorder_failure_rate: float = 0.10,
    ):
        self.store = store
        self.simulator = simulator
        self.seeder = seeder
        self.mutation_failure_rate = mutation_failure_rate
        self.reorder_failure_rate = reorder_failure_rate

    @classmethod
    def from_settings(cls, settings: Settings, store: Optional[DurableStore] = None) -> "MockBackend":
        store = store or DurableStore(settings.DATABASE_URL, echo=settings.DEBUG)
        rng = random.Random(settings.SEED_RANDOM_SEED)
        simulator = RequestSimulator(
            store,
            failure_policy=build_failure_policy(settings.FAILURE_POLICY),
            latency_min_ms=settings.LATENCY_MIN_MS,
            latency_max_ms=settings.LATENCY_MAX_MS,
        )
        seeder = Seeder(
            store,
            rng=rng,
            counts=SeedCounts(
                jobs=settings.SEED_JOB_COUNT,
                candidates=settings.SEED_CANDIDATE_COUNT,
                assessments=settings.SEED_ASSESSMENT_COUNT,
            ),
        )
        return cls(
            store,
            simulator,
            seeder,
            mutation_failure_rate=settings.MUTATION_FAILURE_RATE,
            reorder_failure_rate=settings.REORDER_FAILURE_RATE,
        )

    async def ensure_seeded(self) -> bool:
        await self.store.create_tables()
        return await self.seeder.ensure_seeded()

    async def reset(self) -> None:
        """Clear every table and the seed flag; the next request re-seeds."""
        await self.store.reset()

    # ------------------------------------------------------------------ jobs

    async def list_jobs(self, query: JobQuery) -> Page[JobRead]:
        await self.ensure_seeded()
        return await self.simulator.read("list_jobs", lambda db: JobService(db).list_jobs(query))

    async def get_job(self, job_id: int) -> JobRead:
        await self.ensure_seeded()
        return await self.simulator.read("get_job", lambda db: JobService(db).get_job(job_id))

    async def create_job(self, data: JobCreate) -> JobRead:
        await self.ensure_seeded()
        return await self.simulator.mutate(
            "create_job",
            validate=lambda db: JobService(db).validate_create(data),
            apply=lambda db, prepared: JobService(db).create_job(prepared),
            failure_rate=self.mutation_failure_rate,
        )

    async def patch_job(self, job_id: int, data: JobUpdate) -> JobRead:
        await self.ensure_seeded()
        return await self.simulator.mutate(
            "patch_job",
            validate=lambda db: JobService(db).validate_patch(job_id, data),
            apply=lambda db, prepared: JobService(db).apply_patch(prepared),
            failure_rate=self.mutation_failure_rate,
        )

    async def reorder_job(self, job_id: int, data: JobReorder) -> OkResponse:
        await self.ensure_seeded()

        async def apply(db, jobs) -> OkResponse:
            await ReorderTransaction(db).apply(jobs, job_id, data.to_order)
            return OkResponse()

        return await self.simulator.mutate(
            "reorder_job",
            validate=lambda db: ReorderTransaction(db).prepare(job_id, data.to_order, data.from_order),
            apply=apply,
            failure_rate=self.reorder_failure_rate,
        )

    # ------------------------------------------------------------ candidates

    async def list_candidates(self, query: CandidateQuery) -> Page[CandidateRead]:
        await self.ensure_seeded()
        return await self.simulator.read("list_candidates", lambda db: CandidateService(db).list_candidates(query))

    async def get_candidate(self, candidate_id: int) -> CandidateRead:
        await self.ensure_seeded()
        return await self.simulator.read("get_candidate", lambda db: CandidateService(db).get_candidate(candidate_id))

    async def create_candidate(self, data: CandidateCreate) -> CandidateRead:
        await self.ensure_seeded()

        async def validate(db) -> CandidateCreate:
            return data

        return await self.simulator.mutate(
            "create_candidate",
            validate=validate,
            apply=lambda db, prepared: CandidateService(db).create_candidate(prepared),
            failure_rate=self.mutation_failure_rate,
        )

    async def patch_candidate(self, candidate_id: int, data: CandidateUpdate) -> CandidateRead:
        await self.ensure_seeded()
        return await self.simulator.mutate(
            "patch_candidate",
            validate=lambda db: CandidateService(db).validate_patch(candidate_id, data),
            apply=lambda db, prepared: CandidateService(db).apply_patch(prepared),
            failure_rate=self.mutation_failure_rate,
        )

    async def get_timeline(self, candidate_id: int) -> List[TimelineEventRead]:
        await self.ensure_seeded()
        return await self.simulator.read("get_timeline", lambda db: CandidateService(db).get_timeline(candidate_id))

    async def add_note(self, candidate_id: int, data: NoteCreate) -> OkResponse:
        await self.ensure_seeded()

        async def apply(db, note: str) -> OkResponse:
            await CandidateService(db).add_note(candidate_id, note)
            return OkResponse()

        # Notes are never failure-injected
        return await self.simulator.mutate(
            "add_note",
            validate=lambda db: CandidateService(db).validate_note(candidate_id, data.note),
            apply=apply,
        )

    # ----------------------------------------------------------- assessments

    async def get_assessment(self, job_id: int) -> AssessmentRead:
        await self.ensure_seeded()
        return await self.simulator.read("get_assessment", lambda db: AssessmentService(db).get_assessment(job_id))

    async def put_assessment(self, job_id: int, data: AssessmentUpsert) -> OkResponse:
        await self.ensure_seeded()

        async def apply(db, prepared: AssessmentUpsert) -> OkResponse:
            await AssessmentService(db).save_assessment(job_id, prepared)
            return OkResponse()

        return await self.simulator.mutate(
            "put_assessment",
            validate=lambda db: AssessmentService(db).validate_upsert(job_id, data),
            apply=apply,
            failure_rate=self.mutation_failure_rate,
        )

    async def submit_response(self, job_id: int, data: AssessmentSubmission) -> OkResponse:
        await self.ensure_seeded()

        async def validate(db) -> AssessmentSubmission:
            return data

        async def apply(db, prepared: AssessmentSubmission) -> OkResponse:
            await AssessmentService(db).submit_response(job_id, prepared)
            return OkResponse()

        return await self.simulator.mutate("submit_response", validate=validate, apply=apply)

    async def validate_response(self, job_id: int, data: ResponseValidationRequest) -> ResponseValidationResult:
        await self.ensure_seeded()
        return await self.simulator.read(
            "validate_response",
            lambda db: AssessmentService(db).check_responses(job_id, data.responses),
        )

    # ---------------------------------------------------------------- health

    async def health(self) -> Dict[str, Any]:
        """Store connectivity and seed state; never delayed, never seeds."""
        db_ok = False
        seeded = False
        try:
            async with self.store.session() as db:
                await db.execute(text("SELECT 1"))
            db_ok = True
            seeded = await self.seeder.is_seeded()
        except Exception:
            db_ok = False
        return {"api_ok": True, "db_ok": db_ok, "seeded": seeded}
