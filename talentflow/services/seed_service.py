"""
Seeder for the demo dataset.

ensure_seeded() is the only entry point. The "seeded" meta flag starts absent
and is set once, in the same transaction as the generated rows; it is only
cleared by resetting the store. Content is random, shape is fixed.
"""

import logging
import random
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from talentflow.db.store import DurableStore
from talentflow.models.assessment import Assessment
from talentflow.models.assessment_response import AssessmentResponse
from talentflow.models.candidate import CANDIDATE_STAGES, Candidate
from talentflow.models.job import Job
from talentflow.models.meta import SEEDED_KEY
from talentflow.models.timeline_event import TimelineEvent
from talentflow.repositories.meta_repository import MetaRepository
from talentflow.utils.text import slugify
from talentflow.utils.time import MS_PER_DAY, now_ms

logger = logging.getLogger(__name__)

TAGS = ["remote", "hybrid", "onsite", "full-time", "contract", "urgent", "junior", "senior"]

SENIORITY = ["Junior", "Senior", "Lead", "Principal", "Staff", "Associate", "Chief"]
FIELDS = ["Product", "Data", "Security", "Marketing", "Infrastructure", "Mobile", "Brand", "Finance", "Operations"]
ROLES = ["Engineer", "Designer", "Analyst", "Manager", "Architect", "Consultant", "Strategist", "Specialist"]

FIRST_NAMES = [
    "Ava", "Liam", "Noah", "Mia", "Zara", "Omar", "Priya", "Lucas", "Elena", "Kenji",
    "Amara", "Diego", "Sofia", "Mateo", "Hana", "Ibrahim", "Chloe", "Arjun", "Freya", "Tomas",
]
LAST_NAMES = [
    "Nguyen", "Smith", "Patel", "Garcia", "Kowalski", "Okafor", "Rossi", "Tanaka", "Silva", "Müller",
    "Haddad", "Johansson", "Kim", "Dubois", "Novak", "Mensah", "Costa", "Ivanova", "Reyes", "Walsh",
]

QUESTION_VERBS = ["parse", "compress", "index", "deploy", "refactor", "debug", "cache", "validate", "migrate"]
QUESTION_NOUNS = ["pipeline", "protocol", "schema", "bandwidth", "interface", "queue", "array", "driver"]
OPTION_WORDS = ["Reliable", "Elegant", "Rustic", "Sleek", "Practical", "Modern", "Robust", "Handmade", "Refined"]

SEEDED_QUESTION_TYPES = ["single", "multi", "short", "long", "numeric"]

CANDIDATE_AGE_DAYS = 60
JOB_AGE_DAYS = 30
HOP_INTERVAL_MS = MS_PER_DAY // 2


@dataclass
class SeedCounts:
    jobs: int = 25
    candidates: int = 1000
    assessments: int = 3


def generate_jobs(rng: random.Random, count: int, now: int) -> List[Job]:
    jobs = []
    for i in range(count):
        title = f"{rng.choice(SENIORITY)} {rng.choice(FIELDS)} {rng.choice(ROLES)}"
        jobs.append(Job(
            id=i + 1,
            title=title,
            # Index suffix keeps generated slugs unique
            slug=f"{slugify(title)}-{i + 1}",
            status="active" if rng.random() < 0.75 else "archived",
            tags=rng.sample(TAGS, rng.randint(1, 3)),
            order=i,
            created_at=now - rng.randint(0, JOB_AGE_DAYS * MS_PER_DAY),
            updated_at=now,
        ))
    return jobs


def generate_stage_path(rng: random.Random) -> List[str]:
    """applied followed by 1-4 hops, each to a different stage than the last."""
    path = ["applied"]
    for _ in range(rng.randint(1, 4)):
        path.append(rng.choice([s for s in CANDIDATE_STAGES if s != path[-1]]))
    return path


def generate_candidates(
    rng: random.Random,
    count: int,
    jobs: List[Job],
    now: int,
) -> tuple[List[Candidate], List[TimelineEvent]]:
    candidates: List[Candidate] = []
    events: List[TimelineEvent] = []
    for i in range(count):
        first, last = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
        path = generate_stage_path(rng)
        # Last hop lands no later than now
        created_at = now - (len(path) - 1) * HOP_INTERVAL_MS - rng.randint(0, CANDIDATE_AGE_DAYS * MS_PER_DAY)
        candidate = Candidate(
            id=i + 1,
            job_id=rng.choice(jobs).id if jobs and rng.random() < 0.9 else None,
            name=f"{first} {last}",
            email=f"{slugify(first)}.{slugify(last)}{i + 1}@example.com",
            stage=path[-1],
            created_at=created_at,
            updated_at=now,
        )
        candidates.append(candidate)

        events.append(TimelineEvent(candidate_id=candidate.id, type="stage_change", from_stage=None, to_stage="applied", at=created_at))
        for hop, (previous, current) in enumerate(zip(path, path[1:]), start=1):
            events.append(TimelineEvent(
                candidate_id=candidate.id,
                type="stage_change",
                from_stage=previous,
                to_stage=current,
                at=created_at + hop * HOP_INTERVAL_MS,
            ))
    return candidates, events


def generate_question(rng: random.Random) -> Dict[str, Any]:
    qtype = rng.choice(SEEDED_QUESTION_TYPES)
    question: Dict[str, Any] = {
        "id": str(uuid.UUID(int=rng.getrandbits(128), version=4)),
        "type": qtype,
        "label": f"{rng.choice(QUESTION_VERBS)} {rng.choice(QUESTION_NOUNS)}?",
        "required": rng.random() < 0.6,
    }
    if qtype in ("single", "multi"):
        question["options"] = rng.sample(OPTION_WORDS, 4)
    elif qtype in ("short", "long"):
        question["maxLength"] = 120 if qtype == "short" else 600
    else:
        question["min"] = 0
        question["max"] = 10
    return question


def generate_assessment(rng: random.Random, job: Job, index: int, now: int) -> Assessment:
    sections = []
    for s in range(2 + index % 2):
        questions = [generate_question(rng) for _ in range(5)]
        trigger = questions[0]
        questions.append({
            "id": str(uuid.UUID(int=rng.getrandbits(128), version=4)),
            "type": "short",
            "label": "Why?",
            "required": True,
            "showIf": {"questionId": trigger["id"], "equals": (trigger.get("options") or ["Yes"])[0]},
        })
        sections.append({
            "id": str(uuid.UUID(int=rng.getrandbits(128), version=4)),
            "title": f"Section {s + 1}",
            "questions": questions,
        })
    return Assessment(id=job.id, job_id=job.id, title=f"{job.title} Assessment", sections=sections, updated_at=now)


class Seeder:
    """Idempotent, one-time population of the durable store."""

    def __init__(
        self,
        store: DurableStore,
        rng: Optional[random.Random] = None,
        counts: Optional[SeedCounts] = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.store = store
        self.rng = rng or random.Random()
        self.counts = counts or SeedCounts()
        self.clock = clock

    async def is_seeded(self) -> bool:
        async with self.store.session() as db:
            return bool(await MetaRepository(db).get(SEEDED_KEY))

    async def ensure_seeded(self) -> bool:
        """
        Populate the store unless the seeded flag is set.

        Returns True when this call performed the seed. Concurrent callers
        queue on the store write lock and re-check the flag, so only one seeds.
        """
        if await self.is_seeded():
            return False

        async with self.store.write_lock:
            async with self.store.session() as db:
                meta = MetaRepository(db)
                if await meta.get(SEEDED_KEY):
                    return False
                await self._seed(db)
                await meta.set(SEEDED_KEY, True)
        return True

    async def _seed(self, db: AsyncSession) -> None:
        counts = self.counts
        now = self.clock()
        logger.info(
            "Seeding store: %s jobs, %s candidates, %s assessments",
            counts.jobs, counts.candidates, counts.assessments,
        )

        # Start from scratch so a retry after an interrupted seed never duplicates rows
        for model in (AssessmentResponse, Assessment, TimelineEvent, Candidate, Job):
            await db.execute(delete(model))

        jobs = generate_jobs(self.rng, counts.jobs, now)
        db.add_all(jobs)
        await db.flush()

        candidates, events = generate_candidates(self.rng, counts.candidates, jobs, now)
        db.add_all(candidates)
        await db.flush()
        db.add_all(events)

        db.add_all([
            generate_assessment(self.rng, job, index, now)
            for index, job in enumerate(jobs[:counts.assessments])
        ])
        await db.flush()
        logger.info("Seeding complete: %s timeline events", len(events))

