"""Unit tests for filtering, sorting and pagination."""

import pytest

from talentflow.errors import ClientError
from talentflow.schemas.candidate import CandidateQuery, CandidateRead
from talentflow.schemas.job import JobQuery, JobRead
from talentflow.services.query_engine import (
    filter_jobs,
    paginate,
    query_candidates,
    query_jobs,
    sort_jobs,
)

pytestmark = pytest.mark.unit


def make_job(job_id, title, order, status="active", tags=(), created_at=0):
    return JobRead(
        id=job_id,
        title=title,
        slug=f"{title.lower().replace(' ', '-')}-{job_id}",
        status=status,
        tags=list(tags),
        order=order,
        created_at=created_at,
        updated_at=created_at,
    )


JOBS = [
    make_job(1, "Senior Data Engineer", 2, tags=["remote", "senior"], created_at=100),
    make_job(2, "Product Designer", 0, status="archived", tags=["onsite"], created_at=300),
    make_job(3, "Lead Security Engineer", 1, tags=["hybrid"], created_at=200),
    make_job(4, "Junior Analyst", 3, tags=["junior", "remote"], created_at=400),
]


def test_paginate_reports_totals_and_slices():
    page = paginate(list(range(23)), page=3, page_size=10)
    assert page.data == [20, 21, 22]
    assert (page.total, page.pages, page.page, page.page_size) == (23, 3, 3, 10)


def test_paginate_empty_set_has_one_page():
    page = paginate([], page=1, page_size=10)
    assert page.data == []
    assert page.total == 0
    assert page.pages == 1


def test_paginate_out_of_range_page_is_empty_not_an_error():
    page = paginate(list(range(5)), page=9, page_size=2)
    assert page.data == []
    assert page.total == 5
    assert page.pages == 3


@pytest.mark.parametrize("page,page_size", [(0, 10), (1, 0), (-1, 5)])
def test_paginate_rejects_non_positive_arguments(page, page_size):
    with pytest.raises(ClientError):
        paginate([1, 2, 3], page=page, page_size=page_size)


def test_search_is_case_insensitive_over_title_and_slug():
    assert [j.id for j in filter_jobs(JOBS, search="ENGINEER")] == [1, 3]
    assert [j.id for j in filter_jobs(JOBS, search="analyst-4")] == [4]


def test_filters_are_and_composed():
    result = filter_jobs(JOBS, search="engineer", status="active", tags=["remote"])
    assert [j.id for j in result] == [1]


def test_tag_filter_keeps_jobs_sharing_any_tag():
    result = filter_jobs(JOBS, tags=["onsite", "junior"])
    assert sorted(j.id for j in result) == [2, 4]


def test_sort_by_order_and_created_desc():
    assert [j.id for j in sort_jobs(JOBS, "order")] == [2, 3, 1, 4]
    assert [j.id for j in sort_jobs(JOBS, "createdAt:desc")] == [4, 2, 3, 1]


def test_unknown_sort_is_a_client_error():
    with pytest.raises(ClientError) as excinfo:
        sort_jobs(JOBS, "title")
    assert excinfo.value.code == "invalid_sort"


def test_filter_happens_before_pagination():
    page = query_jobs(JOBS, JobQuery(status="active", page=1, page_size=2))
    assert page.total == 3
    assert page.pages == 2
    assert [j.id for j in page.data] == [3, 1]


def test_pages_reconstruct_filtered_set_exactly():
    jobs = [make_job(i, f"Role {i}", order=i, tags=["remote"] if i % 2 else []) for i in range(1, 24)]
    query = JobQuery(tags=["remote"], page_size=5)
    first = query_jobs(jobs, query)

    seen = []
    for number in range(1, first.pages + 1):
        seen.extend(j.id for j in query_jobs(jobs, query.model_copy(update={"page": number})).data)

    expected = [j.id for j in sort_jobs(filter_jobs(jobs, tags=["remote"]))]
    assert seen == expected
    assert len(seen) == len(set(seen)) == first.total


def test_same_query_twice_returns_identical_data():
    query = JobQuery(search="e", sort="createdAt:desc", page=1, page_size=3)
    assert query_jobs(JOBS, query).data == query_jobs(JOBS, query).data


def test_candidates_are_searched_by_name_or_email_and_sorted_newest_first():
    candidates = [
        CandidateRead(id=1, job_id=1, name="Ava Smith", email="ava@example.com", stage="applied", created_at=10, updated_at=10),
        CandidateRead(id=2, job_id=2, name="Liam Patel", email="smithy@example.com", stage="tech", created_at=30, updated_at=30),
        CandidateRead(id=3, job_id=None, name="Mia Rossi", email="mia@example.com", stage="tech", created_at=20, updated_at=20),
    ]
    page = query_candidates(candidates, CandidateQuery(search="SMITH"))
    assert [c.id for c in page.data] == [2, 1]

    page = query_candidates(candidates, CandidateQuery(stage="tech"))
    assert [c.id for c in page.data] == [2, 3]

    page = query_candidates(candidates, CandidateQuery(job_id=1))
    assert [c.id for c in page.data] == [1]
