"""Assessment storage, submissions and the runtime fill-in rules."""

import pytest
from pydantic import ValidationError

from talentflow.errors import ClientError, InjectedFailure, NotFoundError
from talentflow.schemas.assessment import (
    AssessmentRead,
    AssessmentSubmission,
    AssessmentUpsert,
    ResponseValidationRequest,
    ShowIf,
)
from talentflow.services.assessment_rules import is_visible, structural_problems, validate_responses
from talentflow.services.assessment_service import AssessmentService
from talentflow.services.request_simulator import AlwaysFailPolicy, NeverFailPolicy
from tests.conftest import build_backend, run_scenario, store_url

# Seeded assessments cover jobs 1 and 2 only
UNASSESSED_JOB = 5


def make_assessment(**overrides) -> dict:
    body = {
        "title": "Backend screen",
        "sections": [
            {
                "id": "s1",
                "title": "Basics",
                "questions": [
                    {"id": "remote", "type": "single", "label": "Remote?", "required": True, "options": ["Yes", "No"]},
                    {
                        "id": "why",
                        "type": "short",
                        "label": "Why remote",
                        "required": True,
                        "maxLength": 10,
                        "showIf": {"questionId": "remote", "equals": "Yes"},
                    },
                    {"id": "years", "type": "numeric", "label": "Years", "min": 0, "max": 40},
                    {"id": "stack", "type": "multi", "label": "Stack", "options": ["py", "go", "js"]},
                ],
            }
        ],
    }
    body.update(overrides)
    return body


def upsert(**overrides) -> AssessmentUpsert:
    return AssessmentUpsert.model_validate(make_assessment(**overrides))


def read_model() -> AssessmentRead:
    return AssessmentRead.model_validate({"id": 1, "jobId": 1, "updatedAt": 0, **make_assessment()})


@pytest.mark.unit
def test_show_if_keeps_scalar_types():
    assert ShowIf.model_validate({"questionId": "q", "equals": True}).equals is True
    assert ShowIf.model_validate({"questionId": "q", "equals": 3}).equals == 3
    assert isinstance(ShowIf.model_validate({"questionId": "q", "equals": 3}).equals, int)
    assert ShowIf.model_validate({"questionId": "q", "equals": "3"}).equals == "3"
    with pytest.raises(ValidationError):
        ShowIf.model_validate({"questionId": "q", "equals": ["a"]})


@pytest.mark.unit
def test_visibility_uses_strict_equality():
    question = read_model().sections[0].questions[1]
    assert is_visible(question, {"remote": "Yes"})
    assert not is_visible(question, {"remote": "No"})
    assert not is_visible(question, {})

    flag = question.model_copy(update={"show_if": ShowIf(question_id="remote", equals=True)})
    assert is_visible(flag, {"remote": True})
    assert not is_visible(flag, {"remote": 1})


@pytest.mark.unit
def test_hidden_required_question_is_not_validated():
    assert validate_responses(read_model(), {"remote": "No"}) == []


@pytest.mark.unit
def test_visible_required_question_is_enforced():
    errors = validate_responses(read_model(), {"remote": "Yes"})
    assert errors == ["Why remote is required"]


@pytest.mark.unit
def test_value_rules():
    errors = validate_responses(
        read_model(),
        {"remote": "Maybe", "years": 41, "stack": ["py", "rust"]},
    )
    assert "Remote? must be one of the listed options" in errors
    assert "Years must be <= 40" in errors
    assert "Stack must only use the listed options" in errors

    assert validate_responses(read_model(), {"remote": "Yes", "why": "x" * 11}) == ["Why remote exceeds max length"]
    assert validate_responses(read_model(), {"remote": "No", "years": "many"}) == ["Years must be a number"]
    assert validate_responses(read_model(), {"remote": "No", "years": True}) == ["Years must be a number"]
    assert validate_responses(read_model(), {"remote": "No", "years": "-1"}) == ["Years must be >= 0"]


@pytest.mark.unit
def test_structural_problems():
    assert structural_problems(upsert()) == []

    body = make_assessment()
    body["sections"][0]["questions"][1]["showIf"]["questionId"] = "missing"
    assert structural_problems(AssessmentUpsert.model_validate(body)) == [
        "Question why depends on unknown question missing"
    ]

    body = make_assessment()
    body["sections"][0]["questions"][1]["showIf"]["questionId"] = "why"
    assert structural_problems(AssessmentUpsert.model_validate(body)) == ["Question why cannot depend on itself"]

    body = make_assessment()
    body["sections"][0]["questions"][2]["id"] = "remote"
    assert structural_problems(AssessmentUpsert.model_validate(body)) == ["Duplicate question id remote"]


@pytest.mark.db
def test_missing_assessment_then_put_then_get(backend):
    async def scenario(backend):
        with pytest.raises(NotFoundError) as excinfo:
            await backend.get_assessment(UNASSESSED_JOB)
        result = await backend.put_assessment(UNASSESSED_JOB, upsert())
        return excinfo.value, result, await backend.get_assessment(UNASSESSED_JOB)

    error, result, stored = run_scenario(backend, scenario)
    assert error.status_code == 404
    assert result.ok is True
    assert stored.id == UNASSESSED_JOB
    assert stored.job_id == UNASSESSED_JOB
    assert stored.sections == upsert().sections
    assert stored.sections[0].questions[1].show_if == ShowIf(question_id="remote", equals="Yes")


@pytest.mark.db
def test_put_replaces_whole_assessment(backend):
    async def scenario(backend):
        before = await backend.get_assessment(1)
        await backend.put_assessment(1, upsert(title="Replaced"))
        return before, await backend.get_assessment(1)

    before, after = run_scenario(backend, scenario)
    assert after.title == "Replaced"
    assert after.sections == upsert().sections
    assert after.updated_at >= before.updated_at


@pytest.mark.db
def test_dangling_show_if_is_rejected_before_write(backend):
    body = make_assessment()
    body["sections"][0]["questions"][1]["showIf"]["questionId"] = "nowhere"

    async def scenario(backend):
        with pytest.raises(ClientError) as excinfo:
            await backend.put_assessment(UNASSESSED_JOB, AssessmentUpsert.model_validate(body))
        with pytest.raises(NotFoundError):
            await backend.get_assessment(UNASSESSED_JOB)
        return excinfo.value

    error = run_scenario(backend, scenario)
    assert error.code == "invalid_assessment"
    assert error.details["problems"]


@pytest.mark.db
def test_injected_put_failure_keeps_previous_assessment(tmp_path):
    backend = build_backend(store_url(tmp_path))

    async def scenario(backend):
        before = await backend.get_assessment(1)
        backend.simulator.failure_policy = AlwaysFailPolicy()
        with pytest.raises(InjectedFailure):
            await backend.put_assessment(1, upsert(title="Never saved"))
        backend.simulator.failure_policy = NeverFailPolicy()
        return before, await backend.get_assessment(1)

    before, after = run_scenario(backend, scenario)
    assert after == before


@pytest.mark.db
def test_submissions_accumulate_and_are_never_injected(tmp_path):
    backend = build_backend(store_url(tmp_path), failure_policy=AlwaysFailPolicy())

    async def scenario(backend):
        await backend.submit_response(1, AssessmentSubmission(candidate_id=3, responses={"a": 1}))
        await backend.submit_response(1, AssessmentSubmission(candidate_id=3, responses={"a": 2}))
        async with backend.store.session() as db:
            return await AssessmentService(db).list_responses(1, candidate_id=3)

    responses = run_scenario(backend, scenario)
    assert [response.responses for response in responses] == [{"a": 1}, {"a": 2}]
    assert all(response.job_id == 1 and response.candidate_id == 3 for response in responses)


@pytest.mark.db
def test_seeded_assessment_has_working_conditional(backend):
    async def scenario(backend):
        assessment = await backend.get_assessment(1)
        conditional = next(q for s in assessment.sections for q in s.questions if q.show_if)
        trigger = conditional.show_if
        shown = await backend.validate_response(1, ResponseValidationRequest(responses={trigger.question_id: trigger.equals}))
        hidden = await backend.validate_response(1, ResponseValidationRequest(responses={}))
        return conditional, shown, hidden

    conditional, shown, hidden = run_scenario(backend, scenario)
    assert f"{conditional.label} is required" in shown.errors
    assert f"{conditional.label} is required" not in hidden.errors
