"""
Runtime rules for filling in an assessment.

A question with showIf is only visible while the referenced answer equals the
configured value; hidden questions are never validated.
"""

import math
from typing import Any, Dict, Iterator, List

from talentflow.schemas.assessment import AssessmentRead, AssessmentUpsert, Question


def iter_questions(assessment: AssessmentRead | AssessmentUpsert) -> Iterator[Question]:
    for section in assessment.sections:
        yield from section.questions


def _same_value(answer: Any, expected: Any) -> bool:
    # Strict equality: True must not match 1, "1" must not match 1
    return type(answer) is type(expected) and answer == expected


def is_visible(question: Question, answers: Dict[str, Any]) -> bool:
    if question.show_if is None:
        return True
    return _same_value(answers.get(question.show_if.question_id), question.show_if.equals)


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, (list, tuple)) and len(value) == 0)


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def validate_responses(assessment: AssessmentRead, answers: Dict[str, Any]) -> List[str]:
    """Return human-readable problems with a set of answers; empty means valid."""
    errors: List[str] = []
    for question in iter_questions(assessment):
        if not is_visible(question, answers):
            continue
        value = answers.get(question.id)
        if _is_empty(value):
            if question.required:
                errors.append(f"{question.label} is required")
            continue

        if question.type == "numeric":
            number = _as_number(value)
            if number is None:
                errors.append(f"{question.label} must be a number")
                continue
            if question.min is not None and number < question.min:
                errors.append(f"{question.label} must be >= {question.min:g}")
            if question.max is not None and number > question.max:
                errors.append(f"{question.label} must be <= {question.max:g}")
        elif question.type in ("short", "long"):
            if question.max_length and isinstance(value, str) and len(value) > question.max_length:
                errors.append(f"{question.label} exceeds max length")
        elif question.type == "single" and question.options and value not in question.options:
            errors.append(f"{question.label} must be one of the listed options")
        elif question.type == "multi" and question.options:
            picked = value if isinstance(value, list) else [value]
            if any(choice not in question.options for choice in picked):
                errors.append(f"{question.label} must only use the listed options")
    return errors


def structural_problems(assessment: AssessmentUpsert) -> List[str]:
    """Save-time checks: unique question ids and showIf targets inside the same assessment."""
    problems: List[str] = []
    seen: set[str] = set()
    for question in iter_questions(assessment):
        if question.id in seen:
            problems.append(f"Duplicate question id {question.id}")
        seen.add(question.id)

    for question in iter_questions(assessment):
        if question.show_if is None:
            continue
        target = question.show_if.question_id
        if target == question.id:
            problems.append(f"Question {question.id} cannot depend on itself")
        elif target not in seen:
            problems.append(f"Question {question.id} depends on unknown question {target}")
    return problems
