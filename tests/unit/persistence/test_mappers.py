"""Unit tests for row/model mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from stackit.domain.value import UserRole, VoteType
from stackit.persistence.mappers import (
    question_to_dict,
    row_to_question,
    row_to_user,
    row_to_vote,
    user_to_dict,
    vote_to_dict,
)
from tests.conftest import make_question


class TestQuestionMapping:
    def test_tag_names_are_stored_as_strings(self):
        question = make_question(tags=["python", "c++"])

        row = question_to_dict(question)

        assert row["tag_names"] == ["python", "c++"]
        assert row_to_question(row) == question


class TestVoteMapping:
    def test_row_with_answer_target(self):
        answer_id = uuid4()
        row = {
            "id": str(uuid4()),
            "user_id": str(uuid4()),
            "question_id": None,
            "answer_id": str(answer_id),
            "vote_type": "DOWN",
            "created_at": datetime.now(timezone.utc),
        }

        vote = row_to_vote(row)

        assert vote.answer_id == answer_id
        assert vote.question_id is None
        assert vote.vote_type is VoteType.DOWN
        assert vote_to_dict(vote)["vote_type"] == "DOWN"


class TestUserMapping:
    def test_role_is_stored_as_enum_value(self):
        row = {
            "id": str(uuid4()),
            "handle": "moderator",
            "role": "ADMIN",
            "created_at": datetime.now(timezone.utc),
        }

        user = row_to_user(row)

        assert user.role is UserRole.ADMIN
        assert user.is_admin
        assert user_to_dict(user)["role"] == "ADMIN"
