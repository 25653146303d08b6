"""Question domain service."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError

from stackit.domain.error import InvalidArgumentError, NotFoundError
from stackit.domain.model.question import Question
from stackit.domain.repository import QuestionRepository
from stackit.domain.value import QuestionId, TagName, UserId

from .base import Service

MAX_TAGS = 5


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def create_question(
        self,
        author_id: UserId,
        title: str,
        description: str,
        tags: Sequence[str],
    ) -> Question:
        """Create a question.

        Tag names are lowercased and de-duplicated, keeping their order.

        Args:
            author_id: Author user ID
            title: Question title
            description: Question body
            tags: Tag names (1-5 after de-duplication)

        Returns:
            Created question

        Raises:
            InvalidArgumentError: If title, description or tags are invalid
        """
        with logfire.span(
            "question_service.create_question",
            author_id=str(author_id),
            tag_count=len(tags),
        ):
            tag_names = self.normalize_tags(tags)

            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    author_id=author_id,
                    title=title.strip(),
                    description=description,
                    tag_names=tag_names,
                    views=0,
                    created_at=datetime.now(),
                )
            except ValidationError as e:
                field = ".".join(str(loc) for loc in e.errors()[0]["loc"])
                raise InvalidArgumentError(f"Invalid {field}: {e.errors()[0]['msg']}")

            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created",
                question_id=str(saved.id),
                author_id=str(author_id),
                tags=[str(t) for t in tag_names],
            )
            return saved

    @staticmethod
    def normalize_tags(tags: Sequence[str]) -> list[TagName]:
        """Lowercase, strip and de-duplicate tag names.

        Raises:
            InvalidArgumentError: If no tags remain, too many remain, or a
                tag name is malformed
        """
        names: list[str] = []
        for raw in tags:
            name = raw.strip().lower()
            if name and name not in names:
                names.append(name)

        if not names:
            raise InvalidArgumentError("At least one tag is required")
        if len(names) > MAX_TAGS:
            raise InvalidArgumentError(f"At most {MAX_TAGS} tags are allowed")

        try:
            return [TagName(name) for name in names]
        except ValidationError:
            raise InvalidArgumentError(f"Invalid tag name in {names}")

    async def get_question_by_id(self, question_id: QuestionId) -> Question | None:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn("Question not found", question_id=str(question_id))
            return question

    async def list_questions(
        self,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        """List questions, newest first.

        Returns:
            The requested page of questions and the total number matching
        """
        with logfire.span(
            "question_service.list_questions",
            tag=tag,
            search=search,
            limit=limit,
            offset=offset,
        ):
            questions = await self.question_repository.find_all(
                tag=tag, search=search, limit=limit, offset=offset
            )
            total = await self.question_repository.count(tag=tag, search=search)
            return questions, total

    async def record_view(self, question_id: QuestionId) -> int:
        """Increment a question's view counter.

        Returns:
            The new view count

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("question_service.record_view", question_id=str(question_id)):
            views = await self.question_repository.increment_views(question_id)
            if views is None:
                raise NotFoundError("Question", str(question_id))
            return views
