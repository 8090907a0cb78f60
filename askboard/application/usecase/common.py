"""Response items shared by question and answer use cases."""

from datetime import datetime

from pydantic import BaseModel

from askboard.domain.model import Answer, Question, User, Vote


class AuthorInfo(BaseModel):
    """Public author details embedded in questions and answers."""

    id: str
    username: str
    avatar_url: str | None = None
    reputation: int | None = None


class UserVoteInfo(BaseModel):
    """The requesting user's own vote on an item.

    Carries the vote ID so the client can revoke it.
    """

    id: str
    vote_type: int


class QuestionItem(BaseModel):
    """Question in responses."""

    id: str
    title: str
    content: str
    views: int
    votes: int
    author: AuthorInfo | None
    tags: list[str]
    has_accepted_answer: bool
    user_vote: UserVoteInfo | None = None
    created_at: datetime
    updated_at: datetime


class AnswerItem(BaseModel):
    """Answer in responses."""

    id: str
    content: str
    question_id: str
    votes: int
    is_accepted: bool
    author: AuthorInfo | None
    user_vote: UserVoteInfo | None = None
    created_at: datetime
    updated_at: datetime


def _user_vote_info(vote: Vote | None) -> UserVoteInfo | None:
    if vote is None:
        return None
    return UserVoteInfo(id=str(vote.id), vote_type=vote.vote_type.value)


def to_question_item(
    question: Question,
    author: User | None,
    has_accepted_answer: bool,
    user_vote: Vote | None = None,
) -> QuestionItem:
    """Build the response item for a question.

    Args:
        question: The question
        author: Its author, if still known
        has_accepted_answer: Whether one of its answers is accepted
        user_vote: The requesting user's vote on it, if any

    Returns:
        Question response item
    """
    return QuestionItem(
        id=str(question.id),
        title=question.title,
        content=question.content,
        views=question.views,
        votes=question.votes,
        author=(
            AuthorInfo(
                id=str(author.id),
                username=author.username.root,
                avatar_url=author.avatar_url,
            )
            if author
            else None
        ),
        tags=[tag.root for tag in question.tag_names],
        has_accepted_answer=has_accepted_answer,
        user_vote=_user_vote_info(user_vote),
        created_at=question.created_at,
        updated_at=question.updated_at,
    )


def to_answer_item(
    answer: Answer, author: User | None, user_vote: Vote | None = None
) -> AnswerItem:
    """Build the response item for an answer.

    Answer authors carry their reputation, question authors don't.
    """
    return AnswerItem(
        id=str(answer.id),
        content=answer.content,
        question_id=str(answer.question_id),
        votes=answer.votes,
        is_accepted=answer.is_accepted,
        author=(
            AuthorInfo(
                id=str(author.id),
                username=author.username.root,
                avatar_url=author.avatar_url,
                reputation=author.reputation,
            )
            if author
            else None
        ),
        user_vote=_user_vote_info(user_vote),
        created_at=answer.created_at,
        updated_at=answer.updated_at,
    )
