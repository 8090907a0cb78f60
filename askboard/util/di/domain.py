"""Domain layer DI providers."""

from dishka import Scope, provide

from askboard.config import AuthSettings
from askboard.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UnitOfWork,
    UserRepository,
    VoteRepository,
)
from askboard.domain.service import (
    AcceptanceService,
    AnswerService,
    JWTService,
    PasswordService,
    QuestionService,
    TagService,
    UserService,
    VotableRegistry,
    VoteService,
)
from askboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing domain service."""
        return PasswordService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, password_service: PasswordService
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, password_service=password_service
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
        unit_of_work: UnitOfWork,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            vote_repository=vote_repository,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        vote_repository: VoteRepository,
        unit_of_work: UnitOfWork,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            vote_repository=vote_repository,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_acceptance_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        unit_of_work: UnitOfWork,
    ) -> AcceptanceService:
        """Provide answer acceptance domain service."""
        return AcceptanceService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_votable_registry(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> VotableRegistry:
        """Provide the registry of votable item kinds."""
        return VotableRegistry(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        votable_registry: VotableRegistry,
        unit_of_work: UnitOfWork,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            votable_registry=votable_registry,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)
