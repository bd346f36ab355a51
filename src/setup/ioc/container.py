"""
Dishka DI Container Setup.

- Registers all dependencies (repositories, handlers, services)
- Maps abstract interfaces to concrete implementations
- Manages lifecycle (Scope.APP = one per process, Scope.REQUEST = one per HTTP request)

Storage is chosen by Config.STORAGE_BACKEND:
- "prisma" → PrismaStorageProvider (src/setup/ioc/prisma_provider.py)
- "memory" → InMemoryStorageProvider (below)

Flow:
  Container → provides → PrismaCommentRepository → to → AddCommentHandler
                                    ↓
                            uses CommentRepository interface
"""

import logging

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from src.application.commands.auth import AuthenticateUserHandler, RegisterUserHandler
from src.application.commands.comments import AddCommentHandler
from src.application.commands.discussions import CreateDiscussionHandler
from src.application.queries.discussions import (
    GetDiscussionHandler,
    ListDiscussionsHandler,
)
from src.application.queries.health import GetStoreStatsHandler
from src.config.settings import Config
from src.domain.ports.password_hasher import PasswordHasher
from src.domain.ports.repositories import (
    CommentRepository,
    DiscussionRepository,
    UserRepository,
)
from src.infrastructure.persistence.memory_repositories import (
    InMemoryCommentRepository,
    InMemoryDiscussionRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from src.infrastructure.security import WerkzeugPasswordHasher

logger = logging.getLogger(__name__)


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers handlers and services. Repositories come from a storage provider.
    """

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    # ==================== SERVICES ====================
    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return WerkzeugPasswordHasher(method=self._config.PASSWORD_HASH_METHOD)

    # ==================== AUTH HANDLERS ====================
    @provide(scope=Scope.REQUEST)
    def get_register_user_handler(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> RegisterUserHandler:
        return RegisterUserHandler(user_repository, password_hasher)

    @provide(scope=Scope.REQUEST)
    def get_authenticate_user_handler(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> AuthenticateUserHandler:
        return AuthenticateUserHandler(user_repository, password_hasher)

    # ==================== DISCUSSION HANDLERS ====================
    @provide(scope=Scope.REQUEST)
    def get_create_discussion_handler(
        self,
        discussion_repository: DiscussionRepository,
        user_repository: UserRepository,
    ) -> CreateDiscussionHandler:
        """
        - Parameters ask for abstract repositories
        - Dishka resolves them with whichever storage provider is registered
        """
        return CreateDiscussionHandler(discussion_repository, user_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_discussions_handler(
        self,
        discussion_repository: DiscussionRepository,
        comment_repository: CommentRepository,
    ) -> ListDiscussionsHandler:
        return ListDiscussionsHandler(discussion_repository, comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_discussion_handler(
        self,
        discussion_repository: DiscussionRepository,
        comment_repository: CommentRepository,
    ) -> GetDiscussionHandler:
        return GetDiscussionHandler(discussion_repository, comment_repository)

    # ==================== COMMENT HANDLERS ====================
    @provide(scope=Scope.REQUEST)
    def get_add_comment_handler(
        self,
        discussion_repository: DiscussionRepository,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
    ) -> AddCommentHandler:
        return AddCommentHandler(
            discussion_repository=discussion_repository,
            comment_repository=comment_repository,
            user_repository=user_repository,
        )

    # ==================== HEALTH ====================
    @provide(scope=Scope.REQUEST)
    def get_store_stats_handler(
        self,
        user_repository: UserRepository,
        discussion_repository: DiscussionRepository,
        comment_repository: CommentRepository,
    ) -> GetStoreStatsHandler:
        return GetStoreStatsHandler(
            user_repository, discussion_repository, comment_repository
        )


class InMemoryStorageProvider(Provider):
    """Process-local storage. Data lives as long as the container."""

    def __init__(self, store: InMemoryStore | None = None):
        super().__init__()
        self._store = store

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        return self._store if self._store is not None else InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_discussion_repository(self, store: InMemoryStore) -> DiscussionRepository:
        return InMemoryDiscussionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        return InMemoryCommentRepository(store)


def create_storage_provider(config: type[Config] = Config) -> Provider:
    if config.STORAGE_BACKEND == "memory":
        logger.warning("Using in-memory storage; data is lost on restart")
        return InMemoryStorageProvider()
    if config.STORAGE_BACKEND == "prisma":
        # Imported lazily: the Prisma client only exists after `prisma generate`
        from src.setup.ioc.prisma_provider import PrismaStorageProvider

        return PrismaStorageProvider(config.DATABASE_URL)
    raise ValueError(f"Unknown STORAGE_BACKEND: {config.STORAGE_BACKEND!r}")


def create_container(
    config: type[Config] = Config, storage_provider: Provider | None = None
) -> AsyncContainer:
    """
    Create and configure the DI container.

    - Call this ONCE at app startup
    - Pass storage_provider to override the configured backend (tests)
    """
    return make_async_container(
        AppProvider(config),
        storage_provider or create_storage_provider(config),
    )
