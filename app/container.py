"""Dependency Injection container - initialized at app startup."""

from app.repositories.election import (
    ContestantRepository,
    ElectionRepository,
    VoteLedgerRepository,
)
from app.services.election import (
    ElectionLifecycle,
    SystemClock,
    TagCounter,
    election_keys_for,
)
from settings import ELECTION_KEY_SCHEME, FIRST_TAG, MIN_CONTESTANTS_TO_START


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, clock=None, key_scheme: str | None = None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self._election_repo = ElectionRepository()
        self._contestant_repo = ContestantRepository()
        self._ledger_repo = VoteLedgerRepository()

        # Tags continue after the highest one already stored
        max_tag = self._contestant_repo.max_tag()
        self.tags = TagCounter(start=FIRST_TAG if max_tag is None else max_tag + 1)

        self.lifecycle = ElectionLifecycle(
            election_repo=self._election_repo,
            contestant_repo=self._contestant_repo,
            ledger_repo=self._ledger_repo,
            tags=self.tags,
            election_keys=election_keys_for(key_scheme or ELECTION_KEY_SCHEME),
            clock=clock or SystemClock(),
            min_contestants=MIN_CONTESTANTS_TO_START,
        )

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so the next init() rebuilds them."""
        self.__dict__.clear()
        self._initialized = False


# Global container instance
container = Container()
