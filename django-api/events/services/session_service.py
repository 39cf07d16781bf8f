"""Resolves the signed-in account into a session context with a role."""

from loguru import logger

from events.domain.errors import BackendError
from events.domain.session import Identity, SessionContext
from events.domain.value_objects import Role
from events.stores.interfaces import ProfileStore, StoreError


class SessionService:
    """Service that looks up the caller's profile to learn their role."""

    def __init__(self, profiles: ProfileStore) -> None:
        self._profiles = profiles

    def resolve(self, account_id: int | None) -> SessionContext:
        """Return the session context for an auth account, or anonymous for None.

        An account whose profile row has not been written yet is treated as a
        plain user without an identity, so it is not signed in for guards.
        """
        if account_id is None:
            return SessionContext.anonymous()
        try:
            profile = self._profiles.get_profile_for_account(account_id)
        except StoreError:
            logger.exception("Error resolving profile for account {}", account_id)
            raise BackendError("Failed to load your profile.") from None
        if profile is None:
            logger.warning("Account {} has no profile row", account_id)
            return SessionContext(identity=None, role=Role.USER)
        return SessionContext(
            identity=Identity(user_id=profile.id, email=profile.email),
            role=profile.role,
        )
