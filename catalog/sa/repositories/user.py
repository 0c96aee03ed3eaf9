# catalog/sa/repositories/user.py
import logging
import secrets
from datetime import datetime, timedelta, UTC
from typing import Any, Callable, List, Mapping, Optional
from sqlalchemy.orm import selectinload
from catalog.errors import NotFound, NotUnique
from catalog.sa.models import AccessToken, RefreshToken, User
from .base import BaseRepository, REQUIRED, record_values
from .options import UserAllOptions, UserFindOptions, filter_active, filter_name, loader_options, paginate

logger = logging.getLogger(__name__)

USER_FIELDS = {
    'username': REQUIRED,
    'password': REQUIRED,
    'name': REQUIRED,
    'active': True,
    'scope': '',
    'google_books_api_key': None,
}

DEFAULT_TOKEN_LIFETIME = timedelta(hours=1)

class UserRepository(BaseRepository):
    """Repository for managing User entities.

    Passwords are hashed by the injected ``password_hasher`` before they are
    stored. Without one, callers are expected to supply hashed values.
    """

    LOADERS = {
        'with_access_tokens': [selectinload(User.access_tokens)],
        'with_refresh_tokens': [selectinload(User.refresh_tokens)],
    }

    def __init__(self, session, password_hasher: Optional[Callable[[str], str]] = None):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
            password_hasher: Turns a plain password into its stored form
        """
        super().__init__(session)
        self.password_hasher = password_hasher

    def all(self, options: Optional[UserAllOptions] = None) -> List[User]:
        """Get users matching the options, ordered by username"""
        query = self.session.query(User)
        if options is not None:
            query = filter_active(query, User.active, options)
            query = filter_name(query, User.username, options.username)
            query = query.options(*loader_options(options, self.LOADERS))
        query = query.order_by(User.username, User.id)
        return self._fetch_all(paginate(query, options), "UserRepository.all")

    def find(self, user_id: int, options: Optional[UserFindOptions] = None) -> User:
        """Get a user by ID.
        
        Raises:
            NotFound: If no such user exists
        """
        query = (
            self.session.query(User)
            .options(*loader_options(options, self.LOADERS))
            .filter(User.id == user_id)
        )
        result = self._fetch_first(query, "UserRepository.find")
        if result is None:
            raise NotFound(f"id: Missing User {user_id}", "UserRepository.find", user_id)
        return result

    def exact(self, username: str, options: Optional[UserFindOptions] = None) -> User:
        """Get a user by username.
        
        Raises:
            NotFound: If no such user exists
        """
        query = (
            self.session.query(User)
            .options(*loader_options(options, self.LOADERS))
            .filter(User.username == username)
        )
        result = self._fetch_first(query, "UserRepository.exact")
        if result is None:
            raise NotFound(f"username: Missing User '{username}'", "UserRepository.exact", username)
        return result

    def insert(self, data: Mapping[str, Any]) -> User:
        """Create a new user.
        
        Raises:
            BadRequest: If a required field is missing
            NotUnique: If the username is already in use
        """
        values = record_values(data, USER_FIELDS, "UserRepository.insert")
        self._check_unique_username(None, values['username'], "UserRepository.insert")
        values['password'] = self._hash(values['password'])
        user = User(**values)
        self.session.add(user)
        self._commit("UserRepository.insert", self._not_unique_message(values['username']))
        self.session.refresh(user)
        logger.info("Inserted User %s '%s'", user.id, user.username)
        return user

    def update(self, user_id: int, data: Mapping[str, Any]) -> User:
        """Replace every mutable field of a user.

        An omitted or empty password keeps the current one.
        
        Raises:
            BadRequest: If a required field is missing
            NotFound: If no such user exists
            NotUnique: If the new username is already in use
        """
        user = self.find(user_id)
        data = dict(data)
        password = data.get('password')
        data['password'] = password or user.password
        values = record_values(data, USER_FIELDS, "UserRepository.update")
        self._check_unique_username(user_id, values['username'], "UserRepository.update")
        if password:
            values['password'] = self._hash(password)
        for field, value in values.items():
            setattr(user, field, value)
        self._commit("UserRepository.update", self._not_unique_message(values['username']), user_id)
        self.session.refresh(user)
        logger.info("Updated User %s '%s'", user.id, user.username)
        return user

    def remove(self, user_id: int) -> None:
        """Delete a user along with all of its tokens"""
        user = self.find(user_id)
        username = user.username
        self.session.delete(user)
        self._commit("UserRepository.remove", identifier=user_id)
        logger.info("Removed User %s '%s'", user_id, username)

    def deactivate(self, user_id: int) -> User:
        """Soft removal: mark the user inactive and revoke its tokens"""
        user = self.find(user_id)
        user.active = False
        self._delete_tokens(user_id)
        self._commit("UserRepository.deactivate", identifier=user_id)
        self.session.refresh(user)
        return user

    def unique_username(self, user_id: Optional[int], username: str) -> bool:
        """Return True if no other user has this username"""
        query = self.session.query(User).filter(User.username == username)
        if user_id is not None:
            query = query.filter(User.id != user_id)
        return self._fetch_first(query, "UserRepository.unique_username") is None

    # Tokens

    def add_access_token(self, user_id: int, lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
                         token: Optional[str] = None) -> AccessToken:
        """Store a new access token carrying the user's current scope"""
        user = self.find(user_id)
        access_token = AccessToken(
            token=token or secrets.token_urlsafe(32),
            expires=datetime.now(UTC) + lifetime,
            scope=user.scope,
            user_id=user_id,
        )
        self.session.add(access_token)
        self._commit("UserRepository.add_access_token", "token: Access token is already in use", user_id)
        self.session.refresh(access_token)
        logger.info("Issued access token for User %s expiring %s", user_id, access_token.expires)
        return access_token

    def by_access_token(self, token: str) -> Optional[User]:
        """Get the active user owning an unexpired access token, if any"""
        query = (
            self.session.query(AccessToken)
            .options(selectinload(AccessToken.user))
            .filter(AccessToken.token == token)
        )
        access_token = self._fetch_first(query, "UserRepository.by_access_token")
        if access_token is None or access_token.is_expired():
            return None
        user = access_token.user
        if user is None or not user.active:
            return None
        return user

    def revoke_tokens(self, user_id: int) -> int:
        """Hard remove every access and refresh token of a user"""
        self.find(user_id)
        count = self._delete_tokens(user_id)
        self._commit("UserRepository.revoke_tokens", identifier=user_id)
        logger.info("Revoked %s tokens for User %s", count, user_id)
        return count

    def purge_expired_tokens(self, now: Optional[datetime] = None) -> int:
        """Hard remove all expired access and refresh tokens"""
        now = now or datetime.now(UTC)
        count = self.session.query(AccessToken).filter(AccessToken.expires <= now).delete()
        count += self.session.query(RefreshToken).filter(RefreshToken.expires <= now).delete()
        self._commit("UserRepository.purge_expired_tokens")
        return count

    # Support

    def _delete_tokens(self, user_id: int) -> int:
        count = self.session.query(AccessToken).filter(AccessToken.user_id == user_id).delete()
        count += self.session.query(RefreshToken).filter(RefreshToken.user_id == user_id).delete()
        return count

    def _hash(self, password: str) -> str:
        return self.password_hasher(password) if self.password_hasher else password

    def _check_unique_username(self, user_id: Optional[int], username: str, context: str) -> None:
        if not self.unique_username(user_id, username):
            raise NotUnique(self._not_unique_message(username), context)

    def _not_unique_message(self, username: str) -> str:
        return f"username: Username '{username}' is already in use"
