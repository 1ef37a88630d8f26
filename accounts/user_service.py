"""
Account operations over an in-memory username -> user mapping.

Failures are reported as ``False`` or ``None`` only. Login in particular
does not tell an unknown username apart from a wrong password; the logs do.
"""

from typing import Dict, Optional

import structlog

from .models import User

logger = structlog.get_logger(__name__)


class UserService:
    """
    Owns the account mapping and the operations performed against it.

    The mapping is always keyed by each user's current username.
    """

    def __init__(self, users: Optional[Dict[str, User]] = None):
        """
        Initialize the account store.

        Args:
            users: Backing mapping. Anything with dict semantics (``in``,
                ``get``, ``pop``, item assignment) is accepted. A new empty
                dict is used when omitted.
        """
        self.users = users if users is not None else {}
        self.logger = logger.bind(component="user_service")

    def register_user(self, user: User) -> bool:
        """
        Register a user under their username.

        Returns:
            bool: True if registered, False if the username is taken
        """
        if user.username in self.users:
            self.logger.info("Registration rejected", username=user.username, reason="username_taken")
            return False

        self.users[user.username] = user
        self.logger.info("User registered", username=user.username)
        return True

    def login_user(self, username: str, password: str) -> Optional[User]:
        """
        Authenticate a user.

        Args:
            username: Login name
            password: Plain text password

        Returns:
            The matching user, or None if the username is unknown or the
            password does not match
        """
        user = self.users.get(username)

        if user is None:
            self.logger.info("Login failed", username=username, reason="unknown_user")
            return None

        if user.password != password:
            self.logger.warning("Login failed", username=username, reason="wrong_password")
            return None

        self.logger.info("User logged in", username=username)
        return user

    def update_user_profile(
        self,
        user: User,
        new_username: str,
        new_password: str,
        new_email: str
    ) -> bool:
        """
        Change a user's username, password and email.

        The entry under the old username is replaced by one under the new
        username in the same call. Keeping the current username always
        succeeds and still updates password and email.

        Returns:
            bool: True if updated, False if ``new_username`` belongs to
            another entry (the user is left untouched)
        """
        old_username = user.username

        if old_username != new_username and new_username in self.users:
            self.logger.info(
                "Profile update rejected",
                username=old_username,
                new_username=new_username,
                reason="username_taken"
            )
            return False

        self.users.pop(old_username, None)
        user.username = new_username
        user.password = new_password
        user.email = new_email
        self.users[new_username] = user

        self.logger.info("Profile updated", old_username=old_username, username=new_username)
        return True
