"""Session state: the signed-in user and their API token.

Two states only: Anonymous (no token) and Authenticated (token and user
both present). ``is_authenticated`` is derived from the token so the two
can never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any

from storefront.domain.exceptions import ValidationError

_API_KEYS = {
    "id": "_id",
    "name": "name",
    "email": "email",
    "role": "role",
    "phone": "phone",
    "avatar": "avatar",
    "created_at": "createdAt",
}


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: str = "user"
    phone: str | None = None
    avatar: str | None = None
    created_at: str | None = None
    extra: dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def merged(self, changes: dict[str, Any]) -> User:
        """Return a copy with ``changes`` applied.

        Keys may be attribute names or the API's camelCase names; keys
        that match neither land in ``extra``.
        """
        by_api_key = {api: attr for attr, api in _API_KEYS.items()}
        known: dict[str, Any] = {}
        extra = dict(self.extra)
        for key, value in changes.items():
            attr = key if key in _API_KEYS else by_api_key.get(key)
            if attr is None:
                extra[key] = value
            else:
                known[attr] = value
        return replace(self, extra=extra, **known)

    # --- Wire format ----------------------------------------------------------

    @staticmethod
    def from_api(raw: dict[str, Any]) -> User:
        try:
            user_id = raw.get("_id", raw.get("id"))
            if user_id is None:
                raise KeyError("_id")
            values = {
                attr: raw[api]
                for attr, api in _API_KEYS.items()
                if attr != "id" and api in raw
            }
        except (KeyError, AttributeError) as exc:
            raise ValidationError(f"Malformed user record: {exc}") from exc
        if "name" not in values or "email" not in values:
            raise ValidationError("Malformed user record: name and email are required")
        extra = {
            k: v for k, v in raw.items() if k not in _API_KEYS.values() and k != "id"
        }
        return User(id=str(user_id), extra=extra, **values)

    def to_api(self) -> dict[str, Any]:
        raw = dict(self.extra)
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                raw[_API_KEYS[f.name]] = value
        return raw


@dataclass(frozen=True)
class SessionState:
    user: User | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None


ANONYMOUS = SessionState()


# --- Reducers -----------------------------------------------------------------


def log_in(state: SessionState, user: User | None, token: str | None) -> SessionState:
    """Anonymous/Authenticated -> Authenticated.

    User and token are set together; if either is missing the state is
    left as it was.
    """
    if user is None or not token:
        return state
    return SessionState(user=user, token=token)


def log_out(state: SessionState) -> SessionState:
    return ANONYMOUS


def update_user(state: SessionState, changes: dict[str, Any]) -> SessionState:
    """Merge ``changes`` into the current user; no-op while anonymous."""
    if state.user is None:
        return state
    return SessionState(user=state.user.merged(changes), token=state.token)
