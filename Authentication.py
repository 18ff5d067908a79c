import hashlib
import hmac
import logging
import math
import secrets

from errors import AuthError, ConflictError, NotFoundError, ValidationError
from models import USERS, new_user, public_profile

logger = logging.getLogger(__name__)

HASH_ALGORITHM = "hmac-sha256"
SALT_BYTES = 16


def _hmac_sha256(password, salt):
    return hmac.new(salt.encode("utf-8"), password.encode("utf-8"), hashlib.sha256).hexdigest()


def derive_credential(password):
    """Return a (hash, salt) pair for password using a fresh random salt."""
    salt = secrets.token_hex(SALT_BYTES)
    return _hmac_sha256(password, salt), salt


def verify(password, password_hash, salt, algorithm=HASH_ALGORITHM):
    if algorithm != HASH_ALGORITHM:
        logger.warning(f"Unsupported password hash algorithm: {algorithm}")
        return False
    if not isinstance(password, str) or not password_hash or not salt:
        return False
    return hmac.compare_digest(_hmac_sha256(password, salt), password_hash)


def _find(users, username):
    return next((u for u in users if u.get("username") == username), None)


class UserService:
    def __init__(self, store):
        self.store = store

    def register(self, username, password, **profile):
        if not username or not password:
            raise ValidationError("Username and password are required.")
        with self.store.lock(USERS):
            users = self.store.load(USERS)
            if _find(users, username):
                raise ConflictError("Username already exists.")
            password_hash, salt = derive_credential(password)
            users.append(new_user(username, password_hash, salt, HASH_ALGORITHM, profile))
            self.store.save(USERS, users)
        logger.info(f"User registered: {username}")
        return {"message": "User registered successfully."}

    def authenticate(self, username, password):
        with self.store.lock(USERS):
            user = _find(self.store.load(USERS), username)
        # Records written before the algorithm tag existed are hmac-sha256
        if not user or not verify(
            password,
            user.get("passwordHash"),
            user.get("salt"),
            user.get("hashAlgorithm", HASH_ALGORITHM),
        ):
            raise AuthError("Invalid credentials.")
        logger.info(f"User logged in: {username}")
        return public_profile(user)

    def get_profile(self, username):
        with self.store.lock(USERS):
            user = _find(self.store.load(USERS), username)
        if not user:
            raise NotFoundError("User not found.")
        return public_profile(user)

    def add_points(self, username, delta):
        if not isinstance(delta, (int, float)) or isinstance(delta, bool) or not math.isfinite(delta):
            raise ValidationError('The "points" field must be a number.')
        with self.store.lock(USERS):
            users = self.store.load(USERS)
            user = _find(users, username)
            if not user:
                raise NotFoundError("User not found.")
            user["points"] = (user.get("points") or 0) + delta
            self.store.save(USERS, users)
        logger.info(f"Added {delta} points to {username}, total {user['points']}")
        return user["points"]
