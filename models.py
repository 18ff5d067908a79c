from datetime import datetime, timezone

USERS = "users"
PROGRESS = "progress"
COMMUNITY = "community"

RECORD_KINDS = (USERS, PROGRESS, COMMUNITY)

PROFILE_FIELDS = (
    "name",
    "agency",
    "age",
    "gender",
    "height",
    "weight",
    "exercise",
    "fruitsVeg",
    "water",
    "tobacco",
)

CREDENTIAL_FIELDS = ("passwordHash", "salt", "hashAlgorithm")


def utc_timestamp():
    # Same shape as JavaScript toISOString(): millisecond precision, Z suffix
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_user(username, password_hash, salt, algorithm, profile=None):
    profile = profile or {}
    user = {
        "username": username,
        "passwordHash": password_hash,
        "salt": salt,
        "hashAlgorithm": algorithm,
    }
    for field in PROFILE_FIELDS:
        user[field] = profile.get(field) or ""
    user["points"] = 0
    return user


def public_profile(user):
    """Copy of a user record without its credential fields."""
    return {k: v for k, v in user.items() if k not in CREDENTIAL_FIELDS}


def new_progress_entry(username, steps=None, minutes=None):
    return {
        "username": username,
        "steps": steps or None,
        "minutes": minutes or None,
        "timestamp": utc_timestamp(),
    }


def new_post(username, description, title=None, image=None, duration=None, activity_type=None):
    return {
        "username": username,
        "title": title or "",
        "description": description,
        "image": image or "",
        "duration": duration or "",
        "activityType": activity_type or "",
        "timestamp": utc_timestamp(),
    }
