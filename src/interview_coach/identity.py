"""Stable per-installation user id."""
import random
import string
import time

from interview_coach.storage import KeyValueStore

USER_ID_KEY = "interview_user_id"
_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_install_id(rng: random.Random | None = None) -> str:
    rng = rng or random.Random()
    suffix = "".join(rng.choice(_ID_ALPHABET) for _ in range(9))
    return f"user_{int(time.time() * 1000)}_{suffix}"


def get_install_id(store: KeyValueStore, rng: random.Random | None = None) -> str:
    """Return the cached installation id, creating and storing one on first use."""
    user_id = store.get(USER_ID_KEY)
    if not user_id:
        user_id = new_install_id(rng)
        store.set(USER_ID_KEY, user_id)
    return user_id
