import random
import re

from interview_coach.identity import get_install_id, new_install_id, USER_ID_KEY
from interview_coach.storage import MemoryStore


def test_new_install_id_format():
    user_id = new_install_id(random.Random(3))
    assert re.fullmatch(r"user_\d+_[0-9a-z]{9}", user_id)


def test_get_install_id_creates_and_caches():
    store = MemoryStore()
    first = get_install_id(store)
    assert store.get(USER_ID_KEY) == first
    assert get_install_id(store) == first


def test_get_install_id_uses_existing():
    store = MemoryStore({USER_ID_KEY: "user_fixed"})
    assert get_install_id(store) == "user_fixed"


def test_install_id_survives_restart(store, tmp_db):
    from interview_coach.storage import SqliteStore
    first = get_install_id(store)
    assert get_install_id(SqliteStore(tmp_db)) == first
