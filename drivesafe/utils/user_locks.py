import asyncio
import weakref


class UserLockRegistry:
    """
    One asyncio.Lock per user id.

    Locks are held weakly, so an entry disappears as soon as no coroutine is
    waiting on or holding it. Only coordinates tasks inside this process;
    across instances the database constraints decide.
    """

    def __init__(self):
        self._locks = weakref.WeakValueDictionary()

    def get(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[user_id] = lock
        return lock

    def __len__(self) -> int:
        return len(self._locks)


user_locks = UserLockRegistry()
