from .storage import Storage, StorageError, RedisStorage
from .kubernetes import PodLauncher, PodCreationError, KubernetesPodLauncher

__all__ = [
    "Storage",
    "StorageError",
    "RedisStorage",
    "PodLauncher",
    "PodCreationError",
    "KubernetesPodLauncher",
]
