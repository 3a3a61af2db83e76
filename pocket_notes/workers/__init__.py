from .persist import PersistWorker, ThreadPoolSubmitter

__all__ = [
    "PersistWorker",
    "ThreadPoolSubmitter",
]
