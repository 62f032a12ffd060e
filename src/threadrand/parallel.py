from typing import Callable, Iterable, TypeVar

from joblib import Parallel, cpu_count, delayed
from tqdm import tqdm

from . import thread_local
from .rng import Rng

T = TypeVar("T")


def _seeded_call(fn: Callable[[], T], seed: int) -> T:
    # joblib may run the task on the calling thread (n_jobs == 1), whose own
    # generator must come back untouched.
    saved = getattr(thread_local._local, "rng", None)
    thread_local._local.rng = Rng.with_seed(seed)
    try:
        return fn()
    finally:
        if saved is None:
            del thread_local._local.rng
        else:
            thread_local._local.rng = saved


def run_seeded(
    fn: Callable[[], T],
    seeds: Iterable[int],
    n_jobs: int = 4,
    progress: bool = False,
) -> list[T]:
    """Run `fn` once per seed, possibly on worker threads.

    Each task draws from a generator seeded with its own seed, so the draws
    `fn` makes through the thread-local functions depend only on that seed,
    not on which thread ran it or what ran there before. The generator the
    running thread had before the task is restored afterwards.

    Parameters:
        fn: Zero-argument callable drawing from the thread-local generator.
        seeds: One u64 seed per task.
        n_jobs: Worker thread count; values below 1 mean all cores but one.
        progress: Show a tqdm progress bar.

    Returns:
        The results of `fn`, in the order of `seeds`.
    """
    if n_jobs < 1:
        n_jobs = max(1, cpu_count() - 1)
    seeds = list(seeds)
    parallel = Parallel(n_jobs=n_jobs, prefer="threads")
    return parallel(
        delayed(_seeded_call)(fn, s)
        for s in tqdm(seeds, desc="Seeded tasks", disable=not progress)
    )
