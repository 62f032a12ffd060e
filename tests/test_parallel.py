import threadrand
from threadrand import Rng, run_seeded


def _draws():
    return [threadrand.u64() for _ in range(5)] + [threadrand.digit(10)]


def test_results_follow_seed_order_and_are_reproducible():
    seeds = [1, 2, 3, 1, 2]
    first = run_seeded(_draws, seeds, n_jobs=2)
    second = run_seeded(_draws, seeds, n_jobs=3)
    assert first == second
    assert first[0] == first[3]
    assert first[1] == first[4]
    assert first[0] != first[1]

    ref = Rng.with_seed(3)
    assert first[2] == [ref.u64() for _ in range(5)] + [ref.digit(10)]


def test_all_cores_and_progress_bar():
    results = run_seeded(threadrand.f64, range(10), n_jobs=-1, progress=True)
    assert len(results) == 10
    assert all(0.0 <= r < 1.0 for r in results)


def test_inline_run_leaves_caller_generator_alone():
    # n_jobs=1 runs tasks on the calling thread
    threadrand.seed(1000)
    ref = Rng.with_seed(1000)
    assert threadrand.u64() == ref.u64()
    results = run_seeded(threadrand.u64, [7, 7], n_jobs=1)
    assert results[0] == results[1] == Rng.with_seed(7).u64()
    assert threadrand.u64() == ref.u64()
    assert threadrand.get_seed() == 1000


def test_task_seeds_do_not_leak_into_worker_threads():
    results = run_seeded(threadrand.get_seed, [11, 12, 13], n_jobs=2)
    assert results == [11, 12, 13]
