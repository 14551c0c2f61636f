import time

_DESCRIPTIONS = {
    "tests/test_ewma.py::test_ewma_initializes_to_first_value": "EWMA seeds with the first sample exactly (no smoothing on the seed).",
    "tests/test_ewma.py::test_ewma_updates_correctly": "EWMA recursion matches v_{t+1} = α x_t + (1-α) v_t.",
    "tests/test_ewma.py::test_update_stays_between_prev_and_sample": "Bounded step: every update lands in [min(v, x), max(v, x)].",
    "tests/test_ewma.py::test_alpha_one_passes_samples_through": "α = 1 disables smoothing: output equals the latest sample.",
    "tests/test_ewma.py::test_reset_behaves_like_fresh_estimator": "reset then update(x) matches a fresh estimator fed x.",
    "tests/test_batch.py::test_concrete_scenario": "α=0.3 over [2, 4, 4] gives [2, 2.6, 3.02].",
    "tests/test_batch.py::test_batch_matches_stepwise_updates": "calculate_array equals folding update over the inputs.",
    "tests/test_batch.py::test_empty_batch_rejected": "calculate_array([]) raises InvalidParameter.",
}

_START = {}

def _desc(nodeid: str) -> str:
    return _DESCRIPTIONS.get(nodeid, nodeid)

def pytest_runtest_setup(item):
    _START[item.nodeid] = time.perf_counter()
    print(f"TEST  {_desc(item.nodeid)}", flush=True)

def pytest_runtest_logreport(report):
    if report.when != "call":
        return
    dt = None
    if report.nodeid in _START:
        dt = time.perf_counter() - _START[report.nodeid]
    suffix = "" if dt is None else f"  ({dt:.3f}s)"
    if report.passed:
        print(f"PASS  {_desc(report.nodeid)}{suffix}", flush=True)
    elif report.failed:
        print(f"FAIL  {_desc(report.nodeid)}{suffix}", flush=True)
    elif report.skipped:
        print(f"SKIP  {_desc(report.nodeid)}{suffix}", flush=True)
