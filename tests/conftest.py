import datetime
import random

import pytest

from sudoku_maker.generator import SudokuGenerator


# Keep the report of each phase on the test item
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


# Print start and end of every test
@pytest.fixture(autouse=True)
def log_test_lifecycle(request):
    node_id = request.node.nodeid
    print(f"\n[START] {datetime.datetime.now():%H:%M:%S} - Running: {node_id}")

    yield

    report = getattr(request.node, "rep_call", None)
    status = report.outcome.upper() if report else "UNKNOWN"
    print(f"\n[END] {datetime.datetime.now():%H:%M:%S} - Result: {status} - {node_id}")


@pytest.fixture
def seeded_generator():
    return SudokuGenerator(rng=random.Random(1234))
