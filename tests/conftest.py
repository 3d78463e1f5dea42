import os
import sys
from datetime import datetime, timedelta

import pytest

# Ensure the repo root (holding the top-level modules) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


class FakeScheduler:
    """Stands in for the Tk root's after/after_cancel."""

    def __init__(self):
        self.jobs = {}
        self._next_id = 0

    def after(self, ms, func):
        self._next_id += 1
        job_id = f'after#{self._next_id}'
        self.jobs[job_id] = (ms, func)
        return job_id

    def after_cancel(self, job_id):
        self.jobs.pop(job_id, None)

    def run_pending(self):
        pending = list(self.jobs.items())
        self.jobs.clear()
        for _, (_, func) in pending:
            func()


class FakeClock:
    def __init__(self, start=datetime(2024, 1, 1, 12, 0, 0)):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += timedelta(milliseconds=ms)


@pytest.fixture()
def scheduler():
    return FakeScheduler()


@pytest.fixture()
def clock():
    return FakeClock()
