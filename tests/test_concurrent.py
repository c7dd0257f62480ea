"""Concurrent use of a shared relator."""

from concurrent.futures import ThreadPoolExecutor, as_completed

import pytest
from fastapi.testclient import TestClient

from api.main import app
from planar.intersection import IntersectionConfig, IntersectionPointsPolicy, SegmentRelator
from planar.robust import ExactRationalPolicy

PAIRS = [
    (((0, 0), (10, 10)), ((0, 10), (10, 0))),
    (((0, 0), (10, 0)), ((5, 0), (15, 0))),
    (((0, 0), (1, 0)), ((2, 0), (3, 0))),
    (((5, 0), (5, 0)), ((0, 0), (10, 0))),
    (((0.5, 0.25), (7.75, 3.5)), ((1.0, 6.0), (6.5, -2.0))),
]


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestConcurrentRelate:
    """A single relator can be shared between threads."""

    def test_results_match_serial(self):
        relator = SegmentRelator(
            policy=IntersectionPointsPolicy(),
            robust_policy=ExactRationalPolicy(),
            config=IntersectionConfig(),
        )
        expected = [relator.relate(a, b).points for a, b in PAIRS]

        def work(i):
            a, b = PAIRS[i % len(PAIRS)]
            return i % len(PAIRS), relator.relate(a, b).points

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = [executor.submit(work, i) for i in range(100)]
            results = [f.result() for f in as_completed(futures)]

        assert all(points == expected[index] for index, points in results)

    def test_concurrent_requests(self, client):
        def post(i):
            return client.post(
                "/api/segments/intersects",
                json={
                    "a": {"start": [0, 0], "end": [10, 10]},
                    "b": {"start": [0, 10], "end": [10, 0]},
                },
            )

        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = [executor.submit(post, i) for i in range(10)]
            results = [f.result() for f in as_completed(futures)]

        assert all(r.status_code == 200 for r in results)
        assert all(r.json()["intersects"] is True for r in results)
