"""Tests for the hit counter and the file server middleware."""

import threading

from chirpy.metrics import HitCounter


class TestHitCounter:
    def test_starts_at_zero(self) -> None:
        assert HitCounter().load() == 0

    def test_add_returns_new_value(self) -> None:
        counter = HitCounter()
        assert counter.add() == 1
        assert counter.add(2) == 3
        assert counter.load() == 3

    def test_store_resets(self) -> None:
        counter = HitCounter(initial=5)
        counter.store()
        assert counter.load() == 0
        counter.store(7)
        assert counter.load() == 7

    def test_concurrent_increments_are_not_lost(self) -> None:
        counter = HitCounter()

        def worker() -> None:
            for _ in range(1000):
                counter.add()

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert counter.load() == 8000


class TestFileServer:
    def test_serves_index(self, client) -> None:
        response = client.get("/app/")
        assert response.status_code == 200
        assert "Welcome to Chirpy" in response.text

    def test_serves_asset(self, client) -> None:
        response = client.get("/app/assets/logo.txt")
        assert response.status_code == 200
        assert response.text == "chirpy logo\n"

    def test_each_request_counts_once(self, app, client) -> None:
        client.get("/app/")
        client.get("/app/assets/logo.txt")
        client.get("/app/missing.txt")
        assert app.state.fileserver_hits.load() == 3

    def test_other_routes_are_not_counted(self, app, client) -> None:
        client.get("/api/healthz")
        client.get("/admin/metrics")
        assert app.state.fileserver_hits.load() == 0

    def test_missing_file_is_404(self, client) -> None:
        response = client.get("/app/missing.txt")
        assert response.status_code == 404

    def test_wrong_method_is_405(self, app, client) -> None:
        response = client.post("/app/")
        assert response.status_code == 405
        assert app.state.fileserver_hits.load() == 1
