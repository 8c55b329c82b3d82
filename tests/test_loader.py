"""
Loader tests: concurrent fetch, partial failure, retry and status reporting.
"""

import asyncio
import json
from unittest.mock import MagicMock

import pytest
import requests

from moviedb.config import Config
from moviedb.engine import QueryEngine
from moviedb.exceptions import DataLoadError
from moviedb.loader import DataLoader, LoadReport, build_store
from moviedb.models import Movie, Person, Producer
from moviedb.sample_data import SAMPLE_DATA
from moviedb.store import CollectionStatus, RecordStore

from conftest import write_resources


def run(coro):
    return asyncio.run(coro)


class TestLoadAll:
    """Flow 1: All three resources load"""

    def test_loads_every_collection(self, files_config):
        store = RecordStore()
        report = run(DataLoader(store, files_config).load_all())

        assert report.succeeded
        assert report.statuses == {"movies": "loaded", "persons": "loaded", "producers": "loaded"}
        assert report.counts == {"movies": 2, "persons": 2, "producers": 2}
        assert report.errors == {}
        assert isinstance(store.get_collection("movies")[0], Movie)
        assert isinstance(store.get_collection("persons")[0], Person)
        assert isinstance(store.get_collection("producers")[0], Producer)

    def test_status_transitions_reported(self, files_config):
        seen = []
        loader = DataLoader(RecordStore(), files_config, on_status=lambda n, s: seen.append((n, s)))
        run(loader.load_all())

        for name in ("movies", "persons", "producers"):
            transitions = [s for n, s in seen if n == name]
            assert transitions == [CollectionStatus.loading, CollectionStatus.loaded]

    def test_fetches_run_concurrently(self, files_config):
        """Three fetches with a fixed delay take about one delay, not three."""
        files_config.load_delay_min = 0.2
        files_config.load_delay_max = 0.2

        report = run(DataLoader(RecordStore(), files_config).load_all())

        assert report.succeeded
        assert report.elapsed < 0.5

    def test_report_summary(self, files_config):
        report = run(DataLoader(RecordStore(), files_config).load_all())

        text = str(report)
        assert "movies: loaded (2 records)" in text
        assert report.to_dict()["statuses"]["persons"] == "loaded"

    def test_null_fields_do_not_break_search(self, files_config, tmp_path, config):
        """A record with null title or name still loads and search keeps working."""
        data = {name: list(records) for name, records in SAMPLE_DATA.items()}
        data["movies"].append({"id": 5, "title": None, "genres": [None, "Drama"]})
        data["persons"].append({"id": 6, "name": None})
        data["producers"].append({"id": 7, "name": None, "origin_country": None})
        sources = write_resources(tmp_path / "nulls", data)
        files_config.sources.update(sources)
        store = RecordStore()

        report = run(DataLoader(store, files_config).load_all())
        engine = QueryEngine.from_config(store, config)
        response = engine.search("ITV")

        assert report.counts == {"movies": 3, "persons": 3, "producers": 3}
        assert response["status"] == 200
        assert [p["id"] for p in response["results"]["producers"]] == [3448]
        assert store.find_by_id("movies", 5).title == "Unknown"
        assert store.find_by_id("persons", 6).name == "Unknown"
        assert [m["id"] for m in engine.list_records("movies", genre="drama")["data"]] == [1997, 5]


class TestPartialFailure:
    """Flow 2: One resource fails, the others still load"""

    def test_missing_file_marks_only_that_collection_failed(self, files_config, tmp_path):
        files_config.sources["persons"] = str(tmp_path / "missing.json")
        store = RecordStore()

        report = run(DataLoader(store, files_config).load_all())

        assert report.succeeded
        assert report.statuses["persons"] == "failed"
        assert report.failed_collections == ["persons"]
        assert "persons" in report.errors
        assert store.status("movies") == CollectionStatus.loaded
        assert store.status("producers") == CollectionStatus.loaded

    def test_non_array_payload_fails(self, files_config, tmp_path):
        bad = tmp_path / "producers.json"
        bad.write_text(json.dumps({"producers": []}), encoding="utf-8")
        files_config.sources["producers"] = str(bad)
        store = RecordStore()

        report = run(DataLoader(store, files_config).load_all())

        assert report.statuses["producers"] == "failed"
        assert report.errors["producers"] == "producers resource is not an array"

    def test_invalid_json_fails(self, files_config, tmp_path):
        bad = tmp_path / "movies.json"
        bad.write_text("[{not json", encoding="utf-8")
        files_config.sources["movies"] = str(bad)

        report = run(DataLoader(RecordStore(), files_config).load_all())

        assert report.statuses["movies"] == "failed"
        assert report.statuses["persons"] == "loaded"

    def test_all_failed_raises(self, config, tmp_path):
        for name in ("movies", "persons", "producers"):
            config.sources[name] = str(tmp_path / f"nope_{name}.json")
        store = RecordStore()

        with pytest.raises(DataLoadError) as exc_info:
            run(DataLoader(store, config).load_all())

        assert set(exc_info.value.errors) == {"movies", "persons", "producers"}
        assert store.statuses() == {"movies": "failed", "persons": "failed", "producers": "failed"}
        assert not store.is_ready


class TestRemoteSources:
    """Flow 3: Resources served over HTTP"""

    def _session(self, payloads):
        session = MagicMock(spec=requests.Session)

        def get(url, timeout=None):
            response = MagicMock()
            payload = payloads[url]
            if isinstance(payload, Exception):
                response.raise_for_status.side_effect = payload
            else:
                response.json.return_value = payload
            return response

        session.get.side_effect = get
        return session

    def test_http_sources(self, config):
        base = "https://example.com/data"
        for name in ("movies", "persons", "producers"):
            config.sources[name] = f"{base}/{name}.json"

        session = self._session({
            f"{base}/movies.json": SAMPLE_DATA["movies"],
            f"{base}/persons.json": SAMPLE_DATA["persons"],
            f"{base}/producers.json": requests.HTTPError("503 Server Error"),
        })
        store = RecordStore()

        report = run(DataLoader(store, config, session=session).load_all())

        assert report.statuses == {"movies": "loaded", "persons": "loaded", "producers": "failed"}
        assert report.errors["producers"] == "503 Server Error"
        assert session.get.call_count == 3
        session.get.assert_any_call(f"{base}/movies.json", timeout=config.request_timeout)


class TestRetry:
    """Flow 4: Manual retry re-runs all three fetches"""

    def test_retry_after_fixing_source(self, files_config, tmp_path):
        good_source = files_config.sources["producers"]
        files_config.sources["producers"] = str(tmp_path / "missing.json")
        store = RecordStore()
        loader = DataLoader(store, files_config)

        first = run(loader.load_all())
        assert first.statuses["producers"] == "failed"

        files_config.sources["producers"] = good_source
        second = run(loader.retry())

        assert second.statuses == {"movies": "loaded", "persons": "loaded", "producers": "loaded"}
        assert store.errors() == {}

    def test_retry_reports_pending_first(self, files_config):
        seen = []
        loader = DataLoader(RecordStore(), files_config, on_status=lambda n, s: seen.append((n, s)))
        run(loader.retry())

        assert seen[:3] == [
            ("movies", CollectionStatus.pending),
            ("persons", CollectionStatus.pending),
            ("producers", CollectionStatus.pending),
        ]


class TestBuildStore:
    """Static vs files data mode."""

    def test_static_mode_uses_sample_data(self, config):
        store = run(build_store(config))

        assert store.counts() == {"movies": 2, "persons": 2, "producers": 2}

    def test_files_mode_runs_loader(self, tmp_path):
        extra = dict(SAMPLE_DATA)
        extra["producers"] = SAMPLE_DATA["producers"][:1]
        sources = write_resources(tmp_path / "other", extra)
        config = Config(
            data_mode="files",
            sources=sources,
            load_delay_min=0.0,
            load_delay_max=0.0,
            log_dir=tmp_path / "logs",
        )

        store = run(build_store(config))

        assert store.counts()["producers"] == 1

    def test_load_report_defaults(self):
        assert not LoadReport().succeeded


class TestInProgress:
    """A loader reports whether a run is under way."""

    def test_flag_set_only_while_loading(self, files_config):
        files_config.load_delay_min = 0.1
        files_config.load_delay_max = 0.1
        loader = DataLoader(RecordStore(), files_config)
        seen = []

        async def scenario():
            task = asyncio.create_task(loader.load_all())
            await asyncio.sleep(0.02)
            seen.append(loader.in_progress)
            await task
            seen.append(loader.in_progress)

        assert not loader.in_progress
        run(scenario())
        assert seen == [True, False]

    def test_flag_cleared_after_total_failure(self, config, tmp_path):
        for name in ("movies", "persons", "producers"):
            config.sources[name] = str(tmp_path / f"nope_{name}.json")
        loader = DataLoader(RecordStore(), config)

        with pytest.raises(DataLoadError):
            run(loader.load_all())
        assert not loader.in_progress
