"""Unit tests for Pydantic data models."""

from github_release.models.release import ReleaseRecord
from github_release.models.run import RunResult, RunState, StepTiming


class TestReleaseRecord:
    def test_defaults(self):
        r = ReleaseRecord()
        assert r.id is None
        assert r.upload_url == ""
        assert r.html_url == ""
        assert r.draft is False

    def test_payload_contains_request_fields(self):
        r = ReleaseRecord(
            tag_name="1.0.0",
            name="First",
            target_commitish="master",
            body="notes",
            draft=True,
            prerelease=True,
        )
        assert r.to_payload() == {
            "tag_name": "1.0.0",
            "name": "First",
            "target_commitish": "master",
            "body": "notes",
            "draft": True,
            "prerelease": True,
        }

    def test_payload_omits_zero_values(self):
        r = ReleaseRecord(tag_name="1.0.0")
        assert r.to_payload() == {"tag_name": "1.0.0"}

    def test_payload_never_sends_response_fields(self):
        r = ReleaseRecord(tag_name="1.0.0", id=7, html_url="http://x/7", upload_url="http://u/7")
        payload = r.to_payload()
        assert "id" not in payload
        assert "html_url" not in payload
        assert "upload_url" not in payload

    def test_apply_response_in_place(self):
        r = ReleaseRecord(tag_name="1.0.0", name="First", body="notes")
        same = r.apply_response({"id": 42, "html_url": "http://x/42"})
        assert same is r
        assert r.id == 42
        assert r.html_url == "http://x/42"
        assert r.tag_name == "1.0.0"
        assert r.body == "notes"

    def test_apply_response_overwrites_present_fields(self):
        r = ReleaseRecord(tag_name="1.0.0", draft=True)
        r.apply_response({
            "id": 1,
            "tag_name": "v1.0.0",
            "draft": False,
            "upload_url": "https://uploads.github.com/repos/o/r/releases/1/assets{?name,label}",
        })
        assert r.tag_name == "v1.0.0"
        assert r.draft is False
        assert r.upload_url.startswith("https://uploads.github.com/")

    def test_apply_response_ignores_nulls_and_unknown_keys(self):
        r = ReleaseRecord(body="notes")
        r.apply_response({"id": 3, "body": None, "author": {"login": "bot"}, "assets": []})
        assert r.id == 3
        assert r.body == "notes"
        assert not hasattr(r, "author")


class TestRunResult:
    def test_minimal(self):
        rr = RunResult(run_id="abc123", repository="o/r")
        assert rr.release_id is None
        assert rr.asset_uploaded is False
        assert rr.timings == []
        assert rr.warnings == []

    def test_states(self):
        assert RunState.RECEIVED == "RECEIVED"
        assert RunState.EXPORTED == "EXPORTED"
        assert RunState.FAILED == "FAILED"

    def test_step_timing_defaults(self):
        st = StepTiming(step="publish", duration_ms=10)
        assert st.status == "ok"
        assert st.detail == ""
