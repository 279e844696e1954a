"""Tests for candidate sources and their factory."""

import json

import pytest

from skillrank.datasource import (
    BaseCandidateSource,
    CandidateSourceFactory,
    InMemoryCandidateSource,
    JsonFileCandidateSource,
)
from skillrank.datasource.providers.json_file import record_to_candidate
from skillrank.entities import Candidate
from skillrank.errors import CandidateSourceError, ConfigurationError


class TestInMemoryCandidateSource:
    def test_returns_candidates_in_order(self, tier_candidates):
        source = InMemoryCandidateSource(tier_candidates)
        assert [c.name for c in source.list_candidates()] == ["EARLY", "INT", "EXPERT"]

    def test_returns_a_copy(self, tier_candidates):
        source = InMemoryCandidateSource(tier_candidates)
        source.list_candidates().clear()
        assert len(source.list_candidates()) == 3

    def test_empty_by_default(self):
        assert InMemoryCandidateSource().list_candidates() == []


class TestRecordToCandidate:
    def test_maps_skill_fields_in_order(self):
        candidate = record_to_candidate({"id": 3, "name": "Skyvu", "devops": 17, "fe": 11, "be": 24})
        assert candidate == Candidate(id=3, name="Skyvu", scores=[17, 11, 24])

    def test_keys_are_case_insensitive(self):
        candidate = record_to_candidate({"Id": 1, "Name": "Acme", "DevOps": 1, "FE": 2, "Be": 3})
        assert candidate.name == "Acme"
        assert candidate.scores == [1.0, 2.0, 3.0]

    def test_missing_fields_default_to_zero(self):
        candidate = record_to_candidate({"name": "Partial", "fe": 4})
        assert candidate.scores == [0.0, 4.0, 0.0]
        assert candidate.id is None

    def test_float_id_is_truncated(self):
        assert record_to_candidate({"id": 2.0, "name": "x", "fe": 1}).id == 2

    def test_non_numeric_score(self):
        with pytest.raises(CandidateSourceError, match="Invalid candidate record"):
            record_to_candidate({"name": "Bad", "devops": "lots"})

    def test_non_object_record(self):
        with pytest.raises(CandidateSourceError, match="JSON object"):
            record_to_candidate(["Acme", 1, 2, 3])


class TestJsonFileCandidateSource:
    def test_reads_file(self, candidate_file):
        candidates = JsonFileCandidateSource(candidate_file).list_candidates()
        assert [c.name for c in candidates] == ["Brightdog", "Quatz", "Skyvu"]
        assert candidates[0].scores == [8.0, 13.0, 14.0]

    def test_rereads_on_every_call(self, candidate_file, company_records):
        source = JsonFileCandidateSource(candidate_file)
        assert len(source.list_candidates()) == 3

        candidate_file.write_text(json.dumps(company_records[:1]))
        assert len(source.list_candidates()) == 1

    def test_missing_file(self, tmp_path):
        source = JsonFileCandidateSource(tmp_path / "nope.json")
        with pytest.raises(CandidateSourceError) as exc_info:
            source.list_candidates()
        assert isinstance(exc_info.value.original_error, FileNotFoundError)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{not json")
        with pytest.raises(CandidateSourceError, match="Failed to read"):
            JsonFileCandidateSource(path).list_candidates()

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text('{"name": "Acme"}')
        with pytest.raises(CandidateSourceError, match="JSON array"):
            JsonFileCandidateSource(path).list_candidates()


class TestCandidateSourceFactory:
    def test_create_json_file(self, candidate_file):
        source = CandidateSourceFactory.create("json_file", path=candidate_file)
        assert isinstance(source, JsonFileCandidateSource)
        assert source.path == candidate_file

    def test_create_in_memory(self, tier_candidates):
        source = CandidateSourceFactory.create("in_memory", candidates=tier_candidates)
        assert isinstance(source, InMemoryCandidateSource)

    def test_unknown_type(self):
        with pytest.raises(ConfigurationError, match="Unknown candidate source type: postgres"):
            CandidateSourceFactory.create("postgres")

    def test_register(self, monkeypatch):
        monkeypatch.setattr(CandidateSourceFactory, "_registry", dict(CandidateSourceFactory._registry))

        class StaticSource(BaseCandidateSource):
            def list_candidates(self):
                return [Candidate(name="static", scores=[1, 1, 1])]

        CandidateSourceFactory.register("static", StaticSource)
        assert "static" in CandidateSourceFactory.list_types()
        assert CandidateSourceFactory.create("static").list_candidates()[0].name == "static"

    def test_register_rejects_non_source(self):
        with pytest.raises(TypeError):
            CandidateSourceFactory.register("bad", dict)


class TestJsonFileEncoding:
    def test_invalid_utf8_is_a_source_error(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"name": "\xff\xfe"}]')

        with pytest.raises(CandidateSourceError, match="Failed to read") as exc_info:
            JsonFileCandidateSource(path).list_candidates()
        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)

    def test_utf8_names_are_kept(self, tmp_path):
        path = tmp_path / "utf8.json"
        path.write_text('[{"name": "東京", "devops": 1, "fe": 2, "be": 3}]', encoding="utf-8")
        assert JsonFileCandidateSource(path).list_candidates()[0].name == "東京"
