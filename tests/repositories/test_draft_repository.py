# -*- coding: utf-8 -*-
"""
Tests for DraftRepository.
"""

import json
from datetime import date

import pytest

from repositories.draft_repository import DraftRepository
from services.exceptions import DraftStorageError


@pytest.fixture
def repository(tmp_path):
    return DraftRepository(tmp_path / "drafts")


@pytest.fixture
def snapshot():
    return {
        "current_step_id": "services",
        "data": {"basic_info": {"vehicle_id": "veh-1", "date": date(2024, 3, 1), "mileage": "75,000"}},
        "completed_step_ids": ["basic_info"],
        "errors": {"basic_info": []},
        "validation_attempted": ["basic_info"],
    }


class TestDraftRepository:
    """JSON draft storage."""

    def test_save_and_load(self, repository, snapshot):
        path = repository.save("diy-service-veh-1", snapshot)

        assert path.exists()
        loaded = repository.load("diy-service-veh-1")
        assert loaded["current_step_id"] == "services"
        assert loaded["data"]["basic_info"]["date"] == "2024-03-01"
        assert loaded["completed_step_ids"] == ["basic_info"]

    def test_envelope(self, repository, snapshot):
        path = repository.save("diy-service-veh-1", snapshot)
        envelope = json.loads(path.read_text(encoding="utf-8"))

        assert envelope["persist_key"] == "diy-service-veh-1"
        assert "saved_at" in envelope
        assert envelope["state"]["current_step_id"] == "services"

    def test_overwrite(self, repository, snapshot):
        repository.save("key", snapshot)
        snapshot["current_step_id"] = "photos"
        repository.save("key", snapshot)

        assert repository.load("key")["current_step_id"] == "photos"
        assert list(repository.drafts_dir.glob("*.tmp")) == []

    def test_missing_draft(self, repository):
        assert repository.load("nothing") is None
        assert repository.exists("nothing") is False
        assert repository.delete("nothing") is False

    def test_delete(self, repository, snapshot):
        repository.save("key", snapshot)

        assert repository.exists("key") is True
        assert repository.delete("key") is True
        assert repository.exists("key") is False

    def test_unsafe_key_characters(self, repository, snapshot):
        path = repository.save("shop-service-../../etc", snapshot)

        assert path.parent == repository.drafts_dir
        assert repository.load("shop-service-../../etc")["current_step_id"] == "services"

    def test_empty_key(self, repository, snapshot):
        with pytest.raises(DraftStorageError):
            repository.save("", snapshot)

    def test_corrupt_file(self, repository):
        repository.drafts_dir.mkdir(parents=True)
        (repository.drafts_dir / "broken.draft.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(DraftStorageError) as excinfo:
            repository.load("broken")
        assert excinfo.value.persist_key == "broken"

    def test_file_without_state(self, repository):
        repository.drafts_dir.mkdir(parents=True)
        (repository.drafts_dir / "empty.draft.json").write_text('{"persist_key": "empty"}',
                                                                 encoding="utf-8")

        with pytest.raises(DraftStorageError):
            repository.load("empty")

    def test_list_keys(self, repository, snapshot):
        repository.save("shop-service-b", snapshot)
        repository.save("diy-service-a", snapshot)
        (repository.drafts_dir / "junk.draft.json").write_text("[]", encoding="utf-8")

        assert repository.list_keys() == ["diy-service-a", "shop-service-b"]

    def test_list_keys_no_directory(self, repository):
        assert repository.list_keys() == []

    def test_default_directory(self, isolated_drafts_dir):
        assert DraftRepository().drafts_dir == isolated_drafts_dir
