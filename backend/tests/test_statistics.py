"""
Tests for the /statistics endpoints (per-skill usage counters).
"""

from types import SimpleNamespace

from bson import ObjectId
from pymongo import UpdateOne


class TestAddSkills:
    """Test POST /statistics."""

    def test_new_skills_are_upserted(self, client, skills):
        skill_ids = [skill["_id"] for skill in skills]

        response = client.post("/statistics", json={"skills": skill_ids})

        assert response.status_code == 200
        assert response.json() == {"skills": skill_ids, "matched": 0, "upserted": 2}

    def test_existing_counters_are_incremented(self, client, skills):
        skill_id = skills[0]["_id"]
        client.post("/statistics", json={"skills": [skill_id]})

        response = client.post("/statistics", json={"skills": [skill_id]})

        assert response.json()["matched"] == 1
        statistic = client.get(f"/statistics/{skill_id}").json()["statistic"]
        assert statistic["skill"] == skill_id
        assert statistic["count"] == 2

    def test_duplicate_ids_are_counted_once(self, client, skills):
        skill_id = skills[0]["_id"]

        response = client.post("/statistics", json={"skills": [skill_id, skill_id]})

        assert response.json() == {"skills": [skill_id, skill_id], "matched": 0, "upserted": 1}
        assert client.get(f"/statistics/{skill_id}").json()["statistic"]["count"] == 1

    def test_increments_are_sent_in_one_bulk_write(self, client, stub_collection):
        first, second = str(ObjectId()), str(ObjectId())
        stub = stub_collection("statistics", bulk_write=SimpleNamespace(matched_count=1, upserted_count=1))

        response = client.post("/statistics", json={"skills": [first, second, first]})

        assert response.json() == {"skills": [first, second, first], "matched": 1, "upserted": 1}
        assert stub.calls == [(
            "bulk_write",
            ([
                UpdateOne({"skill": ObjectId(first)}, {"$inc": {"count": 1}}, upsert=True),
                UpdateOne({"skill": ObjectId(second)}, {"$inc": {"count": 1}}, upsert=True),
            ],),
            {"ordered": False},
        )]

    def test_write_failure_leaves_no_counters(self, client, skills, stub_collection, monkeypatch):
        skill_ids = [skill["_id"] for skill in skills]
        stub_collection("statistics", bulk_write=RuntimeError("write concern timeout"))

        response = client.post("/statistics", json={"skills": skill_ids})

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "SERVER_FALLBACK"
        assert error["message"] == "Failed to add skills to statistics: write concern timeout"

        monkeypatch.undo()
        for skill_id in skill_ids:
            assert client.get(f"/statistics/{skill_id}").status_code == 404

    def test_malformed_skill_id_is_rejected(self, client):
        response = client.post("/statistics", json={"skills": ["python"]})

        assert response.status_code == 422

    def test_empty_list_is_rejected(self, client):
        response = client.post("/statistics", json={"skills": []})

        assert response.status_code == 422


class TestGetStatistic:
    """Test GET /statistics/{skill_id}."""

    def test_unknown_skill_is_not_found(self, client):
        response = client.get(f"/statistics/{ObjectId()}")

        assert response.status_code == 404

    def test_malformed_skill_id_is_not_found(self, client):
        response = client.get("/statistics/python")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


class TestRemoveSkills:
    """Test POST /statistics/delete."""

    def test_decrements_then_removes_exhausted_counters(self, client, skills):
        first, second = (skill["_id"] for skill in skills)
        client.post("/statistics", json={"skills": [first, second]})
        client.post("/statistics", json={"skills": [first]})

        response = client.post("/statistics/delete", json={"skills": [first, second]})

        assert response.status_code == 200
        assert response.json() == {"skills": [first, second], "modified": 2, "removed": 1}
        assert client.get(f"/statistics/{first}").json()["statistic"]["count"] == 1
        assert client.get(f"/statistics/{second}").status_code == 404

    def test_removing_the_added_list_cancels_it_out(self, client, skills):
        skill_id = skills[0]["_id"]
        client.post("/statistics", json={"skills": [skill_id, skill_id]})

        response = client.post("/statistics/delete", json={"skills": [skill_id, skill_id]})

        assert response.json()["removed"] == 1
        assert client.get(f"/statistics/{skill_id}").status_code == 404

    def test_unknown_skills_are_ignored(self, client):
        response = client.post("/statistics/delete", json={"skills": [str(ObjectId())]})

        assert response.status_code == 200
        assert response.json()["modified"] == 0
        assert response.json()["removed"] == 0
