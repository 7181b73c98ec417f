"""
Tests for the job entity validator and the pagination/search helpers.
"""

import pytest
from bson import ObjectId

from app.schemas.job import validate_job
from app.services.job_service import build_page_stages, build_title_filter
from app.utils.exceptions import ERROR_STATUS, ErrorKind


@pytest.fixture
def valid_job():
    return {
        "title": "Backend Engineer",
        "description": "Build APIs",
        "skills": [str(ObjectId())],
        "userId": "user-a",
    }


class TestValidateJob:
    """Test validate_job."""

    def test_valid_job_returns_value_without_error(self, valid_job):
        value, error = validate_job(valid_job)

        assert error is None
        assert value == valid_job

    def test_only_supplied_optional_fields_are_kept(self, valid_job):
        value, _ = validate_job({**valid_job, "employmentType": "contract"})

        assert value["employmentType"] == "contract"
        assert "salary" not in value
        assert "company" not in value

    @pytest.mark.parametrize("field", ["title", "description", "skills", "userId"])
    def test_required_fields(self, valid_job, field):
        del valid_job[field]

        value, error = validate_job(valid_job)

        assert value is None
        assert error is not None
        assert error.errors()[0]["loc"] == (field,)

    def test_negative_salary_is_rejected(self, valid_job):
        _, error = validate_job({**valid_job, "salary": -1})

        assert error is not None

    def test_skill_ids_must_be_object_ids(self, valid_job):
        _, error = validate_job({**valid_job, "skills": ["not-an-id"]})

        assert error is not None

    def test_unknown_fields_are_rejected(self, valid_job):
        _, error = validate_job({**valid_job, "_id": str(ObjectId())})

        assert error is not None

    def test_empty_skill_list_is_allowed(self, valid_job):
        _, error = validate_job({**valid_job, "skills": []})

        assert error is None


class TestQueryHelpers:
    """Test pipeline helper functions."""

    def test_page_stages(self):
        assert build_page_stages(0, 0) == []
        assert build_page_stages(5, 10) == [{"$skip": 5}, {"$limit": 10}]
        assert build_page_stages(0, 3) == [{"$limit": 3}]

    def test_title_filter_escapes_pattern(self):
        assert build_title_filter("c++") == {"title": {"$regex": r"c\+\+", "$options": "i"}}

    def test_missing_title_matches_everything(self):
        assert build_title_filter(None) == {"title": {"$regex": "", "$options": "i"}}


class TestValidationResponse:
    """Test how validation errors are rendered."""

    def test_validation_kind_maps_to_422(self):
        assert ERROR_STATUS[ErrorKind.VALIDATION] == 422

    def test_invalid_job_is_rendered_as_detail_list(self, client, user_a_headers):
        response = client.post("/jobs", json={"title": ""}, headers=user_a_headers)

        assert response.status_code == 422
        detail = response.json()["detail"]
        locations = {tuple(error["loc"]) for error in detail}
        assert ("title",) in locations
        assert ("description",) in locations
