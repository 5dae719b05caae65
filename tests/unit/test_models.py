"""
Tests for the response models.
"""

import pytest  # type: ignore
from pydantic import BaseModel, ValidationError  # type: ignore

from ghrest.sources.external.github import models
from tests.utils.data_factory import GitHubDataFactory


def all_models():
    return [
        obj for obj in vars(models).values()
        if isinstance(obj, type) and issubclass(obj, BaseModel) and obj.__module__ == models.__name__
    ]


class TestModels:

    def test_every_model_allows_extra_fields(self):
        for model in all_models():
            assert issubclass(model, models.GitHubModel), model
            assert model.model_config.get("extra") == "allow", model

    def test_repository_round_trip_is_lossless(self):
        payload = GitHubDataFactory.repository(custom_properties={"team": "core"})

        repo = models.FullRepository.model_validate(payload)
        again = models.FullRepository.model_validate(repo.model_dump())

        assert again == repo
        assert again.custom_properties == {"team": "core"}

    def test_nested_models(self):
        overview = models.RateLimitOverview.model_validate(GitHubDataFactory.rate_limit(limit=5000, remaining=4999))

        assert isinstance(overview.rate, models.RateLimit)
        assert overview.resources["search"].limit == 30

    def test_identity_fields_are_required(self):
        with pytest.raises(ValidationError):
            models.SimpleUser.model_validate({"login": "octocat"})
        with pytest.raises(ValidationError):
            models.Issue.model_validate({"id": 1, "title": "x", "state": "open"})

    def test_optional_fields_default_to_none(self):
        user = models.SimpleUser.model_validate({"login": "octocat", "id": 1})
        assert user.site_admin is None
        assert user.html_url is None

    def test_scim_field_names_match_the_wire(self):
        groups = models.ScimGroupListEnterprise.model_validate(
            {
                "schemas": ["urn:ietf:params:scim:api:messages:2.0:ListResponse"],
                "totalResults": 1,
                "itemsPerPage": 1,
                "startIndex": 1,
                "Resources": [{"schemas": ["urn:ietf:params:scim:schemas:core:2.0:Group"], "id": "abc", "displayName": "Admins"}],
            }
        )
        assert groups.Resources[0].displayName == "Admins"
