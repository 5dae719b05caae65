"""
Factories for realistic GitHub API payloads.

Payloads carry the fields GitHub sends for each resource, generated with
Faker so that tests do not depend on fixed sample values.
"""

from typing import Any, Dict, Optional

from faker import Faker  # type: ignore

fake: Faker = Faker()


class GitHubDataFactory:
    """Factory for GitHub REST API response payloads."""

    @staticmethod
    def user(login: Optional[str] = None, **kwargs) -> Dict[str, Any]:
        """
        Generate a simple-user payload.

        Args:
            login: Optional login (generated if not provided)
            **kwargs: Additional user fields
        Returns:
            Dictionary shaped like GitHub's simple-user schema
        """
        login = login or fake.user_name()
        return {
            "login": login,
            "id": fake.random_int(min=1, max=10_000_000),
            "node_id": fake.pystr(min_chars=12, max_chars=12),
            "avatar_url": f"https://avatars.githubusercontent.com/u/{fake.random_int()}",
            "url": f"https://api.github.com/users/{login}",
            "html_url": f"https://github.com/{login}",
            "type": "User",
            "site_admin": False,
            **kwargs,
        }

    @staticmethod
    def repository(owner: Optional[str] = None, name: Optional[str] = None, **kwargs) -> Dict[str, Any]:
        """Generate a full-repository payload."""
        owner_payload = GitHubDataFactory.user(login=owner)
        name = name or fake.slug()
        full_name = f"{owner_payload['login']}/{name}"
        return {
            "id": fake.random_int(min=1, max=900_000_000),
            "node_id": fake.pystr(min_chars=12, max_chars=12),
            "name": name,
            "full_name": full_name,
            "owner": owner_payload,
            "private": False,
            "html_url": f"https://github.com/{full_name}",
            "description": fake.sentence(),
            "fork": False,
            "url": f"https://api.github.com/repos/{full_name}",
            "default_branch": "main",
            "stargazers_count": fake.random_int(max=5000),
            "watchers_count": fake.random_int(max=5000),
            "forks_count": fake.random_int(max=500),
            "open_issues_count": fake.random_int(max=100),
            "topics": [fake.word() for _ in range(3)],
            "created_at": fake.iso8601(),
            "updated_at": fake.iso8601(),
            "subscribers_count": fake.random_int(max=300),
            "network_count": fake.random_int(max=300),
            **kwargs,
        }

    @staticmethod
    def rate_limit(limit: int = 5000, remaining: Optional[int] = None) -> Dict[str, Any]:
        """Generate a rate-limit-overview payload."""
        remaining = limit if remaining is None else remaining
        core = {
            "limit": limit,
            "remaining": remaining,
            "reset": fake.random_int(min=1_700_000_000, max=1_800_000_000),
            "used": limit - remaining,
        }
        search = {"limit": 30, "remaining": 30, "reset": core["reset"], "used": 0}
        return {
            "resources": {"core": core, "search": search},
            "rate": dict(core),
        }

    @staticmethod
    def issue(number: Optional[int] = None, **kwargs) -> Dict[str, Any]:
        """Generate an issue payload."""
        return {
            "id": fake.random_int(min=1, max=2_000_000_000),
            "number": number or fake.random_int(min=1, max=5000),
            "title": fake.sentence(nb_words=6),
            "state": "open",
            "body": fake.paragraph(),
            "user": GitHubDataFactory.user(),
            "labels": [],
            "comments": 0,
            **kwargs,
        }
