# ruff: noqa: PGH004
import asyncio
import os
import sys

from dotenv import load_dotenv  # type: ignore

load_dotenv()

from ghrest.exceptions.github_exceptions import GitHubError
from ghrest.sources.client.github.github import GitHubClient
from ghrest.sources.external.github.github_ import GitHubDataSource


async def main() -> None:
    """Example usage of the GitHub REST API using GitHubDataSource."""
    owner = os.getenv("GITHUB_EXAMPLE_OWNER", "octocat")
    repo = os.getenv("GITHUB_EXAMPLE_REPO", "Hello-World")

    print("Initializing GitHub client...")
    client = GitHubClient.build_from_env()
    data_source = GitHubDataSource(client)

    async with client:
        try:
            # Method 1: Rate limit status
            print("\n=== Method 1: Getting rate limit status ===")
            limits = await data_source.get_rate_limit()
            print(f"Core: {limits.rate.remaining}/{limits.rate.limit} remaining")

            # Method 2: Get specific repository
            print("\n=== Method 2: Getting repository by owner/repo name ===")
            repo_info = await data_source.get_repos_owner_repo(owner, repo)
            print(f"Repository: {repo_info.full_name}")
            print(f"Stars: {repo_info.stargazers_count}")
            print(f"Default branch: {repo_info.default_branch}")

            # Method 3: Recent issues, with a query string
            print("\n=== Method 3: Listing open issues ===")
            issues = await data_source.get_repos_owner_repo_issues(
                owner, repo, query={"state": "open", "per_page": 5}
            )
            print(f"Found {len(issues)} issues:")
            for issue in issues:
                print(f"  - #{issue.number}: {issue.title}")

            # Method 4: Untyped access to the same route
            print("\n=== Method 4: Raw JSON for the repository topics ===")
            topics = await data_source.get_repos_owner_repo_topics(owner, repo, response_model=dict)
            print(topics)
        except GitHubError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
