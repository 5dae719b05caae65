# ruff: noqa
"""
GitHub REST API route registry
Auto-generated from the OpenAPI description by code-generator/github.py.
"""

from ghrest.sources.client.github.endpoint import HttpMethod, RouteEnum


class Route(RouteEnum):
    """Every GitHub REST route exposed by this client, as (method, path template)"""

    GET_ROOT = (HttpMethod.GET, "/")
    GET_APP = (HttpMethod.GET, "/app")
    GET_APP_HOOK_CONFIG = (HttpMethod.GET, "/app/hook/config")
    PATCH_APP_HOOK_CONFIG = (HttpMethod.PATCH, "/app/hook/config")
    GET_APP_HOOK_DELIVERIES_DELIVERY_ID = (HttpMethod.GET, "/app/hook/deliveries/{delivery_id}")
    GET_APP_INSTALLATIONS = (HttpMethod.GET, "/app/installations")
    GET_APP_INSTALLATIONS_INSTALLATION_ID = (HttpMethod.GET, "/app/installations/{installation_id}")
    POST_APP_INSTALLATIONS_INSTALLATION_ID_ACCESS_TOKENS = (HttpMethod.POST, "/app/installations/{installation_id}/access_tokens")
    GET_APPLICATIONS_GRANTS_GRANT_ID = (HttpMethod.GET, "/applications/grants/{grant_id}")
    POST_APPLICATIONS_CLIENT_ID_TOKEN = (HttpMethod.POST, "/applications/{client_id}/token")
    PATCH_APPLICATIONS_CLIENT_ID_TOKEN = (HttpMethod.PATCH, "/applications/{client_id}/token")
    POST_APPLICATIONS_CLIENT_ID_TOKEN_SCOPED = (HttpMethod.POST, "/applications/{client_id}/token/scoped")
    GET_APPS_APP_SLUG = (HttpMethod.GET, "/apps/{app_slug}")
    PUT_AUTHORIZATIONS_CLIENTS_CLIENT_ID = (HttpMethod.PUT, "/authorizations/clients/{client_id}")
    PUT_AUTHORIZATIONS_CLIENTS_CLIENT_ID_FINGERPRINT = (HttpMethod.PUT, "/authorizations/clients/{client_id}/{fingerprint}")
    GET_AUTHORIZATIONS_AUTHORIZATION_ID = (HttpMethod.GET, "/authorizations/{authorization_id}")
    PATCH_AUTHORIZATIONS_AUTHORIZATION_ID = (HttpMethod.PATCH, "/authorizations/{authorization_id}")
    GET_CODES_OF_CONDUCT_KEY = (HttpMethod.GET, "/codes_of_conduct/{key}")
    GET_EMOJIS = (HttpMethod.GET, "/emojis")
    GET_ENTERPRISES_ENTERPRISE_ACTIONS_PERMISSIONS = (HttpMethod.GET, "/enterprises/{enterprise}/actions/permissions")
    GET_ENTERPRISES_ENTERPRISE_ACTIONS_PERMISSIONS_ORGANIZATIONS = (HttpMethod.GET, "/enterprises/{enterprise}/actions/permissions/organizations")
    GET_ENTERPRISES_ENTERPRISE_ACTIONS_PERMISSIONS_SELECTED_ACTIONS = (HttpMethod.GET, "/enterprises/{enterprise}/actions/permissions/selected-actions")
    GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNER_GROUPS = (HttpMethod.GET, "/enterprises/{enterprise}/actions/runner-groups")
    GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID = (HttpMethod.GET, "/enterprises/{enterprise}/actions/runner-groups/{runner_group_id}")
    PATCH_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID = (HttpMethod.PATCH, "/enterprises/{enterprise}/actions/runner-groups/{runner_group_id}")
    GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID_ORGANIZATIONS = (HttpMethod.GET, "/enterprises/{enterprise}/actions/runner-groups/{runner_group_id}/organizations")
    GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID_RUNNERS = (HttpMethod.GET, "/enterprises/{enterprise}/actions/runner-groups/{runner_group_id}/runners")
    GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS = (HttpMethod.GET, "/enterprises/{enterprise}/actions/runners")
    GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID = (HttpMethod.GET, "/enterprises/{enterprise}/actions/runners/{runner_id}")
    GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.GET, "/enterprises/{enterprise}/actions/runners/{runner_id}/labels")
    POST_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.POST, "/enterprises/{enterprise}/actions/runners/{runner_id}/labels")
    PUT_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.PUT, "/enterprises/{enterprise}/actions/runners/{runner_id}/labels")
    DELETE_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.DELETE, "/enterprises/{enterprise}/actions/runners/{runner_id}/labels")
    DELETE_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID_LABELS_NAME = (HttpMethod.DELETE, "/enterprises/{enterprise}/actions/runners/{runner_id}/labels/{name}")
    GET_ENTERPRISES_ENTERPRISE_SETTINGS_BILLING_ACTIONS = (HttpMethod.GET, "/enterprises/{enterprise}/settings/billing/actions")
    GET_ENTERPRISES_ENTERPRISE_SETTINGS_BILLING_ADVANCED_SECURITY = (HttpMethod.GET, "/enterprises/{enterprise}/settings/billing/advanced-security")
    GET_ENTERPRISES_ENTERPRISE_SETTINGS_BILLING_PACKAGES = (HttpMethod.GET, "/enterprises/{enterprise}/settings/billing/packages")
    GET_ENTERPRISES_ENTERPRISE_SETTINGS_BILLING_SHARED_STORAGE = (HttpMethod.GET, "/enterprises/{enterprise}/settings/billing/shared-storage")
    GET_EVENTS = (HttpMethod.GET, "/events")
    GET_FEEDS = (HttpMethod.GET, "/feeds")
    GET_GISTS = (HttpMethod.GET, "/gists")
    POST_GISTS = (HttpMethod.POST, "/gists")
    GET_GISTS_GIST_ID = (HttpMethod.GET, "/gists/{gist_id}")
    PATCH_GISTS_GIST_ID = (HttpMethod.PATCH, "/gists/{gist_id}")
    DELETE_GISTS_GIST_ID = (HttpMethod.DELETE, "/gists/{gist_id}")
    GET_GISTS_GIST_ID_COMMENTS = (HttpMethod.GET, "/gists/{gist_id}/comments")
    POST_GISTS_GIST_ID_COMMENTS = (HttpMethod.POST, "/gists/{gist_id}/comments")
    GET_GISTS_GIST_ID_COMMENTS_COMMENT_ID = (HttpMethod.GET, "/gists/{gist_id}/comments/{comment_id}")
    PATCH_GISTS_GIST_ID_COMMENTS_COMMENT_ID = (HttpMethod.PATCH, "/gists/{gist_id}/comments/{comment_id}")
    DELETE_GISTS_GIST_ID_COMMENTS_COMMENT_ID = (HttpMethod.DELETE, "/gists/{gist_id}/comments/{comment_id}")
    PUT_GISTS_GIST_ID_STAR = (HttpMethod.PUT, "/gists/{gist_id}/star")
    DELETE_GISTS_GIST_ID_STAR = (HttpMethod.DELETE, "/gists/{gist_id}/star")
    GET_GISTS_GIST_ID_SHA = (HttpMethod.GET, "/gists/{gist_id}/{sha}")
    GET_GITIGNORE_TEMPLATES = (HttpMethod.GET, "/gitignore/templates")
    GET_GITIGNORE_TEMPLATES_NAME = (HttpMethod.GET, "/gitignore/templates/{name}")
    GET_INSTALLATION_REPOSITORIES = (HttpMethod.GET, "/installation/repositories")
    GET_ISSUES = (HttpMethod.GET, "/issues")
    GET_LICENSES = (HttpMethod.GET, "/licenses")
    GET_LICENSES_LICENSE = (HttpMethod.GET, "/licenses/{license}")
    GET_MARKETPLACE_LISTING_ACCOUNTS_ACCOUNT_ID = (HttpMethod.GET, "/marketplace_listing/accounts/{account_id}")
    GET_MARKETPLACE_LISTING_STUBBED_ACCOUNTS_ACCOUNT_ID = (HttpMethod.GET, "/marketplace_listing/stubbed/accounts/{account_id}")
    GET_META = (HttpMethod.GET, "/meta")
    GET_NOTIFICATIONS = (HttpMethod.GET, "/notifications")
    GET_NOTIFICATIONS_THREADS_THREAD_ID = (HttpMethod.GET, "/notifications/threads/{thread_id}")
    GET_NOTIFICATIONS_THREADS_THREAD_ID_SUBSCRIPTION = (HttpMethod.GET, "/notifications/threads/{thread_id}/subscription")
    PUT_NOTIFICATIONS_THREADS_THREAD_ID_SUBSCRIPTION = (HttpMethod.PUT, "/notifications/threads/{thread_id}/subscription")
    GET_OCTOCAT = (HttpMethod.GET, "/octocat")
    GET_ORGANIZATIONS_ORGANIZATION_ID_CUSTOM_ROLES = (HttpMethod.GET, "/organizations/{organization_id}/custom_roles")
    GET_ORGS_ORG = (HttpMethod.GET, "/orgs/{org}")
    PATCH_ORGS_ORG = (HttpMethod.PATCH, "/orgs/{org}")
    GET_ORGS_ORG_ACTIONS_PERMISSIONS = (HttpMethod.GET, "/orgs/{org}/actions/permissions")
    GET_ORGS_ORG_ACTIONS_PERMISSIONS_REPOSITORIES = (HttpMethod.GET, "/orgs/{org}/actions/permissions/repositories")
    GET_ORGS_ORG_ACTIONS_PERMISSIONS_SELECTED_ACTIONS = (HttpMethod.GET, "/orgs/{org}/actions/permissions/selected-actions")
    GET_ORGS_ORG_ACTIONS_RUNNER_GROUPS = (HttpMethod.GET, "/orgs/{org}/actions/runner-groups")
    GET_ORGS_ORG_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID = (HttpMethod.GET, "/orgs/{org}/actions/runner-groups/{runner_group_id}")
    PATCH_ORGS_ORG_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID = (HttpMethod.PATCH, "/orgs/{org}/actions/runner-groups/{runner_group_id}")
    GET_ORGS_ORG_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID_REPOSITORIES = (HttpMethod.GET, "/orgs/{org}/actions/runner-groups/{runner_group_id}/repositories")
    GET_ORGS_ORG_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID_RUNNERS = (HttpMethod.GET, "/orgs/{org}/actions/runner-groups/{runner_group_id}/runners")
    GET_ORGS_ORG_ACTIONS_RUNNERS = (HttpMethod.GET, "/orgs/{org}/actions/runners")
    GET_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID = (HttpMethod.GET, "/orgs/{org}/actions/runners/{runner_id}")
    GET_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.GET, "/orgs/{org}/actions/runners/{runner_id}/labels")
    POST_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.POST, "/orgs/{org}/actions/runners/{runner_id}/labels")
    PUT_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.PUT, "/orgs/{org}/actions/runners/{runner_id}/labels")
    DELETE_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.DELETE, "/orgs/{org}/actions/runners/{runner_id}/labels")
    DELETE_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID_LABELS_NAME = (HttpMethod.DELETE, "/orgs/{org}/actions/runners/{runner_id}/labels/{name}")
    GET_ORGS_ORG_ACTIONS_SECRETS = (HttpMethod.GET, "/orgs/{org}/actions/secrets")
    GET_ORGS_ORG_ACTIONS_SECRETS_PUBLIC_KEY = (HttpMethod.GET, "/orgs/{org}/actions/secrets/public-key")
    GET_ORGS_ORG_ACTIONS_SECRETS_SECRET_NAME = (HttpMethod.GET, "/orgs/{org}/actions/secrets/{secret_name}")
    GET_ORGS_ORG_ACTIONS_SECRETS_SECRET_NAME_REPOSITORIES = (HttpMethod.GET, "/orgs/{org}/actions/secrets/{secret_name}/repositories")
    GET_ORGS_ORG_EXTERNAL_GROUP_GROUP_ID = (HttpMethod.GET, "/orgs/{org}/external-group/{group_id}")
    GET_ORGS_ORG_EXTERNAL_GROUPS = (HttpMethod.GET, "/orgs/{org}/external-groups")
    GET_ORGS_ORG_HOOKS = (HttpMethod.GET, "/orgs/{org}/hooks")
    POST_ORGS_ORG_HOOKS = (HttpMethod.POST, "/orgs/{org}/hooks")
    GET_ORGS_ORG_HOOKS_HOOK_ID = (HttpMethod.GET, "/orgs/{org}/hooks/{hook_id}")
    PATCH_ORGS_ORG_HOOKS_HOOK_ID = (HttpMethod.PATCH, "/orgs/{org}/hooks/{hook_id}")
    DELETE_ORGS_ORG_HOOKS_HOOK_ID = (HttpMethod.DELETE, "/orgs/{org}/hooks/{hook_id}")
    GET_ORGS_ORG_HOOKS_HOOK_ID_CONFIG = (HttpMethod.GET, "/orgs/{org}/hooks/{hook_id}/config")
    PATCH_ORGS_ORG_HOOKS_HOOK_ID_CONFIG = (HttpMethod.PATCH, "/orgs/{org}/hooks/{hook_id}/config")
    GET_ORGS_ORG_HOOKS_HOOK_ID_DELIVERIES_DELIVERY_ID = (HttpMethod.GET, "/orgs/{org}/hooks/{hook_id}/deliveries/{delivery_id}")
    GET_ORGS_ORG_INSTALLATION = (HttpMethod.GET, "/orgs/{org}/installation")
    GET_ORGS_ORG_INSTALLATIONS = (HttpMethod.GET, "/orgs/{org}/installations")
    PUT_ORGS_ORG_INTERACTION_LIMITS = (HttpMethod.PUT, "/orgs/{org}/interaction-limits")
    GET_ORGS_ORG_MEMBERS = (HttpMethod.GET, "/orgs/{org}/members")
    DELETE_ORGS_ORG_MEMBERS_USERNAME = (HttpMethod.DELETE, "/orgs/{org}/members/{username}")
    GET_ORGS_ORG_MEMBERSHIPS_USERNAME = (HttpMethod.GET, "/orgs/{org}/memberships/{username}")
    PUT_ORGS_ORG_MEMBERSHIPS_USERNAME = (HttpMethod.PUT, "/orgs/{org}/memberships/{username}")
    DELETE_ORGS_ORG_MEMBERSHIPS_USERNAME = (HttpMethod.DELETE, "/orgs/{org}/memberships/{username}")
    GET_ORGS_ORG_MIGRATIONS_MIGRATION_ID = (HttpMethod.GET, "/orgs/{org}/migrations/{migration_id}")
    GET_ORGS_ORG_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME = (HttpMethod.GET, "/orgs/{org}/packages/{package_type}/{package_name}")
    GET_ORGS_ORG_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME_VERSIONS_PACKAGE_VERSION_ID = (HttpMethod.GET, "/orgs/{org}/packages/{package_type}/{package_name}/versions/{package_version_id}")
    GET_ORGS_ORG_REPOS = (HttpMethod.GET, "/orgs/{org}/repos")
    POST_ORGS_ORG_REPOS = (HttpMethod.POST, "/orgs/{org}/repos")
    GET_ORGS_ORG_SETTINGS_BILLING_ACTIONS = (HttpMethod.GET, "/orgs/{org}/settings/billing/actions")
    GET_ORGS_ORG_SETTINGS_BILLING_ADVANCED_SECURITY = (HttpMethod.GET, "/orgs/{org}/settings/billing/advanced-security")
    GET_ORGS_ORG_SETTINGS_BILLING_PACKAGES = (HttpMethod.GET, "/orgs/{org}/settings/billing/packages")
    GET_ORGS_ORG_SETTINGS_BILLING_SHARED_STORAGE = (HttpMethod.GET, "/orgs/{org}/settings/billing/shared-storage")
    GET_ORGS_ORG_TEAM_SYNC_GROUPS = (HttpMethod.GET, "/orgs/{org}/team-sync/groups")
    GET_ORGS_ORG_TEAMS = (HttpMethod.GET, "/orgs/{org}/teams")
    POST_ORGS_ORG_TEAMS = (HttpMethod.POST, "/orgs/{org}/teams")
    GET_ORGS_ORG_TEAMS_TEAM_SLUG = (HttpMethod.GET, "/orgs/{org}/teams/{team_slug}")
    DELETE_ORGS_ORG_TEAMS_TEAM_SLUG = (HttpMethod.DELETE, "/orgs/{org}/teams/{team_slug}")
    GET_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER = (HttpMethod.GET, "/orgs/{org}/teams/{team_slug}/discussions/{discussion_number}")
    PATCH_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER = (HttpMethod.PATCH, "/orgs/{org}/teams/{team_slug}/discussions/{discussion_number}")
    GET_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER_COMMENTS_COMMENT_NUMBER = (HttpMethod.GET, "/orgs/{org}/teams/{team_slug}/discussions/{discussion_number}/comments/{comment_number}")
    PATCH_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER_COMMENTS_COMMENT_NUMBER = (HttpMethod.PATCH, "/orgs/{org}/teams/{team_slug}/discussions/{discussion_number}/comments/{comment_number}")
    POST_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER_COMMENTS_COMMENT_NUMBER_REACTIONS = (HttpMethod.POST, "/orgs/{org}/teams/{team_slug}/discussions/{discussion_number}/comments/{comment_number}/reactions")
    POST_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER_REACTIONS = (HttpMethod.POST, "/orgs/{org}/teams/{team_slug}/discussions/{discussion_number}/reactions")
    PATCH_ORGS_ORG_TEAMS_TEAM_SLUG_EXTERNAL_GROUPS = (HttpMethod.PATCH, "/orgs/{org}/teams/{team_slug}/external-groups")
    GET_ORGS_ORG_TEAMS_TEAM_SLUG_MEMBERS = (HttpMethod.GET, "/orgs/{org}/teams/{team_slug}/members")
    GET_ORGS_ORG_TEAMS_TEAM_SLUG_MEMBERSHIPS_USERNAME = (HttpMethod.GET, "/orgs/{org}/teams/{team_slug}/memberships/{username}")
    PUT_ORGS_ORG_TEAMS_TEAM_SLUG_MEMBERSHIPS_USERNAME = (HttpMethod.PUT, "/orgs/{org}/teams/{team_slug}/memberships/{username}")
    GET_ORGS_ORG_TEAMS_TEAM_SLUG_PROJECTS_PROJECT_ID = (HttpMethod.GET, "/orgs/{org}/teams/{team_slug}/projects/{project_id}")
    GET_ORGS_ORG_TEAMS_TEAM_SLUG_REPOS = (HttpMethod.GET, "/orgs/{org}/teams/{team_slug}/repos")
    GET_ORGS_ORG_TEAMS_TEAM_SLUG_REPOS_OWNER_REPO = (HttpMethod.GET, "/orgs/{org}/teams/{team_slug}/repos/{owner}/{repo}")
    GET_ORGS_ORG_TEAMS_TEAM_SLUG_TEAM_SYNC_GROUP_MAPPINGS = (HttpMethod.GET, "/orgs/{org}/teams/{team_slug}/team-sync/group-mappings")
    PATCH_ORGS_ORG_TEAMS_TEAM_SLUG_TEAM_SYNC_GROUP_MAPPINGS = (HttpMethod.PATCH, "/orgs/{org}/teams/{team_slug}/team-sync/group-mappings")
    GET_PROJECTS_COLUMNS_CARDS_CARD_ID = (HttpMethod.GET, "/projects/columns/cards/{card_id}")
    PATCH_PROJECTS_COLUMNS_CARDS_CARD_ID = (HttpMethod.PATCH, "/projects/columns/cards/{card_id}")
    GET_PROJECTS_COLUMNS_COLUMN_ID = (HttpMethod.GET, "/projects/columns/{column_id}")
    PATCH_PROJECTS_COLUMNS_COLUMN_ID = (HttpMethod.PATCH, "/projects/columns/{column_id}")
    GET_PROJECTS_PROJECT_ID = (HttpMethod.GET, "/projects/{project_id}")
    PATCH_PROJECTS_PROJECT_ID = (HttpMethod.PATCH, "/projects/{project_id}")
    GET_PROJECTS_PROJECT_ID_COLLABORATORS_USERNAME_PERMISSION = (HttpMethod.GET, "/projects/{project_id}/collaborators/{username}/permission")
    GET_RATE_LIMIT = (HttpMethod.GET, "/rate_limit")
    GET_REPOS_OWNER_REPO = (HttpMethod.GET, "/repos/{owner}/{repo}")
    PATCH_REPOS_OWNER_REPO = (HttpMethod.PATCH, "/repos/{owner}/{repo}")
    DELETE_REPOS_OWNER_REPO = (HttpMethod.DELETE, "/repos/{owner}/{repo}")
    GET_REPOS_OWNER_REPO_ACTIONS_ARTIFACTS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/artifacts")
    GET_REPOS_OWNER_REPO_ACTIONS_ARTIFACTS_ARTIFACT_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/artifacts/{artifact_id}")
    DELETE_REPOS_OWNER_REPO_ACTIONS_ARTIFACTS_ARTIFACT_ID = (HttpMethod.DELETE, "/repos/{owner}/{repo}/actions/artifacts/{artifact_id}")
    GET_REPOS_OWNER_REPO_ACTIONS_JOBS_JOB_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/jobs/{job_id}")
    GET_REPOS_OWNER_REPO_ACTIONS_PERMISSIONS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/permissions")
    GET_REPOS_OWNER_REPO_ACTIONS_PERMISSIONS_SELECTED_ACTIONS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/permissions/selected-actions")
    GET_REPOS_OWNER_REPO_ACTIONS_RUNNERS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/runners")
    GET_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/runners/{runner_id}")
    GET_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/runners/{runner_id}/labels")
    POST_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.POST, "/repos/{owner}/{repo}/actions/runners/{runner_id}/labels")
    PUT_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.PUT, "/repos/{owner}/{repo}/actions/runners/{runner_id}/labels")
    DELETE_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID_LABELS = (HttpMethod.DELETE, "/repos/{owner}/{repo}/actions/runners/{runner_id}/labels")
    DELETE_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID_LABELS_NAME = (HttpMethod.DELETE, "/repos/{owner}/{repo}/actions/runners/{runner_id}/labels/{name}")
    GET_REPOS_OWNER_REPO_ACTIONS_RUNS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/runs")
    GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/runs/{run_id}")
    DELETE_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID = (HttpMethod.DELETE, "/repos/{owner}/{repo}/actions/runs/{run_id}")
    GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_ARTIFACTS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/runs/{run_id}/artifacts")
    GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_ATTEMPTS_ATTEMPT_NUMBER = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/runs/{run_id}/attempts/{attempt_number}")
    GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_ATTEMPTS_ATTEMPT_NUMBER_JOBS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/runs/{run_id}/attempts/{attempt_number}/jobs")
    POST_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_CANCEL = (HttpMethod.POST, "/repos/{owner}/{repo}/actions/runs/{run_id}/cancel")
    GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_JOBS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/runs/{run_id}/jobs")
    POST_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_RERUN = (HttpMethod.POST, "/repos/{owner}/{repo}/actions/runs/{run_id}/rerun")
    GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_TIMING = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/runs/{run_id}/timing")
    GET_REPOS_OWNER_REPO_ACTIONS_SECRETS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/secrets")
    GET_REPOS_OWNER_REPO_ACTIONS_SECRETS_PUBLIC_KEY = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/secrets/public-key")
    GET_REPOS_OWNER_REPO_ACTIONS_SECRETS_SECRET_NAME = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/secrets/{secret_name}")
    GET_REPOS_OWNER_REPO_ACTIONS_WORKFLOWS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/workflows")
    GET_REPOS_OWNER_REPO_ACTIONS_WORKFLOWS_WORKFLOW_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/workflows/{workflow_id}")
    POST_REPOS_OWNER_REPO_ACTIONS_WORKFLOWS_WORKFLOW_ID_DISPATCHES = (HttpMethod.POST, "/repos/{owner}/{repo}/actions/workflows/{workflow_id}/dispatches")
    GET_REPOS_OWNER_REPO_ACTIONS_WORKFLOWS_WORKFLOW_ID_RUNS = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/workflows/{workflow_id}/runs")
    GET_REPOS_OWNER_REPO_ACTIONS_WORKFLOWS_WORKFLOW_ID_TIMING = (HttpMethod.GET, "/repos/{owner}/{repo}/actions/workflows/{workflow_id}/timing")
    GET_REPOS_OWNER_REPO_ASSIGNEES = (HttpMethod.GET, "/repos/{owner}/{repo}/assignees")
    GET_REPOS_OWNER_REPO_AUTOLINKS_AUTOLINK_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/autolinks/{autolink_id}")
    GET_REPOS_OWNER_REPO_BRANCHES = (HttpMethod.GET, "/repos/{owner}/{repo}/branches")
    GET_REPOS_OWNER_REPO_BRANCHES_BRANCH = (HttpMethod.GET, "/repos/{owner}/{repo}/branches/{branch}")
    GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION = (HttpMethod.GET, "/repos/{owner}/{repo}/branches/{branch}/protection")
    PUT_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION = (HttpMethod.PUT, "/repos/{owner}/{repo}/branches/{branch}/protection")
    DELETE_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION = (HttpMethod.DELETE, "/repos/{owner}/{repo}/branches/{branch}/protection")
    GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_ENFORCE_ADMINS = (HttpMethod.GET, "/repos/{owner}/{repo}/branches/{branch}/protection/enforce_admins")
    POST_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_ENFORCE_ADMINS = (HttpMethod.POST, "/repos/{owner}/{repo}/branches/{branch}/protection/enforce_admins")
    GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_PULL_REQUEST_REVIEWS = (HttpMethod.GET, "/repos/{owner}/{repo}/branches/{branch}/protection/required_pull_request_reviews")
    PATCH_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_PULL_REQUEST_REVIEWS = (HttpMethod.PATCH, "/repos/{owner}/{repo}/branches/{branch}/protection/required_pull_request_reviews")
    GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_SIGNATURES = (HttpMethod.GET, "/repos/{owner}/{repo}/branches/{branch}/protection/required_signatures")
    POST_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_SIGNATURES = (HttpMethod.POST, "/repos/{owner}/{repo}/branches/{branch}/protection/required_signatures")
    GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_STATUS_CHECKS = (HttpMethod.GET, "/repos/{owner}/{repo}/branches/{branch}/protection/required_status_checks")
    PATCH_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_STATUS_CHECKS = (HttpMethod.PATCH, "/repos/{owner}/{repo}/branches/{branch}/protection/required_status_checks")
    GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_RESTRICTIONS = (HttpMethod.GET, "/repos/{owner}/{repo}/branches/{branch}/protection/restrictions")
    GET_REPOS_OWNER_REPO_CHECK_RUNS_CHECK_RUN_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/check-runs/{check_run_id}")
    PATCH_REPOS_OWNER_REPO_CHECK_RUNS_CHECK_RUN_ID = (HttpMethod.PATCH, "/repos/{owner}/{repo}/check-runs/{check_run_id}")
    POST_REPOS_OWNER_REPO_CHECK_SUITES = (HttpMethod.POST, "/repos/{owner}/{repo}/check-suites")
    PATCH_REPOS_OWNER_REPO_CHECK_SUITES_PREFERENCES = (HttpMethod.PATCH, "/repos/{owner}/{repo}/check-suites/preferences")
    GET_REPOS_OWNER_REPO_CHECK_SUITES_CHECK_SUITE_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/check-suites/{check_suite_id}")
    GET_REPOS_OWNER_REPO_CHECK_SUITES_CHECK_SUITE_ID_CHECK_RUNS = (HttpMethod.GET, "/repos/{owner}/{repo}/check-suites/{check_suite_id}/check-runs")
    GET_REPOS_OWNER_REPO_CODE_SCANNING_ALERTS_ALERT_NUMBER = (HttpMethod.GET, "/repos/{owner}/{repo}/code-scanning/alerts/{alert_number}")
    PATCH_REPOS_OWNER_REPO_CODE_SCANNING_ALERTS_ALERT_NUMBER = (HttpMethod.PATCH, "/repos/{owner}/{repo}/code-scanning/alerts/{alert_number}")
    GET_REPOS_OWNER_REPO_CODE_SCANNING_ANALYSES_ANALYSIS_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/code-scanning/analyses/{analysis_id}")
    DELETE_REPOS_OWNER_REPO_CODE_SCANNING_ANALYSES_ANALYSIS_ID = (HttpMethod.DELETE, "/repos/{owner}/{repo}/code-scanning/analyses/{analysis_id}")
    GET_REPOS_OWNER_REPO_CODE_SCANNING_SARIFS_SARIF_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/code-scanning/sarifs/{sarif_id}")
    GET_REPOS_OWNER_REPO_CODESPACES = (HttpMethod.GET, "/repos/{owner}/{repo}/codespaces")
    GET_REPOS_OWNER_REPO_CODESPACES_MACHINES = (HttpMethod.GET, "/repos/{owner}/{repo}/codespaces/machines")
    GET_REPOS_OWNER_REPO_COLLABORATORS = (HttpMethod.GET, "/repos/{owner}/{repo}/collaborators")
    PUT_REPOS_OWNER_REPO_COLLABORATORS_USERNAME = (HttpMethod.PUT, "/repos/{owner}/{repo}/collaborators/{username}")
    DELETE_REPOS_OWNER_REPO_COLLABORATORS_USERNAME = (HttpMethod.DELETE, "/repos/{owner}/{repo}/collaborators/{username}")
    GET_REPOS_OWNER_REPO_COLLABORATORS_USERNAME_PERMISSION = (HttpMethod.GET, "/repos/{owner}/{repo}/collaborators/{username}/permission")
    GET_REPOS_OWNER_REPO_COMMENTS_COMMENT_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/comments/{comment_id}")
    PATCH_REPOS_OWNER_REPO_COMMENTS_COMMENT_ID = (HttpMethod.PATCH, "/repos/{owner}/{repo}/comments/{comment_id}")
    POST_REPOS_OWNER_REPO_COMMENTS_COMMENT_ID_REACTIONS = (HttpMethod.POST, "/repos/{owner}/{repo}/comments/{comment_id}/reactions")
    GET_REPOS_OWNER_REPO_COMMITS = (HttpMethod.GET, "/repos/{owner}/{repo}/commits")
    GET_REPOS_OWNER_REPO_COMMITS_COMMIT_SHA_COMMENTS = (HttpMethod.GET, "/repos/{owner}/{repo}/commits/{commit_sha}/comments")
    GET_REPOS_OWNER_REPO_COMMITS_REF = (HttpMethod.GET, "/repos/{owner}/{repo}/commits/{ref}")
    GET_REPOS_OWNER_REPO_COMMITS_REF_CHECK_RUNS = (HttpMethod.GET, "/repos/{owner}/{repo}/commits/{ref}/check-runs")
    GET_REPOS_OWNER_REPO_COMMITS_REF_CHECK_SUITES = (HttpMethod.GET, "/repos/{owner}/{repo}/commits/{ref}/check-suites")
    GET_REPOS_OWNER_REPO_COMMITS_REF_STATUS = (HttpMethod.GET, "/repos/{owner}/{repo}/commits/{ref}/status")
    GET_REPOS_OWNER_REPO_COMMUNITY_PROFILE = (HttpMethod.GET, "/repos/{owner}/{repo}/community/profile")
    GET_REPOS_OWNER_REPO_COMPARE_BASEHEAD = (HttpMethod.GET, "/repos/{owner}/{repo}/compare/{basehead}")
    GET_REPOS_OWNER_REPO_CONTENTS_PATH = (HttpMethod.GET, "/repos/{owner}/{repo}/contents/{path}")
    PUT_REPOS_OWNER_REPO_CONTENTS_PATH = (HttpMethod.PUT, "/repos/{owner}/{repo}/contents/{path}")
    DELETE_REPOS_OWNER_REPO_CONTENTS_PATH = (HttpMethod.DELETE, "/repos/{owner}/{repo}/contents/{path}")
    GET_REPOS_OWNER_REPO_CONTRIBUTORS = (HttpMethod.GET, "/repos/{owner}/{repo}/contributors")
    GET_REPOS_OWNER_REPO_DEPLOYMENTS = (HttpMethod.GET, "/repos/{owner}/{repo}/deployments")
    POST_REPOS_OWNER_REPO_DEPLOYMENTS = (HttpMethod.POST, "/repos/{owner}/{repo}/deployments")
    GET_REPOS_OWNER_REPO_DEPLOYMENTS_DEPLOYMENT_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/deployments/{deployment_id}")
    DELETE_REPOS_OWNER_REPO_DEPLOYMENTS_DEPLOYMENT_ID = (HttpMethod.DELETE, "/repos/{owner}/{repo}/deployments/{deployment_id}")
    GET_REPOS_OWNER_REPO_DEPLOYMENTS_DEPLOYMENT_ID_STATUSES_STATUS_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/deployments/{deployment_id}/statuses/{status_id}")
    POST_REPOS_OWNER_REPO_DISPATCHES = (HttpMethod.POST, "/repos/{owner}/{repo}/dispatches")
    GET_REPOS_OWNER_REPO_ENVIRONMENTS = (HttpMethod.GET, "/repos/{owner}/{repo}/environments")
    GET_REPOS_OWNER_REPO_ENVIRONMENTS_ENVIRONMENT_NAME = (HttpMethod.GET, "/repos/{owner}/{repo}/environments/{environment_name}")
    PUT_REPOS_OWNER_REPO_ENVIRONMENTS_ENVIRONMENT_NAME = (HttpMethod.PUT, "/repos/{owner}/{repo}/environments/{environment_name}")
    GET_REPOS_OWNER_REPO_EVENTS = (HttpMethod.GET, "/repos/{owner}/{repo}/events")
    GET_REPOS_OWNER_REPO_FORKS = (HttpMethod.GET, "/repos/{owner}/{repo}/forks")
    POST_REPOS_OWNER_REPO_FORKS = (HttpMethod.POST, "/repos/{owner}/{repo}/forks")
    POST_REPOS_OWNER_REPO_GIT_BLOBS = (HttpMethod.POST, "/repos/{owner}/{repo}/git/blobs")
    GET_REPOS_OWNER_REPO_GIT_BLOBS_FILE_SHA = (HttpMethod.GET, "/repos/{owner}/{repo}/git/blobs/{file_sha}")
    POST_REPOS_OWNER_REPO_GIT_COMMITS = (HttpMethod.POST, "/repos/{owner}/{repo}/git/commits")
    GET_REPOS_OWNER_REPO_GIT_COMMITS_COMMIT_SHA = (HttpMethod.GET, "/repos/{owner}/{repo}/git/commits/{commit_sha}")
    GET_REPOS_OWNER_REPO_GIT_MATCHING_REFS_REF = (HttpMethod.GET, "/repos/{owner}/{repo}/git/matching-refs/{ref}")
    GET_REPOS_OWNER_REPO_GIT_REF_REF = (HttpMethod.GET, "/repos/{owner}/{repo}/git/ref/{ref}")
    POST_REPOS_OWNER_REPO_GIT_REFS = (HttpMethod.POST, "/repos/{owner}/{repo}/git/refs")
    PATCH_REPOS_OWNER_REPO_GIT_REFS_REF = (HttpMethod.PATCH, "/repos/{owner}/{repo}/git/refs/{ref}")
    DELETE_REPOS_OWNER_REPO_GIT_REFS_REF = (HttpMethod.DELETE, "/repos/{owner}/{repo}/git/refs/{ref}")
    POST_REPOS_OWNER_REPO_GIT_TAGS = (HttpMethod.POST, "/repos/{owner}/{repo}/git/tags")
    GET_REPOS_OWNER_REPO_GIT_TAGS_TAG_SHA = (HttpMethod.GET, "/repos/{owner}/{repo}/git/tags/{tag_sha}")
    POST_REPOS_OWNER_REPO_GIT_TREES = (HttpMethod.POST, "/repos/{owner}/{repo}/git/trees")
    GET_REPOS_OWNER_REPO_GIT_TREES_TREE_SHA = (HttpMethod.GET, "/repos/{owner}/{repo}/git/trees/{tree_sha}")
    GET_REPOS_OWNER_REPO_HOOKS = (HttpMethod.GET, "/repos/{owner}/{repo}/hooks")
    POST_REPOS_OWNER_REPO_HOOKS = (HttpMethod.POST, "/repos/{owner}/{repo}/hooks")
    GET_REPOS_OWNER_REPO_HOOKS_HOOK_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/hooks/{hook_id}")
    PATCH_REPOS_OWNER_REPO_HOOKS_HOOK_ID = (HttpMethod.PATCH, "/repos/{owner}/{repo}/hooks/{hook_id}")
    DELETE_REPOS_OWNER_REPO_HOOKS_HOOK_ID = (HttpMethod.DELETE, "/repos/{owner}/{repo}/hooks/{hook_id}")
    GET_REPOS_OWNER_REPO_HOOKS_HOOK_ID_CONFIG = (HttpMethod.GET, "/repos/{owner}/{repo}/hooks/{hook_id}/config")
    PATCH_REPOS_OWNER_REPO_HOOKS_HOOK_ID_CONFIG = (HttpMethod.PATCH, "/repos/{owner}/{repo}/hooks/{hook_id}/config")
    GET_REPOS_OWNER_REPO_HOOKS_HOOK_ID_DELIVERIES_DELIVERY_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/hooks/{hook_id}/deliveries/{delivery_id}")
    POST_REPOS_OWNER_REPO_HOOKS_HOOK_ID_PINGS = (HttpMethod.POST, "/repos/{owner}/{repo}/hooks/{hook_id}/pings")
    GET_REPOS_OWNER_REPO_IMPORT = (HttpMethod.GET, "/repos/{owner}/{repo}/import")
    PATCH_REPOS_OWNER_REPO_IMPORT = (HttpMethod.PATCH, "/repos/{owner}/{repo}/import")
    PATCH_REPOS_OWNER_REPO_IMPORT_AUTHORS_AUTHOR_ID = (HttpMethod.PATCH, "/repos/{owner}/{repo}/import/authors/{author_id}")
    PATCH_REPOS_OWNER_REPO_IMPORT_LFS = (HttpMethod.PATCH, "/repos/{owner}/{repo}/import/lfs")
    GET_REPOS_OWNER_REPO_INSTALLATION = (HttpMethod.GET, "/repos/{owner}/{repo}/installation")
    PUT_REPOS_OWNER_REPO_INTERACTION_LIMITS = (HttpMethod.PUT, "/repos/{owner}/{repo}/interaction-limits")
    PATCH_REPOS_OWNER_REPO_INVITATIONS_INVITATION_ID = (HttpMethod.PATCH, "/repos/{owner}/{repo}/invitations/{invitation_id}")
    GET_REPOS_OWNER_REPO_ISSUES = (HttpMethod.GET, "/repos/{owner}/{repo}/issues")
    POST_REPOS_OWNER_REPO_ISSUES = (HttpMethod.POST, "/repos/{owner}/{repo}/issues")
    GET_REPOS_OWNER_REPO_ISSUES_COMMENTS = (HttpMethod.GET, "/repos/{owner}/{repo}/issues/comments")
    GET_REPOS_OWNER_REPO_ISSUES_COMMENTS_COMMENT_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/issues/comments/{comment_id}")
    PATCH_REPOS_OWNER_REPO_ISSUES_COMMENTS_COMMENT_ID = (HttpMethod.PATCH, "/repos/{owner}/{repo}/issues/comments/{comment_id}")
    DELETE_REPOS_OWNER_REPO_ISSUES_COMMENTS_COMMENT_ID = (HttpMethod.DELETE, "/repos/{owner}/{repo}/issues/comments/{comment_id}")
    POST_REPOS_OWNER_REPO_ISSUES_COMMENTS_COMMENT_ID_REACTIONS = (HttpMethod.POST, "/repos/{owner}/{repo}/issues/comments/{comment_id}/reactions")
    GET_REPOS_OWNER_REPO_ISSUES_EVENTS_EVENT_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/issues/events/{event_id}")
    GET_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER = (HttpMethod.GET, "/repos/{owner}/{repo}/issues/{issue_number}")
    PATCH_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER = (HttpMethod.PATCH, "/repos/{owner}/{repo}/issues/{issue_number}")
    DELETE_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_ASSIGNEES = (HttpMethod.DELETE, "/repos/{owner}/{repo}/issues/{issue_number}/assignees")
    GET_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_COMMENTS = (HttpMethod.GET, "/repos/{owner}/{repo}/issues/{issue_number}/comments")
    POST_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_COMMENTS = (HttpMethod.POST, "/repos/{owner}/{repo}/issues/{issue_number}/comments")
    GET_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_LABELS = (HttpMethod.GET, "/repos/{owner}/{repo}/issues/{issue_number}/labels")
    POST_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_LABELS = (HttpMethod.POST, "/repos/{owner}/{repo}/issues/{issue_number}/labels")
    PUT_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_LOCK = (HttpMethod.PUT, "/repos/{owner}/{repo}/issues/{issue_number}/lock")
    DELETE_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_LOCK = (HttpMethod.DELETE, "/repos/{owner}/{repo}/issues/{issue_number}/lock")
    POST_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_REACTIONS = (HttpMethod.POST, "/repos/{owner}/{repo}/issues/{issue_number}/reactions")
    GET_REPOS_OWNER_REPO_KEYS = (HttpMethod.GET, "/repos/{owner}/{repo}/keys")
    POST_REPOS_OWNER_REPO_KEYS = (HttpMethod.POST, "/repos/{owner}/{repo}/keys")
    GET_REPOS_OWNER_REPO_KEYS_KEY_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/keys/{key_id}")
    DELETE_REPOS_OWNER_REPO_KEYS_KEY_ID = (HttpMethod.DELETE, "/repos/{owner}/{repo}/keys/{key_id}")
    GET_REPOS_OWNER_REPO_LABELS = (HttpMethod.GET, "/repos/{owner}/{repo}/labels")
    POST_REPOS_OWNER_REPO_LABELS = (HttpMethod.POST, "/repos/{owner}/{repo}/labels")
    GET_REPOS_OWNER_REPO_LABELS_NAME = (HttpMethod.GET, "/repos/{owner}/{repo}/labels/{name}")
    PATCH_REPOS_OWNER_REPO_LABELS_NAME = (HttpMethod.PATCH, "/repos/{owner}/{repo}/labels/{name}")
    DELETE_REPOS_OWNER_REPO_LABELS_NAME = (HttpMethod.DELETE, "/repos/{owner}/{repo}/labels/{name}")
    GET_REPOS_OWNER_REPO_LANGUAGES = (HttpMethod.GET, "/repos/{owner}/{repo}/languages")
    GET_REPOS_OWNER_REPO_LICENSE = (HttpMethod.GET, "/repos/{owner}/{repo}/license")
    POST_REPOS_OWNER_REPO_MERGE_UPSTREAM = (HttpMethod.POST, "/repos/{owner}/{repo}/merge-upstream")
    GET_REPOS_OWNER_REPO_MILESTONES = (HttpMethod.GET, "/repos/{owner}/{repo}/milestones")
    POST_REPOS_OWNER_REPO_MILESTONES = (HttpMethod.POST, "/repos/{owner}/{repo}/milestones")
    GET_REPOS_OWNER_REPO_MILESTONES_MILESTONE_NUMBER = (HttpMethod.GET, "/repos/{owner}/{repo}/milestones/{milestone_number}")
    PATCH_REPOS_OWNER_REPO_MILESTONES_MILESTONE_NUMBER = (HttpMethod.PATCH, "/repos/{owner}/{repo}/milestones/{milestone_number}")
    DELETE_REPOS_OWNER_REPO_MILESTONES_MILESTONE_NUMBER = (HttpMethod.DELETE, "/repos/{owner}/{repo}/milestones/{milestone_number}")
    GET_REPOS_OWNER_REPO_PAGES = (HttpMethod.GET, "/repos/{owner}/{repo}/pages")
    GET_REPOS_OWNER_REPO_PAGES_BUILDS_LATEST = (HttpMethod.GET, "/repos/{owner}/{repo}/pages/builds/latest")
    GET_REPOS_OWNER_REPO_PAGES_BUILDS_BUILD_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/pages/builds/{build_id}")
    GET_REPOS_OWNER_REPO_PAGES_HEALTH = (HttpMethod.GET, "/repos/{owner}/{repo}/pages/health")
    GET_REPOS_OWNER_REPO_PULLS = (HttpMethod.GET, "/repos/{owner}/{repo}/pulls")
    POST_REPOS_OWNER_REPO_PULLS = (HttpMethod.POST, "/repos/{owner}/{repo}/pulls")
    GET_REPOS_OWNER_REPO_PULLS_COMMENTS_COMMENT_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/pulls/comments/{comment_id}")
    PATCH_REPOS_OWNER_REPO_PULLS_COMMENTS_COMMENT_ID = (HttpMethod.PATCH, "/repos/{owner}/{repo}/pulls/comments/{comment_id}")
    POST_REPOS_OWNER_REPO_PULLS_COMMENTS_COMMENT_ID_REACTIONS = (HttpMethod.POST, "/repos/{owner}/{repo}/pulls/comments/{comment_id}/reactions")
    GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER = (HttpMethod.GET, "/repos/{owner}/{repo}/pulls/{pull_number}")
    PATCH_REPOS_OWNER_REPO_PULLS_PULL_NUMBER = (HttpMethod.PATCH, "/repos/{owner}/{repo}/pulls/{pull_number}")
    GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_COMMITS = (HttpMethod.GET, "/repos/{owner}/{repo}/pulls/{pull_number}/commits")
    GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_FILES = (HttpMethod.GET, "/repos/{owner}/{repo}/pulls/{pull_number}/files")
    GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_MERGE = (HttpMethod.GET, "/repos/{owner}/{repo}/pulls/{pull_number}/merge")
    PUT_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_MERGE = (HttpMethod.PUT, "/repos/{owner}/{repo}/pulls/{pull_number}/merge")
    GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REQUESTED_REVIEWERS = (HttpMethod.GET, "/repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers")
    POST_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REQUESTED_REVIEWERS = (HttpMethod.POST, "/repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers")
    DELETE_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REQUESTED_REVIEWERS = (HttpMethod.DELETE, "/repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers")
    GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS = (HttpMethod.GET, "/repos/{owner}/{repo}/pulls/{pull_number}/reviews")
    POST_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS = (HttpMethod.POST, "/repos/{owner}/{repo}/pulls/{pull_number}/reviews")
    GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS_REVIEW_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}")
    PUT_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS_REVIEW_ID = (HttpMethod.PUT, "/repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}")
    DELETE_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS_REVIEW_ID = (HttpMethod.DELETE, "/repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}")
    PUT_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS_REVIEW_ID_DISMISSALS = (HttpMethod.PUT, "/repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}/dismissals")
    POST_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS_REVIEW_ID_EVENTS = (HttpMethod.POST, "/repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}/events")
    GET_REPOS_OWNER_REPO_README = (HttpMethod.GET, "/repos/{owner}/{repo}/readme")
    GET_REPOS_OWNER_REPO_README_DIR = (HttpMethod.GET, "/repos/{owner}/{repo}/readme/{dir}")
    GET_REPOS_OWNER_REPO_RELEASES = (HttpMethod.GET, "/repos/{owner}/{repo}/releases")
    POST_REPOS_OWNER_REPO_RELEASES = (HttpMethod.POST, "/repos/{owner}/{repo}/releases")
    GET_REPOS_OWNER_REPO_RELEASES_ASSETS_ASSET_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/releases/assets/{asset_id}")
    PATCH_REPOS_OWNER_REPO_RELEASES_ASSETS_ASSET_ID = (HttpMethod.PATCH, "/repos/{owner}/{repo}/releases/assets/{asset_id}")
    DELETE_REPOS_OWNER_REPO_RELEASES_ASSETS_ASSET_ID = (HttpMethod.DELETE, "/repos/{owner}/{repo}/releases/assets/{asset_id}")
    POST_REPOS_OWNER_REPO_RELEASES_GENERATE_NOTES = (HttpMethod.POST, "/repos/{owner}/{repo}/releases/generate-notes")
    GET_REPOS_OWNER_REPO_RELEASES_LATEST = (HttpMethod.GET, "/repos/{owner}/{repo}/releases/latest")
    GET_REPOS_OWNER_REPO_RELEASES_TAGS_TAG = (HttpMethod.GET, "/repos/{owner}/{repo}/releases/tags/{tag}")
    GET_REPOS_OWNER_REPO_RELEASES_RELEASE_ID = (HttpMethod.GET, "/repos/{owner}/{repo}/releases/{release_id}")
    PATCH_REPOS_OWNER_REPO_RELEASES_RELEASE_ID = (HttpMethod.PATCH, "/repos/{owner}/{repo}/releases/{release_id}")
    DELETE_REPOS_OWNER_REPO_RELEASES_RELEASE_ID = (HttpMethod.DELETE, "/repos/{owner}/{repo}/releases/{release_id}")
    GET_REPOS_OWNER_REPO_RELEASES_RELEASE_ID_ASSETS = (HttpMethod.GET, "/repos/{owner}/{repo}/releases/{release_id}/assets")
    POST_REPOS_OWNER_REPO_RELEASES_RELEASE_ID_REACTIONS = (HttpMethod.POST, "/repos/{owner}/{repo}/releases/{release_id}/reactions")
    GET_REPOS_OWNER_REPO_SECRET_SCANNING_ALERTS_ALERT_NUMBER = (HttpMethod.GET, "/repos/{owner}/{repo}/secret-scanning/alerts/{alert_number}")
    PATCH_REPOS_OWNER_REPO_SECRET_SCANNING_ALERTS_ALERT_NUMBER = (HttpMethod.PATCH, "/repos/{owner}/{repo}/secret-scanning/alerts/{alert_number}")
    GET_REPOS_OWNER_REPO_STARGAZERS = (HttpMethod.GET, "/repos/{owner}/{repo}/stargazers")
    GET_REPOS_OWNER_REPO_STATS_PARTICIPATION = (HttpMethod.GET, "/repos/{owner}/{repo}/stats/participation")
    POST_REPOS_OWNER_REPO_STATUSES_SHA = (HttpMethod.POST, "/repos/{owner}/{repo}/statuses/{sha}")
    GET_REPOS_OWNER_REPO_SUBSCRIBERS = (HttpMethod.GET, "/repos/{owner}/{repo}/subscribers")
    GET_REPOS_OWNER_REPO_SUBSCRIPTION = (HttpMethod.GET, "/repos/{owner}/{repo}/subscription")
    PUT_REPOS_OWNER_REPO_SUBSCRIPTION = (HttpMethod.PUT, "/repos/{owner}/{repo}/subscription")
    DELETE_REPOS_OWNER_REPO_SUBSCRIPTION = (HttpMethod.DELETE, "/repos/{owner}/{repo}/subscription")
    GET_REPOS_OWNER_REPO_TAGS = (HttpMethod.GET, "/repos/{owner}/{repo}/tags")
    GET_REPOS_OWNER_REPO_TOPICS = (HttpMethod.GET, "/repos/{owner}/{repo}/topics")
    PUT_REPOS_OWNER_REPO_TOPICS = (HttpMethod.PUT, "/repos/{owner}/{repo}/topics")
    GET_REPOS_OWNER_REPO_TRAFFIC_CLONES = (HttpMethod.GET, "/repos/{owner}/{repo}/traffic/clones")
    GET_REPOS_OWNER_REPO_TRAFFIC_VIEWS = (HttpMethod.GET, "/repos/{owner}/{repo}/traffic/views")
    GET_REPOSITORIES = (HttpMethod.GET, "/repositories")
    GET_REPOSITORIES_REPOSITORY_ID_ENVIRONMENTS_ENVIRONMENT_NAME_SECRETS = (HttpMethod.GET, "/repositories/{repository_id}/environments/{environment_name}/secrets")
    GET_REPOSITORIES_REPOSITORY_ID_ENVIRONMENTS_ENVIRONMENT_NAME_SECRETS_PUBLIC_KEY = (HttpMethod.GET, "/repositories/{repository_id}/environments/{environment_name}/secrets/public-key")
    GET_REPOSITORIES_REPOSITORY_ID_ENVIRONMENTS_ENVIRONMENT_NAME_SECRETS_SECRET_NAME = (HttpMethod.GET, "/repositories/{repository_id}/environments/{environment_name}/secrets/{secret_name}")
    GET_SCIM_V2_ENTERPRISES_ENTERPRISE_GROUPS = (HttpMethod.GET, "/scim/v2/enterprises/{enterprise}/Groups")
    GET_SCIM_V2_ENTERPRISES_ENTERPRISE_GROUPS_SCIM_GROUP_ID = (HttpMethod.GET, "/scim/v2/enterprises/{enterprise}/Groups/{scim_group_id}")
    PUT_SCIM_V2_ENTERPRISES_ENTERPRISE_GROUPS_SCIM_GROUP_ID = (HttpMethod.PUT, "/scim/v2/enterprises/{enterprise}/Groups/{scim_group_id}")
    PATCH_SCIM_V2_ENTERPRISES_ENTERPRISE_GROUPS_SCIM_GROUP_ID = (HttpMethod.PATCH, "/scim/v2/enterprises/{enterprise}/Groups/{scim_group_id}")
    GET_SCIM_V2_ENTERPRISES_ENTERPRISE_USERS = (HttpMethod.GET, "/scim/v2/enterprises/{enterprise}/Users")
    GET_SCIM_V2_ENTERPRISES_ENTERPRISE_USERS_SCIM_USER_ID = (HttpMethod.GET, "/scim/v2/enterprises/{enterprise}/Users/{scim_user_id}")
    PUT_SCIM_V2_ENTERPRISES_ENTERPRISE_USERS_SCIM_USER_ID = (HttpMethod.PUT, "/scim/v2/enterprises/{enterprise}/Users/{scim_user_id}")
    PATCH_SCIM_V2_ENTERPRISES_ENTERPRISE_USERS_SCIM_USER_ID = (HttpMethod.PATCH, "/scim/v2/enterprises/{enterprise}/Users/{scim_user_id}")
    GET_SEARCH_CODE = (HttpMethod.GET, "/search/code")
    GET_SEARCH_COMMITS = (HttpMethod.GET, "/search/commits")
    GET_SEARCH_ISSUES = (HttpMethod.GET, "/search/issues")
    GET_SEARCH_LABELS = (HttpMethod.GET, "/search/labels")
    GET_SEARCH_REPOSITORIES = (HttpMethod.GET, "/search/repositories")
    GET_SEARCH_TOPICS = (HttpMethod.GET, "/search/topics")
    GET_SEARCH_USERS = (HttpMethod.GET, "/search/users")
    GET_TEAMS_TEAM_ID = (HttpMethod.GET, "/teams/{team_id}")
    PATCH_TEAMS_TEAM_ID = (HttpMethod.PATCH, "/teams/{team_id}")
    GET_TEAMS_TEAM_ID_DISCUSSIONS_DISCUSSION_NUMBER = (HttpMethod.GET, "/teams/{team_id}/discussions/{discussion_number}")
    PATCH_TEAMS_TEAM_ID_DISCUSSIONS_DISCUSSION_NUMBER = (HttpMethod.PATCH, "/teams/{team_id}/discussions/{discussion_number}")
    GET_TEAMS_TEAM_ID_DISCUSSIONS_DISCUSSION_NUMBER_COMMENTS_COMMENT_NUMBER = (HttpMethod.GET, "/teams/{team_id}/discussions/{discussion_number}/comments/{comment_number}")
    PATCH_TEAMS_TEAM_ID_DISCUSSIONS_DISCUSSION_NUMBER_COMMENTS_COMMENT_NUMBER = (HttpMethod.PATCH, "/teams/{team_id}/discussions/{discussion_number}/comments/{comment_number}")
    GET_TEAMS_TEAM_ID_MEMBERSHIPS_USERNAME = (HttpMethod.GET, "/teams/{team_id}/memberships/{username}")
    PUT_TEAMS_TEAM_ID_MEMBERSHIPS_USERNAME = (HttpMethod.PUT, "/teams/{team_id}/memberships/{username}")
    GET_TEAMS_TEAM_ID_PROJECTS_PROJECT_ID = (HttpMethod.GET, "/teams/{team_id}/projects/{project_id}")
    GET_TEAMS_TEAM_ID_REPOS_OWNER_REPO = (HttpMethod.GET, "/teams/{team_id}/repos/{owner}/{repo}")
    GET_TEAMS_TEAM_ID_TEAM_SYNC_GROUP_MAPPINGS = (HttpMethod.GET, "/teams/{team_id}/team-sync/group-mappings")
    PATCH_TEAMS_TEAM_ID_TEAM_SYNC_GROUP_MAPPINGS = (HttpMethod.PATCH, "/teams/{team_id}/team-sync/group-mappings")
    GET_USER = (HttpMethod.GET, "/user")
    PATCH_USER = (HttpMethod.PATCH, "/user")
    GET_USER_CODESPACES = (HttpMethod.GET, "/user/codespaces")
    GET_USER_CODESPACES_SECRETS = (HttpMethod.GET, "/user/codespaces/secrets")
    GET_USER_CODESPACES_SECRETS_PUBLIC_KEY = (HttpMethod.GET, "/user/codespaces/secrets/public-key")
    GET_USER_CODESPACES_SECRETS_SECRET_NAME = (HttpMethod.GET, "/user/codespaces/secrets/{secret_name}")
    GET_USER_CODESPACES_SECRETS_SECRET_NAME_REPOSITORIES = (HttpMethod.GET, "/user/codespaces/secrets/{secret_name}/repositories")
    GET_USER_CODESPACES_CODESPACE_NAME = (HttpMethod.GET, "/user/codespaces/{codespace_name}")
    PATCH_USER_CODESPACES_CODESPACE_NAME = (HttpMethod.PATCH, "/user/codespaces/{codespace_name}")
    GET_USER_CODESPACES_CODESPACE_NAME_MACHINES = (HttpMethod.GET, "/user/codespaces/{codespace_name}/machines")
    POST_USER_CODESPACES_CODESPACE_NAME_START = (HttpMethod.POST, "/user/codespaces/{codespace_name}/start")
    POST_USER_CODESPACES_CODESPACE_NAME_STOP = (HttpMethod.POST, "/user/codespaces/{codespace_name}/stop")
    GET_USER_EMAILS = (HttpMethod.GET, "/user/emails")
    GET_USER_FOLLOWERS = (HttpMethod.GET, "/user/followers")
    GET_USER_FOLLOWING = (HttpMethod.GET, "/user/following")
    PUT_USER_FOLLOWING_USERNAME = (HttpMethod.PUT, "/user/following/{username}")
    DELETE_USER_FOLLOWING_USERNAME = (HttpMethod.DELETE, "/user/following/{username}")
    GET_USER_GPG_KEYS = (HttpMethod.GET, "/user/gpg_keys")
    GET_USER_GPG_KEYS_GPG_KEY_ID = (HttpMethod.GET, "/user/gpg_keys/{gpg_key_id}")
    DELETE_USER_GPG_KEYS_GPG_KEY_ID = (HttpMethod.DELETE, "/user/gpg_keys/{gpg_key_id}")
    GET_USER_INSTALLATIONS = (HttpMethod.GET, "/user/installations")
    GET_USER_INSTALLATIONS_INSTALLATION_ID_REPOSITORIES = (HttpMethod.GET, "/user/installations/{installation_id}/repositories")
    PUT_USER_INTERACTION_LIMITS = (HttpMethod.PUT, "/user/interaction-limits")
    GET_USER_ISSUES = (HttpMethod.GET, "/user/issues")
    GET_USER_KEYS = (HttpMethod.GET, "/user/keys")
    POST_USER_KEYS = (HttpMethod.POST, "/user/keys")
    GET_USER_KEYS_KEY_ID = (HttpMethod.GET, "/user/keys/{key_id}")
    DELETE_USER_KEYS_KEY_ID = (HttpMethod.DELETE, "/user/keys/{key_id}")
    GET_USER_MEMBERSHIPS_ORGS_ORG = (HttpMethod.GET, "/user/memberships/orgs/{org}")
    PATCH_USER_MEMBERSHIPS_ORGS_ORG = (HttpMethod.PATCH, "/user/memberships/orgs/{org}")
    GET_USER_MIGRATIONS_MIGRATION_ID = (HttpMethod.GET, "/user/migrations/{migration_id}")
    GET_USER_ORGS = (HttpMethod.GET, "/user/orgs")
    GET_USER_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME = (HttpMethod.GET, "/user/packages/{package_type}/{package_name}")
    GET_USER_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME_VERSIONS_PACKAGE_VERSION_ID = (HttpMethod.GET, "/user/packages/{package_type}/{package_name}/versions/{package_version_id}")
    GET_USER_REPOS = (HttpMethod.GET, "/user/repos")
    POST_USER_REPOS = (HttpMethod.POST, "/user/repos")
    GET_USER_STARRED = (HttpMethod.GET, "/user/starred")
    PUT_USER_STARRED_OWNER_REPO = (HttpMethod.PUT, "/user/starred/{owner}/{repo}")
    DELETE_USER_STARRED_OWNER_REPO = (HttpMethod.DELETE, "/user/starred/{owner}/{repo}")
    GET_USERS = (HttpMethod.GET, "/users")
    GET_USERS_USERNAME = (HttpMethod.GET, "/users/{username}")
    GET_USERS_USERNAME_EVENTS = (HttpMethod.GET, "/users/{username}/events")
    GET_USERS_USERNAME_FOLLOWERS = (HttpMethod.GET, "/users/{username}/followers")
    GET_USERS_USERNAME_FOLLOWING = (HttpMethod.GET, "/users/{username}/following")
    GET_USERS_USERNAME_GISTS = (HttpMethod.GET, "/users/{username}/gists")
    GET_USERS_USERNAME_HOVERCARD = (HttpMethod.GET, "/users/{username}/hovercard")
    GET_USERS_USERNAME_INSTALLATION = (HttpMethod.GET, "/users/{username}/installation")
    GET_USERS_USERNAME_KEYS = (HttpMethod.GET, "/users/{username}/keys")
    GET_USERS_USERNAME_ORGS = (HttpMethod.GET, "/users/{username}/orgs")
    GET_USERS_USERNAME_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME = (HttpMethod.GET, "/users/{username}/packages/{package_type}/{package_name}")
    GET_USERS_USERNAME_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME_VERSIONS_PACKAGE_VERSION_ID = (HttpMethod.GET, "/users/{username}/packages/{package_type}/{package_name}/versions/{package_version_id}")
    GET_USERS_USERNAME_REPOS = (HttpMethod.GET, "/users/{username}/repos")
    GET_USERS_USERNAME_SETTINGS_BILLING_ACTIONS = (HttpMethod.GET, "/users/{username}/settings/billing/actions")
    GET_USERS_USERNAME_SETTINGS_BILLING_PACKAGES = (HttpMethod.GET, "/users/{username}/settings/billing/packages")
    GET_USERS_USERNAME_SETTINGS_BILLING_SHARED_STORAGE = (HttpMethod.GET, "/users/{username}/settings/billing/shared-storage")
    GET_USERS_USERNAME_STARRED = (HttpMethod.GET, "/users/{username}/starred")
    GET_ZEN = (HttpMethod.GET, "/zen")
