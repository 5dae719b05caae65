"""
Response models for the GitHub REST API.

Each class is named after the OpenAPI component schema it mirrors
(``full-repository`` -> ``FullRepository``); the code generator uses these
names to pick the default result type of each route. Fields GitHub always
returns are required, everything else is optional, and unknown fields are
kept as extras so that dumping and re-validating a model is lossless.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict  # type: ignore


class GitHubModel(BaseModel):
    model_config = ConfigDict(extra="allow")


# Users, apps and installations

class SimpleUser(GitHubModel):
    login: str
    id: int
    node_id: Optional[str] = None
    avatar_url: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    type: Optional[str] = None
    site_admin: Optional[bool] = None


class PrivateUser(SimpleUser):
    name: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    public_repos: Optional[int] = None
    followers: Optional[int] = None
    following: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    two_factor_authentication: Optional[bool] = None
    plan: Optional[Dict[str, Any]] = None


class PublicUser(SimpleUser):
    name: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    public_repos: Optional[int] = None
    followers: Optional[int] = None
    following: Optional[int] = None
    created_at: Optional[str] = None


class Hovercard(GitHubModel):
    contexts: List[Dict[str, Any]]


class Key(GitHubModel):
    id: int
    key: str
    url: Optional[str] = None
    title: Optional[str] = None
    created_at: Optional[str] = None
    verified: Optional[bool] = None
    read_only: Optional[bool] = None


class GpgKey(GitHubModel):
    id: int
    key_id: Optional[str] = None
    public_key: Optional[str] = None
    emails: Optional[List[Dict[str, Any]]] = None
    can_sign: Optional[bool] = None
    created_at: Optional[str] = None
    expires_at: Optional[str] = None


class Integration(GitHubModel):
    id: int
    name: str
    slug: Optional[str] = None
    node_id: Optional[str] = None
    owner: Optional[SimpleUser] = None
    description: Optional[str] = None
    external_url: Optional[str] = None
    html_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    permissions: Optional[Dict[str, str]] = None
    events: Optional[List[str]] = None
    installations_count: Optional[int] = None


class WebhookConfig(GitHubModel):
    url: Optional[str] = None
    content_type: Optional[str] = None
    secret: Optional[str] = None
    insecure_ssl: Optional[Union[str, int]] = None


class HookDelivery(GitHubModel):
    id: int
    guid: str
    delivered_at: Optional[str] = None
    redelivery: Optional[bool] = None
    duration: Optional[float] = None
    status: Optional[str] = None
    status_code: Optional[int] = None
    event: Optional[str] = None
    action: Optional[str] = None
    installation_id: Optional[int] = None
    repository_id: Optional[int] = None
    url: Optional[str] = None
    request: Optional[Dict[str, Any]] = None
    response: Optional[Dict[str, Any]] = None


class Installation(GitHubModel):
    id: int
    account: Optional[Dict[str, Any]] = None
    repository_selection: Optional[str] = None
    access_tokens_url: Optional[str] = None
    repositories_url: Optional[str] = None
    html_url: Optional[str] = None
    app_id: Optional[int] = None
    app_slug: Optional[str] = None
    target_id: Optional[int] = None
    target_type: Optional[str] = None
    permissions: Optional[Dict[str, str]] = None
    events: Optional[List[str]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    suspended_at: Optional[str] = None


class InstallationToken(GitHubModel):
    token: str
    expires_at: str
    permissions: Optional[Dict[str, str]] = None
    repository_selection: Optional[str] = None
    repositories: Optional[List[Dict[str, Any]]] = None


class ApplicationGrant(GitHubModel):
    id: int
    url: Optional[str] = None
    app: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    scopes: Optional[List[str]] = None
    user: Optional[SimpleUser] = None


class Authorization(GitHubModel):
    id: int
    url: Optional[str] = None
    scopes: Optional[List[str]] = None
    token: Optional[str] = None
    token_last_eight: Optional[str] = None
    hashed_token: Optional[str] = None
    app: Optional[Dict[str, Any]] = None
    note: Optional[str] = None
    note_url: Optional[str] = None
    fingerprint: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    expires_at: Optional[str] = None
    user: Optional[SimpleUser] = None


class MarketplacePurchase(GitHubModel):
    id: int
    login: str
    url: Optional[str] = None
    type: Optional[str] = None
    organization_billing_email: Optional[str] = None
    email: Optional[str] = None
    marketplace_pending_change: Optional[Dict[str, Any]] = None
    marketplace_purchase: Optional[Dict[str, Any]] = None


# Meta and miscellaneous

class ApiOverview(GitHubModel):
    verifiable_password_authentication: bool
    ssh_key_fingerprints: Optional[Dict[str, str]] = None
    ssh_keys: Optional[List[str]] = None
    hooks: Optional[List[str]] = None
    web: Optional[List[str]] = None
    api: Optional[List[str]] = None
    git: Optional[List[str]] = None
    packages: Optional[List[str]] = None
    pages: Optional[List[str]] = None
    importer: Optional[List[str]] = None
    actions: Optional[List[str]] = None
    dependabot: Optional[List[str]] = None


class RateLimit(GitHubModel):
    limit: int
    remaining: int
    reset: int
    used: int


class RateLimitOverview(GitHubModel):
    resources: Dict[str, RateLimit]
    rate: RateLimit


class CodeOfConduct(GitHubModel):
    key: str
    name: str
    url: Optional[str] = None
    body: Optional[str] = None
    html_url: Optional[str] = None


class GitignoreTemplate(GitHubModel):
    name: str
    source: str


class License(GitHubModel):
    key: str
    name: str
    spdx_id: Optional[str] = None
    url: Optional[str] = None
    node_id: Optional[str] = None
    html_url: Optional[str] = None
    description: Optional[str] = None
    implementation: Optional[str] = None
    permissions: Optional[List[str]] = None
    conditions: Optional[List[str]] = None
    limitations: Optional[List[str]] = None
    body: Optional[str] = None
    featured: Optional[bool] = None


class Feed(GitHubModel):
    timeline_url: str
    user_url: str
    current_user_public_url: Optional[str] = None
    current_user_url: Optional[str] = None
    current_user_actor_url: Optional[str] = None
    current_user_organization_url: Optional[str] = None
    current_user_organization_urls: Optional[List[str]] = None
    security_advisories_url: Optional[str] = None


class Thread(GitHubModel):
    id: str
    repository: Optional[Dict[str, Any]] = None
    subject: Optional[Dict[str, Any]] = None
    reason: Optional[str] = None
    unread: Optional[bool] = None
    updated_at: Optional[str] = None
    last_read_at: Optional[str] = None
    url: Optional[str] = None
    subscription_url: Optional[str] = None


class ThreadSubscription(GitHubModel):
    subscribed: bool
    ignored: bool
    reason: Optional[str] = None
    created_at: Optional[str] = None
    url: Optional[str] = None
    thread_url: Optional[str] = None
    repository_url: Optional[str] = None


class InteractionLimitResponse(GitHubModel):
    limit: str
    origin: str
    expires_at: str


# Billing

class ActionsBillingUsage(GitHubModel):
    total_minutes_used: int
    total_paid_minutes_used: int
    included_minutes: int
    minutes_used_breakdown: Optional[Dict[str, Any]] = None


class AdvancedSecurityActiveCommitters(GitHubModel):
    total_advanced_security_committers: Optional[int] = None
    repositories: List[Dict[str, Any]]


class PackagesBillingUsage(GitHubModel):
    total_gigabytes_bandwidth_used: int
    total_paid_gigabytes_bandwidth_used: int
    included_gigabytes_bandwidth: int


class CombinedBillingUsage(GitHubModel):
    days_left_in_billing_cycle: int
    estimated_paid_storage_for_month: int
    estimated_storage_for_month: int


# Gists

class GistSimple(GitHubModel):
    id: str
    url: Optional[str] = None
    node_id: Optional[str] = None
    html_url: Optional[str] = None
    git_pull_url: Optional[str] = None
    git_push_url: Optional[str] = None
    files: Optional[Dict[str, Any]] = None
    public: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    description: Optional[str] = None
    comments: Optional[int] = None
    owner: Optional[SimpleUser] = None
    truncated: Optional[bool] = None


class GistComment(GitHubModel):
    id: int
    body: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    user: Optional[SimpleUser] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    author_association: Optional[str] = None


# Organizations and teams

class OrganizationFull(GitHubModel):
    login: str
    id: int
    node_id: Optional[str] = None
    url: Optional[str] = None
    repos_url: Optional[str] = None
    hooks_url: Optional[str] = None
    members_url: Optional[str] = None
    avatar_url: Optional[str] = None
    description: Optional[str] = None
    name: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    is_verified: Optional[bool] = None
    public_repos: Optional[int] = None
    followers: Optional[int] = None
    following: Optional[int] = None
    html_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    type: Optional[str] = None
    plan: Optional[Dict[str, Any]] = None


class OrgHook(GitHubModel):
    id: int
    name: str
    url: Optional[str] = None
    ping_url: Optional[str] = None
    deliveries_url: Optional[str] = None
    events: Optional[List[str]] = None
    active: Optional[bool] = None
    config: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    type: Optional[str] = None


class OrgMembership(GitHubModel):
    state: str
    role: str
    url: Optional[str] = None
    organization_url: Optional[str] = None
    organization: Optional[Dict[str, Any]] = None
    user: Optional[SimpleUser] = None
    permissions: Optional[Dict[str, Any]] = None


class Migration(GitHubModel):
    id: int
    guid: str
    state: str
    owner: Optional[SimpleUser] = None
    lock_repositories: Optional[bool] = None
    exclude_attachments: Optional[bool] = None
    exclude_releases: Optional[bool] = None
    exclude_owner_projects: Optional[bool] = None
    repositories: Optional[List[Dict[str, Any]]] = None
    url: Optional[str] = None
    archive_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    node_id: Optional[str] = None


class TeamFull(GitHubModel):
    id: int
    name: str
    slug: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    description: Optional[str] = None
    privacy: Optional[str] = None
    permission: Optional[str] = None
    members_url: Optional[str] = None
    repositories_url: Optional[str] = None
    parent: Optional[Dict[str, Any]] = None
    members_count: Optional[int] = None
    repos_count: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    organization: Optional[Dict[str, Any]] = None


class TeamMembership(GitHubModel):
    role: str
    state: str
    url: Optional[str] = None


class TeamDiscussion(GitHubModel):
    number: int
    title: str
    body: Optional[str] = None
    author: Optional[SimpleUser] = None
    body_html: Optional[str] = None
    body_version: Optional[str] = None
    comments_count: Optional[int] = None
    comments_url: Optional[str] = None
    created_at: Optional[str] = None
    last_edited_at: Optional[str] = None
    html_url: Optional[str] = None
    node_id: Optional[str] = None
    pinned: Optional[bool] = None
    private: Optional[bool] = None
    team_url: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None
    reactions: Optional[Dict[str, Any]] = None


class TeamDiscussionComment(GitHubModel):
    number: int
    body: str
    author: Optional[SimpleUser] = None
    body_html: Optional[str] = None
    body_version: Optional[str] = None
    created_at: Optional[str] = None
    last_edited_at: Optional[str] = None
    discussion_url: Optional[str] = None
    html_url: Optional[str] = None
    node_id: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None
    reactions: Optional[Dict[str, Any]] = None


class GroupMapping(GitHubModel):
    groups: Optional[List[Dict[str, Any]]] = None


class ExternalGroup(GitHubModel):
    group_id: int
    group_name: str
    updated_at: Optional[str] = None
    teams: List[Dict[str, Any]]
    members: List[Dict[str, Any]]


class ExternalGroups(GitHubModel):
    groups: Optional[List[Dict[str, Any]]] = None


class Reaction(GitHubModel):
    id: int
    content: str
    node_id: Optional[str] = None
    user: Optional[SimpleUser] = None
    created_at: Optional[str] = None


# Projects (classic)

class Project(GitHubModel):
    id: int
    name: str
    number: Optional[int] = None
    owner_url: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    columns_url: Optional[str] = None
    node_id: Optional[str] = None
    body: Optional[str] = None
    state: Optional[str] = None
    creator: Optional[SimpleUser] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    organization_permission: Optional[str] = None
    private: Optional[bool] = None


class TeamProject(Project):
    permissions: Optional[Dict[str, bool]] = None


class ProjectColumn(GitHubModel):
    id: int
    name: str
    url: Optional[str] = None
    project_url: Optional[str] = None
    cards_url: Optional[str] = None
    node_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ProjectCard(GitHubModel):
    id: int
    url: Optional[str] = None
    node_id: Optional[str] = None
    note: Optional[str] = None
    creator: Optional[SimpleUser] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    archived: Optional[bool] = None
    column_url: Optional[str] = None
    content_url: Optional[str] = None
    project_url: Optional[str] = None


class ProjectCollaboratorPermission(GitHubModel):
    permission: str
    user: Optional[SimpleUser] = None


# Packages

class Package(GitHubModel):
    id: int
    name: str
    package_type: str
    url: Optional[str] = None
    html_url: Optional[str] = None
    version_count: Optional[int] = None
    visibility: Optional[str] = None
    owner: Optional[SimpleUser] = None
    repository: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class PackageVersion(GitHubModel):
    id: int
    name: str
    url: Optional[str] = None
    package_html_url: Optional[str] = None
    html_url: Optional[str] = None
    license: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


# Repositories

class Repository(GitHubModel):
    id: int
    name: str
    full_name: str
    node_id: Optional[str] = None
    owner: Optional[SimpleUser] = None
    private: Optional[bool] = None
    html_url: Optional[str] = None
    description: Optional[str] = None
    fork: Optional[bool] = None
    url: Optional[str] = None
    homepage: Optional[str] = None
    language: Optional[str] = None
    forks_count: Optional[int] = None
    stargazers_count: Optional[int] = None
    watchers_count: Optional[int] = None
    size: Optional[int] = None
    default_branch: Optional[str] = None
    open_issues_count: Optional[int] = None
    is_template: Optional[bool] = None
    topics: Optional[List[str]] = None
    has_issues: Optional[bool] = None
    has_projects: Optional[bool] = None
    has_wiki: Optional[bool] = None
    has_pages: Optional[bool] = None
    archived: Optional[bool] = None
    disabled: Optional[bool] = None
    visibility: Optional[str] = None
    pushed_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    permissions: Optional[Dict[str, bool]] = None


class FullRepository(Repository):
    subscribers_count: Optional[int] = None
    network_count: Optional[int] = None
    license: Optional[Dict[str, Any]] = None
    organization: Optional[SimpleUser] = None
    parent: Optional[Repository] = None
    source: Optional[Repository] = None
    allow_rebase_merge: Optional[bool] = None
    allow_squash_merge: Optional[bool] = None
    allow_merge_commit: Optional[bool] = None
    allow_auto_merge: Optional[bool] = None
    delete_branch_on_merge: Optional[bool] = None


class TeamRepository(Repository):
    role_name: Optional[str] = None


class RepositoryCollaboratorPermission(GitHubModel):
    permission: str
    role_name: Optional[str] = None
    user: Optional[SimpleUser] = None


class RepositoryInvitation(GitHubModel):
    id: int
    repository: Optional[Dict[str, Any]] = None
    invitee: Optional[SimpleUser] = None
    inviter: Optional[SimpleUser] = None
    permissions: Optional[str] = None
    created_at: Optional[str] = None
    expired: Optional[bool] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    node_id: Optional[str] = None


class RepositorySubscription(GitHubModel):
    subscribed: bool
    ignored: bool
    reason: Optional[str] = None
    created_at: Optional[str] = None
    url: Optional[str] = None
    repository_url: Optional[str] = None


class Topic(GitHubModel):
    names: List[str]


class CommunityProfile(GitHubModel):
    health_percentage: int
    description: Optional[str] = None
    documentation: Optional[str] = None
    files: Optional[Dict[str, Any]] = None
    updated_at: Optional[str] = None
    content_reports_enabled: Optional[bool] = None


class ParticipationStats(GitHubModel):
    all: List[int]
    owner: List[int]


class CloneTraffic(GitHubModel):
    count: int
    uniques: int
    clones: List[Dict[str, Any]]


class ViewTraffic(GitHubModel):
    count: int
    uniques: int
    views: List[Dict[str, Any]]


class Autolink(GitHubModel):
    id: int
    key_prefix: str
    url_template: str
    is_alphanumeric: Optional[bool] = None


class DeployKey(GitHubModel):
    id: int
    key: str
    url: Optional[str] = None
    title: Optional[str] = None
    verified: Optional[bool] = None
    created_at: Optional[str] = None
    read_only: Optional[bool] = None


class Hook(GitHubModel):
    id: int
    name: str
    type: Optional[str] = None
    active: Optional[bool] = None
    events: Optional[List[str]] = None
    config: Optional[Dict[str, Any]] = None
    updated_at: Optional[str] = None
    created_at: Optional[str] = None
    url: Optional[str] = None
    test_url: Optional[str] = None
    ping_url: Optional[str] = None
    deliveries_url: Optional[str] = None
    last_response: Optional[Dict[str, Any]] = None


class Import(GitHubModel):
    vcs: Optional[str] = None
    vcs_url: str
    use_lfs: Optional[bool] = None
    status: str
    status_text: Optional[str] = None
    failed_step: Optional[str] = None
    error_message: Optional[str] = None
    import_percent: Optional[int] = None
    commit_count: Optional[int] = None
    push_percent: Optional[int] = None
    has_large_files: Optional[bool] = None
    large_files_size: Optional[int] = None
    large_files_count: Optional[int] = None
    authors_count: Optional[int] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    authors_url: Optional[str] = None
    repository_url: Optional[str] = None


class PorterAuthor(GitHubModel):
    id: int
    remote_id: str
    remote_name: str
    email: str
    name: str
    url: Optional[str] = None
    import_url: Optional[str] = None


class Environment(GitHubModel):
    id: int
    name: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    protection_rules: Optional[List[Dict[str, Any]]] = None
    deployment_branch_policy: Optional[Dict[str, Any]] = None


class Deployment(GitHubModel):
    id: int
    sha: str
    ref: str
    task: Optional[str] = None
    url: Optional[str] = None
    node_id: Optional[str] = None
    payload: Optional[Union[Dict[str, Any], str]] = None
    original_environment: Optional[str] = None
    environment: Optional[str] = None
    description: Optional[str] = None
    creator: Optional[SimpleUser] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    statuses_url: Optional[str] = None
    repository_url: Optional[str] = None
    transient_environment: Optional[bool] = None
    production_environment: Optional[bool] = None


class DeploymentStatus(GitHubModel):
    id: int
    state: str
    url: Optional[str] = None
    node_id: Optional[str] = None
    creator: Optional[SimpleUser] = None
    description: Optional[str] = None
    environment: Optional[str] = None
    target_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    deployment_url: Optional[str] = None
    repository_url: Optional[str] = None
    environment_url: Optional[str] = None
    log_url: Optional[str] = None


# Branches and protection

class BranchWithProtection(GitHubModel):
    name: str
    commit: Dict[str, Any]
    protected: bool
    protection: Optional[Dict[str, Any]] = None
    protection_url: Optional[str] = None
    pattern: Optional[str] = None
    required_approving_review_count: Optional[int] = None


class BranchProtection(GitHubModel):
    url: Optional[str] = None
    enabled: Optional[bool] = None
    required_status_checks: Optional[Dict[str, Any]] = None
    enforce_admins: Optional[Dict[str, Any]] = None
    required_pull_request_reviews: Optional[Dict[str, Any]] = None
    restrictions: Optional[Dict[str, Any]] = None
    required_linear_history: Optional[Dict[str, Any]] = None
    allow_force_pushes: Optional[Dict[str, Any]] = None
    allow_deletions: Optional[Dict[str, Any]] = None
    required_conversation_resolution: Optional[Dict[str, Any]] = None
    required_signatures: Optional[Dict[str, Any]] = None
    name: Optional[str] = None
    protection_url: Optional[str] = None


class ProtectedBranch(GitHubModel):
    url: str
    required_status_checks: Optional[Dict[str, Any]] = None
    required_pull_request_reviews: Optional[Dict[str, Any]] = None
    required_signatures: Optional[Dict[str, Any]] = None
    enforce_admins: Optional[Dict[str, Any]] = None
    required_linear_history: Optional[Dict[str, Any]] = None
    allow_force_pushes: Optional[Dict[str, Any]] = None
    allow_deletions: Optional[Dict[str, Any]] = None
    restrictions: Optional[Dict[str, Any]] = None
    required_conversation_resolution: Optional[Dict[str, Any]] = None


class ProtectedBranchAdminEnforced(GitHubModel):
    url: str
    enabled: bool


class ProtectedBranchPullRequestReview(GitHubModel):
    url: Optional[str] = None
    dismissal_restrictions: Optional[Dict[str, Any]] = None
    dismiss_stale_reviews: bool
    require_code_owner_reviews: bool
    required_approving_review_count: Optional[int] = None


class StatusCheckPolicy(GitHubModel):
    url: str
    strict: bool
    contexts: List[str]
    checks: Optional[List[Dict[str, Any]]] = None
    contexts_url: Optional[str] = None


class BranchRestrictionPolicy(GitHubModel):
    url: str
    users_url: str
    teams_url: str
    apps_url: str
    users: List[Dict[str, Any]]
    teams: List[Dict[str, Any]]
    apps: List[Dict[str, Any]]


# Commits, git data and contents

class GitUser(GitHubModel):
    name: Optional[str] = None
    email: Optional[str] = None
    date: Optional[str] = None


class Commit(GitHubModel):
    sha: str
    url: str
    node_id: Optional[str] = None
    html_url: Optional[str] = None
    comments_url: Optional[str] = None
    commit: Dict[str, Any]
    author: Optional[Dict[str, Any]] = None
    committer: Optional[Dict[str, Any]] = None
    parents: List[Dict[str, Any]]
    stats: Optional[Dict[str, int]] = None
    files: Optional[List[Dict[str, Any]]] = None


class CommitComment(GitHubModel):
    id: int
    body: str
    commit_id: str
    html_url: Optional[str] = None
    url: Optional[str] = None
    node_id: Optional[str] = None
    path: Optional[str] = None
    position: Optional[int] = None
    line: Optional[int] = None
    user: Optional[SimpleUser] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    author_association: Optional[str] = None
    reactions: Optional[Dict[str, Any]] = None


class CombinedCommitStatus(GitHubModel):
    state: str
    sha: str
    total_count: int
    statuses: List[Dict[str, Any]]
    repository: Optional[Dict[str, Any]] = None
    commit_url: Optional[str] = None
    url: Optional[str] = None


class CommitComparison(GitHubModel):
    url: Optional[str] = None
    html_url: Optional[str] = None
    permalink_url: Optional[str] = None
    diff_url: Optional[str] = None
    patch_url: Optional[str] = None
    base_commit: Optional[Commit] = None
    merge_base_commit: Optional[Commit] = None
    status: str
    ahead_by: int
    behind_by: int
    total_commits: int
    commits: List[Commit]
    files: Optional[List[Dict[str, Any]]] = None


class FileCommit(GitHubModel):
    content: Optional[Dict[str, Any]] = None
    commit: Dict[str, Any]


class ContentFile(GitHubModel):
    type: str
    name: str
    path: str
    sha: str
    size: Optional[int] = None
    encoding: Optional[str] = None
    content: Optional[str] = None
    url: Optional[str] = None
    git_url: Optional[str] = None
    html_url: Optional[str] = None
    download_url: Optional[str] = None
    target: Optional[str] = None
    submodule_git_url: Optional[str] = None


class LicenseContent(GitHubModel):
    name: str
    path: str
    sha: str
    size: Optional[int] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    git_url: Optional[str] = None
    download_url: Optional[str] = None
    type: Optional[str] = None
    content: Optional[str] = None
    encoding: Optional[str] = None
    license: Optional[Dict[str, Any]] = None


class Blob(GitHubModel):
    sha: str
    content: str
    encoding: str
    url: Optional[str] = None
    size: Optional[int] = None
    node_id: Optional[str] = None
    highlighted_content: Optional[str] = None


class GitCommit(GitHubModel):
    sha: str
    message: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    author: Optional[GitUser] = None
    committer: Optional[GitUser] = None
    tree: Optional[Dict[str, Any]] = None
    parents: Optional[List[Dict[str, Any]]] = None
    verification: Optional[Dict[str, Any]] = None


class GitRef(GitHubModel):
    ref: str
    object: Dict[str, Any]
    node_id: Optional[str] = None
    url: Optional[str] = None


class GitTag(GitHubModel):
    tag: str
    sha: str
    message: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    tagger: Optional[GitUser] = None
    object: Optional[Dict[str, Any]] = None
    verification: Optional[Dict[str, Any]] = None


class GitTree(GitHubModel):
    sha: str
    tree: List[Dict[str, Any]]
    url: Optional[str] = None
    truncated: Optional[bool] = None


class MergedUpstream(GitHubModel):
    message: Optional[str] = None
    merge_type: Optional[str] = None
    base_branch: Optional[str] = None


# Issues, labels and milestones

class Label(GitHubModel):
    id: int
    name: str
    color: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    default: Optional[bool] = None


class Milestone(GitHubModel):
    id: int
    number: int
    title: str
    state: str
    url: Optional[str] = None
    html_url: Optional[str] = None
    labels_url: Optional[str] = None
    node_id: Optional[str] = None
    description: Optional[str] = None
    creator: Optional[SimpleUser] = None
    open_issues: Optional[int] = None
    closed_issues: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    closed_at: Optional[str] = None
    due_on: Optional[str] = None


class Issue(GitHubModel):
    id: int
    number: int
    title: str
    state: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    repository_url: Optional[str] = None
    html_url: Optional[str] = None
    body: Optional[str] = None
    user: Optional[SimpleUser] = None
    labels: Optional[List[Union[Dict[str, Any], str]]] = None
    assignee: Optional[SimpleUser] = None
    assignees: Optional[List[SimpleUser]] = None
    milestone: Optional[Milestone] = None
    locked: Optional[bool] = None
    active_lock_reason: Optional[str] = None
    comments: Optional[int] = None
    pull_request: Optional[Dict[str, Any]] = None
    closed_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    draft: Optional[bool] = None
    closed_by: Optional[SimpleUser] = None
    state_reason: Optional[str] = None
    author_association: Optional[str] = None
    reactions: Optional[Dict[str, Any]] = None


class IssueComment(GitHubModel):
    id: int
    node_id: Optional[str] = None
    url: Optional[str] = None
    body: Optional[str] = None
    html_url: Optional[str] = None
    user: Optional[SimpleUser] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    issue_url: Optional[str] = None
    author_association: Optional[str] = None
    reactions: Optional[Dict[str, Any]] = None


class IssueEvent(GitHubModel):
    id: int
    event: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    actor: Optional[SimpleUser] = None
    commit_id: Optional[str] = None
    commit_url: Optional[str] = None
    created_at: Optional[str] = None
    issue: Optional[Dict[str, Any]] = None
    label: Optional[Dict[str, Any]] = None
    assignee: Optional[SimpleUser] = None


# Pull requests

class PullRequest(GitHubModel):
    id: int
    number: int
    state: str
    title: str
    url: Optional[str] = None
    node_id: Optional[str] = None
    html_url: Optional[str] = None
    diff_url: Optional[str] = None
    patch_url: Optional[str] = None
    issue_url: Optional[str] = None
    user: Optional[SimpleUser] = None
    body: Optional[str] = None
    labels: Optional[List[Dict[str, Any]]] = None
    milestone: Optional[Milestone] = None
    locked: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    closed_at: Optional[str] = None
    merged_at: Optional[str] = None
    merge_commit_sha: Optional[str] = None
    assignee: Optional[SimpleUser] = None
    assignees: Optional[List[SimpleUser]] = None
    requested_reviewers: Optional[List[SimpleUser]] = None
    requested_teams: Optional[List[Dict[str, Any]]] = None
    head: Optional[Dict[str, Any]] = None
    base: Optional[Dict[str, Any]] = None
    author_association: Optional[str] = None
    draft: Optional[bool] = None
    merged: Optional[bool] = None
    mergeable: Optional[bool] = None
    mergeable_state: Optional[str] = None
    merged_by: Optional[SimpleUser] = None
    comments: Optional[int] = None
    review_comments: Optional[int] = None
    commits: Optional[int] = None
    additions: Optional[int] = None
    deletions: Optional[int] = None
    changed_files: Optional[int] = None


class PullRequestSimple(PullRequest):
    pass


class PullRequestMergeResult(GitHubModel):
    sha: str
    merged: bool
    message: str


class PullRequestReviewRequest(GitHubModel):
    users: List[SimpleUser]
    teams: List[Dict[str, Any]]


class PullRequestReview(GitHubModel):
    id: int
    state: str
    body: str
    node_id: Optional[str] = None
    user: Optional[SimpleUser] = None
    html_url: Optional[str] = None
    pull_request_url: Optional[str] = None
    submitted_at: Optional[str] = None
    commit_id: Optional[str] = None
    author_association: Optional[str] = None


class PullRequestReviewComment(GitHubModel):
    id: int
    body: str
    path: str
    diff_hunk: Optional[str] = None
    url: Optional[str] = None
    node_id: Optional[str] = None
    pull_request_review_id: Optional[int] = None
    position: Optional[int] = None
    original_position: Optional[int] = None
    commit_id: Optional[str] = None
    original_commit_id: Optional[str] = None
    in_reply_to_id: Optional[int] = None
    user: Optional[SimpleUser] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    html_url: Optional[str] = None
    pull_request_url: Optional[str] = None
    author_association: Optional[str] = None
    line: Optional[int] = None
    side: Optional[str] = None
    reactions: Optional[Dict[str, Any]] = None


# Releases

class ReleaseAsset(GitHubModel):
    id: int
    name: str
    url: Optional[str] = None
    browser_download_url: Optional[str] = None
    node_id: Optional[str] = None
    label: Optional[str] = None
    state: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None
    download_count: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    uploader: Optional[SimpleUser] = None


class Release(GitHubModel):
    id: int
    tag_name: str
    url: Optional[str] = None
    html_url: Optional[str] = None
    assets_url: Optional[str] = None
    upload_url: Optional[str] = None
    tarball_url: Optional[str] = None
    zipball_url: Optional[str] = None
    node_id: Optional[str] = None
    target_commitish: Optional[str] = None
    name: Optional[str] = None
    body: Optional[str] = None
    draft: Optional[bool] = None
    prerelease: Optional[bool] = None
    created_at: Optional[str] = None
    published_at: Optional[str] = None
    author: Optional[SimpleUser] = None
    assets: Optional[List[ReleaseAsset]] = None
    discussion_url: Optional[str] = None
    reactions: Optional[Dict[str, Any]] = None


class ReleaseNotesContent(GitHubModel):
    name: str
    body: str


# Pages

class Page(GitHubModel):
    url: str
    status: Optional[str] = None
    cname: Optional[str] = None
    protected_domain_state: Optional[str] = None
    custom_404: Optional[bool] = None
    html_url: Optional[str] = None
    source: Optional[Dict[str, Any]] = None
    public: Optional[bool] = None
    https_certificate: Optional[Dict[str, Any]] = None
    https_enforced: Optional[bool] = None


class PageBuild(GitHubModel):
    url: str
    status: str
    error: Optional[Dict[str, Any]] = None
    pusher: Optional[SimpleUser] = None
    commit: Optional[str] = None
    duration: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class PagesHealthCheck(GitHubModel):
    domain: Optional[Dict[str, Any]] = None
    alt_domain: Optional[Dict[str, Any]] = None


# Actions

class ActionsPublicKey(GitHubModel):
    key_id: str
    key: str
    id: Optional[int] = None
    url: Optional[str] = None
    title: Optional[str] = None
    created_at: Optional[str] = None


class ActionsSecret(GitHubModel):
    name: str
    created_at: str
    updated_at: str


class OrganizationActionsSecret(ActionsSecret):
    visibility: str
    selected_repositories_url: Optional[str] = None


class SelectedActions(GitHubModel):
    github_owned_allowed: Optional[bool] = None
    verified_allowed: Optional[bool] = None
    patterns_allowed: Optional[List[str]] = None


class ActionsEnterprisePermissions(GitHubModel):
    enabled_organizations: str
    allowed_actions: Optional[str] = None
    selected_organizations_url: Optional[str] = None
    selected_actions_url: Optional[str] = None


class ActionsOrganizationPermissions(GitHubModel):
    enabled_repositories: str
    allowed_actions: Optional[str] = None
    selected_repositories_url: Optional[str] = None
    selected_actions_url: Optional[str] = None


class ActionsRepositoryPermissions(GitHubModel):
    enabled: bool
    allowed_actions: Optional[str] = None
    selected_actions_url: Optional[str] = None


class RunnerLabel(GitHubModel):
    name: str
    id: Optional[int] = None
    type: Optional[str] = None


class Runner(GitHubModel):
    id: int
    name: str
    os: str
    status: str
    busy: bool
    labels: List[RunnerLabel]


class RunnerGroupsEnterprise(GitHubModel):
    id: int
    name: str
    visibility: str
    default: bool
    selected_organizations_url: Optional[str] = None
    runners_url: Optional[str] = None
    allows_public_repositories: Optional[bool] = None


class RunnerGroupsOrg(GitHubModel):
    id: int
    name: str
    visibility: str
    default: bool
    selected_repositories_url: Optional[str] = None
    runners_url: Optional[str] = None
    inherited: Optional[bool] = None
    allows_public_repositories: Optional[bool] = None


class Artifact(GitHubModel):
    id: int
    name: str
    size_in_bytes: int
    node_id: Optional[str] = None
    url: Optional[str] = None
    archive_download_url: Optional[str] = None
    expired: Optional[bool] = None
    created_at: Optional[str] = None
    expires_at: Optional[str] = None
    updated_at: Optional[str] = None


class Job(GitHubModel):
    id: int
    run_id: int
    name: str
    status: str
    head_sha: Optional[str] = None
    run_url: Optional[str] = None
    node_id: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    conclusion: Optional[str] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    steps: Optional[List[Dict[str, Any]]] = None
    check_run_url: Optional[str] = None
    labels: Optional[List[str]] = None
    runner_id: Optional[int] = None
    runner_name: Optional[str] = None
    run_attempt: Optional[int] = None


class Workflow(GitHubModel):
    id: int
    name: str
    path: str
    state: str
    node_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    badge_url: Optional[str] = None


class WorkflowRun(GitHubModel):
    id: int
    head_sha: str
    run_number: int
    event: str
    status: Optional[str] = None
    conclusion: Optional[str] = None
    name: Optional[str] = None
    node_id: Optional[str] = None
    head_branch: Optional[str] = None
    workflow_id: Optional[int] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    run_attempt: Optional[int] = None
    run_started_at: Optional[str] = None
    actor: Optional[SimpleUser] = None


class WorkflowUsage(GitHubModel):
    billable: Dict[str, Any]


class WorkflowRunUsage(GitHubModel):
    billable: Dict[str, Any]
    run_duration_ms: Optional[int] = None


# Checks

class CheckRun(GitHubModel):
    id: int
    head_sha: str
    name: str
    status: str
    node_id: Optional[str] = None
    external_id: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    details_url: Optional[str] = None
    conclusion: Optional[str] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    output: Optional[Dict[str, Any]] = None
    check_suite: Optional[Dict[str, Any]] = None
    app: Optional[Dict[str, Any]] = None
    pull_requests: Optional[List[Dict[str, Any]]] = None


class CheckSuite(GitHubModel):
    id: int
    head_sha: str
    node_id: Optional[str] = None
    head_branch: Optional[str] = None
    status: Optional[str] = None
    conclusion: Optional[str] = None
    url: Optional[str] = None
    before: Optional[str] = None
    after: Optional[str] = None
    pull_requests: Optional[List[Dict[str, Any]]] = None
    app: Optional[Dict[str, Any]] = None
    repository: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    head_commit: Optional[Dict[str, Any]] = None
    latest_check_runs_count: Optional[int] = None
    check_runs_url: Optional[str] = None


class CheckSuitePreference(GitHubModel):
    preferences: Dict[str, Any]
    repository: Dict[str, Any]


# Code scanning, secret scanning and codespaces

class CodeScanningAlert(GitHubModel):
    number: int
    created_at: str
    state: str
    url: Optional[str] = None
    html_url: Optional[str] = None
    instances_url: Optional[str] = None
    updated_at: Optional[str] = None
    fixed_at: Optional[str] = None
    dismissed_by: Optional[SimpleUser] = None
    dismissed_at: Optional[str] = None
    dismissed_reason: Optional[str] = None
    rule: Optional[Dict[str, Any]] = None
    tool: Optional[Dict[str, Any]] = None
    most_recent_instance: Optional[Dict[str, Any]] = None


class CodeScanningAnalysis(GitHubModel):
    id: int
    ref: str
    commit_sha: str
    analysis_key: str
    environment: Optional[str] = None
    category: Optional[str] = None
    error: Optional[str] = None
    created_at: Optional[str] = None
    results_count: Optional[int] = None
    rules_count: Optional[int] = None
    url: Optional[str] = None
    sarif_id: Optional[str] = None
    tool: Optional[Dict[str, Any]] = None
    deletable: Optional[bool] = None
    warning: Optional[str] = None


class CodeScanningAnalysisDeletion(GitHubModel):
    next_analysis_url: Optional[str] = None
    confirm_delete_url: Optional[str] = None


class CodeScanningSarifsStatus(GitHubModel):
    processing_status: Optional[str] = None
    analyses_url: Optional[str] = None
    errors: Optional[List[str]] = None


class SecretScanningAlert(GitHubModel):
    number: Optional[int] = None
    created_at: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    locations_url: Optional[str] = None
    state: Optional[str] = None
    resolution: Optional[str] = None
    resolved_at: Optional[str] = None
    resolved_by: Optional[SimpleUser] = None
    secret_type: Optional[str] = None
    secret_type_display_name: Optional[str] = None
    secret: Optional[str] = None


class Codespace(GitHubModel):
    id: int
    name: str
    state: str
    url: str
    environment_id: Optional[str] = None
    owner: Optional[SimpleUser] = None
    billable_owner: Optional[SimpleUser] = None
    repository: Optional[Dict[str, Any]] = None
    machine: Optional[Dict[str, Any]] = None
    prebuild: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    last_used_at: Optional[str] = None
    git_status: Optional[Dict[str, Any]] = None
    location: Optional[str] = None
    idle_timeout_minutes: Optional[int] = None
    web_url: Optional[str] = None
    machines_url: Optional[str] = None
    start_url: Optional[str] = None
    stop_url: Optional[str] = None


class CodespacesSecret(GitHubModel):
    name: str
    created_at: str
    updated_at: str
    visibility: str
    selected_repositories_url: str


class CodespacesUserPublicKey(GitHubModel):
    key_id: str
    key: str


# SCIM

class ScimEnterpriseGroup(GitHubModel):
    schemas: List[str]
    id: str
    externalId: Optional[str] = None
    displayName: Optional[str] = None
    members: Optional[List[Dict[str, Any]]] = None
    meta: Optional[Dict[str, Any]] = None


class ScimEnterpriseUser(GitHubModel):
    schemas: List[str]
    id: str
    externalId: Optional[str] = None
    userName: Optional[str] = None
    name: Optional[Dict[str, Any]] = None
    emails: Optional[List[Dict[str, Any]]] = None
    groups: Optional[List[Dict[str, Any]]] = None
    active: Optional[bool] = None
    meta: Optional[Dict[str, Any]] = None


class ScimGroupListEnterprise(GitHubModel):
    schemas: List[str]
    totalResults: int
    itemsPerPage: int
    startIndex: int
    Resources: List[ScimEnterpriseGroup]


class ScimUserListEnterprise(GitHubModel):
    schemas: List[str]
    totalResults: int
    itemsPerPage: int
    startIndex: int
    Resources: List[ScimEnterpriseUser]
