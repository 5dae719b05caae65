# ruff: noqa
"""
GitHub REST API DataSource
Auto-generated from the OpenAPI description by code-generator/github.py.
"""

from typing import Any, Dict, List, Optional

from ghrest.sources.client.github.endpoint import PathParam
from ghrest.sources.client.github.github import Body, GitHubClient, Query
from ghrest.sources.external.github import models
from ghrest.sources.external.github.routes import Route


class GitHubDataSource:
    """
    GitHub REST API Data Source.

    Each method calls exactly one route. TransportError and
    DeserializationError raised by the client propagate to the caller.
    """
    def __init__(self, client: GitHubClient) -> None:
        self.client = client

    async def get_root(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """GitHub API Root (HTTP GET /)"""
        return await self.client.req(Route.GET_ROOT.bind(), query, body, response_model)

    async def get_app(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Integration,
    ) -> models.Integration:
        """Get the authenticated app (HTTP GET /app)"""
        return await self.client.req(Route.GET_APP.bind(), query, body, response_model)

    async def get_app_hook_config(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.WebhookConfig,
    ) -> models.WebhookConfig:
        """Get a webhook configuration for an app (HTTP GET /app/hook/config)"""
        return await self.client.req(Route.GET_APP_HOOK_CONFIG.bind(), query, body, response_model)

    async def patch_app_hook_config(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.WebhookConfig,
    ) -> models.WebhookConfig:
        """Update a webhook configuration for an app (HTTP PATCH /app/hook/config)"""
        return await self.client.req(Route.PATCH_APP_HOOK_CONFIG.bind(), query, body, response_model)

    async def get_app_hook_deliveries_delivery_id(
        self,
        delivery_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.HookDelivery,
    ) -> models.HookDelivery:
        """Get a delivery for an app webhook (HTTP GET /app/hook/deliveries/{delivery_id})"""
        return await self.client.req(Route.GET_APP_HOOK_DELIVERIES_DELIVERY_ID.bind(delivery_id), query, body, response_model)

    async def get_app_installations(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Installation],
    ) -> List[models.Installation]:
        """List installations for the authenticated app (HTTP GET /app/installations)"""
        return await self.client.req(Route.GET_APP_INSTALLATIONS.bind(), query, body, response_model)

    async def get_app_installations_installation_id(
        self,
        installation_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Installation,
    ) -> models.Installation:
        """Get an installation for the authenticated app (HTTP GET /app/installations/{installation_id})"""
        return await self.client.req(Route.GET_APP_INSTALLATIONS_INSTALLATION_ID.bind(installation_id), query, body, response_model)

    async def post_app_installations_installation_id_access_tokens(
        self,
        installation_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.InstallationToken,
    ) -> models.InstallationToken:
        """Create an installation access token for an app (HTTP POST /app/installations/{installation_id}/access_tokens)"""
        return await self.client.req(Route.POST_APP_INSTALLATIONS_INSTALLATION_ID_ACCESS_TOKENS.bind(installation_id), query, body, response_model)

    async def get_applications_grants_grant_id(
        self,
        grant_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ApplicationGrant,
    ) -> models.ApplicationGrant:
        """Get a single grant (HTTP GET /applications/grants/{grant_id})"""
        return await self.client.req(Route.GET_APPLICATIONS_GRANTS_GRANT_ID.bind(grant_id), query, body, response_model)

    async def post_applications_client_id_token(
        self,
        client_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Authorization,
    ) -> models.Authorization:
        """Check a token (HTTP POST /applications/{client_id}/token)"""
        return await self.client.req(Route.POST_APPLICATIONS_CLIENT_ID_TOKEN.bind(client_id), query, body, response_model)

    async def patch_applications_client_id_token(
        self,
        client_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Authorization,
    ) -> models.Authorization:
        """Reset a token (HTTP PATCH /applications/{client_id}/token)"""
        return await self.client.req(Route.PATCH_APPLICATIONS_CLIENT_ID_TOKEN.bind(client_id), query, body, response_model)

    async def post_applications_client_id_token_scoped(
        self,
        client_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Authorization,
    ) -> models.Authorization:
        """Create a scoped access token (HTTP POST /applications/{client_id}/token/scoped)"""
        return await self.client.req(Route.POST_APPLICATIONS_CLIENT_ID_TOKEN_SCOPED.bind(client_id), query, body, response_model)

    async def get_apps_app_slug(
        self,
        app_slug: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Integration,
    ) -> models.Integration:
        """Get an app (HTTP GET /apps/{app_slug})"""
        return await self.client.req(Route.GET_APPS_APP_SLUG.bind(app_slug), query, body, response_model)

    async def put_authorizations_clients_client_id(
        self,
        client_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Authorization,
    ) -> models.Authorization:
        """Get-or-create an authorization for a specific app (HTTP PUT /authorizations/clients/{client_id})"""
        return await self.client.req(Route.PUT_AUTHORIZATIONS_CLIENTS_CLIENT_ID.bind(client_id), query, body, response_model)

    async def put_authorizations_clients_client_id_fingerprint(
        self,
        client_id: PathParam,
        fingerprint: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Authorization,
    ) -> models.Authorization:
        """Get-or-create an authorization for a specific app and fingerprint (HTTP PUT /authorizations/clients/{client_id}/{fingerprint})"""
        return await self.client.req(Route.PUT_AUTHORIZATIONS_CLIENTS_CLIENT_ID_FINGERPRINT.bind(client_id, fingerprint), query, body, response_model)

    async def get_authorizations_authorization_id(
        self,
        authorization_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Authorization,
    ) -> models.Authorization:
        """Get a single authorization (HTTP GET /authorizations/{authorization_id})"""
        return await self.client.req(Route.GET_AUTHORIZATIONS_AUTHORIZATION_ID.bind(authorization_id), query, body, response_model)

    async def patch_authorizations_authorization_id(
        self,
        authorization_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Authorization,
    ) -> models.Authorization:
        """Update an existing authorization (HTTP PATCH /authorizations/{authorization_id})"""
        return await self.client.req(Route.PATCH_AUTHORIZATIONS_AUTHORIZATION_ID.bind(authorization_id), query, body, response_model)

    async def get_codes_of_conduct_key(
        self,
        key: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CodeOfConduct,
    ) -> models.CodeOfConduct:
        """Get a code of conduct (HTTP GET /codes_of_conduct/{key})"""
        return await self.client.req(Route.GET_CODES_OF_CONDUCT_KEY.bind(key), query, body, response_model)

    async def get_emojis(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Get emojis (HTTP GET /emojis)"""
        return await self.client.req(Route.GET_EMOJIS.bind(), query, body, response_model)

    async def get_enterprises_enterprise_actions_permissions(
        self,
        enterprise: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ActionsEnterprisePermissions,
    ) -> models.ActionsEnterprisePermissions:
        """Get GitHub Actions permissions for an enterprise (HTTP GET /enterprises/{enterprise}/actions/permissions)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_ACTIONS_PERMISSIONS.bind(enterprise), query, body, response_model)

    async def get_enterprises_enterprise_actions_permissions_organizations(
        self,
        enterprise: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List selected organizations enabled for GitHub Actions in an enterprise (HTTP GET /enterprises/{enterprise}/actions/permissions/organizations)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_ACTIONS_PERMISSIONS_ORGANIZATIONS.bind(enterprise), query, body, response_model)

    async def get_enterprises_enterprise_actions_permissions_selected_actions(
        self,
        enterprise: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.SelectedActions,
    ) -> models.SelectedActions:
        """Get allowed actions for an enterprise (HTTP GET /enterprises/{enterprise}/actions/permissions/selected-actions)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_ACTIONS_PERMISSIONS_SELECTED_ACTIONS.bind(enterprise), query, body, response_model)

    async def get_enterprises_enterprise_actions_runner_groups(
        self,
        enterprise: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List self-hosted runner groups for an enterprise (HTTP GET /enterprises/{enterprise}/actions/runner-groups)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNER_GROUPS.bind(enterprise), query, body, response_model)

    async def get_enterprises_enterprise_actions_runner_groups_runner_group_id(
        self,
        enterprise: PathParam,
        runner_group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.RunnerGroupsEnterprise,
    ) -> models.RunnerGroupsEnterprise:
        """Get a self-hosted runner group for an enterprise (HTTP GET /enterprises/{enterprise}/actions/runner-groups/{runner_group_id})"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID.bind(enterprise, runner_group_id), query, body, response_model)

    async def patch_enterprises_enterprise_actions_runner_groups_runner_group_id(
        self,
        enterprise: PathParam,
        runner_group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.RunnerGroupsEnterprise,
    ) -> models.RunnerGroupsEnterprise:
        """Update a self-hosted runner group for an enterprise (HTTP PATCH /enterprises/{enterprise}/actions/runner-groups/{runner_group_id})"""
        return await self.client.req(Route.PATCH_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID.bind(enterprise, runner_group_id), query, body, response_model)

    async def get_enterprises_enterprise_actions_runner_groups_runner_group_id_organizations(
        self,
        enterprise: PathParam,
        runner_group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List organization access to a self-hosted runner group in an enterprise (HTTP GET /enterprises/{enterprise}/actions/runner-groups/{runner_group_id}/organizations)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID_ORGANIZATIONS.bind(enterprise, runner_group_id), query, body, response_model)

    async def get_enterprises_enterprise_actions_runner_groups_runner_group_id_runners(
        self,
        enterprise: PathParam,
        runner_group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List self-hosted runners in a group for an enterprise (HTTP GET /enterprises/{enterprise}/actions/runner-groups/{runner_group_id}/runners)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID_RUNNERS.bind(enterprise, runner_group_id), query, body, response_model)

    async def get_enterprises_enterprise_actions_runners(
        self,
        enterprise: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List self-hosted runners for an enterprise (HTTP GET /enterprises/{enterprise}/actions/runners)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS.bind(enterprise), query, body, response_model)

    async def get_enterprises_enterprise_actions_runners_runner_id(
        self,
        enterprise: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Runner,
    ) -> models.Runner:
        """Get a self-hosted runner for an enterprise (HTTP GET /enterprises/{enterprise}/actions/runners/{runner_id})"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID.bind(enterprise, runner_id), query, body, response_model)

    async def get_enterprises_enterprise_actions_runners_runner_id_labels(
        self,
        enterprise: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List labels for a self-hosted runner for an enterprise (HTTP GET /enterprises/{enterprise}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(enterprise, runner_id), query, body, response_model)

    async def post_enterprises_enterprise_actions_runners_runner_id_labels(
        self,
        enterprise: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Add custom labels to a self-hosted runner for an enterprise (HTTP POST /enterprises/{enterprise}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.POST_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(enterprise, runner_id), query, body, response_model)

    async def put_enterprises_enterprise_actions_runners_runner_id_labels(
        self,
        enterprise: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Set custom labels for a self-hosted runner for an enterprise (HTTP PUT /enterprises/{enterprise}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.PUT_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(enterprise, runner_id), query, body, response_model)

    async def delete_enterprises_enterprise_actions_runners_runner_id_labels(
        self,
        enterprise: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Remove all custom labels from a self-hosted runner for an enterprise (HTTP DELETE /enterprises/{enterprise}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.DELETE_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(enterprise, runner_id), query, body, response_model)

    async def delete_enterprises_enterprise_actions_runners_runner_id_labels_name(
        self,
        enterprise: PathParam,
        runner_id: PathParam,
        name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Remove a custom label from a self-hosted runner for an enterprise (HTTP DELETE /enterprises/{enterprise}/actions/runners/{runner_id}/labels/{name})"""
        return await self.client.req(Route.DELETE_ENTERPRISES_ENTERPRISE_ACTIONS_RUNNERS_RUNNER_ID_LABELS_NAME.bind(enterprise, runner_id, name), query, body, response_model)

    async def get_enterprises_enterprise_settings_billing_actions(
        self,
        enterprise: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ActionsBillingUsage,
    ) -> models.ActionsBillingUsage:
        """Get GitHub Actions billing for an enterprise (HTTP GET /enterprises/{enterprise}/settings/billing/actions)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_SETTINGS_BILLING_ACTIONS.bind(enterprise), query, body, response_model)

    async def get_enterprises_enterprise_settings_billing_advanced_security(
        self,
        enterprise: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.AdvancedSecurityActiveCommitters,
    ) -> models.AdvancedSecurityActiveCommitters:
        """Get GitHub Advanced Security active committers for an enterprise (HTTP GET /enterprises/{enterprise}/settings/billing/advanced-security)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_SETTINGS_BILLING_ADVANCED_SECURITY.bind(enterprise), query, body, response_model)

    async def get_enterprises_enterprise_settings_billing_packages(
        self,
        enterprise: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PackagesBillingUsage,
    ) -> models.PackagesBillingUsage:
        """Get GitHub Packages billing for an enterprise (HTTP GET /enterprises/{enterprise}/settings/billing/packages)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_SETTINGS_BILLING_PACKAGES.bind(enterprise), query, body, response_model)

    async def get_enterprises_enterprise_settings_billing_shared_storage(
        self,
        enterprise: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CombinedBillingUsage,
    ) -> models.CombinedBillingUsage:
        """Get shared storage billing for an enterprise (HTTP GET /enterprises/{enterprise}/settings/billing/shared-storage)"""
        return await self.client.req(Route.GET_ENTERPRISES_ENTERPRISE_SETTINGS_BILLING_SHARED_STORAGE.bind(enterprise), query, body, response_model)

    async def get_events(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List public events (HTTP GET /events)"""
        return await self.client.req(Route.GET_EVENTS.bind(), query, body, response_model)

    async def get_feeds(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Feed,
    ) -> models.Feed:
        """Get feeds (HTTP GET /feeds)"""
        return await self.client.req(Route.GET_FEEDS.bind(), query, body, response_model)

    async def get_gists(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.GistSimple],
    ) -> List[models.GistSimple]:
        """List gists for the authenticated user (HTTP GET /gists)"""
        return await self.client.req(Route.GET_GISTS.bind(), query, body, response_model)

    async def post_gists(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GistSimple,
    ) -> models.GistSimple:
        """Create a gist (HTTP POST /gists)"""
        return await self.client.req(Route.POST_GISTS.bind(), query, body, response_model)

    async def get_gists_gist_id(
        self,
        gist_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GistSimple,
    ) -> models.GistSimple:
        """Get a gist (HTTP GET /gists/{gist_id})"""
        return await self.client.req(Route.GET_GISTS_GIST_ID.bind(gist_id), query, body, response_model)

    async def patch_gists_gist_id(
        self,
        gist_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GistSimple,
    ) -> models.GistSimple:
        """Update a gist (HTTP PATCH /gists/{gist_id})"""
        return await self.client.req(Route.PATCH_GISTS_GIST_ID.bind(gist_id), query, body, response_model)

    async def delete_gists_gist_id(
        self,
        gist_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a gist (HTTP DELETE /gists/{gist_id})"""
        return await self.client.req(Route.DELETE_GISTS_GIST_ID.bind(gist_id), query, body, response_model)

    async def get_gists_gist_id_comments(
        self,
        gist_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.GistComment],
    ) -> List[models.GistComment]:
        """List gist comments (HTTP GET /gists/{gist_id}/comments)"""
        return await self.client.req(Route.GET_GISTS_GIST_ID_COMMENTS.bind(gist_id), query, body, response_model)

    async def post_gists_gist_id_comments(
        self,
        gist_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GistComment,
    ) -> models.GistComment:
        """Create a gist comment (HTTP POST /gists/{gist_id}/comments)"""
        return await self.client.req(Route.POST_GISTS_GIST_ID_COMMENTS.bind(gist_id), query, body, response_model)

    async def get_gists_gist_id_comments_comment_id(
        self,
        gist_id: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GistComment,
    ) -> models.GistComment:
        """Get a gist comment (HTTP GET /gists/{gist_id}/comments/{comment_id})"""
        return await self.client.req(Route.GET_GISTS_GIST_ID_COMMENTS_COMMENT_ID.bind(gist_id, comment_id), query, body, response_model)

    async def patch_gists_gist_id_comments_comment_id(
        self,
        gist_id: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GistComment,
    ) -> models.GistComment:
        """Update a gist comment (HTTP PATCH /gists/{gist_id}/comments/{comment_id})"""
        return await self.client.req(Route.PATCH_GISTS_GIST_ID_COMMENTS_COMMENT_ID.bind(gist_id, comment_id), query, body, response_model)

    async def delete_gists_gist_id_comments_comment_id(
        self,
        gist_id: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a gist comment (HTTP DELETE /gists/{gist_id}/comments/{comment_id})"""
        return await self.client.req(Route.DELETE_GISTS_GIST_ID_COMMENTS_COMMENT_ID.bind(gist_id, comment_id), query, body, response_model)

    async def put_gists_gist_id_star(
        self,
        gist_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Star a gist (HTTP PUT /gists/{gist_id}/star)"""
        return await self.client.req(Route.PUT_GISTS_GIST_ID_STAR.bind(gist_id), query, body, response_model)

    async def delete_gists_gist_id_star(
        self,
        gist_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Unstar a gist (HTTP DELETE /gists/{gist_id}/star)"""
        return await self.client.req(Route.DELETE_GISTS_GIST_ID_STAR.bind(gist_id), query, body, response_model)

    async def get_gists_gist_id_sha(
        self,
        gist_id: PathParam,
        sha: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GistSimple,
    ) -> models.GistSimple:
        """Get a gist revision (HTTP GET /gists/{gist_id}/{sha})"""
        return await self.client.req(Route.GET_GISTS_GIST_ID_SHA.bind(gist_id, sha), query, body, response_model)

    async def get_gitignore_templates(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[str],
    ) -> List[str]:
        """Get all gitignore templates (HTTP GET /gitignore/templates)"""
        return await self.client.req(Route.GET_GITIGNORE_TEMPLATES.bind(), query, body, response_model)

    async def get_gitignore_templates_name(
        self,
        name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GitignoreTemplate,
    ) -> models.GitignoreTemplate:
        """Get a gitignore template (HTTP GET /gitignore/templates/{name})"""
        return await self.client.req(Route.GET_GITIGNORE_TEMPLATES_NAME.bind(name), query, body, response_model)

    async def get_installation_repositories(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List repositories accessible to the app installation (HTTP GET /installation/repositories)"""
        return await self.client.req(Route.GET_INSTALLATION_REPOSITORIES.bind(), query, body, response_model)

    async def get_issues(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Issue],
    ) -> List[models.Issue]:
        """List issues assigned to the authenticated user (HTTP GET /issues)"""
        return await self.client.req(Route.GET_ISSUES.bind(), query, body, response_model)

    async def get_licenses(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """Get all commonly used licenses (HTTP GET /licenses)"""
        return await self.client.req(Route.GET_LICENSES.bind(), query, body, response_model)

    async def get_licenses_license(
        self,
        license: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.License,
    ) -> models.License:
        """Get a license (HTTP GET /licenses/{license})"""
        return await self.client.req(Route.GET_LICENSES_LICENSE.bind(license), query, body, response_model)

    async def get_marketplace_listing_accounts_account_id(
        self,
        account_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.MarketplacePurchase,
    ) -> models.MarketplacePurchase:
        """Get a subscription plan for an account (HTTP GET /marketplace_listing/accounts/{account_id})"""
        return await self.client.req(Route.GET_MARKETPLACE_LISTING_ACCOUNTS_ACCOUNT_ID.bind(account_id), query, body, response_model)

    async def get_marketplace_listing_stubbed_accounts_account_id(
        self,
        account_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.MarketplacePurchase,
    ) -> models.MarketplacePurchase:
        """Get a subscription plan for an account (stubbed) (HTTP GET /marketplace_listing/stubbed/accounts/{account_id})"""
        return await self.client.req(Route.GET_MARKETPLACE_LISTING_STUBBED_ACCOUNTS_ACCOUNT_ID.bind(account_id), query, body, response_model)

    async def get_meta(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ApiOverview,
    ) -> models.ApiOverview:
        """Get GitHub meta information (HTTP GET /meta)"""
        return await self.client.req(Route.GET_META.bind(), query, body, response_model)

    async def get_notifications(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Thread],
    ) -> List[models.Thread]:
        """List notifications for the authenticated user (HTTP GET /notifications)"""
        return await self.client.req(Route.GET_NOTIFICATIONS.bind(), query, body, response_model)

    async def get_notifications_threads_thread_id(
        self,
        thread_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Thread,
    ) -> models.Thread:
        """Get a thread (HTTP GET /notifications/threads/{thread_id})"""
        return await self.client.req(Route.GET_NOTIFICATIONS_THREADS_THREAD_ID.bind(thread_id), query, body, response_model)

    async def get_notifications_threads_thread_id_subscription(
        self,
        thread_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ThreadSubscription,
    ) -> models.ThreadSubscription:
        """Get a thread subscription for the authenticated user (HTTP GET /notifications/threads/{thread_id}/subscription)"""
        return await self.client.req(Route.GET_NOTIFICATIONS_THREADS_THREAD_ID_SUBSCRIPTION.bind(thread_id), query, body, response_model)

    async def put_notifications_threads_thread_id_subscription(
        self,
        thread_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ThreadSubscription,
    ) -> models.ThreadSubscription:
        """Set a thread subscription (HTTP PUT /notifications/threads/{thread_id}/subscription)"""
        return await self.client.req(Route.PUT_NOTIFICATIONS_THREADS_THREAD_ID_SUBSCRIPTION.bind(thread_id), query, body, response_model)

    async def get_octocat(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = str,
    ) -> str:
        """Get Octocat (HTTP GET /octocat)"""
        return await self.client.req(Route.GET_OCTOCAT.bind(), query, body, response_model)

    async def get_organizations_organization_id_custom_roles(
        self,
        organization_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List custom repository roles in an organization (HTTP GET /organizations/{organization_id}/custom_roles)"""
        return await self.client.req(Route.GET_ORGANIZATIONS_ORGANIZATION_ID_CUSTOM_ROLES.bind(organization_id), query, body, response_model)

    async def get_orgs_org(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.OrganizationFull,
    ) -> models.OrganizationFull:
        """Get an organization (HTTP GET /orgs/{org})"""
        return await self.client.req(Route.GET_ORGS_ORG.bind(org), query, body, response_model)

    async def patch_orgs_org(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.OrganizationFull,
    ) -> models.OrganizationFull:
        """Update an organization (HTTP PATCH /orgs/{org})"""
        return await self.client.req(Route.PATCH_ORGS_ORG.bind(org), query, body, response_model)

    async def get_orgs_org_actions_permissions(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ActionsOrganizationPermissions,
    ) -> models.ActionsOrganizationPermissions:
        """Get GitHub Actions permissions for an organization (HTTP GET /orgs/{org}/actions/permissions)"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_PERMISSIONS.bind(org), query, body, response_model)

    async def get_orgs_org_actions_permissions_repositories(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List selected repositories enabled for GitHub Actions in an organization (HTTP GET /orgs/{org}/actions/permissions/repositories)"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_PERMISSIONS_REPOSITORIES.bind(org), query, body, response_model)

    async def get_orgs_org_actions_permissions_selected_actions(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.SelectedActions,
    ) -> models.SelectedActions:
        """Get allowed actions for an organization (HTTP GET /orgs/{org}/actions/permissions/selected-actions)"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_PERMISSIONS_SELECTED_ACTIONS.bind(org), query, body, response_model)

    async def get_orgs_org_actions_runner_groups(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List self-hosted runner groups for an organization (HTTP GET /orgs/{org}/actions/runner-groups)"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_RUNNER_GROUPS.bind(org), query, body, response_model)

    async def get_orgs_org_actions_runner_groups_runner_group_id(
        self,
        org: PathParam,
        runner_group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.RunnerGroupsOrg,
    ) -> models.RunnerGroupsOrg:
        """Get a self-hosted runner group for an organization (HTTP GET /orgs/{org}/actions/runner-groups/{runner_group_id})"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID.bind(org, runner_group_id), query, body, response_model)

    async def patch_orgs_org_actions_runner_groups_runner_group_id(
        self,
        org: PathParam,
        runner_group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.RunnerGroupsOrg,
    ) -> models.RunnerGroupsOrg:
        """Update a self-hosted runner group for an organization (HTTP PATCH /orgs/{org}/actions/runner-groups/{runner_group_id})"""
        return await self.client.req(Route.PATCH_ORGS_ORG_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID.bind(org, runner_group_id), query, body, response_model)

    async def get_orgs_org_actions_runner_groups_runner_group_id_repositories(
        self,
        org: PathParam,
        runner_group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List repository access to a self-hosted runner group in an organization (HTTP GET /orgs/{org}/actions/runner-groups/{runner_group_id}/repositories)"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID_REPOSITORIES.bind(org, runner_group_id), query, body, response_model)

    async def get_orgs_org_actions_runner_groups_runner_group_id_runners(
        self,
        org: PathParam,
        runner_group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List self-hosted runners in a group for an organization (HTTP GET /orgs/{org}/actions/runner-groups/{runner_group_id}/runners)"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_RUNNER_GROUPS_RUNNER_GROUP_ID_RUNNERS.bind(org, runner_group_id), query, body, response_model)

    async def get_orgs_org_actions_runners(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List self-hosted runners for an organization (HTTP GET /orgs/{org}/actions/runners)"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_RUNNERS.bind(org), query, body, response_model)

    async def get_orgs_org_actions_runners_runner_id(
        self,
        org: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Runner,
    ) -> models.Runner:
        """Get a self-hosted runner for an organization (HTTP GET /orgs/{org}/actions/runners/{runner_id})"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID.bind(org, runner_id), query, body, response_model)

    async def get_orgs_org_actions_runners_runner_id_labels(
        self,
        org: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List labels for a self-hosted runner for an organization (HTTP GET /orgs/{org}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(org, runner_id), query, body, response_model)

    async def post_orgs_org_actions_runners_runner_id_labels(
        self,
        org: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Add custom labels to a self-hosted runner for an organization (HTTP POST /orgs/{org}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.POST_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(org, runner_id), query, body, response_model)

    async def put_orgs_org_actions_runners_runner_id_labels(
        self,
        org: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Set custom labels for a self-hosted runner for an organization (HTTP PUT /orgs/{org}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.PUT_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(org, runner_id), query, body, response_model)

    async def delete_orgs_org_actions_runners_runner_id_labels(
        self,
        org: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Remove all custom labels from a self-hosted runner for an organization (HTTP DELETE /orgs/{org}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.DELETE_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(org, runner_id), query, body, response_model)

    async def delete_orgs_org_actions_runners_runner_id_labels_name(
        self,
        org: PathParam,
        runner_id: PathParam,
        name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Remove a custom label from a self-hosted runner for an organization (HTTP DELETE /orgs/{org}/actions/runners/{runner_id}/labels/{name})"""
        return await self.client.req(Route.DELETE_ORGS_ORG_ACTIONS_RUNNERS_RUNNER_ID_LABELS_NAME.bind(org, runner_id, name), query, body, response_model)

    async def get_orgs_org_actions_secrets(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List organization secrets (HTTP GET /orgs/{org}/actions/secrets)"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_SECRETS.bind(org), query, body, response_model)

    async def get_orgs_org_actions_secrets_public_key(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ActionsPublicKey,
    ) -> models.ActionsPublicKey:
        """Get an organization public key (HTTP GET /orgs/{org}/actions/secrets/public-key)"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_SECRETS_PUBLIC_KEY.bind(org), query, body, response_model)

    async def get_orgs_org_actions_secrets_secret_name(
        self,
        org: PathParam,
        secret_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.OrganizationActionsSecret,
    ) -> models.OrganizationActionsSecret:
        """Get an organization secret (HTTP GET /orgs/{org}/actions/secrets/{secret_name})"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_SECRETS_SECRET_NAME.bind(org, secret_name), query, body, response_model)

    async def get_orgs_org_actions_secrets_secret_name_repositories(
        self,
        org: PathParam,
        secret_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List selected repositories for an organization secret (HTTP GET /orgs/{org}/actions/secrets/{secret_name}/repositories)"""
        return await self.client.req(Route.GET_ORGS_ORG_ACTIONS_SECRETS_SECRET_NAME_REPOSITORIES.bind(org, secret_name), query, body, response_model)

    async def get_orgs_org_external_group_group_id(
        self,
        org: PathParam,
        group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ExternalGroup,
    ) -> models.ExternalGroup:
        """Get an external group (HTTP GET /orgs/{org}/external-group/{group_id})"""
        return await self.client.req(Route.GET_ORGS_ORG_EXTERNAL_GROUP_GROUP_ID.bind(org, group_id), query, body, response_model)

    async def get_orgs_org_external_groups(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ExternalGroups,
    ) -> models.ExternalGroups:
        """List external groups in an organization (HTTP GET /orgs/{org}/external-groups)"""
        return await self.client.req(Route.GET_ORGS_ORG_EXTERNAL_GROUPS.bind(org), query, body, response_model)

    async def get_orgs_org_hooks(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.OrgHook],
    ) -> List[models.OrgHook]:
        """List organization webhooks (HTTP GET /orgs/{org}/hooks)"""
        return await self.client.req(Route.GET_ORGS_ORG_HOOKS.bind(org), query, body, response_model)

    async def post_orgs_org_hooks(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.OrgHook,
    ) -> models.OrgHook:
        """Create an organization webhook (HTTP POST /orgs/{org}/hooks)"""
        return await self.client.req(Route.POST_ORGS_ORG_HOOKS.bind(org), query, body, response_model)

    async def get_orgs_org_hooks_hook_id(
        self,
        org: PathParam,
        hook_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.OrgHook,
    ) -> models.OrgHook:
        """Get an organization webhook (HTTP GET /orgs/{org}/hooks/{hook_id})"""
        return await self.client.req(Route.GET_ORGS_ORG_HOOKS_HOOK_ID.bind(org, hook_id), query, body, response_model)

    async def patch_orgs_org_hooks_hook_id(
        self,
        org: PathParam,
        hook_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.OrgHook,
    ) -> models.OrgHook:
        """Update an organization webhook (HTTP PATCH /orgs/{org}/hooks/{hook_id})"""
        return await self.client.req(Route.PATCH_ORGS_ORG_HOOKS_HOOK_ID.bind(org, hook_id), query, body, response_model)

    async def delete_orgs_org_hooks_hook_id(
        self,
        org: PathParam,
        hook_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete an organization webhook (HTTP DELETE /orgs/{org}/hooks/{hook_id})"""
        return await self.client.req(Route.DELETE_ORGS_ORG_HOOKS_HOOK_ID.bind(org, hook_id), query, body, response_model)

    async def get_orgs_org_hooks_hook_id_config(
        self,
        org: PathParam,
        hook_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.WebhookConfig,
    ) -> models.WebhookConfig:
        """Get a webhook configuration for an organization (HTTP GET /orgs/{org}/hooks/{hook_id}/config)"""
        return await self.client.req(Route.GET_ORGS_ORG_HOOKS_HOOK_ID_CONFIG.bind(org, hook_id), query, body, response_model)

    async def patch_orgs_org_hooks_hook_id_config(
        self,
        org: PathParam,
        hook_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.WebhookConfig,
    ) -> models.WebhookConfig:
        """Update a webhook configuration for an organization (HTTP PATCH /orgs/{org}/hooks/{hook_id}/config)"""
        return await self.client.req(Route.PATCH_ORGS_ORG_HOOKS_HOOK_ID_CONFIG.bind(org, hook_id), query, body, response_model)

    async def get_orgs_org_hooks_hook_id_deliveries_delivery_id(
        self,
        org: PathParam,
        hook_id: PathParam,
        delivery_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.HookDelivery,
    ) -> models.HookDelivery:
        """Get a webhook delivery for an organization webhook (HTTP GET /orgs/{org}/hooks/{hook_id}/deliveries/{delivery_id})"""
        return await self.client.req(Route.GET_ORGS_ORG_HOOKS_HOOK_ID_DELIVERIES_DELIVERY_ID.bind(org, hook_id, delivery_id), query, body, response_model)

    async def get_orgs_org_installation(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Installation,
    ) -> models.Installation:
        """Get an organization installation for the authenticated app (HTTP GET /orgs/{org}/installation)"""
        return await self.client.req(Route.GET_ORGS_ORG_INSTALLATION.bind(org), query, body, response_model)

    async def get_orgs_org_installations(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List app installations for an organization (HTTP GET /orgs/{org}/installations)"""
        return await self.client.req(Route.GET_ORGS_ORG_INSTALLATIONS.bind(org), query, body, response_model)

    async def put_orgs_org_interaction_limits(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.InteractionLimitResponse,
    ) -> models.InteractionLimitResponse:
        """Set interaction restrictions for an organization (HTTP PUT /orgs/{org}/interaction-limits)"""
        return await self.client.req(Route.PUT_ORGS_ORG_INTERACTION_LIMITS.bind(org), query, body, response_model)

    async def get_orgs_org_members(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.SimpleUser],
    ) -> List[models.SimpleUser]:
        """List organization members (HTTP GET /orgs/{org}/members)"""
        return await self.client.req(Route.GET_ORGS_ORG_MEMBERS.bind(org), query, body, response_model)

    async def delete_orgs_org_members_username(
        self,
        org: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Remove an organization member (HTTP DELETE /orgs/{org}/members/{username})"""
        return await self.client.req(Route.DELETE_ORGS_ORG_MEMBERS_USERNAME.bind(org, username), query, body, response_model)

    async def get_orgs_org_memberships_username(
        self,
        org: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.OrgMembership,
    ) -> models.OrgMembership:
        """Get organization membership for a user (HTTP GET /orgs/{org}/memberships/{username})"""
        return await self.client.req(Route.GET_ORGS_ORG_MEMBERSHIPS_USERNAME.bind(org, username), query, body, response_model)

    async def put_orgs_org_memberships_username(
        self,
        org: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.OrgMembership,
    ) -> models.OrgMembership:
        """Set organization membership for a user (HTTP PUT /orgs/{org}/memberships/{username})"""
        return await self.client.req(Route.PUT_ORGS_ORG_MEMBERSHIPS_USERNAME.bind(org, username), query, body, response_model)

    async def delete_orgs_org_memberships_username(
        self,
        org: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Remove organization membership for a user (HTTP DELETE /orgs/{org}/memberships/{username})"""
        return await self.client.req(Route.DELETE_ORGS_ORG_MEMBERSHIPS_USERNAME.bind(org, username), query, body, response_model)

    async def get_orgs_org_migrations_migration_id(
        self,
        org: PathParam,
        migration_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Migration,
    ) -> models.Migration:
        """Get an organization migration status (HTTP GET /orgs/{org}/migrations/{migration_id})"""
        return await self.client.req(Route.GET_ORGS_ORG_MIGRATIONS_MIGRATION_ID.bind(org, migration_id), query, body, response_model)

    async def get_orgs_org_packages_package_type_package_name(
        self,
        org: PathParam,
        package_type: PathParam,
        package_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Package,
    ) -> models.Package:
        """Get a package for an organization (HTTP GET /orgs/{org}/packages/{package_type}/{package_name})"""
        return await self.client.req(Route.GET_ORGS_ORG_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME.bind(org, package_type, package_name), query, body, response_model)

    async def get_orgs_org_packages_package_type_package_name_versions_package_version_id(
        self,
        org: PathParam,
        package_type: PathParam,
        package_name: PathParam,
        package_version_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PackageVersion,
    ) -> models.PackageVersion:
        """Get a package version for an organization (HTTP GET /orgs/{org}/packages/{package_type}/{package_name}/versions/{package_version_id})"""
        return await self.client.req(Route.GET_ORGS_ORG_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME_VERSIONS_PACKAGE_VERSION_ID.bind(org, package_type, package_name, package_version_id), query, body, response_model)

    async def get_orgs_org_repos(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Repository],
    ) -> List[models.Repository]:
        """List organization repositories (HTTP GET /orgs/{org}/repos)"""
        return await self.client.req(Route.GET_ORGS_ORG_REPOS.bind(org), query, body, response_model)

    async def post_orgs_org_repos(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Repository,
    ) -> models.Repository:
        """Create an organization repository (HTTP POST /orgs/{org}/repos)"""
        return await self.client.req(Route.POST_ORGS_ORG_REPOS.bind(org), query, body, response_model)

    async def get_orgs_org_settings_billing_actions(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ActionsBillingUsage,
    ) -> models.ActionsBillingUsage:
        """Get GitHub Actions billing for an organization (HTTP GET /orgs/{org}/settings/billing/actions)"""
        return await self.client.req(Route.GET_ORGS_ORG_SETTINGS_BILLING_ACTIONS.bind(org), query, body, response_model)

    async def get_orgs_org_settings_billing_advanced_security(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.AdvancedSecurityActiveCommitters,
    ) -> models.AdvancedSecurityActiveCommitters:
        """Get GitHub Advanced Security active committers for an organization (HTTP GET /orgs/{org}/settings/billing/advanced-security)"""
        return await self.client.req(Route.GET_ORGS_ORG_SETTINGS_BILLING_ADVANCED_SECURITY.bind(org), query, body, response_model)

    async def get_orgs_org_settings_billing_packages(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PackagesBillingUsage,
    ) -> models.PackagesBillingUsage:
        """Get GitHub Packages billing for an organization (HTTP GET /orgs/{org}/settings/billing/packages)"""
        return await self.client.req(Route.GET_ORGS_ORG_SETTINGS_BILLING_PACKAGES.bind(org), query, body, response_model)

    async def get_orgs_org_settings_billing_shared_storage(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CombinedBillingUsage,
    ) -> models.CombinedBillingUsage:
        """Get shared storage billing for an organization (HTTP GET /orgs/{org}/settings/billing/shared-storage)"""
        return await self.client.req(Route.GET_ORGS_ORG_SETTINGS_BILLING_SHARED_STORAGE.bind(org), query, body, response_model)

    async def get_orgs_org_team_sync_groups(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GroupMapping,
    ) -> models.GroupMapping:
        """List IdP groups for an organization (HTTP GET /orgs/{org}/team-sync/groups)"""
        return await self.client.req(Route.GET_ORGS_ORG_TEAM_SYNC_GROUPS.bind(org), query, body, response_model)

    async def get_orgs_org_teams(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List teams (HTTP GET /orgs/{org}/teams)"""
        return await self.client.req(Route.GET_ORGS_ORG_TEAMS.bind(org), query, body, response_model)

    async def post_orgs_org_teams(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamFull,
    ) -> models.TeamFull:
        """Create a team (HTTP POST /orgs/{org}/teams)"""
        return await self.client.req(Route.POST_ORGS_ORG_TEAMS.bind(org), query, body, response_model)

    async def get_orgs_org_teams_team_slug(
        self,
        org: PathParam,
        team_slug: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamFull,
    ) -> models.TeamFull:
        """Get a team by name (HTTP GET /orgs/{org}/teams/{team_slug})"""
        return await self.client.req(Route.GET_ORGS_ORG_TEAMS_TEAM_SLUG.bind(org, team_slug), query, body, response_model)

    async def delete_orgs_org_teams_team_slug(
        self,
        org: PathParam,
        team_slug: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a team (HTTP DELETE /orgs/{org}/teams/{team_slug})"""
        return await self.client.req(Route.DELETE_ORGS_ORG_TEAMS_TEAM_SLUG.bind(org, team_slug), query, body, response_model)

    async def get_orgs_org_teams_team_slug_discussions_discussion_number(
        self,
        org: PathParam,
        team_slug: PathParam,
        discussion_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamDiscussion,
    ) -> models.TeamDiscussion:
        """Get a discussion (HTTP GET /orgs/{org}/teams/{team_slug}/discussions/{discussion_number})"""
        return await self.client.req(Route.GET_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER.bind(org, team_slug, discussion_number), query, body, response_model)

    async def patch_orgs_org_teams_team_slug_discussions_discussion_number(
        self,
        org: PathParam,
        team_slug: PathParam,
        discussion_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamDiscussion,
    ) -> models.TeamDiscussion:
        """Update a discussion (HTTP PATCH /orgs/{org}/teams/{team_slug}/discussions/{discussion_number})"""
        return await self.client.req(Route.PATCH_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER.bind(org, team_slug, discussion_number), query, body, response_model)

    async def get_orgs_org_teams_team_slug_discussions_discussion_number_comments_comment_number(
        self,
        org: PathParam,
        team_slug: PathParam,
        discussion_number: PathParam,
        comment_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamDiscussionComment,
    ) -> models.TeamDiscussionComment:
        """Get a discussion comment (HTTP GET /orgs/{org}/teams/{team_slug}/discussions/{discussion_number}/comments/{comment_number})"""
        return await self.client.req(Route.GET_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER_COMMENTS_COMMENT_NUMBER.bind(org, team_slug, discussion_number, comment_number), query, body, response_model)

    async def patch_orgs_org_teams_team_slug_discussions_discussion_number_comments_comment_number(
        self,
        org: PathParam,
        team_slug: PathParam,
        discussion_number: PathParam,
        comment_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamDiscussionComment,
    ) -> models.TeamDiscussionComment:
        """Update a discussion comment (HTTP PATCH /orgs/{org}/teams/{team_slug}/discussions/{discussion_number}/comments/{comment_number})"""
        return await self.client.req(Route.PATCH_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER_COMMENTS_COMMENT_NUMBER.bind(org, team_slug, discussion_number, comment_number), query, body, response_model)

    async def post_orgs_org_teams_team_slug_discussions_discussion_number_comments_comment_number_reactions(
        self,
        org: PathParam,
        team_slug: PathParam,
        discussion_number: PathParam,
        comment_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Reaction,
    ) -> models.Reaction:
        """Create reaction for a team discussion comment (HTTP POST /orgs/{org}/teams/{team_slug}/discussions/{discussion_number}/comments/{comment_number}/reactions)"""
        return await self.client.req(Route.POST_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER_COMMENTS_COMMENT_NUMBER_REACTIONS.bind(org, team_slug, discussion_number, comment_number), query, body, response_model)

    async def post_orgs_org_teams_team_slug_discussions_discussion_number_reactions(
        self,
        org: PathParam,
        team_slug: PathParam,
        discussion_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Reaction,
    ) -> models.Reaction:
        """Create reaction for a team discussion (HTTP POST /orgs/{org}/teams/{team_slug}/discussions/{discussion_number}/reactions)"""
        return await self.client.req(Route.POST_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER_REACTIONS.bind(org, team_slug, discussion_number), query, body, response_model)

    async def patch_orgs_org_teams_team_slug_external_groups(
        self,
        org: PathParam,
        team_slug: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ExternalGroup,
    ) -> models.ExternalGroup:
        """Update the connection between an external group and a team (HTTP PATCH /orgs/{org}/teams/{team_slug}/external-groups)"""
        return await self.client.req(Route.PATCH_ORGS_ORG_TEAMS_TEAM_SLUG_EXTERNAL_GROUPS.bind(org, team_slug), query, body, response_model)

    async def get_orgs_org_teams_team_slug_members(
        self,
        org: PathParam,
        team_slug: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.SimpleUser],
    ) -> List[models.SimpleUser]:
        """List team members (HTTP GET /orgs/{org}/teams/{team_slug}/members)"""
        return await self.client.req(Route.GET_ORGS_ORG_TEAMS_TEAM_SLUG_MEMBERS.bind(org, team_slug), query, body, response_model)

    async def get_orgs_org_teams_team_slug_memberships_username(
        self,
        org: PathParam,
        team_slug: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamMembership,
    ) -> models.TeamMembership:
        """Get team membership for a user (HTTP GET /orgs/{org}/teams/{team_slug}/memberships/{username})"""
        return await self.client.req(Route.GET_ORGS_ORG_TEAMS_TEAM_SLUG_MEMBERSHIPS_USERNAME.bind(org, team_slug, username), query, body, response_model)

    async def put_orgs_org_teams_team_slug_memberships_username(
        self,
        org: PathParam,
        team_slug: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamMembership,
    ) -> models.TeamMembership:
        """Add or update team membership for a user (HTTP PUT /orgs/{org}/teams/{team_slug}/memberships/{username})"""
        return await self.client.req(Route.PUT_ORGS_ORG_TEAMS_TEAM_SLUG_MEMBERSHIPS_USERNAME.bind(org, team_slug, username), query, body, response_model)

    async def get_orgs_org_teams_team_slug_projects_project_id(
        self,
        org: PathParam,
        team_slug: PathParam,
        project_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamProject,
    ) -> models.TeamProject:
        """Check team permissions for a project (HTTP GET /orgs/{org}/teams/{team_slug}/projects/{project_id})"""
        return await self.client.req(Route.GET_ORGS_ORG_TEAMS_TEAM_SLUG_PROJECTS_PROJECT_ID.bind(org, team_slug, project_id), query, body, response_model)

    async def get_orgs_org_teams_team_slug_repos(
        self,
        org: PathParam,
        team_slug: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Repository],
    ) -> List[models.Repository]:
        """List team repositories (HTTP GET /orgs/{org}/teams/{team_slug}/repos)"""
        return await self.client.req(Route.GET_ORGS_ORG_TEAMS_TEAM_SLUG_REPOS.bind(org, team_slug), query, body, response_model)

    async def get_orgs_org_teams_team_slug_repos_owner_repo(
        self,
        org: PathParam,
        team_slug: PathParam,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamRepository,
    ) -> models.TeamRepository:
        """Check team permissions for a repository (HTTP GET /orgs/{org}/teams/{team_slug}/repos/{owner}/{repo})"""
        return await self.client.req(Route.GET_ORGS_ORG_TEAMS_TEAM_SLUG_REPOS_OWNER_REPO.bind(org, team_slug, owner, repo), query, body, response_model)

    async def get_orgs_org_teams_team_slug_team_sync_group_mappings(
        self,
        org: PathParam,
        team_slug: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GroupMapping,
    ) -> models.GroupMapping:
        """List IdP groups for a team (HTTP GET /orgs/{org}/teams/{team_slug}/team-sync/group-mappings)"""
        return await self.client.req(Route.GET_ORGS_ORG_TEAMS_TEAM_SLUG_TEAM_SYNC_GROUP_MAPPINGS.bind(org, team_slug), query, body, response_model)

    async def patch_orgs_org_teams_team_slug_team_sync_group_mappings(
        self,
        org: PathParam,
        team_slug: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GroupMapping,
    ) -> models.GroupMapping:
        """Create or update IdP group connections (HTTP PATCH /orgs/{org}/teams/{team_slug}/team-sync/group-mappings)"""
        return await self.client.req(Route.PATCH_ORGS_ORG_TEAMS_TEAM_SLUG_TEAM_SYNC_GROUP_MAPPINGS.bind(org, team_slug), query, body, response_model)

    async def get_projects_columns_cards_card_id(
        self,
        card_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProjectCard,
    ) -> models.ProjectCard:
        """Get a project card (HTTP GET /projects/columns/cards/{card_id})"""
        return await self.client.req(Route.GET_PROJECTS_COLUMNS_CARDS_CARD_ID.bind(card_id), query, body, response_model)

    async def patch_projects_columns_cards_card_id(
        self,
        card_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProjectCard,
    ) -> models.ProjectCard:
        """Update an existing project card (HTTP PATCH /projects/columns/cards/{card_id})"""
        return await self.client.req(Route.PATCH_PROJECTS_COLUMNS_CARDS_CARD_ID.bind(card_id), query, body, response_model)

    async def get_projects_columns_column_id(
        self,
        column_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProjectColumn,
    ) -> models.ProjectColumn:
        """Get a project column (HTTP GET /projects/columns/{column_id})"""
        return await self.client.req(Route.GET_PROJECTS_COLUMNS_COLUMN_ID.bind(column_id), query, body, response_model)

    async def patch_projects_columns_column_id(
        self,
        column_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProjectColumn,
    ) -> models.ProjectColumn:
        """Update an existing project column (HTTP PATCH /projects/columns/{column_id})"""
        return await self.client.req(Route.PATCH_PROJECTS_COLUMNS_COLUMN_ID.bind(column_id), query, body, response_model)

    async def get_projects_project_id(
        self,
        project_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Project,
    ) -> models.Project:
        """Get a project (HTTP GET /projects/{project_id})"""
        return await self.client.req(Route.GET_PROJECTS_PROJECT_ID.bind(project_id), query, body, response_model)

    async def patch_projects_project_id(
        self,
        project_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Project,
    ) -> models.Project:
        """Update a project (HTTP PATCH /projects/{project_id})"""
        return await self.client.req(Route.PATCH_PROJECTS_PROJECT_ID.bind(project_id), query, body, response_model)

    async def get_projects_project_id_collaborators_username_permission(
        self,
        project_id: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProjectCollaboratorPermission,
    ) -> models.ProjectCollaboratorPermission:
        """Get project permission for a user (HTTP GET /projects/{project_id}/collaborators/{username}/permission)"""
        return await self.client.req(Route.GET_PROJECTS_PROJECT_ID_COLLABORATORS_USERNAME_PERMISSION.bind(project_id, username), query, body, response_model)

    async def get_rate_limit(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.RateLimitOverview,
    ) -> models.RateLimitOverview:
        """Get rate limit status for the authenticated user (HTTP GET /rate_limit)"""
        return await self.client.req(Route.GET_RATE_LIMIT.bind(), query, body, response_model)

    async def get_repos_owner_repo(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.FullRepository,
    ) -> models.FullRepository:
        """Get a repository (HTTP GET /repos/{owner}/{repo})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO.bind(owner, repo), query, body, response_model)

    async def patch_repos_owner_repo(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.FullRepository,
    ) -> models.FullRepository:
        """Update a repository (HTTP PATCH /repos/{owner}/{repo})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO.bind(owner, repo), query, body, response_model)

    async def delete_repos_owner_repo(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a repository (HTTP DELETE /repos/{owner}/{repo})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_actions_artifacts(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List artifacts for a repository (HTTP GET /repos/{owner}/{repo}/actions/artifacts)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_ARTIFACTS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_actions_artifacts_artifact_id(
        self,
        owner: PathParam,
        repo: PathParam,
        artifact_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Artifact,
    ) -> models.Artifact:
        """Get an artifact (HTTP GET /repos/{owner}/{repo}/actions/artifacts/{artifact_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_ARTIFACTS_ARTIFACT_ID.bind(owner, repo, artifact_id), query, body, response_model)

    async def delete_repos_owner_repo_actions_artifacts_artifact_id(
        self,
        owner: PathParam,
        repo: PathParam,
        artifact_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete an artifact (HTTP DELETE /repos/{owner}/{repo}/actions/artifacts/{artifact_id})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_ACTIONS_ARTIFACTS_ARTIFACT_ID.bind(owner, repo, artifact_id), query, body, response_model)

    async def get_repos_owner_repo_actions_jobs_job_id(
        self,
        owner: PathParam,
        repo: PathParam,
        job_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Job,
    ) -> models.Job:
        """Get a job for a workflow run (HTTP GET /repos/{owner}/{repo}/actions/jobs/{job_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_JOBS_JOB_ID.bind(owner, repo, job_id), query, body, response_model)

    async def get_repos_owner_repo_actions_permissions(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ActionsRepositoryPermissions,
    ) -> models.ActionsRepositoryPermissions:
        """Get GitHub Actions permissions for a repository (HTTP GET /repos/{owner}/{repo}/actions/permissions)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_PERMISSIONS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_actions_permissions_selected_actions(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.SelectedActions,
    ) -> models.SelectedActions:
        """Get allowed actions for a repository (HTTP GET /repos/{owner}/{repo}/actions/permissions/selected-actions)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_PERMISSIONS_SELECTED_ACTIONS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_actions_runners(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List self-hosted runners for a repository (HTTP GET /repos/{owner}/{repo}/actions/runners)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_RUNNERS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_actions_runners_runner_id(
        self,
        owner: PathParam,
        repo: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Runner,
    ) -> models.Runner:
        """Get a self-hosted runner for a repository (HTTP GET /repos/{owner}/{repo}/actions/runners/{runner_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID.bind(owner, repo, runner_id), query, body, response_model)

    async def get_repos_owner_repo_actions_runners_runner_id_labels(
        self,
        owner: PathParam,
        repo: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List labels for a self-hosted runner for a repository (HTTP GET /repos/{owner}/{repo}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(owner, repo, runner_id), query, body, response_model)

    async def post_repos_owner_repo_actions_runners_runner_id_labels(
        self,
        owner: PathParam,
        repo: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Add custom labels to a self-hosted runner for a repository (HTTP POST /repos/{owner}/{repo}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(owner, repo, runner_id), query, body, response_model)

    async def put_repos_owner_repo_actions_runners_runner_id_labels(
        self,
        owner: PathParam,
        repo: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Set custom labels for a self-hosted runner for a repository (HTTP PUT /repos/{owner}/{repo}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(owner, repo, runner_id), query, body, response_model)

    async def delete_repos_owner_repo_actions_runners_runner_id_labels(
        self,
        owner: PathParam,
        repo: PathParam,
        runner_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Remove all custom labels from a self-hosted runner for a repository (HTTP DELETE /repos/{owner}/{repo}/actions/runners/{runner_id}/labels)"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID_LABELS.bind(owner, repo, runner_id), query, body, response_model)

    async def delete_repos_owner_repo_actions_runners_runner_id_labels_name(
        self,
        owner: PathParam,
        repo: PathParam,
        runner_id: PathParam,
        name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Remove a custom label from a self-hosted runner for a repository (HTTP DELETE /repos/{owner}/{repo}/actions/runners/{runner_id}/labels/{name})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_ACTIONS_RUNNERS_RUNNER_ID_LABELS_NAME.bind(owner, repo, runner_id, name), query, body, response_model)

    async def get_repos_owner_repo_actions_runs(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List workflow runs for a repository (HTTP GET /repos/{owner}/{repo}/actions/runs)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_RUNS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_actions_runs_run_id(
        self,
        owner: PathParam,
        repo: PathParam,
        run_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.WorkflowRun,
    ) -> models.WorkflowRun:
        """Get a workflow run (HTTP GET /repos/{owner}/{repo}/actions/runs/{run_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID.bind(owner, repo, run_id), query, body, response_model)

    async def delete_repos_owner_repo_actions_runs_run_id(
        self,
        owner: PathParam,
        repo: PathParam,
        run_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a workflow run (HTTP DELETE /repos/{owner}/{repo}/actions/runs/{run_id})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID.bind(owner, repo, run_id), query, body, response_model)

    async def get_repos_owner_repo_actions_runs_run_id_artifacts(
        self,
        owner: PathParam,
        repo: PathParam,
        run_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List workflow run artifacts (HTTP GET /repos/{owner}/{repo}/actions/runs/{run_id}/artifacts)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_ARTIFACTS.bind(owner, repo, run_id), query, body, response_model)

    async def get_repos_owner_repo_actions_runs_run_id_attempts_attempt_number(
        self,
        owner: PathParam,
        repo: PathParam,
        run_id: PathParam,
        attempt_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.WorkflowRun,
    ) -> models.WorkflowRun:
        """Get a workflow run attempt (HTTP GET /repos/{owner}/{repo}/actions/runs/{run_id}/attempts/{attempt_number})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_ATTEMPTS_ATTEMPT_NUMBER.bind(owner, repo, run_id, attempt_number), query, body, response_model)

    async def get_repos_owner_repo_actions_runs_run_id_attempts_attempt_number_jobs(
        self,
        owner: PathParam,
        repo: PathParam,
        run_id: PathParam,
        attempt_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List jobs for a workflow run attempt (HTTP GET /repos/{owner}/{repo}/actions/runs/{run_id}/attempts/{attempt_number}/jobs)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_ATTEMPTS_ATTEMPT_NUMBER_JOBS.bind(owner, repo, run_id, attempt_number), query, body, response_model)

    async def post_repos_owner_repo_actions_runs_run_id_cancel(
        self,
        owner: PathParam,
        repo: PathParam,
        run_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Cancel a workflow run (HTTP POST /repos/{owner}/{repo}/actions/runs/{run_id}/cancel)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_CANCEL.bind(owner, repo, run_id), query, body, response_model)

    async def get_repos_owner_repo_actions_runs_run_id_jobs(
        self,
        owner: PathParam,
        repo: PathParam,
        run_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List jobs for a workflow run (HTTP GET /repos/{owner}/{repo}/actions/runs/{run_id}/jobs)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_JOBS.bind(owner, repo, run_id), query, body, response_model)

    async def post_repos_owner_repo_actions_runs_run_id_rerun(
        self,
        owner: PathParam,
        repo: PathParam,
        run_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Re-run a workflow (HTTP POST /repos/{owner}/{repo}/actions/runs/{run_id}/rerun)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_RERUN.bind(owner, repo, run_id), query, body, response_model)

    async def get_repos_owner_repo_actions_runs_run_id_timing(
        self,
        owner: PathParam,
        repo: PathParam,
        run_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.WorkflowRunUsage,
    ) -> models.WorkflowRunUsage:
        """Get workflow run usage (HTTP GET /repos/{owner}/{repo}/actions/runs/{run_id}/timing)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_RUNS_RUN_ID_TIMING.bind(owner, repo, run_id), query, body, response_model)

    async def get_repos_owner_repo_actions_secrets(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List repository secrets (HTTP GET /repos/{owner}/{repo}/actions/secrets)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_SECRETS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_actions_secrets_public_key(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ActionsPublicKey,
    ) -> models.ActionsPublicKey:
        """Get a repository public key (HTTP GET /repos/{owner}/{repo}/actions/secrets/public-key)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_SECRETS_PUBLIC_KEY.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_actions_secrets_secret_name(
        self,
        owner: PathParam,
        repo: PathParam,
        secret_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ActionsSecret,
    ) -> models.ActionsSecret:
        """Get a repository secret (HTTP GET /repos/{owner}/{repo}/actions/secrets/{secret_name})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_SECRETS_SECRET_NAME.bind(owner, repo, secret_name), query, body, response_model)

    async def get_repos_owner_repo_actions_workflows(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List repository workflows (HTTP GET /repos/{owner}/{repo}/actions/workflows)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_WORKFLOWS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_actions_workflows_workflow_id(
        self,
        owner: PathParam,
        repo: PathParam,
        workflow_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Workflow,
    ) -> models.Workflow:
        """Get a workflow (HTTP GET /repos/{owner}/{repo}/actions/workflows/{workflow_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_WORKFLOWS_WORKFLOW_ID.bind(owner, repo, workflow_id), query, body, response_model)

    async def post_repos_owner_repo_actions_workflows_workflow_id_dispatches(
        self,
        owner: PathParam,
        repo: PathParam,
        workflow_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Create a workflow dispatch event (HTTP POST /repos/{owner}/{repo}/actions/workflows/{workflow_id}/dispatches)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_ACTIONS_WORKFLOWS_WORKFLOW_ID_DISPATCHES.bind(owner, repo, workflow_id), query, body, response_model)

    async def get_repos_owner_repo_actions_workflows_workflow_id_runs(
        self,
        owner: PathParam,
        repo: PathParam,
        workflow_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List workflow runs (HTTP GET /repos/{owner}/{repo}/actions/workflows/{workflow_id}/runs)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_WORKFLOWS_WORKFLOW_ID_RUNS.bind(owner, repo, workflow_id), query, body, response_model)

    async def get_repos_owner_repo_actions_workflows_workflow_id_timing(
        self,
        owner: PathParam,
        repo: PathParam,
        workflow_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.WorkflowUsage,
    ) -> models.WorkflowUsage:
        """Get workflow usage (HTTP GET /repos/{owner}/{repo}/actions/workflows/{workflow_id}/timing)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ACTIONS_WORKFLOWS_WORKFLOW_ID_TIMING.bind(owner, repo, workflow_id), query, body, response_model)

    async def get_repos_owner_repo_assignees(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.SimpleUser],
    ) -> List[models.SimpleUser]:
        """List assignees (HTTP GET /repos/{owner}/{repo}/assignees)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ASSIGNEES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_autolinks_autolink_id(
        self,
        owner: PathParam,
        repo: PathParam,
        autolink_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Autolink,
    ) -> models.Autolink:
        """Get an autolink reference of a repository (HTTP GET /repos/{owner}/{repo}/autolinks/{autolink_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_AUTOLINKS_AUTOLINK_ID.bind(owner, repo, autolink_id), query, body, response_model)

    async def get_repos_owner_repo_branches(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List branches (HTTP GET /repos/{owner}/{repo}/branches)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_BRANCHES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_branches_branch(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.BranchWithProtection,
    ) -> models.BranchWithProtection:
        """Get a branch (HTTP GET /repos/{owner}/{repo}/branches/{branch})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_BRANCHES_BRANCH.bind(owner, repo, branch), query, body, response_model)

    async def get_repos_owner_repo_branches_branch_protection(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.BranchProtection,
    ) -> models.BranchProtection:
        """Get branch protection (HTTP GET /repos/{owner}/{repo}/branches/{branch}/protection)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION.bind(owner, repo, branch), query, body, response_model)

    async def put_repos_owner_repo_branches_branch_protection(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProtectedBranch,
    ) -> models.ProtectedBranch:
        """Update branch protection (HTTP PUT /repos/{owner}/{repo}/branches/{branch}/protection)"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION.bind(owner, repo, branch), query, body, response_model)

    async def delete_repos_owner_repo_branches_branch_protection(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete branch protection (HTTP DELETE /repos/{owner}/{repo}/branches/{branch}/protection)"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION.bind(owner, repo, branch), query, body, response_model)

    async def get_repos_owner_repo_branches_branch_protection_enforce_admins(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProtectedBranchAdminEnforced,
    ) -> models.ProtectedBranchAdminEnforced:
        """Get admin branch protection (HTTP GET /repos/{owner}/{repo}/branches/{branch}/protection/enforce_admins)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_ENFORCE_ADMINS.bind(owner, repo, branch), query, body, response_model)

    async def post_repos_owner_repo_branches_branch_protection_enforce_admins(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProtectedBranchAdminEnforced,
    ) -> models.ProtectedBranchAdminEnforced:
        """Set admin branch protection (HTTP POST /repos/{owner}/{repo}/branches/{branch}/protection/enforce_admins)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_ENFORCE_ADMINS.bind(owner, repo, branch), query, body, response_model)

    async def get_repos_owner_repo_branches_branch_protection_required_pull_request_reviews(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProtectedBranchPullRequestReview,
    ) -> models.ProtectedBranchPullRequestReview:
        """Get pull request review protection (HTTP GET /repos/{owner}/{repo}/branches/{branch}/protection/required_pull_request_reviews)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_PULL_REQUEST_REVIEWS.bind(owner, repo, branch), query, body, response_model)

    async def patch_repos_owner_repo_branches_branch_protection_required_pull_request_reviews(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProtectedBranchPullRequestReview,
    ) -> models.ProtectedBranchPullRequestReview:
        """Update pull request review protection (HTTP PATCH /repos/{owner}/{repo}/branches/{branch}/protection/required_pull_request_reviews)"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_PULL_REQUEST_REVIEWS.bind(owner, repo, branch), query, body, response_model)

    async def get_repos_owner_repo_branches_branch_protection_required_signatures(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProtectedBranchAdminEnforced,
    ) -> models.ProtectedBranchAdminEnforced:
        """Get commit signature protection (HTTP GET /repos/{owner}/{repo}/branches/{branch}/protection/required_signatures)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_SIGNATURES.bind(owner, repo, branch), query, body, response_model)

    async def post_repos_owner_repo_branches_branch_protection_required_signatures(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ProtectedBranchAdminEnforced,
    ) -> models.ProtectedBranchAdminEnforced:
        """Create commit signature protection (HTTP POST /repos/{owner}/{repo}/branches/{branch}/protection/required_signatures)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_SIGNATURES.bind(owner, repo, branch), query, body, response_model)

    async def get_repos_owner_repo_branches_branch_protection_required_status_checks(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.StatusCheckPolicy,
    ) -> models.StatusCheckPolicy:
        """Get status checks protection (HTTP GET /repos/{owner}/{repo}/branches/{branch}/protection/required_status_checks)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_STATUS_CHECKS.bind(owner, repo, branch), query, body, response_model)

    async def patch_repos_owner_repo_branches_branch_protection_required_status_checks(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.StatusCheckPolicy,
    ) -> models.StatusCheckPolicy:
        """Update status check protection (HTTP PATCH /repos/{owner}/{repo}/branches/{branch}/protection/required_status_checks)"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_REQUIRED_STATUS_CHECKS.bind(owner, repo, branch), query, body, response_model)

    async def get_repos_owner_repo_branches_branch_protection_restrictions(
        self,
        owner: PathParam,
        repo: PathParam,
        branch: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.BranchRestrictionPolicy,
    ) -> models.BranchRestrictionPolicy:
        """Get access restrictions (HTTP GET /repos/{owner}/{repo}/branches/{branch}/protection/restrictions)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_RESTRICTIONS.bind(owner, repo, branch), query, body, response_model)

    async def get_repos_owner_repo_check_runs_check_run_id(
        self,
        owner: PathParam,
        repo: PathParam,
        check_run_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CheckRun,
    ) -> models.CheckRun:
        """Get a check run (HTTP GET /repos/{owner}/{repo}/check-runs/{check_run_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_CHECK_RUNS_CHECK_RUN_ID.bind(owner, repo, check_run_id), query, body, response_model)

    async def patch_repos_owner_repo_check_runs_check_run_id(
        self,
        owner: PathParam,
        repo: PathParam,
        check_run_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CheckRun,
    ) -> models.CheckRun:
        """Update a check run (HTTP PATCH /repos/{owner}/{repo}/check-runs/{check_run_id})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_CHECK_RUNS_CHECK_RUN_ID.bind(owner, repo, check_run_id), query, body, response_model)

    async def post_repos_owner_repo_check_suites(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CheckSuite,
    ) -> models.CheckSuite:
        """Create a check suite (HTTP POST /repos/{owner}/{repo}/check-suites)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_CHECK_SUITES.bind(owner, repo), query, body, response_model)

    async def patch_repos_owner_repo_check_suites_preferences(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CheckSuitePreference,
    ) -> models.CheckSuitePreference:
        """Update repository preferences for check suites (HTTP PATCH /repos/{owner}/{repo}/check-suites/preferences)"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_CHECK_SUITES_PREFERENCES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_check_suites_check_suite_id(
        self,
        owner: PathParam,
        repo: PathParam,
        check_suite_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CheckSuite,
    ) -> models.CheckSuite:
        """Get a check suite (HTTP GET /repos/{owner}/{repo}/check-suites/{check_suite_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_CHECK_SUITES_CHECK_SUITE_ID.bind(owner, repo, check_suite_id), query, body, response_model)

    async def get_repos_owner_repo_check_suites_check_suite_id_check_runs(
        self,
        owner: PathParam,
        repo: PathParam,
        check_suite_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List check runs in a check suite (HTTP GET /repos/{owner}/{repo}/check-suites/{check_suite_id}/check-runs)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_CHECK_SUITES_CHECK_SUITE_ID_CHECK_RUNS.bind(owner, repo, check_suite_id), query, body, response_model)

    async def get_repos_owner_repo_code_scanning_alerts_alert_number(
        self,
        owner: PathParam,
        repo: PathParam,
        alert_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CodeScanningAlert,
    ) -> models.CodeScanningAlert:
        """Get a code scanning alert (HTTP GET /repos/{owner}/{repo}/code-scanning/alerts/{alert_number})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_CODE_SCANNING_ALERTS_ALERT_NUMBER.bind(owner, repo, alert_number), query, body, response_model)

    async def patch_repos_owner_repo_code_scanning_alerts_alert_number(
        self,
        owner: PathParam,
        repo: PathParam,
        alert_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CodeScanningAlert,
    ) -> models.CodeScanningAlert:
        """Update a code scanning alert (HTTP PATCH /repos/{owner}/{repo}/code-scanning/alerts/{alert_number})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_CODE_SCANNING_ALERTS_ALERT_NUMBER.bind(owner, repo, alert_number), query, body, response_model)

    async def get_repos_owner_repo_code_scanning_analyses_analysis_id(
        self,
        owner: PathParam,
        repo: PathParam,
        analysis_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CodeScanningAnalysis,
    ) -> models.CodeScanningAnalysis:
        """Get a code scanning analysis for a repository (HTTP GET /repos/{owner}/{repo}/code-scanning/analyses/{analysis_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_CODE_SCANNING_ANALYSES_ANALYSIS_ID.bind(owner, repo, analysis_id), query, body, response_model)

    async def delete_repos_owner_repo_code_scanning_analyses_analysis_id(
        self,
        owner: PathParam,
        repo: PathParam,
        analysis_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CodeScanningAnalysisDeletion,
    ) -> models.CodeScanningAnalysisDeletion:
        """Delete a code scanning analysis from a repository (HTTP DELETE /repos/{owner}/{repo}/code-scanning/analyses/{analysis_id})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_CODE_SCANNING_ANALYSES_ANALYSIS_ID.bind(owner, repo, analysis_id), query, body, response_model)

    async def get_repos_owner_repo_code_scanning_sarifs_sarif_id(
        self,
        owner: PathParam,
        repo: PathParam,
        sarif_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CodeScanningSarifsStatus,
    ) -> models.CodeScanningSarifsStatus:
        """Get information about a SARIF upload (HTTP GET /repos/{owner}/{repo}/code-scanning/sarifs/{sarif_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_CODE_SCANNING_SARIFS_SARIF_ID.bind(owner, repo, sarif_id), query, body, response_model)

    async def get_repos_owner_repo_codespaces(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List codespaces in a repository for the authenticated user (HTTP GET /repos/{owner}/{repo}/codespaces)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_CODESPACES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_codespaces_machines(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List available machine types for a repository (HTTP GET /repos/{owner}/{repo}/codespaces/machines)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_CODESPACES_MACHINES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_collaborators(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List repository collaborators (HTTP GET /repos/{owner}/{repo}/collaborators)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_COLLABORATORS.bind(owner, repo), query, body, response_model)

    async def put_repos_owner_repo_collaborators_username(
        self,
        owner: PathParam,
        repo: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.RepositoryInvitation,
    ) -> models.RepositoryInvitation:
        """Add a repository collaborator (HTTP PUT /repos/{owner}/{repo}/collaborators/{username})"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_COLLABORATORS_USERNAME.bind(owner, repo, username), query, body, response_model)

    async def delete_repos_owner_repo_collaborators_username(
        self,
        owner: PathParam,
        repo: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Remove a repository collaborator (HTTP DELETE /repos/{owner}/{repo}/collaborators/{username})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_COLLABORATORS_USERNAME.bind(owner, repo, username), query, body, response_model)

    async def get_repos_owner_repo_collaborators_username_permission(
        self,
        owner: PathParam,
        repo: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.RepositoryCollaboratorPermission,
    ) -> models.RepositoryCollaboratorPermission:
        """Get repository permissions for a user (HTTP GET /repos/{owner}/{repo}/collaborators/{username}/permission)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_COLLABORATORS_USERNAME_PERMISSION.bind(owner, repo, username), query, body, response_model)

    async def get_repos_owner_repo_comments_comment_id(
        self,
        owner: PathParam,
        repo: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CommitComment,
    ) -> models.CommitComment:
        """Get a commit comment (HTTP GET /repos/{owner}/{repo}/comments/{comment_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_COMMENTS_COMMENT_ID.bind(owner, repo, comment_id), query, body, response_model)

    async def patch_repos_owner_repo_comments_comment_id(
        self,
        owner: PathParam,
        repo: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CommitComment,
    ) -> models.CommitComment:
        """Update a commit comment (HTTP PATCH /repos/{owner}/{repo}/comments/{comment_id})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_COMMENTS_COMMENT_ID.bind(owner, repo, comment_id), query, body, response_model)

    async def post_repos_owner_repo_comments_comment_id_reactions(
        self,
        owner: PathParam,
        repo: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Reaction,
    ) -> models.Reaction:
        """Create reaction for a commit comment (HTTP POST /repos/{owner}/{repo}/comments/{comment_id}/reactions)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_COMMENTS_COMMENT_ID_REACTIONS.bind(owner, repo, comment_id), query, body, response_model)

    async def get_repos_owner_repo_commits(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Commit],
    ) -> List[models.Commit]:
        """List commits (HTTP GET /repos/{owner}/{repo}/commits)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_COMMITS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_commits_commit_sha_comments(
        self,
        owner: PathParam,
        repo: PathParam,
        commit_sha: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.CommitComment],
    ) -> List[models.CommitComment]:
        """List commit comments (HTTP GET /repos/{owner}/{repo}/commits/{commit_sha}/comments)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_COMMITS_COMMIT_SHA_COMMENTS.bind(owner, repo, commit_sha), query, body, response_model)

    async def get_repos_owner_repo_commits_ref(
        self,
        owner: PathParam,
        repo: PathParam,
        ref: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Commit,
    ) -> models.Commit:
        """Get a commit (HTTP GET /repos/{owner}/{repo}/commits/{ref})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_COMMITS_REF.bind(owner, repo, ref), query, body, response_model)

    async def get_repos_owner_repo_commits_ref_check_runs(
        self,
        owner: PathParam,
        repo: PathParam,
        ref: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List check runs for a Git reference (HTTP GET /repos/{owner}/{repo}/commits/{ref}/check-runs)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_COMMITS_REF_CHECK_RUNS.bind(owner, repo, ref), query, body, response_model)

    async def get_repos_owner_repo_commits_ref_check_suites(
        self,
        owner: PathParam,
        repo: PathParam,
        ref: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List check suites for a Git reference (HTTP GET /repos/{owner}/{repo}/commits/{ref}/check-suites)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_COMMITS_REF_CHECK_SUITES.bind(owner, repo, ref), query, body, response_model)

    async def get_repos_owner_repo_commits_ref_status(
        self,
        owner: PathParam,
        repo: PathParam,
        ref: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CombinedCommitStatus,
    ) -> models.CombinedCommitStatus:
        """Get the combined status for a specific reference (HTTP GET /repos/{owner}/{repo}/commits/{ref}/status)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_COMMITS_REF_STATUS.bind(owner, repo, ref), query, body, response_model)

    async def get_repos_owner_repo_community_profile(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CommunityProfile,
    ) -> models.CommunityProfile:
        """Get community profile metrics (HTTP GET /repos/{owner}/{repo}/community/profile)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_COMMUNITY_PROFILE.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_compare_basehead(
        self,
        owner: PathParam,
        repo: PathParam,
        basehead: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CommitComparison,
    ) -> models.CommitComparison:
        """Compare two commits (HTTP GET /repos/{owner}/{repo}/compare/{basehead})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_COMPARE_BASEHEAD.bind(owner, repo, basehead), query, body, response_model)

    async def get_repos_owner_repo_contents_path(
        self,
        owner: PathParam,
        repo: PathParam,
        path: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Any,
    ) -> Any:
        """Get repository content (HTTP GET /repos/{owner}/{repo}/contents/{path})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_CONTENTS_PATH.bind(owner, repo, path), query, body, response_model)

    async def put_repos_owner_repo_contents_path(
        self,
        owner: PathParam,
        repo: PathParam,
        path: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.FileCommit,
    ) -> models.FileCommit:
        """Create or update file contents (HTTP PUT /repos/{owner}/{repo}/contents/{path})"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_CONTENTS_PATH.bind(owner, repo, path), query, body, response_model)

    async def delete_repos_owner_repo_contents_path(
        self,
        owner: PathParam,
        repo: PathParam,
        path: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.FileCommit,
    ) -> models.FileCommit:
        """Delete a file (HTTP DELETE /repos/{owner}/{repo}/contents/{path})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_CONTENTS_PATH.bind(owner, repo, path), query, body, response_model)

    async def get_repos_owner_repo_contributors(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List repository contributors (HTTP GET /repos/{owner}/{repo}/contributors)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_CONTRIBUTORS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_deployments(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Deployment],
    ) -> List[models.Deployment]:
        """List deployments (HTTP GET /repos/{owner}/{repo}/deployments)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_DEPLOYMENTS.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_deployments(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Deployment,
    ) -> models.Deployment:
        """Create a deployment (HTTP POST /repos/{owner}/{repo}/deployments)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_DEPLOYMENTS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_deployments_deployment_id(
        self,
        owner: PathParam,
        repo: PathParam,
        deployment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Deployment,
    ) -> models.Deployment:
        """Get a deployment (HTTP GET /repos/{owner}/{repo}/deployments/{deployment_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_DEPLOYMENTS_DEPLOYMENT_ID.bind(owner, repo, deployment_id), query, body, response_model)

    async def delete_repos_owner_repo_deployments_deployment_id(
        self,
        owner: PathParam,
        repo: PathParam,
        deployment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a deployment (HTTP DELETE /repos/{owner}/{repo}/deployments/{deployment_id})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_DEPLOYMENTS_DEPLOYMENT_ID.bind(owner, repo, deployment_id), query, body, response_model)

    async def get_repos_owner_repo_deployments_deployment_id_statuses_status_id(
        self,
        owner: PathParam,
        repo: PathParam,
        deployment_id: PathParam,
        status_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.DeploymentStatus,
    ) -> models.DeploymentStatus:
        """Get a deployment status (HTTP GET /repos/{owner}/{repo}/deployments/{deployment_id}/statuses/{status_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_DEPLOYMENTS_DEPLOYMENT_ID_STATUSES_STATUS_ID.bind(owner, repo, deployment_id, status_id), query, body, response_model)

    async def post_repos_owner_repo_dispatches(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Create a repository dispatch event (HTTP POST /repos/{owner}/{repo}/dispatches)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_DISPATCHES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_environments(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Get all environments (HTTP GET /repos/{owner}/{repo}/environments)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ENVIRONMENTS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_environments_environment_name(
        self,
        owner: PathParam,
        repo: PathParam,
        environment_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Environment,
    ) -> models.Environment:
        """Get an environment (HTTP GET /repos/{owner}/{repo}/environments/{environment_name})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ENVIRONMENTS_ENVIRONMENT_NAME.bind(owner, repo, environment_name), query, body, response_model)

    async def put_repos_owner_repo_environments_environment_name(
        self,
        owner: PathParam,
        repo: PathParam,
        environment_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Environment,
    ) -> models.Environment:
        """Create or update an environment (HTTP PUT /repos/{owner}/{repo}/environments/{environment_name})"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_ENVIRONMENTS_ENVIRONMENT_NAME.bind(owner, repo, environment_name), query, body, response_model)

    async def get_repos_owner_repo_events(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List repository events (HTTP GET /repos/{owner}/{repo}/events)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_EVENTS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_forks(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Repository],
    ) -> List[models.Repository]:
        """List forks (HTTP GET /repos/{owner}/{repo}/forks)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_FORKS.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_forks(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.FullRepository,
    ) -> models.FullRepository:
        """Create a fork (HTTP POST /repos/{owner}/{repo}/forks)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_FORKS.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_git_blobs(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Create a blob (HTTP POST /repos/{owner}/{repo}/git/blobs)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_GIT_BLOBS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_git_blobs_file_sha(
        self,
        owner: PathParam,
        repo: PathParam,
        file_sha: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Blob,
    ) -> models.Blob:
        """Get a blob (HTTP GET /repos/{owner}/{repo}/git/blobs/{file_sha})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_GIT_BLOBS_FILE_SHA.bind(owner, repo, file_sha), query, body, response_model)

    async def post_repos_owner_repo_git_commits(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GitCommit,
    ) -> models.GitCommit:
        """Create a commit (HTTP POST /repos/{owner}/{repo}/git/commits)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_GIT_COMMITS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_git_commits_commit_sha(
        self,
        owner: PathParam,
        repo: PathParam,
        commit_sha: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GitCommit,
    ) -> models.GitCommit:
        """Get a commit (HTTP GET /repos/{owner}/{repo}/git/commits/{commit_sha})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_GIT_COMMITS_COMMIT_SHA.bind(owner, repo, commit_sha), query, body, response_model)

    async def get_repos_owner_repo_git_matching_refs_ref(
        self,
        owner: PathParam,
        repo: PathParam,
        ref: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.GitRef],
    ) -> List[models.GitRef]:
        """List matching references (HTTP GET /repos/{owner}/{repo}/git/matching-refs/{ref})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_GIT_MATCHING_REFS_REF.bind(owner, repo, ref), query, body, response_model)

    async def get_repos_owner_repo_git_ref_ref(
        self,
        owner: PathParam,
        repo: PathParam,
        ref: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GitRef,
    ) -> models.GitRef:
        """Get a reference (HTTP GET /repos/{owner}/{repo}/git/ref/{ref})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_GIT_REF_REF.bind(owner, repo, ref), query, body, response_model)

    async def post_repos_owner_repo_git_refs(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GitRef,
    ) -> models.GitRef:
        """Create a reference (HTTP POST /repos/{owner}/{repo}/git/refs)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_GIT_REFS.bind(owner, repo), query, body, response_model)

    async def patch_repos_owner_repo_git_refs_ref(
        self,
        owner: PathParam,
        repo: PathParam,
        ref: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GitRef,
    ) -> models.GitRef:
        """Update a reference (HTTP PATCH /repos/{owner}/{repo}/git/refs/{ref})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_GIT_REFS_REF.bind(owner, repo, ref), query, body, response_model)

    async def delete_repos_owner_repo_git_refs_ref(
        self,
        owner: PathParam,
        repo: PathParam,
        ref: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a reference (HTTP DELETE /repos/{owner}/{repo}/git/refs/{ref})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_GIT_REFS_REF.bind(owner, repo, ref), query, body, response_model)

    async def post_repos_owner_repo_git_tags(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GitTag,
    ) -> models.GitTag:
        """Create a tag object (HTTP POST /repos/{owner}/{repo}/git/tags)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_GIT_TAGS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_git_tags_tag_sha(
        self,
        owner: PathParam,
        repo: PathParam,
        tag_sha: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GitTag,
    ) -> models.GitTag:
        """Get a tag (HTTP GET /repos/{owner}/{repo}/git/tags/{tag_sha})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_GIT_TAGS_TAG_SHA.bind(owner, repo, tag_sha), query, body, response_model)

    async def post_repos_owner_repo_git_trees(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GitTree,
    ) -> models.GitTree:
        """Create a tree (HTTP POST /repos/{owner}/{repo}/git/trees)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_GIT_TREES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_git_trees_tree_sha(
        self,
        owner: PathParam,
        repo: PathParam,
        tree_sha: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GitTree,
    ) -> models.GitTree:
        """Get a tree (HTTP GET /repos/{owner}/{repo}/git/trees/{tree_sha})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_GIT_TREES_TREE_SHA.bind(owner, repo, tree_sha), query, body, response_model)

    async def get_repos_owner_repo_hooks(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Hook],
    ) -> List[models.Hook]:
        """List repository webhooks (HTTP GET /repos/{owner}/{repo}/hooks)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_HOOKS.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_hooks(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Hook,
    ) -> models.Hook:
        """Create a repository webhook (HTTP POST /repos/{owner}/{repo}/hooks)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_HOOKS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_hooks_hook_id(
        self,
        owner: PathParam,
        repo: PathParam,
        hook_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Hook,
    ) -> models.Hook:
        """Get a repository webhook (HTTP GET /repos/{owner}/{repo}/hooks/{hook_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_HOOKS_HOOK_ID.bind(owner, repo, hook_id), query, body, response_model)

    async def patch_repos_owner_repo_hooks_hook_id(
        self,
        owner: PathParam,
        repo: PathParam,
        hook_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Hook,
    ) -> models.Hook:
        """Update a repository webhook (HTTP PATCH /repos/{owner}/{repo}/hooks/{hook_id})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_HOOKS_HOOK_ID.bind(owner, repo, hook_id), query, body, response_model)

    async def delete_repos_owner_repo_hooks_hook_id(
        self,
        owner: PathParam,
        repo: PathParam,
        hook_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a repository webhook (HTTP DELETE /repos/{owner}/{repo}/hooks/{hook_id})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_HOOKS_HOOK_ID.bind(owner, repo, hook_id), query, body, response_model)

    async def get_repos_owner_repo_hooks_hook_id_config(
        self,
        owner: PathParam,
        repo: PathParam,
        hook_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.WebhookConfig,
    ) -> models.WebhookConfig:
        """Get a webhook configuration for a repository (HTTP GET /repos/{owner}/{repo}/hooks/{hook_id}/config)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_HOOKS_HOOK_ID_CONFIG.bind(owner, repo, hook_id), query, body, response_model)

    async def patch_repos_owner_repo_hooks_hook_id_config(
        self,
        owner: PathParam,
        repo: PathParam,
        hook_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.WebhookConfig,
    ) -> models.WebhookConfig:
        """Update a webhook configuration for a repository (HTTP PATCH /repos/{owner}/{repo}/hooks/{hook_id}/config)"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_HOOKS_HOOK_ID_CONFIG.bind(owner, repo, hook_id), query, body, response_model)

    async def get_repos_owner_repo_hooks_hook_id_deliveries_delivery_id(
        self,
        owner: PathParam,
        repo: PathParam,
        hook_id: PathParam,
        delivery_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.HookDelivery,
    ) -> models.HookDelivery:
        """Get a delivery for a repository webhook (HTTP GET /repos/{owner}/{repo}/hooks/{hook_id}/deliveries/{delivery_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_HOOKS_HOOK_ID_DELIVERIES_DELIVERY_ID.bind(owner, repo, hook_id, delivery_id), query, body, response_model)

    async def post_repos_owner_repo_hooks_hook_id_pings(
        self,
        owner: PathParam,
        repo: PathParam,
        hook_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Ping a repository webhook (HTTP POST /repos/{owner}/{repo}/hooks/{hook_id}/pings)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_HOOKS_HOOK_ID_PINGS.bind(owner, repo, hook_id), query, body, response_model)

    async def get_repos_owner_repo_import(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Import,
    ) -> models.Import:
        """Get an import status (HTTP GET /repos/{owner}/{repo}/import)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_IMPORT.bind(owner, repo), query, body, response_model)

    async def patch_repos_owner_repo_import(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Import,
    ) -> models.Import:
        """Update an import (HTTP PATCH /repos/{owner}/{repo}/import)"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_IMPORT.bind(owner, repo), query, body, response_model)

    async def patch_repos_owner_repo_import_authors_author_id(
        self,
        owner: PathParam,
        repo: PathParam,
        author_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PorterAuthor,
    ) -> models.PorterAuthor:
        """Map a commit author (HTTP PATCH /repos/{owner}/{repo}/import/authors/{author_id})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_IMPORT_AUTHORS_AUTHOR_ID.bind(owner, repo, author_id), query, body, response_model)

    async def patch_repos_owner_repo_import_lfs(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Import,
    ) -> models.Import:
        """Update Git LFS preference (HTTP PATCH /repos/{owner}/{repo}/import/lfs)"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_IMPORT_LFS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_installation(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Installation,
    ) -> models.Installation:
        """Get a repository installation for the authenticated app (HTTP GET /repos/{owner}/{repo}/installation)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_INSTALLATION.bind(owner, repo), query, body, response_model)

    async def put_repos_owner_repo_interaction_limits(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.InteractionLimitResponse,
    ) -> models.InteractionLimitResponse:
        """Set interaction restrictions for a repository (HTTP PUT /repos/{owner}/{repo}/interaction-limits)"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_INTERACTION_LIMITS.bind(owner, repo), query, body, response_model)

    async def patch_repos_owner_repo_invitations_invitation_id(
        self,
        owner: PathParam,
        repo: PathParam,
        invitation_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.RepositoryInvitation,
    ) -> models.RepositoryInvitation:
        """Update a repository invitation (HTTP PATCH /repos/{owner}/{repo}/invitations/{invitation_id})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_INVITATIONS_INVITATION_ID.bind(owner, repo, invitation_id), query, body, response_model)

    async def get_repos_owner_repo_issues(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Issue],
    ) -> List[models.Issue]:
        """List repository issues (HTTP GET /repos/{owner}/{repo}/issues)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ISSUES.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_issues(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Issue,
    ) -> models.Issue:
        """Create an issue (HTTP POST /repos/{owner}/{repo}/issues)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_ISSUES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_issues_comments(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.IssueComment],
    ) -> List[models.IssueComment]:
        """List issue comments for a repository (HTTP GET /repos/{owner}/{repo}/issues/comments)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ISSUES_COMMENTS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_issues_comments_comment_id(
        self,
        owner: PathParam,
        repo: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.IssueComment,
    ) -> models.IssueComment:
        """Get an issue comment (HTTP GET /repos/{owner}/{repo}/issues/comments/{comment_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ISSUES_COMMENTS_COMMENT_ID.bind(owner, repo, comment_id), query, body, response_model)

    async def patch_repos_owner_repo_issues_comments_comment_id(
        self,
        owner: PathParam,
        repo: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.IssueComment,
    ) -> models.IssueComment:
        """Update an issue comment (HTTP PATCH /repos/{owner}/{repo}/issues/comments/{comment_id})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_ISSUES_COMMENTS_COMMENT_ID.bind(owner, repo, comment_id), query, body, response_model)

    async def delete_repos_owner_repo_issues_comments_comment_id(
        self,
        owner: PathParam,
        repo: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete an issue comment (HTTP DELETE /repos/{owner}/{repo}/issues/comments/{comment_id})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_ISSUES_COMMENTS_COMMENT_ID.bind(owner, repo, comment_id), query, body, response_model)

    async def post_repos_owner_repo_issues_comments_comment_id_reactions(
        self,
        owner: PathParam,
        repo: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Reaction,
    ) -> models.Reaction:
        """Create reaction for an issue comment (HTTP POST /repos/{owner}/{repo}/issues/comments/{comment_id}/reactions)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_ISSUES_COMMENTS_COMMENT_ID_REACTIONS.bind(owner, repo, comment_id), query, body, response_model)

    async def get_repos_owner_repo_issues_events_event_id(
        self,
        owner: PathParam,
        repo: PathParam,
        event_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.IssueEvent,
    ) -> models.IssueEvent:
        """Get an issue event (HTTP GET /repos/{owner}/{repo}/issues/events/{event_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ISSUES_EVENTS_EVENT_ID.bind(owner, repo, event_id), query, body, response_model)

    async def get_repos_owner_repo_issues_issue_number(
        self,
        owner: PathParam,
        repo: PathParam,
        issue_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Issue,
    ) -> models.Issue:
        """Get an issue (HTTP GET /repos/{owner}/{repo}/issues/{issue_number})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER.bind(owner, repo, issue_number), query, body, response_model)

    async def patch_repos_owner_repo_issues_issue_number(
        self,
        owner: PathParam,
        repo: PathParam,
        issue_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Issue,
    ) -> models.Issue:
        """Update an issue (HTTP PATCH /repos/{owner}/{repo}/issues/{issue_number})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER.bind(owner, repo, issue_number), query, body, response_model)

    async def delete_repos_owner_repo_issues_issue_number_assignees(
        self,
        owner: PathParam,
        repo: PathParam,
        issue_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Issue,
    ) -> models.Issue:
        """Remove assignees from an issue (HTTP DELETE /repos/{owner}/{repo}/issues/{issue_number}/assignees)"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_ASSIGNEES.bind(owner, repo, issue_number), query, body, response_model)

    async def get_repos_owner_repo_issues_issue_number_comments(
        self,
        owner: PathParam,
        repo: PathParam,
        issue_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.IssueComment],
    ) -> List[models.IssueComment]:
        """List issue comments (HTTP GET /repos/{owner}/{repo}/issues/{issue_number}/comments)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_COMMENTS.bind(owner, repo, issue_number), query, body, response_model)

    async def post_repos_owner_repo_issues_issue_number_comments(
        self,
        owner: PathParam,
        repo: PathParam,
        issue_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.IssueComment,
    ) -> models.IssueComment:
        """Create an issue comment (HTTP POST /repos/{owner}/{repo}/issues/{issue_number}/comments)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_COMMENTS.bind(owner, repo, issue_number), query, body, response_model)

    async def get_repos_owner_repo_issues_issue_number_labels(
        self,
        owner: PathParam,
        repo: PathParam,
        issue_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Label],
    ) -> List[models.Label]:
        """List labels for an issue (HTTP GET /repos/{owner}/{repo}/issues/{issue_number}/labels)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_LABELS.bind(owner, repo, issue_number), query, body, response_model)

    async def post_repos_owner_repo_issues_issue_number_labels(
        self,
        owner: PathParam,
        repo: PathParam,
        issue_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Label],
    ) -> List[models.Label]:
        """Add labels to an issue (HTTP POST /repos/{owner}/{repo}/issues/{issue_number}/labels)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_LABELS.bind(owner, repo, issue_number), query, body, response_model)

    async def put_repos_owner_repo_issues_issue_number_lock(
        self,
        owner: PathParam,
        repo: PathParam,
        issue_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Lock an issue (HTTP PUT /repos/{owner}/{repo}/issues/{issue_number}/lock)"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_LOCK.bind(owner, repo, issue_number), query, body, response_model)

    async def delete_repos_owner_repo_issues_issue_number_lock(
        self,
        owner: PathParam,
        repo: PathParam,
        issue_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Unlock an issue (HTTP DELETE /repos/{owner}/{repo}/issues/{issue_number}/lock)"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_LOCK.bind(owner, repo, issue_number), query, body, response_model)

    async def post_repos_owner_repo_issues_issue_number_reactions(
        self,
        owner: PathParam,
        repo: PathParam,
        issue_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Reaction,
    ) -> models.Reaction:
        """Create reaction for an issue (HTTP POST /repos/{owner}/{repo}/issues/{issue_number}/reactions)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_ISSUES_ISSUE_NUMBER_REACTIONS.bind(owner, repo, issue_number), query, body, response_model)

    async def get_repos_owner_repo_keys(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.DeployKey],
    ) -> List[models.DeployKey]:
        """List deploy keys (HTTP GET /repos/{owner}/{repo}/keys)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_KEYS.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_keys(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.DeployKey,
    ) -> models.DeployKey:
        """Create a deploy key (HTTP POST /repos/{owner}/{repo}/keys)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_KEYS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_keys_key_id(
        self,
        owner: PathParam,
        repo: PathParam,
        key_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.DeployKey,
    ) -> models.DeployKey:
        """Get a deploy key (HTTP GET /repos/{owner}/{repo}/keys/{key_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_KEYS_KEY_ID.bind(owner, repo, key_id), query, body, response_model)

    async def delete_repos_owner_repo_keys_key_id(
        self,
        owner: PathParam,
        repo: PathParam,
        key_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a deploy key (HTTP DELETE /repos/{owner}/{repo}/keys/{key_id})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_KEYS_KEY_ID.bind(owner, repo, key_id), query, body, response_model)

    async def get_repos_owner_repo_labels(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Label],
    ) -> List[models.Label]:
        """List labels for a repository (HTTP GET /repos/{owner}/{repo}/labels)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_LABELS.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_labels(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Label,
    ) -> models.Label:
        """Create a label (HTTP POST /repos/{owner}/{repo}/labels)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_LABELS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_labels_name(
        self,
        owner: PathParam,
        repo: PathParam,
        name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Label,
    ) -> models.Label:
        """Get a label (HTTP GET /repos/{owner}/{repo}/labels/{name})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_LABELS_NAME.bind(owner, repo, name), query, body, response_model)

    async def patch_repos_owner_repo_labels_name(
        self,
        owner: PathParam,
        repo: PathParam,
        name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Label,
    ) -> models.Label:
        """Update a label (HTTP PATCH /repos/{owner}/{repo}/labels/{name})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_LABELS_NAME.bind(owner, repo, name), query, body, response_model)

    async def delete_repos_owner_repo_labels_name(
        self,
        owner: PathParam,
        repo: PathParam,
        name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a label (HTTP DELETE /repos/{owner}/{repo}/labels/{name})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_LABELS_NAME.bind(owner, repo, name), query, body, response_model)

    async def get_repos_owner_repo_languages(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List repository languages (HTTP GET /repos/{owner}/{repo}/languages)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_LANGUAGES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_license(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.LicenseContent,
    ) -> models.LicenseContent:
        """Get the license for a repository (HTTP GET /repos/{owner}/{repo}/license)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_LICENSE.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_merge_upstream(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.MergedUpstream,
    ) -> models.MergedUpstream:
        """Sync a fork branch with the upstream repository (HTTP POST /repos/{owner}/{repo}/merge-upstream)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_MERGE_UPSTREAM.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_milestones(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Milestone],
    ) -> List[models.Milestone]:
        """List milestones (HTTP GET /repos/{owner}/{repo}/milestones)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_MILESTONES.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_milestones(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Milestone,
    ) -> models.Milestone:
        """Create a milestone (HTTP POST /repos/{owner}/{repo}/milestones)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_MILESTONES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_milestones_milestone_number(
        self,
        owner: PathParam,
        repo: PathParam,
        milestone_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Milestone,
    ) -> models.Milestone:
        """Get a milestone (HTTP GET /repos/{owner}/{repo}/milestones/{milestone_number})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_MILESTONES_MILESTONE_NUMBER.bind(owner, repo, milestone_number), query, body, response_model)

    async def patch_repos_owner_repo_milestones_milestone_number(
        self,
        owner: PathParam,
        repo: PathParam,
        milestone_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Milestone,
    ) -> models.Milestone:
        """Update a milestone (HTTP PATCH /repos/{owner}/{repo}/milestones/{milestone_number})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_MILESTONES_MILESTONE_NUMBER.bind(owner, repo, milestone_number), query, body, response_model)

    async def delete_repos_owner_repo_milestones_milestone_number(
        self,
        owner: PathParam,
        repo: PathParam,
        milestone_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a milestone (HTTP DELETE /repos/{owner}/{repo}/milestones/{milestone_number})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_MILESTONES_MILESTONE_NUMBER.bind(owner, repo, milestone_number), query, body, response_model)

    async def get_repos_owner_repo_pages(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Page,
    ) -> models.Page:
        """Get a GitHub Pages site (HTTP GET /repos/{owner}/{repo}/pages)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PAGES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_pages_builds_latest(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PageBuild,
    ) -> models.PageBuild:
        """Get latest Pages build (HTTP GET /repos/{owner}/{repo}/pages/builds/latest)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PAGES_BUILDS_LATEST.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_pages_builds_build_id(
        self,
        owner: PathParam,
        repo: PathParam,
        build_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PageBuild,
    ) -> models.PageBuild:
        """Get GitHub Pages build (HTTP GET /repos/{owner}/{repo}/pages/builds/{build_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PAGES_BUILDS_BUILD_ID.bind(owner, repo, build_id), query, body, response_model)

    async def get_repos_owner_repo_pages_health(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PagesHealthCheck,
    ) -> models.PagesHealthCheck:
        """Get a DNS health check for GitHub Pages (HTTP GET /repos/{owner}/{repo}/pages/health)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PAGES_HEALTH.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_pulls(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.PullRequestSimple],
    ) -> List[models.PullRequestSimple]:
        """List pull requests (HTTP GET /repos/{owner}/{repo}/pulls)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PULLS.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_pulls(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequest,
    ) -> models.PullRequest:
        """Create a pull request (HTTP POST /repos/{owner}/{repo}/pulls)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_PULLS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_pulls_comments_comment_id(
        self,
        owner: PathParam,
        repo: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestReviewComment,
    ) -> models.PullRequestReviewComment:
        """Get a review comment for a pull request (HTTP GET /repos/{owner}/{repo}/pulls/comments/{comment_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PULLS_COMMENTS_COMMENT_ID.bind(owner, repo, comment_id), query, body, response_model)

    async def patch_repos_owner_repo_pulls_comments_comment_id(
        self,
        owner: PathParam,
        repo: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestReviewComment,
    ) -> models.PullRequestReviewComment:
        """Update a review comment for a pull request (HTTP PATCH /repos/{owner}/{repo}/pulls/comments/{comment_id})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_PULLS_COMMENTS_COMMENT_ID.bind(owner, repo, comment_id), query, body, response_model)

    async def post_repos_owner_repo_pulls_comments_comment_id_reactions(
        self,
        owner: PathParam,
        repo: PathParam,
        comment_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Reaction,
    ) -> models.Reaction:
        """Create reaction for a pull request review comment (HTTP POST /repos/{owner}/{repo}/pulls/comments/{comment_id}/reactions)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_PULLS_COMMENTS_COMMENT_ID_REACTIONS.bind(owner, repo, comment_id), query, body, response_model)

    async def get_repos_owner_repo_pulls_pull_number(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequest,
    ) -> models.PullRequest:
        """Get a pull request (HTTP GET /repos/{owner}/{repo}/pulls/{pull_number})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER.bind(owner, repo, pull_number), query, body, response_model)

    async def patch_repos_owner_repo_pulls_pull_number(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequest,
    ) -> models.PullRequest:
        """Update a pull request (HTTP PATCH /repos/{owner}/{repo}/pulls/{pull_number})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_PULLS_PULL_NUMBER.bind(owner, repo, pull_number), query, body, response_model)

    async def get_repos_owner_repo_pulls_pull_number_commits(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Commit],
    ) -> List[models.Commit]:
        """List commits on a pull request (HTTP GET /repos/{owner}/{repo}/pulls/{pull_number}/commits)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_COMMITS.bind(owner, repo, pull_number), query, body, response_model)

    async def get_repos_owner_repo_pulls_pull_number_files(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List pull requests files (HTTP GET /repos/{owner}/{repo}/pulls/{pull_number}/files)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_FILES.bind(owner, repo, pull_number), query, body, response_model)

    async def get_repos_owner_repo_pulls_pull_number_merge(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Check if a pull request has been merged (HTTP GET /repos/{owner}/{repo}/pulls/{pull_number}/merge)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_MERGE.bind(owner, repo, pull_number), query, body, response_model)

    async def put_repos_owner_repo_pulls_pull_number_merge(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestMergeResult,
    ) -> models.PullRequestMergeResult:
        """Merge a pull request (HTTP PUT /repos/{owner}/{repo}/pulls/{pull_number}/merge)"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_MERGE.bind(owner, repo, pull_number), query, body, response_model)

    async def get_repos_owner_repo_pulls_pull_number_requested_reviewers(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestReviewRequest,
    ) -> models.PullRequestReviewRequest:
        """Get all requested reviewers for a pull request (HTTP GET /repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REQUESTED_REVIEWERS.bind(owner, repo, pull_number), query, body, response_model)

    async def post_repos_owner_repo_pulls_pull_number_requested_reviewers(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestSimple,
    ) -> models.PullRequestSimple:
        """Request reviewers for a pull request (HTTP POST /repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REQUESTED_REVIEWERS.bind(owner, repo, pull_number), query, body, response_model)

    async def delete_repos_owner_repo_pulls_pull_number_requested_reviewers(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestSimple,
    ) -> models.PullRequestSimple:
        """Remove requested reviewers from a pull request (HTTP DELETE /repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers)"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REQUESTED_REVIEWERS.bind(owner, repo, pull_number), query, body, response_model)

    async def get_repos_owner_repo_pulls_pull_number_reviews(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.PullRequestReview],
    ) -> List[models.PullRequestReview]:
        """List reviews for a pull request (HTTP GET /repos/{owner}/{repo}/pulls/{pull_number}/reviews)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS.bind(owner, repo, pull_number), query, body, response_model)

    async def post_repos_owner_repo_pulls_pull_number_reviews(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestReview,
    ) -> models.PullRequestReview:
        """Create a review for a pull request (HTTP POST /repos/{owner}/{repo}/pulls/{pull_number}/reviews)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS.bind(owner, repo, pull_number), query, body, response_model)

    async def get_repos_owner_repo_pulls_pull_number_reviews_review_id(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        review_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestReview,
    ) -> models.PullRequestReview:
        """Get a review for a pull request (HTTP GET /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS_REVIEW_ID.bind(owner, repo, pull_number, review_id), query, body, response_model)

    async def put_repos_owner_repo_pulls_pull_number_reviews_review_id(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        review_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestReview,
    ) -> models.PullRequestReview:
        """Update a review for a pull request (HTTP PUT /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id})"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS_REVIEW_ID.bind(owner, repo, pull_number, review_id), query, body, response_model)

    async def delete_repos_owner_repo_pulls_pull_number_reviews_review_id(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        review_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestReview,
    ) -> models.PullRequestReview:
        """Delete a pending review for a pull request (HTTP DELETE /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS_REVIEW_ID.bind(owner, repo, pull_number, review_id), query, body, response_model)

    async def put_repos_owner_repo_pulls_pull_number_reviews_review_id_dismissals(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        review_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestReview,
    ) -> models.PullRequestReview:
        """Dismiss a review for a pull request (HTTP PUT /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}/dismissals)"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS_REVIEW_ID_DISMISSALS.bind(owner, repo, pull_number, review_id), query, body, response_model)

    async def post_repos_owner_repo_pulls_pull_number_reviews_review_id_events(
        self,
        owner: PathParam,
        repo: PathParam,
        pull_number: PathParam,
        review_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PullRequestReview,
    ) -> models.PullRequestReview:
        """Submit a review for a pull request (HTTP POST /repos/{owner}/{repo}/pulls/{pull_number}/reviews/{review_id}/events)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS_REVIEW_ID_EVENTS.bind(owner, repo, pull_number, review_id), query, body, response_model)

    async def get_repos_owner_repo_readme(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ContentFile,
    ) -> models.ContentFile:
        """Get a repository README (HTTP GET /repos/{owner}/{repo}/readme)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_README.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_readme_dir(
        self,
        owner: PathParam,
        repo: PathParam,
        dir: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ContentFile,
    ) -> models.ContentFile:
        """Get a repository README for a directory (HTTP GET /repos/{owner}/{repo}/readme/{dir})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_README_DIR.bind(owner, repo, dir), query, body, response_model)

    async def get_repos_owner_repo_releases(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Release],
    ) -> List[models.Release]:
        """List releases (HTTP GET /repos/{owner}/{repo}/releases)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_RELEASES.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_releases(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Release,
    ) -> models.Release:
        """Create a release (HTTP POST /repos/{owner}/{repo}/releases)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_RELEASES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_releases_assets_asset_id(
        self,
        owner: PathParam,
        repo: PathParam,
        asset_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ReleaseAsset,
    ) -> models.ReleaseAsset:
        """Get a release asset (HTTP GET /repos/{owner}/{repo}/releases/assets/{asset_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_RELEASES_ASSETS_ASSET_ID.bind(owner, repo, asset_id), query, body, response_model)

    async def patch_repos_owner_repo_releases_assets_asset_id(
        self,
        owner: PathParam,
        repo: PathParam,
        asset_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ReleaseAsset,
    ) -> models.ReleaseAsset:
        """Update a release asset (HTTP PATCH /repos/{owner}/{repo}/releases/assets/{asset_id})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_RELEASES_ASSETS_ASSET_ID.bind(owner, repo, asset_id), query, body, response_model)

    async def delete_repos_owner_repo_releases_assets_asset_id(
        self,
        owner: PathParam,
        repo: PathParam,
        asset_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a release asset (HTTP DELETE /repos/{owner}/{repo}/releases/assets/{asset_id})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_RELEASES_ASSETS_ASSET_ID.bind(owner, repo, asset_id), query, body, response_model)

    async def post_repos_owner_repo_releases_generate_notes(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ReleaseNotesContent,
    ) -> models.ReleaseNotesContent:
        """Generate release notes content for a release (HTTP POST /repos/{owner}/{repo}/releases/generate-notes)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_RELEASES_GENERATE_NOTES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_releases_latest(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Release,
    ) -> models.Release:
        """Get the latest release (HTTP GET /repos/{owner}/{repo}/releases/latest)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_RELEASES_LATEST.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_releases_tags_tag(
        self,
        owner: PathParam,
        repo: PathParam,
        tag: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Release,
    ) -> models.Release:
        """Get a release by tag name (HTTP GET /repos/{owner}/{repo}/releases/tags/{tag})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_RELEASES_TAGS_TAG.bind(owner, repo, tag), query, body, response_model)

    async def get_repos_owner_repo_releases_release_id(
        self,
        owner: PathParam,
        repo: PathParam,
        release_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Release,
    ) -> models.Release:
        """Get a release (HTTP GET /repos/{owner}/{repo}/releases/{release_id})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_RELEASES_RELEASE_ID.bind(owner, repo, release_id), query, body, response_model)

    async def patch_repos_owner_repo_releases_release_id(
        self,
        owner: PathParam,
        repo: PathParam,
        release_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Release,
    ) -> models.Release:
        """Update a release (HTTP PATCH /repos/{owner}/{repo}/releases/{release_id})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_RELEASES_RELEASE_ID.bind(owner, repo, release_id), query, body, response_model)

    async def delete_repos_owner_repo_releases_release_id(
        self,
        owner: PathParam,
        repo: PathParam,
        release_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a release (HTTP DELETE /repos/{owner}/{repo}/releases/{release_id})"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_RELEASES_RELEASE_ID.bind(owner, repo, release_id), query, body, response_model)

    async def get_repos_owner_repo_releases_release_id_assets(
        self,
        owner: PathParam,
        repo: PathParam,
        release_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.ReleaseAsset],
    ) -> List[models.ReleaseAsset]:
        """List release assets (HTTP GET /repos/{owner}/{repo}/releases/{release_id}/assets)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_RELEASES_RELEASE_ID_ASSETS.bind(owner, repo, release_id), query, body, response_model)

    async def post_repos_owner_repo_releases_release_id_reactions(
        self,
        owner: PathParam,
        repo: PathParam,
        release_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Reaction,
    ) -> models.Reaction:
        """Create reaction for a release (HTTP POST /repos/{owner}/{repo}/releases/{release_id}/reactions)"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_RELEASES_RELEASE_ID_REACTIONS.bind(owner, repo, release_id), query, body, response_model)

    async def get_repos_owner_repo_secret_scanning_alerts_alert_number(
        self,
        owner: PathParam,
        repo: PathParam,
        alert_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.SecretScanningAlert,
    ) -> models.SecretScanningAlert:
        """Get a secret scanning alert (HTTP GET /repos/{owner}/{repo}/secret-scanning/alerts/{alert_number})"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_SECRET_SCANNING_ALERTS_ALERT_NUMBER.bind(owner, repo, alert_number), query, body, response_model)

    async def patch_repos_owner_repo_secret_scanning_alerts_alert_number(
        self,
        owner: PathParam,
        repo: PathParam,
        alert_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.SecretScanningAlert,
    ) -> models.SecretScanningAlert:
        """Update a secret scanning alert (HTTP PATCH /repos/{owner}/{repo}/secret-scanning/alerts/{alert_number})"""
        return await self.client.req(Route.PATCH_REPOS_OWNER_REPO_SECRET_SCANNING_ALERTS_ALERT_NUMBER.bind(owner, repo, alert_number), query, body, response_model)

    async def get_repos_owner_repo_stargazers(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.SimpleUser],
    ) -> List[models.SimpleUser]:
        """List stargazers (HTTP GET /repos/{owner}/{repo}/stargazers)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_STARGAZERS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_stats_participation(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ParticipationStats,
    ) -> models.ParticipationStats:
        """Get the weekly commit count (HTTP GET /repos/{owner}/{repo}/stats/participation)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_STATS_PARTICIPATION.bind(owner, repo), query, body, response_model)

    async def post_repos_owner_repo_statuses_sha(
        self,
        owner: PathParam,
        repo: PathParam,
        sha: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Create a commit status (HTTP POST /repos/{owner}/{repo}/statuses/{sha})"""
        return await self.client.req(Route.POST_REPOS_OWNER_REPO_STATUSES_SHA.bind(owner, repo, sha), query, body, response_model)

    async def get_repos_owner_repo_subscribers(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.SimpleUser],
    ) -> List[models.SimpleUser]:
        """List watchers (HTTP GET /repos/{owner}/{repo}/subscribers)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_SUBSCRIBERS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_subscription(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.RepositorySubscription,
    ) -> models.RepositorySubscription:
        """Get a repository subscription (HTTP GET /repos/{owner}/{repo}/subscription)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_SUBSCRIPTION.bind(owner, repo), query, body, response_model)

    async def put_repos_owner_repo_subscription(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.RepositorySubscription,
    ) -> models.RepositorySubscription:
        """Set a repository subscription (HTTP PUT /repos/{owner}/{repo}/subscription)"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_SUBSCRIPTION.bind(owner, repo), query, body, response_model)

    async def delete_repos_owner_repo_subscription(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a repository subscription (HTTP DELETE /repos/{owner}/{repo}/subscription)"""
        return await self.client.req(Route.DELETE_REPOS_OWNER_REPO_SUBSCRIPTION.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_tags(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List repository tags (HTTP GET /repos/{owner}/{repo}/tags)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_TAGS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_topics(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Topic,
    ) -> models.Topic:
        """Get all repository topics (HTTP GET /repos/{owner}/{repo}/topics)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_TOPICS.bind(owner, repo), query, body, response_model)

    async def put_repos_owner_repo_topics(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Topic,
    ) -> models.Topic:
        """Replace all repository topics (HTTP PUT /repos/{owner}/{repo}/topics)"""
        return await self.client.req(Route.PUT_REPOS_OWNER_REPO_TOPICS.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_traffic_clones(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CloneTraffic,
    ) -> models.CloneTraffic:
        """Get repository clones (HTTP GET /repos/{owner}/{repo}/traffic/clones)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_TRAFFIC_CLONES.bind(owner, repo), query, body, response_model)

    async def get_repos_owner_repo_traffic_views(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ViewTraffic,
    ) -> models.ViewTraffic:
        """Get page views (HTTP GET /repos/{owner}/{repo}/traffic/views)"""
        return await self.client.req(Route.GET_REPOS_OWNER_REPO_TRAFFIC_VIEWS.bind(owner, repo), query, body, response_model)

    async def get_repositories(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Repository],
    ) -> List[models.Repository]:
        """List public repositories (HTTP GET /repositories)"""
        return await self.client.req(Route.GET_REPOSITORIES.bind(), query, body, response_model)

    async def get_repositories_repository_id_environments_environment_name_secrets(
        self,
        repository_id: PathParam,
        environment_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List environment secrets (HTTP GET /repositories/{repository_id}/environments/{environment_name}/secrets)"""
        return await self.client.req(Route.GET_REPOSITORIES_REPOSITORY_ID_ENVIRONMENTS_ENVIRONMENT_NAME_SECRETS.bind(repository_id, environment_name), query, body, response_model)

    async def get_repositories_repository_id_environments_environment_name_secrets_public_key(
        self,
        repository_id: PathParam,
        environment_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ActionsPublicKey,
    ) -> models.ActionsPublicKey:
        """Get an environment public key (HTTP GET /repositories/{repository_id}/environments/{environment_name}/secrets/public-key)"""
        return await self.client.req(Route.GET_REPOSITORIES_REPOSITORY_ID_ENVIRONMENTS_ENVIRONMENT_NAME_SECRETS_PUBLIC_KEY.bind(repository_id, environment_name), query, body, response_model)

    async def get_repositories_repository_id_environments_environment_name_secrets_secret_name(
        self,
        repository_id: PathParam,
        environment_name: PathParam,
        secret_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ActionsSecret,
    ) -> models.ActionsSecret:
        """Get an environment secret (HTTP GET /repositories/{repository_id}/environments/{environment_name}/secrets/{secret_name})"""
        return await self.client.req(Route.GET_REPOSITORIES_REPOSITORY_ID_ENVIRONMENTS_ENVIRONMENT_NAME_SECRETS_SECRET_NAME.bind(repository_id, environment_name, secret_name), query, body, response_model)

    async def get_scim_v2_enterprises_enterprise_groups(
        self,
        enterprise: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ScimGroupListEnterprise,
    ) -> models.ScimGroupListEnterprise:
        """List provisioned SCIM groups for an enterprise (HTTP GET /scim/v2/enterprises/{enterprise}/Groups)"""
        return await self.client.req(Route.GET_SCIM_V2_ENTERPRISES_ENTERPRISE_GROUPS.bind(enterprise), query, body, response_model)

    async def get_scim_v2_enterprises_enterprise_groups_scim_group_id(
        self,
        enterprise: PathParam,
        scim_group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ScimEnterpriseGroup,
    ) -> models.ScimEnterpriseGroup:
        """Get SCIM provisioning information for an enterprise group (HTTP GET /scim/v2/enterprises/{enterprise}/Groups/{scim_group_id})"""
        return await self.client.req(Route.GET_SCIM_V2_ENTERPRISES_ENTERPRISE_GROUPS_SCIM_GROUP_ID.bind(enterprise, scim_group_id), query, body, response_model)

    async def put_scim_v2_enterprises_enterprise_groups_scim_group_id(
        self,
        enterprise: PathParam,
        scim_group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ScimEnterpriseGroup,
    ) -> models.ScimEnterpriseGroup:
        """Set SCIM information for a provisioned enterprise group (HTTP PUT /scim/v2/enterprises/{enterprise}/Groups/{scim_group_id})"""
        return await self.client.req(Route.PUT_SCIM_V2_ENTERPRISES_ENTERPRISE_GROUPS_SCIM_GROUP_ID.bind(enterprise, scim_group_id), query, body, response_model)

    async def patch_scim_v2_enterprises_enterprise_groups_scim_group_id(
        self,
        enterprise: PathParam,
        scim_group_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ScimEnterpriseGroup,
    ) -> models.ScimEnterpriseGroup:
        """Update an attribute for a SCIM enterprise group (HTTP PATCH /scim/v2/enterprises/{enterprise}/Groups/{scim_group_id})"""
        return await self.client.req(Route.PATCH_SCIM_V2_ENTERPRISES_ENTERPRISE_GROUPS_SCIM_GROUP_ID.bind(enterprise, scim_group_id), query, body, response_model)

    async def get_scim_v2_enterprises_enterprise_users(
        self,
        enterprise: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ScimUserListEnterprise,
    ) -> models.ScimUserListEnterprise:
        """List SCIM provisioned identities for an enterprise (HTTP GET /scim/v2/enterprises/{enterprise}/Users)"""
        return await self.client.req(Route.GET_SCIM_V2_ENTERPRISES_ENTERPRISE_USERS.bind(enterprise), query, body, response_model)

    async def get_scim_v2_enterprises_enterprise_users_scim_user_id(
        self,
        enterprise: PathParam,
        scim_user_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ScimEnterpriseUser,
    ) -> models.ScimEnterpriseUser:
        """Get SCIM provisioning information for an enterprise user (HTTP GET /scim/v2/enterprises/{enterprise}/Users/{scim_user_id})"""
        return await self.client.req(Route.GET_SCIM_V2_ENTERPRISES_ENTERPRISE_USERS_SCIM_USER_ID.bind(enterprise, scim_user_id), query, body, response_model)

    async def put_scim_v2_enterprises_enterprise_users_scim_user_id(
        self,
        enterprise: PathParam,
        scim_user_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ScimEnterpriseUser,
    ) -> models.ScimEnterpriseUser:
        """Set SCIM information for a provisioned enterprise user (HTTP PUT /scim/v2/enterprises/{enterprise}/Users/{scim_user_id})"""
        return await self.client.req(Route.PUT_SCIM_V2_ENTERPRISES_ENTERPRISE_USERS_SCIM_USER_ID.bind(enterprise, scim_user_id), query, body, response_model)

    async def patch_scim_v2_enterprises_enterprise_users_scim_user_id(
        self,
        enterprise: PathParam,
        scim_user_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ScimEnterpriseUser,
    ) -> models.ScimEnterpriseUser:
        """Update an attribute for a SCIM enterprise user (HTTP PATCH /scim/v2/enterprises/{enterprise}/Users/{scim_user_id})"""
        return await self.client.req(Route.PATCH_SCIM_V2_ENTERPRISES_ENTERPRISE_USERS_SCIM_USER_ID.bind(enterprise, scim_user_id), query, body, response_model)

    async def get_search_code(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Search code (HTTP GET /search/code)"""
        return await self.client.req(Route.GET_SEARCH_CODE.bind(), query, body, response_model)

    async def get_search_commits(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Search commits (HTTP GET /search/commits)"""
        return await self.client.req(Route.GET_SEARCH_COMMITS.bind(), query, body, response_model)

    async def get_search_issues(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Search issues and pull requests (HTTP GET /search/issues)"""
        return await self.client.req(Route.GET_SEARCH_ISSUES.bind(), query, body, response_model)

    async def get_search_labels(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Search labels (HTTP GET /search/labels)"""
        return await self.client.req(Route.GET_SEARCH_LABELS.bind(), query, body, response_model)

    async def get_search_repositories(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Search repositories (HTTP GET /search/repositories)"""
        return await self.client.req(Route.GET_SEARCH_REPOSITORIES.bind(), query, body, response_model)

    async def get_search_topics(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Search topics (HTTP GET /search/topics)"""
        return await self.client.req(Route.GET_SEARCH_TOPICS.bind(), query, body, response_model)

    async def get_search_users(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """Search users (HTTP GET /search/users)"""
        return await self.client.req(Route.GET_SEARCH_USERS.bind(), query, body, response_model)

    async def get_teams_team_id(
        self,
        team_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamFull,
    ) -> models.TeamFull:
        """Get a team (Legacy) (HTTP GET /teams/{team_id})"""
        return await self.client.req(Route.GET_TEAMS_TEAM_ID.bind(team_id), query, body, response_model)

    async def patch_teams_team_id(
        self,
        team_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamFull,
    ) -> models.TeamFull:
        """Update a team (Legacy) (HTTP PATCH /teams/{team_id})"""
        return await self.client.req(Route.PATCH_TEAMS_TEAM_ID.bind(team_id), query, body, response_model)

    async def get_teams_team_id_discussions_discussion_number(
        self,
        team_id: PathParam,
        discussion_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamDiscussion,
    ) -> models.TeamDiscussion:
        """Get a discussion (Legacy) (HTTP GET /teams/{team_id}/discussions/{discussion_number})"""
        return await self.client.req(Route.GET_TEAMS_TEAM_ID_DISCUSSIONS_DISCUSSION_NUMBER.bind(team_id, discussion_number), query, body, response_model)

    async def patch_teams_team_id_discussions_discussion_number(
        self,
        team_id: PathParam,
        discussion_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamDiscussion,
    ) -> models.TeamDiscussion:
        """Update a discussion (Legacy) (HTTP PATCH /teams/{team_id}/discussions/{discussion_number})"""
        return await self.client.req(Route.PATCH_TEAMS_TEAM_ID_DISCUSSIONS_DISCUSSION_NUMBER.bind(team_id, discussion_number), query, body, response_model)

    async def get_teams_team_id_discussions_discussion_number_comments_comment_number(
        self,
        team_id: PathParam,
        discussion_number: PathParam,
        comment_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamDiscussionComment,
    ) -> models.TeamDiscussionComment:
        """Get a discussion comment (Legacy) (HTTP GET /teams/{team_id}/discussions/{discussion_number}/comments/{comment_number})"""
        return await self.client.req(Route.GET_TEAMS_TEAM_ID_DISCUSSIONS_DISCUSSION_NUMBER_COMMENTS_COMMENT_NUMBER.bind(team_id, discussion_number, comment_number), query, body, response_model)

    async def patch_teams_team_id_discussions_discussion_number_comments_comment_number(
        self,
        team_id: PathParam,
        discussion_number: PathParam,
        comment_number: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamDiscussionComment,
    ) -> models.TeamDiscussionComment:
        """Update a discussion comment (Legacy) (HTTP PATCH /teams/{team_id}/discussions/{discussion_number}/comments/{comment_number})"""
        return await self.client.req(Route.PATCH_TEAMS_TEAM_ID_DISCUSSIONS_DISCUSSION_NUMBER_COMMENTS_COMMENT_NUMBER.bind(team_id, discussion_number, comment_number), query, body, response_model)

    async def get_teams_team_id_memberships_username(
        self,
        team_id: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamMembership,
    ) -> models.TeamMembership:
        """Get team membership for a user (Legacy) (HTTP GET /teams/{team_id}/memberships/{username})"""
        return await self.client.req(Route.GET_TEAMS_TEAM_ID_MEMBERSHIPS_USERNAME.bind(team_id, username), query, body, response_model)

    async def put_teams_team_id_memberships_username(
        self,
        team_id: PathParam,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamMembership,
    ) -> models.TeamMembership:
        """Add or update team membership for a user (Legacy) (HTTP PUT /teams/{team_id}/memberships/{username})"""
        return await self.client.req(Route.PUT_TEAMS_TEAM_ID_MEMBERSHIPS_USERNAME.bind(team_id, username), query, body, response_model)

    async def get_teams_team_id_projects_project_id(
        self,
        team_id: PathParam,
        project_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamProject,
    ) -> models.TeamProject:
        """Check team permissions for a project (Legacy) (HTTP GET /teams/{team_id}/projects/{project_id})"""
        return await self.client.req(Route.GET_TEAMS_TEAM_ID_PROJECTS_PROJECT_ID.bind(team_id, project_id), query, body, response_model)

    async def get_teams_team_id_repos_owner_repo(
        self,
        team_id: PathParam,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.TeamRepository,
    ) -> models.TeamRepository:
        """Check team permissions for a repository (Legacy) (HTTP GET /teams/{team_id}/repos/{owner}/{repo})"""
        return await self.client.req(Route.GET_TEAMS_TEAM_ID_REPOS_OWNER_REPO.bind(team_id, owner, repo), query, body, response_model)

    async def get_teams_team_id_team_sync_group_mappings(
        self,
        team_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GroupMapping,
    ) -> models.GroupMapping:
        """List IdP groups for a team (Legacy) (HTTP GET /teams/{team_id}/team-sync/group-mappings)"""
        return await self.client.req(Route.GET_TEAMS_TEAM_ID_TEAM_SYNC_GROUP_MAPPINGS.bind(team_id), query, body, response_model)

    async def patch_teams_team_id_team_sync_group_mappings(
        self,
        team_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GroupMapping,
    ) -> models.GroupMapping:
        """Create or update IdP group connections (Legacy) (HTTP PATCH /teams/{team_id}/team-sync/group-mappings)"""
        return await self.client.req(Route.PATCH_TEAMS_TEAM_ID_TEAM_SYNC_GROUP_MAPPINGS.bind(team_id), query, body, response_model)

    async def get_user(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PrivateUser,
    ) -> models.PrivateUser:
        """Get the authenticated user (HTTP GET /user)"""
        return await self.client.req(Route.GET_USER.bind(), query, body, response_model)

    async def patch_user(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PrivateUser,
    ) -> models.PrivateUser:
        """Update the authenticated user (HTTP PATCH /user)"""
        return await self.client.req(Route.PATCH_USER.bind(), query, body, response_model)

    async def get_user_codespaces(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List codespaces for the authenticated user (HTTP GET /user/codespaces)"""
        return await self.client.req(Route.GET_USER_CODESPACES.bind(), query, body, response_model)

    async def get_user_codespaces_secrets(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List secrets for the authenticated user (HTTP GET /user/codespaces/secrets)"""
        return await self.client.req(Route.GET_USER_CODESPACES_SECRETS.bind(), query, body, response_model)

    async def get_user_codespaces_secrets_public_key(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CodespacesUserPublicKey,
    ) -> models.CodespacesUserPublicKey:
        """Get public key for the authenticated user (HTTP GET /user/codespaces/secrets/public-key)"""
        return await self.client.req(Route.GET_USER_CODESPACES_SECRETS_PUBLIC_KEY.bind(), query, body, response_model)

    async def get_user_codespaces_secrets_secret_name(
        self,
        secret_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CodespacesSecret,
    ) -> models.CodespacesSecret:
        """Get a secret for the authenticated user (HTTP GET /user/codespaces/secrets/{secret_name})"""
        return await self.client.req(Route.GET_USER_CODESPACES_SECRETS_SECRET_NAME.bind(secret_name), query, body, response_model)

    async def get_user_codespaces_secrets_secret_name_repositories(
        self,
        secret_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List selected repositories for a user secret (HTTP GET /user/codespaces/secrets/{secret_name}/repositories)"""
        return await self.client.req(Route.GET_USER_CODESPACES_SECRETS_SECRET_NAME_REPOSITORIES.bind(secret_name), query, body, response_model)

    async def get_user_codespaces_codespace_name(
        self,
        codespace_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Codespace,
    ) -> models.Codespace:
        """Get a codespace for the authenticated user (HTTP GET /user/codespaces/{codespace_name})"""
        return await self.client.req(Route.GET_USER_CODESPACES_CODESPACE_NAME.bind(codespace_name), query, body, response_model)

    async def patch_user_codespaces_codespace_name(
        self,
        codespace_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Codespace,
    ) -> models.Codespace:
        """Update a codespace for the authenticated user (HTTP PATCH /user/codespaces/{codespace_name})"""
        return await self.client.req(Route.PATCH_USER_CODESPACES_CODESPACE_NAME.bind(codespace_name), query, body, response_model)

    async def get_user_codespaces_codespace_name_machines(
        self,
        codespace_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List machine types for a codespace (HTTP GET /user/codespaces/{codespace_name}/machines)"""
        return await self.client.req(Route.GET_USER_CODESPACES_CODESPACE_NAME_MACHINES.bind(codespace_name), query, body, response_model)

    async def post_user_codespaces_codespace_name_start(
        self,
        codespace_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Codespace,
    ) -> models.Codespace:
        """Start a codespace for the authenticated user (HTTP POST /user/codespaces/{codespace_name}/start)"""
        return await self.client.req(Route.POST_USER_CODESPACES_CODESPACE_NAME_START.bind(codespace_name), query, body, response_model)

    async def post_user_codespaces_codespace_name_stop(
        self,
        codespace_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Codespace,
    ) -> models.Codespace:
        """Stop a codespace for the authenticated user (HTTP POST /user/codespaces/{codespace_name}/stop)"""
        return await self.client.req(Route.POST_USER_CODESPACES_CODESPACE_NAME_STOP.bind(codespace_name), query, body, response_model)

    async def get_user_emails(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List email addresses for the authenticated user (HTTP GET /user/emails)"""
        return await self.client.req(Route.GET_USER_EMAILS.bind(), query, body, response_model)

    async def get_user_followers(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.SimpleUser],
    ) -> List[models.SimpleUser]:
        """List followers of the authenticated user (HTTP GET /user/followers)"""
        return await self.client.req(Route.GET_USER_FOLLOWERS.bind(), query, body, response_model)

    async def get_user_following(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.SimpleUser],
    ) -> List[models.SimpleUser]:
        """List the people the authenticated user follows (HTTP GET /user/following)"""
        return await self.client.req(Route.GET_USER_FOLLOWING.bind(), query, body, response_model)

    async def put_user_following_username(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Follow a user (HTTP PUT /user/following/{username})"""
        return await self.client.req(Route.PUT_USER_FOLLOWING_USERNAME.bind(username), query, body, response_model)

    async def delete_user_following_username(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Unfollow a user (HTTP DELETE /user/following/{username})"""
        return await self.client.req(Route.DELETE_USER_FOLLOWING_USERNAME.bind(username), query, body, response_model)

    async def get_user_gpg_keys(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.GpgKey],
    ) -> List[models.GpgKey]:
        """List GPG keys for the authenticated user (HTTP GET /user/gpg_keys)"""
        return await self.client.req(Route.GET_USER_GPG_KEYS.bind(), query, body, response_model)

    async def get_user_gpg_keys_gpg_key_id(
        self,
        gpg_key_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.GpgKey,
    ) -> models.GpgKey:
        """Get a GPG key for the authenticated user (HTTP GET /user/gpg_keys/{gpg_key_id})"""
        return await self.client.req(Route.GET_USER_GPG_KEYS_GPG_KEY_ID.bind(gpg_key_id), query, body, response_model)

    async def delete_user_gpg_keys_gpg_key_id(
        self,
        gpg_key_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a GPG key for the authenticated user (HTTP DELETE /user/gpg_keys/{gpg_key_id})"""
        return await self.client.req(Route.DELETE_USER_GPG_KEYS_GPG_KEY_ID.bind(gpg_key_id), query, body, response_model)

    async def get_user_installations(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List app installations accessible to the user access token (HTTP GET /user/installations)"""
        return await self.client.req(Route.GET_USER_INSTALLATIONS.bind(), query, body, response_model)

    async def get_user_installations_installation_id_repositories(
        self,
        installation_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Dict[str, Any],
    ) -> Dict[str, Any]:
        """List repositories accessible to the user access token (HTTP GET /user/installations/{installation_id}/repositories)"""
        return await self.client.req(Route.GET_USER_INSTALLATIONS_INSTALLATION_ID_REPOSITORIES.bind(installation_id), query, body, response_model)

    async def put_user_interaction_limits(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.InteractionLimitResponse,
    ) -> models.InteractionLimitResponse:
        """Set interaction restrictions for your public repositories (HTTP PUT /user/interaction-limits)"""
        return await self.client.req(Route.PUT_USER_INTERACTION_LIMITS.bind(), query, body, response_model)

    async def get_user_issues(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Issue],
    ) -> List[models.Issue]:
        """List user account issues assigned to the authenticated user (HTTP GET /user/issues)"""
        return await self.client.req(Route.GET_USER_ISSUES.bind(), query, body, response_model)

    async def get_user_keys(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Key],
    ) -> List[models.Key]:
        """List public SSH keys for the authenticated user (HTTP GET /user/keys)"""
        return await self.client.req(Route.GET_USER_KEYS.bind(), query, body, response_model)

    async def post_user_keys(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Key,
    ) -> models.Key:
        """Create a public SSH key for the authenticated user (HTTP POST /user/keys)"""
        return await self.client.req(Route.POST_USER_KEYS.bind(), query, body, response_model)

    async def get_user_keys_key_id(
        self,
        key_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Key,
    ) -> models.Key:
        """Get a public SSH key for the authenticated user (HTTP GET /user/keys/{key_id})"""
        return await self.client.req(Route.GET_USER_KEYS_KEY_ID.bind(key_id), query, body, response_model)

    async def delete_user_keys_key_id(
        self,
        key_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Delete a public SSH key for the authenticated user (HTTP DELETE /user/keys/{key_id})"""
        return await self.client.req(Route.DELETE_USER_KEYS_KEY_ID.bind(key_id), query, body, response_model)

    async def get_user_memberships_orgs_org(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.OrgMembership,
    ) -> models.OrgMembership:
        """Get an organization membership for the authenticated user (HTTP GET /user/memberships/orgs/{org})"""
        return await self.client.req(Route.GET_USER_MEMBERSHIPS_ORGS_ORG.bind(org), query, body, response_model)

    async def patch_user_memberships_orgs_org(
        self,
        org: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.OrgMembership,
    ) -> models.OrgMembership:
        """Update an organization membership for the authenticated user (HTTP PATCH /user/memberships/orgs/{org})"""
        return await self.client.req(Route.PATCH_USER_MEMBERSHIPS_ORGS_ORG.bind(org), query, body, response_model)

    async def get_user_migrations_migration_id(
        self,
        migration_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Migration,
    ) -> models.Migration:
        """Get a user migration status (HTTP GET /user/migrations/{migration_id})"""
        return await self.client.req(Route.GET_USER_MIGRATIONS_MIGRATION_ID.bind(migration_id), query, body, response_model)

    async def get_user_orgs(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List organizations for the authenticated user (HTTP GET /user/orgs)"""
        return await self.client.req(Route.GET_USER_ORGS.bind(), query, body, response_model)

    async def get_user_packages_package_type_package_name(
        self,
        package_type: PathParam,
        package_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Package,
    ) -> models.Package:
        """Get a package for the authenticated user (HTTP GET /user/packages/{package_type}/{package_name})"""
        return await self.client.req(Route.GET_USER_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME.bind(package_type, package_name), query, body, response_model)

    async def get_user_packages_package_type_package_name_versions_package_version_id(
        self,
        package_type: PathParam,
        package_name: PathParam,
        package_version_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PackageVersion,
    ) -> models.PackageVersion:
        """Get a package version for the authenticated user (HTTP GET /user/packages/{package_type}/{package_name}/versions/{package_version_id})"""
        return await self.client.req(Route.GET_USER_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME_VERSIONS_PACKAGE_VERSION_ID.bind(package_type, package_name, package_version_id), query, body, response_model)

    async def get_user_repos(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Repository],
    ) -> List[models.Repository]:
        """List repositories for the authenticated user (HTTP GET /user/repos)"""
        return await self.client.req(Route.GET_USER_REPOS.bind(), query, body, response_model)

    async def post_user_repos(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Repository,
    ) -> models.Repository:
        """Create a repository for the authenticated user (HTTP POST /user/repos)"""
        return await self.client.req(Route.POST_USER_REPOS.bind(), query, body, response_model)

    async def get_user_starred(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Repository],
    ) -> List[models.Repository]:
        """List repositories starred by the authenticated user (HTTP GET /user/starred)"""
        return await self.client.req(Route.GET_USER_STARRED.bind(), query, body, response_model)

    async def put_user_starred_owner_repo(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Star a repository for the authenticated user (HTTP PUT /user/starred/{owner}/{repo})"""
        return await self.client.req(Route.PUT_USER_STARRED_OWNER_REPO.bind(owner, repo), query, body, response_model)

    async def delete_user_starred_owner_repo(
        self,
        owner: PathParam,
        repo: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = None,
    ) -> None:
        """Unstar a repository for the authenticated user (HTTP DELETE /user/starred/{owner}/{repo})"""
        return await self.client.req(Route.DELETE_USER_STARRED_OWNER_REPO.bind(owner, repo), query, body, response_model)

    async def get_users(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.SimpleUser],
    ) -> List[models.SimpleUser]:
        """List users (HTTP GET /users)"""
        return await self.client.req(Route.GET_USERS.bind(), query, body, response_model)

    async def get_users_username(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PublicUser,
    ) -> models.PublicUser:
        """Get a user (HTTP GET /users/{username})"""
        return await self.client.req(Route.GET_USERS_USERNAME.bind(username), query, body, response_model)

    async def get_users_username_events(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List events for the authenticated user (HTTP GET /users/{username}/events)"""
        return await self.client.req(Route.GET_USERS_USERNAME_EVENTS.bind(username), query, body, response_model)

    async def get_users_username_followers(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.SimpleUser],
    ) -> List[models.SimpleUser]:
        """List followers of a user (HTTP GET /users/{username}/followers)"""
        return await self.client.req(Route.GET_USERS_USERNAME_FOLLOWERS.bind(username), query, body, response_model)

    async def get_users_username_following(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.SimpleUser],
    ) -> List[models.SimpleUser]:
        """List the people a user follows (HTTP GET /users/{username}/following)"""
        return await self.client.req(Route.GET_USERS_USERNAME_FOLLOWING.bind(username), query, body, response_model)

    async def get_users_username_gists(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.GistSimple],
    ) -> List[models.GistSimple]:
        """List gists for a user (HTTP GET /users/{username}/gists)"""
        return await self.client.req(Route.GET_USERS_USERNAME_GISTS.bind(username), query, body, response_model)

    async def get_users_username_hovercard(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Hovercard,
    ) -> models.Hovercard:
        """Get contextual information for a user (HTTP GET /users/{username}/hovercard)"""
        return await self.client.req(Route.GET_USERS_USERNAME_HOVERCARD.bind(username), query, body, response_model)

    async def get_users_username_installation(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Installation,
    ) -> models.Installation:
        """Get a user installation for the authenticated app (HTTP GET /users/{username}/installation)"""
        return await self.client.req(Route.GET_USERS_USERNAME_INSTALLATION.bind(username), query, body, response_model)

    async def get_users_username_keys(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List public keys for a user (HTTP GET /users/{username}/keys)"""
        return await self.client.req(Route.GET_USERS_USERNAME_KEYS.bind(username), query, body, response_model)

    async def get_users_username_orgs(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """List organizations for a user (HTTP GET /users/{username}/orgs)"""
        return await self.client.req(Route.GET_USERS_USERNAME_ORGS.bind(username), query, body, response_model)

    async def get_users_username_packages_package_type_package_name(
        self,
        username: PathParam,
        package_type: PathParam,
        package_name: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.Package,
    ) -> models.Package:
        """Get a package for a user (HTTP GET /users/{username}/packages/{package_type}/{package_name})"""
        return await self.client.req(Route.GET_USERS_USERNAME_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME.bind(username, package_type, package_name), query, body, response_model)

    async def get_users_username_packages_package_type_package_name_versions_package_version_id(
        self,
        username: PathParam,
        package_type: PathParam,
        package_name: PathParam,
        package_version_id: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PackageVersion,
    ) -> models.PackageVersion:
        """Get a package version for a user (HTTP GET /users/{username}/packages/{package_type}/{package_name}/versions/{package_version_id})"""
        return await self.client.req(Route.GET_USERS_USERNAME_PACKAGES_PACKAGE_TYPE_PACKAGE_NAME_VERSIONS_PACKAGE_VERSION_ID.bind(username, package_type, package_name, package_version_id), query, body, response_model)

    async def get_users_username_repos(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = List[models.Repository],
    ) -> List[models.Repository]:
        """List repositories for a user (HTTP GET /users/{username}/repos)"""
        return await self.client.req(Route.GET_USERS_USERNAME_REPOS.bind(username), query, body, response_model)

    async def get_users_username_settings_billing_actions(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.ActionsBillingUsage,
    ) -> models.ActionsBillingUsage:
        """Get GitHub Actions billing for a user (HTTP GET /users/{username}/settings/billing/actions)"""
        return await self.client.req(Route.GET_USERS_USERNAME_SETTINGS_BILLING_ACTIONS.bind(username), query, body, response_model)

    async def get_users_username_settings_billing_packages(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.PackagesBillingUsage,
    ) -> models.PackagesBillingUsage:
        """Get GitHub Packages billing for a user (HTTP GET /users/{username}/settings/billing/packages)"""
        return await self.client.req(Route.GET_USERS_USERNAME_SETTINGS_BILLING_PACKAGES.bind(username), query, body, response_model)

    async def get_users_username_settings_billing_shared_storage(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = models.CombinedBillingUsage,
    ) -> models.CombinedBillingUsage:
        """Get shared storage billing for a user (HTTP GET /users/{username}/settings/billing/shared-storage)"""
        return await self.client.req(Route.GET_USERS_USERNAME_SETTINGS_BILLING_SHARED_STORAGE.bind(username), query, body, response_model)

    async def get_users_username_starred(
        self,
        username: PathParam,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Any,
    ) -> Any:
        """List repositories starred by a user (HTTP GET /users/{username}/starred)"""
        return await self.client.req(Route.GET_USERS_USERNAME_STARRED.bind(username), query, body, response_model)

    async def get_zen(
        self,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = str,
    ) -> str:
        """Get the Zen of GitHub (HTTP GET /zen)"""
        return await self.client.req(Route.GET_ZEN.bind(), query, body, response_model)


__all__ = ["GitHubDataSource"]
