"""Tests for resource assignment."""

from octogen.context_builder import SUPPORTED_RESOURCES, resource_for_path


class TestResourceForPath:
    """Test that API paths map to the correct resource."""

    def test_repository_scoped(self):
        assert resource_for_path("/repos/{owner}/{repo}/releases") == "releases"
        assert resource_for_path("/repos/{owner}/{repo}/releases/{release_id}/assets") == "releases"
        assert resource_for_path("/repos/{owner}/{repo}/labels/{name}") == "labels"

    def test_issue_sub_resources_stay_with_issues(self):
        assert resource_for_path("/repos/{owner}/{repo}/issues/{issue_number}/labels") == "issues"

    def test_organization_scoped(self):
        assert resource_for_path("/orgs/{org}/hooks") == "hooks"
        assert resource_for_path("/orgs/{org}/hooks/{hook_id}/pings") == "hooks"

    def test_top_level(self):
        assert resource_for_path("/reactions/{reaction_id}") == "reactions"
        assert resource_for_path("/issues") == "issues"

    def test_unsupported(self):
        assert resource_for_path("/users/{username}") is None
        assert resource_for_path("/repos/{owner}/{repo}/commits") is None
        assert resource_for_path("/orgs/{org}/members") is None

    def test_too_short(self):
        assert resource_for_path("/repos/{owner}/{repo}") is None
        assert resource_for_path("/orgs/{org}") is None
        assert resource_for_path("/") is None

    def test_allowlist(self):
        assert set(SUPPORTED_RESOURCES) == {
            "deployments", "pages", "hooks", "releases",
            "labels", "milestones", "issues", "reactions",
        }
