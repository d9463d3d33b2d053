"""Tests for the context_builder module."""

from octogen.config import GeneratorConfig
from octogen.context_builder import build_module, build_modules, group_endpoints
from octogen.loader import load_spec

from .conftest import FIXTURE_SPEC, make_endpoint


class TestGroupEndpoints:

    @classmethod
    def setup_class(cls):
        cls.spec = load_spec(FIXTURE_SPEC)
        cls.groups = group_endpoints(cls.spec)

    def test_resources_in_document_order(self):
        assert list(self.groups) == ["labels", "issues", "hooks", "releases", "reactions"]

    def test_unsupported_paths_dropped(self):
        paths = {e.path for endpoints in self.groups.values() for e in endpoints}
        assert "/users/{username}" not in paths
        assert "/repos/{owner}/{repo}/commits" not in paths

    def test_endpoints_in_document_order(self):
        assert [e.operation_id for e in self.groups["issues"]] == [
            "issues/update",
            "issues/list-labels",
            "issues/add-assignees",
            "issues/lock",
        ]

    def test_path_level_parameters_kept(self):
        update = self.groups["issues"][0]
        assert [p.name for p in update.parameters] == ["owner", "repo", "issue_number"]


class TestBuildModules:
    """Test the full pipeline with the fixture spec."""

    @classmethod
    def setup_class(cls):
        cls.spec = load_spec(FIXTURE_SPEC)
        cls.modules = {m.resource: m for m in build_modules(cls.spec)}

    def method_names(self, resource):
        return [m.name for m in self.modules[resource].methods]

    def test_module_per_resource(self):
        assert set(self.modules) == {"labels", "issues", "hooks", "releases", "reactions"}

    def test_verb_order(self):
        assert self.method_names("labels") == ["repository_labels", "create_label"]

    def test_shorter_paths_first_and_helpers_follow_parent(self):
        assert self.method_names("issues") == [
            "update_issue",
            "open_issue",
            "close_issue",
            "labels",
            "add_assignees",
            "lock_issue",
        ]

    def test_singular_before_collection_and_depth(self):
        assert self.method_names("releases") == [
            "releases",
            "create_release",
            "delete_release",
            "latest_release",
        ]

    def test_org_module(self):
        assert self.method_names("hooks") == ["org_hooks", "create_org_hook"]

    def test_documentation_url_fragment_stripped(self):
        assert self.modules["labels"].documentation_url == "https://docs.github.com/rest/issues/labels"
        assert self.modules["reactions"].documentation_url == "https://developer.github.com/v3/reactions/"

    def test_title(self):
        assert self.modules["reactions"].title == "Reactions"

    def test_all_method_names_unique_identifiers(self):
        for module in self.modules.values():
            names = [m.name for m in module.methods]
            assert len(names) == len(set(names))
            assert all(name.isidentifier() for name in names)

    def test_keyword_config(self):
        config = GeneratorConfig(calling_convention="keyword")
        modules = {m.resource: m for m in build_modules(self.spec, config)}
        assert modules["reactions"].methods[0].parameters == "reaction_id:, **options"


class TestBuildModule:

    def test_stable_for_equal_priority(self):
        first = make_endpoint(operation_id="issues/list-for-repo")
        second = make_endpoint(operation_id="issues/list-events-for-repo")
        module = build_module("issues", [first, second])
        assert [e.method_name for e in module.endpoints] == ["repository_issues", "repository_events"]
        module = build_module("issues", [second, first])
        assert [e.method_name for e in module.endpoints] == ["repository_events", "repository_issues"]

    def test_primary_tag_sorts_first(self):
        issues = make_endpoint(operation_id="issues/list-for-repo", tags=("issues",))
        repos = make_endpoint(operation_id="repos/list-deployments", tags=("repos",))
        module = build_module("deployments", [issues, repos])
        assert [e.method_name for e in module.endpoints] == ["deployments", "repository_issues"]

    def test_documentation_url_from_first_input_endpoint(self):
        first = make_endpoint(docs_url="https://docs.github.com/rest/issues/issues#list")
        second = make_endpoint(
            method="post",
            operation_id="issues/create",
            responses=(),
            docs_url="https://docs.github.com/rest/other#create",
        )
        module = build_module("issues", [second, first])
        assert module.documentation_url == "https://docs.github.com/rest/other"
