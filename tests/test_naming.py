"""Tests for the naming module."""

import pytest

from octogen.exceptions import UnsupportedOperationError
from octogen.naming import (
    NAMESPACE_RULES,
    OperationWords,
    action,
    apply_rules,
    derive_namespace,
    enum_action,
    is_org,
    method_name,
    qualify_namespace,
)


class TestDeriveNamespace:
    """Test namespace derivation from operation ids."""

    def test_single_word_singular_uses_resource(self):
        assert derive_namespace("issues/get", singular=True) == "issue"

    def test_single_word_collection_keeps_resource(self):
        assert derive_namespace("issues/list", singular=False) == "issues"

    def test_repos_single_word(self):
        assert derive_namespace("repos/get", singular=True) == "repo"

    def test_phrase_tail(self):
        assert derive_namespace("issues/list-labels", singular=False) == "labels"
        assert derive_namespace("repos/get-latest-release", singular=True) == "latest_release"

    def test_on_splits_phrase(self):
        assert derive_namespace("issues/list-labels-on-issue", singular=False) == "issue_labels"

    def test_for_rewrites_repo(self):
        assert derive_namespace("issues/list-labels-for-repo", singular=False) == "repository_labels"

    def test_qualifier_singularized_for_single_result(self):
        assert derive_namespace("issues/get-comments-for-issue", singular=True) == "issue_comment"

    def test_short_head_uses_resource(self):
        assert derive_namespace("issues/list-for-repo", singular=False) == "repository_issues"

    def test_about_keeps_only_tail(self):
        assert derive_namespace("reactions/list-about-repo", singular=False) == "repository"

    def test_first_connective_wins(self):
        assert derive_namespace("issues/list-events-for-timeline-on-issue", singular=False) == "timeline_on_issue_events"


class TestNamespaceRules:
    """Each rule can be exercised on its own."""

    def test_rule_order(self):
        op = OperationWords.parse("issues/list-labels", singular=False)
        matching = [i for i, (predicate, _) in enumerate(NAMESPACE_RULES) if predicate(op)]
        assert matching == [3]

    def test_apply_rules_first_match(self):
        rules = [(lambda v: v > 1, lambda v: "big"), (lambda v: True, lambda v: "small")]
        assert apply_rules(rules, 2) == "big"
        assert apply_rules(rules, 0) == "small"

    def test_apply_rules_no_match(self):
        with pytest.raises(LookupError):
            apply_rules([(lambda v: False, lambda v: "never")], 1)


class TestMethodName:

    def test_get_is_namespace(self):
        assert method_name("get", "labels", "issues/list-labels") == "labels"

    def test_mutations_prefix_action(self):
        assert method_name("POST", "label", "issues/create-label") == "create_label"
        assert method_name("PATCH", "issue", "issues/update") == "update_issue"
        assert method_name("PUT", "issue", "issues/lock") == "lock_issue"
        assert method_name("DELETE", "release", "repos/delete-release") == "delete_release"

    def test_unsupported_verb(self):
        with pytest.raises(UnsupportedOperationError) as exc:
            method_name("HEAD", "labels", "issues/list-labels")
        assert exc.value.verb == "HEAD"

    def test_valid_identifier(self):
        assert method_name("GET", "repository_labels", "issues/list-labels-for-repo").isidentifier()


class TestOrgQualification:

    def test_is_org(self):
        assert is_org("orgs/list-hooks")
        assert not is_org("repos/list-hooks")

    def test_qualify(self):
        assert qualify_namespace("hooks", "orgs/list-hooks") == "org_hooks"
        assert qualify_namespace("hooks", "repos/list-hooks") == "hooks"

    def test_action(self):
        assert action("orgs/create-hook") == "create"


class TestEnumAction:

    def test_strip_trailing_d(self):
        assert enum_action("closed") == "close"

    def test_explicit_entry(self):
        assert enum_action("locked") == "lock"

    def test_no_trailing_d_unchanged(self):
        assert enum_action("open") == "open"

    def test_first_letter_lowered(self):
        assert enum_action("Closed") == "close"

    def test_non_identifier_characters(self):
        assert enum_action("too heated").isidentifier()
