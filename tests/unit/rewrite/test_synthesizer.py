import re

import pytest

from securelink.core.conf import SecureLinkConfig
from securelink.core.exceptions import UnqualifiedRule
from securelink.rewrite.rules import PatternEntry, placeholder_indices
from securelink.rewrite.synthesizer import RuleSynthesizer


@pytest.fixture
def synthesizer(secure_config):
    return RuleSynthesizer(secure_config)


def test_post_detail_rule_is_augmented(synthesizer):
    rule = PatternEntry('^blog/([^/]+)/?$', 'index.php?name=$matches[1]')

    augmented = synthesizer.augment(rule)

    assert augmented.pattern == r'^blog/([^/]+)\/secure\/([a-zA-Z0-9]+)\/?$'
    assert augmented.redirect == 'index.php?name=$matches[1]&secure_link_token=$matches[2]'


def test_new_placeholder_follows_the_highest_index(synthesizer):
    redirect = 'index.php?book=$matches[3]&page=$matches[1]&x=$matches[2]'
    augmented = synthesizer.augment(PatternEntry('^(a)/(b)/(c)/?$', redirect))

    assert augmented.redirect == f'{redirect}&secure_link_token=$matches[4]'
    assert augmented.redirect.startswith(redirect)
    assert max(placeholder_indices(augmented.redirect)) == 4
    assert placeholder_indices(augmented.redirect).count(4) == 1


def test_backslash_placeholders(synthesizer):
    augmented = synthesizer.augment(PatternEntry('^b/([^/]+)(?:/([0-9]+))?/?$', r'index.php?book=\1&page=\2'))

    assert augmented.redirect == r'index.php?book=\1&page=\2&secure_link_token=\3'


def test_augmented_pattern_captures_the_token_last(synthesizer):
    augmented = synthesizer.augment(
        PatternEntry('^blog/([^/]+)(?:/([0-9]+))?/?$', 'index.php?name=$matches[1]&page=$matches[2]')
    )

    match = re.search(augmented.pattern, 'blog/hello/secure/abc123/')
    assert match.groups() == ('hello', None, 'abc123')
    assert re.search(augmented.pattern, 'blog/hello/secure/abc123')
    assert not re.search(augmented.pattern, 'blog/hello/secure/')
    assert not re.search(augmented.pattern, 'blog/hello/secure/abc-123/')
    assert not re.search(augmented.pattern, 'blog/hello/')


def test_url_identifier_is_escaped():
    synthesizer = RuleSynthesizer(SecureLinkConfig(url_identifier='s.k'))
    augmented = synthesizer.augment(PatternEntry('^blog/([^/]+)/?$', 'index.php?name=$matches[1]'))

    assert re.search(augmented.pattern, 'blog/hello/s.k/abc/')
    assert not re.search(augmented.pattern, 'blog/hello/sxk/abc/')


@pytest.mark.parametrize(
    'rule',
    [
        pytest.param(PatternEntry('^blog/foo/?$', 'index.php?name=foo'), id='no-placeholder'),
        pytest.param(PatternEntry('^blog/([^/]+)$', 'index.php?name=$matches[1]'), id='no-trailing-slash'),
        pytest.param(
            PatternEntry(r'^blog/([^/]+)\/secure\/([a-zA-Z0-9]+)\/?$',
                         'index.php?name=$matches[1]&secure_link_token=$matches[2]'),
            id='already-augmented',
        ),
    ],
)
def test_unqualified_rules(synthesizer, rule):
    with pytest.raises(UnqualifiedRule):
        synthesizer.augment(rule)


class TestSynthesize:
    rules = [
        PatternEntry('^blog/?$', 'index.php?post_type=post'),
        PatternEntry('^blog/[^/]+/attachment/([^/]+)/?$', 'index.php?attachment=$matches[1]'),
        PatternEntry('^blog/([^/]+)/trackback/?$', 'index.php?name=$matches[1]&tb=1'),
        PatternEntry('^blog/([^/]+)/(feed|rss)/?$', 'index.php?name=$matches[1]&feed=$matches[2]'),
        PatternEntry('^blog/([^/]+)/embed/?$', 'index.php?name=$matches[1]&embed=true'),
        PatternEntry('^blog/old/?$', 'index.php?name=old'),
        PatternEntry('^blog/([^/]+)(?:/([0-9]+))?/?$', 'index.php?name=$matches[1]&page=$matches[2]'),
    ]

    def test_only_canonical_detail_rules_are_augmented(self, synthesizer):
        result = synthesizer.synthesize('post', self.rules)

        assert result[1:] == self.rules
        assert result[0] == PatternEntry(
            r'^blog/([^/]+)(?:/([0-9]+))?\/secure\/([a-zA-Z0-9]+)\/?$',
            'index.php?name=$matches[1]&page=$matches[2]&secure_link_token=$matches[3]',
        )

    def test_augmented_rules_keep_their_relative_order(self, synthesizer):
        rules = [
            PatternEntry('^a/([^/]+)/?$', 'index.php?book=$matches[1]'),
            PatternEntry('^b/?$', 'index.php?post_type=book'),
            PatternEntry('^c/([^/]+)/?$', 'index.php?book=$matches[1]'),
        ]

        result = synthesizer.synthesize('book', rules)

        assert [rule.pattern for rule in result] == [
            r'^a/([^/]+)\/secure\/([a-zA-Z0-9]+)\/?$',
            r'^c/([^/]+)\/secure\/([a-zA-Z0-9]+)\/?$',
            '^a/([^/]+)/?$',
            '^b/?$',
            '^c/([^/]+)/?$',
        ]

    def test_other_content_types_are_untouched(self, synthesizer):
        assert synthesizer.synthesize('page', self.rules) == self.rules

    def test_input_is_not_mutated(self, synthesizer):
        rules = list(self.rules)

        synthesizer.synthesize('post', rules)

        assert rules == self.rules

    def test_repeated_runs_on_the_source_rules_are_equal(self, synthesizer):
        assert synthesizer.synthesize('post', self.rules) == synthesizer.synthesize('post', self.rules)

    def test_rerun_on_output_does_not_double_augment(self, synthesizer):
        once = synthesizer.synthesize('post', self.rules)

        twice = synthesizer.synthesize('post', once)

        assert twice == [once[0], *once]
        assert sum('secure_link_token' in rule.redirect for rule in twice) == 2
        assert all(rule.redirect.count('secure_link_token') <= 1 for rule in twice)
