"""Derive token-requiring rules from a content type's detail rules."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from securelink.core.exceptions import UnqualifiedRule
from securelink.rewrite.rules import (
    TOKEN_QUERY_VAR,
    PatternEntry,
    assigns,
    format_placeholder,
    placeholder_indices,
    select_detail_rules,
)

if TYPE_CHECKING:
    from securelink.core.conf import SecureLinkConfig

logger = logging.getLogger(__name__)

# optional trailing slash and end anchor closing every generated pattern
TRAILING_SUFFIX = '/?$'
TOKEN_GROUP = '([a-zA-Z0-9]+)'


class RuleSynthesizer:
    """Augment detail rules so they require and capture a trailing token.

    ``^blog/([^/]+)/?$ => index.php?name=$matches[1]`` becomes
    ``^blog/([^/]+)\\/secure\\/([a-zA-Z0-9]+)\\/?$ =>
    index.php?name=$matches[1]&secure_link_token=$matches[2]``.
    The token is always captured by the last group, so the existing
    placeholders never need renumbering.
    """

    def __init__(self, config: SecureLinkConfig) -> None:
        self.config = config

    def augment(self, entry: PatternEntry) -> PatternEntry:
        """Return the token-requiring twin of a single detail rule.

        :raises UnqualifiedRule: when the rule has no placeholder, does not
            end with the trailing slash anchor or already captures a token.
        """
        if not entry.pattern.endswith(TRAILING_SUFFIX):
            raise UnqualifiedRule(f'pattern does not end with {TRAILING_SUFFIX!r}')
        if assigns(entry.redirect, TOKEN_QUERY_VAR):
            raise UnqualifiedRule('redirect already captures a token')

        indices = placeholder_indices(entry.redirect)
        if not indices:
            raise UnqualifiedRule('redirect has no placeholder')

        identifier = re.escape(self.config.url_identifier)
        pattern = f'{entry.pattern[:-len(TRAILING_SUFFIX)]}\\/{identifier}\\/{TOKEN_GROUP}\\/?$'
        token = format_placeholder(max(indices) + 1, entry.redirect)
        return PatternEntry(pattern, f'{entry.redirect}&{TOKEN_QUERY_VAR}={token}')

    def synthesize(self, content_type: str, rules: Iterable[PatternEntry]) -> list[PatternEntry]:
        """Put the augmented twin of every qualifying detail rule in front of `rules`."""
        rules = list(rules)
        augmented = []
        for entry in select_detail_rules(content_type, rules):
            try:
                augmented.append(self.augment(entry))
            except UnqualifiedRule as e:
                logger.debug('Skipping %s rule %s: %s', content_type, entry, e)
        return augmented + rules
