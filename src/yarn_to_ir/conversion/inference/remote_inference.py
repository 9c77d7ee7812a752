"""
Remote heuristic.

* No side-effects, no exceptions – returns a ``Validation``.
* "resolved" is optional in yarn.lock; without it (or when it is not
  text), only the directory rules apply and finding nothing is not an error.
* Priority (first match wins)
  1. Git            → ``uid`` field or hash of a git URL
  2. FileLocal      → ``file:`` URL
  3. File           → any other URL
  4. DirectoryLocal → ``file:`` alias spec
  5. DirectorySymLinked → ``link:`` alias spec
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from lock_ir.models import PackageKey, Remote

from ..errors import MalformedResolved, UnknownRemoteType
from ..field_parsers import TEXT, extract
from ..fields import PackageFields
from ..validation import Success, Validation, fail
from .base_rule import BaseRule, RemoteContext
from .remote_rules import (
    DIRECTORY_LOCAL_RULE,
    DIRECTORY_SYMLINK_RULE,
    FileLocalRule,
    FileRule,
    GitRule,
    split_url_hash,
)

__all__ = ["DIRECTORY_RULES", "REMOTE_RULES", "infer_remote"]

logger = logging.getLogger(__name__)

DIRECTORY_RULES: List[BaseRule] = [DIRECTORY_LOCAL_RULE, DIRECTORY_SYMLINK_RULE]

REMOTE_RULES: List[BaseRule] = [
    GitRule(),
    FileLocalRule(),
    FileRule(),
    *DIRECTORY_RULES,
]


def first_match(rules: Iterable[BaseRule], context: RemoteContext) -> Optional[Remote]:
    for rule in rules:
        if (remote := rule.match(context)) is not None:
            logger.debug("remote via %s rule → %s", rule.name, remote.type)
            return remote
    return None


def infer_remote(
    fields: PackageFields, keys: Sequence[PackageKey]
) -> Validation[Optional[Remote]]:
    """
    Return the package's Remote, ``None`` for plain local entries, or a
    failure when "resolved" exists but cannot be interpreted.
    """
    keys = tuple(keys)

    # a non-text "resolved" counts as absent
    resolved = extract(TEXT, "resolved", fields)
    if resolved is None:
        return Success(first_match(DIRECTORY_RULES, RemoteContext(keys=keys)))

    try:
        url, url_hash = split_url_hash(resolved)
    except ValueError:
        logger.debug("malformed resolved field: %s", resolved)
        return fail(MalformedResolved(value=resolved))

    context = RemoteContext(
        keys=keys, url=url, hash=url_hash, uid=extract(TEXT, "uid", fields)
    )
    remote = first_match(REMOTE_RULES, context)
    if remote is None:
        logger.debug("unable to infer remote for resolved=%r", resolved)
        return fail(UnknownRemoteType())
    return Success(remote)
