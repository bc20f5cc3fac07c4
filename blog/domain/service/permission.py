"""Ownership policy: can an actor mutate a resource?"""

from dataclasses import dataclass
from typing import Any, Callable

import logfire

from blog.domain.error import NotAuthorizedError
from blog.domain.model import Answer, Comment, Post, Question
from blog.domain.value import UserId


@dataclass(frozen=True)
class OwnershipRule:
    """How to read the name, id and owner of one resource type."""

    name: str
    owner_of: Callable[[Any], UserId]
    id_of: Callable[[Any], Any]


class OwnershipPolicy:
    """Capability check for update/delete on user-owned content.

    Each resource type registers how to find its owner, so callers never
    compare entity fields themselves.
    """

    def __init__(self) -> None:
        self._rules: dict[type, OwnershipRule] = {}

    def register(
        self,
        resource_type: type,
        name: str,
        owner_of: Callable[[Any], UserId],
        id_of: Callable[[Any], Any] = lambda resource: resource.id,
    ) -> None:
        self._rules[resource_type] = OwnershipRule(
            name=name, owner_of=owner_of, id_of=id_of
        )

    def _rule_for(self, resource: Any) -> OwnershipRule:
        for resource_type in type(resource).__mro__:
            rule = self._rules.get(resource_type)
            if rule is not None:
                return rule
        raise TypeError(f"No ownership rule registered for {type(resource).__name__}")

    def can_mutate(self, actor_id: UserId, resource: Any) -> bool:
        """Whether ``actor_id`` owns ``resource``."""
        return self._rule_for(resource).owner_of(resource) == actor_id

    def ensure_can_mutate(self, actor_id: UserId, resource: Any) -> None:
        """Raise if ``actor_id`` may not update or delete ``resource``.

        Raises:
            NotAuthorizedError: If the actor is not the owner
        """
        rule = self._rule_for(resource)
        if rule.owner_of(resource) != actor_id:
            resource_id = str(rule.id_of(resource))
            logfire.warn(
                "Ownership check failed",
                resource=rule.name,
                resource_id=resource_id,
                actor_id=str(actor_id),
            )
            raise NotAuthorizedError(rule.name, resource_id, str(actor_id))


def default_ownership_policy() -> OwnershipPolicy:
    """Policy covering every user-authored resource in the blog."""
    policy = OwnershipPolicy()
    policy.register(Question, "question", lambda q: q.author_id)
    policy.register(Answer, "answer", lambda a: a.author_id)
    policy.register(Post, "post", lambda p: p.author_id)
    policy.register(Comment, "comment", lambda c: c.author_id)
    return policy
