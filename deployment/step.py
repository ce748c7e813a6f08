from dataclasses import dataclass
from typing import Callable, FrozenSet


@dataclass(frozen=True)
class DeployStep:
    """A unit of deployment work plus the tags used to select it."""

    name: str
    run: Callable
    tags: FrozenSet[str] = frozenset()

    def matches(self, tags):
        tags = set(tags or ())
        if not tags:
            return True

        return bool(self.tags & tags)

    def __call__(self, context):
        return self.run(context)


def deploy_step(tags=()):
    def wrapper(func):
        return DeployStep(name=func.__name__, run=func, tags=frozenset(tags))

    return wrapper
