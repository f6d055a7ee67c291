from __future__ import annotations

from typing import Callable, ClassVar, Dict, List, Optional

from actioninputs.core.exceptions import ActionTypeRegistryError
from actioninputs.models.action_type import ActionType


class ActionTypeRegistry:
    _registry: ClassVar[Dict[str, ActionType]] = {}

    @classmethod
    def register(cls, action_type: ActionType, *, overwrite: bool = False) -> None:
        uid = action_type.uid
        if not overwrite and uid in cls._registry:
            raise ActionTypeRegistryError(f"Action type already registered for uid={uid!r}")
        cls._registry[uid] = action_type

    @classmethod
    def get(cls, uid: str) -> ActionType:
        try:
            return cls._registry[uid]
        except KeyError as exc:
            raise ActionTypeRegistryError(f"No action type registered for uid={uid!r}") from exc

    @classmethod
    def try_get(cls, uid: str) -> Optional[ActionType]:
        return cls._registry.get(uid)

    @classmethod
    def all(cls) -> List[ActionType]:
        return [cls._registry[uid] for uid in sorted(cls._registry)]

    @classmethod
    def clear(cls) -> None:
        cls._registry.clear()


def register_action_type(*, overwrite: bool = False) -> Callable[[Callable[[], ActionType]], Callable[[], ActionType]]:
    """Register the ActionType returned by the decorated factory."""

    def decorator(factory: Callable[[], ActionType]) -> Callable[[], ActionType]:
        ActionTypeRegistry.register(factory(), overwrite=overwrite)
        return factory

    return decorator
