import pytest

from actioninputs.catalog.registry import ActionTypeRegistry, register_action_type
from actioninputs.core.exceptions import ActionTypeRegistryError
from actioninputs.models.action_type import ActionType


def setup_function() -> None:
    ActionTypeRegistry.clear()


def test_register_and_get_round_trip():
    action_type = ActionType(uid="fan.setSpeed")

    ActionTypeRegistry.register(action_type)

    assert ActionTypeRegistry.get("fan.setSpeed") is action_type
    assert ActionTypeRegistry.try_get("fan.setSpeed") is action_type


def test_get_missing_raises_helpful_error():
    with pytest.raises(ActionTypeRegistryError, match="No action type registered"):
        ActionTypeRegistry.get("fan.setSpeed")


def test_duplicate_registration_raises_by_default():
    ActionTypeRegistry.register(ActionType(uid="fan.setSpeed"))

    with pytest.raises(ActionTypeRegistryError, match="already registered"):
        ActionTypeRegistry.register(ActionType(uid="fan.setSpeed", label="again"))


def test_overwrite_allows_re_registration():
    ActionTypeRegistry.register(ActionType(uid="fan.setSpeed"))
    ActionTypeRegistry.register(ActionType(uid="fan.setSpeed", label="v2"), overwrite=True)

    assert ActionTypeRegistry.get("fan.setSpeed").label == "v2"


def test_all_is_sorted_by_uid():
    ActionTypeRegistry.register(ActionType(uid="z.last"))
    ActionTypeRegistry.register(ActionType(uid="a.first"))

    assert [a.uid for a in ActionTypeRegistry.all()] == ["a.first", "z.last"]


def test_register_action_type_decorator_registers_factory_result():
    @register_action_type()
    def notify() -> ActionType:
        return ActionType(uid="notify.send", inputs=[{"name": "message", "type": "String"}])

    assert ActionTypeRegistry.get("notify.send").inputs[0].name == "message"
