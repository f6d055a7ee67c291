import pytest
from pydantic import ValidationError

from actioninputs.descriptors.actions import describe_action, describe_actions
from actioninputs.models.action_type import ActionType


def _action(**overrides):
    data = {
        "uid": "astro.getEventTime",
        "label": "get the date time of a sun event",
        "inputs": [
            {"name": "phaseName", "type": "java.lang.String", "label": "Phase", "required": True},
            {"name": "date", "type": "java.time.ZonedDateTime"},
            {"name": "moment", "type": "java.lang.String", "defaultValue": "START"},
        ],
        "outputs": [{"name": "eventTime", "type": "java.time.ZonedDateTime"}],
    }
    data.update(overrides)
    return ActionType.model_validate(data)


def test_describe_action_lists_config_descriptions():
    description = describe_action(_action())

    assert description.action_uid == "astro.getEventTime"
    assert description.configurable
    params = description.input_config_descriptions
    assert [p.name for p in params] == ["phaseName", "date", "moment"]
    assert params[0].required is True
    assert params[1].context == "datetime"
    assert params[2].default == "START"
    assert description.outputs[0].name == "eventTime"


def test_describe_action_with_unsupported_input_has_no_config_descriptions():
    description = describe_action(
        _action(inputs=[{"name": "a", "type": "int"}, {"name": "state", "type": "org.openhab.core.types.State"}])
    )

    assert description.input_config_descriptions is None
    assert not description.configurable
    assert len(description.inputs) == 2


def test_description_payload_uses_camel_case():
    payload = describe_action(_action()).to_payload()

    assert payload["actionUid"] == "astro.getEventTime"
    assert payload["inputConfigDescriptions"][0]["readOnly"] is False
    assert payload["inputs"][2]["defaultValue"] == "START"


def test_describe_actions_preserves_order():
    descriptions = describe_actions([_action(uid="b.one"), _action(uid="a.two")])

    assert [d.action_uid for d in descriptions] == ["b.one", "a.two"]


def test_action_type_rejects_duplicate_input_names():
    with pytest.raises(ValidationError) as exc:
        _action(inputs=[{"name": "x", "type": "int"}, {"name": "x", "type": "long"}])

    assert "duplicate inputs" in str(exc.value)


def test_action_type_input_lookup():
    action_type = _action()

    assert action_type.input("date").declared_type.primitive is False
    assert action_type.input("missing") is None
