import pytest

from actioninputs.types.table import TypeTag, classify, intrinsics, known_identifiers


def test_classify_distinguishes_primitive_and_boxed():
    primitive = classify("int")
    boxed = classify("java.lang.Integer")

    assert primitive.tag is TypeTag.INT and primitive.primitive
    assert boxed.tag is TypeTag.INT and not boxed.primitive
    assert classify("Integer") == classify("Integer")


def test_classify_is_total_for_unknown_identifiers():
    declared = classify("org.openhab.core.library.types.HSBType")

    assert declared.tag is TypeTag.UNSUPPORTED
    assert not declared.supported
    assert classify("").tag is TypeTag.UNSUPPORTED


def test_classify_is_case_sensitive():
    assert classify("Int").tag is TypeTag.UNSUPPORTED
    assert classify("string").tag is TypeTag.UNSUPPORTED
    assert classify("String").tag is TypeTag.STRING


def test_classify_is_stable_for_every_known_identifier():
    for identifier in known_identifiers():
        first = classify(identifier)
        assert first.supported
        assert classify(identifier) == first


@pytest.mark.parametrize(
    "identifier, category, context, default, required",
    [
        ("boolean", "BOOLEAN", None, "false", True),
        ("java.lang.Boolean", "BOOLEAN", None, None, False),
        ("byte", "INTEGER", None, "0", True),
        ("long", "INTEGER", None, "0", True),
        ("java.lang.Short", "INTEGER", None, None, False),
        ("double", "DECIMAL", None, "0", True),
        ("java.lang.Float", "DECIMAL", None, None, False),
        ("java.lang.String", "TEXT", None, None, False),
        ("java.time.LocalDate", "TEXT", "date", None, False),
        ("java.time.LocalTime", "TEXT", "time", None, False),
        ("java.time.LocalDateTime", "TEXT", "datetime", None, False),
        ("java.time.ZonedDateTime", "TEXT", "datetime", None, False),
        ("QuantityType", "TEXT", None, None, False),
    ],
)
def test_intrinsics_table(identifier, category, context, default, required):
    rules = intrinsics(classify(identifier))

    assert rules is not None
    assert rules.category == category
    assert rules.context == context
    assert rules.default == default
    assert rules.required is required


def test_decimal_type_and_unknown_types_have_no_descriptor_rules():
    assert intrinsics(classify("DecimalType")) is None
    assert intrinsics(classify("java.util.List")) is None
