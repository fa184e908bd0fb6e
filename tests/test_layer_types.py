import pytest

from yuvmat.layer_types import CUSTOM_BIT, LayerType, layer_type_from_name


def test_values_are_contiguous_from_zero():
    values = sorted(layer_type_from_name(member.name).value for member in LayerType)
    assert values == list(range(len(LayerType)))


def test_first_and_last_entries():
    assert layer_type_from_name("AbsVal") == 0
    assert layer_type_from_name("Noop") == 68
    assert max(LayerType) is layer_type_from_name("Noop")


def test_names_round_trip():
    for member in LayerType:
        assert layer_type_from_name(member.name) is member


def test_value_round_trip():
    for member in LayerType:
        assert LayerType(member.value) is member


def test_lookup_returns_matching_member():
    assert layer_type_from_name("ReLU") is LayerType.ReLU
    assert layer_type_from_name("Convolution") is LayerType.Convolution


def test_registry_order_is_preserved():
    convolution = layer_type_from_name("Convolution")
    pooling = layer_type_from_name("Pooling")
    relu = layer_type_from_name("ReLU")
    softmax = layer_type_from_name("Softmax")
    assert convolution < pooling < relu < softmax
    assert layer_type_from_name("YoloDetectionOutput") < layer_type_from_name(
        "Yolov3DetectionOutput"
    )


def test_lookup_is_case_sensitive():
    with pytest.raises(KeyError):
        layer_type_from_name("relu")


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        layer_type_from_name("NotALayer")


def test_custom_bit_is_outside_builtin_range():
    members = [layer_type_from_name(member.name) for member in LayerType]
    assert all(member & CUSTOM_BIT == 0 for member in members)
    assert CUSTOM_BIT > layer_type_from_name("Noop")
    assert CUSTOM_BIT & (CUSTOM_BIT - 1) == 0