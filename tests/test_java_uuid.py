import uuid

import pytest

from hessiankit.java_uuid import JavaUUID

MASK64 = (1 << 64) - 1


def _stdlib_form(most, least):
    return str(uuid.UUID(int=((most & MASK64) << 64) | (least & MASK64)))


def test_zero_uuid():
    assert str(JavaUUID(0, 0)) == "00000000-0000-0000-0000-000000000000"


def test_all_ones_uuid():
    assert str(JavaUUID(-1, -1)) == "ffffffff-ffff-ffff-ffff-ffffffffffff"


def test_source_sample_matches_standard_layout():
    sample = JavaUUID(most_sig_bits=459021424248441700, least_sig_bits=-7160773830801198154)
    assert str(sample) == _stdlib_form(459021424248441700, -7160773830801198154)


@pytest.mark.parametrize(
    "most,least",
    [
        (1, 2),
        (-(1 << 63), (1 << 63) - 1),
        (0x0123456789ABCDEF, -0x0123456789ABCDEF),
        (200, 200),
    ],
)
def test_matches_standard_layout(most, least):
    assert str(JavaUUID(most, least)) == _stdlib_form(most, least)


def test_string_shape():
    text = str(JavaUUID(459021424248441700, -7160773830801198154))
    assert [len(part) for part in text.split("-")] == [8, 4, 4, 4, 12]
    assert text == text.lower()


def test_equality_and_class_name():
    assert JavaUUID(3, 4) == JavaUUID(most_sig_bits=3, least_sig_bits=4)
    assert JavaUUID.java_class_name == "java.util.UUID"