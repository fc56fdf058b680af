from swatchlab.colors import HexColor, RGBColor
from swatchlab.export import export_ase, encode_color_block, swatch_name
import struct
import pytest

RED_T1 = bytes.fromhex(
    "41534546"          # ASEF
    "00010000"          # version 1.0
    "0001"              # one block
    "0001"              # color entry
    "0000001a"          # block length 26
    "0003"              # name length
    "0074002d0031"      # "t-1"
    "52474220"          # "RGB "
    "3f800000"
    "00000000"
    "00000000"
    "0002"              # normal
)


def test_single_red_swatch():
    data = export_ase([RGBColor(255, 0, 0)], "t")
    assert len(data) == 42
    assert data == RED_T1


def test_empty_palette():
    assert export_ase([], "empty") == b"ASEF\x00\x01\x00\x00\x00\x00"


def test_block_count_and_names():
    colors = [HexColor("#000"), HexColor("#fff"), RGBColor(0, 0, 255)]
    data = export_ase(colors, "brand")
    assert struct.unpack(">H", data[8:10])[0] == 3
    for index in range(3):
        assert swatch_name("brand", index).encode("utf-16-be") in data


def test_channel_floats():
    block = encode_color_block("x", RGBColor(51, 102, 255))
    r, g, b = struct.unpack(">fff", block[14:26])
    assert r == pytest.approx(0.2)
    assert g == pytest.approx(0.4)
    assert b == pytest.approx(1.0)


def test_non_ascii_name_length_in_code_units():
    block = encode_color_block("é-1", RGBColor(0, 0, 0))
    block_type, length, units = struct.unpack(">HIH", block[:8])
    assert (block_type, units) == (1, 3)
    assert length == 2 + 6 + 4 + 12 + 2


def test_translucent_colors_warn():
    with pytest.warns(UserWarning):
        data = export_ase([RGBColor(255, 0, 0, alpha=0.5)], "t")
    assert data == RED_T1
