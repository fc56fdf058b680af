from swatchlab.colors import RGBColor, ColorWithMetadata, generate_color_id
from dataclasses import FrozenInstanceError
import re
import time
import pytest

ID_PATTERN = re.compile(r"color-\d+-[0-9a-z]{9}")


def test_generate_color_id_format():
    for _ in range(20):
        assert ID_PATTERN.fullmatch(generate_color_id())


def test_generated_ids_differ():
    ids = {generate_color_id() for _ in range(50)}
    assert len(ids) == 50


def test_create_stamps_id_and_time():
    before = int(time.time() * 1000)
    record = ColorWithMetadata.create(RGBColor(255, 0, 0), name="Red")
    after = int(time.time() * 1000)

    assert record.color == RGBColor(255, 0, 0)
    assert record.name == "Red"
    assert ID_PATTERN.fullmatch(record.id)
    assert before <= record.created_at <= after


def test_metadata_is_frozen():
    record = ColorWithMetadata.create(RGBColor(0, 0, 0))
    assert record.name is None
    with pytest.raises(FrozenInstanceError):
        record.name = "Black"
    renamed = record.renamed("Black")
    assert renamed.name == "Black"
    assert renamed.id == record.id
    assert renamed.created_at == record.created_at
