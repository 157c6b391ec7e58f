import pytest

from gaskit.shaders import load_shaders


def test_load_shaders_in_order(tmp_path):
    frag = tmp_path / "a.frag"
    vert = tmp_path / "b.vert"
    frag.write_text("void main() { frag }\n")
    vert.write_text("void main() { vert }\n")
    assert load_shaders([frag, str(vert)]) == [
        "void main() { frag }\n",
        "void main() { vert }\n",
    ]


def test_load_shaders_empty():
    assert load_shaders([]) == []


def test_load_shaders_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_shaders([tmp_path / "missing.frag"])