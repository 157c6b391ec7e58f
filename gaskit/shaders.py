"""Loading of shader sources from disk."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Union

SHADER_DIR = Path("source/graphics/shaders")
MAIN_FRAGMENT_SHADER = SHADER_DIR / "main_frag_sh.frag"
MAIN_VERTEX_SHADER = SHADER_DIR / "main_vert_sh.vert"
BOX_FRAGMENT_SHADER = SHADER_DIR / "box_frag_sh.frag"
BOX_VERTEX_SHADER = SHADER_DIR / "box_vert_sh.vert"


def load_shaders(paths: Iterable[Union[str, os.PathLike]]) -> list[str]:
    """Read each file in *paths*, returning the texts in the same order.

    Raises ``OSError`` (such as ``FileNotFoundError``) if a file cannot be read.
    """
    return [Path(path).read_text(encoding="utf-8") for path in paths]