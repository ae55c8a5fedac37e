"""
Output Naming.

Derives the output dataset/layer name from an input archive path.

Exports:
    derive_output_name: "20-006 GIS.kmz" -> "20-006"
"""

import os
from typing import Iterable

from config.defaults import ConversionDefaults
from exceptions import OutputNameError


def derive_output_name(
    input_path: str,
    strip_tokens: Iterable[str] = ConversionDefaults.NAME_STRIP_TOKENS
) -> str:
    """
    Build the output name from the archive file name.

    The extension is dropped, every strip token is removed (in order, plain
    substring replacement) and trailing whitespace is trimmed. Leading
    whitespace is left alone. Distinct inputs may reduce to the same name;
    the later one then writes into the earlier one's output directory.

    Args:
        input_path: Archive path
        strip_tokens: Substrings removed from the name

    Returns:
        Output name, e.g. "20-006" for ".../20-006 GIS.kmz"

    Raises:
        OutputNameError: If nothing is left once the tokens are stripped
    """
    file_name = os.path.basename(input_path)
    name, _ext = os.path.splitext(file_name)

    for token in strip_tokens:
        if token:
            name = name.replace(token, "")
    name = name.rstrip()

    if not name:
        raise OutputNameError(
            f"Output name derived from '{file_name}' is empty",
            input_path=input_path
        )
    return name
