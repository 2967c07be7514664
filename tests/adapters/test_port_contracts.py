"""Adapter contract tests for the application-layer ports.

Verify the default adapters keep satisfying the protocols in
``src/lib_typed_config/application/ports.py`` so dependency inversion stays
enforceable through automated tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from lib_typed_config.adapters.codecs.structured import JSONCodec, TOMLCodec
from lib_typed_config.adapters.file_loaders.text import TextFileReader
from lib_typed_config.application import ports


def test_text_reader_contract(tmp_path: Path) -> None:
    reader = TextFileReader()
    assert isinstance(reader, ports.TextReader)

    path = tmp_path / "config.toml"
    path.write_text("[service]\nvalue = 1\n", encoding="utf-8")
    assert reader.read(path).startswith("[service]")


@pytest.mark.parametrize(
    ("codec", "text"),
    [
        (TOMLCodec(), "[service]\nvalue = 1\n"),
        (JSONCodec(), '{"service": {"value": 1}}'),
    ],
)
def test_codec_contract(codec, text: str) -> None:
    """Each codec should satisfy Codec and decode what it encodes."""

    assert isinstance(codec, ports.Codec)

    data = codec.decode(text)
    assert data["service"]["value"] == 1
    assert codec.decode(codec.encode(data)) == data
