import io

import pytest

from roadanalysis_core.errors import WordSetLoadError
from roadanalysis_core.wordsets import (
    FileSource,
    ResourceSource,
    StreamSource,
    file_to_wordset,
    load_wordset,
    parse_wordset,
    resource_to_wordset,
    stream_to_wordset,
)

EXPECTED = frozenset(["и", "в", "не", "на", "что"])


def test_parse_strips_comments_and_blank_lines():
    lines = ["| header", "foo bar | trailing", "", "   ", "baz"]
    assert parse_wordset(lines) == frozenset(["foo", "bar", "baz"])


def test_file_and_stream_give_the_same_set(word_list_file, word_list_bytes):
    from_file = file_to_wordset(word_list_file)
    from_stream = stream_to_wordset(io.BytesIO(word_list_bytes))

    assert from_file == EXPECTED
    assert from_file == from_stream


def test_load_wordset_dispatch(word_list_file, word_list_bytes):
    assert load_wordset(str(word_list_file)) == EXPECTED
    assert load_wordset(word_list_file) == EXPECTED
    assert load_wordset(FileSource(word_list_file)) == EXPECTED
    assert load_wordset(io.BytesIO(word_list_bytes)) == EXPECTED
    assert load_wordset(StreamSource(io.BytesIO(word_list_bytes), "cities")) == EXPECTED


def test_load_wordset_rejects_unknown_sources():
    with pytest.raises(TypeError):
        load_wordset(42)


def test_stream_is_not_closed(word_list_bytes):
    stream = io.BytesIO(word_list_bytes)
    stream_to_wordset(stream)
    assert not stream.closed


def test_bundled_resources_load():
    russian = resource_to_wordset("stopwords/russian.txt")
    assert "и" in russian
    assert load_wordset(ResourceSource("stopwords/russian.txt")) == russian


@pytest.mark.parametrize("name", ["russian", "french", "german", "arabic", "bulgarian"])
def test_every_bundled_list_is_non_empty(name):
    words = resource_to_wordset(f"stopwords/{name}.txt")
    assert words
    assert not any("|" in w for w in words)


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(WordSetLoadError) as exc_info:
        file_to_wordset(missing)
    assert exc_info.value.source == FileSource(missing)


def test_missing_resource():
    with pytest.raises(WordSetLoadError):
        resource_to_wordset("stopwords/klingon.txt")


def test_invalid_utf8_file(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("café\n".encode("latin-1"))
    with pytest.raises(WordSetLoadError):
        file_to_wordset(path)


def test_invalid_utf8_stream():
    with pytest.raises(WordSetLoadError):
        stream_to_wordset(io.BytesIO(b"\xff\xfe bad"))


def test_text_stream_is_rejected():
    with pytest.raises(WordSetLoadError):
        stream_to_wordset(io.StringIO("foo bar"))


def test_load_errors_are_os_errors(tmp_path):
    with pytest.raises(OSError):
        file_to_wordset(tmp_path / "nope.txt")


def test_closed_stream(word_list_bytes):
    stream = io.BytesIO(word_list_bytes)
    stream.close()
    with pytest.raises(WordSetLoadError) as exc_info:
        load_wordset(stream)
    assert isinstance(exc_info.value.source, StreamSource)
