import pytest

from roadanalysis_core.errors import ConfigurationError
from roadanalysis_core.version import Version


def test_parse_latest():
    assert Version.parse("LATEST") == Version.LATEST
    assert Version.parse("latest") == Version.LATEST


def test_parse_dotted():
    assert Version.parse("4.2") == Version(4, 2, 0)
    assert Version.parse("3") == Version(3)
    assert Version.parse("5.3.1") == Version(5, 3, 1)


def test_parse_passes_versions_through():
    v = Version(6, 1)
    assert Version.parse(v) is v


@pytest.mark.parametrize("value", ["", "4.x", "1.2.3.4", "LUCENE_36", None, 42])
def test_parse_rejects_garbage(value):
    with pytest.raises(ConfigurationError):
        Version.parse(value)


def test_ordering():
    assert Version(4, 2) < Version(4, 10)
    assert Version.LATEST.on_or_after(Version(4, 0))
    assert not Version(3, 6).on_or_after(Version(4, 0))
    assert str(Version(4, 2)) == "4.2.0"
