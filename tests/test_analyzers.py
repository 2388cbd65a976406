import threading

from roadanalysis_core.analyzers.base import pipeline_stages
from roadanalysis_core.analyzers.filters import LowerCaseFilter, StopFilter
from roadanalysis_core.analyzers.standard import (
    ENGLISH_STOP_WORDS,
    ArabicAnalyzer,
    BulgarianAnalyzer,
    ClassicAnalyzer,
    EnglishAnalyzer,
    FrenchAnalyzer,
    GermanAnalyzer,
    RussianAnalyzer,
    StandardAnalyzer,
    default_stop_words,
)
from roadanalysis_core.analyzers.tokenizers import StandardTokenizer

CITIES = "Алма-Ата Йошкар-Ола"


def test_standard_analyzer():
    analyzer = StandardAnalyzer()
    assert analyzer.get_terms(CITIES) == ["алма", "ата", "йошкар", "ола"]
    assert analyzer.get_terms("The Quick fox") == ["quick", "fox"]
    assert analyzer.stop_words == ENGLISH_STOP_WORDS


def test_standard_analyzer_custom_stop_words():
    analyzer = StandardAnalyzer(frozenset(["ата"]))
    assert analyzer.get_terms(CITIES) == ["алма", "йошкар", "ола"]
    assert analyzer.get_terms("the fox") == ["the", "fox"]


def test_standard_analyzer_chain():
    stages = pipeline_stages(StandardAnalyzer().token_stream("body", CITIES))
    assert isinstance(stages[0], StandardTokenizer)
    assert isinstance(stages[-2], LowerCaseFilter)
    assert isinstance(stages[-1], StopFilter)


def test_classic_analyzer():
    analyzer = ClassicAnalyzer()
    assert analyzer.get_terms("Mail bob@example.com about I.B.M.") == ["mail", "bob@example.com", "about", "ibm"]


def test_russian_analyzer():
    assert RussianAnalyzer().get_terms(CITIES) == ["алм", "ат", "йошкар", "ол"]


def test_russian_analyzer_default_stop_words():
    analyzer = RussianAnalyzer()
    assert analyzer.stop_words == default_stop_words("russian")
    assert analyzer.get_terms("Алма и Ата") == ["алм", "ат"]


def test_russian_analyzer_stem_exclusion():
    analyzer = RussianAnalyzer(frozenset(), frozenset(["алма"]))
    assert analyzer.get_terms(CITIES) == ["алма", "ат", "йошкар", "ол"]


def test_english_analyzer():
    assert EnglishAnalyzer().get_terms("The cat's running") == ["cat", "run"]


def test_french_analyzer():
    analyzer = FrenchAnalyzer()
    assert analyzer.get_terms("les chevaux") == ["cheval"]
    assert FrenchAnalyzer(frozenset(), frozenset(["chevaux"])).get_terms("chevaux") == ["chevaux"]


def test_french_analyzer_removes_elisions():
    assert FrenchAnalyzer(frozenset(), frozenset(["école"])).get_terms("l'école") == ["école"]


def test_german_analyzer():
    assert GermanAnalyzer().get_terms("die Häuser") == ["haus"]


def test_bulgarian_and_arabic_analyzers_build():
    assert BulgarianAnalyzer().get_terms("") == []
    assert ArabicAnalyzer().get_terms("") == []
    assert ArabicAnalyzer().stop_words == default_stop_words("arabic")


def test_each_call_gets_its_own_pipeline():
    analyzer = RussianAnalyzer()
    first = analyzer.create_components("f")
    second = analyzer.create_components("f")
    assert first.source is not second.source
    assert first.sink is not second.sink


def test_positions():
    tokens = StandardAnalyzer().get_tokens_with_positions("the fox")
    assert tokens == [("fox", 1, 4)]


def test_analyzers_are_safe_to_share_between_threads():
    analyzer = RussianAnalyzer()
    results = []

    def work():
        for _ in range(50):
            results.append(tuple(analyzer.get_terms(CITIES)))

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert set(results) == {("алм", "ат", "йошкар", "ол")}
