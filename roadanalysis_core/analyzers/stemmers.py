"""RoadAnalysis Stemmers - Stemming Algorithms and Stem Filters.

Two families of stemmers are used by analysis pipelines:

* Full suffix-stripping stemmers from NLTK's Snowball and Porter
  implementations. They are plain stemmer objects and are applied to a
  stream through :class:`SnowballFilter`.
* Light and minimal stemmers, which come with their own token filter
  taking only the wrapped stream.

Every stem filter leaves keyword-marked tokens untouched.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from typing import Iterator, Union

from nltk.stem.api import StemmerI
from nltk.stem.porter import PorterStemmer
from nltk.stem.snowball import (
    ArabicStemmer,
    EnglishStemmer,
    FrenchStemmer,
    GermanStemmer,
    RussianStemmer,
    SnowballStemmer,
)

from roadanalysis_core.analyzers.base import (
    TokenFilter,
    Token,
    TokenStream,
)


class StemFilter(TokenFilter):
    """Applies a stemmer to every token not marked as a keyword."""

    def __init__(self, input: TokenStream, stemmer: StemmerI):
        """Initialize filter.

        Args:
            input: Wrapped token stream
            stemmer: Object with a ``stem(word) -> str`` method
        """
        super().__init__(input)
        self.stemmer = stemmer

    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        """Apply stemming to tokens."""
        for token in tokens:
            if token.keyword:
                yield token
                continue
            stemmed = self.stem(token.text)
            if stemmed != token.text:
                token = token.clone()
                token.text = stemmed
            yield token

    def stem(self, text: str) -> str:
        """Stem one word, keeping the casing of the unchanged prefix.

        The stemmer sees the lowercased word. Case folding is left to
        LowerCaseFilter, so "Running" stems to "Run".
        """
        lowered = text.lower()
        stemmed = self.stemmer.stem(lowered)
        if lowered == text or len(lowered) != len(text):
            return stemmed

        common = 0
        for original, folded in zip(lowered, stemmed):
            if original != folded:
                break
            common += 1
        return text[:common] + stemmed[common:]


class SnowballFilter(StemFilter):
    """Stems tokens with a full suffix-stripping stemmer.

    The stemmer is either a stemmer instance or a Snowball language
    name such as ``"russian"``.
    """

    def __init__(self, input: TokenStream, stemmer: Union[StemmerI, str]):
        if isinstance(stemmer, str):
            stemmer = SnowballStemmer(stemmer)
        super().__init__(input, stemmer)


class PorterStemFilter(StemFilter):
    """Stems English tokens with the original Porter algorithm."""

    def __init__(self, input: TokenStream):
        super().__init__(input, PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM))


# ---------------------------------------------------------------------------
# Light and minimal stemmers
# ---------------------------------------------------------------------------


class EnglishMinimalStemmer:
    """Plural stemmer for English: removes plural "s" and "es" endings."""

    def stem(self, word: str) -> str:
        if len(word) < 3 or word[-1] != "s":
            return word

        if word[-2] in "us":
            return word
        if word[-2] == "e":
            if len(word) > 3 and word[-3] == "i" and word[-4] not in "ae":
                return word[:-3] + "y"
            if word[-3] in "iaoe":
                return word
        return word[:-1]


class RussianLightStemmer:
    """Light stemmer for Russian: removes case endings."""

    ENDINGS = (
        (6, ("иями", "оями")),
        (5, (
            "иям", "иях", "оях", "ями", "оям", "оьв", "ами", "его",
            "ему", "ери", "ими", "ого", "ому", "ыми", "оев",
        )),
        (4, (
            "ая", "яя", "ях", "юю", "ах", "ею", "их", "ия", "ию", "ьв",
            "ою", "ую", "ям", "ых", "ые", "ое", "ие", "ем", "ей", "ий",
            "ой", "ом", "ым", "ев", "ов", "ам", "ми", "ью",
        )),
    )

    VOWEL_ENDINGS = "аеиоуйыяь"

    def stem(self, word: str) -> str:
        return self._normalize(self._remove_case(word))

    def _remove_case(self, word: str) -> str:
        for min_length, endings in self.ENDINGS:
            if len(word) > min_length and word.endswith(endings):
                return word[:-len(endings[0])]

        if len(word) > 3 and word[-1] in self.VOWEL_ENDINGS:
            return word[:-1]
        return word

    def _normalize(self, word: str) -> str:
        if len(word) > 3:
            if word[-1] in "ьи":
                return word[:-1]
            if word.endswith("нн"):
                return word[:-1]
        return word


class GermanLightStemmer:
    """Light stemmer for German: folds umlauts and removes inflections."""

    FOLDING = str.maketrans("äàáâöòóôïìíîüùúû", "aaaaooooiiiiuuuu")
    ST_ENDING = frozenset("bdfghklmnt")

    def stem(self, word: str) -> str:
        word = word.translate(self.FOLDING)
        return self._step2(self._step1(word))

    def _step1(self, word: str) -> str:
        n = len(word)
        if n > 5 and word.endswith("ern"):
            return word[:-3]
        if n > 4 and word[-2] == "e" and word[-1] in "mnrs":
            return word[:-2]
        if n > 3 and word[-1] == "e":
            return word[:-1]
        if n > 3 and word[-1] == "s" and word[-2] in self.ST_ENDING:
            return word[:-1]
        return word

    def _step2(self, word: str) -> str:
        n = len(word)
        if n > 5 and word.endswith("est"):
            return word[:-3]
        if n > 4 and word[-2] == "e" and word[-1] in "rn":
            return word[:-2]
        if n > 4 and word.endswith("st") and word[-3] in self.ST_ENDING:
            return word[:-2]
        return word


class FrenchLightStemmer:
    """Light stemmer for French: removes plurals and common suffixes."""

    ACCENTS = str.maketrans("àáâôèéêùûîç", "aaaoeeeuuic")

    # (minimum length, suffix, replacement); first match wins
    SUFFIXES = (
        (9, "issement", "ir"),
        (8, "issant", "ir"),
        (11, "ficatrice", "fier"),
        (10, "ficateur", "fier"),
        (9, "catrice", "quer"),
        (8, "cateur", "quer"),
        (8, "atrice", "er"),
        (7, "ateur", "er"),
        (6, "trice", "teur"),
        (5, "ième", ""),
        (7, "teuse", "ter"),
        (6, "teur", "ter"),
        (5, "euse", "eu"),
        (8, "ère", "er"),
        (7, "ive", "if"),
        (4, "folle", "fou"),
        (4, "molle", "mou"),
        (9, "nnelle", "n"),
        (9, "nnel", "n"),
        (4, "ète", "et"),
        (8, "ique", ""),
        (8, "esse", "e"),
        (7, "inage", "in"),
        (9, "isateur", ""),
        (8, "ation", ""),
        (8, "ition", ""),
    )

    DOUBLED_LETTER = re.compile(r"([^\W\d_])\1+")

    def stem(self, word: str) -> str:
        if len(word) > 5 and word[-1] == "x":
            if word[-3:-1] == "au" and word[-4] != "e":
                word = word[:-2] + "l"
            else:
                word = word[:-1]
        if len(word) > 3 and word[-1] == "x":
            word = word[:-1]
        if len(word) > 3 and word[-1] == "s":
            word = word[:-1]

        if len(word) > 6 and word.endswith("ement"):
            word = word[:-4]
            if len(word) > 3 and word.endswith("ive"):
                word = word[:-2] + "f"
            return self._norm(word)

        if len(word) > 9 and word.endswith("isation"):
            word = word[:-7]
            if len(word) > 5 and word.endswith("ual"):
                word = word[:-2] + "el"
            return self._norm(word)

        for min_length, suffix, replacement in self.SUFFIXES:
            if len(word) > min_length and word.endswith(suffix):
                return self._norm(word[:-len(suffix)] + replacement)

        return self._norm(word)

    def _norm(self, word: str) -> str:
        if len(word) > 4:
            word = word.translate(self.ACCENTS)
            word = self.DOUBLED_LETTER.sub(r"\1", word)

        if len(word) > 4 and word.endswith("ie"):
            word = word[:-2]

        if len(word) > 4:
            if word[-1] == "r":
                word = word[:-1]
            if word[-1] == "e":
                word = word[:-1]
            if word[-1] == "e":
                word = word[:-1]
            if len(word) > 1 and word[-1] == word[-2] and word[-1].isalpha():
                word = word[:-1]
        return word


class BulgarianStemmer:
    """Light stemmer for Bulgarian: removes articles and plurals."""

    def stem(self, word: str) -> str:
        if len(word) < 4:
            return word

        if len(word) > 5 and word.endswith("ища"):
            return word[:-3]

        word = self._remove_article(word)
        word = self._remove_plural(word)

        if len(word) > 3:
            if word.endswith("я"):
                word = word[:-1]
            if word.endswith(("а", "о", "е")):
                word = word[:-1]

        # the "е" in "-ен" drops out: "ябълкен" -> "ябълкн"
        if len(word) > 4 and word.endswith("ен"):
            word = word[:-2] + "н"

        if len(word) > 5 and word[-2] == "ъ":
            word = word[:-2] + word[-1]

        return word

    def _remove_article(self, word: str) -> str:
        if len(word) > 6 and word.endswith("ият"):
            return word[:-3]
        if len(word) > 5 and word.endswith(("ът", "то", "те", "та", "ия")):
            return word[:-2]
        if len(word) > 4 and word.endswith("ят"):
            return word[:-2]
        return word

    def _remove_plural(self, word: str) -> str:
        if len(word) > 6:
            if word.endswith("овци"):
                return word[:-3]
            if word.endswith("ове"):
                return word[:-3]
            if word.endswith("еве"):
                return word[:-3] + "й"
        if len(word) > 5:
            if word.endswith("ища"):
                return word[:-3]
            if word.endswith("та"):
                return word[:-2]
            if word.endswith("ци"):
                return word[:-2] + "к"
            if word.endswith("зи"):
                return word[:-2] + "г"
            if word[-3] == "е" and word[-1] == "и":
                return word[:-3] + "я" + word[-2]
        if len(word) > 4:
            if word.endswith("си"):
                return word[:-2] + "х"
            if word.endswith("и"):
                return word[:-1]
        return word


class EnglishMinimalStemFilter(StemFilter):
    """Applies :class:`EnglishMinimalStemmer`."""

    def __init__(self, input: TokenStream):
        super().__init__(input, EnglishMinimalStemmer())


class RussianLightStemFilter(StemFilter):
    """Applies :class:`RussianLightStemmer`."""

    def __init__(self, input: TokenStream):
        super().__init__(input, RussianLightStemmer())


class GermanLightStemFilter(StemFilter):
    """Applies :class:`GermanLightStemmer`."""

    def __init__(self, input: TokenStream):
        super().__init__(input, GermanLightStemmer())


class FrenchLightStemFilter(StemFilter):
    """Applies :class:`FrenchLightStemmer`."""

    def __init__(self, input: TokenStream):
        super().__init__(input, FrenchLightStemmer())


class BulgarianStemFilter(StemFilter):
    """Applies :class:`BulgarianStemmer`."""

    def __init__(self, input: TokenStream):
        super().__init__(input, BulgarianStemmer())


# ---------------------------------------------------------------------------
# Language normalization
# ---------------------------------------------------------------------------


class GermanNormalizationFilter(TokenFilter):
    """Folds German spelling variants.

    "ß" becomes "ss", umlauts lose their dots, and the digraphs "ae",
    "oe" and "ue" collapse to a single vowel ("ue" is kept after "q").
    """

    UMLAUTS = str.maketrans({"ä": "a", "ö": "o", "ü": "u", "ß": "ss"})
    DIGRAPHS = re.compile(r"(?<!q)ue|ae|oe")

    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            text = self.DIGRAPHS.sub(lambda m: m.group()[0], token.text)
            text = text.translate(self.UMLAUTS)
            if text != token.text:
                token = token.clone()
                token.text = text
            yield token


class ArabicNormalizationFilter(TokenFilter):
    """Normalizes Arabic orthography.

    Unifies alef forms, maps alef maksura to yeh and teh marbuta to
    heh, and removes tatweel and diacritics.
    """

    NORMALIZATION = str.maketrans({
        "آ": "ا",  # alef with madda
        "أ": "ا",  # alef with hamza above
        "إ": "ا",  # alef with hamza below
        "ى": "ي",  # alef maksura
        "ة": "ه",  # teh marbuta
    })
    STRIPPED = re.compile("[\\u0640\\u064b-\\u0652]")

    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            text = self.STRIPPED.sub("", token.text).translate(self.NORMALIZATION)
            if text != token.text:
                token = token.clone()
                token.text = text
            yield token


class ArabicStemFilter(SnowballFilter):
    """Stems Arabic tokens with the Snowball Arabic stemmer."""

    def __init__(self, input: TokenStream):
        super().__init__(input, ArabicStemmer())


__all__ = [
    "StemFilter",
    "SnowballFilter",
    "PorterStemFilter",
    "EnglishStemmer",
    "FrenchStemmer",
    "GermanStemmer",
    "RussianStemmer",
    "ArabicStemmer",
    "EnglishMinimalStemmer",
    "RussianLightStemmer",
    "GermanLightStemmer",
    "FrenchLightStemmer",
    "BulgarianStemmer",
    "EnglishMinimalStemFilter",
    "RussianLightStemFilter",
    "GermanLightStemFilter",
    "FrenchLightStemFilter",
    "BulgarianStemFilter",
    "GermanNormalizationFilter",
    "ArabicNormalizationFilter",
    "ArabicStemFilter",
]
