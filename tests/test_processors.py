"""Tests for keyword_labels.processors."""

import json
from types import SimpleNamespace

import pytest

from keyword_labels.core.models import ClassifierType, PartsOfSpeech
from keyword_labels.processors.lexicon import LexiconClassifier
from keyword_labels.processors.router import get_classifier
from keyword_labels.processors.stopwords import SetStopwordFilter


class TestLexiconClassifier:
    def test_classify(self):
        classifier = LexiconClassifier({"Fox": ["n", "V"], "raw": ["a"], "the": []})
        assert classifier.classify("fox") == PartsOfSpeech(is_noun=True, is_verb=True)
        assert classifier.classify("raw").is_adjective
        assert not classifier.classify("the").is_content_word
        assert classifier.classify("zebra") == PartsOfSpeech()
        assert len(classifier) == 3

    def test_from_json(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps({"tea": ["n"], "green": ["a", "n"]}), encoding="utf-8")
        classifier = LexiconClassifier.from_json(str(path))
        assert classifier.classify("green").is_adjective
        assert classifier.classify("tea").is_noun

    def test_from_json_not_an_object(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps(["tea"]), encoding="utf-8")
        with pytest.raises(ValueError):
            LexiconClassifier.from_json(str(path))

    def test_from_json_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LexiconClassifier.from_json(str(tmp_path / "missing.json"))


class TestSetStopwordFilter:
    def test_remove_stopwords(self):
        stopword_filter = SetStopwordFilter(["the", "and"])
        assert stopword_filter.is_stopword("the")
        assert stopword_filter.remove_stopwords(["the", "tea", "and", "leaf"]) == ["tea", "leaf"]


class TestGetClassifier:
    def test_lexicon(self, tmp_path):
        path = tmp_path / "lexicon.json"
        path.write_text(json.dumps({"tea": ["n"]}), encoding="utf-8")
        classifier = get_classifier(ClassifierType.LEXICON, str(path))
        assert isinstance(classifier, LexiconClassifier)

    def test_lexicon_requires_path(self):
        with pytest.raises(ValueError):
            get_classifier(ClassifierType.LEXICON)

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            get_classifier("spacy")


class TestWordNetClassifier:
    @pytest.fixture
    def fake_wordnet(self, monkeypatch):
        from keyword_labels.processors import wordnet as wordnet_module

        calls = []
        synsets_by_pos = {
            ("running", "n"): ["running.n.01"],
            ("running", "v"): ["run.v.01"],
            ("fox", "n"): ["fox.n.01"],
            ("raw", "a"): ["raw.a.01"],
        }

        def synsets(word, pos=None):
            calls.append((word, pos))
            return synsets_by_pos.get((word, pos), [])

        fake = SimpleNamespace(NOUN="n", VERB="v", ADJ="a", synsets=synsets)
        monkeypatch.setattr(wordnet_module, "wordnet", fake)
        monkeypatch.setattr(wordnet_module, "ensure_nltk_data", lambda resources, logger=None: None)
        return calls

    def test_parts_of_speech_mapping(self, fake_wordnet):
        from keyword_labels.processors.wordnet import WordNetClassifier

        classifier = WordNetClassifier()
        assert classifier.classify("running") == PartsOfSpeech(is_noun=True, is_verb=True)
        assert classifier.classify("fox") == PartsOfSpeech(is_noun=True)
        assert classifier.classify("raw") == PartsOfSpeech(is_adjective=True)
        assert not classifier.classify("xyzzplk").is_content_word

    def test_results_cached_per_word(self, fake_wordnet):
        from keyword_labels.processors.wordnet import WordNetClassifier

        classifier = WordNetClassifier()
        first = classifier.classify("running")
        assert classifier.classify("running") is first
        assert fake_wordnet == [("running", "n"), ("running", "v"), ("running", "a")]


def _nltk_data_available(path):
    nltk = pytest.importorskip("nltk")
    try:
        nltk.data.find(path)
    except LookupError:
        return False
    return True


class TestNltkBackends:
    def test_wordnet_classifier(self):
        if not _nltk_data_available("corpora/wordnet"):
            pytest.skip("WordNet corpus not installed")
        from keyword_labels.processors.wordnet import WordNetClassifier

        classifier = WordNetClassifier()
        assert classifier.classify("running").is_content_word
        assert classifier.classify("fox").is_noun
        assert not classifier.classify("xyzzplk").is_content_word
        assert isinstance(get_classifier(ClassifierType.WORDNET), WordNetClassifier)

    def test_nltk_stopwords(self):
        if not _nltk_data_available("corpora/stopwords"):
            pytest.skip("NLTK stopwords corpus not installed")
        from keyword_labels.processors.stopwords import NltkStopwordFilter

        stopword_filter = NltkStopwordFilter()
        assert stopword_filter.is_stopword("the")
        assert not stopword_filter.is_stopword("moringa")
