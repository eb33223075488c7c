"""Tests for casing helpers."""

from meshview.formatting.text import split_words, start_case, to_class_name


class TestStartCase:
    """Test title casing."""
    
    def test_single_word(self):
        assert start_case("daemonset") == "Daemonset"
    
    def test_separators_and_case_boundaries(self):
        assert start_case("replication controller") == "Replication Controller"
        assert start_case("replicaSet") == "Replica Set"
        assert start_case("stateful_set") == "Stateful Set"
    
    def test_split_words(self):
        assert split_words("replicaSet_v2") == ["replica", "Set", "v", "2"]


class TestToClassName:
    """Test css class name conversion."""
    
    def test_empty(self):
        assert to_class_name("") == ""
        assert to_class_name(None) == ""
    
    def test_words_joined_with_underscore(self):
        assert to_class_name("Foo Bar") == "foo_bar"
        assert to_class_name("statefulSet") == "stateful_set"
