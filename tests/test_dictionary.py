from superscrabble import Dictionary, PrefixOracle, Trie, WordOracle


def test_words_are_normalised():
    d = Dictionary(["hello", " World ", "a", "it's", "naïve", "OK"])
    assert d.words == {"HELLO", "WORLD", "OK"}
    assert d.is_word("Hello")
    assert "world" in d
    assert len(d) == 3


def test_max_length_filter():
    d = Dictionary(["ab", "abcdef"], max_length=5)
    assert d.words == {"AB"}


def test_prefix_and_next_letters():
    d = Dictionary(["CAT", "CAR", "COT"])
    assert d.is_prefix("CA")
    assert d.is_prefix("")
    assert not d.is_prefix("CB")
    assert d.next_letters("C") == {"A", "O"}
    assert d.next_letters("CA") == {"R", "T"}
    assert d.next_letters("CAT") == frozenset()
    assert d.next_letters("X") == frozenset()


def test_dictionary_satisfies_oracle_protocols():
    d = Dictionary(["AB"])
    assert isinstance(d, WordOracle)
    assert isinstance(d, PrefixOracle)


def test_trie_counts_distinct_words():
    trie = Trie(["AB", "AB", "ABC"])
    assert len(trie) == 2
    assert trie.is_word("ABC")
    assert not trie.is_word("A")
    assert trie.node_for("AB").is_terminal
