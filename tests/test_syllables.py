from lyric_rhymes.syllables import count_syllables, get_last_syllables, get_rhyme_tail, split_into_syllables


def test_split_open_syllables():
    assert split_into_syllables("молоко") == ["мо", "ло", "ко"]
    assert split_into_syllables("Скала") == ["ска", "ла"]


def test_consonant_cluster_stays_with_previous_syllable():
    assert split_into_syllables("полоскала") == ["по", "лоска", "ла"]


def test_word_without_vowels_is_one_chunk():
    assert split_into_syllables("брр") == ["брр"]


def test_get_last_syllables():
    assert get_last_syllables("полоскала", 2) == "лоскала"
    assert get_last_syllables("полоскала", 0) == ""


def test_get_rhyme_tail():
    assert get_rhyme_tail("скала") == "а"
    assert get_rhyme_tail("скала", stress_index=2) == "ала"
    assert get_rhyme_tail("брр") == "брр"


def test_count_syllables_reexported():
    assert count_syllables("мяч") == 1


def test_helpers_are_exported_from_package():
    import lyric_rhymes

    assert lyric_rhymes.split_into_syllables("молоко") == ["мо", "ло", "ко"]
    assert lyric_rhymes.get_last_syllables("молоко", 2) == "локо"
    assert lyric_rhymes.get_rhyme_tail("скала") == "а"
