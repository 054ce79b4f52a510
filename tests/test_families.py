from lyric_rhymes.families import calculate_complexity, group_into_families
from lyric_rhymes.models import RhymeLink, RhymeUnit
from lyric_rhymes.similarity import EXACT, SLANT


def make_unit(index: int, span: str, tail: str) -> RhymeUnit:
    return RhymeUnit(
        line_index=index,
        global_line_index=index,
        text=span,
        text_span=span,
        char_start=0,
        char_end=len(span),
        phonetic_tail=tail,
        section="Куплет",
    )


def test_groups_by_exact_tail():
    units = [
        make_unit(0, "пол-оскала", "skala"),
        make_unit(1, "молоко", "laka"),
        make_unit(2, "Ла Скала", "skala"),
    ]
    links = [RhymeLink(0, 2, EXACT, 1.0, 2)]
    families = group_into_families(units, links)
    assert len(families) == 1
    family = families[0]
    assert family.phonetic_tail == "skala"
    assert [unit.text_span for unit in family.units] == ["пол-оскала", "Ла Скала"]
    assert family.links == (links[0],)


def test_links_do_not_merge_families():
    units = [
        make_unit(0, "по Ла Скала", "skala"),
        make_unit(1, "пол-оскала", "skala"),
        make_unit(2, "поласкало", "skalo"),
        make_unit(3, "полоскало", "skalo"),
    ]
    links = [
        RhymeLink(0, 1, EXACT, 1.0, 1),
        RhymeLink(1, 2, SLANT, 0.81, 1),
        RhymeLink(2, 3, EXACT, 1.0, 1),
    ]
    families = group_into_families(units, links)
    assert sorted(family.phonetic_tail for family in families) == ["skala", "skalo"]
    for family in families:
        assert len(family.units) == 2
        assert all(link.match_type == EXACT for link in family.links)


def test_singletons_are_discarded():
    units = [make_unit(0, "молоко", "laka"), make_unit(1, "пол-оскала", "skala")]
    assert group_into_families(units, []) == []


def test_pattern_text_prefers_first_of_equal_length():
    units = [make_unit(0, "абвгд", "skala"), make_unit(1, "еёжзи", "skala"), make_unit(2, "кл", "skala")]
    family = group_into_families(units, [])[0]
    assert family.pattern_text == "абвгд"


def test_families_sorted_by_complexity():
    units = [
        make_unit(0, "ka", "ka"),
        make_unit(1, "ka", "ka"),
        make_unit(2, "длинный хвост", "skalaskala"),
        make_unit(3, "длинный хвост", "skalaskala"),
        make_unit(4, "длинный хвост", "skalaskala"),
    ]
    families = group_into_families(units, [])
    assert [family.phonetic_tail for family in families] == ["skalaskala", "ka"]
    assert families[0].complexity >= families[1].complexity


def test_complexity_formula():
    pair = [make_unit(0, "a", "skala"), make_unit(1, "b", "skala")]
    # 1 + floor(5 / 2) * 0.5 = 2
    assert calculate_complexity(pair, []) == 2
    slant = [RhymeLink(0, 1, SLANT, 0.8, 1)]
    assert calculate_complexity(pair, slant) == 3
    trio = pair + [make_unit(2, "c", "skala")]
    assert calculate_complexity(trio, slant) == 4


def test_complexity_rounds_half_up_and_clamps():
    short = [make_unit(0, "a", "ka"), make_unit(1, "b", "ka")]
    # 1 + 1 * 0.5 = 1.5 rounds to 2
    assert calculate_complexity(short, []) == 2
    long_chain = [make_unit(i, "x", "skalaskalaskala") for i in range(4)]
    assert calculate_complexity(long_chain, [RhymeLink(0, 1, SLANT, 0.8, 1)]) == 5
    assert calculate_complexity([], []) == 1
