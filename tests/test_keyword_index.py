"""키워드 연관 인덱스 테스트"""
from exercise_catalog.services import KeywordIndex, related_terms


def test_forward_and_reverse_lookup_for_biceps():
    assert related_terms("bíceps") == [
        "rosca direta",
        "rosca alternada",
        "rosca martelo",
        "rosca scott",
        "rosca concentrada",
        "rosca",
        "tríceps",
        "martelo",
        "francesa",
        "testa",
    ]


def test_query_itself_is_excluded():
    for query in ["bíceps", "BÍCEPS", "biceps"]:
        terms = related_terms(query)
        assert "bíceps" not in terms
        assert terms[0] == "rosca direta"


def test_reverse_lookup_adds_key():
    terms = related_terms("rosca")
    assert "rosca" not in terms
    assert "braços" in terms
    assert "bíceps" in terms


def test_value_lookup_keeps_insertion_order():
    assert related_terms("supino")[:5] == ["crucifixo", "crossover", "flexão", "peck deck", "fly"]


def test_limit():
    assert len(related_terms("supino")) == 10
    assert len(related_terms("supino", limit=3)) == 3


def test_unknown_and_empty_query():
    assert related_terms("zumba") == []
    assert related_terms("") == []
    assert related_terms("   ") == []


def test_custom_table():
    index = KeywordIndex({"cardio": ("corrida", "bike")})
    assert index.related_terms("cardio") == ["corrida", "bike"]
    assert index.related_terms("bike") == ["corrida", "cardio"]
