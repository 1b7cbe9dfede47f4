import unicodedata

import pytest

from asciipraline import DEMO_SAMPLE, apply_stage, convert, get_stages, select_stage, walk_stages
from asciipraline.cleaner.clean import RULES, run_rules


SAMPLES = [
    DEMO_SAMPLE,
    "Crème brûlée\r\n  “déjà”  vu…  ",
    "€100 × 2 ÷ 4 = 50°",
    "",
]


def test_seven_stages_in_order():
    stages = get_stages()
    assert len(stages) == 7
    assert [s.ordinal for s in stages] == list(range(7))
    assert all(s.label and s.description for s in stages)


def test_stage_zero_is_identity():
    stages = get_stages()
    for sample in SAMPLES:
        res = apply_stage(0, sample)
        assert res.text == sample
        assert res.description == stages[0].description


def test_stage_one_is_nfd():
    assert apply_stage(1, DEMO_SAMPLE).text == unicodedata.normalize("NFD", DEMO_SAMPLE)


def test_stage_two_substitutes_but_keeps_marks():
    text = apply_stage(2, DEMO_SAMPLE).text
    assert "“" not in text
    assert "°" not in text
    assert " deg " in text
    assert "\u0327" in text  # cedilla still present
    assert "中文" in text


def test_stage_three_strips_marks_only():
    text = apply_stage(3, DEMO_SAMPLE).text
    assert "Francais naive" in text
    assert "中文" in text


def test_last_stage_matches_convert():
    for sample in SAMPLES:
        assert apply_stage(6, sample).text == convert(sample)


def test_final_stages_share_text_but_not_description():
    r4, r5, r6 = (apply_stage(i, DEMO_SAMPLE) for i in (4, 5, 6))
    assert r4.text == r5.text == r6.text
    assert len({r4.description, r5.description, r6.description}) == 3


def test_demo_sample_final_text():
    assert select_stage(6).text == (
        'Francais naive - "Ciao mondo!" - 25 deg ...\nAltri simboli: (c)'
    )


def test_later_stage_is_refinement_of_earlier():
    stages = get_stages()
    for sample in SAMPLES:
        for i in range(len(stages)):
            for j in range(i + 1, len(stages)):
                earlier = stages[i].transform(sample)
                later = run_rules(earlier, RULES[stages[i].depth : stages[j].depth])
                assert later == stages[j].transform(sample)


def test_walk_stages_matches_apply_stage():
    results = walk_stages(DEMO_SAMPLE)
    assert results == [apply_stage(i, DEMO_SAMPLE) for i in range(7)]


def test_select_stage_uses_demo_sample():
    assert select_stage(0).text == DEMO_SAMPLE


@pytest.mark.parametrize("ordinal", [-1, 7])
def test_apply_stage_out_of_range(ordinal):
    with pytest.raises(IndexError):
        apply_stage(ordinal, "x")
