from connect_app.data.content import (
    ACTIVITY_TYPES,
    ActivityType,
    SUBJECT_AREAS,
    get_catalog,
    get_icon,
    get_prompt,
    get_questions,
    get_title,
)


def test_mathematics_prompt_mentions_topic():
    prompt = get_prompt("Mathematics", "Fractions")
    assert prompt == (
        "Look at these four mathematical concepts related to Fractions. "
        "Three of them share a common property, but one doesn't fit with the "
        "others. Can you identify which one is different and explain why?"
    )


def test_science_prompt():
    prompt = get_prompt("Science", "Cells")
    assert prompt == (
        "Examine these scientific elements related to Cells. Which one is the "
        "odd one out based on its properties or characteristics?"
    )


def test_other_subjects_use_generic_prompt():
    for subject in ["History", "Music", "Underwater Basket Weaving"]:
        prompt = get_prompt(subject, "Rhythm")
        assert prompt.startswith("Consider these four items related to Rhythm in " + subject + ".")
        assert "doesn't belong" in prompt


def test_prompt_ignores_year_level_and_braces_in_topic():
    assert get_prompt("English", "{poetry}") == (
        "Consider these four items related to {poetry} in English. One of them "
        "doesn't belong with the others. Identify which one and explain your reasoning."
    )


def test_odd_one_out_questions():
    questions = get_questions(ActivityType.odd_one_out, "Mathematics", "Fractions")
    assert len(questions) == 4
    assert questions[0] == "Which item do you think is the odd one out and why?"
    assert questions[3] == "How do these items relate to our current unit on Fractions?"


def test_mystery_visual_questions():
    questions = get_questions(ActivityType.mystery_visual, "Science", "Photosynthesis")
    assert questions == [
        "What do you observe in this visual?",
        "How does this connect to our study of Photosynthesis?",
        "What questions does this visual raise for you?",
        "How might this visual represent a key concept in Science?",
    ]


def test_remaining_types_share_generic_questions():
    for activity_type in [
        ActivityType.weird_fact_or_lie,
        ActivityType.what_if,
        ActivityType.connection_challenge,
    ]:
        questions = get_questions(activity_type, "Geography", "Rivers")
        assert questions[0] == f"What's your initial reaction to this {activity_type.value.lower()}?"
        assert questions[1] == "How does this connect to what we've been learning about Rivers?"
        assert questions[3] == "How might you apply this thinking to solve problems in Geography?"


def test_questions_accept_plain_strings():
    assert get_questions("What If...", "Art", "Colour")[0] == (
        "What's your initial reaction to this what if...?"
    )


def test_title_uses_icon_and_type():
    assert get_title(ActivityType.connection_challenge) == (
        "🔗 Connection Challenge - Which of these doesn't belong?"
    )
    assert get_icon(ActivityType.mystery_visual) == "🔍"


def test_catalog_lists_every_type_once():
    catalog = get_catalog()
    assert [t["type"] for t in catalog["activity_types"]] == [
        "Odd One Out",
        "Mystery Visual",
        "Weird Fact or Lie",
        "What If...",
        "Connection Challenge",
    ]
    assert len(ACTIVITY_TYPES) == 5
    assert catalog["subject_areas"] == SUBJECT_AREAS
