"""Tests for recipeInstructions normalization."""

from recipe_extractor.instructions import normalize_instructions, split_instruction_text


def test_list_of_strings_keeps_order():
    assert normalize_instructions(["Step one.", "Step two."]) == ["Step one.", "Step two."]


def test_single_string_splits_on_sentences():
    assert normalize_instructions("Mix. Bake. Cool") == ["Mix", "Bake", "Cool"]


def test_single_string_splits_on_lines_then_sentences():
    text = "Preheat oven.\nMix flour. Add eggs.\r\n\n  Bake 20 minutes."
    assert split_instruction_text(text) == [
        "Preheat oven.",
        "Mix flour",
        "Add eggs.",
        "Bake 20 minutes.",
    ]


def test_abbreviations_are_split_too():
    assert normalize_instructions("Preheat to 350 deg. F. then bake.") == [
        "Preheat to 350 deg",
        "F",
        "then bake.",
    ]


def test_how_to_steps_use_text_then_name():
    raw = [
        {"@type": "HowToStep", "text": "Boil water.", "name": "Boil"},
        {"@type": "HowToStep", "name": "Add pasta"},
    ]
    assert normalize_instructions(raw) == ["Boil water.", "Add pasta"]


def test_how_to_section_appends_sub_steps_after_its_name():
    raw = [
        {
            "@type": "HowToSection",
            "name": "Sauce",
            "itemListElement": [
                {"@type": "HowToStep", "text": "Melt butter"},
                {"@type": "HowToStep", "name": "no text here"},
                {"@type": "HowToStep", "text": "Whisk in flour"},
            ],
        },
        "Serve hot",
    ]
    assert normalize_instructions(raw) == ["Sauce", "Melt butter", "Whisk in flour", "Serve hot"]


def test_unknown_elements_are_skipped():
    raw = [42, None, {"url": "https://example.com/step"}, ["nested"], "Stir"]
    assert normalize_instructions(raw) == ["Stir"]


def test_steps_are_cleaned_and_empty_ones_dropped():
    raw = ["", "   ", "<p>Fold in &amp; serve</p>"]
    assert normalize_instructions(raw) == ["Fold in & serve"]


def test_unsupported_shapes_give_no_steps():
    assert normalize_instructions(None) == []
    assert normalize_instructions({"text": "Bake"}) == []
    assert normalize_instructions(12) == []
