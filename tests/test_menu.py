from enum import Enum
import pytest
from prompter import PreconditionViolation
from prompter.ui.menu import render_numbered, shorthand_labels

COLORS = ["Red", "Blue", "Green"]


class Label:
    def __init__(self, text: str, tag: int):
        self.text = text
        self.tag = tag

    def __str__(self) -> str:
        return self.text


class Size(Enum):
    SMALL = "small"
    LARGE = "large"

    def __str__(self) -> str:
        return self.value


# Numbered menu

def test_choose_by_number(scripted):
    assert scripted("2").prompter.choose("Choose a color", COLORS) == "Blue"


def test_choose_by_text(scripted):
    assert scripted("Green").prompter.choose("Choose a color", COLORS) == "Green"


def test_choose_default_on_empty(scripted):
    s = scripted("")
    assert s.prompter.choose("Choose a color", COLORS, default="Red") == "Red"
    assert s.output == (
        "Choose a color:\n\n"
        "1) Red [Default - Press Enter]\n"
        "2) Blue\n"
        "3) Green\n\n "
    )


def test_choose_rejects_out_of_range_and_unknown(scripted):
    s = scripted("4", "0", "Purple", "green", "", "1")
    assert s.prompter.choose("Choose a color", COLORS) == "Red"
    assert s.reader.consumed == 6


def test_choose_without_colon():
    assert render_numbered("Pick", ["a"], colon=False) == "Pick\n\n1) a\n\n"


def test_choose_number_wins_over_text(scripted):
    s = scripted("1", "20")
    options = [10, 20, 1]
    assert s.prompter.choose("Amount", options) == 10
    # out of range as an index, so matched by its text
    assert s.prompter.choose("Amount", options) == 20


def test_choose_duplicate_text_picks_first(scripted):
    first, second = Label("same", 1), Label("same", 2)
    s = scripted("same", "2")
    assert s.prompter.choose("Pick", [first, second]) is first
    assert s.prompter.choose("Pick", [first, second]) is second


def test_choose_enum_options(scripted):
    s = scripted("large", "")
    assert s.prompter.choose("Size", list(Size)) is Size.LARGE
    assert s.prompter.choose("Size", list(Size), default=Size.SMALL) is Size.SMALL


def test_choose_empty_options_fails_before_io(scripted):
    s = scripted("1")
    with pytest.raises(PreconditionViolation):
        s.prompter.choose("Pick", [])
    assert s.output == ""
    assert s.reader.consumed == 0


# Shorthand menu

def test_shorthand_renders_default_capitalized(scripted):
    s = scripted("")
    assert s.prompter.choose_shorthand("Proceed", ["Yes", "No"], default="Yes") == "Yes"
    assert s.output == "Proceed: (Yes/no) "


@pytest.mark.parametrize("answer,expected", [("n", "No"), ("Y", "Yes"), ("", "Yes"), ("No", "No"), ("nah", "No")])
def test_shorthand_answers(scripted, answer, expected):
    assert scripted(answer).prompter.choose_shorthand("Proceed", ["Yes", "No"], default="Yes") == expected


def test_shorthand_rejects_unknown(scripted):
    s = scripted("q", "n")
    assert s.prompter.choose_shorthand("Proceed", ["Yes", "No"], default="Yes") == "No"
    assert s.output == "Proceed: (Yes/no) " * 2


def test_shorthand_without_default(scripted):
    s = scripted("", "Y")
    assert s.prompter.choose_shorthand("Fruit", ["yes", "No"], colon=False) == "yes"
    assert s.output == "Fruit (yes/No) " * 2


def test_shorthand_non_first_default():
    assert shorthand_labels(["Yes", "no", "Later"], default="no") == ["yes", "No", "later"]


def test_shorthand_exact_text_before_initial(scripted):
    s = scripted("apricot", "ap", "A")
    options = ["apple", "apricot"]
    assert s.prompter.choose_shorthand("Fruit", options) == "apricot"
    assert s.prompter.choose_shorthand("Fruit", options) == "apple"
    assert s.prompter.choose_shorthand("Fruit", options) == "apple"


def test_shorthand_non_string_options(scripted):
    assert scripted("3").prompter.choose_shorthand("Level", [1, 2, 30]) == 30


def test_shorthand_precondition_failures(scripted):
    s = scripted("x")
    with pytest.raises(PreconditionViolation):
        s.prompter.choose_shorthand("Pick", [])
    with pytest.raises(PreconditionViolation):
        s.prompter.choose_shorthand("Pick", ["", "x"])
    assert s.output == ""
