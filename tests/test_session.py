"""End-to-end tests of the calculator session through submit()."""
import logging

import pytest

from imperialcalc.model.state import CalculatorSession, Token


def submit_all(session: CalculatorSession, *tokens: str) -> list[bool]:
    return [session.submit(t) for t in tokens]


@pytest.fixture
def session() -> CalculatorSession:
    return CalculatorSession(fraction_resolution=16)


class TestEvaluation:
    def test_feet_plus_inches(self, session):
        submit_all(session, "2", Token.FEET, Token.PLUS, "3", Token.INCH, Token.EQUALS)
        assert session.current_primary() == "2′ 3″"
        assert session.current_secondary() == "2′ + 3″"
        assert session.millimeter_conversion() == "685.8 mm"
        assert session.sheets_count_display() == ""

    def test_area(self, session):
        submit_all(session, "4", Token.FEET, Token.TIMES, "8", Token.FEET, Token.EQUALS)
        assert session.current_primary() == "32 ft²"
        assert session.millimeter_conversion() == "2.97 m²"
        assert session.sheets_count_display() == "8' x 4': 1"

    def test_result_can_be_chained(self, session):
        submit_all(session, "2", Token.FEET, Token.PLUS, "3", Token.INCH, Token.EQUALS)
        submit_all(session, Token.PLUS, "3", Token.INCH, Token.EQUALS)
        assert session.current_primary() == "2′ 6″"
        assert session.current_secondary() == "2′ 3″ + 3″"

    def test_negative_result_can_be_chained(self, session):
        submit_all(session, "3", Token.INCH, Token.MINUS, "5", Token.INCH, Token.EQUALS)
        assert session.current_primary() == "-2″"
        submit_all(session, Token.PLUS, "4", Token.INCH, Token.EQUALS)
        assert session.current_primary() == "2″"

    def test_division_by_zero_changes_nothing(self, session):
        submit_all(session, "5", Token.FEET, Token.DIVIDE, "0", Token.INCH)
        history_depth = len(session.history)
        assert session.submit(Token.EQUALS) is False
        assert session.current_primary() == "5′ ÷ 0″"
        assert session.current_secondary() == ""
        assert len(session.history) == history_depth

    def test_equals_without_operator_is_ignored(self, session):
        submit_all(session, "5", Token.FEET)
        assert session.submit(Token.EQUALS) is False
        assert session.current_primary() == "5′"


class TestInputRejection:
    def test_second_foot_mark(self, session):
        assert submit_all(session, "5", Token.FEET, Token.FEET) == [True, True, False]
        assert session.current_primary() == "5′"
        assert len(session.history) == 2

    def test_operator_on_empty_line(self, session):
        assert session.submit(Token.PLUS) is False
        assert session.current_primary() == ""

    def test_setting_and_unknown_tokens(self, session, caplog):
        with caplog.at_level(logging.WARNING, logger="imperialcalc"):
            assert session.submit(Token.SETTING) is False
            assert session.submit("diag") is False
        assert "diag" in caplog.text
        assert len(session.history) == 0


class TestUndo:
    def test_undo_reverts_every_accepted_token(self, session):
        tokens = ["1", "2", Token.FEET, "3", Token.INCH]
        assert all(submit_all(session, *tokens))

        for _ in tokens:
            assert session.undo()
        assert session.current_primary() == ""
        assert session.current_secondary() == ""
        assert session.submit(Token.UNDO) is False

    def test_undo_evaluation_in_one_step(self, session):
        submit_all(session, "2", Token.FEET, Token.PLUS, "3", Token.INCH, Token.EQUALS)
        assert session.submit(Token.UNDO)
        assert session.current_primary() == "2′ + 3″"
        assert session.current_secondary() == ""

    def test_undo_restores_structure(self, session):
        submit_all(session, "5", Token.FEET, "3", Token.INCH, Token.UNDO)
        assert session.current_primary() == "5′3"
        # Inch mark is allowed again because it was undone
        assert session.submit(Token.INCH)

    def test_rejected_tokens_are_not_undo_steps(self, session):
        submit_all(session, "5", Token.SLASH, Token.SLASH, Token.FEET)
        assert session.current_primary() == "5/"
        session.submit(Token.UNDO)
        assert session.current_primary() == "5"


class TestClear:
    def test_clear_and_undo(self, session):
        submit_all(session, "4", Token.FEET, Token.TIMES, "8", Token.FEET, Token.EQUALS)
        assert session.submit(Token.CLEAR)
        assert session.current_primary() == ""
        assert session.current_secondary() == ""
        session.submit(Token.UNDO)
        assert session.current_primary() == "32 ft²"
        assert session.current_secondary() == "4′ x 8′"

    def test_clear_on_empty_session_is_not_recorded(self, session):
        assert session.submit(Token.CLEAR) is False
        assert len(session.history) == 0

    def test_reset_drops_history(self, session):
        submit_all(session, "5", Token.FEET)
        session.reset()
        assert session.current_primary() == ""
        assert session.undo() is False
        assert session.fraction_resolution == 16


class TestFractionResolution:
    def test_default_is_sixty_fourths(self):
        assert CalculatorSession().fraction_resolution == 64

    def test_applies_to_later_results_only(self):
        session = CalculatorSession()
        submit_all(session, "1", Token.INCH, Token.DIVIDE, "3", Token.EQUALS)
        assert session.current_primary() == "0 21/64″"

        session.set_fraction_resolution(16)
        assert session.current_primary() == "0 21/64″"

        submit_all(session, Token.CLEAR, "1", Token.INCH, Token.DIVIDE, "3", Token.EQUALS)
        assert session.current_primary() == "0 5/16″"

    @pytest.mark.parametrize("value", [0, 12, 128])
    def test_invalid_values(self, value):
        with pytest.raises(ValueError):
            CalculatorSession().set_fraction_resolution(value)
        with pytest.raises(ValueError):
            CalculatorSession(fraction_resolution=value)
