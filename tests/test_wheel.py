from katabox.wheel import get_price, remaining_letters


def test_price1():
    assert get_price(["BUILDLEV", "EATREALROBOT"], "ERABCDFGHIJKLMNOPQSTUVWXYZ") == 6500


def test_price2():
    assert get_price(["ABS", "ABS", "AAAAAKBA"], "XASBKQDJHMNPTLVUCGEWFORIYZ") == 9500


def test_price3():
    assert (
        get_price(["TDABS", "ARDTBS", "AAAAASDFSDFKBA"], "TXADSQWESBKQDJHMNPTLVUCGEWFORIYZ")
        == 7500
    )


def test_only_first_26_guesses_count():
    answers = ["TDABS", "ARDTBS", "AAAAASDFSDFKBA"]
    guesses = "TXADSQWESBKQDJHMNPTLVUCGEWFORIYZ"
    assert get_price(answers, guesses) == get_price(answers, guesses[:26])


def test_no_matches_earn_nothing():
    assert get_price(["ABS"], "XYZ") == 0


def test_input_answers_are_not_modified():
    answers = ["ABS", "ABS", "AAAAAKBA"]
    get_price(answers, "XASBKQDJHMNPTLVUCGEWFORIYZ")
    assert answers == ["ABS", "ABS", "AAAAAKBA"]


def test_remaining_letters_after_full_alphabet():
    assert remaining_letters(["BUILDLEV"], "ERABCDFGHIJKLMNOPQSTUVWXYZ") == [""]