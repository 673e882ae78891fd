from strength_check.charset import CharacterClassPresence, classify


def test_empty_string_has_no_classes():
    assert classify("") == CharacterClassPresence()
    assert classify("").alphabet_size == 0


def test_detects_each_class():
    p = classify("aB3$")
    assert p.has_lower and p.has_upper and p.has_digit and p.has_symbol
    assert p.alphabet_size == 26 + 26 + 10 + 33


def test_lowercase_only():
    p = classify("hello")
    assert p == CharacterClassPresence(has_lower=True)
    assert p.alphabet_size == 26


def test_space_and_underscore_count_as_symbols():
    assert classify(" ").has_symbol
    assert classify("_").has_symbol


def test_non_ascii_letters_and_digits_are_symbols():
    # only ASCII letters and digits are recognised as such
    p = classify("é٣")
    assert p.has_symbol
    assert not p.has_lower
    assert not p.has_digit
