import pytest

from ftprintf.spec import Arguments, FormatSpec, Length, parse_spec


def test_defaults_when_no_options():
    spec, pos = parse_spec("d", 0, Arguments())
    assert spec == FormatSpec()
    assert spec.precision == -1
    assert pos == 0


def test_minus_cancels_zero():
    spec, pos = parse_spec("0-5d", 0, Arguments())
    assert spec.minus is True
    assert spec.zero is False
    assert spec.width == 5
    assert "0-5d"[pos] == "d"


def test_zero_ignored_after_minus():
    spec, _ = parse_spec("-0d", 0, Arguments())
    assert spec.minus is True
    assert spec.zero is False


def test_plus_overrides_space():
    spec, _ = parse_spec(" +d", 0, Arguments())
    assert spec.plus is True
    assert spec.space is False
    spec, _ = parse_spec("+ d", 0, Arguments())
    assert spec.plus is True
    assert spec.space is False


def test_hash_and_space_flags():
    spec, _ = parse_spec("# x", 0, Arguments())
    assert spec.hash is True
    assert spec.space is True


def test_width_and_precision_digits():
    spec, pos = parse_spec("10.5s", 0, Arguments())
    assert spec.width == 10
    assert spec.precision == 5
    assert "10.5s"[pos] == "s"


def test_dot_alone_means_zero_precision():
    spec, _ = parse_spec(".d", 0, Arguments())
    assert spec.precision == 0


def test_star_width_and_precision_consume_arguments():
    args = Arguments([7, 3, "rest"])
    spec, pos = parse_spec("*.*d", 0, args)
    assert spec.width == 7
    assert spec.precision == 3
    assert args.next() == "rest"
    assert "*.*d"[pos] == "d"


def test_negative_star_width_sets_minus():
    spec, _ = parse_spec("*d", 0, Arguments([-8]))
    assert spec.width == 8
    assert spec.minus is True


def test_negative_star_precision_means_none():
    spec, _ = parse_spec(".*d", 0, Arguments([-4]))
    assert spec.precision == -1


def test_star_requires_int():
    with pytest.raises(TypeError):
        parse_spec("*d", 0, Arguments(["wide"]))


def test_star_without_argument_raises():
    with pytest.raises(IndexError):
        parse_spec("*d", 0, Arguments())


@pytest.mark.parametrize(
    "text, length",
    [
        ("hhd", Length.HH),
        ("hd", Length.H),
        ("ld", Length.L),
        ("lld", Length.LL),
        ("jd", Length.J),
        ("zd", Length.Z),
        ("td", Length.T),
        ("d", Length.NONE),
    ],
)
def test_length_modifiers(text, length):
    spec, pos = parse_spec(text, 0, Arguments())
    assert spec.length is length
    assert text[pos] == "d"


def test_two_char_length_then_one_char():
    spec, pos = parse_spec("hhld", 0, Arguments())
    assert spec.length is Length.L
    assert "hhld"[pos] == "d"


def test_parse_from_middle_of_string():
    fmt = "abc%-3d"
    spec, pos = parse_spec(fmt, 4, Arguments())
    assert spec.minus is True
    assert spec.width == 3
    assert fmt[pos] == "d"


def test_parse_at_end_of_string():
    spec, pos = parse_spec("%-", 1, Arguments())
    assert spec.minus is True
    assert pos == 2


def test_arguments_next_in_order_and_exhaustion():
    args = Arguments(["a", "b"])
    assert len(args) == 2
    assert args.next() == "a"
    assert args.next() == "b"
    assert len(args) == 0
    with pytest.raises(IndexError):
        args.next()