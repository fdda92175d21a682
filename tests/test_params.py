from coredb.params import Params


def test_new_params_and_add():
    p = Params(1, "1", 1.0)
    out = p.get()
    assert out[0] == 1
    assert out[1] == "1"
    assert out[2] == 1.0

    p.add(["2", "two"], "king", -66)
    out = p.get()
    assert out[:3] == [1, "1", 1.0]
    assert out[3] == "2"
    assert out[4] == "two"
    assert out[5] == "king"
    assert out[6] == -66

    p.add(0.6, 77, [88, 99, 100])
    out = p.get()
    assert out == [1, "1", 1.0, "2", "two", "king", -66, 0.6, 77, 88, 99, 100]


def test_new_params_flattens_slices():
    p2 = Params(1, 2, [3, 4, 5], "Mary", ["Wilson", "Mandy"])
    assert p2.get() == [1, 2, 3, 4, 5, "Mary", "Wilson", "Mandy"]


def test_strings_and_bytes_are_not_spread():
    p = Params("abc", b"xyz")
    assert p.get() == ["abc", b"xyz"]


def test_get_returns_copy_and_len_iter_agree():
    p = Params(1, (2, 3))
    out = p.get()
    out.append(99)
    assert p.get() == [1, 2, 3]
    assert len(p) == 3
    assert list(p) == [1, 2, 3]