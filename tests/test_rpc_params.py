import pickle

import pytest

from darkcoin.rpc.params import ABSENT, Param, Signature, is_absent, normalize_params, optional, required
from darkcoin.utils.exceptions import ArgumentOrderError, ErrorCategory, ParameterError


def test_absent_is_distinct_from_falsy_values() -> None:
    for value in (None, "", 0, False, []):
        assert value is not ABSENT
        assert not is_absent(value)
    assert is_absent(ABSENT)
    assert not ABSENT
    assert repr(ABSENT) == "ABSENT"


def test_absent_survives_pickle_as_singleton() -> None:
    assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["addr"],
        ["addr", 1.5, None, "", False],
        [0, 0.0, {"addresses": []}, [1, 2]],
    ],
)
def test_all_present_args_are_returned_unchanged(args) -> None:
    result = normalize_params(len(args), args)
    assert result == args
    # normalizing again is a no-op
    assert normalize_params(len(result), result) == result


def test_zero_declared_params_yields_empty_list() -> None:
    assert normalize_params(0, []) == []


@pytest.mark.parametrize("k", range(0, 5))
def test_absent_suffix_truncates_at_first_marker(k: int) -> None:
    values = ["a", 1, None, True, "e"]
    args = values[:k] + [ABSENT] * (len(values) - k)
    assert normalize_params(len(values), args) == values[:k]


def test_single_trailing_absent_returns_values_before_it() -> None:
    assert normalize_params(3, ["x", None, ABSENT]) == ["x", None]


def test_present_value_after_absent_is_rejected() -> None:
    with pytest.raises(ArgumentOrderError) as err:
        normalize_params(4, ["a", ABSENT, ABSENT, "d"])
    assert err.value.index == 1
    assert err.value.offending_index == 3
    assert err.value.code == "ARGUMENT_ORDER_ERROR"
    assert err.value.category == ErrorCategory.VALIDATION


def test_none_after_absent_counts_as_present() -> None:
    with pytest.raises(ArgumentOrderError):
        normalize_params(2, [ABSENT, None])


def test_argument_order_error_is_a_parameter_error() -> None:
    with pytest.raises(ParameterError):
        normalize_params(2, [ABSENT, 1])


def test_more_args_than_declared_is_rejected() -> None:
    with pytest.raises(ParameterError) as err:
        normalize_params(1, ["a", "b"])
    assert not isinstance(err.value, ArgumentOrderError)
    assert err.value.details == {"declared_count": 1, "given": 2}


SEND = Signature(
    *required("address", "amount"),
    *optional("comment", "comment_to", "subtract_fee_from_amount", "use_is", "use_ps"),
)


def test_signature_with_only_required_values() -> None:
    assert SEND.bind("addr", 0.5) == ["addr", 0.5]
    assert len(SEND) == 7
    assert SEND.required_count == 2


def test_signature_with_all_values_keeps_order() -> None:
    args = ("addr", 0.5, "c", "to", False, True, False)
    params = SEND.bind(*args)
    assert len(params) == 7
    assert params == list(args)


def test_signature_gap_in_optional_suffix_is_rejected() -> None:
    with pytest.raises(ArgumentOrderError) as err:
        SEND.bind("addr", 0.5, "c", ABSENT, True)
    assert err.value.index == 3
    assert err.value.offending_index == 4


def test_signature_rejects_absent_required_slot() -> None:
    with pytest.raises(ParameterError) as err:
        SEND.bind("addr", ABSENT)
    assert "amount" in err.value.message


def test_signature_rejects_too_many_args() -> None:
    with pytest.raises(ParameterError):
        Signature(Param("only")).bind(1, 2)


def test_signature_rejects_required_after_optional() -> None:
    with pytest.raises(ValueError, match="follows optional"):
        Signature(Param("a", required=False), Param("b"))


def test_signature_repr_marks_optional_slots() -> None:
    assert repr(Signature(Param("a"), Param("b", required=False))) == "Signature(a, [b])"
