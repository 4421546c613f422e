import pytest

from unc_token.core.amounts import UncToken, parse_token_amount
from unc_token.core.constants import ONE_MILLIUNC, ONE_UNC, U128_MAX
from unc_token.core.exc import AmountDomainError, AmountOverflowError


# -----------------------------
# Construction & domain
# -----------------------------

def test_default_is_zero():
    print("[default] UncToken() -> zero count")
    assert UncToken() == UncToken.zero() == UncToken.from_yoctounc(0)
    assert UncToken().is_zero()


@pytest.mark.parametrize(
    "call,name",
    [
        (lambda: UncToken(-1), "UncToken(-1)"),
        (lambda: UncToken(1.5), "UncToken(1.5)"),
        (lambda: UncToken(True), "UncToken(True)"),
        (lambda: UncToken("10"), "UncToken('10')"),
        (lambda: UncToken.from_unc(-1), "from_unc(-1)"),
    ],
)
def test_invalid_counts_rejected(call, name):
    print(f"[domain] {name} -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        call()


def test_count_above_u128_rejected():
    print("[domain] U128_MAX + 1 -> expect AmountOverflowError")
    with pytest.raises(AmountOverflowError):
        UncToken(U128_MAX + 1)
    assert UncToken(U128_MAX).as_yoctounc() == U128_MAX


def test_scaled_constructors_agree():
    print("[constructors] 1 UNC == 1000 mUNC == 10^24 yUNC")
    one = UncToken.from_yoctounc(10 ** 24)
    assert one == UncToken.from_unc(1)
    assert one == UncToken.from_milliunc(1000)
    assert UncToken.from_milliunc(1) == UncToken.from_yoctounc(10 ** 21)


def test_scaled_constructors_overflow():
    max_unc = U128_MAX // ONE_UNC
    max_milli = U128_MAX // ONE_MILLIUNC
    print(f"[constructors-overflow] max UNC={max_unc}, max mUNC={max_milli}")
    assert UncToken.from_unc(max_unc).as_unc() == max_unc
    assert UncToken.from_milliunc(max_milli).as_milliunc() == max_milli
    with pytest.raises(AmountOverflowError):
        UncToken.from_unc(max_unc + 1)
    with pytest.raises(AmountOverflowError):
        UncToken.from_milliunc(max_milli + 1)
    assert UncToken.checked_from_unc(max_unc + 1) is None
    assert UncToken.checked_from_milliunc(max_milli + 1) is None
    assert UncToken.checked_from_unc(2) == UncToken.from_unc(2)
    assert UncToken.checked_from_milliunc(2) == UncToken.from_milliunc(2)


# -----------------------------
# Accessors & predicates
# -----------------------------

def test_accessors_truncate():
    print("[accessors] 1.999999 UNC -> as_unc=1, as_milliunc=1999")
    t = UncToken.from_yoctounc(2 * ONE_UNC - 1)
    assert t.as_unc() == 1
    assert t.as_milliunc() == 1999
    assert t.as_yoctounc() == 2 * ONE_UNC - 1
    assert UncToken.from_yoctounc(10 ** 21).as_milliunc() == 1
    assert UncToken.from_yoctounc(10).as_yoctounc() == 10


def test_is_zero():
    assert UncToken.from_yoctounc(0).is_zero()
    assert not UncToken.from_yoctounc(1).is_zero()


def test_ordering_hash_and_immutability():
    print("[value semantics] ordering follows count; frozen")
    a, b = UncToken(1), UncToken(2)
    assert a < b and b > a and a <= UncToken(1)
    assert sorted([b, a]) == [a, b]
    assert len({UncToken(5), UncToken(5)}) == 1
    with pytest.raises(AttributeError):
        a.yocto = 3  # type: ignore[misc]


# -----------------------------
# Checked arithmetic
# -----------------------------

def test_checked_add():
    tokens = UncToken.from_yoctounc(U128_MAX - 3)
    assert tokens.checked_add(UncToken.from_yoctounc(3)) == UncToken.from_yoctounc(U128_MAX)
    assert tokens.checked_add(UncToken.from_yoctounc(4)) is None


def test_checked_sub():
    tokens = UncToken.from_yoctounc(3)
    assert tokens.checked_sub(UncToken.from_yoctounc(1)) == UncToken.from_yoctounc(2)
    assert tokens.checked_sub(UncToken.from_yoctounc(3)) == UncToken.zero()
    assert tokens.checked_sub(UncToken.from_yoctounc(4)) is None


def test_checked_mul():
    tokens = UncToken.from_yoctounc(U128_MAX // 10)
    assert tokens.checked_mul(10) == UncToken.from_yoctounc(U128_MAX // 10 * 10)
    assert tokens.checked_mul(11) is None
    assert tokens.checked_mul(0) == UncToken.zero()


def test_checked_div():
    tokens = UncToken.from_yoctounc(10)
    assert tokens.checked_div(2) == UncToken.from_yoctounc(5)
    assert tokens.checked_div(11) == UncToken.from_yoctounc(0)
    assert tokens.checked_div(0) is None


@pytest.mark.parametrize(
    "a,b",
    [
        (0, 0),
        (1, U128_MAX - 1),
        (1, U128_MAX),
        (U128_MAX, U128_MAX),
        (ONE_UNC, 7),
        (2 ** 127, 2 ** 127),
        (2 ** 127, 2 ** 127 - 1),
    ],
)
def test_checked_laws(a, b):
    print(f"[checked-laws] a={a}, b={b}")
    ta, tb = UncToken(a), UncToken(b)
    add = ta.checked_add(tb)
    assert add == (UncToken(a + b) if a + b <= U128_MAX else None)
    sub = ta.checked_sub(tb)
    assert sub == (UncToken(a - b) if a >= b else None)
    mul = ta.checked_mul(b)
    assert mul == (UncToken(a * b) if a * b <= U128_MAX else None)


# -----------------------------
# Saturating arithmetic
# -----------------------------

def test_saturating_add(max_token):
    tokens = UncToken.from_yoctounc(100)
    one = UncToken.from_yoctounc(1)
    assert tokens.saturating_add(one) == UncToken.from_yoctounc(101)
    assert max_token.saturating_add(one) == max_token


def test_saturating_sub():
    tokens = UncToken.from_yoctounc(100)
    one = UncToken.from_yoctounc(1)
    assert tokens.saturating_sub(one) == UncToken.from_yoctounc(99)
    assert UncToken.zero().saturating_sub(one) == UncToken.zero()


def test_saturating_mul(max_token):
    tokens = UncToken.from_yoctounc(2)
    assert tokens.saturating_mul(10) == UncToken.from_yoctounc(20)
    assert tokens.saturating_mul(U128_MAX) == max_token


def test_saturating_div():
    tokens = UncToken.from_yoctounc(10)
    assert tokens.saturating_div(2) == UncToken.from_yoctounc(5)
    assert tokens.saturating_div(20) == UncToken.from_yoctounc(0)


@pytest.mark.parametrize("x", [0, 1, ONE_UNC, U128_MAX])
def test_division_by_zero_policies_differ(x):
    print(f"[div-by-zero] x={x}: checked -> None, saturating -> 0")
    t = UncToken(x)
    assert t.checked_div(0) is None
    assert t.saturating_div(0) == UncToken.zero()


@pytest.mark.parametrize("a", [0, 1, ONE_UNC, U128_MAX - 1, U128_MAX])
@pytest.mark.parametrize("b", [0, 1, 2, U128_MAX])
def test_saturating_results_stay_in_domain(a, b):
    ta, tb = UncToken(a), UncToken(b)
    for result in (ta.saturating_add(tb), ta.saturating_sub(tb), ta.saturating_mul(b)):
        assert 0 <= result.as_yoctounc() <= U128_MAX


# -----------------------------
# Operand / scalar guards
# -----------------------------

@pytest.mark.parametrize(
    "call,name",
    [
        (lambda t: t.checked_add(5), "checked_add(int)"),
        (lambda t: t.saturating_sub(None), "saturating_sub(None)"),
        (lambda t: t.checked_mul(-1), "checked_mul(-1)"),
        (lambda t: t.saturating_mul(U128_MAX + 1), "saturating_mul(>u128)"),
        (lambda t: t.checked_div(1.0), "checked_div(float)"),
        (lambda t: t.saturating_div(True), "saturating_div(bool)"),
    ],
)
def test_bad_operands_rejected(call, name):
    print(f"[guards] {name} -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        call(UncToken(10))


# -----------------------------
# Parsing entry points
# -----------------------------

def test_from_str_entry_points():
    assert UncToken.from_str("0.123456 unc") == UncToken.from_yoctounc(123456 * 10 ** 18)
    assert UncToken.from_str("123456 YN") == UncToken.from_yoctounc(123456)
    assert parse_token_amount("11.123456 unc") == UncToken.from_yoctounc(11123456000000000000000000)


def test_str_uses_display_format():
    assert str(UncToken.from_unc(1)) == "1.00 UNC"
    assert repr(UncToken(7)) == "UncToken(yocto=7)"
