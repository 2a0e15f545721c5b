"""
기반 모듈: 정확한 유리수(ExactRational) 및 bn128 스칼라 필드
==============================================================

**유리수 (Fraction)**:
  QAP 변환의 모든 계수는 fractions.Fraction 으로 표현한다.
  - 항상 기약분수, 분모는 양수
  - 임의 정밀도 정수 위에서 동작하므로 오버플로가 없다
  - 부동소수점 반올림 오차가 전혀 없다

**유한체 FR**:
  bn128 곡선의 스칼라 필드. 유리수 QAP 를 Groth16 setup 이 사용하는
  필드 원소 계수 리스트로 옮길 때(to_fr) 사용한다.

사용 예시:
    >>> from zkqap.field import rational, to_fr
    >>> rational(2, 4)       # Fraction(1, 2)
    >>> to_fr(rational(1, 2)) * 2 == FR(1)   # True
"""

import numbers
from fractions import Fraction

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128

from zkqap.errors import ZeroDenominatorError, UnrepresentableError


# ─────────────────────────────────────────────────────────────────────
# 유리수 (ExactRational)
# ─────────────────────────────────────────────────────────────────────

ZERO = Fraction(0)
ONE = Fraction(1)


def rational(numerator, denominator=1):
    """numerator / denominator 를 기약분수로 만든다.

    Args:
        numerator: 분자 (int 또는 Fraction)
        denominator: 분모 (0 이 아닌 int 또는 Fraction)

    Returns:
        Fraction: 정규화된 유리수

    Raises:
        ZeroDenominatorError: 분모가 0인 경우
    """
    if denominator == 0:
        raise ZeroDenominatorError(f"분모가 0입니다: {numerator}/{denominator}")
    return Fraction(numerator, denominator)


def as_rational(value):
    """정수형 / Fraction 을 Fraction 으로 변환한다. 그 외 타입은 None."""
    if isinstance(value, Fraction):
        return value
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return Fraction(int(value))
    return None


# ─────────────────────────────────────────────────────────────────────
# 유한체 FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    field_modulus = bn128.curve_order


# 곡선 위수 (필드 크기)
CURVE_ORDER = bn128.curve_order


def to_fr(value):
    """유리수를 FR 원소로 옮긴다: num · den⁻¹ (mod p).

    Raises:
        UnrepresentableError: 분모가 p 의 배수라 역원이 없는 경우
    """
    value = Fraction(value)
    if value.denominator % CURVE_ORDER == 0:
        raise UnrepresentableError(f"FR 에서 역원이 없는 분모: {value}")
    return FR(value.numerator) / FR(value.denominator)
