"""
R1CS → QAP 변환 (Lagrange 보간)
=================================

**R1CS (Rank-1 Constraint System)**:
  세 행렬 A, B, C (m 개의 제약 × n 개의 배선) 와 witness w 에 대해
  모든 제약 i 에서 (A_i·w) · (B_i·w) = (C_i·w) 가 성립해야 한다.

**QAP (Quadratic Arithmetic Program)**:
  각 행렬의 열 k 를 점 1..m 에서 보간한 다항식으로 바꾼다.

    A_k(i) = A[i-1][k]   (i = 1..m)

  제약 전체가 하나의 다항식 항등식 A(x)·B(x) - C(x) = H(x)·Z(x) 가 된다.
  여기서 Z(x) = (x-1)(x-2)...(x-m) 은 소거 다항식이다.

**변환 절차**:
  1. Lagrange 기저 L_1..L_m 을 한 번만 만든다.
     L_i(x) = ∏_{j≠i} (x - j) / ∏_{j≠i} (i - j)
  2. A, B, C 각각의 열 k 에 대해 Σ_i L_i(x) · M[i-1][k] 를 계산한다.
     기저 튜플은 세 행렬이 읽기 전용으로 공유한다.

모든 계산은 Fraction 위에서 정확하게 수행된다.

사용 예시:
    >>> qap = R1CS(A, B, C).to_qap()
    >>> qap.a[0].evaluate(1) == A[0][0]   # True
"""

import logging
import math
import numbers
from fractions import Fraction

from zkqap.errors import (
    ShapeMismatchError,
    EmptyCircuitError,
    UnrepresentableError,
    UnsatisfiedWitnessError,
)
from zkqap.field import rational, as_rational, to_fr
from zkqap.polynomial import Polynomial, poly_div
from zkqap.utils import sum_polys, prod_polys

logger = logging.getLogger(__name__)

# 행렬 원소의 기본 비트 상한. None 이면 제한 없음.
MAX_ENTRY_BITS = None

# R1CS(max_entry_bits=...) 를 생략했을 때 MAX_ENTRY_BITS 를 쓰기 위한 표식
_DEFAULT_BITS = object()


# ─────────────────────────────────────────────────────────────────────
# 행렬 원소 → 정수 / 유리수
# ─────────────────────────────────────────────────────────────────────

def lift_entry(value, max_bits=None):
    """행렬 원소를 정수로 옮긴다.

    허용: 정수형 (numbers.Integral, bool 제외), 분모가 1 인 Fraction, 유한한 정수값 float.

    Args:
        value: 행렬 원소
        max_bits: |value| 의 최대 비트 수. None 이면 제한 없음.

    Returns:
        int

    Raises:
        UnrepresentableError: 정수로 옮길 수 없거나 비트 상한을 넘는 경우
    """
    if isinstance(value, bool):
        raise UnrepresentableError(f"bool 은 행렬 원소가 될 수 없습니다: {value!r}")
    if isinstance(value, numbers.Integral):
        n = int(value)
    elif isinstance(value, Fraction) and value.denominator == 1:
        n = value.numerator
    elif isinstance(value, float) and math.isfinite(value) and value.is_integer():
        n = int(value)
    else:
        raise UnrepresentableError(f"정수가 아닌 행렬 원소: {value!r}")
    if max_bits is not None and abs(n).bit_length() > max_bits:
        raise UnrepresentableError(f"행렬 원소 {n} 가 {max_bits} 비트 범위를 넘습니다")
    return n


def _scalar_polynomial(n):
    # 음수는 절댓값으로 만든 유리수를 부호 반전한다
    if n < 0:
        return Polynomial.constant(-rational(-n))
    return Polynomial.constant(rational(n))


def _lift_witness(witness, num_wires):
    if len(witness) != num_wires:
        raise ShapeMismatchError(
            f"witness 길이 {len(witness)} 가 배선 수 {num_wires} 와 다릅니다"
        )
    values = []
    for w in witness:
        v = as_rational(w)
        if v is None:
            raise UnrepresentableError(f"witness 원소는 int 또는 Fraction 이어야 합니다: {w!r}")
        values.append(v)
    return values


def _shape(name, matrix):
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    for idx, row in enumerate(matrix):
        if len(row) != cols:
            raise ShapeMismatchError(
                f"{name} 의 {idx} 행 길이 {len(row)} 가 {cols} 와 다릅니다"
            )
    return rows, cols


def _validate(a, b, c, max_bits):
    shapes = {name: _shape(name, m) for name, m in (("A", a), ("B", b), ("C", c))}
    if len(set(shapes.values())) != 1:
        raise ShapeMismatchError(f"A, B, C 의 크기가 다릅니다: {shapes}")
    rows, cols = shapes["A"]
    if rows == 0:
        raise EmptyCircuitError("제약이 하나도 없습니다")
    if cols == 0:
        raise EmptyCircuitError("배선이 하나도 없습니다")
    return tuple(
        tuple(tuple(lift_entry(v, max_bits) for v in row) for row in m)
        for m in (a, b, c)
    )


# ─────────────────────────────────────────────────────────────────────
# Lagrange 기저 및 보간
# ─────────────────────────────────────────────────────────────────────

def lagrange_basis(m):
    """점 1..m 위의 Lagrange 기저 다항식 L_1..L_m.

    L_i(i) = 1, L_i(j) = 0 (j ≠ i). 각 L_i 의 차수는 m - 1.

    Args:
        m: 보간점 개수 (제약 수)

    Returns:
        tuple[Polynomial]: 길이 m

    Raises:
        EmptyCircuitError: m < 1
    """
    if m < 1:
        raise EmptyCircuitError("보간점이 하나도 없습니다")
    basis = []
    for i in range(1, m + 1):
        numerator = Polynomial.one()
        div = 1
        for j in range(1, m + 1):
            if j == i:
                continue
            numerator = numerator * Polynomial.linear_root(j)
            div *= i - j
        if div < 0:
            reciprocal = -rational(1, -div)
        else:
            reciprocal = rational(1, div)
        basis.append(numerator * Polynomial.constant(reciprocal))
    return tuple(basis)


def lagrange_interp(values):
    """점 1..len(values) 에서 values 를 지나는 다항식."""
    points = [as_rational(v) for v in values]
    if any(p is None for p in points):
        raise UnrepresentableError(f"보간 값은 int 또는 Fraction 이어야 합니다: {values!r}")
    basis = lagrange_basis(len(points))
    return sum_polys(L * v for L, v in zip(basis, points))


def vanishing_polynomial(m):
    """소거 다항식 Z(x) = (x-1)(x-2)...(x-m)."""
    return prod_polys(Polynomial.linear_root(i) for i in range(1, m + 1))


def project_matrix(matrix, basis):
    """행렬의 각 열을 기저 위의 선형결합 다항식으로 바꾼다.

    column k → Σ_i basis[i] · matrix[i][k]

    Args:
        matrix: 정수 행렬 (m × n)
        basis: lagrange_basis(m) 결과

    Returns:
        tuple[Polynomial]: 길이 n

    Raises:
        ShapeMismatchError: 행 길이가 제각각이거나 행 수가 기저 수와 다른 경우
        EmptyCircuitError: 배선(열)이 없는 경우
        UnrepresentableError: 정수로 옮길 수 없는 원소
    """
    rows, cols = _shape("matrix", matrix)
    if rows != len(basis):
        raise ShapeMismatchError(
            f"행 수 {rows} 와 기저 다항식 수 {len(basis)} 가 다릅니다"
        )
    if cols == 0:
        raise EmptyCircuitError("배선이 하나도 없습니다")
    matrix = [[lift_entry(v) for v in row] for row in matrix]
    polys = []
    for k in range(cols):
        poly = Polynomial.zero()
        for L, row in zip(basis, matrix):
            poly = poly + L * _scalar_polynomial(row[k])
        polys.append(poly)
    return tuple(polys)


def _dot(row, witness):
    return sum((Fraction(v) * w for v, w in zip(row, witness)), Fraction(0))


# ─────────────────────────────────────────────────────────────────────
# R1CS / QAP
# ─────────────────────────────────────────────────────────────────────

class R1CS:
    """세 제약 행렬 (A, B, C).

    생성 시 크기와 원소를 검증하며, 행렬은 정수 튜플로 고정된다.

    Args:
        a, b, c: 정수 행렬 (m × n)
        max_entry_bits: 원소의 최대 비트 수. 생략하면 MAX_ENTRY_BITS,
                        None 이면 이번 호출에 한해 제한 없음.

    Raises:
        ShapeMismatchError: 행 길이가 제각각이거나 A, B, C 크기가 다른 경우
        EmptyCircuitError: 제약 또는 배선이 없는 경우
        UnrepresentableError: 정수로 옮길 수 없는 원소
    """

    def __init__(self, a, b, c, max_entry_bits=_DEFAULT_BITS):
        if max_entry_bits is _DEFAULT_BITS:
            max_entry_bits = MAX_ENTRY_BITS
        self.a, self.b, self.c = _validate(a, b, c, max_entry_bits)

    @property
    def num_constraints(self):
        return len(self.a)

    @property
    def num_wires(self):
        return len(self.a[0])

    def is_satisfied(self, witness):
        """모든 제약에서 (A_i·w)(B_i·w) == (C_i·w) 인지 확인한다."""
        w = _lift_witness(witness, self.num_wires)
        return all(
            _dot(a_row, w) * _dot(b_row, w) == _dot(c_row, w)
            for a_row, b_row, c_row in zip(self.a, self.b, self.c)
        )

    def to_qap(self):
        """Lagrange 보간으로 QAP 를 만든다."""
        m = self.num_constraints
        logger.debug("building Lagrange basis for %d constraints", m)
        basis = lagrange_basis(m)
        logger.debug("projecting %d wires for A, B, C", self.num_wires)
        return QAP(
            project_matrix(self.a, basis),
            project_matrix(self.b, basis),
            project_matrix(self.c, basis),
        )

    def __repr__(self):
        return f"R1CS(constraints={self.num_constraints}, wires={self.num_wires})"


class QAP:
    """배선별 다항식 (A_k, B_k, C_k) 의 세 시퀀스.

    a[k](i) == R1CS.a[i-1][k] 가 i = 1..m 에 대해 성립한다.

    Raises:
        ShapeMismatchError: a, b, c 의 배선 수나 다항식 길이가 서로 다른 경우
        EmptyCircuitError: 배선이 없는 경우
    """

    def __init__(self, a, b, c):
        self.a = tuple(a)
        self.b = tuple(b)
        self.c = tuple(c)
        if not len(self.a) == len(self.b) == len(self.c):
            raise ShapeMismatchError(
                f"a, b, c 의 배선 수가 다릅니다: {len(self.a)}, {len(self.b)}, {len(self.c)}"
            )
        if not self.a:
            raise EmptyCircuitError("배선이 하나도 없습니다")
        polys = self.a + self.b + self.c
        if not all(isinstance(p, Polynomial) for p in polys):
            raise TypeError("QAP 의 원소는 Polynomial 이어야 합니다")
        if len({len(p) for p in polys}) != 1:
            raise ShapeMismatchError("QAP 다항식의 길이(제약 수)가 서로 다릅니다")

    @property
    def num_wires(self):
        return len(self.a)

    @property
    def num_constraints(self):
        return len(self.a[0])

    @property
    def z(self):
        """소거 다항식 Z(x)."""
        return vanishing_polynomial(self.num_constraints)

    def combine(self, witness):
        """witness 로 배선 다항식을 합친다: (Σ w_k·A_k, Σ w_k·B_k, Σ w_k·C_k)."""
        w = _lift_witness(witness, self.num_wires)
        return tuple(
            sum_polys(poly * wk for poly, wk in zip(polys, w))
            for polys in (self.a, self.b, self.c)
        )

    def solution_polynomial(self, witness):
        """A(x)·B(x) - C(x)."""
        a, b, c = self.combine(witness)
        return a * b - c

    def divisor_polynomial(self, witness):
        """H(x) = (A(x)·B(x) - C(x)) / Z(x).

        Raises:
            UnsatisfiedWitnessError: 나머지가 0 이 아닌 경우 (제약 불만족)
        """
        quotient, remainder = poly_div(self.solution_polynomial(witness), self.z)
        if not remainder.is_zero():
            raise UnsatisfiedWitnessError(
                "A(x)·B(x) - C(x) 가 Z(x) 로 나누어 떨어지지 않습니다 (제약 불만족)"
            )
        return quotient

    def to_field(self):
        """계수를 FR 로 옮긴 (Ax, Bx, Cx, Zx) 리스트를 반환한다."""
        def lift(poly):
            return [to_fr(coeff) for coeff in poly]
        return (
            [lift(p) for p in self.a],
            [lift(p) for p in self.b],
            [lift(p) for p in self.c],
            lift(self.z),
        )

    def __eq__(self, other):
        if not isinstance(other, QAP):
            return NotImplemented
        return (self.a, self.b, self.c) == (other.a, other.b, other.c)

    def __hash__(self):
        return hash((self.a, self.b, self.c))

    def __repr__(self):
        return f"QAP(constraints={self.num_constraints}, wires={self.num_wires})"


def r1cs_to_qap(A, B, C):
    return R1CS(A, B, C).to_qap()
