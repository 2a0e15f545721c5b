"""
zkqap — 정확한 유리수 다항식 연산과 R1CS → QAP 변환
=====================================================

사용 예시:
    >>> from zkqap import R1CS
    >>> qap = R1CS(A, B, C).to_qap()
    >>> H = qap.divisor_polynomial(witness)
"""

from zkqap.errors import (
    ZkqapError,
    ZeroDenominatorError,
    ShapeMismatchError,
    EmptyCircuitError,
    UnrepresentableError,
    UnsatisfiedWitnessError,
)
from zkqap.field import FR, CURVE_ORDER, ZERO, ONE, rational, to_fr
from zkqap.polynomial import Polynomial, add, sub, mul, equal, degree, poly_div
from zkqap.utils import sum_polys, prod_polys, transpose
from zkqap.r1cs import (
    R1CS,
    QAP,
    r1cs_to_qap,
    lagrange_basis,
    lagrange_interp,
    vanishing_polynomial,
    project_matrix,
    lift_entry,
)
