"""
보조 함수: 다항식 접기(fold) 및 행렬 전치
"""

from zkqap.polynomial import Polynomial


def sum_polys(polys):
    """다항식들의 합. 빈 입력이면 [0]."""
    result = Polynomial.zero()
    for poly in polys:
        result = result + poly
    return result


def prod_polys(polys):
    """다항식들의 곱. 빈 입력이면 [1]."""
    result = Polynomial.one()
    for poly in polys:
        result = result * poly
    return result


def transpose(matrix):
    return [list(col) for col in zip(*matrix)]
