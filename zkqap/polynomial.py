"""
다항식(Polynomial) 모듈: 유리수 계수 밀집(dense) 다항식
=========================================================

R1CS → QAP 변환에서 사용되는 모든 다항식 연산을 제공한다.

**Polynomial 클래스**:
  계수 표현 기반 다항식. p(x) = c₀ + c₁·x + c₂·x² + ...
  계수는 fractions.Fraction 이며 변경 불가능한(immutable) 튜플로 저장된다.
  - 영 다항식은 [0] (차수 0) 으로 표현한다. 계수열은 절대 비어 있지 않다.
  - 차수 = 계수 개수 - 1
  - 동등 비교는 계수열을 그대로 비교한다. 끝의 0 을 잘라내지 않으므로
    [1, 0] 과 [1] 은 서로 다르다. 정규화가 필요하면 trimmed() 를 쓴다.

**뺄셈의 비대칭성**:
  a - b 에서 길이가 다르면 긴 쪽의 남는 항을 복사한다.
  a 가 더 길면 그대로, b 가 더 길면 부호를 반전하여 복사한다 (-b 의 남는 항).

**다항식 나눗셈 (poly_div)**:
  몫 다항식 H(x) = (A(x)·B(x) - C(x)) / Z(x) 계산에 사용한다.

사용 예시:
    >>> from fractions import Fraction
    >>> p = Polynomial([1, Fraction(1, 2)])   # 1 + x/2
    >>> q = Polynomial([0, 1])                # x
    >>> (p * q).coeffs                        # (0, 1, 1/2)
    >>> p.evaluate(2)                         # Fraction(2, 1)
"""

from zkqap.field import ZERO, ONE, as_rational


def _coeff(value):
    c = as_rational(value)
    if c is None:
        raise TypeError(f"다항식 계수는 int 또는 Fraction 이어야 합니다: {value!r}")
    return c


# ─────────────────────────────────────────────────────────────────────
# Polynomial 클래스
# ─────────────────────────────────────────────────────────────────────

class Polynomial:
    """유리수 위의 밀집 다항식.

    계수 리스트로 표현: coeffs = (c₀, c₁, c₂, ...) → c₀ + c₁x + c₂x² + ...

    QAP 에서의 역할:
    - Lagrange 기저 다항식 L_i(x): 제약 i 에서 1, 다른 제약에서 0
    - 배선 다항식 A_k(x), B_k(x), C_k(x): 행렬 열 k 를 보간한 결과
    - 소거 다항식 Z(x) 와 몫 다항식 H(x)

    예시:
        >>> p = Polynomial([1, 2])  # 1 + 2x
        >>> q = Polynomial([3, 4])  # 3 + 4x
        >>> r = p + q               # 4 + 6x
        >>> r = p * q               # 3 + 10x + 8x²
    """

    def __init__(self, coeffs=None):
        """다항식 생성.

        Args:
            coeffs: int / Fraction 의 시퀀스 [c₀, c₁, ...].
                    None 이면 영 다항식 [0] 을 생성한다.

        Raises:
            ValueError: 계수열이 비어 있는 경우
            TypeError: int / Fraction 이 아닌 계수 (float 포함)
        """
        if coeffs is None:
            self._coeffs = (ZERO,)
            return
        coeffs = tuple(_coeff(c) for c in coeffs)
        if not coeffs:
            raise ValueError("다항식의 계수열은 비어 있을 수 없습니다")
        self._coeffs = coeffs

    @property
    def coeffs(self):
        """계수 튜플 (낮은 차수부터)."""
        return self._coeffs

    @property
    def degree(self):
        """다항식의 차수 = 계수 개수 - 1. 끝의 0 도 차수에 포함된다."""
        return len(self._coeffs) - 1

    def is_zero(self):
        """모든 계수가 0 인지 확인."""
        return all(c == ZERO for c in self._coeffs)

    def trimmed(self):
        """최고차 계수가 0인 항을 제거한 다항식 (길이는 최소 1).

        예: [1, 2, 0, 0] → [1, 2],  [0, 0] → [0]
        """
        end = len(self._coeffs)
        while end > 1 and self._coeffs[end - 1] == ZERO:
            end -= 1
        if end == len(self._coeffs):
            return self
        return Polynomial(self._coeffs[:end])

    def evaluate(self, point):
        """다항식을 주어진 점에서 평가한다 (Horner's method).

        Args:
            point: int 또는 Fraction

        Returns:
            Fraction: p(point)

        예시:
            >>> Polynomial([1, 2, 3]).evaluate(2)  # 1 + 4 + 12 = 17
        """
        x = _coeff(point)
        result = ZERO
        for coeff in reversed(self._coeffs):
            result = result * x + coeff
        return result

    def __add__(self, other):
        """다항식 덧셈: p(x) + q(x)."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = [a + b for a, b in zip(self._coeffs, other._coeffs)]
        longer = self if len(self) > len(other) else other
        result.extend(longer._coeffs[len(result):])
        return Polynomial(result)

    def __sub__(self, other):
        """다항식 뺄셈: p(x) - q(x).

        q 가 더 길면 q 의 남는 항은 부호를 반전해서 붙인다.
        """
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = [a - b for a, b in zip(self._coeffs, other._coeffs)]
        if len(self) > len(other):
            result.extend(self._coeffs[len(result):])
        else:
            result.extend(-c for c in other._coeffs[len(result):])
        return Polynomial(result)

    def __neg__(self):
        """다항식 부호 반전: -p(x)."""
        return Polynomial([-c for c in self._coeffs])

    def __mul__(self, other):
        """다항식 곱셈: p(x) · q(x) 또는 스칼라곱.

        다항식 × 다항식: O(n·m) 나이브 곱셈 (convolution)
        다항식 × 스칼라: 차수 0 다항식과의 곱과 같다
        """
        if not isinstance(other, Polynomial):
            scalar = as_rational(other)
            if scalar is None:
                return NotImplemented
            return Polynomial([c * scalar for c in self._coeffs])
        result = [ZERO] * (len(self) + len(other) - 1)
        for i, a in enumerate(self._coeffs):
            for j, b in enumerate(other._coeffs):
                result[i + j] += a * b
        return Polynomial(result)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        """다항식 동등 비교 (끝의 0 을 잘라내지 않는다)."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self):
        return hash(self._coeffs)

    def __len__(self):
        """계수 개수 반환 (차수 + 1)."""
        return len(self._coeffs)

    def __iter__(self):
        return iter(self._coeffs)

    def __getitem__(self, index):
        return self._coeffs[index]

    def __repr__(self):
        terms = []
        for i, c in enumerate(self._coeffs):
            if c == ZERO:
                continue
            if i == 0:
                terms.append(str(c))
            elif i == 1:
                terms.append(f"{c}*x")
            else:
                terms.append(f"{c}*x^{i}")
        return "Poly(" + " + ".join(terms) + ")" if terms else "Poly(0)"

    def scale(self, scalar):
        """스칼라곱: scalar · p(x)."""
        return self * _coeff(scalar)

    @classmethod
    def zero(cls):
        """영 다항식 p(x) = 0."""
        return cls([ZERO])

    @classmethod
    def one(cls):
        """상수 다항식 p(x) = 1."""
        return cls([ONE])

    @classmethod
    def constant(cls, value):
        """상수 다항식 p(x) = value."""
        return cls([value])

    @classmethod
    def linear_root(cls, root):
        """일차 인수 (x - root)."""
        return cls([-_coeff(root), ONE])


# ─────────────────────────────────────────────────────────────────────
# 함수형 인터페이스
# ─────────────────────────────────────────────────────────────────────

def add(a, b):
    return a + b


def sub(a, b):
    return a - b


def mul(a, b):
    return a * b


def equal(a, b):
    return a == b


def degree(p):
    return p.degree


# ─────────────────────────────────────────────────────────────────────
# 다항식 나눗셈 (Polynomial Long Division)
# ─────────────────────────────────────────────────────────────────────

def poly_div(a, b):
    """다항식 나눗셈: a(x) = b(x) · q(x) + r(x).

    긴 나눗셈(long division) 으로 몫 q(x) 와 나머지 r(x) 를 정확히 계산한다.
    양쪽 피연산자는 끝의 0 을 잘라낸 뒤 나눈다.

    Args:
        a: 피제수 다항식
        b: 제수 다항식

    Returns:
        tuple: (몫 Polynomial, 나머지 Polynomial). 나머지는 trimmed 형태.

    Raises:
        ValueError: 제수가 영 다항식인 경우

    예시:
        >>> a = Polynomial([-1, 0, 1])  # x² - 1
        >>> b = Polynomial([-1, 1])     # x - 1
        >>> q, r = poly_div(a, b)       # q = x + 1, r = 0
    """
    if b.is_zero():
        raise ValueError("0으로 나눌 수 없습니다")

    divisor = b.trimmed().coeffs
    remainder = list(a.trimmed().coeffs)
    deg_b = len(divisor) - 1
    deg_a = len(remainder) - 1

    if deg_a < deg_b:
        return Polynomial.zero(), Polynomial(remainder)

    quotient = [ZERO] * (deg_a - deg_b + 1)
    lead_inv = ONE / divisor[-1]

    for i in range(deg_a - deg_b, -1, -1):
        coeff = remainder[i + deg_b] * lead_inv
        quotient[i] = coeff
        if coeff == ZERO:
            continue
        for j in range(deg_b + 1):
            remainder[i + j] -= coeff * divisor[j]

    return Polynomial(quotient), Polynomial(remainder[:deg_b] or [ZERO]).trimmed()
