import sys
import os
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from zkqap.r1cs import R1CS


# ── x² - x - 42 = 0 (x = 7) ──
# wires: [one, x, x², -x, x² - x, out]
QUADRATIC_A = [[0, 1, 0, 0, 0, 0],
               [0, 1, 0, 0, 0, 0],
               [0, 0, 1, 1, 0, 0],
               [-42, 0, 0, 0, 1, 0]]
QUADRATIC_B = [[0, 1, 0, 0, 0, 0],
               [-1, 0, 0, 0, 0, 0],
               [1, 0, 0, 0, 0, 0],
               [1, 0, 0, 0, 0, 0]]
QUADRATIC_C = [[0, 0, 1, 0, 0, 0],
               [0, 0, 0, 1, 0, 0],
               [0, 0, 0, 0, 1, 0],
               [0, 0, 0, 0, 0, 1]]
QUADRATIC_WITNESS = [1, 7, 49, -7, 42, 0]

# ── qeval(x) = x³ + x + 5 = 35 (x = 3) ──
# wires: [one, x, out, sym1, y, sym2]
QEVAL_A = [[0, 1, 0, 0, 0, 0],
           [0, 0, 0, 1, 0, 0],
           [0, 1, 0, 0, 1, 0],
           [5, 0, 0, 0, 0, 1]]
QEVAL_B = [[0, 1, 0, 0, 0, 0],
           [0, 1, 0, 0, 0, 0],
           [1, 0, 0, 0, 0, 0],
           [1, 0, 0, 0, 0, 0]]
QEVAL_C = [[0, 0, 0, 1, 0, 0],
           [0, 0, 0, 0, 1, 0],
           [0, 0, 0, 0, 0, 1],
           [0, 0, 1, 0, 0, 0]]
QEVAL_WITNESS = [1, 3, 35, 9, 27, 30]

# 필드 평가용 임의의 점
TOXIC_X_VAL = 3721


@pytest.fixture(scope="session")
def quadratic_r1cs():
    return R1CS(QUADRATIC_A, QUADRATIC_B, QUADRATIC_C)


@pytest.fixture(scope="session")
def quadratic_qap(quadratic_r1cs):
    return quadratic_r1cs.to_qap()


@pytest.fixture(scope="session")
def qeval_r1cs():
    return R1CS(QEVAL_A, QEVAL_B, QEVAL_C)


@pytest.fixture(scope="session")
def qeval_qap(qeval_r1cs):
    return qeval_r1cs.to_qap()


@pytest.fixture(params=["quadratic", "qeval"])
def circuit(request):
    """(R1CS, QAP, witness) 세트."""
    if request.param == "quadratic":
        r1cs = R1CS(QUADRATIC_A, QUADRATIC_B, QUADRATIC_C)
        witness = QUADRATIC_WITNESS
    else:
        r1cs = R1CS(QEVAL_A, QEVAL_B, QEVAL_C)
        witness = QEVAL_WITNESS
    return r1cs, r1cs.to_qap(), witness
