"""
zkqap 예외 정의
================

잘못된 입력은 모두 생성/변환 시점에 아래 예외로 보고된다.
기존 코드와의 호환을 위해 각 예외는 내장 ValueError / ZeroDivisionError 를 함께 상속한다.
"""


class ZkqapError(Exception):
    """zkqap 예외의 공통 기반 클래스."""


class ZeroDenominatorError(ZkqapError, ZeroDivisionError):
    """분모가 0인 유리수 생성."""


class ShapeMismatchError(ZkqapError, ValueError):
    """A, B, C 행렬 (또는 witness) 의 크기가 맞지 않음."""


class EmptyCircuitError(ZkqapError, ValueError):
    """제약(행)이나 배선(열)이 하나도 없는 회로."""


class UnrepresentableError(ZkqapError, ValueError):
    """정수/필드 원소로 옮길 수 없는 값."""


class UnsatisfiedWitnessError(ZkqapError, ValueError):
    """A(x)·B(x) - C(x) 가 Z(x) 로 나누어 떨어지지 않음."""
