import pytest

SOURCE_1 = """let two = 2 - 0
  print(1 * two)   // TADA 🥑 
  two = sqrt 101.3 //"""

SOURCE_2 = """let one = 5 % 4 
  print(-3 ** 5 % 2 == one) // testing precedence not accuracy lol
  print(5 * 4 / 3 % 2 * 1)
  print(5 % 4 % 3 % 2 % 1)
  print(-5 ** (-4 ** 3 ** 2 ** 1))"""


@pytest.fixture  # type: ignore[misc]
def source_1() -> str:
    return SOURCE_1


@pytest.fixture  # type: ignore[misc]
def source_2() -> str:
    return SOURCE_2
