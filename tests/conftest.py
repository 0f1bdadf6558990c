import pytest

from aspectfit.controller import CalculatorView, ResolutionCalculator
from aspectfit.settings.user import UserSettings

BASE_WIDTH = 1216
BASE_HEIGHT = 896
BASE_PIXELS = BASE_WIDTH * BASE_HEIGHT  # 1,089,536


@pytest.fixture
def settings() -> UserSettings:
    return UserSettings()


@pytest.fixture
def calculator(settings: UserSettings) -> ResolutionCalculator:
    return ResolutionCalculator(settings)


@pytest.fixture
def widescreen_view(calculator: ResolutionCalculator) -> CalculatorView:
    return calculator.update_ratio(16 / 9)


@pytest.fixture
def invalid_view(calculator: ResolutionCalculator) -> CalculatorView:
    return calculator.update_base("abc", "896")
