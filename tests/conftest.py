import pytest

FULL_REPORT = """
Sales (
    3010..3010 => Webshop
    3010..4000 => Other sales
) => Sum sales

(
    4000..5000 => Material
) => Sum material

(
    5000..5000 => Direct labor
    5010..6000 => Other labor costs
) => Sum labor costs

Other costs (
    6000..6010 => Leasing
    (
        6020..6100 => Office supplies
        6100..6200 => Consumables
    ) => Sum miscellaneous costs
) => Sum other costs
"""


@pytest.fixture
def full_report() -> str:
    return FULL_REPORT


@pytest.fixture(params=["recursive", "iterative"])
def strategy(request) -> str:
    return request.param
