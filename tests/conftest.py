import pytest

from src.constraint_naming.identifiers import Identifier


@pytest.fixture
def person_table() -> Identifier:
    return Identifier("person")


@pytest.fixture
def company_table() -> Identifier:
    return Identifier("company")


@pytest.fixture
def person_columns() -> list[Identifier]:
    # Deliberately not in alphabetical order
    return [Identifier("name"), Identifier("age")]
