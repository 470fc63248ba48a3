import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import selection_list
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from selection_list.core.models.selection_list import SelectionList  # noqa: E402


# Common test fixtures
@pytest.fixture
def scenario_list() -> SelectionList[int]:
    """The 2, 3, 4 list with 2 selected."""
    return SelectionList.from_list(2, [3, 4])


@pytest.fixture
def middle_list() -> SelectionList[str]:
    """Five letters with "c" (index 2) selected."""
    return SelectionList(before=("b", "a"), selected="c", after=("d", "e"))


@pytest.fixture
def single_list() -> SelectionList[str]:
    """One-element list."""
    return SelectionList.from_list("only")


@pytest.fixture
def all_states(middle_list) -> list[SelectionList[str]]:
    """Every selection position of the five-letter list."""
    return [middle_list.goto(i) for i in range(middle_list.length)]
