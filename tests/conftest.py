import pytest

from treezipper import list_zipper


@pytest.fixture
def tree():
    return [1, [], 2, [3, 4, [5, 6], [7]], 8]


@pytest.fixture
def loc(tree):
    return list_zipper(tree)
