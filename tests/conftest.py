import pytest

from netstats.graph_builder import build_graph


@pytest.fixture
def triangle():
    return build_graph([(1, 2), (2, 3), (1, 3)])


@pytest.fixture
def square():
    # 4-cycle, every node has degree 2
    return build_graph([(1, 2), (2, 3), (3, 4), (4, 1)])


@pytest.fixture
def star():
    return build_graph([(0, 1), (0, 2), (0, 3)])


@pytest.fixture
def path4():
    return build_graph([(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def two_components():
    # triangle + a separate edge
    return build_graph([(1, 2), (2, 3), (1, 3), (4, 5)])


@pytest.fixture
def lonely():
    # one node, no edges
    return build_graph([], nodes=[7])


@pytest.fixture
def edge_file(tmp_path):
    path = tmp_path / 'edges.txt'
    path.write_text("1 2\n2 3\n1 3\n3 4\n")
    return path
