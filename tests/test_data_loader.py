import pytest

from netstats.data_loader import EdgeListLoader, parse_edge_line
from netstats.sampling import sample_edges


@pytest.mark.parametrize('line, expected', [
    ("0 1", (0, 1)),
    ("0 1\n", (0, 1)),
    ("  12\t7  ", (12, 7)),
    ("7 8 9", (7, 8)),
    ("a 3 b 4", (3, 4)),
    ("-1 2 5", (2, 5)),
    ("1.5 2 3", (2, 3)),
    ("5", None),
    ("+3 4", (3, 4)),
    ("+ 1 2", (1, 2)),
    ("++3 1 2", (1, 2)),
    ("-1 2", None),
    ("# comment line", None),
    ("", None),
])
def test_parse_edge_line(line, expected):
    assert parse_edge_line(line) == expected


def test_loader_reads_edges_and_counts_skips(tmp_path):
    path = tmp_path / 'edges.txt'
    path.write_text("# facebook ego network\n0 1\n0 2\n\nnot an edge\n2 1 extra\n3 3\n")

    loader = EdgeListLoader(str(path))
    edges = loader.load()

    # self loops are the graph builder's problem, the loader keeps them
    assert edges == [(0, 1), (0, 2), (2, 1), (3, 3)]
    assert loader.nodes == {0, 1, 2, 3}
    assert loader.skipped_lines == 3


def test_loader_can_reload(edge_file):
    loader = EdgeListLoader(edge_file)
    first = loader.load()
    assert loader.load() == first
    assert len(loader.edges) == 4


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        EdgeListLoader(tmp_path / 'nope.txt').load()


def test_sample_edges_is_seeded_and_keeps_order():
    edges = [(i, i + 1) for i in range(100)]

    a = sample_edges(edges, 10, seed=1)
    b = sample_edges(edges, 10, seed=1)

    assert a == b
    assert len(a) == 10
    assert a == sorted(a)
    assert set(a) <= set(edges)


def test_sample_edges_bigger_than_input():
    edges = [(1, 2), (2, 3)]
    assert sample_edges(edges, 5) == edges
    assert sample_edges(edges, 0) == []


def test_sample_edges_rejects_bad_size():
    with pytest.raises(ValueError):
        sample_edges([(1, 2)], -1)
