# reads whitespace separated edge lists like the SNAP facebook_combined.txt dump.
# a line counts as an edge if at least two of its tokens are non-negative integers,
# the first two such tokens are (u, v). everything else is skipped silently.
#
# REMINDER - NO GRAPH LOGIC IN HERE, THIS ONLY TURNS LINES INTO PAIRS

import logging

logger = logging.getLogger(__name__)


def _as_node_id(token):

    # "12" and "+12" yes, "+" / "-3" / "1.5" / "abc" no
    digits = token[1:] if token.startswith('+') else token
    if digits.isascii() and digits.isdigit():
        return int(digits)
    return None


def parse_edge_line(line):

    ids = []
    for token in line.split():
        node = _as_node_id(token)
        if node is not None:
            ids.append(node)
            if len(ids) == 2:
                return ids[0], ids[1]
    return None


class EdgeListLoader:

    def __init__(self, filepath: str):

        self.filepath = filepath
        self.edges = []
        self.nodes = set()
        self.skipped_lines = 0

    def load(self):

        # missing / unreadable file -> OSError, non utf-8 bytes -> UnicodeDecodeError, both go straight up
        self.edges = []
        self.nodes = set()
        self.skipped_lines = 0

        with open(self.filepath, 'r', encoding='utf-8') as f:

            for line in f:
                edge = parse_edge_line(line)
                if edge is None:
                    self.skipped_lines += 1
                    continue

                self.edges.append(edge)
                self.nodes.update(edge)

        logger.info("loaded %d edges (%d nodes) from %s, skipped %d lines",
                    len(self.edges), len(self.nodes), self.filepath, self.skipped_lines)

        return self.edges
