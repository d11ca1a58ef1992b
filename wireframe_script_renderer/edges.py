#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/edges.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Matrix


class EdgeMatrix(Matrix):
    """
    4 x N homogeneous point matrix.  Each column is a point (x, y, z, 1);
    columns 2k and 2k+1 are the endpoints of edge k.  There are no edge
    objects, only this pairing convention, so points must be added in pairs
    for anything meant to be drawn as a line.
    """
    __slots__ = ()

    def __init__(self):
        super().__init__([[], [], [], []])

    @classmethod
    def from_points(cls, points):
        """Build an edge matrix from an iterable of (x, y, z) tuples."""
        edges = cls()
        for x, y, z in points:
            edges.add_point(x, y, z)
        return edges

    def add_point(self, x, y, z):
        self.m[0].append(float(x))
        self.m[1].append(float(y))
        self.m[2].append(float(z))
        self.m[3].append(1.0)

    def add_edge(self, x0, y0, z0, x1, y1, z1):
        self.add_point(x0, y0, z0)
        self.add_point(x1, y1, z1)

    @property
    def point_count(self) -> int:
        return self.cols

    @property
    def edge_count(self) -> int:
        return self.cols // 2

    def points(self):
        """Yield every column as a fresh [x, y, z, w] list."""
        for j in range(self.cols):
            yield self.column(j)

    def edge_pairs(self):
        """Yield (start, end) columns for each edge.  A trailing unpaired point is skipped."""
        for j in range(0, self.cols - 1, 2):
            yield self.column(j), self.column(j + 1)

    def clear(self):
        self.m = [[], [], [], []]
