#
# PROJECT: ascii-globe
# MODULE: ascii_globe/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented


class Mat3:
    """3x3 rotation block, [row][col] storage."""
    __slots__ = ('m',)

    def __init__(self, data):
        self.m = [[float(v) for v in row] for row in data]

    def mul_vec3(self, v: Vec3) -> Vec3:
        m = self.m
        return Vec3(
            m[0][0]*v.x + m[0][1]*v.y + m[0][2]*v.z,
            m[1][0]*v.x + m[1][1]*v.y + m[1][2]*v.z,
            m[2][0]*v.x + m[2][1]*v.y + m[2][2]*v.z,
        )


class Mat4:
    """4x4 matrix, [row][col] storage.

    Column 3 holds the translation, so mul_vec3() treats its argument as a
    point (w = 1).  flatten() gives the column-major 16-list in which the
    translation lands at indices 12..14.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data:
            self.m = [[float(v) for v in row] for row in data]
        else:
            self.m = [[0.0]*4 for _ in range(4)]

    def __repr__(self):
        rows = ", ".join("[" + ", ".join(f"{v:.3f}" for v in row) + "]" for row in self.m)
        return f"Mat4([{rows}])"

    @classmethod
    def identity(cls) -> 'Mat4':
        res = cls()
        for i in range(4):
            res.m[i][i] = 1.0
        return res

    @classmethod
    def from_flat(cls, values) -> 'Mat4':
        """Build from a column-major 16-sequence (inverse of flatten())."""
        values = list(values)
        if len(values) != 16:
            raise ValueError(f"Mat4 needs 16 values, got {len(values)}")
        return cls([[values[c * 4 + r] for c in range(4)] for r in range(4)])

    def flatten(self) -> list:
        return [self.m[r][c] for c in range(4) for r in range(4)]

    def basis(self) -> Mat3:
        """Upper-left 3x3 block (rotation part, no translation)."""
        return Mat3([row[:3] for row in self.m[:3]])

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            res = Mat4()
            for r in range(4):
                for c in range(4):
                    val = 0.0
                    for k in range(4):
                        val += self.m[r][k] * other.m[k][c]
                    res.m[r][c] = val
            return res
        return NotImplemented

    def _minors(self):
        # 2x2 sub-determinants of the top two rows (s) and bottom two rows (c)
        (a00, a01, a02, a03), (a10, a11, a12, a13), \
            (a20, a21, a22, a23), (a30, a31, a32, a33) = self.m
        s = (a00*a11 - a10*a01, a00*a12 - a10*a02, a00*a13 - a10*a03,
             a01*a12 - a11*a02, a01*a13 - a11*a03, a02*a13 - a12*a03)
        c = (a20*a31 - a30*a21, a20*a32 - a30*a22, a20*a33 - a30*a23,
             a21*a32 - a31*a22, a21*a33 - a31*a23, a22*a33 - a32*a23)
        return s, c

    def determinant(self) -> float:
        s, c = self._minors()
        return (s[0]*c[5] - s[1]*c[4] + s[2]*c[3]
                + s[3]*c[2] - s[4]*c[1] + s[5]*c[0])

    def inverse(self) -> 'Mat4':
        """
        Closed-form inverse: adjugate (transposed cofactors) over the
        determinant, both expanded from the same twelve 2x2 minors.

        Raises ValueError for a singular matrix.
        """
        (a00, a01, a02, a03), (a10, a11, a12, a13), \
            (a20, a21, a22, a23), (a30, a31, a32, a33) = self.m
        s, c = self._minors()
        det = (s[0]*c[5] - s[1]*c[4] + s[2]*c[3]
               + s[3]*c[2] - s[4]*c[1] + s[5]*c[0])
        if det == 0.0 or math.isnan(det):
            raise ValueError("Mat4 is singular and has no inverse")
        inv_det = 1.0 / det

        adj = [
            [ a11*c[5] - a12*c[4] + a13*c[3],
             -a01*c[5] + a02*c[4] - a03*c[3],
              a31*s[5] - a32*s[4] + a33*s[3],
             -a21*s[5] + a22*s[4] - a23*s[3]],
            [-a10*c[5] + a12*c[2] - a13*c[1],
              a00*c[5] - a02*c[2] + a03*c[1],
             -a30*s[5] + a32*s[2] - a33*s[1],
              a20*s[5] - a22*s[2] + a23*s[1]],
            [ a10*c[4] - a11*c[2] + a13*c[0],
             -a00*c[4] + a01*c[2] - a03*c[0],
              a30*s[4] - a31*s[2] + a33*s[0],
             -a20*s[4] + a21*s[2] - a23*s[0]],
            [-a10*c[3] + a11*c[1] - a12*c[0],
              a00*c[3] - a01*c[1] + a02*c[0],
             -a30*s[3] + a31*s[1] - a32*s[0],
              a20*s[3] - a21*s[1] + a22*s[0]],
        ]
        return Mat4([[v * inv_det for v in row] for row in adj])
