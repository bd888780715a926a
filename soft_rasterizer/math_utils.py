#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/math_utils.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 3.1
# LOG_REF: 2026-10-18
#


class Vec2:
    """Immutable 2-component integer point (screen space)."""
    __slots__ = ('x', 'y')

    def __init__(self, x: int, y: int):
        object.__setattr__(self, 'x', int(x))
        object.__setattr__(self, 'y', int(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vec2 is immutable")

    def __repr__(self):
        return f"Vec2({self.x}, {self.y})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        raise IndexError("Vec2 index out of range")

    def __len__(self):
        return 2

    def __eq__(self, other):
        if isinstance(other, Vec2):
            return self.x == other.x and self.y == other.y
        if isinstance(other, tuple) and len(other) == 2:
            return (self.x, self.y) == other
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y))

    def __add__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    def transposed(self) -> 'Vec2':
        """Swap the x and y components."""
        return Vec2(self.y, self.x)

    def cross(self, other) -> int:
        """Z component of the 2D cross product."""
        return self.x * other.y - self.y * other.x

    @classmethod
    def of(cls, point) -> 'Vec2':
        """Coerce an (x, y) pair or a Vec2 into a Vec2."""
        if isinstance(point, Vec2):
            return point
        x, y = point
        return cls(x, y)


class Vec3:
    """Immutable 3-component float point (model space)."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

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

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)
